# Standard library imports
import logging
from typing import Optional

# Local application imports
from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logger(level: Optional[str] = None) -> None:
    """
    Configure root logging for the process.
    
    Args:
        level: Log level name; defaults to the LOG_LEVEL setting
    """
    resolved = (level or get_settings().log_level).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT, force=True)
    logging.getLogger(__name__).debug(f"Logging configured at {resolved}")
