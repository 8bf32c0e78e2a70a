from .config import Settings, get_settings, reset_settings
from .logger import setup_logger

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "setup_logger",
]
