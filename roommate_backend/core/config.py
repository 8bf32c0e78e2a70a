# Standard library imports
import os
from typing import Final, Optional

# External package imports
from dotenv import load_dotenv


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Database Configuration
        self.database_url: Final[str] = os.getenv(
            "DATABASE_URL",
            "sqlite+aiosqlite:///./roommate.db"
        )
        self.database_echo: Final[bool] = _env_flag("DATABASE_ECHO")
        
        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Values from a local .env file are loaded on first access; variables
    already present in the environment take precedence.
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        load_dotenv()
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
