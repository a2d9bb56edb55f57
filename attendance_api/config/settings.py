"""
Configuration module for the Student Attendance API.
Handles environment variables and application settings.
"""
import logging
import os
from typing import Optional
from dotenv import load_dotenv

# Load .env from current working directory
load_dotenv()

DEFAULT_MONGO_URI = "mongodb://127.0.0.1:27017/attendance_db"
DEFAULT_DATABASE = "attendance_db"


class Config:
    """Application configuration class."""

    # Flask Configuration
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    STATIC_FOLDER: str = os.getenv("STATIC_FOLDER", "public")

    # MongoDB Configuration
    MONGO_URI: str = os.getenv("MONGO_URI", DEFAULT_MONGO_URI)
    # Falls back to the database named in MONGO_URI, then DEFAULT_DATABASE
    MONGO_DATABASE: Optional[str] = os.getenv("MONGO_DATABASE")
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = int(os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000"))
    MONGO_MAX_POOL_SIZE: int = int(os.getenv("MONGO_MAX_POOL_SIZE", "50"))

    # Logging Configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "")

    @staticmethod
    def validate(settings=None) -> None:
        """Validate configuration settings.

        Args:
            settings: Mapping to validate (e.g. ``app.config``). Defaults to
                the class attributes.
        """
        if settings is None:
            settings = {key: getattr(Config, key) for key in dir(Config) if key.isupper()}

        if not settings.get("MONGO_URI"):
            raise ValueError("Missing required environment variable: MONGO_URI")

        if int(settings.get("PORT", 0)) <= 0:
            raise ValueError("PORT must be a positive integer")

        if int(settings.get("MONGO_MAX_POOL_SIZE", 0)) < 1:
            raise ValueError("MONGO_MAX_POOL_SIZE must be at least 1")

        if int(settings.get("MONGO_SERVER_SELECTION_TIMEOUT_MS", 0)) < 1:
            raise ValueError("MONGO_SERVER_SELECTION_TIMEOUT_MS must be at least 1")

        log_level = str(settings.get("LOG_LEVEL", "INFO")).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {log_level}")
