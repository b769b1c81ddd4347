"""
Library settings and logging configuration.

This module provides centralized configuration management using Pydantic BaseSettings
for environment variable handling and type validation.
"""
import os
import logging
import logging.config
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "egypt_national_id"


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    All settings can be overridden via environment variables with EGYPT_NID_ prefix.
    """

    # Demographics
    adult_age: int = Field(
        default=18,
        ge=0,
        description="Age of legal majority used by is_adult"
    )

    # Rendering
    mask_char: str = Field(
        default="*",
        min_length=1,
        max_length=1,
        description="Character that replaces serial digits in masked output"
    )
    language: Literal["ar", "en"] = Field(
        default="ar",
        description="Default language for display names and detailed output"
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (None for stdout only)"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is a valid logging level"""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {valid_levels}")
        return v.upper()

    @field_validator('language', mode='before')
    @classmethod
    def normalize_language(cls, v):
        """Accept language codes in any case"""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    model_config = SettingsConfigDict(
        env_prefix="EGYPT_NID_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get library settings instance"""
    return Settings()


def configure_logging(settings: Optional[Settings] = None):
    """
    Configure package logging based on settings.

    Only the package logger is configured; the root logger and other
    libraries are left alone.
    """
    settings = settings or get_settings()

    if settings.log_file:
        log_dir = os.path.dirname(settings.log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": settings.log_format,
                "datefmt": "%Y-%m-%d %H:%M:%S"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.log_level,
                "formatter": "standard",
                "stream": "ext://sys.stdout"
            }
        },
        "loggers": {
            PACKAGE_LOGGER: {
                "level": settings.log_level,
                "handlers": ["console"],
                "propagate": False
            }
        }
    }

    if settings.log_file:
        logging_config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": settings.log_level,
            "formatter": "standard",
            "filename": settings.log_file,
            "maxBytes": 10 * 1024 * 1024,  # 10MB
            "backupCount": 5
        }
        logging_config["loggers"][PACKAGE_LOGGER]["handlers"].append("file")

    logging.config.dictConfig(logging_config)

    logger.info(f"Logging configured - Level: {settings.log_level}, File: {settings.log_file}")
