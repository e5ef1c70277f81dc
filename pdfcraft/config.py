"""Configuration management for pdfcraft.

This module handles environment variable loading and provides type-safe
configuration access using Pydantic models. Only package-wide defaults
live here; per-document options are passed to the builder directly.
"""

import logging
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

EngineName = Literal["weasyprint", "fpdf"]


class Config(BaseSettings):
    """Package configuration loaded from environment variables and .env file.

    Values are read from `PDFCRAFT_`-prefixed environment variables, with a
    `.env` file in the working directory as an additional source.

    Attributes:
        default_engine: Engine used when the builder is created without one
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        default_font: Body font applied by the WeasyPrint engine
        creator: Creator string written into documents by the fpdf engine
    """

    model_config = SettingsConfigDict(
        env_prefix="PDFCRAFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_engine: EngineName = Field(
        default="weasyprint",
        description="Engine selected when none is given to the builder",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    default_font: str = Field(
        default="DejaVu Sans",
        description="Default body font for the WeasyPrint engine",
        min_length=1,
    )

    creator: str = Field(
        default="pdfcraft",
        description="Creator metadata written by the fpdf engine",
        min_length=1,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level is one of the allowed values.

        Args:
            value: Log level string to validate

        Returns:
            Uppercase log level string

        Raises:
            ValueError: If log level is not one of the allowed values
        """
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in allowed_levels:
            raise ValueError(
                f"log_level must be one of {allowed_levels}, got {value}"
            )
        return upper_value


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance.

    Loads configuration on first call and returns the same instance on
    subsequent calls.

    Returns:
        Config instance with loaded configuration values

    Raises:
        ValueError: If configuration values are invalid
    """
    logger = logging.getLogger(__name__)

    global _config
    if _config is None:
        _config = Config()
        logger.debug(
            f"Configuration loaded: "
            f"DEFAULT_ENGINE={_config.default_engine}, "
            f"LOG_LEVEL={_config.log_level}"
        )
    return _config


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when configuration changes at runtime.

    Returns:
        New Config instance with reloaded configuration values
    """
    global _config
    _config = Config()
    return _config
