"""
Configuration management for fitutils.

Settings are read from environment variables prefixed with ``FITUTILS_`` and
from a ``.env`` file in the working directory, with fallbacks to the defaults
the command-line tools have always used. Command-line options take
precedence over anything configured here.
"""

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .const import (
    DEFAULT_FIT_SUMMARY_FILE,
    DEFAULT_GPX_SUMMARY_FILE,
    DEFAULT_TCX_SUMMARY_FILE,
)

load_dotenv()


class Settings(BaseSettings):
    """Runtime settings shared by all the tools."""

    model_config = SettingsConfigDict(env_prefix="FITUTILS_", extra="ignore")

    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None)
    log_format: str = Field(default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")

    fit_summary_file: str = Field(default=DEFAULT_FIT_SUMMARY_FILE)
    gpx_summary_file: str = Field(default=DEFAULT_GPX_SUMMARY_FILE)
    tcx_summary_file: str = Field(default=DEFAULT_TCX_SUMMARY_FILE)


@lru_cache()
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
