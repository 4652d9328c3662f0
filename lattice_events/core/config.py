"""
Configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_CONFIG_PATH = str(Path(__file__).resolve().parent.parent / "logging.yml")


class LatticeConfig(BaseSettings):
    """
    Settings for Lambda functions behind VPC Lattice.
    """

    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_CONFIG_PATH: str = Field(
        default=DEFAULT_LOG_CONFIG_PATH, description="YAML logging configuration path"
    )
    SERVICE_NAME: str = Field(
        default="vpc-lattice-function", description="Service name added to log lines"
    )
    BAD_REQUEST_ON_DECODE_ERROR: bool = Field(
        default=False,
        description="Answer undecodable events with a 400 response instead of raising",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )


# Load config as a singleton.
# pydantic-settings reads environment variables during instantiation.
try:
    config = LatticeConfig()
except Exception as e:
    sys.stderr.write(f"Failed to load configuration: {e}\n")
    raise
