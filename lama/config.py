"""
lama configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

import json
import sys
from pathlib import Path
from typing import Annotated, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_LOG_CONFIG_PATH = str(Path(__file__).with_name("logging.yml"))


class LamaConfig(BaseSettings):
    """
    Configuration management for the event/context conversion layer.
    """

    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_CONFIG_PATH: str = Field(
        default=DEFAULT_LOG_CONFIG_PATH, description="YAML logging config path"
    )

    # Responses whose content-type matches one of these patterns are base64 encoded.
    # Empty means every response body is treated as text.
    BINARY_MIME_TYPES: Annotated[List[str], NoDecode] = Field(
        default_factory=list, description="Binary MIME type patterns (e.g. image/*)"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    @field_validator("BINARY_MIME_TYPES", mode="before")
    @classmethod
    def _split_mime_types(cls, value):
        # Accept a JSON list or a comma-separated string.
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return []
            if value.startswith("["):
                return json.loads(value)
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


# Load config as a singleton.
# pydantic-settings reads environment variables during instantiation.
try:
    config = LamaConfig()
except Exception as e:
    sys.stderr.write(f"Failed to load configuration: {e}\n")
    raise
