"""Configuration models.

This module provides the Pydantic models for each configuration section
and the enums they use.
"""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from superheader.templating import DEFAULT_PRIMARY_KEY_FIELD


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty logs to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    file: str = ""


class DirectusConfig(BaseModel):
    """Directus connection settings used by the record fetcher.

    Attributes:
        url: Base URL of the Directus instance.
        token: Static access token sent as a bearer token (empty for public).
        timeout: Request timeout in seconds.
        retries: Attempts for connection errors and timeouts.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="ignore", coerce_numbers_to_str=True
    )

    url: str = "http://localhost:8055"
    token: str = Field(default="", repr=False)
    timeout: float = Field(default=10.0, gt=0)
    retries: int = Field(default=3, ge=1)


class TemplatesConfig(BaseModel):
    """Template resolution settings.

    Attributes:
        primary_key_field: Field substituted when a placeholder resolves to
            a related record.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="ignore", coerce_numbers_to_str=True
    )

    primary_key_field: str = Field(default=DEFAULT_PRIMARY_KEY_FIELD, min_length=1)
