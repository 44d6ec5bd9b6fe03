"""SuperHeader exceptions."""

from pathlib import Path
from typing import Any


class SuperHeaderError(Exception):
    """Base exception for SuperHeader errors."""


class TemplateInputError(SuperHeaderError, TypeError):
    """Raised when templates are missing or are not strings.

    This signals caller misuse rather than missing data, so it is never
    absorbed by the resolver.
    """


class RecordFetchError(SuperHeaderError):
    """Raised when a record cannot be fetched from the data source.

    Attributes:
        collection: The collection that was queried.
        record_id: The primary key of the requested record.
        status_code: HTTP status code, if the failure came from a response.
    """

    def __init__(
        self,
        message: str,
        *,
        collection: str,
        record_id: str,
        status_code: int | None = None,
    ) -> None:
        """Initialize with error message and request context.

        Args:
            message: Human-readable error message.
            collection: The collection that was queried.
            record_id: The primary key of the requested record.
            status_code: HTTP status code, if any.
        """
        super().__init__(message)
        self.collection: str = collection
        self.record_id: str = record_id
        self.status_code: int | None = status_code


class HeaderOptionsError(SuperHeaderError, ValueError):
    """Raised when header options cannot be loaded or are invalid."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and optional file context."""
        super().__init__(message)
        self.path: Path | None = path


class ConfigError(SuperHeaderError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.source: str | None = source
