# pyright: reportExplicitAny=false, reportAny=false
"""Configuration container with typed access.

This module provides the main Config class that serves as the primary
interface for accessing SuperHeader configuration values.
"""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from superheader.exceptions import ConfigValidationError

from ._loader import deep_merge, parse_env_vars, read_toml_file
from ._models import DirectusConfig, LoggingConfig, TemplatesConfig

CONFIG_FILE_NAME = "superheader.toml"


class ConfigSourceName(StrEnum):
    """Configuration source names in precedence order.

    Values are ordered from highest precedence (ENV) to lowest (DEFAULT).
    """

    ENV = "env"
    FILE = "file"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class ConfigSource:
    """Represents a configuration source.

    Attributes:
        name: The source type identifier.
        path: Path to the config file, or None for non-file sources.
        values: Configuration values from this source.
    """

    name: ConfigSourceName
    path: Path | None
    values: dict[str, Any]


def _validation_error(
    error: ValidationError, data: dict[str, Any], source: str | None
) -> ConfigValidationError:
    first = error.errors()[0]
    key = ".".join(str(part) for part in first["loc"])
    msg = f"Invalid configuration value for '{key}': {first['msg']}"
    if source:
        msg = f"{msg} (in {source})"
    return ConfigValidationError(
        msg, key=key, value=first.get("input", data), source=source
    )


class Config(BaseModel):
    """Configuration container with typed access.

    Use the factory methods rather than the constructor so values are
    validated and their sources recorded.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    directus: DirectusConfig = Field(default_factory=DirectusConfig)
    templates: TemplatesConfig = Field(default_factory=TemplatesConfig)

    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())

    @classmethod
    def _build(
        cls,
        data: dict[str, Any],
        sources: tuple[ConfigSource, ...],
        *,
        source: str | None = None,
    ) -> Self:
        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise _validation_error(e, data, source) from e
        config._sources = sources
        return config

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create configuration from a dictionary.

        Args:
            data: Dictionary of configuration values.

        Returns:
            Configuration object from the dictionary.

        Raises:
            ConfigValidationError: If validation fails.
        """
        return cls._build(data, ())

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load configuration from a specific file.

        Args:
            path: Path to the TOML config file.

        Returns:
            Configuration object from the specified file only.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
            ConfigValidationError: If validation fails.
        """
        data = read_toml_file(path)
        source = ConfigSource(name=ConfigSourceName.FILE, path=path, values=data)
        return cls._build(data, (source,), source=str(path))

    @classmethod
    def load(
        cls,
        *,
        config_path: Path | None = None,
        search_dir: Path | None = None,
        include_env: bool = True,
    ) -> Self:
        """Load merged configuration from all sources.

        Sources are merged in precedence order: defaults, then the config
        file, then ``SUPERHEADER_*`` environment variables. The config file
        is ``config_path`` if given, otherwise ``superheader.toml`` in
        ``search_dir`` (the working directory by default) when present.

        Args:
            config_path: Explicit path to a config file. Must exist.
            search_dir: Directory searched for ``superheader.toml``.
            include_env: Include environment variables as a source.

        Returns:
            Merged configuration object.

        Raises:
            FileNotFoundError: If config_path does not exist.
            ConfigLoadError: If the config file cannot be parsed.
            ConfigValidationError: If merged config fails validation.
        """
        path = config_path
        if path is None:
            candidate = (search_dir or Path.cwd()) / CONFIG_FILE_NAME
            path = candidate if candidate.is_file() else None

        merged: dict[str, Any] = {}
        sources: list[ConfigSource] = []
        if path is not None:
            file_values = read_toml_file(path)
            sources.append(
                ConfigSource(name=ConfigSourceName.FILE, path=path, values=file_values)
            )
            merged = deep_merge(merged, file_values)
        if include_env:
            env_values = parse_env_vars()
            if env_values:
                sources.append(
                    ConfigSource(name=ConfigSourceName.ENV, path=None, values=env_values)
                )
                merged = deep_merge(merged, env_values)

        # Highest precedence first, matching ConfigSourceName ordering
        return cls._build(merged, tuple(reversed(sources)))

    @property
    def sources(self) -> list[ConfigSource]:
        """Return the sources that contributed to this configuration."""
        return list(self._sources)
