"""SuperHeader configuration.

Configuration is read from built-in defaults, a ``superheader.toml`` file and
``SUPERHEADER_<SECTION>__<KEY>`` environment variables, in increasing order
of precedence.

Example:
    from superheader.config import Config

    config = Config.load()
    print(config.directus.url)
"""

from superheader.exceptions import ConfigError, ConfigLoadError, ConfigValidationError

from ._config import CONFIG_FILE_NAME, Config, ConfigSource, ConfigSourceName
from ._load import safe_load_config
from ._loader import deep_merge, parse_env_vars, read_toml_file
from ._models import DirectusConfig, LogFormat, LoggingConfig, LogLevel, TemplatesConfig

__all__ = [
    "CONFIG_FILE_NAME",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigSourceName",
    "ConfigValidationError",
    "DirectusConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "TemplatesConfig",
    "deep_merge",
    "parse_env_vars",
    "read_toml_file",
    "safe_load_config",
]
