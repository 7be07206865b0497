"""Configuration management for fflens.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (FFLENS_*)
3. Config file (~/.fflens/config.toml)
4. Default values (lowest priority)
"""

from fflens.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from fflens.config.env import EnvReader
from fflens.config.loader import (
    clear_config_cache,
    get_config,
    get_default_config_path,
    load_config_file,
)
from fflens.config.models import (
    FflensConfig,
    IntrospectionConfig,
    LoggingConfig,
    ProbeConfig,
    ToolPathsConfig,
)
from fflens.config.toml_parser import TomlParseError, load_toml_file, parse_toml

__all__ = [
    # Models
    "FflensConfig",
    "IntrospectionConfig",
    "LoggingConfig",
    "ProbeConfig",
    "ToolPathsConfig",
    # Loader
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    # Builder
    "ConfigBuilder",
    "ConfigSource",
    "EnvReader",
    "source_from_env",
    "source_from_file",
    # TOML
    "TomlParseError",
    "load_toml_file",
    "parse_toml",
]
