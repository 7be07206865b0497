"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (FFLENS_*)
3. Config file (~/.fflens/config.toml)
4. Default values

Environment variables:
- FFLENS_FFMPEG_PATH: Path to ffmpeg executable
- FFLENS_INTROSPECT_TIMEOUT: Timeout for `ffmpeg -i` in seconds
- FFLENS_PROBE_RETRY_DELAY: Delay before retrying a flaky encoder family
- FFLENS_PROBE_TIMEOUT: Timeout for a trial encode in seconds
- FFLENS_LOG_LEVEL / FFLENS_LOG_FILE / FFLENS_LOG_FORMAT: Logging overrides
- FFLENS_CONFIG_PATH: Path to config file (overrides default location)
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

from fflens.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from fflens.config.env import EnvReader
from fflens.config.models import FflensConfig
from fflens.config.toml_parser import load_toml_file

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".fflens"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

# Cache for loaded config files (path -> (parsed dict, mtime))
# Reloads automatically when the file's mtime changes
_config_cache: dict[Path, tuple[dict, float]] = {}
_config_cache_lock = threading.Lock()


def get_default_config_path() -> Path:
    """Get the config file path, honoring FFLENS_CONFIG_PATH."""
    env_path = os.environ.get("FFLENS_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_FILE


def load_config_file(path: Path | None = None, *, strict: bool = False) -> dict:
    """Load configuration from a TOML file, with mtime-based caching.

    Args:
        path: Path to config file. Uses the default location if None.
        strict: Raise TomlParseError instead of ignoring a bad file.

    Returns:
        Parsed config dict, or empty dict if the file doesn't exist.
    """
    if path is None:
        path = get_default_config_path()

    try:
        current_mtime = path.stat().st_mtime
    except OSError:
        return {}

    with _config_cache_lock:
        cached = _config_cache.get(path)
        if cached is not None and cached[1] == current_mtime:
            return cached[0]

        result = load_toml_file(path, strict=strict)
        _config_cache[path] = (result, current_mtime)
        return result


def clear_config_cache() -> None:
    """Clear the config file cache, forcing the next load to re-read."""
    with _config_cache_lock:
        _config_cache.clear()


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    ffmpeg_path: Path | None = None,
    log_level: str | None = None,
    log_file: Path | None = None,
    log_format: str | None = None,
    # Optional dependency injection for testing
    env_reader: EnvReader | None = None,
    *,
    strict: bool = False,
) -> FflensConfig:
    """Get fflens configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides FFLENS_CONFIG_PATH).
        ffmpeg_path: CLI override for ffmpeg path.
        log_level: CLI override for log level.
        log_file: CLI override for log file.
        log_format: CLI override for log format ("text" or "json").
        env_reader: Optional EnvReader for testing (uses os.environ if None).
        strict: If True, raise TomlParseError on config file parse failures.

    Returns:
        FflensConfig with merged configuration.

    Raises:
        ValueError: If a merged value fails validation.
    """
    reader = env_reader or EnvReader()

    file_config = load_config_file(config_path, strict=strict)

    cli_source = ConfigSource(
        ffmpeg_path=ffmpeg_path,
        logging_level=log_level,
        logging_file=log_file,
        logging_format=log_format,
    )

    builder = ConfigBuilder()
    builder.apply(source_from_file(file_config), source_name="file")
    builder.apply(source_from_env(reader), source_name="env")
    builder.apply(cli_source, source_name="cli")

    config = builder.build()
    logger.debug(
        "Configuration loaded: ffmpeg=%s (%s), log_level=%s (%s)",
        config.tools.ffmpeg or "PATH",
        builder.origin("ffmpeg_path"),
        config.logging.level,
        builder.origin("logging_level"),
    )
    return config
