"""Configuration builder with explicit layering.

This module provides ConfigBuilder for building FflensConfig by composing
configuration sources with explicit precedence handling.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from fflens.config.env import EnvReader
from fflens.config.models import (
    FflensConfig,
    IntrospectionConfig,
    LoggingConfig,
    ProbeConfig,
    ToolPathsConfig,
)


@dataclass
class ConfigSource:
    """Configuration values from a single source.

    None values indicate "not specified in this source" and will not
    override values from lower-precedence sources.
    """

    # Tool paths
    ffmpeg_path: Path | None = None

    # Introspection config
    introspection_timeout: float | None = None

    # Probe config
    probe_retry_delay: float | None = None
    probe_trial_timeout: float | None = None
    probe_trial_frame_size: str | None = None

    # Logging config
    logging_level: str | None = None
    logging_file: Path | None = None
    logging_format: str | None = None
    logging_include_stderr: bool | None = None
    logging_max_bytes: int | None = None
    logging_backup_count: int | None = None


class ConfigBuilder:
    """Builds FflensConfig by layering ConfigSources with precedence.

    Later sources override earlier ones (for non-None values).

    Example:
        builder = ConfigBuilder()
        builder.apply(source_from_file(file_config))
        builder.apply(source_from_env(reader))
        builder.apply(cli_source)
        config = builder.build()
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._origins: dict[str, str] = {}

    def apply(self, source: ConfigSource, source_name: str = "unknown") -> None:
        """Apply configuration source, overriding existing values.

        Args:
            source: Configuration source to apply.
            source_name: Label recorded as the origin of each value set.
        """
        for field_obj in fields(source):
            value = getattr(source, field_obj.name)
            if value is not None:
                self._values[field_obj.name] = value
                self._origins[field_obj.name] = source_name

    def origin(self, key: str) -> str:
        """Name of the source that set ``key``, or "default"."""
        return self._origins.get(key, "default")

    def _get(self, key: str, default: Any) -> Any:
        return self._values.get(key, default)

    def build(self) -> FflensConfig:
        """Build the final FflensConfig with defaults for unset values."""
        tools = ToolPathsConfig(ffmpeg=self._get("ffmpeg_path", None))

        introspection = IntrospectionConfig(
            timeout_seconds=self._get("introspection_timeout", 120.0),
        )

        probe = ProbeConfig(
            retry_delay_seconds=self._get("probe_retry_delay", 2.0),
            trial_timeout_seconds=self._get("probe_trial_timeout", 60.0),
            trial_frame_size=self._get("probe_trial_frame_size", "1080x1080"),
        )

        logging_config = LoggingConfig(
            level=self._get("logging_level", "info"),
            file=self._get("logging_file", None),
            format=self._get("logging_format", "text"),
            include_stderr=self._get("logging_include_stderr", False),
            max_bytes=self._get("logging_max_bytes", 10_485_760),
            backup_count=self._get("logging_backup_count", 5),
        )

        return FflensConfig(
            tools=tools,
            introspection=introspection,
            probe=probe,
            logging=logging_config,
        )


def _optional_path(value: Any) -> Path | None:
    if not value:
        return None
    return Path(str(value)).expanduser()


def source_from_file(file_config: dict[str, Any]) -> ConfigSource:
    """Create ConfigSource from parsed TOML config file.

    Args:
        file_config: Parsed configuration dictionary from TOML file.

    Returns:
        ConfigSource with values from the config file.
    """
    tools = file_config.get("tools", {})
    introspection = file_config.get("introspection", {})
    probe = file_config.get("probe", {})
    logging_conf = file_config.get("logging", {})

    return ConfigSource(
        ffmpeg_path=_optional_path(tools.get("ffmpeg")),
        introspection_timeout=introspection.get("timeout_seconds"),
        probe_retry_delay=probe.get("retry_delay_seconds"),
        probe_trial_timeout=probe.get("trial_timeout_seconds"),
        probe_trial_frame_size=probe.get("trial_frame_size"),
        logging_level=logging_conf.get("level"),
        logging_file=_optional_path(logging_conf.get("file")),
        logging_format=logging_conf.get("format"),
        logging_include_stderr=logging_conf.get("include_stderr"),
        logging_max_bytes=logging_conf.get("max_bytes"),
        logging_backup_count=logging_conf.get("backup_count"),
    )


def source_from_env(reader: EnvReader) -> ConfigSource:
    """Create ConfigSource from FFLENS_* environment variables.

    Args:
        reader: EnvReader to read environment variables from.

    Returns:
        ConfigSource with values from environment variables.
    """
    return ConfigSource(
        ffmpeg_path=reader.get_path("FFLENS_FFMPEG_PATH"),
        introspection_timeout=reader.get_float("FFLENS_INTROSPECT_TIMEOUT"),
        probe_retry_delay=reader.get_float("FFLENS_PROBE_RETRY_DELAY"),
        probe_trial_timeout=reader.get_float("FFLENS_PROBE_TIMEOUT"),
        logging_level=reader.get_str("FFLENS_LOG_LEVEL"),
        logging_file=reader.get_path("FFLENS_LOG_FILE", must_exist=False),
        logging_format=reader.get_str("FFLENS_LOG_FORMAT"),
        logging_include_stderr=reader.get_bool("FFLENS_LOG_INCLUDE_STDERR"),
        logging_max_bytes=reader.get_int("FFLENS_LOG_MAX_BYTES"),
        logging_backup_count=reader.get_int("FFLENS_LOG_BACKUP_COUNT"),
    )
