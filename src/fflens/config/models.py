"""Configuration data models.

This module defines dataclasses for fflens configuration options.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ToolPathsConfig:
    """Configuration for external tool paths.

    If not specified, ffmpeg is looked up in PATH.
    """

    ffmpeg: Path | None = None


@dataclass
class IntrospectionConfig:
    """Configuration for reading stream information from files."""

    # Upper bound on a single `ffmpeg -i` invocation, in seconds
    timeout_seconds: float = 120.0

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be positive, got {self.timeout_seconds}"
            )


@dataclass
class ProbeConfig:
    """Configuration for hardware encoder trial encodes."""

    # Wait before the single retry for encoder families with cold-start
    # false negatives
    retry_delay_seconds: float = 2.0

    # Upper bound on a single trial encode, in seconds
    trial_timeout_seconds: float = 60.0

    # Size of the synthetic black source frame
    trial_frame_size: str = "1080x1080"

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.retry_delay_seconds < 0:
            raise ValueError(
                "retry_delay_seconds must be non-negative, "
                f"got {self.retry_delay_seconds}"
            )
        if self.trial_timeout_seconds <= 0:
            raise ValueError(
                "trial_timeout_seconds must be positive, "
                f"got {self.trial_timeout_seconds}"
            )
        width, sep, height = self.trial_frame_size.partition("x")
        if not sep or not width.isdigit() or not height.isdigit():
            raise ValueError(
                f"trial_frame_size must look like WxH, got {self.trial_frame_size}"
            )


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )


@dataclass
class FflensConfig:
    """Main configuration container."""

    tools: ToolPathsConfig = field(default_factory=ToolPathsConfig)
    introspection: IntrospectionConfig = field(default_factory=IntrospectionConfig)
    probe: ProbeConfig = field(default_factory=ProbeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
