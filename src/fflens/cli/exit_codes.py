"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Validation errors (config, input)
    20-29: Target/file errors
    30-39: Tool/dependency errors
    40-49: Operation errors
    50-59: Analysis errors
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for fflens CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1

    # Validation errors (10-19)
    CONFIG_ERROR = 11

    # Target/file errors (20-29)
    TARGET_NOT_FOUND = 20
    NO_STREAMS_FOUND = 22

    # Tool/dependency errors (30-39)
    FFMPEG_NOT_FOUND = 32

    # Operation errors (40-49)
    ENCODER_UNAVAILABLE = 40

    # Analysis errors (50-59)
    PARSE_ERROR = 51
