"""Core utilities package.

Pure helpers shared across fflens: subprocess invocation and timecode
handling.
"""

from fflens.core.datetime_utils import format_timecode, parse_timecode
from fflens.core.subprocess_utils import run_command

__all__ = [
    "format_timecode",
    "parse_timecode",
    "run_command",
]
