"""Timecode parsing and formatting.

ffmpeg prints durations as sexagesimal timecodes ("01:23:45.67"), and
Matroska DURATION tags carry nanosecond precision ("00:42:17.856000000").
"""

import re
from datetime import timedelta

_TIMECODE_PATTERN = re.compile(
    r"^\s*(?:(?P<days>\d+)\.)?(?P<hours>\d+):(?P<minutes>\d{1,2}):"
    r"(?P<seconds>\d{1,2}(?:\.\d+)?)\s*$"
)


def parse_timecode(value: str | None) -> timedelta | None:
    """Parse an ffmpeg timecode into a timedelta.

    Accepts "HH:MM:SS", "HH:MM:SS.fraction" with any number of fraction
    digits, and a leading "D." day component.

    Args:
        value: Timecode string, or None.

    Returns:
        Parsed timedelta, or None if the value is not a timecode
        (e.g. "N/A").
    """
    if not value:
        return None
    match = _TIMECODE_PATTERN.match(value)
    if not match:
        return None

    minutes = int(match.group("minutes"))
    seconds = float(match.group("seconds"))
    if minutes >= 60 or seconds >= 60:
        return None

    return timedelta(
        days=int(match.group("days") or 0),
        hours=int(match.group("hours")),
        minutes=minutes,
        seconds=seconds,
    )


def format_timecode(value: timedelta | None) -> str:
    """Format a timedelta as HH:MM:SS.mmm, or "-" when unset."""
    if value is None:
        return "-"
    total_ms = round(value.total_seconds() * 1000)
    hours, rem = divmod(total_ms, 3_600_000)
    minutes, rem = divmod(rem, 60_000)
    seconds, ms = divmod(rem, 1000)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{ms:03d}"
