"""Reads tag and format information from audio files.

Music files carry their metadata as ``Key : value`` lines in ffmpeg's
input listing. Format details (bitrate, sample rate, channel layout) are
picked out of the Duration and stream header lines.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path

from fflens.core.datetime_utils import parse_timecode
from fflens.domain.models import MusicInfo
from fflens.introspector.interface import MediaIntrospectionError
from fflens.introspector.parsers import find_read_failure
from fflens.logging.context import analysis_context
from fflens.tools.detection import ToolNotFoundError, require_tool
from fflens.tools.invoker import SubprocessToolInvoker, ToolInvoker

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*(\d+)")
_FREQUENCY = re.compile(r"(\d+) Hz")
_BITRATE = re.compile(r"bitrate:\s*(\d+)\s")


@dataclass
class _MusicFields:
    """Mutable accumulator; frozen into a MusicInfo once all lines are read."""

    title: str | None = None
    album: str | None = None
    language: str | None = None
    track: int | None = None
    release_date: date | None = None
    genres: list[str] = field(default_factory=list)
    encoder: str | None = None
    duration: int | None = None
    bitrate: int | None = None
    frequency: int | None = None
    channels: int | None = None


def _parse_year(value: str) -> date | None:
    try:
        year = int(value)
    except ValueError:
        return None
    if not 1 <= year <= 9999:
        return None
    return date(year, 1, 1)


def _parse_full_date(value: str) -> date | None:
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def _apply_tag(fields: _MusicFields, key: str, value: str) -> None:
    """Store one ``key: value`` line. Unknown keys are ignored."""
    if key == "language":
        fields.language = value
    elif key == "track":
        match = _LEADING_INT.match(value)
        if match:
            fields.track = int(match.group(1))
    elif key == "title":
        fields.title = value
    elif key == "album":
        fields.album = value
    elif key == "date":
        # A bare year never replaces a date that is already known
        if fields.release_date is None:
            fields.release_date = _parse_year(value)
    elif key == "retail date":
        parsed = _parse_full_date(value)
        if parsed is not None:
            fields.release_date = parsed
    elif key == "genre":
        fields.genres = value.split()
    elif key == "encoder":
        fields.encoder = value
    elif key == "duration" and "," in value:
        timecode = parse_timecode(value.split(",", 1)[0])
        if timecode is not None:
            fields.duration = int(timecode.total_seconds())


def parse_music_output(output: str, file_path: Path | None = None) -> MusicInfo:
    """Build a MusicInfo from ffmpeg's input listing.

    Tag keys are matched case-insensitively against the text before the
    first colon. A later line for the same key replaces an earlier one.

    Args:
        output: Text captured from ``ffmpeg -i <file>``.
        file_path: File the output describes.

    Returns:
        MusicInfo with every field that could be read.
    """
    fields = _MusicFields()

    for line in output.splitlines():
        key, sep, value = line.partition(":")
        if not sep or not key.strip():
            continue
        _apply_tag(fields, key.strip().lower(), value.strip())

        bitrate = _BITRATE.search(line)
        if bitrate:
            fields.bitrate = int(bitrate.group(1))

        frequency = _FREQUENCY.search(line)
        if frequency:
            fields.frequency = int(frequency.group(1))

        if " stereo," in line:
            fields.channels = 2

    return MusicInfo(
        file_path=file_path,
        title=fields.title,
        album=fields.album,
        language=fields.language,
        track=fields.track,
        release_date=fields.release_date,
        genres=tuple(fields.genres),
        encoder=fields.encoder,
        duration=fields.duration,
        bitrate=fields.bitrate,
        frequency=fields.frequency,
        channels=fields.channels,
    )


class MusicInfoReader:
    """Reads MusicInfo from audio files with ffmpeg."""

    def __init__(
        self,
        ffmpeg_path: Path | None = None,
        invoker: ToolInvoker | None = None,
        timeout: float = 120,
    ) -> None:
        self._ffmpeg_path = ffmpeg_path
        self._invoker = invoker or SubprocessToolInvoker(timeout=timeout)

    def get_music_info(self, path: Path) -> MusicInfo:
        """Read tags and format details from an audio file.

        Raises:
            MediaIntrospectionError: If the file or ffmpeg is missing, or
                ffmpeg's output does not describe the file.
        """
        path = Path(path)
        if not path.exists():
            raise MediaIntrospectionError(f"File not found: {path}")
        try:
            ffmpeg = require_tool("ffmpeg", self._ffmpeg_path)
        except ToolNotFoundError as e:
            raise MediaIntrospectionError(f"FFmpeg not found: {e}") from e

        with analysis_context(file_path=path):
            result = self._invoker.execute(
                ffmpeg, ["-hide_banner", "-i", str(path)]
            )
            if result.timed_out:
                raise MediaIntrospectionError(f"ffmpeg timed out reading {path}")
            reason = find_read_failure(result.output)
            if reason is not None:
                raise MediaIntrospectionError(
                    f"Failed to read audio information for {path}: {reason}"
                )
            logger.debug("Music Information:\n%s", result.output)
            return parse_music_output(result.output, path)

    def read(self, path: Path) -> MusicInfo:
        """Read tags, returning an empty MusicInfo and logging on failure."""
        path = Path(path)
        try:
            return self.get_music_info(path)
        except MediaIntrospectionError as e:
            with analysis_context(file_path=path):
                logger.error("%s", e)
            return MusicInfo(file_path=path)
