"""Field extractors for ffmpeg stream blocks.

ffmpeg's diagnostic text has no stable grammar, so every field is read by a
FieldExtractor: an ordered chain of small pattern functions where the first
one that produces a value wins. The most precise pattern comes first; later
entries cover older or newer output variants. A new variant is supported by
appending to a chain, without touching the existing entries.

No extractor raises for a missing or malformed field. It yields None and
the field is left unset.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Generic, TypeVar

from fflens.core.datetime_utils import parse_timecode
from fflens.domain.enums import StreamType
from fflens.introspector.classifier import first_line

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class FieldExtractor(Generic[T]):
    """Ordered chain of extractors for one field."""

    name: str
    chain: tuple[Callable[[str], T | None], ...]

    def extract(self, text: str) -> T | None:
        """Return the first value any extractor in the chain produces."""
        for extractor in self.chain:
            value = extractor(text)
            if value is not None:
                return value
        logger.debug("No match for field %s", self.name)
        return None

    def with_fallback(
        self, extractor: Callable[[str], T | None]
    ) -> FieldExtractor[T]:
        """Return a copy with ``extractor`` appended to the chain."""
        return FieldExtractor(self.name, (*self.chain, extractor))


def regex_extractor(
    pattern: str,
    convert: Callable[[str], T | None],
    flags: int = 0,
) -> Callable[[str], T | None]:
    """Build an extractor from a regex with one capture group.

    The conversion may return None or raise ValueError to reject a match.
    """
    compiled = re.compile(pattern, flags)

    def extract(text: str) -> T | None:
        match = compiled.search(text)
        if match is None:
            return None
        try:
            return convert(match.group(1))
        except ValueError:
            return None

    return extract


def on_header(extractor: Callable[[str], T | None]) -> Callable[[str], T | None]:
    """Restrict an extractor to the block's header line."""

    def extract(text: str) -> T | None:
        return extractor(first_line(text))

    return extract


def _non_empty(value: str) -> str | None:
    value = value.strip()
    return value or None


# =============================================================================
# Header fields
# =============================================================================


def codec_extractor(stream_type: StreamType) -> FieldExtractor[str]:
    """Codec: first token after the type marker, lower-cased.

    "Stream #0:0(eng): Video: h264 (High), yuv420p, ..." -> "h264"
    """
    return FieldExtractor(
        f"{stream_type.value}_codec",
        (
            on_header(
                regex_extractor(
                    rf"{stream_type.label}:\s*([^\s,]+)",
                    lambda v: v.lower(),
                )
            ),
        ),
    )


def _parse_resolution(match_text: str) -> tuple[int, int] | None:
    width, _, height = match_text.partition("x")
    return int(width), int(height)


# Both sides need 3+ digits so aspect fragments like "16x9" never match.
RESOLUTION: FieldExtractor[tuple[int, int]] = FieldExtractor(
    "resolution",
    (on_header(regex_extractor(r"(\d{3,}x\d{3,})", _parse_resolution)),),
)

FRAME_RATE: FieldExtractor[float] = FieldExtractor(
    "frame_rate",
    (
        on_header(regex_extractor(r"(\d+(?:\.\d+)?)\s?fps\b", float)),
        # Some containers omit fps and only report the real base rate
        on_header(regex_extractor(r"(\d+(?:\.\d+)?)\s?tbr\b", float)),
    ),
)

SAMPLE_RATE: FieldExtractor[int] = FieldExtractor(
    "sample_rate",
    (on_header(regex_extractor(r"(\d+)\s?Hz\b", int, re.IGNORECASE)),),
)

_LEADING_NUMBER = re.compile(r"^(\d+(?:\.\d+)?)")
_HZ_FIELD = re.compile(r"\d+\s?Hz\b", re.IGNORECASE)


def parse_channel_layout(layout: str) -> float | None:
    """Parse a channel layout token into a channel count.

    "stereo" -> 2, "5.1(side)" -> 5.1, "2 channels" -> 2; anything else is
    unrecognized and yields None.
    """
    layout = layout.strip().lower()
    if layout == "stereo":
        return 2.0
    match = _LEADING_NUMBER.match(layout)
    if match:
        return float(match.group(1))
    return None


def _channels_after_sample_rate(text: str) -> float | None:
    parts = [part.strip() for part in first_line(text).split(",")]
    for i, part in enumerate(parts[:-1]):
        if _HZ_FIELD.search(part):
            return parse_channel_layout(parts[i + 1])
    return None


_LAYOUT_FIELD = re.compile(
    r"^(?:stereo|\d+ channels|\d+(?:\.\d+)?(?:\([^)]*\))?)$", re.IGNORECASE
)


def _channels_layout_field(text: str) -> float | None:
    # Header without a sample rate: "Audio: pcm_s16le, 2 channels, s16, ..."
    parts = [part.strip() for part in first_line(text).split(",")]
    if any(_HZ_FIELD.search(part) for part in parts):
        return None
    for part in parts[1:]:
        if _LAYOUT_FIELD.match(part):
            return parse_channel_layout(part)
    return None


CHANNELS: FieldExtractor[float] = FieldExtractor(
    "channels",
    (_channels_after_sample_rate, _channels_layout_field),
)

LANGUAGE: FieldExtractor[str] = FieldExtractor(
    "language",
    (
        on_header(
            regex_extractor(r"Stream\s#\d+:\d+\(([^)]+)\)", lambda v: v.lower())
        ),
        # ffmpeg 5+ prints the container stream id first: "#0:1[0x2](eng)"
        on_header(
            regex_extractor(
                r"Stream\s#\d+:\d+\[[^\]]*\]\(([^)]+)\)", lambda v: v.lower()
            )
        ),
    ),
)


# =============================================================================
# Tag fields (indented lines after the header)
# =============================================================================

TITLE: FieldExtractor[str] = FieldExtractor(
    "title",
    (
        regex_extractor(
            r"^[ \t]+title[ \t]*:[ \t]?(.*)$", _non_empty, re.MULTILINE
        ),
    ),
)

# Matroska writes DURATION (or DURATION-<lang>) with nanosecond precision.
STREAM_DURATION: FieldExtractor[timedelta] = FieldExtractor(
    "stream_duration",
    (
        regex_extractor(
            r"^[ \t]+DURATION(?:-[\w-]+)?[ \t]*:[ \t]*(\d+(?::\d+)*\.\d+)",
            parse_timecode,
            re.MULTILINE,
        ),
    ),
)

BITRATE: FieldExtractor[int] = FieldExtractor(
    "bitrate",
    (
        regex_extractor(
            r"^[ \t]+BPS(?:-[\w-]+)?[ \t]*:[ \t]*(\d+)\b", int, re.MULTILINE
        ),
    ),
)


def is_forced(text: str) -> bool:
    """A subtitle is forced if "forced" appears anywhere in its block."""
    return "forced" in text.lower()


# =============================================================================
# Container fields (read from the full output)
# =============================================================================


def _container_timecode(value: str) -> timedelta | None:
    # "00:42:17.86, start: 0.000000, bitrate: 9512 kb/s" -> "00:42:17.86"
    return parse_timecode(value.split(",", 1)[0].strip())


CONTAINER_DURATION: FieldExtractor[timedelta] = FieldExtractor(
    "container_duration",
    (
        regex_extractor(
            r"^[ \t]*Duration:[ \t]*(.*)$", _container_timecode, re.MULTILINE
        ),
    ),
)

CONTAINER_BITRATE: FieldExtractor[int] = FieldExtractor(
    "container_bitrate",
    (
        regex_extractor(
            r"^[ \t]*Duration:.*?bitrate:[ \t]*(\d+)[ \t]*kb/s", int, re.MULTILINE
        ),
    ),
)


def _split_formats(value: str) -> tuple[str, ...] | None:
    formats = tuple(f.strip() for f in value.split(",") if f.strip())
    return formats or None


CONTAINER_FORMATS: FieldExtractor[tuple[str, ...]] = FieldExtractor(
    "container_formats",
    (
        regex_extractor(
            r"^[ \t]*Input #0,[ \t]*(.+?),[ \t]*from[ \t]",
            _split_formats,
            re.MULTILINE,
        ),
    ),
)
