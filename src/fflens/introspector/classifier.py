"""Stream type classification for segmented stream blocks."""

from fflens.domain.enums import StreamType

# Tested in order; the first marker found wins.
CLASSIFICATION_ORDER: tuple[StreamType, ...] = (
    StreamType.VIDEO,
    StreamType.AUDIO,
    StreamType.SUBTITLE,
)


def first_line(text: str) -> str:
    """Return the first non-empty line of ``text``."""
    for line in text.splitlines():
        if line.strip():
            return line
    return ""


def classify_block(text: str) -> StreamType:
    """Classify a stream block by the type marker in its header.

    ffmpeg prints the marker (" Video: ", " Audio: ", " Subtitle: ") at a
    fixed position in the header line. Only the header is tested, so a tag
    value such as a title containing "Audio: " does not change the type.

    Args:
        text: Raw stream block text.

    Returns:
        The stream type, or StreamType.UNKNOWN (data, attachment, ...).
    """
    header = first_line(text)
    for stream_type in CLASSIFICATION_ORDER:
        if stream_type.marker in header:
            return stream_type
    return StreamType.UNKNOWN
