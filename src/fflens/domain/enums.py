"""Domain enums for fflens."""

from enum import Enum


class StreamType(Enum):
    """Kind of stream reported in ffmpeg's diagnostic output."""

    VIDEO = "video"
    AUDIO = "audio"
    SUBTITLE = "subtitle"
    UNKNOWN = "unknown"  # Data, attachment, or anything without a known marker

    @property
    def label(self) -> str:
        """The word ffmpeg prints after the stream header ("Video", ...)."""
        return self.value.capitalize()

    @property
    def marker(self) -> str:
        """Header marker used to classify a block (" Video: ", ...)."""
        return f" {self.label}: "
