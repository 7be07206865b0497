"""Domain layer: value records and enums shared across fflens."""

from fflens.domain.enums import StreamType
from fflens.domain.models import (
    AudioStreamInfo,
    MediaDescriptor,
    MusicInfo,
    StreamInfo,
    SubtitleStreamInfo,
    VideoStreamInfo,
)

__all__ = [
    "AudioStreamInfo",
    "MediaDescriptor",
    "MusicInfo",
    "StreamInfo",
    "StreamType",
    "SubtitleStreamInfo",
    "VideoStreamInfo",
]
