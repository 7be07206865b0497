"""Domain models for fflens.

Immutable value records produced by the introspector. None of them is
mutated after construction; the readers build field values first and
construct the record once.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from pathlib import Path

from fflens.domain.enums import StreamType


@dataclass(frozen=True)
class StreamInfo:
    """Fields common to every stream kind.

    ``index`` is the stream's position among all stream headers in the
    diagnostic output. ``type_index`` counts streams of one kind only.
    ``stream_id`` is the identifier exactly as printed (e.g. "0:1").
    """

    index: int = 0
    type_index: int = 0
    stream_id: str = ""
    codec: str = ""
    title: str = ""
    language: str = ""

    stream_type = StreamType.UNKNOWN


@dataclass(frozen=True)
class VideoStreamInfo(StreamInfo):
    """A video stream."""

    width: int | None = None
    height: int | None = None
    frames_per_second: float | None = None
    duration: timedelta | None = None
    bitrate: int | None = None  # bits per second, from the BPS tag

    stream_type = StreamType.VIDEO


@dataclass(frozen=True)
class AudioStreamInfo(StreamInfo):
    """An audio stream."""

    channels: float | None = None  # 2 for stereo, 5.1 for 5.1 layouts
    sample_rate: int | None = None  # Hz
    duration: timedelta | None = None
    bitrate: int | None = None

    stream_type = StreamType.AUDIO


@dataclass(frozen=True)
class SubtitleStreamInfo(StreamInfo):
    """A subtitle stream. ``type_index`` is 1-based for subtitles."""

    forced: bool = False

    stream_type = StreamType.SUBTITLE


@dataclass(frozen=True)
class MediaDescriptor:
    """Everything read from one file's diagnostic output.

    Stream collections keep the order the streams were printed in.
    """

    file_path: Path | None = None
    container_formats: tuple[str, ...] = ()
    duration: timedelta | None = None
    bitrate_kbps: int | None = None
    video_streams: tuple[VideoStreamInfo, ...] = ()
    audio_streams: tuple[AudioStreamInfo, ...] = ()
    subtitle_streams: tuple[SubtitleStreamInfo, ...] = ()

    @classmethod
    def empty(cls, file_path: Path | None = None) -> "MediaDescriptor":
        """Descriptor returned when a read fails as a whole."""
        return cls(file_path=file_path)

    @property
    def streams(self) -> list[StreamInfo]:
        """All streams ordered by their global index."""
        combined: list[StreamInfo] = [
            *self.video_streams,
            *self.audio_streams,
            *self.subtitle_streams,
        ]
        return sorted(combined, key=lambda s: s.index)

    @property
    def is_empty(self) -> bool:
        return not (self.video_streams or self.audio_streams or self.subtitle_streams)


@dataclass(frozen=True)
class MusicInfo:
    """Tag and format information read from an audio file."""

    file_path: Path | None = None
    title: str | None = None
    album: str | None = None
    language: str | None = None
    track: int | None = None
    release_date: date | None = None
    genres: tuple[str, ...] = field(default_factory=tuple)
    encoder: str | None = None
    duration: int | None = None  # whole seconds
    bitrate: int | None = None  # kb/s
    frequency: int | None = None  # Hz
    channels: int | None = None
