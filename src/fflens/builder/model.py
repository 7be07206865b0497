"""Encode-plan model built from a media descriptor.

An FfmpegModel is the starting point for building an ffmpeg command: it
lists the inputs and one entry per source stream for later steps to edit.
Unlike the descriptor it is built from, the model is mutable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from fflens.domain.models import (
    AudioStreamInfo,
    MediaDescriptor,
    SubtitleStreamInfo,
    VideoStreamInfo,
)

# Containers whose extension is carried over to the output
PRESERVED_EXTENSIONS = frozenset({".mp4", ".mkv"})


@dataclass
class FfmpegVideoStream:
    """Video stream entry; ``index`` is the position among video streams."""

    index: int
    stream: VideoStreamInfo
    title: str = ""


@dataclass
class FfmpegAudioStream:
    index: int
    stream: AudioStreamInfo
    title: str = ""
    language: str = ""


@dataclass
class FfmpegSubtitleStream:
    index: int
    stream: SubtitleStreamInfo
    title: str = ""
    language: str = ""


@dataclass
class FfmpegModel:
    """Editable encode plan for one source file.

    Attributes:
        descriptor: Stream information the plan was built from.
        input_files: Files passed to ffmpeg with ``-i``, in order.
        video_streams: One entry per source video stream.
        audio_streams: One entry per source audio stream.
        subtitle_streams: One entry per source subtitle stream.
        extension: Output extension without the dot, or None to let the
            caller choose.
        metadata_parameters: Extra ``-metadata`` arguments.
        custom_parameters: Arguments appended verbatim.
        force_encode: Encode even if no stream was changed.
    """

    descriptor: MediaDescriptor
    input_files: list[str] = field(default_factory=list)
    video_streams: list[FfmpegVideoStream] = field(default_factory=list)
    audio_streams: list[FfmpegAudioStream] = field(default_factory=list)
    subtitle_streams: list[FfmpegSubtitleStream] = field(default_factory=list)
    extension: str | None = None
    metadata_parameters: list[str] = field(default_factory=list)
    custom_parameters: list[str] = field(default_factory=list)
    force_encode: bool = False


def output_extension(file_path: Path | None) -> str | None:
    """Return the source extension if it is one the output keeps.

    The extension is returned as written in the file name ("MKV" stays
    upper case).
    """
    if file_path is None or file_path.suffix.lower() not in PRESERVED_EXTENSIONS:
        return None
    return file_path.suffix[1:]


def create_model(descriptor: MediaDescriptor) -> FfmpegModel:
    """Create an encode plan that keeps every stream of the source.

    Args:
        descriptor: Stream information for the source file.

    Returns:
        FfmpegModel with the source as its only input.
    """
    model = FfmpegModel(descriptor=descriptor)
    if descriptor.file_path is not None:
        model.input_files.append(str(descriptor.file_path))

    for i, video in enumerate(descriptor.video_streams):
        model.video_streams.append(
            FfmpegVideoStream(index=i, stream=video, title=video.title)
        )
    for i, audio in enumerate(descriptor.audio_streams):
        model.audio_streams.append(
            FfmpegAudioStream(
                index=i, stream=audio, title=audio.title, language=audio.language
            )
        )
    for i, subtitle in enumerate(descriptor.subtitle_streams):
        model.subtitle_streams.append(
            FfmpegSubtitleStream(
                index=i,
                stream=subtitle,
                title=subtitle.title,
                language=subtitle.language,
            )
        )

    model.extension = output_extension(descriptor.file_path)
    return model
