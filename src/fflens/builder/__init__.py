"""Encode-plan model for building ffmpeg commands from a MediaDescriptor."""

from fflens.builder.model import (
    FfmpegAudioStream,
    FfmpegModel,
    FfmpegSubtitleStream,
    FfmpegVideoStream,
    create_model,
    output_extension,
)

__all__ = [
    "FfmpegModel",
    "FfmpegVideoStream",
    "FfmpegAudioStream",
    "FfmpegSubtitleStream",
    "create_model",
    "output_extension",
]
