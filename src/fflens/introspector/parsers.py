"""Pure parsing functions for ffmpeg diagnostic output.

These functions turn the text ``ffmpeg -i <file>`` prints into fflens
domain objects. They do no I/O, so they can be tested against captured
output.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path

from fflens.domain.enums import StreamType
from fflens.domain.models import (
    AudioStreamInfo,
    MediaDescriptor,
    SubtitleStreamInfo,
    VideoStreamInfo,
)
from fflens.introspector.extractors import (
    BITRATE,
    CHANNELS,
    CONTAINER_BITRATE,
    CONTAINER_DURATION,
    CONTAINER_FORMATS,
    FRAME_RATE,
    LANGUAGE,
    RESOLUTION,
    SAMPLE_RATE,
    STREAM_DURATION,
    TITLE,
    codec_extractor,
    is_forced,
)
from fflens.introspector.segmenter import StreamBlock, iter_stream_blocks

logger = logging.getLogger(__name__)

VIDEO_CODEC = codec_extractor(StreamType.VIDEO)
AUDIO_CODEC = codec_extractor(StreamType.AUDIO)
SUBTITLE_CODEC = codec_extractor(StreamType.SUBTITLE)

# Subtitle type indices are 1-based; video and audio start at 0.
TYPE_INDEX_START: dict[StreamType, int] = {
    StreamType.VIDEO: 0,
    StreamType.AUDIO: 0,
    StreamType.SUBTITLE: 1,
}


def parse_video_stream(
    block: StreamBlock,
    type_index: int = 0,
    container_duration: timedelta | None = None,
) -> VideoStreamInfo:
    """Parse a video stream block.

    Duration comes from the stream's own DURATION tag when present and
    falls back to the container-level duration otherwise.

    Args:
        block: Segmented video stream block.
        type_index: Position among video streams.
        container_duration: Duration from the container "Duration:" line.

    Returns:
        VideoStreamInfo with every field that could be read.
    """
    text = block.text
    resolution = RESOLUTION.extract(text)
    duration = STREAM_DURATION.extract(text)
    if duration is None:
        duration = container_duration

    return VideoStreamInfo(
        index=block.position,
        type_index=type_index,
        stream_id=block.stream_id,
        codec=VIDEO_CODEC.extract(text) or "",
        title=TITLE.extract(text) or "",
        language=LANGUAGE.extract(text) or "",
        width=resolution[0] if resolution else None,
        height=resolution[1] if resolution else None,
        frames_per_second=FRAME_RATE.extract(text),
        duration=duration,
        bitrate=BITRATE.extract(text),
    )


def parse_audio_stream(block: StreamBlock, type_index: int = 0) -> AudioStreamInfo:
    """Parse an audio stream block.

    Args:
        block: Segmented audio stream block.
        type_index: Position among audio streams.

    Returns:
        AudioStreamInfo with every field that could be read.
    """
    text = block.text
    return AudioStreamInfo(
        index=block.position,
        type_index=type_index,
        stream_id=block.stream_id,
        codec=AUDIO_CODEC.extract(text) or "",
        title=TITLE.extract(text) or "",
        language=LANGUAGE.extract(text) or "",
        channels=CHANNELS.extract(text),
        sample_rate=SAMPLE_RATE.extract(text),
        duration=STREAM_DURATION.extract(text),
        bitrate=BITRATE.extract(text),
    )


def parse_subtitle_stream(
    block: StreamBlock, type_index: int = 1
) -> SubtitleStreamInfo:
    """Parse a subtitle stream block.

    Args:
        block: Segmented subtitle stream block.
        type_index: 1-based position among subtitle streams.

    Returns:
        SubtitleStreamInfo with every field that could be read.
    """
    text = block.text
    return SubtitleStreamInfo(
        index=block.position,
        type_index=type_index,
        stream_id=block.stream_id,
        codec=SUBTITLE_CODEC.extract(text) or "",
        title=TITLE.extract(text) or "",
        language=LANGUAGE.extract(text) or "",
        forced=is_forced(text),
    )


def parse_ffmpeg_output(output: str, file_path: Path | None = None) -> MediaDescriptor:
    """Assemble a MediaDescriptor from the full diagnostic text.

    Streams keep their printed order and global position. Type indices are
    counted per stream kind. Streams reported twice are reported twice.

    Args:
        output: Text captured from ``ffmpeg -i <file>``.
        file_path: File the output describes.

    Returns:
        MediaDescriptor for the file.
    """
    container_duration = CONTAINER_DURATION.extract(output)

    video: list[VideoStreamInfo] = []
    audio: list[AudioStreamInfo] = []
    subtitles: list[SubtitleStreamInfo] = []
    counters = dict(TYPE_INDEX_START)

    for block in iter_stream_blocks(output):
        type_index = counters[block.stream_type]
        counters[block.stream_type] += 1

        if block.stream_type is StreamType.VIDEO:
            video.append(parse_video_stream(block, type_index, container_duration))
        elif block.stream_type is StreamType.AUDIO:
            audio.append(parse_audio_stream(block, type_index))
        elif block.stream_type is StreamType.SUBTITLE:
            subtitles.append(parse_subtitle_stream(block, type_index))

    logger.debug(
        "Parsed %d video, %d audio, %d subtitle stream(s)",
        len(video),
        len(audio),
        len(subtitles),
    )

    return MediaDescriptor(
        file_path=file_path,
        container_formats=CONTAINER_FORMATS.extract(output) or (),
        duration=container_duration,
        bitrate_kbps=CONTAINER_BITRATE.extract(output),
        video_streams=tuple(video),
        audio_streams=tuple(audio),
        subtitle_streams=tuple(subtitles),
    )


INPUT_MARKER = "Input #0"
NO_OUTPUT_COMPLAINT = "At least one output file must be specified"


def find_read_failure(output: str) -> str | None:
    """Return a failure reason if the output does not describe an input file.

    ffmpeg exits non-zero and complains about the missing output file on
    every successful ``-i`` read, so neither the exit code nor that
    complaint indicates a failure. Output lacking the ``Input #0`` marker
    does; its last non-empty line is ffmpeg's own explanation.

    Args:
        output: Text captured from ``ffmpeg -i <file>``.

    Returns:
        Failure reason, or None when the output can be parsed.
    """
    if INPUT_MARKER in output:
        return None
    lines = [line.strip() for line in output.splitlines() if line.strip()]
    lines = [line for line in lines if line != NO_OUTPUT_COMPLAINT]
    if not lines:
        return "no stream information in ffmpeg output"
    return lines[-1]
