"""Formatters for introspection results.

This module provides functions to format MediaDescriptor and MusicInfo
objects for human-readable or JSON output.
"""

import json
from datetime import timedelta
from typing import Any

from fflens.core.datetime_utils import format_timecode
from fflens.domain.enums import StreamType
from fflens.domain.models import (
    AudioStreamInfo,
    MediaDescriptor,
    MusicInfo,
    StreamInfo,
    SubtitleStreamInfo,
    VideoStreamInfo,
)


def format_human(descriptor: MediaDescriptor) -> str:
    """Format a media descriptor for human-readable output.

    Args:
        descriptor: The descriptor to format.

    Returns:
        Formatted string for terminal output.
    """
    lines: list[str] = []

    lines.append(f"File: {descriptor.file_path}")
    if descriptor.container_formats:
        lines.append(f"Container: {', '.join(descriptor.container_formats)}")
    if descriptor.duration is not None:
        lines.append(f"Duration: {format_timecode(descriptor.duration)}")
    if descriptor.bitrate_kbps is not None:
        lines.append(f"Bitrate: {descriptor.bitrate_kbps} kb/s")
    lines.append("")

    lines.append("Streams:")
    groups = (
        ("Video", descriptor.video_streams),
        ("Audio", descriptor.audio_streams),
        ("Subtitles", descriptor.subtitle_streams),
    )
    for heading, streams in groups:
        if streams:
            lines.append(f"  {heading}:")
            for stream in streams:
                lines.append(f"    {format_stream_line(stream)}")

    if descriptor.is_empty:
        lines.append("  (no streams found)")

    return "\n".join(lines)


def format_stream_line(stream: StreamInfo) -> str:
    """Format a single stream for human output.

    Args:
        stream: The stream to format.

    Returns:
        Formatted stream line.
    """
    kind = f"[{stream.stream_type.value}:{stream.type_index}]"
    parts = [f"#{stream.index}", kind]

    if stream.codec:
        parts.append(stream.codec)

    if isinstance(stream, VideoStreamInfo):
        if stream.width and stream.height:
            parts.append(f"{stream.width}x{stream.height}")
        if stream.frames_per_second:
            parts.append(f"@ {_format_number(stream.frames_per_second)}fps")

    if isinstance(stream, AudioStreamInfo):
        if stream.sample_rate:
            parts.append(f"{stream.sample_rate} Hz")
        if stream.channels:
            parts.append(f"{_format_number(stream.channels)}ch")

    if stream.language:
        parts.append(stream.language)

    if stream.title:
        parts.append(f'"{stream.title}"')

    if isinstance(stream, SubtitleStreamInfo) and stream.forced:
        parts.append("(forced)")

    return " ".join(parts)


def _format_number(value: float) -> str:
    # 2.0 -> "2", 23.976 -> "23.976"
    if value == int(value):
        return str(int(value))
    return f"{value:.3f}".rstrip("0").rstrip(".")


def _seconds(value: timedelta | None) -> float | None:
    return value.total_seconds() if value is not None else None


def format_json(descriptor: MediaDescriptor) -> str:
    """Format a media descriptor as JSON.

    Args:
        descriptor: The descriptor to format.

    Returns:
        JSON string.
    """
    return json.dumps(descriptor_to_dict(descriptor), indent=2)


def descriptor_to_dict(descriptor: MediaDescriptor) -> dict[str, Any]:
    """Convert a MediaDescriptor to a JSON-serializable dict."""
    return {
        "file": str(descriptor.file_path) if descriptor.file_path else None,
        "container_formats": list(descriptor.container_formats),
        "duration_seconds": _seconds(descriptor.duration),
        "bitrate_kbps": descriptor.bitrate_kbps,
        "streams": [stream_to_dict(s) for s in descriptor.streams],
    }


def stream_to_dict(stream: StreamInfo) -> dict[str, Any]:
    """Convert a stream record to a JSON-serializable dict.

    Optional fields are included only when they were read.
    """
    d: dict[str, Any] = {
        "index": stream.index,
        "type": stream.stream_type.value,
        "type_index": stream.type_index,
        "stream_id": stream.stream_id,
        "codec": stream.codec,
        "language": stream.language,
        "title": stream.title,
    }

    if stream.stream_type is StreamType.SUBTITLE:
        d["forced"] = getattr(stream, "forced", False)

    optional_fields = (
        "width",
        "height",
        "frames_per_second",
        "channels",
        "sample_rate",
        "bitrate",
    )
    for field in optional_fields:
        if (value := getattr(stream, field, None)) is not None:
            d[field] = value

    duration = getattr(stream, "duration", None)
    if duration is not None:
        d["duration_seconds"] = duration.total_seconds()

    return d


def format_music_human(info: MusicInfo) -> str:
    """Format music information for human-readable output."""
    rows = [
        ("File", info.file_path),
        ("Title", info.title),
        ("Album", info.album),
        ("Track", info.track),
        ("Date", info.release_date.isoformat() if info.release_date else None),
        ("Genres", ", ".join(info.genres) if info.genres else None),
        ("Language", info.language),
        ("Encoder", info.encoder),
        ("Duration", f"{info.duration}s" if info.duration is not None else None),
        ("Bitrate", f"{info.bitrate} kb/s" if info.bitrate is not None else None),
        ("Frequency", f"{info.frequency} Hz" if info.frequency else None),
        ("Channels", info.channels),
    ]
    return "\n".join(
        f"{label}: {value}" for label, value in rows if value is not None
    )


def music_to_dict(info: MusicInfo) -> dict[str, Any]:
    """Convert MusicInfo to a JSON-serializable dict."""
    return {
        "file": str(info.file_path) if info.file_path else None,
        "title": info.title,
        "album": info.album,
        "language": info.language,
        "track": info.track,
        "date": info.release_date.isoformat() if info.release_date else None,
        "genres": list(info.genres),
        "encoder": info.encoder,
        "duration_seconds": info.duration,
        "bitrate_kbps": info.bitrate,
        "frequency": info.frequency,
        "channels": info.channels,
    }


def format_music_json(info: MusicInfo) -> str:
    """Format music information as JSON."""
    return json.dumps(music_to_dict(info), indent=2)
