"""Introspector module for fflens.

This module reads stream information from ffmpeg's diagnostic output:

- MediaIntrospector: Protocol defining the introspection interface
- FFmpegIntrospector: Production implementation using ``ffmpeg -i``
- MusicInfoReader: Tag reader for audio files
- MediaIntrospectionError: Exception for introspection failures

Parsing stages, usable on captured text:
- iter_stream_blocks: one classified block per stream header
- parse_ffmpeg_output: assemble a MediaDescriptor
- parse_music_output: assemble a MusicInfo

Formatters for introspection results:
- format_human / format_json: MediaDescriptor output
- format_music_human / format_music_json: MusicInfo output
"""

from fflens.introspector.classifier import classify_block
from fflens.introspector.ffmpeg import FFmpegIntrospector
from fflens.introspector.formatters import (
    descriptor_to_dict,
    format_human,
    format_json,
    format_music_human,
    format_music_json,
    format_stream_line,
    music_to_dict,
    stream_to_dict,
)
from fflens.introspector.interface import (
    MediaIntrospectionError,
    MediaIntrospector,
)
from fflens.introspector.music import MusicInfoReader, parse_music_output
from fflens.introspector.parsers import (
    find_read_failure,
    parse_audio_stream,
    parse_ffmpeg_output,
    parse_subtitle_stream,
    parse_video_stream,
)
from fflens.introspector.segmenter import StreamBlock, iter_stream_blocks

__all__ = [
    "MediaIntrospector",
    "MediaIntrospectionError",
    "FFmpegIntrospector",
    "MusicInfoReader",
    # Parsing
    "StreamBlock",
    "classify_block",
    "iter_stream_blocks",
    "find_read_failure",
    "parse_ffmpeg_output",
    "parse_video_stream",
    "parse_audio_stream",
    "parse_subtitle_stream",
    "parse_music_output",
    # Formatters
    "descriptor_to_dict",
    "format_human",
    "format_json",
    "format_music_human",
    "format_music_json",
    "format_stream_line",
    "music_to_dict",
    "stream_to_dict",
]
