"""Unit tests for introspection result formatters."""

import json
from datetime import date, timedelta
from pathlib import Path

from fflens.domain.models import (
    AudioStreamInfo,
    MediaDescriptor,
    MusicInfo,
    SubtitleStreamInfo,
    VideoStreamInfo,
)
from fflens.introspector.formatters import (
    descriptor_to_dict,
    format_human,
    format_json,
    format_music_human,
    format_music_json,
    format_stream_line,
    stream_to_dict,
)


def _descriptor() -> MediaDescriptor:
    return MediaDescriptor(
        file_path=Path("/media/movie.mkv"),
        container_formats=("matroska", "webm"),
        duration=timedelta(hours=1, minutes=2, seconds=3.5),
        bitrate_kbps=9500,
        video_streams=(
            VideoStreamInfo(
                index=0,
                stream_id="0:0",
                codec="h264",
                width=1920,
                height=1080,
                frames_per_second=23.976,
                duration=timedelta(hours=1),
                bitrate=8000000,
            ),
        ),
        audio_streams=(
            AudioStreamInfo(
                index=1,
                stream_id="0:1",
                codec="dts",
                language="eng",
                title="Main",
                channels=5.1,
                sample_rate=48000,
            ),
        ),
        subtitle_streams=(
            SubtitleStreamInfo(
                index=2, type_index=1, stream_id="0:2", codec="subrip", forced=True
            ),
        ),
    )


class TestFormatHuman:
    """Tests for format_human()."""

    def test_header_and_sections(self) -> None:
        output = format_human(_descriptor())

        assert "File: /media/movie.mkv" in output
        assert "Container: matroska, webm" in output
        assert "Duration: 01:02:03.500" in output
        assert "Bitrate: 9500 kb/s" in output
        assert "  Video:" in output
        assert "  Audio:" in output
        assert "  Subtitles:" in output

    def test_empty_descriptor(self) -> None:
        output = format_human(MediaDescriptor.empty(Path("/media/x.mkv")))
        assert "(no streams found)" in output
        assert "Container:" not in output


class TestFormatStreamLine:
    """Tests for format_stream_line()."""

    def test_video_line(self) -> None:
        line = format_stream_line(_descriptor().video_streams[0])
        assert line == "#0 [video:0] h264 1920x1080 @ 23.976fps"

    def test_audio_line(self) -> None:
        line = format_stream_line(_descriptor().audio_streams[0])
        assert line == '#1 [audio:0] dts 48000 Hz 5.1ch eng "Main"'

    def test_forced_subtitle_line(self) -> None:
        line = format_stream_line(_descriptor().subtitle_streams[0])
        assert line == "#2 [subtitle:1] subrip (forced)"


class TestFormatJson:
    """Tests for JSON output."""

    def test_round_trips_through_json(self) -> None:
        data = json.loads(format_json(_descriptor()))

        assert data["file"] == "/media/movie.mkv"
        assert data["duration_seconds"] == 3723.5
        assert [s["type"] for s in data["streams"]] == ["video", "audio", "subtitle"]

    def test_optional_fields_only_when_present(self) -> None:
        audio = stream_to_dict(_descriptor().audio_streams[0])

        assert audio["channels"] == 5.1
        assert "bitrate" not in audio
        assert "duration_seconds" not in audio
        assert "forced" not in audio

    def test_subtitle_has_forced(self) -> None:
        subtitle = stream_to_dict(_descriptor().subtitle_streams[0])
        assert subtitle["forced"] is True
        assert subtitle["type_index"] == 1

    def test_empty_descriptor(self) -> None:
        data = descriptor_to_dict(MediaDescriptor.empty())
        assert data == {
            "file": None,
            "container_formats": [],
            "duration_seconds": None,
            "bitrate_kbps": None,
            "streams": [],
        }


class TestMusicFormatters:
    """Tests for music output."""

    INFO = MusicInfo(
        file_path=Path("/music/song.flac"),
        title="Song",
        track=3,
        release_date=date(2001, 6, 4),
        genres=("Jazz", "Fusion"),
        duration=245,
        frequency=44100,
        channels=2,
    )

    def test_human_skips_unset_fields(self) -> None:
        output = format_music_human(self.INFO)

        assert "Title: Song" in output
        assert "Date: 2001-06-04" in output
        assert "Genres: Jazz, Fusion" in output
        assert "Duration: 245s" in output
        assert "Album" not in output
        assert "Bitrate" not in output

    def test_json(self) -> None:
        data = json.loads(format_music_json(self.INFO))

        assert data["date"] == "2001-06-04"
        assert data["genres"] == ["Jazz", "Fusion"]
        assert data["album"] is None
