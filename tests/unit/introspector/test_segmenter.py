"""Unit tests for stream block segmentation and classification."""

from fflens.domain.enums import StreamType
from fflens.introspector.classifier import classify_block, first_line
from fflens.introspector.segmenter import iter_stream_blocks, split_stream_blocks


class TestSplitStreamBlocks:
    """Tests for split_stream_blocks()."""

    def test_one_block_per_header(self, movie_mkv_output: str) -> None:
        """Every Stream #n:m header starts a block, in printed order."""
        output = movie_mkv_output
        blocks = list(split_stream_blocks(output))

        assert [stream_id for _, stream_id, _ in blocks] == [
            "0:0",
            "0:1",
            "0:2",
            "0:3",
            "0:4",
            "0:5",
        ]
        assert [position for position, _, _ in blocks] == [0, 1, 2, 3, 4, 5]

    def test_block_runs_to_next_header(self, movie_mkv_output: str) -> None:
        """A block includes its tag lines but not the next header."""
        output = movie_mkv_output
        _, _, text = list(split_stream_blocks(output))[1]

        assert text.startswith("Stream #0:1(eng): Audio: dts")
        assert "English DTS" in text
        assert "Stream #0:2" not in text

    def test_container_lines_are_not_in_any_block(self, movie_mkv_output: str) -> None:
        """Lines before the first header belong to no stream."""
        output = movie_mkv_output
        texts = [text for _, _, text in split_stream_blocks(output)]

        assert not any("Example Movie" in text for text in texts)
        assert not any("Chapter 1" in text for text in texts)

    def test_no_headers(self) -> None:
        """Output without stream headers yields nothing."""
        assert list(split_stream_blocks("Input #0, mp3, from 'x':\n")) == []

    def test_is_lazy(self, show_mp4_output: str) -> None:
        """The sequence is a generator, consumed once."""
        blocks = split_stream_blocks(show_mp4_output)
        assert next(blocks)[1] == "0:0"
        assert len(list(blocks)) == 2
        assert list(blocks) == []


class TestIterStreamBlocks:
    """Tests for iter_stream_blocks()."""

    def test_unknown_blocks_dropped(self, movie_mkv_output: str) -> None:
        """Attachment and data streams are skipped, positions are kept."""
        blocks = list(iter_stream_blocks(movie_mkv_output))

        assert [b.stream_type for b in blocks] == [
            StreamType.VIDEO,
            StreamType.AUDIO,
            StreamType.AUDIO,
            StreamType.SUBTITLE,
            StreamType.SUBTITLE,
        ]
        assert [b.position for b in blocks] == [0, 1, 2, 3, 4]

    def test_dropped_block_keeps_later_positions(self) -> None:
        """A dropped block still counts toward the global position."""
        output = (
            "  Stream #0:0: Data: bin_data\n"
            "  Stream #0:1: Audio: flac, 44100 Hz, stereo, s16\n"
        )
        blocks = list(iter_stream_blocks(output))

        assert len(blocks) == 1
        assert blocks[0].position == 1
        assert blocks[0].stream_id == "0:1"

    def test_header_property(self, show_mp4_output: str) -> None:
        """header is the block's first line."""
        block = next(iter_stream_blocks(show_mp4_output))
        assert block.header.startswith("Stream #0:0[0x1](und): Video: h264")


class TestClassifyBlock:
    """Tests for classify_block()."""

    def test_video(self) -> None:
        text = "Stream #0:0: Video: hevc (Main 10), yuv420p10le, 3840x2160"
        assert classify_block(text) == StreamType.VIDEO

    def test_audio(self) -> None:
        text = "Stream #0:1(eng): Audio: eac3, 48000 Hz, 5.1(side), fltp"
        assert classify_block(text) == StreamType.AUDIO

    def test_subtitle(self) -> None:
        assert classify_block("Stream #0:2(eng): Subtitle: ass") == StreamType.SUBTITLE

    def test_unknown(self) -> None:
        assert classify_block("Stream #0:3: Attachment: ttf") == StreamType.UNKNOWN

    def test_marker_in_tag_value_is_ignored(self) -> None:
        """A title that contains a marker does not reclassify the stream."""
        text = (
            "Stream #0:2(eng): Subtitle: subrip\n"
            "    Metadata:\n"
            "      title           : Commentary Audio: Director\n"
        )
        assert classify_block(text) == StreamType.SUBTITLE

    def test_marker_needs_surrounding_spaces(self) -> None:
        """"Video:" without the leading space is not a marker."""
        assert classify_block("Stream #0:0:Video:h264") == StreamType.UNKNOWN

    def test_first_line_skips_blank_lines(self) -> None:
        assert first_line("\n\n  Stream #0:0: Video: h264\nmore") == (
            "  Stream #0:0: Video: h264"
        )
        assert first_line("") == ""
