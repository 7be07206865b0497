"""Unit tests for external tool discovery."""

from pathlib import Path
from unittest.mock import patch

import pytest

from fflens.tools.detection import ToolNotFoundError, find_tool, require_tool


class TestFindTool:
    """Tests for find_tool()."""

    def test_configured_path(self, fake_ffmpeg: Path) -> None:
        with patch("fflens.tools.detection.shutil.which", return_value=None):
            assert find_tool("ffmpeg", fake_ffmpeg) == fake_ffmpeg

    def test_falls_back_to_path(self, temp_dir: Path) -> None:
        with patch(
            "fflens.tools.detection.shutil.which", return_value="/usr/bin/ffmpeg"
        ):
            found = find_tool("ffmpeg", temp_dir / "missing")
        assert found == Path("/usr/bin/ffmpeg")

    def test_directory_is_not_a_tool(
        self, temp_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with patch("fflens.tools.detection.shutil.which", return_value=None):
            assert find_tool("ffmpeg", temp_dir) is None
        assert "not a file" in caplog.text

    def test_not_found(self) -> None:
        with patch("fflens.tools.detection.shutil.which", return_value=None):
            assert find_tool("ffmpeg") is None


class TestRequireTool:
    """Tests for require_tool()."""

    def test_raises_when_missing(self) -> None:
        with patch("fflens.tools.detection.shutil.which", return_value=None):
            with pytest.raises(ToolNotFoundError, match="ffmpeg not found"):
                require_tool("ffmpeg")

    def test_returns_path(self, fake_ffmpeg: Path) -> None:
        assert require_tool("ffmpeg", fake_ffmpeg) == fake_ffmpeg
