"""Shared test fixtures for fflens."""

import logging
import shutil
import tempfile
from collections.abc import Sequence
from pathlib import Path

import pytest

from fflens.config.loader import clear_config_cache
from fflens.tools.invoker import ExecuteResult

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_ffmpeg_fixture(name: str) -> str:
    """Load captured ffmpeg output by name.

    Args:
        name: Name of the fixture file (without .txt extension).

    Returns:
        The captured text.
    """
    return (FIXTURES_DIR / "ffmpeg" / f"{name}.txt").read_text(encoding="utf-8")


class FakeInvoker:
    """ToolInvoker that records calls and replays scripted results.

    When the script runs out, the last result is repeated.
    """

    def __init__(self, *results: ExecuteResult) -> None:
        self._results = list(results) or [ExecuteResult(exit_code=0, output="")]
        self.calls: list[tuple[str, list[str], bool]] = []

    def execute(
        self,
        command: str | Path,
        arguments: Sequence[str],
        silent: bool = False,
    ) -> ExecuteResult:
        self.calls.append((str(command), list(arguments), silent))
        if len(self._results) > 1:
            return self._results.pop(0)
        return self._results[0]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test isolation."""
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture
def fake_ffmpeg(temp_dir: Path) -> Path:
    """An executable file standing in for a configured ffmpeg path."""
    path = temp_dir / "ffmpeg"
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(0o755)
    return path


@pytest.fixture
def media_file(temp_dir: Path) -> Path:
    """An existing (empty) media file."""
    path = temp_dir / "movie.mkv"
    path.touch()
    return path


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, temp_dir: Path):
    """Keep tests away from the user's config file and FFLENS_* variables."""
    for var in (
        "FFLENS_FFMPEG_PATH",
        "FFLENS_PROBE_RETRY_DELAY",
        "FFLENS_PROBE_TIMEOUT",
        "FFLENS_INTROSPECT_TIMEOUT",
        "FFLENS_LOG_LEVEL",
        "FFLENS_LOG_FILE",
        "FFLENS_LOG_FORMAT",
        "FFLENS_LOG_INCLUDE_STDERR",
        "FFLENS_LOG_MAX_BYTES",
        "FFLENS_LOG_BACKUP_COUNT",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("FFLENS_CONFIG_PATH", str(temp_dir / "missing.toml"))
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handlers installed by configure_logging() during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def movie_mkv_output() -> str:
    """Matroska file: DURATION/BPS tags, two audio, forced subtitle, font."""
    return load_ffmpeg_fixture("movie_mkv")


@pytest.fixture
def show_mp4_output() -> str:
    """MP4 file without per-stream tags, with a timecode data stream."""
    return load_ffmpeg_fixture("show_mp4")


@pytest.fixture
def music_mp3_output() -> str:
    """MP3 file with ID3 tags and cover art."""
    return load_ffmpeg_fixture("music_mp3")


@pytest.fixture
def invalid_data_output() -> str:
    """ffmpeg's complaint about a file it cannot demux."""
    return load_ffmpeg_fixture("invalid_data")


@pytest.fixture
def make_invoker():
    """Factory for FakeInvoker: ``make_invoker(result, ...)``."""
    return FakeInvoker
