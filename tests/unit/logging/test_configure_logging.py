"""Tests for configure_logging."""

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fflens.config.models import LoggingConfig
from fflens.logging.config import configure_logging
from fflens.logging.context import AnalysisContextFilter, analysis_context
from fflens.logging.handlers import JSONFormatter


def _close_handlers() -> None:
    for handler in logging.getLogger().handlers:
        handler.close()


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_default_stderr_handler(self) -> None:
        configure_logging(LoggingConfig(level="warning"))
        root = logging.getLogger()

        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert any(isinstance(f, AnalysisContextFilter) for f in handler.filters)

    def test_json_format(self) -> None:
        configure_logging(LoggingConfig(format="json"))
        assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

    def test_file_handler(self, temp_dir: Path) -> None:
        log_file = temp_dir / "logs" / "fflens.log"
        configure_logging(LoggingConfig(level="debug", file=log_file, format="json"))
        root = logging.getLogger()

        assert [type(h) for h in root.handlers] == [RotatingFileHandler]

        with analysis_context(file_path="/media/movie.mkv"):
            logging.getLogger("fflens.test").debug("reading")
        _close_handlers()

        entry = json.loads(log_file.read_text().strip())
        assert entry["message"] == "reading"
        assert entry["file_path"] == "/media/movie.mkv"

    def test_file_with_stderr(self, temp_dir: Path) -> None:
        configure_logging(
            LoggingConfig(file=temp_dir / "fflens.log", include_stderr=True)
        )
        handlers = logging.getLogger().handlers
        _close_handlers()

        assert len(handlers) == 2

    def test_replaces_existing_handlers(self) -> None:
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig())
        assert len(logging.getLogger().handlers) == 1

    def test_unopenable_file_falls_back_to_stderr(self, temp_dir: Path) -> None:
        blocker = temp_dir / "not-a-dir"
        blocker.touch()

        handlers = configure_logging(LoggingConfig(file=blocker / "fflens.log"))

        assert [type(h) for h in handlers] == [logging.StreamHandler]
        assert logging.getLogger().handlers == handlers

    def test_returns_installed_handlers(self, temp_dir: Path) -> None:
        handlers = configure_logging(
            LoggingConfig(file=temp_dir / "fflens.log", include_stderr=True)
        )
        _close_handlers()

        assert [type(h) for h in handlers] == [
            RotatingFileHandler,
            logging.StreamHandler,
        ]
