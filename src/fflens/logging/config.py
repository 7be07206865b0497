"""Root logger setup from a LoggingConfig."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from fflens.logging.context import AnalysisContextFilter
from fflens.logging.handlers import JSONFormatter

if TYPE_CHECKING:
    from fflens.config.models import LoggingConfig

logger = logging.getLogger(__name__)

# context_tag is "[movie.mkv] " or "[h264_nvenc] " during an analysis
TEXT_FORMAT = "%(asctime)s - %(context_tag)s%(name)s - %(levelname)s - %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def build_formatter(log_format: str) -> logging.Formatter:
    """Return the formatter for ``"text"`` or ``"json"`` output."""
    if log_format.casefold() == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)


def _open_log_file(config: LoggingConfig) -> tuple[logging.Handler | None, str]:
    """Open the rotating log file, returning (handler, error message)."""
    path = Path(config.file).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        return None, str(e)
    return handler, ""


def configure_logging(config: LoggingConfig) -> list[logging.Handler]:
    """Replace the root logger's handlers according to ``config``.

    Records go to the configured file, to stderr, or both. stderr is used
    whenever the file cannot be opened. Every handler carries an
    AnalysisContextFilter so records are tagged with the current file or
    encoder.

    Args:
        config: Logging configuration.

    Returns:
        The handlers now attached to the root logger.
    """
    level = logging.getLevelName(config.level.upper())
    formatter = build_formatter(config.format)
    context_filter = AnalysisContextFilter()

    handlers: list[logging.Handler] = []
    file_error = ""
    if config.file:
        file_handler, file_error = _open_log_file(config)
        if file_handler is not None:
            handlers.append(file_handler)
    if config.include_stderr or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root_logger.addHandler(handler)

    if file_error:
        logger.warning(
            "Could not open log file %s, logging to stderr: %s",
            config.file,
            file_error,
        )
    return handlers
