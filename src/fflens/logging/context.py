"""Analysis context for structured logging.

Tags log records with the file being read or the encoder being probed,
using contextvars so concurrent analyses in different threads do not see
each other's context.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_file_path: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "file_path", default=None
)
_encoder: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "encoder", default=None
)


@contextmanager
def analysis_context(
    file_path: Path | str | None = None,
    encoder: str | None = None,
) -> Generator[None, None, None]:
    """Context manager for a single file read or encoder probe.

    Values not given are inherited from any enclosing context. The previous
    context is restored on exit.

    Args:
        file_path: File being analyzed.
        encoder: Encoder being probed (e.g. "h264_nvenc").

    Example:
        with analysis_context(file_path="/media/movie.mkv"):
            logger.info("Reading")  # record carries file_path
    """
    file_token = (
        _file_path.set(str(file_path)) if file_path is not None else None
    )
    encoder_token = _encoder.set(encoder) if encoder is not None else None
    try:
        yield
    finally:
        if encoder_token is not None:
            _encoder.reset(encoder_token)
        if file_token is not None:
            _file_path.reset(file_token)


def get_analysis_context() -> tuple[str | None, str | None]:
    """Get current analysis context.

    Returns:
        Tuple of (file_path, encoder), either may be None.
    """
    return _file_path.get(), _encoder.get()


class AnalysisContextFilter(logging.Filter):
    """Logging filter that injects analysis context into log records.

    Adds file_path and encoder attributes for JSON output and a compact
    context_tag such as "[movie.mkv] " or "[h264_nvenc] " for text output.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        file_path, encoder = get_analysis_context()

        record.file_path = file_path
        record.encoder = encoder

        if encoder:
            record.context_tag = f"[{encoder}] "
        elif file_path:
            record.context_tag = f"[{Path(file_path).name}] "
        else:
            record.context_tag = ""

        return True  # Never filter out records
