"""Tests for JSONFormatter."""

import json
import logging
import sys

from fflens.logging.context import AnalysisContextFilter, analysis_context
from fflens.logging.handlers import JSONFormatter


def _format(record: logging.LogRecord) -> dict:
    AnalysisContextFilter().filter(record)
    return json.loads(JSONFormatter().format(record))


class TestJSONFormatter:
    """Tests for JSONFormatter output."""

    def test_basic_fields(self) -> None:
        record = logging.LogRecord(
            "fflens.tools", logging.WARNING, __file__, 1, "hello %s", ("x",), None
        )
        entry = _format(record)

        assert entry["level"] == "WARNING"
        assert entry["message"] == "hello x"
        assert entry["logger"] == "fflens.tools"
        assert entry["timestamp"].endswith("+00:00")
        assert "context" not in entry
        assert "encoder" not in entry

    def test_extra_and_analysis_context(self) -> None:
        record = logging.LogRecord(
            "fflens.tools", logging.INFO, __file__, 1, "probe", (), None
        )
        record.attempt = 2
        with analysis_context(encoder="h264_amf"):
            entry = _format(record)

        assert entry["encoder"] == "h264_amf"
        assert entry["context"] == {"attempt": 2}
        assert "file_path" not in entry

    def test_exception(self) -> None:
        try:
            raise ValueError("bad")
        except ValueError:
            exc_info = sys.exc_info()
        record = logging.LogRecord(
            "fflens", logging.ERROR, __file__, 1, "failed", (), exc_info
        )
        entry = _format(record)

        assert "ValueError: bad" in entry["exception"]
