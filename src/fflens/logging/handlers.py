"""JSON log output for fflens.

One JSON object per line. The analysis context (file being read, encoder
being probed) is promoted to top-level keys so a log can be filtered per
file or per encoder; anything passed with ``extra=`` lands in ``context``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries, derived from a blank record so new
# Python versions are covered without a hand-kept list.
_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}

# Set by AnalysisContextFilter
_ANALYSIS_ATTRS: tuple[str, ...] = ("file_path", "encoder")
_FILTER_ATTRS: frozenset[str] = frozenset({*_ANALYSIS_ATTRS, "context_tag"})


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Keys: ``timestamp`` (ISO-8601 UTC), ``level``, ``logger``, ``message``,
    then ``file_path`` / ``encoder`` when an analysis is in progress,
    ``context`` for extra attributes and ``exception`` for tracebacks.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for attr in _ANALYSIS_ATTRS:
            value = getattr(record, attr, None)
            if value:
                entry[attr] = value

        extra = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS
            and key not in _FILTER_ATTRS
            and not key.startswith("_")
        }
        if extra:
            entry["context"] = extra

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
