"""Structured logging module for fflens.

Provides configurable logging with JSON format support and file rotation,
plus per-analysis context tagging.
"""

from fflens.logging.config import configure_logging
from fflens.logging.context import (
    AnalysisContextFilter,
    analysis_context,
    get_analysis_context,
)
from fflens.logging.handlers import JSONFormatter

__all__ = [
    "AnalysisContextFilter",
    "JSONFormatter",
    "analysis_context",
    "configure_logging",
    "get_analysis_context",
]
