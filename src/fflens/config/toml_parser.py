"""TOML config file parsing."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class TomlParseError(Exception):
    """Raised when a config file exists but is not valid TOML."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML content.

    Raises:
        tomllib.TOMLDecodeError: If the content is not valid TOML.
    """
    return tomllib.loads(content)


def load_toml_file(path: Path, *, strict: bool = False) -> dict[str, Any]:
    """Load and parse a TOML file.

    Args:
        path: Path to the TOML file.
        strict: If True, raise TomlParseError for unreadable or invalid
            files instead of returning an empty dict.

    Returns:
        Parsed dictionary. Empty if the file doesn't exist, or if it cannot
        be parsed and ``strict`` is False.
    """
    if not path.exists():
        logger.debug("TOML file not found: %s", path)
        return {}

    try:
        return parse_toml(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        if strict:
            raise TomlParseError(path, str(e)) from e
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return {}
