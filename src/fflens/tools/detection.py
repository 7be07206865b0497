"""External tool discovery.

Resolves the ffmpeg executable from configuration or PATH.
"""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


class ToolNotFoundError(Exception):
    """Raised when a required external tool cannot be resolved."""

    pass


def find_tool(name: str, configured_path: Path | None = None) -> Path | None:
    """Find a tool executable.

    Args:
        name: Tool name (e.g., "ffmpeg").
        configured_path: Optional configured path override.

    Returns:
        Path to tool executable, or None if not found.
    """
    # Try configured path first
    if configured_path:
        configured_path = Path(configured_path).expanduser()
        if configured_path.is_file():
            return configured_path
        logger.warning(
            "Configured path for %s is not a file: %s", name, configured_path
        )

    # Fall back to PATH lookup
    which_result = shutil.which(name)
    if which_result:
        return Path(which_result)

    return None


def require_tool(name: str, configured_path: Path | None = None) -> Path:
    """Resolve a tool executable or raise.

    Args:
        name: Tool name (e.g., "ffmpeg").
        configured_path: Optional configured path override.

    Returns:
        Path to tool executable.

    Raises:
        ToolNotFoundError: If the tool cannot be found.
    """
    path = find_tool(name, configured_path)
    if path is None:
        raise ToolNotFoundError(
            f"{name} not found: {configured_path or 'not configured'} "
            f"and not in PATH"
        )
    return path
