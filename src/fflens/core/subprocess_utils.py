"""Subprocess helper behind every ffmpeg invocation.

ffmpeg writes its stream listing and its complaints to stderr, interleaved
with anything on stdout. ``run_command(..., merge_stderr=True)`` keeps
that interleaving by sending both streams through one pipe.
"""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - subprocess is required for FFmpeg invocation
import time
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Arguments shown in the timeout warning before the list is elided
_SUMMARY_ARGS = 3


def _summarize(args: list[str]) -> str:
    if len(args) <= _SUMMARY_ARGS:
        return " ".join(args)
    return " ".join(args[:_SUMMARY_ARGS]) + "..."


def run_command(
    args: list[str | Path],
    timeout: float | None = 120,
    capture_output: bool = True,
    text: bool = True,
    errors: str = "replace",
    *,
    merge_stderr: bool = False,
    **kwargs: Any,
) -> tuple[str, str, int]:
    """Run an external command and collect its output.

    Args:
        args: Command and arguments. Path objects are converted to strings.
        timeout: Seconds before the child is killed; None waits forever.
        capture_output: Capture stdout/stderr (default True).
        text: Decode output as text (default True).
        errors: Decoding error mode. ffmpeg echoes raw tag bytes, so the
            default replaces undecodable ones.
        merge_stderr: Send stderr into the stdout pipe. The returned stderr
            is then always empty.
        **kwargs: Additional subprocess.run arguments.

    Returns:
        Tuple of (stdout, stderr, returncode).

    Raises:
        subprocess.TimeoutExpired: If the command times out. The child has
            already been killed; any partial output is on the exception.
        FileNotFoundError: If the executable does not exist.
    """
    str_args = [str(arg) for arg in args]
    command_name = Path(str_args[0]).name if str_args else "unknown"
    log_extra = {"command": command_name, "arg_count": len(str_args)}

    if merge_stderr and capture_output:
        # capture_output cannot be combined with explicit stdout/stderr
        kwargs.update(stdout=subprocess.PIPE, stderr=subprocess.STDOUT)
        capture_output = False

    logger.debug("Executing command: %s", " ".join(str_args), extra=log_extra)
    started = time.monotonic()
    try:
        result = subprocess.run(  # nosec B603 - caller validates args
            str_args,
            capture_output=capture_output,
            text=text,
            errors=errors,
            timeout=timeout,
            **kwargs,
        )
    except subprocess.TimeoutExpired:
        logger.warning(
            "Command timed out after %ss: %s",
            timeout,
            _summarize(str_args),
            extra={
                **log_extra,
                "timeout_seconds": timeout,
                "elapsed_seconds": round(time.monotonic() - started, 3),
            },
        )
        raise

    logger.debug(
        "Command completed",
        extra={
            **log_extra,
            "elapsed_seconds": round(time.monotonic() - started, 3),
            "returncode": result.returncode,
        },
    )
    return result.stdout or "", result.stderr or "", result.returncode
