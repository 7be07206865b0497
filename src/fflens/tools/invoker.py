"""ToolInvoker: the seam between fflens and external processes.

Readers and the hardware probe never spawn processes directly. They are
handed a ToolInvoker and consume its synchronous ``ExecuteResult``. Tests
substitute a scripted fake.
"""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - only used for TimeoutExpired
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from fflens.core.subprocess_utils import run_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecuteResult:
    """Outcome of one tool invocation.

    A non-zero exit code is a normal outcome, not an exception.
    """

    exit_code: int
    output: str
    timed_out: bool = False

    def __iter__(self) -> Iterator[int | str]:
        # Allows ``exit_code, output = invoker.execute(...)``
        yield self.exit_code
        yield self.output


class ToolInvoker(Protocol):
    """Protocol for running an external tool synchronously."""

    def execute(
        self,
        command: str | Path,
        arguments: Sequence[str],
        silent: bool = False,
    ) -> ExecuteResult:
        """Run ``command`` with ``arguments`` and capture its output.

        Args:
            command: Executable path.
            arguments: Argument list, not shell-quoted.
            silent: Suppress logging of the command and its output.

        Returns:
            ExecuteResult with the exit code and the captured text.
        """
        ...


class SubprocessToolInvoker:
    """ToolInvoker backed by subprocess.

    stdout and stderr share one pipe, so the captured text keeps the
    order ffmpeg wrote it in.
    """

    def __init__(self, timeout: float | None = 120) -> None:
        self._timeout = timeout

    def execute(
        self,
        command: str | Path,
        arguments: Sequence[str],
        silent: bool = False,
    ) -> ExecuteResult:
        args: list[str | Path] = [command, *arguments]
        if not silent:
            logger.info("Executing: %s %s", command, " ".join(arguments))
        try:
            stdout, stderr, rc = run_command(
                args, timeout=self._timeout, merge_stderr=True
            )
        except subprocess.TimeoutExpired as e:
            partial = e.stdout or e.stderr or ""
            if isinstance(partial, bytes):
                partial = partial.decode("utf-8", errors="replace")
            return ExecuteResult(exit_code=-1, output=partial, timed_out=True)
        except OSError as e:
            logger.error("Failed to execute %s: %s", command, e)
            return ExecuteResult(exit_code=-1, output=str(e))

        output = stdout + stderr
        if not silent and rc != 0:
            logger.debug("%s exited with code %d", Path(command).name, rc)
        return ExecuteResult(exit_code=rc, output=output)
