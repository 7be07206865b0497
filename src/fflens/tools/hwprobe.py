"""Hardware encoder capability probe.

An encoder being listed by ``ffmpeg -encoders`` does not mean it works on
this machine. The probe runs a one-frame trial encode of a synthetic black
source into the null muxer and trusts only a clean exit with no output.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from fflens.logging.context import analysis_context
from fflens.tools.detection import ToolNotFoundError, require_tool
from fflens.tools.encoders import EncoderTable
from fflens.tools.invoker import ExecuteResult, ToolInvoker
from fflens.tools.models import EncoderProfile, HardwareEncoder, HardwareProbeResult

logger = logging.getLogger(__name__)

DEFAULT_RETRY_DELAY_SECONDS = 2.0
DEFAULT_TRIAL_FRAME_SIZE = "1080x1080"


def build_trial_arguments(
    profile: EncoderProfile, frame_size: str = DEFAULT_TRIAL_FRAME_SIZE
) -> list[str]:
    """Build ffmpeg arguments for a one-frame trial encode.

    Only errors are printed, so any output at all is an encoder complaint.

    Args:
        profile: Encoder trial profile.
        frame_size: Size of the synthetic source ("WxH").

    Returns:
        Argument list (without the ffmpeg executable).
    """
    return [
        "-loglevel",
        "error",
        "-f",
        "lavfi",
        "-i",
        f"color=black:s={frame_size}",
        "-vframes",
        "1",
        "-an",
        "-c:v",
        *profile.trial_params,
        "-f",
        "null",
        "-",
    ]


def is_trial_successful(result: ExecuteResult) -> bool:
    """A trial passes only with exit code 0 and whitespace-only output."""
    return result.exit_code == 0 and not result.output.strip()


class HardwareCapabilityProbe:
    """Determines whether hardware encoders are usable on this machine.

    Each call to ``probe()`` is independent: the probe keeps no state
    between calls, so one instance may be shared across threads as long as
    the invoker is.
    """

    def __init__(
        self,
        invoker: ToolInvoker,
        table: EncoderTable,
        ffmpeg_path: Path | None = None,
        retry_delay: float = DEFAULT_RETRY_DELAY_SECONDS,
        frame_size: str = DEFAULT_TRIAL_FRAME_SIZE,
    ) -> None:
        """Initialize the probe.

        Args:
            invoker: Runs the trial encodes.
            table: Encoder profiles and families to consult.
            ffmpeg_path: Configured ffmpeg path; PATH is searched otherwise.
            retry_delay: Seconds to wait before retrying a family flagged
                for transient false negatives.
            frame_size: Size of the synthetic trial source.
        """
        self._invoker = invoker
        self._table = table
        self._ffmpeg_path = ffmpeg_path
        self._retry_delay = retry_delay
        self._frame_size = frame_size

    @property
    def table(self) -> EncoderTable:
        return self._table

    def probe(self, encoder: HardwareEncoder | str) -> HardwareProbeResult:
        """Probe one encoder.

        Args:
            encoder: Enum member or ffmpeg encoder name.

        Returns:
            HardwareProbeResult. ``usable`` is False when ffmpeg cannot be
            found or the trial encode fails.

        Raises:
            KeyError: If the encoder has no profile in the table.
            ValueError: If an encoder name is not recognized.
        """
        profile = self._table.get(encoder)

        with analysis_context(encoder=profile.encoder.value):
            try:
                ffmpeg = require_tool("ffmpeg", self._ffmpeg_path)
            except ToolNotFoundError as e:
                logger.error("FFmpeg tool not found: %s", e)
                return HardwareProbeResult(
                    encoder=profile.encoder, usable=False, attempts=0
                )

            result = self._run_trial(ffmpeg, profile)
            attempts = 1

            family = self._table.family_for(profile)
            if (
                not is_trial_successful(result)
                and family is not None
                and family.transient_false_negative
            ):
                logger.info(
                    "%s reported failure on first trial, retrying in %ss",
                    family.label,
                    self._retry_delay,
                )
                time.sleep(self._retry_delay)
                result = self._run_trial(ffmpeg, profile)
                attempts += 1

            usable = is_trial_successful(result)
            logger.debug(
                "Probe result for %s: usable=%s after %d attempt(s)",
                profile.encoder.value,
                usable,
                attempts,
            )
            return HardwareProbeResult(
                encoder=profile.encoder,
                usable=usable,
                output=result.output,
                attempts=attempts,
            )

    def probe_all(self) -> list[HardwareProbeResult]:
        """Probe every encoder in the table, one after another."""
        return [self.probe(profile.encoder) for profile in self._table]

    def _run_trial(self, ffmpeg: Path, profile: EncoderProfile) -> ExecuteResult:
        result = self._invoker.execute(
            ffmpeg,
            build_trial_arguments(profile, self._frame_size),
            silent=True,
        )
        if not is_trial_successful(result):
            logger.warning(
                "Can't process '%s': %s",
                profile.trial_params_text,
                result.output.strip(),
                extra={"exit_code": result.exit_code, "timed_out": result.timed_out},
            )
        return result
