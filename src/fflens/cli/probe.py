"""CLI probe command: check which hardware encoders work on this machine."""

import json
import sys

import click

from fflens.cli import get_cli_config
from fflens.cli.exit_codes import ExitCode
from fflens.tools import (
    EncoderTable,
    HardwareCapabilityProbe,
    HardwareEncoder,
    SubprocessToolInvoker,
)


def _format_status(usable: bool) -> str:
    """Format status for display."""
    return "✓" if usable else "✗"


@click.command("probe")
@click.argument("encoders", nargs=-1)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def probe_command(
    ctx: click.Context, encoders: tuple[str, ...], json_output: bool
) -> None:
    """Probe hardware encoders with a one-frame trial encode.

    ENCODERS are ffmpeg encoder names (e.g. h264_nvenc). All known
    encoders are probed when none are given.

    Exit codes:
      0  - Every probed encoder is usable
      40 - At least one probed encoder is not usable
    """
    config = get_cli_config(ctx)
    table = EncoderTable.default()

    try:
        selected = [HardwareEncoder.from_name(name) for name in encoders]
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="ENCODERS") from e
    if not selected:
        selected = [profile.encoder for profile in table]

    probe = HardwareCapabilityProbe(
        invoker=SubprocessToolInvoker(timeout=config.probe.trial_timeout_seconds),
        table=table,
        ffmpeg_path=config.tools.ffmpeg,
        retry_delay=config.probe.retry_delay_seconds,
        frame_size=config.probe.trial_frame_size,
    )
    results = [probe.probe(encoder) for encoder in selected]

    if json_output:
        data = [
            {
                "encoder": r.encoder.value,
                "usable": r.usable,
                "attempts": r.attempts,
                "output": r.output.strip(),
            }
            for r in results
        ]
        click.echo(json.dumps(data, indent=2))
    else:
        for r in results:
            label = table.get(r.encoder).label
            click.echo(f"{_format_status(r.usable)} {r.encoder.value:<12} {label}")

    if not all(r.usable for r in results):
        sys.exit(ExitCode.ENCODER_UNAVAILABLE)
