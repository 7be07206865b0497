"""CLI inspect command for fflens."""

import logging
import sys
from pathlib import Path

import click

from fflens.cli import get_cli_config
from fflens.cli.exit_codes import ExitCode
from fflens.introspector import (
    FFmpegIntrospector,
    MediaIntrospectionError,
    format_human,
    format_json,
)
from fflens.tools import find_tool

logger = logging.getLogger(__name__)


@click.command("inspect")
@click.argument("file", type=click.Path(exists=False, path_type=Path))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["human", "json"]),
    default="human",
    help="Output format (default: human)",
)
@click.pass_context
def inspect_command(ctx: click.Context, file: Path, output_format: str) -> None:
    """Inspect a media file and display stream information.

    FILE is the path to the media file to inspect.
    """
    config = get_cli_config(ctx)

    if not file.exists():
        click.echo(f"Error: File not found: {file}", err=True)
        sys.exit(ExitCode.TARGET_NOT_FOUND)

    if find_tool("ffmpeg", config.tools.ffmpeg) is None:
        click.echo(
            "Error: ffmpeg is not installed or not in PATH.\n"
            "Install ffmpeg, or set FFLENS_FFMPEG_PATH or --ffmpeg.",
            err=True,
        )
        sys.exit(ExitCode.FFMPEG_NOT_FOUND)

    introspector = FFmpegIntrospector(
        ffmpeg_path=config.tools.ffmpeg,
        timeout=config.introspection.timeout_seconds,
    )
    try:
        descriptor = introspector.get_file_info(file)
    except MediaIntrospectionError as e:
        click.echo(f"Error: Could not parse file: {file}", err=True)
        click.echo(f"Reason: {e}", err=True)
        sys.exit(ExitCode.PARSE_ERROR)

    if output_format == "json":
        click.echo(format_json(descriptor))
    else:
        click.echo(format_human(descriptor))

    if descriptor.is_empty:
        sys.exit(ExitCode.NO_STREAMS_FOUND)
