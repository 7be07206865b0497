"""CLI music command for fflens."""

import sys
from pathlib import Path

import click

from fflens.cli import get_cli_config
from fflens.cli.exit_codes import ExitCode
from fflens.introspector import (
    MediaIntrospectionError,
    MusicInfoReader,
    format_music_human,
    format_music_json,
)


@click.command("music")
@click.argument("file", type=click.Path(exists=False, path_type=Path))
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def music_command(ctx: click.Context, file: Path, json_output: bool) -> None:
    """Show tags and format details of an audio file."""
    config = get_cli_config(ctx)

    if not file.exists():
        click.echo(f"Error: File not found: {file}", err=True)
        sys.exit(ExitCode.TARGET_NOT_FOUND)

    reader = MusicInfoReader(
        ffmpeg_path=config.tools.ffmpeg,
        timeout=config.introspection.timeout_seconds,
    )
    try:
        info = reader.get_music_info(file)
    except MediaIntrospectionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.PARSE_ERROR)

    click.echo(format_music_json(info) if json_output else format_music_human(info))
