"""CLI module for fflens."""

import logging
import sys
from pathlib import Path

import click

from fflens.cli.exit_codes import ExitCode
from fflens.config import FflensConfig, TomlParseError, get_config
from fflens.logging import configure_logging

logger = logging.getLogger(__name__)


def get_cli_config(ctx: click.Context) -> FflensConfig:
    """Return the configuration built by the ``main`` group."""
    return ctx.find_root().obj["config"]


@click.group()
@click.version_option(package_name="fflens")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Config file (default: ~/.fflens/config.toml).",
)
@click.option(
    "--ffmpeg",
    "ffmpeg_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to the ffmpeg executable.",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    ffmpeg_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """fflens - Read stream information and probe hardware encoders with ffmpeg."""
    ctx.ensure_object(dict)

    try:
        config = get_config(
            config_path=config_path,
            ffmpeg_path=ffmpeg_path,
            log_level=log_level,
            log_file=log_file,
            log_format="json" if log_json else None,
            strict=config_path is not None,
        )
    except (TomlParseError, ValueError) as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    configure_logging(config.logging)
    ctx.obj["config"] = config


def _register_commands():
    from fflens.cli.encoders import encoders_command
    from fflens.cli.inspect import inspect_command
    from fflens.cli.music import music_command
    from fflens.cli.probe import probe_command

    main.add_command(inspect_command)
    main.add_command(music_command)
    main.add_command(encoders_command)
    main.add_command(probe_command)


_register_commands()
