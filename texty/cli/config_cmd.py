"""Config command for Texty CLI."""

from __future__ import annotations

from pathlib import Path

import click

from .. import config as config_module
from ..config import ConfigError, bootstrap_config_file, load_config
from ._common import TextyCliError, warn


@click.command(name="config")
@click.option(
    "-p",
    "--path",
    "print_path",
    is_flag=True,
    help="Print the configuration file location instead of opening it.",
)
@click.pass_context
def config(ctx: click.Context, print_path: bool) -> None:
    """Create the Texty configuration file if needed and open it."""

    selected: Path | None = ctx.obj.get("config_path")
    config_path = selected or config_module.DEFAULT_CONFIG_PATH

    if print_path:
        click.echo(str(config_path))
        return

    try:
        created = bootstrap_config_file(config_path)
    except OSError as exc:
        raise TextyCliError(f"Failed to create {config_path}: {exc}") from exc
    if created:
        click.echo(f"Created configuration at {config_path}")

    click.edit(filename=str(config_path), editor=_configured_editor(config_path))

    # Report mistakes right away rather than on the next 'texty new'.
    try:
        load_config(config_path)
    except ConfigError as exc:
        warn(f"Warning: {exc}")


def _configured_editor(config_path: Path) -> str | None:
    # A broken file must still be editable, so parse errors fall back to $EDITOR.
    try:
        return load_config(config_path).editor
    except ConfigError:
        return None


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(config)
