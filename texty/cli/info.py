"""Info command for Texty CLI."""

from __future__ import annotations

import shutil
from typing import Any

import click
import yaml

from ..app import AppContext
from ..request import detect_default_editor
from ._common import get_app


@click.command(name="info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Display the effective configuration and known editors."""

    app = get_app(ctx)
    click.echo(yaml.safe_dump(_describe(app), sort_keys=False).strip())


def _describe(app: AppContext) -> dict[str, Any]:
    config = app.config
    default_editor = config.editor or detect_default_editor(
        config.probe_editors, config.fallback_editor, shutil.which
    )

    editors: dict[str, dict[str, Any]] = {}
    for profile in app.profiles.values():
        editors.setdefault(
            profile.name,
            {
                "commands": list(profile.commands),
                "terminal": profile.terminal,
                "description": profile.description,
            },
        )

    return {
        "config_file": str(config.source_path) if config.source_path else None,
        "editor": config.editor,
        "default_editor": default_editor,
        "fallback_editor": config.fallback_editor,
        "default_dir": str(config.default_dir) if config.default_dir else None,
        "probe_editors": list(config.probe_editors),
        "editors": editors,
    }


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(info)
