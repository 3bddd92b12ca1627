"""New command for Texty CLI."""

from __future__ import annotations

import shutil

import click

from ..editor import EditorError
from ..errors import TextyError
from ..request import resolve_request
from ..services.files import create_file, open_created_file
from ._common import TextyCliError, get_app, get_launcher, warn


@click.command(name="new")
@click.option("-n", "--name", "file_name", default=None, help="Name of the file.")
@click.option(
    "-d",
    "--dir",
    "target_dir",
    default=None,
    help="Directory to create the file in (created when missing).",
)
@click.option(
    "-t",
    "--content",
    default=None,
    help="Initial content, written verbatim. Prompted for when omitted.",
)
@click.option(
    "-f",
    "--force",
    is_flag=True,
    help="Overwrite an existing file without asking.",
)
@click.option(
    "-e",
    "--editor",
    default=None,
    help="Editor to open the file with (defaults to config, then detection).",
)
@click.pass_context
def new(
    ctx: click.Context,
    file_name: str | None,
    target_dir: str | None,
    content: str | None,
    force: bool,
    editor: str | None,
) -> None:
    """Create a text file and open it in an editor."""

    app = get_app(ctx)

    try:
        request = resolve_request(
            file_name=file_name,
            target_dir=target_dir,
            content=content,
            force=force,
            editor=editor,
            config=app.config,
            prompt=_prompt,
            which=shutil.which,
        )
        path = create_file(request, confirm=_confirm, warn=warn)
    except TextyError as exc:
        raise TextyCliError.from_error(exc) from exc

    if path is None:
        click.echo("Aborted; existing file left unchanged.")
        return

    click.secho(f"Texty: created {path}", fg="green")

    try:
        created = open_created_file(
            app, path, request.editor, launcher=get_launcher(ctx), warn=warn
        )
    except EditorError as exc:
        raise TextyCliError.from_error(exc) from exc

    if created.used_fallback:
        click.echo(f"Opened {created.path} in fallback editor '{created.editor}'")


def _prompt(text: str, default: str | None) -> str:
    # An empty default lets a blank answer through instead of re-prompting.
    try:
        return click.prompt(
            text, default=default or "", show_default=bool(default)
        )
    except click.Abort:
        # Closed stdin counts as a blank answer.
        click.echo(err=True)
        return ""


def _confirm(text: str) -> bool:
    answer = _prompt(f"{text} [y/N]", None)
    return answer.strip().lower() in ("y", "yes")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(new)
