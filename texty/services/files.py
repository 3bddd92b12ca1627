"""High-level file creation workflow used by the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from ..app import AppContext
from ..editor import ProcessLauncher, WarnFunc, open_in_editor
from ..paths import compose_file_path, ensure_directory, resolve_target_dir
from ..request import Request
from ..writer import write_file

ConfirmFunc = Callable[[str], bool]


@dataclass(slots=True, frozen=True)
class CreatedFile:
    """A written file and the editor that ended up opening it."""

    path: Path
    editor: str
    used_fallback: bool


def prepare_target(request: Request) -> Path:
    """Resolve and create the target directory, returning the file path."""

    directory = ensure_directory(resolve_target_dir(request.target_dir))
    return compose_file_path(directory, request.file_name)


def create_file(
    request: Request,
    *,
    confirm: ConfirmFunc,
    warn: WarnFunc | None = None,
) -> Path | None:
    """Write the requested file, or return ``None`` if overwriting was declined."""

    path = prepare_target(request)

    if path.exists() and not request.force:
        if warn is not None:
            warn(f"Warning: '{path}' already exists.")
        if not confirm("Overwrite it?"):
            return None

    return write_file(path, request.initial_content)


def open_created_file(
    ctx: AppContext,
    path: Path,
    editor: str,
    *,
    launcher: ProcessLauncher,
    warn: WarnFunc | None = None,
) -> CreatedFile:
    """Hand ``path`` to ``editor``, falling back to the configured default."""

    outcome = open_in_editor(
        path,
        editor,
        fallback=ctx.config.fallback_editor,
        launcher=launcher,
        profiles=ctx.profiles,
        warn=warn,
    )
    return CreatedFile(
        path=path, editor=outcome.editor, used_fallback=outcome.used_fallback
    )
