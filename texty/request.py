"""Gathering the parameters of a file creation request."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from typing import Callable, Iterable

from .config import TextyConfig
from .errors import TextyError

EXIT_MISSING_NAME = 10
EXIT_MISSING_DIR = 11

# (prompt text, default) -> answer
PromptFunc = Callable[[str, str | None], str]
WhichFunc = Callable[[str], str | None]


class ValidationError(TextyError):
    """Raised when a required parameter is still missing after prompting."""

    exit_code = EXIT_MISSING_NAME


@dataclass(slots=True, frozen=True)
class Request:
    """Everything needed to create one file and hand it to an editor."""

    file_name: str
    target_dir: str
    initial_content: str
    force: bool
    editor: str


def detect_default_editor(
    candidates: Iterable[str],
    fallback: str,
    which: WhichFunc = shutil.which,
) -> str:
    """Return the first of ``candidates`` found on ``PATH``, else ``fallback``."""

    for command in candidates:
        if which(command):
            return command
    return fallback


def resolve_request(
    *,
    file_name: str | None,
    target_dir: str | None,
    content: str | None,
    force: bool,
    editor: str | None,
    config: TextyConfig,
    prompt: PromptFunc,
    which: WhichFunc = shutil.which,
) -> Request:
    """Fill in missing parameters from configuration and interactive prompts.

    The file name and target directory are prompted for when blank and are
    mandatory afterwards; the initial content may stay empty.
    """

    name = (file_name or "").strip()
    if not name:
        name = prompt("File name", None).strip()
    if not name:
        raise ValidationError("A file name is required.")
    if any(ch in name for ch in ("/", "\\", "\x00")) or name in (".", ".."):
        raise ValidationError(
            f"{name!r} is not a plain file name; pass the directory with --dir."
        )

    directory = (target_dir or "").strip()
    if not directory:
        default_dir = str(config.default_dir) if config.default_dir else None
        directory = prompt("Target directory", default_dir).strip()
    if not directory:
        raise ValidationError(
            "A target directory is required.", exit_code=EXIT_MISSING_DIR
        )

    if content is None:
        content = prompt("Initial content (optional)", "")

    chosen_editor = (editor or "").strip() or config.editor
    if not chosen_editor:
        chosen_editor = detect_default_editor(
            config.probe_editors, config.fallback_editor, which
        )

    return Request(
        file_name=name,
        target_dir=directory,
        initial_content=content or "",
        force=force,
        editor=chosen_editor,
    )
