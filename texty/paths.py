"""Target directory resolution and creation."""

from __future__ import annotations

from pathlib import Path

from .errors import TextyError


class PathError(TextyError):
    """Raised when the target directory cannot be turned into a usable path."""

    exit_code = 12


class DirectoryCreateError(TextyError):
    """Raised when the target directory tree cannot be created."""

    exit_code = 13


def resolve_target_dir(raw: str) -> Path:
    """Return ``raw`` as an absolute, normalized path without touching disk."""

    if "\x00" in raw:
        raise PathError(f"Invalid directory path '{raw!r}': embedded null byte.")
    try:
        return Path(raw).expanduser().resolve()
    except (OSError, RuntimeError, ValueError) as exc:
        raise PathError(f"Invalid directory path '{raw}': {exc}") from exc


def ensure_directory(directory: Path) -> Path:
    """Create ``directory`` (and parents) when missing."""

    if directory.is_dir():
        return directory
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateError(
            f"Could not create directory '{directory}': {exc}"
        ) from exc
    return directory


def compose_file_path(directory: Path, file_name: str) -> Path:
    return directory / file_name
