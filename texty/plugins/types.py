"""Type definitions for Texty plugin contracts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class ArgsBuilder(Protocol):
    """Callable producing the editor arguments that open ``path``."""

    def __call__(self, path: Path) -> list[str]:  # pragma: no cover - Protocol
        """Return the argument list, excluding the executable itself."""


@dataclass(slots=True, frozen=True)
class EditorProfile:
    """Describes how to launch one editor on a freshly created file."""

    name: str
    commands: tuple[str, ...]
    build_args: ArgsBuilder
    terminal: bool = False
    description: str = ""
