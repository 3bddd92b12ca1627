"""Built-in Texty plugins."""

from __future__ import annotations

from . import terminal, vscode

BUILTIN_PLUGINS = (vscode, terminal)

__all__ = ["BUILTIN_PLUGINS"]
