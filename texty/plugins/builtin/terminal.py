"""Profiles for editors that run inside the terminal."""

from __future__ import annotations

from pathlib import Path

from texty.plugins import EditorProfile, hookimpl

PLUGIN_ID = "texty-builtin-terminal"


def _line_one(path: Path) -> list[str]:
    return ["+1", str(path)]


@hookimpl
def editor_profiles() -> tuple[EditorProfile, ...]:
    """Expose vi-style and nano editors; these block until the user quits."""

    return (
        EditorProfile(
            name="vi",
            commands=("vi", "vim", "nvim"),
            build_args=_line_one,
            terminal=True,
            description="vi family, opened at line 1",
        ),
        EditorProfile(
            name="nano",
            commands=("nano",),
            build_args=_line_one,
            terminal=True,
            description="GNU nano, opened at line 1",
        ),
    )


__all__ = ["PLUGIN_ID", "editor_profiles"]
