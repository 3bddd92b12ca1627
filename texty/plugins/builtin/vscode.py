"""Visual Studio Code editor profile."""

from __future__ import annotations

from pathlib import Path

from texty.config import InvalidConfigError, TextyConfig
from texty.plugins import EditorProfile, hookimpl

PLUGIN_ID = "texty-builtin-vscode"


@hookimpl
def editor_profiles(config: TextyConfig) -> tuple[EditorProfile, ...]:
    """Open files in the running VS Code window, cursor on line 1."""

    settings = config.plugins.get(PLUGIN_ID, {})
    reuse_window = settings.get("reuse_window", True)
    if not isinstance(reuse_window, bool):
        raise InvalidConfigError(
            f"[plugins.{PLUGIN_ID}] reuse_window must be true or false"
        )

    def build_args(path: Path) -> list[str]:
        args = ["--reuse-window"] if reuse_window else []
        return [*args, "--goto", f"{path}:1"]

    profile = EditorProfile(
        name="vscode",
        commands=("code", "code-insiders", "codium"),
        build_args=build_args,
        description="Visual Studio Code (reuses the open window)",
    )
    return (profile,)


__all__ = ["PLUGIN_ID", "editor_profiles"]
