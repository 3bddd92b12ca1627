"""Handing a created file over to an external editor."""

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Protocol, Sequence

from .errors import TextyError
from .plugins.types import EditorProfile

WarnFunc = Callable[[str], None]


class LaunchError(RuntimeError):
    """Raised by a launcher when a process cannot be started."""


class EditorError(TextyError):
    """Raised when neither the chosen nor the fallback editor could start."""

    exit_code = 30


class ProcessLauncher(Protocol):
    """Capability used to start external programs."""

    def launch(
        self, command: str, args: Sequence[str], *, wait: bool = False
    ) -> int | None:  # pragma: no cover - Protocol
        """Start ``command`` and return its exit status when waited on."""


class SubprocessLauncher:
    """Launch processes with :mod:`subprocess`, detached unless ``wait``."""

    def __init__(self, which: Callable[[str], str | None] = shutil.which) -> None:
        self.which = which

    def launch(
        self, command: str, args: Sequence[str], *, wait: bool = False
    ) -> int | None:
        # Resolving first also finds wrappers such as code.cmd on Windows.
        executable = self.which(command)
        if executable is None:
            raise LaunchError(f"command not found: {command}")
        try:
            if wait:
                return subprocess.run([executable, *args], check=False).returncode
            subprocess.Popen(
                [executable, *args],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            raise LaunchError(f"{command}: {exc}") from exc
        return None


@dataclass(slots=True, frozen=True)
class EditorCommand:
    command: str
    args: list[str]
    terminal: bool = False


@dataclass(slots=True, frozen=True)
class LaunchOutcome:
    """Which editor ended up with the file."""

    editor: str
    used_fallback: bool


def split_editor_command(editor: str) -> list[str]:
    """Split an editor setting such as ``"subl -n"`` into argv parts."""

    return shlex.split(editor, posix=os.name != "nt")


def find_profile(
    command: str, profiles: Mapping[str, EditorProfile]
) -> EditorProfile | None:
    """Match ``command`` (bare name or full path) against known profiles."""

    name = Path(command).name.lower()
    if name in profiles:
        return profiles[name]
    stem = Path(name).stem
    return profiles.get(stem)


def build_command(
    editor: str, path: Path, profiles: Mapping[str, EditorProfile]
) -> EditorCommand:
    """Return the command line that opens ``path`` in ``editor``."""

    try:
        parts = split_editor_command(editor)
    except ValueError as exc:
        raise LaunchError(f"cannot parse editor command '{editor}': {exc}") from exc
    if not parts:
        raise LaunchError("empty editor command")
    command, extra = parts[0], parts[1:]

    profile = find_profile(command, profiles)
    if profile is not None:
        return EditorCommand(
            command, [*extra, *profile.build_args(path)], profile.terminal
        )
    return EditorCommand(command, [*extra, str(path)])


def open_in_editor(
    path: Path,
    editor: str,
    *,
    fallback: str,
    launcher: ProcessLauncher,
    profiles: Mapping[str, EditorProfile],
    warn: WarnFunc | None = None,
) -> LaunchOutcome:
    """Open ``path`` in ``editor``, retrying once with ``fallback``."""

    try:
        _launch(launcher, build_command(editor, path, profiles))
        return LaunchOutcome(editor=editor, used_fallback=False)
    except LaunchError as exc:
        if editor == fallback:
            raise EditorError(f"Failed to launch editor '{editor}': {exc}") from exc
        if warn is not None:
            warn(
                f"Warning: could not launch '{editor}' ({exc}). "
                f"Falling back to '{fallback}'."
            )

    try:
        _launch(launcher, build_command(fallback, path, profiles))
    except LaunchError as exc:
        raise EditorError(
            f"Failed to launch fallback editor '{fallback}': {exc}"
        ) from exc
    return LaunchOutcome(editor=fallback, used_fallback=True)


def _launch(launcher: ProcessLauncher, cmd: EditorCommand) -> None:
    launcher.launch(cmd.command, cmd.args, wait=cmd.terminal)
