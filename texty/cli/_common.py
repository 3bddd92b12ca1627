"""Shared helpers for Texty CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from ..app import AppContext, bootstrap
from ..config import ConfigError
from ..editor import ProcessLauncher, SubprocessLauncher
from ..errors import TextyError

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class TextyCliError(click.ClickException):
    """Shared Click exception wrapper carrying the process exit code."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    @classmethod
    def from_error(cls, exc: TextyError) -> "TextyCliError":
        return cls(str(exc), exit_code=exc.exit_code)


def get_app(ctx: click.Context) -> AppContext:
    """Return a cached AppContext for the current CLI invocation."""

    app: AppContext | None = ctx.obj.get("app")
    if app is not None:
        return app

    config_path_opt: Path | None = ctx.obj.get("config_path")

    try:
        app = bootstrap(config_path_opt)
    except ConfigError as exc:
        raise TextyCliError(str(exc)) from exc

    ctx.obj["app"] = app
    return app


def get_launcher(ctx: click.Context) -> ProcessLauncher:
    """Return the process launcher, allowing callers to inject their own."""

    launcher: ProcessLauncher | None = ctx.obj.get("launcher")
    return launcher if launcher is not None else SubprocessLauncher()


def warn(message: str) -> None:
    click.secho(message, fg="yellow", err=True)
