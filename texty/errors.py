"""Base error type shared by Texty domain errors."""

from __future__ import annotations


class TextyError(RuntimeError):
    """Failure that terminates the workflow with a fixed process exit code."""

    exit_code: int = 1

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code
