from __future__ import annotations

from typing import Sequence

import pytest
from texty.editor import LaunchError
from texty.plugins import manager as plugin_manager


class FakeLauncher:
    """Records launches instead of starting processes."""

    def __init__(self, failing: Sequence[str] = ()) -> None:
        self.failing = set(failing)
        self.calls: list[tuple[str, list[str], bool]] = []

    def launch(
        self, command: str, args: Sequence[str], *, wait: bool = False
    ) -> int | None:
        self.calls.append((command, list(args), wait))
        if command in self.failing:
            raise LaunchError(f"command not found: {command}")
        return 0 if wait else None


@pytest.fixture
def launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture(autouse=True)
def reset_plugin_manager() -> None:
    """Ensure plugin discovery state does not leak between tests."""

    plugin_manager.reset_plugin_manager_cache()
    yield
    plugin_manager.reset_plugin_manager_cache()
