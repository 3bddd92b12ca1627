"""Hook specifications for Texty plugins."""

from __future__ import annotations

from collections.abc import Iterable

from texty.config import TextyConfig

from ._markers import hookspec
from .types import EditorProfile


class TextyHookSpec:
    """Collection of pluggy hook specifications."""

    @hookspec
    def editor_profiles(self, config: TextyConfig) -> Iterable[EditorProfile]:
        """Return editor profiles describing how to launch known editors."""
