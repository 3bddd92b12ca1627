"""Helpers for creating and working with the Texty plugin manager."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from functools import lru_cache
from typing import Iterable as TypingIterable
from typing import Tuple

import pluggy

from texty.config import TextyConfig

from ._markers import ENTRY_POINT_GROUP, PLUGIN_NAMESPACE
from .spec import TextyHookSpec
from .types import EditorProfile


class PluginRegistrationError(RuntimeError):
    """Raised when a plugin fails validation or registration."""


def create_plugin_manager(*, load_entry_points: bool = True) -> pluggy.PluginManager:
    """Instantiate a pluggy ``PluginManager`` configured for Texty."""

    manager = pluggy.PluginManager(PLUGIN_NAMESPACE)
    manager.add_hookspecs(TextyHookSpec)

    if load_entry_points:
        load_plugin_entry_points(manager)

    return manager


def register_modules(
    manager: pluggy.PluginManager,
    modules: Sequence[object],
) -> None:
    """Register in-process plugin modules with the manager."""

    for module in modules:
        try:
            manager.register(module)
        except pluggy.PluginValidationError as exc:
            raise PluginRegistrationError(str(exc)) from exc


def iter_editor_profiles(
    manager: pluggy.PluginManager,
    config: TextyConfig,
) -> Iterator[EditorProfile]:
    """Yield editor profiles from all registered plugins."""

    for contributions in manager.hook.editor_profiles(config=config):
        if not contributions:
            continue
        yield from _ensure_iterable(contributions)


def load_plugin_entry_points(
    manager: pluggy.PluginManager,
    *,
    group: str = ENTRY_POINT_GROUP,
) -> None:
    """Load plugin entry points via ``importlib.metadata`` integration."""

    manager.load_setuptools_entrypoints(group)


def iter_plugin_modules() -> Tuple[object, ...]:
    """Return plugin modules bundled with Texty."""

    return _builtin_plugin_modules()


def _builtin_plugin_modules() -> Tuple[object, ...]:
    from .builtin import BUILTIN_PLUGINS

    return BUILTIN_PLUGINS


@lru_cache(maxsize=1)
def _build_plugin_manager() -> pluggy.PluginManager:
    manager = create_plugin_manager()
    register_modules(manager, iter_plugin_modules())
    return manager


def get_plugin_manager() -> pluggy.PluginManager:
    """Return the cached plugin manager instance."""

    return _build_plugin_manager()


def reset_plugin_manager_cache() -> None:
    """Clear cached plugin manager so future calls rebuild state."""

    _build_plugin_manager.cache_clear()


def load_editor_profiles(config: TextyConfig) -> dict[str, EditorProfile]:
    """Collect editor profiles keyed by the lower-cased command names."""

    manager = get_plugin_manager()

    profiles: dict[str, EditorProfile] = {}
    for profile in iter_editor_profiles(manager, config):
        for command in profile.commands:
            key = command.lower()
            if key in profiles:
                raise PluginRegistrationError(
                    f"Editor command '{command}' is claimed by both "
                    f"'{profiles[key].name}' and '{profile.name}'."
                )
            profiles[key] = profile

    return profiles


def _ensure_iterable(
    contributions: object,
) -> TypingIterable[EditorProfile]:
    """Normalize hook return values to a concrete iterable of profiles."""

    if isinstance(contributions, EditorProfile):
        return (contributions,)

    if not isinstance(contributions, Iterable) or isinstance(
        contributions, (str, bytes)
    ):
        raise PluginRegistrationError(
            "Plugin hook did not return an iterable profile collection."
        )

    normalized: list[EditorProfile] = []
    for item in contributions:
        if not isinstance(item, EditorProfile):
            raise PluginRegistrationError(
                "Editor profiles must be EditorProfile instances."
            )
        normalized.append(item)
    return tuple(normalized)


__all__ = [
    "PluginRegistrationError",
    "create_plugin_manager",
    "get_plugin_manager",
    "iter_editor_profiles",
    "iter_plugin_modules",
    "load_editor_profiles",
    "load_plugin_entry_points",
    "register_modules",
    "reset_plugin_manager_cache",
]
