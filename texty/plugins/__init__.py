"""Texty plugin infrastructure based on pluggy."""

from __future__ import annotations

from ._markers import ENTRY_POINT_GROUP, PLUGIN_NAMESPACE, hookimpl, hookspec
from .manager import (
    PluginRegistrationError,
    get_plugin_manager,
    load_editor_profiles,
    reset_plugin_manager_cache,
)
from .types import EditorProfile

__all__ = [
    "ENTRY_POINT_GROUP",
    "EditorProfile",
    "PLUGIN_NAMESPACE",
    "PluginRegistrationError",
    "get_plugin_manager",
    "hookimpl",
    "hookspec",
    "load_editor_profiles",
    "reset_plugin_manager_cache",
]
