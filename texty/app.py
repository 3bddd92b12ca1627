"""Application bootstrap and context container for Texty."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import ConfigError, TextyConfig, load_config
from .plugins import EditorProfile, PluginRegistrationError, load_editor_profiles


@dataclass(slots=True)
class AppContext:
    """Aggregates configuration and editor profiles for one CLI invocation."""

    config: TextyConfig
    profiles: dict[str, EditorProfile]


def bootstrap(config_path: Path | None) -> AppContext:
    """Load configuration and collect editor profiles from plugins."""

    config = load_config(config_path)
    try:
        profiles = load_editor_profiles(config)
    except PluginRegistrationError as exc:
        raise ConfigError(f"Plugin registration failed: {exc}") from exc
    return AppContext(config=config, profiles=profiles)
