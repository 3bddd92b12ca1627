"""Configuration management for Texty."""

from __future__ import annotations

import sys
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_DIR = Path("~/.config/texty").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"
DEFAULT_PROBE_EDITORS: tuple[str, ...] = ("code",)


def platform_fallback_editor() -> str:
    """Return the editor assumed to exist on every install of this platform."""

    return "notepad" if sys.platform == "win32" else "vi"


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class InvalidConfigError(ConfigError):
    """Raised when the configuration file contains malformed values."""


@dataclass(slots=True)
class TextyConfig:
    """In-memory representation of the Texty configuration file."""

    editor: str | None = None
    fallback_editor: str = field(default_factory=platform_fallback_editor)
    default_dir: Path | None = None
    probe_editors: tuple[str, ...] = DEFAULT_PROBE_EDITORS
    plugins: dict[str, dict[str, Any]] = field(default_factory=dict)
    source_path: Path | None = None


def load_config(path: Path | None = None) -> TextyConfig:
    """Load configuration from ``path`` or the default location.

    Parameters
    ----------
    path:
        Optional location of the configuration file. When ``None`` the default
        path (``~/.config/texty/config.toml``) is used, and a missing default
        file simply yields the built-in defaults.

    Raises
    ------
    ConfigError
        If an explicitly requested file cannot be found or parsed.
    InvalidConfigError
        If settings are malformed.
    """

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    if not config_path.exists():
        if path is not None:
            raise ConfigError(f"Configuration file not found at {config_path}")
        return TextyConfig()

    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidConfigError(f"Invalid TOML in {config_path}: {exc}") from exc

    section = raw.get("texty", {})
    if not isinstance(section, dict):
        raise InvalidConfigError("'texty' section must be a table")

    config_dir = config_path.parent

    editor = _optional_str(section, "editor")

    fallback_editor = _optional_str(section, "fallback_editor")
    if fallback_editor is None:
        fallback_editor = platform_fallback_editor()

    # Relative directories are resolved against the configuration directory.
    default_dir: Path | None = None
    default_dir_raw = _optional_str(section, "default_dir")
    if default_dir_raw is not None:
        dp = Path(default_dir_raw).expanduser()
        default_dir = dp if dp.is_absolute() else config_dir / dp

    probe_raw = section.get("probe_editors")
    if probe_raw is None:
        probe_editors = DEFAULT_PROBE_EDITORS
    elif isinstance(probe_raw, list) and all(isinstance(p, str) for p in probe_raw):
        probe_editors = tuple(p.strip() for p in probe_raw if p.strip())
    else:
        raise InvalidConfigError("'probe_editors' must be a list of strings")

    plugins_section = raw.get("plugins")
    plugins: dict[str, dict[str, Any]] = {}
    if isinstance(plugins_section, dict):
        for key, value in plugins_section.items():
            plugins[key] = dict(value) if isinstance(value, dict) else {}

    return TextyConfig(
        editor=editor,
        fallback_editor=fallback_editor,
        default_dir=default_dir,
        probe_editors=probe_editors,
        plugins=plugins,
        source_path=config_path,
    )


def _optional_str(section: dict[str, Any], key: str) -> str | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidConfigError(f"'{key}' must be a string when provided")
    return value.strip() or None


def bootstrap_config_file(path: Path) -> bool:
    """Create a default config file if missing.

    Returns True when the file was created, False if it already existed.
    """

    if path.exists():
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    default_content = (
        "[texty]\n"
        '# editor = "code"\n'
        f'fallback_editor = "{platform_fallback_editor()}"\n'
        '# default_dir = "~/notes"\n'
        'probe_editors = ["code"]\n'
    )
    path.write_text(default_content, encoding="utf-8")
    return True
