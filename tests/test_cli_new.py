"""Tests for the 'texty new' CLI subcommand."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner
from conftest import FakeLauncher
from texty import cli
from texty import config as config_module


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch) -> Path:
    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", config_path)
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_DIR", config_path.parent)
    return config_path


def _write_config(config_path: Path, body: str) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(f"[texty]\n{body}", encoding="utf-8")


def _invoke(args: list[str], launcher: FakeLauncher, input: str | None = None):
    runner = CliRunner()
    return runner.invoke(cli.cli, args, obj={"launcher": launcher}, input=input)


def test_creates_directory_and_file(tmp_path: Path, launcher: FakeLauncher) -> None:
    target_dir = tmp_path / "out" / "nested"

    result = _invoke(
        ["new", "-n", "note.txt", "-d", str(target_dir), "-t", "line1\nline2", "-e", "gedit"],
        launcher,
    )

    assert result.exit_code == 0, result.output
    path = target_dir.resolve() / "note.txt"
    assert path.read_bytes() == b"line1\nline2"
    assert f"Texty: created {path}" in result.output
    assert launcher.calls == [("gedit", [str(path)], False)]


def test_declining_overwrite_keeps_file(tmp_path: Path, launcher: FakeLauncher) -> None:
    path = tmp_path / "note.txt"
    path.write_text("original", encoding="utf-8")

    result = _invoke(
        ["new", "-n", "note.txt", "-d", str(tmp_path), "-t", "new", "-e", "gedit"],
        launcher,
        input="n\n",
    )

    assert result.exit_code == 0, result.output
    assert "already exists" in result.output
    assert path.read_text(encoding="utf-8") == "original"
    assert launcher.calls == []


def test_non_affirmative_answer_declines(tmp_path: Path, launcher: FakeLauncher) -> None:
    path = tmp_path / "note.txt"
    path.write_text("original", encoding="utf-8")

    result = _invoke(
        ["new", "-n", "note.txt", "-d", str(tmp_path), "-t", "new", "-e", "gedit"],
        launcher,
        input="maybe\n",
    )

    assert result.exit_code == 0, result.output
    assert path.read_text(encoding="utf-8") == "original"


def test_confirming_overwrite_replaces(tmp_path: Path, launcher: FakeLauncher) -> None:
    path = tmp_path / "note.txt"
    path.write_text("original", encoding="utf-8")

    result = _invoke(
        ["new", "-n", "note.txt", "-d", str(tmp_path), "-t", "new", "-e", "gedit"],
        launcher,
        input="y\n",
    )

    assert result.exit_code == 0, result.output
    assert path.read_text(encoding="utf-8") == "new"


def test_force_replaces_without_prompt(tmp_path: Path, launcher: FakeLauncher) -> None:
    path = tmp_path / "note.txt"
    path.write_text("original", encoding="utf-8")

    result = _invoke(
        ["new", "-n", "note.txt", "-d", str(tmp_path), "-t", "new", "-f", "-e", "gedit"],
        launcher,
    )

    assert result.exit_code == 0, result.output
    assert "Overwrite" not in result.output
    assert path.read_text(encoding="utf-8") == "new"


def test_blank_content_creates_empty_file(tmp_path: Path, launcher: FakeLauncher) -> None:
    path = tmp_path / "note.txt"
    path.write_text("original", encoding="utf-8")

    result = _invoke(
        ["new", "-n", "note.txt", "-d", str(tmp_path), "-f", "-e", "gedit"],
        launcher,
        input="\n",
    )

    assert result.exit_code == 0, result.output
    assert path.exists()
    assert path.stat().st_size == 0


def test_missing_parameters_are_prompted(tmp_path: Path, launcher: FakeLauncher) -> None:
    target_dir = tmp_path / "prompted"

    result = _invoke(
        ["new", "-e", "gedit"],
        launcher,
        input=f"todo.txt\n{target_dir}\nbuy milk\n",
    )

    assert result.exit_code == 0, result.output
    assert (target_dir / "todo.txt").read_bytes() == b"buy milk"


def test_missing_file_name_exits_10(tmp_path: Path, launcher: FakeLauncher) -> None:
    result = _invoke(["new", "-d", str(tmp_path), "-e", "gedit"], launcher, input="\n")

    assert result.exit_code == 10
    assert "file name is required" in result.output


def test_missing_directory_exits_11(launcher: FakeLauncher) -> None:
    result = _invoke(["new", "-n", "a.txt", "-e", "gedit"], launcher, input="\n")

    assert result.exit_code == 11
    assert "target directory is required" in result.output


def test_default_dir_from_config_is_accepted(
    tmp_path: Path, isolated_config: Path, launcher: FakeLauncher
) -> None:
    notes_dir = tmp_path / "notes"
    _write_config(isolated_config, f'default_dir = "{notes_dir.as_posix()}"\n')

    result = _invoke(["new", "-n", "a.txt", "-t", "x", "-e", "gedit"], launcher, input="\n")

    assert result.exit_code == 0, result.output
    assert (notes_dir / "a.txt").read_text(encoding="utf-8") == "x"


def test_invalid_directory_exits_12_without_changes(
    tmp_path: Path, launcher: FakeLauncher
) -> None:
    before = sorted(p.name for p in tmp_path.iterdir())

    result = _invoke(
        ["new", "-n", "a.txt", "-d", str(tmp_path / "bad\x00dir"), "-t", "x", "-e", "gedit"],
        launcher,
    )

    assert result.exit_code == 12
    assert sorted(p.name for p in tmp_path.iterdir()) == before
    assert launcher.calls == []


def test_directory_creation_failure_exits_13(tmp_path: Path, launcher: FakeLauncher) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    result = _invoke(
        ["new", "-n", "a.txt", "-d", str(blocker / "sub"), "-t", "x", "-e", "gedit"],
        launcher,
    )

    assert result.exit_code == 13
    assert "Could not create directory" in result.output


def test_write_failure_exits_20(tmp_path: Path, launcher: FakeLauncher) -> None:
    (tmp_path / "a.txt").mkdir()

    result = _invoke(
        ["new", "-n", "a.txt", "-d", str(tmp_path), "-t", "x", "-f", "-e", "gedit"],
        launcher,
    )

    assert result.exit_code == 20
    assert "Could not write" in result.output
    assert launcher.calls == []


def test_editor_failure_falls_back(
    tmp_path: Path, isolated_config: Path
) -> None:
    _write_config(isolated_config, 'fallback_editor = "backup-editor"\n')
    launcher = FakeLauncher(failing=["gedit"])

    result = _invoke(
        ["new", "-n", "a.txt", "-d", str(tmp_path), "-t", "x", "-e", "gedit"],
        launcher,
    )

    assert result.exit_code == 0, result.output
    assert "Falling back to 'backup-editor'" in result.output
    assert [call[0] for call in launcher.calls] == ["gedit", "backup-editor"]


def test_fallback_failure_exits_30(tmp_path: Path, isolated_config: Path) -> None:
    _write_config(isolated_config, 'fallback_editor = "backup-editor"\n')
    launcher = FakeLauncher(failing=["gedit", "backup-editor"])

    result = _invoke(
        ["new", "-n", "a.txt", "-d", str(tmp_path), "-t", "x", "-e", "gedit"],
        launcher,
    )

    assert result.exit_code == 30
    assert [call[0] for call in launcher.calls] == ["gedit", "backup-editor"]
    # The file stays created even though no editor could open it.
    assert (tmp_path / "a.txt").read_text(encoding="utf-8") == "x"


def test_detected_vscode_reuses_window(
    tmp_path: Path, monkeypatch, launcher: FakeLauncher
) -> None:
    monkeypatch.setattr(
        shutil, "which", lambda cmd: "/usr/bin/code" if cmd == "code" else None
    )

    result = _invoke(["new", "-n", "a.txt", "-d", str(tmp_path), "-t", "x"], launcher)

    assert result.exit_code == 0, result.output
    path = tmp_path.resolve() / "a.txt"
    assert launcher.calls == [
        ("code", ["--reuse-window", "--goto", f"{path}:1"], False)
    ]


def test_without_known_editor_uses_fallback(
    tmp_path: Path, isolated_config: Path, monkeypatch, launcher: FakeLauncher
) -> None:
    _write_config(isolated_config, 'fallback_editor = "backup-editor"\n')
    monkeypatch.setattr(shutil, "which", lambda cmd: None)

    result = _invoke(["new", "-n", "a.txt", "-d", str(tmp_path), "-t", "x"], launcher)

    assert result.exit_code == 0, result.output
    assert [call[0] for call in launcher.calls] == ["backup-editor"]


def test_main_returns_mapped_exit_code(tmp_path: Path, capsys) -> None:
    code = cli.main(["new", "-n", "a.txt", "-d", "bad\x00dir", "-t", "x", "-e", "gedit"])

    assert code == 12
    assert "Invalid directory path" in capsys.readouterr().err


def test_invalid_config_exits_1(
    tmp_path: Path, isolated_config: Path, launcher: FakeLauncher
) -> None:
    _write_config(isolated_config, "editor = 42\n")

    result = _invoke(["new", "-n", "a.txt", "-d", str(tmp_path), "-t", "x"], launcher)

    assert result.exit_code == 1
    assert "'editor' must be a string" in result.output


def test_unencodable_content_exits_20(tmp_path: Path, launcher: FakeLauncher) -> None:
    result = _invoke(
        ["new", "-n", "a.txt", "-d", str(tmp_path), "-t", "\udcff", "-e", "gedit"],
        launcher,
    )

    assert result.exit_code == 20
    assert "Could not write" in result.output
    assert not (tmp_path / "a.txt").exists()
    assert launcher.calls == []


def test_prompted_name_with_null_byte_exits_10(
    tmp_path: Path, launcher: FakeLauncher
) -> None:
    result = _invoke(
        ["new", "-d", str(tmp_path), "-t", "x", "-e", "gedit"],
        launcher,
        input="a\x00b\n",
    )

    assert result.exit_code == 10
    assert "not a plain file name" in result.output
    assert list(tmp_path.iterdir()) == []


def test_closed_stdin_at_name_prompt_exits_10(
    tmp_path: Path, launcher: FakeLauncher
) -> None:
    result = _invoke(["new", "-d", str(tmp_path), "-t", "x", "-e", "gedit"], launcher, input="")

    assert result.exit_code == 10
    assert "file name is required" in result.output


def test_closed_stdin_at_directory_prompt_exits_11(launcher: FakeLauncher) -> None:
    result = _invoke(["new", "-n", "a.txt", "-t", "x", "-e", "gedit"], launcher, input="")

    assert result.exit_code == 11


def test_closed_stdin_at_overwrite_prompt_declines(
    tmp_path: Path, launcher: FakeLauncher
) -> None:
    path = tmp_path / "a.txt"
    path.write_text("original", encoding="utf-8")

    result = _invoke(
        ["new", "-n", "a.txt", "-d", str(tmp_path), "-t", "x", "-e", "gedit"],
        launcher,
        input="",
    )

    assert result.exit_code == 0, result.output
    assert path.read_text(encoding="utf-8") == "original"
    assert launcher.calls == []


def test_fallback_editor_is_reported(tmp_path: Path, isolated_config: Path) -> None:
    _write_config(isolated_config, 'fallback_editor = "backup-editor"\n')
    launcher = FakeLauncher(failing=["gedit"])

    result = _invoke(
        ["new", "-n", "a.txt", "-d", str(tmp_path), "-t", "x", "-e", "gedit"],
        launcher,
    )

    assert result.exit_code == 0, result.output
    path = tmp_path.resolve() / "a.txt"
    assert f"Opened {path} in fallback editor 'backup-editor'" in result.output


def test_invalid_plugin_setting_exits_1(
    tmp_path: Path, isolated_config: Path, launcher: FakeLauncher
) -> None:
    _write_config(
        isolated_config,
        '[plugins.texty-builtin-vscode]\nreuse_window = "false"\n',
    )

    result = _invoke(["new", "-n", "a.txt", "-d", str(tmp_path), "-t", "x"], launcher)

    assert result.exit_code == 1
    assert "reuse_window must be true or false" in result.output
    assert launcher.calls == []
