"""Atomic text file writing."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from .errors import TextyError

ENCODING = "utf-8"


class WriteError(TextyError):
    """Raised when the target file cannot be written."""

    exit_code = 20


def write_file(path: Path, content: str) -> Path:
    """Replace ``path`` with ``content`` atomically.

    The text is stored verbatim as UTF-8 without a byte-order mark: no
    trailing newline is appended and line endings are not translated. Empty
    content produces a zero-length file.
    """

    tmp_name: str | None = None
    try:
        payload = content.encode(ENCODING) if content else b""
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        with os.fdopen(fd, "wb") as fh:
            fh.write(payload)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
        tmp_name = None
    except (OSError, ValueError) as exc:
        raise WriteError(f"Could not write '{path}': {exc}") from exc
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:  # pragma: no cover - best effort cleanup
                pass

    return path


def _target_mode(path: Path) -> int:
    # mkstemp creates 0600 files; keep an existing mode or honour the umask.
    if path.is_file():
        return stat.S_IMODE(path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask
