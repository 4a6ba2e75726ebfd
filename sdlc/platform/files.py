"""Filesystem helpers."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from sdlc.core.errors import SdlcError
from sdlc.core.result import Err, Ok, Result

__all__ = ["atomic_write_text", "read_optional_text", "write_text"]


def atomic_write_text(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Write text to path atomically using temp file + replace."""
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.",
        suffix=".tmp",
        dir=str(path.parent),
    )
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)


def read_optional_text(path: Path) -> Result[str | None, SdlcError]:
    """Read a file that may legitimately be absent.

    Line endings are preserved as stored so a rewrite only touches the
    lines it changes. Returns Ok(None) when the file does not exist. Any
    other OS error, or content that is not UTF-8, is reported as a
    ``file`` error.
    """
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            return Ok(handle.read())
    except FileNotFoundError:
        return Ok(None)
    except (OSError, UnicodeDecodeError) as e:
        return Err(
            SdlcError(
                kind="file",
                message=f"failed to read {path.name}: {e}",
                hint=str(path),
            )
        )


def write_text(path: Path, content: str) -> Result[Path, SdlcError]:
    try:
        atomic_write_text(path, content)
    except OSError as e:
        return Err(
            SdlcError(
                kind="file",
                message=f"failed to write {path.name}: {e}",
                hint=str(path),
            )
        )
    return Ok(path)
