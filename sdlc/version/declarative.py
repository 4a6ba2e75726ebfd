"""Version source for Python projects (``pyproject.toml`` + companions)."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from pathlib import Path

from sdlc.changelog.blocks import release_note_line
from sdlc.core.errors import SdlcError
from sdlc.core.model import Issue
from sdlc.core.result import Err, Ok, Result
from sdlc.platform.files import read_optional_text, write_text

from .base import version_not_found
from .constants import VERSION_FILES, Language

PYPROJECT_FILE = "pyproject.toml"
SETUP_FILE = "setup.py"
NOTES_FILE = "version_notes.md"
METADATA_FILE = "METADATA"

_PYPROJECT_VERSION_RE = re.compile(r"""version\s*=\s*["']([^"']*)["']""")
_SETUP_VERSION_RE = re.compile(r"""version=['"][^'"]*['"]""")


class DeclarativeVersionSource:
    """Version is a ``version = "x"`` line in ``pyproject.toml``.

    On update, ``setup.py`` is patched when present, ``version_notes.md``
    gets a new section on top and ``METADATA`` is rewritten with the release
    date.
    """

    language = Language.PYTHON

    def __init__(self, root: Path) -> None:
        self.root = root

    def current_version(self) -> Result[str, SdlcError]:
        text = self._read_pyproject()
        if isinstance(text, Err):
            return text

        m = _PYPROJECT_VERSION_RE.search(text.value)
        if m is None or not m.group(1).strip():
            return version_not_found(
                f"Unable to find version in {PYPROJECT_FILE}",
                path=self.root / PYPROJECT_FILE,
                hint=f'Add version = "0.1.0" to the [project] table of {PYPROJECT_FILE}',
            )
        return Ok(m.group(1))

    def update_version(
        self,
        version: str,
        *,
        release_date: str,
        issues: Sequence[Issue],
        message: str | None = None,
    ) -> Result[list[Path], SdlcError]:
        changed: list[Path] = []

        steps: tuple[Callable[[], Result[Path | None, SdlcError]], ...] = (
            lambda: self._update_pyproject(version),
            lambda: self._update_setup_py(version),
            lambda: self._update_version_notes(version, release_date, issues, message),
            lambda: self._update_metadata(release_date),
        )
        for step in steps:
            result = step()
            if isinstance(result, Err):
                return result
            if result.value is not None:
                changed.append(result.value)
        return Ok(changed)

    def version_files(self) -> tuple[str, ...]:
        return VERSION_FILES[self.language]

    def _read_pyproject(self) -> Result[str, SdlcError]:
        path = self.root / PYPROJECT_FILE
        text = read_optional_text(path)
        if isinstance(text, Err):
            return text
        if text.value is None:
            return version_not_found(
                f"Unable to find {PYPROJECT_FILE}",
                path=path,
                hint="Run this command from the project root",
            )
        return Ok(text.value)

    def _update_pyproject(self, version: str) -> Result[Path | None, SdlcError]:
        text = self._read_pyproject()
        if isinstance(text, Err):
            return text
        updated = _PYPROJECT_VERSION_RE.sub(f'version = "{version}"', text.value, count=1)
        return write_text(self.root / PYPROJECT_FILE, updated)

    def _update_setup_py(self, version: str) -> Result[Path | None, SdlcError]:
        path = self.root / SETUP_FILE
        text = read_optional_text(path)
        if isinstance(text, Err):
            return text
        if text.value is None:
            return Ok(None)
        updated = _SETUP_VERSION_RE.sub(f"version='{version}'", text.value, count=1)
        return write_text(path, updated)

    def _update_version_notes(
        self,
        version: str,
        release_date: str,
        issues: Sequence[Issue],
        message: str | None,
    ) -> Result[Path | None, SdlcError]:
        path = self.root / NOTES_FILE
        existing = read_optional_text(path)
        if isinstance(existing, Err):
            return existing

        notes = "".join(f"{release_note_line(issue)}\n" for issue in issues)
        section = f"## {version}\nReleased on: {release_date}\n\n{message or ''}\n\n{notes}\n\n"
        return write_text(path, section + (existing.value or ""))

    def _update_metadata(self, release_date: str) -> Result[Path | None, SdlcError]:
        return write_text(self.root / METADATA_FILE, f"release_date={release_date}\n")
