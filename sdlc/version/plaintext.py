"""Version source for Go projects (``VERSION`` file, ``go.mod`` fallback)."""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path

from sdlc.changelog.update import update_changelog_for_version
from sdlc.core.errors import SdlcError
from sdlc.core.model import Issue
from sdlc.core.result import Err, Ok, Result
from sdlc.platform.files import read_optional_text, write_text

from .base import version_not_found
from .constants import VERSION_FILES, Language

VERSION_FILE = "VERSION"
GO_MOD_FILE = "go.mod"

_COMMENT_VALUE_RE = re.compile(r"//\s*version\s+(\S+)", re.IGNORECASE)
_COMMENT_LINE_RE = re.compile(r"//[ \t]*version[ \t]+[^\r\n]+", re.IGNORECASE)


class PlainTextVersionSource:
    """Version is the content of a bare ``VERSION`` file.

    When ``VERSION`` is missing or blank, a ``// version x.y.z`` comment in
    ``go.mod`` is used instead.
    """

    language = Language.GO

    def __init__(self, root: Path) -> None:
        self.root = root

    def current_version(self) -> Result[str, SdlcError]:
        version_text = read_optional_text(self.root / VERSION_FILE)
        if isinstance(version_text, Err):
            return version_text
        if version_text.value is not None and version_text.value.strip():
            return Ok(version_text.value.strip())

        go_mod = read_optional_text(self.root / GO_MOD_FILE)
        if isinstance(go_mod, Err):
            return go_mod
        if go_mod.value is not None:
            m = _COMMENT_VALUE_RE.search(go_mod.value)
            if m is not None:
                return Ok(m.group(1))

        return version_not_found(
            f"Unable to find version in {VERSION_FILE} file or {GO_MOD_FILE}",
            path=self.root / VERSION_FILE,
            hint=(
                f"Create a {VERSION_FILE} file (e.g. 0.1.0) or add a version comment "
                f"to {GO_MOD_FILE} (e.g. // version 0.1.0)"
            ),
        )

    def update_version(
        self,
        version: str,
        *,
        release_date: str,
        issues: Sequence[Issue],
        message: str | None = None,
    ) -> Result[list[Path], SdlcError]:
        changed: list[Path] = []

        written = write_text(self.root / VERSION_FILE, f"{version}\n")
        if isinstance(written, Err):
            return written
        changed.append(written.value)

        go_mod = self._update_go_mod(version)
        if isinstance(go_mod, Err):
            return go_mod
        if go_mod.value is not None:
            changed.append(go_mod.value)

        changelog = update_changelog_for_version(
            self.root, version, issues, release_date=release_date, message=message
        )
        if isinstance(changelog, Err):
            return changelog
        changed.append(changelog.value)

        return Ok(changed)

    def version_files(self) -> tuple[str, ...]:
        return VERSION_FILES[self.language]

    def _update_go_mod(self, version: str) -> Result[Path | None, SdlcError]:
        path = self.root / GO_MOD_FILE
        text = read_optional_text(path)
        if isinstance(text, Err):
            return text
        if text.value is None:
            return Ok(None)

        content = text.value
        if _COMMENT_LINE_RE.search(content):
            updated = _COMMENT_LINE_RE.sub(f"// version {version}", content, count=1)
        else:
            nl = "\r\n" if "\r\n" in content else "\n"
            updated = f"{content.rstrip()}{nl}// version {version}{nl}"
        return write_text(path, updated)
