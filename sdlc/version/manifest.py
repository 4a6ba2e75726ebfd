"""Version source for ``package.json`` projects (Node.js, TypeScript)."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from sdlc.changelog.update import update_changelog_for_version
from sdlc.core.errors import SdlcError
from sdlc.core.model import Issue
from sdlc.core.result import Err, Ok, Result
from sdlc.core.structured import StrDict, as_str_dict, get_str
from sdlc.platform.files import read_optional_text, write_text

from .base import version_not_found
from .constants import VERSION_FILES, Language

MANIFEST_FILE = "package.json"


class ManifestVersionSource:
    """Version lives in the ``version`` field of a JSON manifest."""

    language = Language.NODEJS

    def __init__(self, root: Path) -> None:
        self.root = root

    @property
    def manifest_path(self) -> Path:
        return self.root / MANIFEST_FILE

    def current_version(self) -> Result[str, SdlcError]:
        data = self._read_manifest()
        if isinstance(data, Err):
            return data

        value = get_str(data.value, "version")
        if value is None:
            return version_not_found(
                f'Unable to find "version" field in {MANIFEST_FILE}',
                path=self.manifest_path,
                hint=f'Add "version": "0.1.0" to {self.manifest_path}',
            )
        return Ok(value)

    def update_version(
        self,
        version: str,
        *,
        release_date: str,
        issues: Sequence[Issue],
        message: str | None = None,
    ) -> Result[list[Path], SdlcError]:
        data = self._read_manifest()
        if isinstance(data, Err):
            return data

        manifest = data.value
        manifest["version"] = version
        written = write_text(
            self.manifest_path, json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
        )
        if isinstance(written, Err):
            return written

        changelog = update_changelog_for_version(
            self.root, version, issues, release_date=release_date, message=message
        )
        if isinstance(changelog, Err):
            return changelog

        return Ok([self.manifest_path, changelog.value])

    def version_files(self) -> tuple[str, ...]:
        return VERSION_FILES[self.language]

    def _read_manifest(self) -> Result[StrDict, SdlcError]:
        path = self.manifest_path
        text = read_optional_text(path)
        if isinstance(text, Err):
            return text
        if text.value is None:
            return version_not_found(
                f"Unable to find {MANIFEST_FILE}",
                path=path,
                hint="Run this command from the project root",
            )

        try:
            obj: object = json.loads(text.value)
        except json.JSONDecodeError as e:
            return Err(
                SdlcError(
                    kind="version",
                    message=f"invalid JSON in {MANIFEST_FILE}: {e}",
                    hint=str(path),
                )
            )

        data = as_str_dict(obj)
        if data is None:
            return Err(
                SdlcError(
                    kind="version",
                    message=f"invalid JSON root in {MANIFEST_FILE}",
                    hint=str(path),
                )
            )
        return Ok(data)


class TypeScriptVersionSource(ManifestVersionSource):
    language = Language.TYPESCRIPT
