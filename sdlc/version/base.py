from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from sdlc.core.errors import SdlcError
from sdlc.core.model import Issue
from sdlc.core.result import Err, Result


class VersionSource(Protocol):
    """Reads and writes the version number of one kind of project.

    All file names are resolved relative to ``root``.
    """

    root: Path

    def current_version(self) -> Result[str, SdlcError]:
        """Return the canonical version string, or a ``version`` error."""
        ...

    def update_version(
        self,
        version: str,
        *,
        release_date: str,
        issues: Sequence[Issue],
        message: str | None = None,
    ) -> Result[list[Path], SdlcError]:
        """Write ``version`` to every version file; return the files written."""
        ...

    def version_files(self) -> tuple[str, ...]:
        """File names whose change in a commit counts as a version bump."""
        ...


def version_not_found(message: str, *, path: Path, hint: str | None = None) -> Err[SdlcError]:
    return Err(
        SdlcError(
            kind="version",
            message=message,
            hint=hint or str(path),
        )
    )
