from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from pathlib import Path

from sdlc.core.errors import SdlcError
from sdlc.core.model import Issue
from sdlc.core.result import Err, Ok, Result
from sdlc.platform.files import read_optional_text, write_text

from .blocks import CHANGELOG_FILENAME, build_entry, upsert_version

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_release_date(day: date | None = None) -> str:
    """Long en-US date, e.g. ``October 19, 2026`` (locale independent)."""
    d = day or date.today()
    return f"{_MONTHS[d.month - 1]} {d.day}, {d.year}"


def changelog_path(root: Path) -> Path:
    return root / CHANGELOG_FILENAME


def update_changelog_for_version(
    root: Path,
    version: str,
    issues: Sequence[Issue],
    *,
    release_date: str | None = None,
    message: str | None = None,
) -> Result[Path, SdlcError]:
    """Write the block for ``version`` into ``root/CHANGELOG.md``.

    A missing changelog is created. An existing block for the same version is
    replaced; other blocks are left untouched.
    """
    path = changelog_path(root)
    existing = read_optional_text(path)
    if isinstance(existing, Err):
        return existing

    entry = build_entry(version, release_date or format_release_date(), issues, message)
    updated = upsert_version(existing.value or "", version, entry)

    written = write_text(path, updated)
    if isinstance(written, Err):
        return written
    return Ok(path)
