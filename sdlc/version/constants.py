"""Version file names per ecosystem.

``VERSION_FILES`` must stay in sync with each source's ``version_files()``;
``ALL_VERSION_FILES`` is what the commit-history scan looks for.
"""

from __future__ import annotations

from enum import StrEnum


class Language(StrEnum):
    NODEJS = "nodejs"
    TYPESCRIPT = "typescript"
    PYTHON = "python"
    GO = "go"


VERSION_FILES: dict[Language, tuple[str, ...]] = {
    Language.NODEJS: ("package.json", "CHANGELOG.md"),
    Language.TYPESCRIPT: ("package.json", "CHANGELOG.md"),
    Language.PYTHON: ("pyproject.toml", "setup.py", "version_notes.md", "METADATA"),
    Language.GO: ("VERSION", "go.mod", "CHANGELOG.md"),
}

ALL_VERSION_FILES: tuple[str, ...] = (
    "package.json",
    "CHANGELOG.md",
    "changelog.md",
    "pyproject.toml",
    "setup.py",
    "version_notes.md",
    "METADATA",
    "metadata",
    "VERSION",
    "go.mod",
)


def is_version_file(filename: str) -> bool:
    """Case-insensitive match against ``ALL_VERSION_FILES``."""
    lower = filename.lower()
    return any(name.lower() == lower for name in ALL_VERSION_FILES)
