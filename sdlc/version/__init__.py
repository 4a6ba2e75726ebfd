"""Project version sources, one per ecosystem.

Usage:
    source = get_version_source(Language.PYTHON, root)
    match source.current_version():
        case Ok(version):
            ...
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from sdlc.core.errors import SdlcError
from sdlc.core.result import Err, Ok, Result

from .base import VersionSource
from .constants import ALL_VERSION_FILES, VERSION_FILES, Language, is_version_file
from .declarative import DeclarativeVersionSource
from .manifest import ManifestVersionSource, TypeScriptVersionSource
from .plaintext import PlainTextVersionSource
from .semver import BumpOverrides, VersionTuple, compute_next, parse_version

__all__ = [
    "ALL_VERSION_FILES",
    "BumpOverrides",
    "DeclarativeVersionSource",
    "Language",
    "ManifestVersionSource",
    "PlainTextVersionSource",
    "TypeScriptVersionSource",
    "VERSION_FILES",
    "VersionSource",
    "VersionTuple",
    "compute_next",
    "get_version_source",
    "is_version_file",
    "parse_language",
    "parse_version",
]

_SOURCES: dict[Language, Callable[[Path], VersionSource]] = {
    Language.NODEJS: ManifestVersionSource,
    Language.TYPESCRIPT: TypeScriptVersionSource,
    Language.PYTHON: DeclarativeVersionSource,
    Language.GO: PlainTextVersionSource,
}


def parse_language(value: str) -> Result[Language, SdlcError]:
    try:
        return Ok(Language(value.strip().lower()))
    except ValueError:
        return Err(
            SdlcError(
                kind="config",
                message=f"Unsupported language: {value}",
                hint=f"Supported: {', '.join(lang.value for lang in Language)}",
                command="sdlc config set language nodejs",
            )
        )


def get_version_source(language: Language, root: Path) -> VersionSource:
    return _SOURCES[language](root)
