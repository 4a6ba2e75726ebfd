"""Input validation for CLI arguments and config values."""

from __future__ import annotations

import re
from collections.abc import Collection

from .errors import SdlcError
from .result import Err, Ok, Result

__all__ = [
    "validate_one_of",
    "validate_repo_format",
    "validate_semantic_version",
]

_SEMVER_RE = re.compile(r"^\d+\.\d+\.\d+(-[a-zA-Z0-9.-]+)?(\+[a-zA-Z0-9.-]+)?$")
_REPO_RE = re.compile(r"^[a-zA-Z0-9._-]+/[a-zA-Z0-9._-]+$")


def _validate_pattern(
    value: str, field: str, pattern: re.Pattern[str], description: str
) -> Result[str, SdlcError]:
    if pattern.match(value) is None:
        return Err(
            SdlcError(
                kind="validation",
                message=f"{field} must match: {description}",
                hint=f"got {value!r}",
            )
        )
    return Ok(value)


def validate_semantic_version(version: str) -> Result[str, SdlcError]:
    """Accept MAJOR.MINOR.PATCH with optional pre-release and build metadata."""
    return _validate_pattern(
        version.strip(), "version", _SEMVER_RE, "semantic version (e.g., 1.0.0)"
    )


def validate_repo_format(repo: str) -> Result[str, SdlcError]:
    return _validate_pattern(repo.strip(), "repo", _REPO_RE, "owner/repo-name")


def validate_one_of(value: str, field: str, allowed: Collection[str]) -> Result[str, SdlcError]:
    if value not in allowed:
        choices = ", ".join(allowed)
        return Err(
            SdlcError(
                kind="validation",
                message=f"{field} must be one of: {choices}",
                hint=f"got {value!r}",
            )
        )
    return Ok(value)
