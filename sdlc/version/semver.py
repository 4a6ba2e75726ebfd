from __future__ import annotations

import re
from dataclasses import dataclass

from sdlc.core.errors import SdlcError
from sdlc.core.result import Err, Ok, Result
from sdlc.core.validation import validate_semantic_version

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


@dataclass(frozen=True, slots=True, order=True)
class VersionTuple:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True, slots=True)
class BumpOverrides:
    major: int | None = None
    minor: int | None = None
    patch: int | None = None

    @property
    def any(self) -> bool:
        return self.major is not None or self.minor is not None or self.patch is not None


def parse_version(text: str) -> Result[VersionTuple, SdlcError]:
    m = _VERSION_RE.match(text.strip())
    if m is None:
        return Err(
            SdlcError(
                kind="version",
                message=f"cannot compute next version from {text!r}",
                hint="Expected MAJOR.MINOR.PATCH; pass --version to set one explicitly",
                command='sdlc bump-version --version 1.2.3 --message "..."',
            )
        )
    return Ok(VersionTuple(int(m.group(1)), int(m.group(2)), int(m.group(3))))


def compute_next(
    current: str,
    overrides: BumpOverrides,
    explicit_version: str | None = None,
) -> Result[str, SdlcError]:
    """Compute the version to release.

    An explicit version is used verbatim and cannot be combined with
    overrides. Otherwise each component comes from the overrides, falling
    back to the current value; patch falls back to ``current.patch + 1``,
    so giving only ``major`` turns 1.2.3 into 2.2.4.
    """
    if explicit_version is not None:
        if overrides.any:
            return Err(
                SdlcError(
                    kind="validation",
                    message="Cannot specify version and major, minor, or patch",
                    hint="Use either --version or --major/--minor/--patch",
                )
            )
        return validate_semantic_version(explicit_version)

    parsed = parse_version(current)
    if isinstance(parsed, Err):
        return parsed
    cur = parsed.value

    nxt = VersionTuple(
        major=overrides.major if overrides.major is not None else cur.major,
        minor=overrides.minor if overrides.minor is not None else cur.minor,
        patch=overrides.patch if overrides.patch is not None else cur.patch + 1,
    )
    return Ok(str(nxt))
