from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Issue:
    """Issue-tracker item, as far as release notes are concerned."""

    id: str
    title: str
    url: str | None = None
