"""Keep-a-Changelog version blocks.

A changelog is treated as an optional preamble followed by version blocks,
each starting with a ``## [<version>] - <date>`` header. A block runs from
its header to the next line starting with ``## [`` or ``# Changelog`` (or to
the end of the document).

This is a best-effort structural edit, not a markdown parser: everything
outside the targeted block is kept as-is, and the header pattern is the only
structure relied upon.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from sdlc.core.model import Issue

__all__ = [
    "CHANGELOG_FILENAME",
    "CHANGELOG_HEADER",
    "build_entry",
    "content_after",
    "content_before",
    "count_change_lines",
    "extract_block",
    "first_version",
    "release_date_for",
    "release_note_line",
    "upsert_version",
]

CHANGELOG_FILENAME = "CHANGELOG.md"

CHANGELOG_HEADER = (
    "# Changelog\n"
    "\n"
    "All notable changes to this project will be documented in this file.\n"
    "\n"
    "The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.0.0/),\n"
    "and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html).\n"
    "\n"
)

CHANGES_HEADING = "### Changes"

_NEXT_SECTION_RE = re.compile(r"^## \[|^# Changelog", re.MULTILINE)
_FIRST_VERSION_RE = re.compile(r"^## \[([^\]]+)\]\s*-", re.MULTILINE)
_CHANGES_RE = re.compile(r"^### Changes[ \t]*\r?$", re.MULTILINE)
_TRAILING_BLANK_RE = re.compile(r"(?:\r?\n[ \t]*)+\Z")
_LEADING_BLANK_RE = re.compile(r"\A(?:[ \t]*\r?\n)+")


def _header_re(version: str) -> re.Pattern[str]:
    return re.compile(rf"^## \[{re.escape(version)}\]", re.MULTILINE)


def _locate(content: str, version: str) -> tuple[int, int] | None:
    """Return (start, end) offsets of the version's block."""
    m = _header_re(version).search(content)
    if m is None:
        return None
    # ^ never matches mid-line at the search position, so the header line
    # itself cannot end the block.
    nxt = _NEXT_SECTION_RE.search(content, m.end())
    end = nxt.start() if nxt is not None else len(content)
    return (m.start(), end)


def _newline(content: str) -> str:
    """Line ending used by ``content`` (CRLF wins when present)."""
    return "\r\n" if "\r\n" in content else "\n"


def _ensure_blank_line_after(text: str, newline: str) -> str:
    return text.rstrip("\r\n") + newline * 2


def extract_block(content: str, version: str) -> str | None:
    """Return the block for ``version`` including its header, or None."""
    loc = _locate(content, version)
    if loc is None:
        return None
    start, end = loc
    return content[start:end]


def content_before(content: str, version: str) -> str | None:
    """Text preceding the version header.

    Trailing blank lines are collapsed so the text ends with exactly one
    blank line. Empty when the block is at the top of the document.
    """
    loc = _locate(content, version)
    if loc is None:
        return None
    before = content[: loc[0]]
    if not before.strip():
        return ""
    return _TRAILING_BLANK_RE.sub(_newline(content) * 2, before)


def content_after(content: str, version: str) -> str | None:
    """Text following the version block.

    Leading blank lines are dropped so the text starts at the next header;
    ``upsert_version`` puts back a single blank line in front of it. Empty
    when the block is the last one.
    """
    loc = _locate(content, version)
    if loc is None:
        return None
    after = content[loc[1] :]
    if not after.strip():
        return ""
    return _LEADING_BLANK_RE.sub("", after)


def count_change_lines(block: str) -> int:
    """Count ``* [id](url) - title`` bullets under the ``### Changes`` heading."""
    m = _CHANGES_RE.search(block)
    if m is None:
        return 0

    count = 0
    for line in block[m.end() :].split("\n"):
        trimmed = line.strip()
        if trimmed.startswith("## ") or trimmed.startswith("# Changelog"):
            break
        if trimmed.startswith("* [") and "](" in trimmed:
            count += 1
    return count


def first_version(content: str) -> str | None:
    """Version of the topmost ``## [x] -`` header, if any."""
    m = _FIRST_VERSION_RE.search(content)
    return m.group(1) if m else None


def release_date_for(content: str, version: str) -> str | None:
    m = re.search(rf"^## \[{re.escape(version)}\] - (.*)$", content, re.MULTILINE)
    if m is None:
        return None
    return m.group(1).strip()


def release_note_line(issue: Issue) -> str:
    return f"* [{issue.id}]({issue.url or '#'}) - {issue.title}"


def build_entry(
    version: str,
    release_date: str,
    issues: Sequence[Issue],
    message: str | None = None,
) -> str:
    """Render a new version block.

    Layout: header, blank line, optional release message paragraph, then a
    ``### Changes`` section with one bullet per issue when there are issues.
    """
    entry = f"## [{version}] - {release_date}\n\n"
    if message and message.strip():
        entry += f"{message.strip()}\n\n"
    if issues:
        entry += f"{CHANGES_HEADING}\n\n"
        for issue in issues:
            entry += f"{release_note_line(issue)}\n"
        entry += "\n"
    return entry


def upsert_version(document: str, version: str, entry: str) -> str:
    """Replace the block for ``version`` with ``entry``, or add it.

    When the version already has a block, everything before and after it is
    kept and exactly one blank line separates the entry from the next block.
    When it does not, the entry is prepended; a blank document is seeded
    with ``CHANGELOG_HEADER`` first. The entry is written with the
    document's line ending.
    """
    if not document.strip():
        return CHANGELOG_HEADER + entry

    newline = _newline(document)
    entry = entry.replace("\r\n", "\n").replace("\n", newline)
    if _locate(document, version) is None:
        return _ensure_blank_line_after(entry, newline) + _LEADING_BLANK_RE.sub("", document)

    before = content_before(document, version) or ""
    after = content_after(document, version) or ""
    if after:
        entry = _ensure_blank_line_after(entry, newline)
    return before + entry + after
