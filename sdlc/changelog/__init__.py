"""Changelog editing: locate, extract and replace version blocks."""

from .blocks import (
    CHANGELOG_FILENAME,
    CHANGELOG_HEADER,
    build_entry,
    content_after,
    content_before,
    count_change_lines,
    extract_block,
    first_version,
    release_date_for,
    release_note_line,
    upsert_version,
)
from .update import changelog_path, format_release_date, update_changelog_for_version

__all__ = [
    "CHANGELOG_FILENAME",
    "CHANGELOG_HEADER",
    "build_entry",
    "changelog_path",
    "content_after",
    "content_before",
    "count_change_lines",
    "extract_block",
    "first_version",
    "format_release_date",
    "release_date_for",
    "release_note_line",
    "update_changelog_for_version",
    "upsert_version",
]
