"""Tests for sdlc.version.constants and the source lookup table."""

from __future__ import annotations

from pathlib import Path

import pytest

from sdlc.core.result import Err, Ok
from sdlc.version import (
    ALL_VERSION_FILES,
    VERSION_FILES,
    DeclarativeVersionSource,
    Language,
    ManifestVersionSource,
    PlainTextVersionSource,
    TypeScriptVersionSource,
    get_version_source,
    is_version_file,
    parse_language,
)


class TestVersionFilesTable:
    @pytest.mark.parametrize("language", list(Language))
    def test_source_files_match_table(self, language: Language, tmp_path: Path) -> None:
        source = get_version_source(language, tmp_path)
        assert source.version_files() == VERSION_FILES[language]

    def test_every_language_has_an_entry(self) -> None:
        assert set(VERSION_FILES) == set(Language)

    def test_scan_list_covers_every_source(self) -> None:
        for files in VERSION_FILES.values():
            for name in files:
                assert name in ALL_VERSION_FILES

    @pytest.mark.parametrize("name", ["package.json", "changelog.md", "metadata", "go.mod"])
    def test_is_version_file(self, name: str) -> None:
        assert is_version_file(name)

    def test_is_version_file_case_insensitive(self) -> None:
        assert is_version_file("Package.JSON")

    def test_other_files(self) -> None:
        assert not is_version_file("README.md")
        assert not is_version_file("src/package.json.bak")


class TestGetVersionSource:
    @pytest.mark.parametrize(
        ("language", "cls"),
        [
            (Language.NODEJS, ManifestVersionSource),
            (Language.TYPESCRIPT, TypeScriptVersionSource),
            (Language.PYTHON, DeclarativeVersionSource),
            (Language.GO, PlainTextVersionSource),
        ],
    )
    def test_selects_by_language(self, language: Language, cls: type, tmp_path: Path) -> None:
        source = get_version_source(language, tmp_path)
        assert type(source) is cls
        assert source.root == tmp_path


class TestParseLanguage:
    def test_known(self) -> None:
        assert parse_language("Python") == Ok(Language.PYTHON)

    def test_unknown(self) -> None:
        result = parse_language("rust")
        assert isinstance(result, Err)
        assert result.error.kind == "config"
        assert result.error.message == "Unsupported language: rust"
