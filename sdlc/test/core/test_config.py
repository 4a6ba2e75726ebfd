"""Tests for sdlc.core.config module."""

import json
from pathlib import Path

from sdlc.core.config import (
    CONFIG_FILE_NAME,
    SdlcConfig,
    get_config,
    load_config,
    set_config_value,
    unset_config_value,
)
from sdlc.core.result import Err, Ok


def _write(root: Path, data: object) -> Path:
    path = root / CONFIG_FILE_NAME
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadConfig:
    def test_missing_file_is_none(self, tmp_path: Path) -> None:
        assert load_config(tmp_path) == Ok(None)

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        result = get_config(tmp_path)
        assert result == Ok(SdlcConfig())
        assert isinstance(result, Ok)
        assert result.value.language == "nodejs"
        assert result.value.tracker == "github"

    def test_values_override_defaults(self, tmp_path: Path) -> None:
        _write(tmp_path, {"language": "python", "repo": "acme/widgets", "view": "table"})
        result = get_config(tmp_path)
        assert isinstance(result, Ok)
        assert result.value.language == "python"
        assert result.value.tracker == "github"
        assert result.value.repo == "acme/widgets"
        assert result.value.view == "table"

    def test_unknown_keys_are_kept(self, tmp_path: Path) -> None:
        _write(tmp_path, {"language": "go", "custom": 1})
        result = get_config(tmp_path)
        assert isinstance(result, Ok)
        assert result.value.extra == {"custom": 1}

    def test_invalid_json(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILE_NAME).write_text("{not json", encoding="utf-8")
        result = load_config(tmp_path)
        assert isinstance(result, Err)
        assert result.error.kind == "config"
        assert result.error.message.startswith("Invalid JSON in .sdlc.json")

    def test_root_must_be_object(self, tmp_path: Path) -> None:
        _write(tmp_path, ["nodejs"])
        result = load_config(tmp_path)
        assert isinstance(result, Err)
        assert result.error.message == "Config must be an object"

    def test_language_must_be_string(self, tmp_path: Path) -> None:
        _write(tmp_path, {"language": 3})
        result = get_config(tmp_path)
        assert isinstance(result, Err)
        assert "language" in result.error.message

    def test_view_must_be_list_or_table(self, tmp_path: Path) -> None:
        _write(tmp_path, {"view": "grid"})
        assert isinstance(load_config(tmp_path), Err)


class TestSetConfigValue:
    def test_creates_file_with_two_space_json(self, tmp_path: Path) -> None:
        result = set_config_value(tmp_path, "language", "python")
        path = tmp_path / CONFIG_FILE_NAME
        assert result == Ok(path)
        assert path.read_text(encoding="utf-8") == '{\n  "language": "python"\n}\n'

    def test_preserves_other_keys(self, tmp_path: Path) -> None:
        _write(tmp_path, {"language": "go", "custom": True})
        set_config_value(tmp_path, "repo", "acme/widgets")
        data = json.loads((tmp_path / CONFIG_FILE_NAME).read_text(encoding="utf-8"))
        assert data == {"language": "go", "custom": True, "repo": "acme/widgets"}

    def test_rejects_unknown_key(self, tmp_path: Path) -> None:
        result = set_config_value(tmp_path, "colour", "blue")
        assert isinstance(result, Err)
        assert result.error.kind == "validation"
        assert not (tmp_path / CONFIG_FILE_NAME).exists()

    def test_rejects_invalid_view(self, tmp_path: Path) -> None:
        result = set_config_value(tmp_path, "view", "grid")
        assert isinstance(result, Err)
        assert result.error.kind == "validation"
        assert not (tmp_path / CONFIG_FILE_NAME).exists()

    def test_rejects_repo_without_owner(self, tmp_path: Path) -> None:
        result = set_config_value(tmp_path, "repo", "widgets")
        assert isinstance(result, Err)
        assert result.error.message == "repo must match: owner/repo-name"
        assert not (tmp_path / CONFIG_FILE_NAME).exists()

    def test_repo_is_stripped(self, tmp_path: Path) -> None:
        assert isinstance(set_config_value(tmp_path, "repo", " acme/widgets "), Ok)
        data = json.loads((tmp_path / CONFIG_FILE_NAME).read_text(encoding="utf-8"))
        assert data == {"repo": "acme/widgets"}

    def test_unset_removes_key(self, tmp_path: Path) -> None:
        _write(tmp_path, {"language": "go", "tracker": "github"})
        assert unset_config_value(tmp_path, "language") == Ok(tmp_path / CONFIG_FILE_NAME)
        data = json.loads((tmp_path / CONFIG_FILE_NAME).read_text(encoding="utf-8"))
        assert data == {"tracker": "github"}

    def test_unset_last_key_deletes_file(self, tmp_path: Path) -> None:
        _write(tmp_path, {"language": "go"})
        assert unset_config_value(tmp_path, "language") == Ok(None)
        assert not (tmp_path / CONFIG_FILE_NAME).exists()

    def test_unset_without_file(self, tmp_path: Path) -> None:
        assert unset_config_value(tmp_path, "repo") == Ok(None)
