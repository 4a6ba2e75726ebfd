from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

import sdlc.cli.app as app_module
from sdlc import __version__
from sdlc.cli.app import app
from sdlc.cli.context import ROOT_ENV_VAR

runner = CliRunner()


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    # Registered so the value --root writes is restored afterwards.
    monkeypatch.setenv(ROOT_ENV_VAR, str(tmp_path))
    return tmp_path


def test_version_flag_without_changelog(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(app_module, "TOOL_ROOT", tmp_path)
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"sdlc {__version__}"


def test_version_flag_shows_release_date(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "CHANGELOG.md").write_text(
        f"# Changelog\n\n## [{__version__}] - October 19, 2026\n\nFirst release.\n",
        encoding="utf-8",
    )
    monkeypatch.setattr(app_module, "TOOL_ROOT", tmp_path)
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"sdlc {__version__} (October 19, 2026)"


def test_version_flag_ignores_unreadable_changelog(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "CHANGELOG.md").mkdir()
    monkeypatch.setattr(app_module, "TOOL_ROOT", tmp_path)
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"sdlc {__version__}"


def test_help_lists_commands() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for name in ("current-version", "bump-version", "update-changelog", "validate", "config"):
        assert name in result.stdout


def test_current_version_with_root(project: Path) -> None:
    (project / "package.json").write_text(json.dumps({"version": "4.5.6"}), encoding="utf-8")
    result = runner.invoke(app, ["--root", str(project), "current-version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "4.5.6"


def test_root_must_be_a_directory(project: Path) -> None:
    result = runner.invoke(app, ["--root", str(project / "missing"), "current-version"])
    assert result.exit_code == 2


def test_config_round_trip(project: Path) -> None:
    assert runner.invoke(app, ["config", "set", "repo", "acme/widgets"]).exit_code == 0
    result = runner.invoke(app, ["config", "get", "repo"])
    assert result.stdout.strip() == "acme/widgets"


def test_changelog_show(project: Path) -> None:
    (project / "CHANGELOG.md").write_text(
        "# Changelog\n\n"
        "## [1.1.0] - October 19, 2026\n\n### Changes\n\n* [3](#) - Fix\n\n"
        "## [1.0.0] - October 1, 2026\n",
        encoding="utf-8",
    )
    result = runner.invoke(app, ["changelog", "show"])
    assert result.exit_code == 0
    assert "1.1.0 (October 19, 2026)" in result.stdout
    assert "* [3](#) - Fix" in result.stdout
    assert "1 change(s)" in result.stdout

    older = runner.invoke(app, ["changelog", "show", "1.0.0"])
    assert "1.0.0 (October 1, 2026)" in older.stdout
    assert "0 change(s)" in older.stdout


def test_changelog_show_unknown_version(project: Path) -> None:
    (project / "CHANGELOG.md").write_text("# Changelog\n", encoding="utf-8")
    result = runner.invoke(app, ["changelog", "show", "9.9.9"])
    assert result.exit_code == 1
    assert "No changelog entry for 9.9.9" in result.stdout


def test_invalid_config_exits_with_user_error(project: Path) -> None:
    (project / ".sdlc.json").write_text('{"view": "grid"}', encoding="utf-8")
    result = runner.invoke(app, ["config", "list"])
    assert result.exit_code == 1
