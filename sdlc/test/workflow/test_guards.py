"""Tests for workflow/guards.py."""

from __future__ import annotations

from pathlib import Path
from typing import cast

import pytest

import sdlc.workflow.guards as guards
from sdlc.core.result import Err, Ok, Result
from sdlc.git.repository import GitError, Repository, StatusEntry
from sdlc.workflow.guards import (
    RELEASE_BLOCKED,
    WORKFLOW_VIOLATION,
    check_clean_tree,
    check_feature_branch,
    check_version_bumped,
    has_version_bump,
    is_main_branch,
    validate_release_readiness,
)


class FakeRepo:
    def __init__(
        self,
        *,
        branch: Result[str, GitError] = Ok("feature/x"),
        status: Result[list[StatusEntry], GitError] = Ok([]),
        log: Result[str, GitError] = Ok("abc123 chore: Bump version\npackage.json\n"),
    ) -> None:
        self._branch = branch
        self._status = status
        self._log = log
        self.log_bases: list[str] = []

    def current_branch(self) -> Result[str, GitError]:
        return self._branch

    def status(self) -> Result[list[StatusEntry], GitError]:
        return self._status

    def branch_log(self, base: str = "main") -> Result[str, GitError]:
        self.log_bases.append(base)
        return self._log


def _repo(**kwargs: object) -> Repository:
    return cast(Repository, FakeRepo(**kwargs))  # type: ignore[arg-type]


@pytest.fixture
def pr_found(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(guards, "pr_exists", lambda *, root: True)


class TestHelpers:
    def test_is_main_branch(self) -> None:
        assert is_main_branch("main")
        assert is_main_branch("master")
        assert not is_main_branch("mainline")

    def test_has_version_bump(self) -> None:
        assert has_version_bump("abc chore: bump\nVERSION\n")
        assert has_version_bump("abc bump\nCHANGELOG.md\n")
        assert not has_version_bump("abc feat: login\nsrc/login.ts\n")
        assert not has_version_bump("")


class TestCheckFeatureBranch:
    def test_feature_branch(self) -> None:
        assert check_feature_branch(_repo()) == Ok("feature/x")

    @pytest.mark.parametrize("branch", ["main", "master"])
    def test_main_is_rejected(self, branch: str) -> None:
        result = check_feature_branch(_repo(branch=Ok(branch)))
        assert isinstance(result, Err)
        assert result.error.category == WORKFLOW_VIOLATION
        assert branch in result.error.message
        assert "Create a feature branch first" in result.error.steps

    def test_git_failure(self) -> None:
        result = check_feature_branch(
            _repo(branch=Err(GitError(command="branch --show-current", message="not a repo")))
        )
        assert isinstance(result, Err)
        assert "not a repo" in result.error.message


class TestCheckCleanTree:
    def test_clean(self) -> None:
        assert check_clean_tree(_repo()) == Ok(None)

    def test_dirty_lists_paths(self) -> None:
        entries = [StatusEntry(xy=" M", path=f"f{i}.py") for i in range(7)]
        result = check_clean_tree(_repo(status=Ok(entries)))
        assert isinstance(result, Err)
        assert result.error.message == (
            "Working tree not clean (f0.py, f1.py, f2.py, f3.py, f4.py, ...)"
        )


class TestCheckVersionBumped:
    def test_bumped(self) -> None:
        repo = FakeRepo()
        assert check_version_bumped(cast(Repository, repo)) == Ok(None)
        assert repo.log_bases == ["main"]

    def test_not_bumped(self) -> None:
        result = check_version_bumped(_repo(log=Ok("abc feat: login\nsrc/login.ts\n")))
        assert isinstance(result, Err)
        assert result.error.category == RELEASE_BLOCKED
        assert result.error.message == "Version not bumped"
        assert result.error.steps[0].startswith("Run: sdlc bump-version")

    def test_log_failure(self) -> None:
        result = check_version_bumped(
            _repo(log=Err(GitError(command="log", message="unknown revision main")))
        )
        assert isinstance(result, Err)
        assert "unknown revision main" in result.error.message


class TestValidateReleaseReadiness:
    @pytest.mark.usefixtures("pr_found")
    def test_all_checks_pass(self, tmp_path: Path) -> None:
        assert validate_release_readiness(_repo(), tmp_path) == Ok("feature/x")

    def test_missing_pr(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(guards, "pr_exists", lambda *, root: False)
        result = validate_release_readiness(_repo(), tmp_path)
        assert isinstance(result, Err)
        assert result.error.category == RELEASE_BLOCKED
        assert result.error.message == "Missing Pull Request"
        assert result.error.steps[0] == "Push branch: git push origin feature/x"

    def test_stops_at_first_violation(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fail_if_called(*, root: Path) -> bool:
            raise AssertionError("pr check should not run")

        monkeypatch.setattr(guards, "pr_exists", fail_if_called)
        result = validate_release_readiness(_repo(branch=Ok("main")), tmp_path)
        assert isinstance(result, Err)
        assert result.error.category == WORKFLOW_VIOLATION

    @pytest.mark.usefixtures("pr_found")
    def test_dirty_tree_before_version_check(self, tmp_path: Path) -> None:
        repo = FakeRepo(status=Ok([StatusEntry(xy="??", path="tmp.txt")]))
        result = validate_release_readiness(cast(Repository, repo), tmp_path)
        assert isinstance(result, Err)
        assert "tmp.txt" in result.error.message
        assert repo.log_bases == []
