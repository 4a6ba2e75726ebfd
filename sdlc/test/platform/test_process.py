"""Tests for sdlc.platform.process module."""

from __future__ import annotations

import sys
from pathlib import Path

from sdlc.core.result import Err, Ok
from sdlc.platform.process import ProcessError, run


class TestRun:
    def test_returns_stdout(self, tmp_path: Path) -> None:
        result = run([sys.executable, "-c", "print('1.2.3')"], cwd=tmp_path)
        assert result == Ok("1.2.3\n")

    def test_nonzero_exit_is_err(self, tmp_path: Path) -> None:
        result = run(
            [sys.executable, "-c", "import sys; sys.stderr.write('nope'); sys.exit(3)"],
            cwd=tmp_path,
        )
        assert isinstance(result, Err)
        assert result.error.returncode == 3
        assert result.error.stderr == "nope"

    def test_missing_executable(self, tmp_path: Path) -> None:
        result = run(["definitely-not-a-real-binary-xyz"], cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error.returncode == -1

    def test_timeout(self, tmp_path: Path) -> None:
        result = run(
            [sys.executable, "-c", "import time; time.sleep(5)"], cwd=tmp_path, timeout=0.2
        )
        assert isinstance(result, Err)
        assert "timed out" in result.error.stderr


class TestProcessError:
    def test_str_truncates_long_commands(self) -> None:
        err = ProcessError(
            command=("gh", "issue", "list", "--label", "fixed"),
            returncode=1,
            stdout="",
            stderr="",
        )
        assert str(err) == "gh issue list ... failed (exit 1)"
