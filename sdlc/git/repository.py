"""Git repository abstraction.

Thin wrapper over the git CLI for the checks and commits the release
workflow needs. All operations return Result types.

Usage:
    repo = Repository(Path.cwd())

    match repo.status():
        case Ok(entries):
            if not entries:
                print("Working tree clean")
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from sdlc.core.result import Err, Ok, Result
from sdlc.platform.process import ProcessError
from sdlc.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0

MAIN_BRANCHES = ("main", "master")

__all__ = [
    "GitError",
    "MAIN_BRANCHES",
    "Repository",
    "StatusEntry",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message (stderr when available)
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """A single ``git status --porcelain`` entry.

    Attributes:
        xy: Two-character status code (e.g., "M ", " M", "??")
        path: File path
    """

    xy: str
    path: str


class Repository:
    """Git repository rooted at ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def is_inside_work_tree(self) -> bool:
        result = self._run(["rev-parse", "--is-inside-work-tree"])
        match result:
            case Ok(stdout):
                return stdout.strip() == "true"
            case Err(_):
                return False

    def current_branch(self) -> Result[str, GitError]:
        """Current branch name (empty string on a detached HEAD)."""
        result = self._run(["branch", "--show-current"])
        match result:
            case Err(e):
                return Err(self._error("branch --show-current", e))
            case Ok(stdout):
                return Ok(stdout.strip())

    def is_on_main(self) -> Result[bool, GitError]:
        branch = self.current_branch()
        if isinstance(branch, Err):
            return branch
        return Ok(branch.value in MAIN_BRANCHES)

    def status(self) -> Result[list[StatusEntry], GitError]:
        """Working tree changes from ``git status --porcelain``."""
        result = self._run(["status", "--porcelain"])
        match result:
            case Err(e):
                return Err(self._error("status", e))
            case Ok(stdout):
                entries: list[StatusEntry] = []
                for line in stdout.splitlines():
                    entry = self._parse_entry(line)
                    if entry is not None:
                        entries.append(entry)
                return Ok(entries)

    def is_clean(self) -> bool:
        """Check if working tree is clean.

        Returns False if status cannot be determined.
        """
        result = self.status()
        match result:
            case Ok(entries):
                return not entries
            case Err(_):
                return False

    def branch_log(self, base: str = "main") -> Result[str, GitError]:
        """Commits on HEAD not on ``base``, with the files each one touched."""
        result = self._run(["log", f"{base}..HEAD", "--oneline", "--name-only"])
        match result:
            case Err(e):
                return Err(self._error(f"log {base}..HEAD", e))
            case Ok(stdout):
                return Ok(stdout)

    def add(self, paths: Sequence[str]) -> Result[None, GitError]:
        result = self._run(["add", "--", *paths])
        if isinstance(result, Err):
            return Err(self._error("add", result.error))
        return Ok(None)

    def commit(self, message: str, *, no_verify: bool = True) -> Result[str, GitError]:
        args = ["commit", "-m", message]
        if no_verify:
            args.insert(1, "--no-verify")
        result = self._run(args)
        match result:
            case Err(e):
                return Err(self._error("commit", e))
            case Ok(stdout):
                return Ok(stdout.strip())

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        return run_process(
            ["git", "-C", str(self.path), *args], cwd=self.path, timeout=_GIT_TIMEOUT_SECONDS
        )

    @staticmethod
    def _error(command: str, e: ProcessError) -> GitError:
        return GitError(
            command=command,
            message=e.stderr.strip() or e.stdout.strip() or f"git {command} failed",
            returncode=e.returncode,
        )

    @staticmethod
    def _parse_entry(line: str) -> StatusEntry | None:
        if len(line) < 4:
            return None
        if line.startswith("?? "):
            return StatusEntry(xy="??", path=line[3:])
        return StatusEntry(xy=line[:2], path=line[3:])
