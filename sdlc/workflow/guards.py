"""Release workflow guards.

Each check returns ``Ok(None)`` when the precondition holds and a
``GuardViolation`` otherwise. A violation is an expected user state: it
carries a category, an explanation and numbered next steps for the console
to render, rather than being raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from sdlc.core.result import Err, Ok, Result
from sdlc.git.repository import MAIN_BRANCHES, GitError, Repository
from sdlc.github.gh import pr_exists
from sdlc.version.constants import ALL_VERSION_FILES

WORKFLOW_VIOLATION = "WORKFLOW VIOLATION"
RELEASE_BLOCKED = "RELEASE BLOCKED"

BUMP_COMMAND = 'sdlc bump-version --message "Your release message"'


@dataclass(frozen=True, slots=True)
class GuardViolation:
    category: str
    message: str
    steps: tuple[str, ...] = field(default_factory=tuple)


def is_main_branch(name: str) -> bool:
    return name in MAIN_BRANCHES


def has_version_bump(log_text: str) -> bool:
    """True if any version file name appears in ``git log --name-only`` output."""
    lower = log_text.lower()
    return any(name.lower() in lower for name in ALL_VERSION_FILES)


def _git_violation(e: GitError) -> GuardViolation:
    return GuardViolation(
        category=WORKFLOW_VIOLATION,
        message=f"git {e.command} failed: {e.message}",
        steps=("Make sure you are inside a git repository",),
    )


def check_feature_branch(repo: Repository) -> Result[str, GuardViolation]:
    """Releases start from a feature branch, never from main/master."""
    branch = repo.current_branch()
    if isinstance(branch, Err):
        return Err(_git_violation(branch.error))
    if is_main_branch(branch.value):
        return Err(
            GuardViolation(
                category=WORKFLOW_VIOLATION,
                message=f"Cannot release from {branch.value} branch",
                steps=(
                    "Create a feature branch first",
                    "Run: git checkout -b feature/description",
                ),
            )
        )
    return Ok(branch.value)


def check_clean_tree(repo: Repository) -> Result[None, GuardViolation]:
    status = repo.status()
    if isinstance(status, Err):
        return Err(_git_violation(status.error))
    if status.value:
        dirty = ", ".join(e.path for e in status.value[:5])
        if len(status.value) > 5:
            dirty += ", ..."
        return Err(
            GuardViolation(
                category=WORKFLOW_VIOLATION,
                message=f"Working tree not clean ({dirty})",
                steps=(
                    "Commit all changes before releasing",
                    'Run: git add . && git commit -m "Your message"',
                ),
            )
        )
    return Ok(None)


def check_pr_exists(root: Path, branch: str) -> Result[None, GuardViolation]:
    if not pr_exists(root=root):
        return Err(
            GuardViolation(
                category=RELEASE_BLOCKED,
                message="Missing Pull Request",
                steps=(
                    f"Push branch: git push origin {branch}",
                    'Create PR: gh pr create --title "[Release] Description"',
                    "Run this validation again",
                ),
            )
        )
    return Ok(None)


def check_version_bumped(repo: Repository, *, base: str = "main") -> Result[None, GuardViolation]:
    """The branch must contain a commit touching a version file."""
    log = repo.branch_log(base)
    if isinstance(log, Err):
        return Err(
            GuardViolation(
                category=RELEASE_BLOCKED,
                message=f"Failed to check branch commits: {log.error.message}",
                steps=(f"Run: git log {base}..HEAD --oneline --name-only",),
            )
        )
    if not has_version_bump(log.value):
        return Err(
            GuardViolation(
                category=RELEASE_BLOCKED,
                message="Version not bumped",
                steps=(
                    f"Run: {BUMP_COMMAND}",
                    "Commit the version changes",
                    "Create PR with version bump included",
                ),
            )
        )
    return Ok(None)


def validate_release_readiness(repo: Repository, root: Path) -> Result[str, GuardViolation]:
    """Run every guard in order; stop at the first violation.

    Returns the current branch name when all checks pass.
    """
    branch = check_feature_branch(repo)
    if isinstance(branch, Err):
        return branch

    clean = check_clean_tree(repo)
    if isinstance(clean, Err):
        return clean

    pr = check_pr_exists(root, branch.value)
    if isinstance(pr, Err):
        return pr

    bumped = check_version_bumped(repo)
    if isinstance(bumped, Err):
        return bumped

    return Ok(branch.value)
