"""Git operations module.

Usage:
    from sdlc.git import Repository

    repo = Repository(Path.cwd())
    if not repo.is_clean():
        print("commit your changes first")
"""

from .repository import MAIN_BRANCHES, GitError, Repository, StatusEntry

__all__ = [
    "GitError",
    "MAIN_BRANCHES",
    "Repository",
    "StatusEntry",
]
