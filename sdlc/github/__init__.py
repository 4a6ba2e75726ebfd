"""GitHub CLI (gh) wrappers."""

from .gh import ensure_gh_available, fixed_issues, parse_fixed_issues, pr_exists

__all__ = [
    "ensure_gh_available",
    "fixed_issues",
    "parse_fixed_issues",
    "pr_exists",
]
