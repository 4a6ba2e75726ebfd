"""Release workflow guards."""

from .guards import (
    GuardViolation,
    check_clean_tree,
    check_feature_branch,
    check_pr_exists,
    check_version_bumped,
    has_version_bump,
    is_main_branch,
    validate_release_readiness,
)

__all__ = [
    "GuardViolation",
    "check_clean_tree",
    "check_feature_branch",
    "check_pr_exists",
    "check_version_bumped",
    "has_version_bump",
    "is_main_branch",
    "validate_release_readiness",
]
