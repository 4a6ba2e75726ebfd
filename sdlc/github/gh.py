from __future__ import annotations

import json
import shutil
from pathlib import Path

from sdlc.core.errors import SdlcError
from sdlc.core.model import Issue
from sdlc.core.result import Err, Ok, Result
from sdlc.core.structured import as_obj_list, as_str_dict, get_str
from sdlc.platform.process import run as run_process

GH_TIMEOUT_SECONDS = 60.0

FIXED_LABEL = "fixed"
_ISSUE_FIELDS = "number,title,url,state,assignees,labels"


def ensure_gh_available() -> Result[None, SdlcError]:
    if shutil.which("gh") is None:
        return Err(
            SdlcError(
                kind="external_tool",
                message="gh: missing",
                hint="Install GitHub CLI: https://cli.github.com/",
            )
        )
    return Ok(None)


def pr_exists(*, root: Path) -> bool:
    """True if the current branch has a pull request."""
    result = run_process(
        ["gh", "pr", "view", "--json", "url"], cwd=root, timeout=GH_TIMEOUT_SECONDS
    )
    return isinstance(result, Ok)


def _has_label(issue: dict[str, object], name: str) -> bool:
    labels = as_obj_list(issue.get("labels")) or []
    for label in labels:
        data = as_str_dict(label)
        if data is None:
            continue
        label_name = get_str(data, "name")
        if label_name is not None and label_name.lower() == name:
            return True
    return False


def _first_assignee(issue: dict[str, object]) -> str | None:
    assignees = as_obj_list(issue.get("assignees")) or []
    if not assignees:
        return None
    first = as_str_dict(assignees[0])
    return get_str(first, "login") if first is not None else None


def parse_fixed_issues(
    payload: str, *, assignee: str | None = None
) -> Result[list[Issue], SdlcError]:
    """Open issues labelled ``fixed`` from a ``gh issue list --json`` payload.

    With ``assignee``, only issues whose first assignee has that login are kept.
    """
    try:
        obj: object = json.loads(payload)
    except json.JSONDecodeError as e:
        return Err(
            SdlcError(kind="tracker", message=f"invalid JSON from gh issue list: {e}")
        )

    items = as_obj_list(obj)
    if items is None:
        return Err(SdlcError(kind="tracker", message="unexpected gh issue list payload"))

    issues: list[Issue] = []
    for item in items:
        data = as_str_dict(item)
        if data is None:
            continue
        state = get_str(data, "state") or ""
        if state.lower() != "open" or not _has_label(data, FIXED_LABEL):
            continue
        if assignee and _first_assignee(data) != assignee:
            continue
        number = data.get("number")
        title = get_str(data, "title")
        if not isinstance(number, int) or title is None:
            continue
        issues.append(Issue(id=str(number), title=title, url=get_str(data, "url")))
    return Ok(issues)


def fixed_issues(
    *, root: Path, repo: str | None = None, assignee: str | None = None
) -> Result[list[Issue], SdlcError]:
    """Issues fixed in code but not yet released (open, labelled ``fixed``)."""
    cmd = ["gh", "issue", "list", "--state", "open", "--json", _ISSUE_FIELDS, "--limit", "100"]
    if repo:
        cmd.extend(["--repo", repo])
    if assignee:
        cmd.extend(["--assignee", assignee])

    result = run_process(cmd, cwd=root, timeout=GH_TIMEOUT_SECONDS)
    if isinstance(result, Err):
        return Err(
            SdlcError(
                kind="tracker",
                message="failed to list fixed issues",
                hint=result.error.stderr.strip() or None,
                command="gh auth status",
            )
        )
    return parse_fixed_issues(result.value, assignee=assignee)
