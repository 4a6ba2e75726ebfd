from __future__ import annotations

import typer

from sdlc.changelog.blocks import release_note_line
from sdlc.changelog.update import format_release_date, update_changelog_for_version
from sdlc.cli.context import CLIContext, build_context
from sdlc.core.result import Err, Ok
from sdlc.github.gh import fixed_issues
from sdlc.output.console import Style
from sdlc.version import BumpOverrides, VersionSource, compute_next
from sdlc.workflow.guards import (
    check_clean_tree,
    check_feature_branch,
    check_version_bumped,
    validate_release_readiness,
)

from ._helpers import (
    ensure_github_tracker,
    exit_on_violation,
    resolve_version_source,
    unwrap_or_exit,
)

_LANGUAGE_HELP = "Project language (nodejs, typescript, python, go); defaults to config"


def current_version(
    language: str | None = typer.Option(None, "--language", "-l", help=_LANGUAGE_HELP),
) -> None:
    """Print the project's current version."""
    ctx = build_context()
    source = resolve_version_source(ctx, language)
    ctx.console.print(unwrap_or_exit(source.current_version(), ctx))


def preview(
    language: str | None = typer.Option(None, "--language", "-l", help=_LANGUAGE_HELP),
    user: str | None = typer.Option(
        None, "--user", "-u", help="Only issues assigned to this GitHub login"
    ),
) -> None:
    """Preview the fixed issues that the next release would ship."""
    ctx = build_context()
    source = resolve_version_source(ctx, language)
    current = unwrap_or_exit(source.current_version(), ctx)

    ensure_github_tracker(ctx)
    issues = unwrap_or_exit(
        fixed_issues(root=ctx.root, repo=ctx.config.repo, assignee=user), ctx
    )

    ctx.console.header(f"Fixed issues for the release after {current}")
    if not issues:
        ctx.console.success("No fixed issues found")
    for issue in issues:
        ctx.console.print(release_note_line(issue))

    nxt = compute_next(current, BumpOverrides())
    if isinstance(nxt, Ok):
        ctx.console.newline()
        ctx.console.print(f"Next version would be: {nxt.value}", Style.BOLD)


def bump_version(
    message: str = typer.Option(..., "--message", help="Release message"),
    major: int | None = typer.Option(None, "--major", "-M", min=0, help="Major version number"),
    minor: int | None = typer.Option(None, "--minor", "-m", min=0, help="Minor version number"),
    patch: int | None = typer.Option(None, "--patch", "-p", min=0, help="Patch version number"),
    version: str | None = typer.Option(None, "--version", "-v", help="Specific version to set"),
    language: str | None = typer.Option(None, "--language", "-l", help=_LANGUAGE_HELP),
    no_commit: bool = typer.Option(
        False, "--no-commit", help="Skip automatic commit of version changes"
    ),
) -> None:
    """Bump the project version and record fixed issues in the changelog."""
    ctx = build_context()
    exit_on_violation(check_feature_branch(ctx.repo), ctx)
    exit_on_violation(check_clean_tree(ctx.repo), ctx)

    ctx.console.header("Release version bump")

    source = resolve_version_source(ctx, language)
    previous = unwrap_or_exit(source.current_version(), ctx)
    next_version = unwrap_or_exit(
        compute_next(previous, BumpOverrides(major=major, minor=minor, patch=patch), version),
        ctx,
    )

    ensure_github_tracker(ctx)
    issues = unwrap_or_exit(fixed_issues(root=ctx.root, repo=ctx.config.repo), ctx)

    release_date = format_release_date()
    unwrap_or_exit(
        source.update_version(
            next_version, release_date=release_date, issues=issues, message=message
        ),
        ctx,
    )

    ctx.console.print(f"Previous version: {previous}")
    ctx.console.print(f"Next version: {next_version}")
    ctx.console.print(f"Release date: {release_date}")
    ctx.console.print(f"Message: {message}")
    if issues:
        ctx.console.print("Release notes:")
        for issue in issues:
            ctx.console.print(f"  {release_note_line(issue)}", Style.DIM)

    if no_commit:
        ctx.console.warning("Skipping automatic commit (--no-commit)")
        ctx.console.print("   Review the changes and commit them manually.", Style.DIM)
        return

    _commit_version_changes(ctx, source, next_version)


def _commit_version_changes(ctx: CLIContext, source: VersionSource, version: str) -> None:
    files = [name for name in source.version_files() if (ctx.root / name).exists()]
    message = (
        f"chore: Bump version to {version}\n\n"
        "- Updated version files\n"
        "- Added release notes\n\n"
        f"Resolves version bump to {version}"
    )

    result = ctx.repo.add(files)
    if isinstance(result, Ok):
        result = ctx.repo.commit(message)
    if isinstance(result, Err):
        ctx.console.warning(f"Error committing changes: {result.error.message}")
        ctx.console.print("   Please commit the changes manually.", Style.DIM)
        return
    ctx.console.success("Version changes committed")


def update_changelog(
    language: str | None = typer.Option(None, "--language", "-l", help=_LANGUAGE_HELP),
) -> None:
    """Rewrite the changelog entry of the current (already bumped) version."""
    ctx = build_context()
    exit_on_violation(check_version_bumped(ctx.repo), ctx)

    source = resolve_version_source(ctx, language)
    version = unwrap_or_exit(source.current_version(), ctx)

    ensure_github_tracker(ctx)
    issues = unwrap_or_exit(fixed_issues(root=ctx.root, repo=ctx.config.repo), ctx)

    unwrap_or_exit(update_changelog_for_version(ctx.root, version, issues), ctx)
    ctx.console.success(f"CHANGELOG.md updated for version {version}")


def validate() -> None:
    """Check that the current branch is ready for release."""
    ctx = build_context()
    ctx.console.header("Validating release readiness")
    branch = exit_on_violation(validate_release_readiness(ctx.repo, ctx.root), ctx)
    ctx.console.success(f"Current branch: {branch}")
    ctx.console.success("Working tree is clean")
    ctx.console.success("PR exists for current branch")
    ctx.console.success("Version bump detected in branch commits")
    ctx.console.newline()
    ctx.console.success("All checks passed - ready for release")
