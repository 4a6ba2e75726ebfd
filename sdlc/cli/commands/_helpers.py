"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from sdlc.core.errors import ErrorCode, SdlcError, exit_code_for
from sdlc.core.result import Err, Result
from sdlc.github.gh import ensure_gh_available
from sdlc.version import Language, VersionSource, get_version_source, parse_language
from sdlc.workflow.guards import GuardViolation

if TYPE_CHECKING:
    from sdlc.cli.context import CLIContext


def fail(error: SdlcError, ctx: CLIContext) -> NoReturn:
    """Print an error with its suggestion and follow-up command, then exit."""
    ctx.console.error(error.pretty())
    raise typer.Exit(code=int(exit_code_for(error.kind)))


def unwrap_or_exit[T](result: Result[T, SdlcError], ctx: CLIContext) -> T:
    """Return the Ok value, or report the error and exit.

    Replaces the common pattern:
        if isinstance(result, Err):
            ctx.console.error(...)
            raise typer.Exit(...)
        value = result.value
    """
    if isinstance(result, Err):
        fail(result.error, ctx)
    return result.value


def exit_on_violation[T](result: Result[T, GuardViolation], ctx: CLIContext) -> T:
    if isinstance(result, Err):
        v = result.error
        ctx.console.violation(v.category, v.message, v.steps)
        raise typer.Exit(code=int(ErrorCode.WORKFLOW_ERROR))
    return result.value


def resolve_version_source(ctx: CLIContext, language: str | None) -> VersionSource:
    lang: Language = unwrap_or_exit(parse_language(language or ctx.config.language), ctx)
    return get_version_source(lang, ctx.root)


def ensure_github_tracker(ctx: CLIContext) -> None:
    if ctx.config.tracker != "github":
        fail(
            SdlcError(
                kind="config",
                message=f"Unsupported tracker: {ctx.config.tracker}",
                hint="Only the github tracker is supported",
                command="sdlc config set tracker github",
            ),
            ctx,
        )
    unwrap_or_exit(ensure_gh_available(), ctx)
