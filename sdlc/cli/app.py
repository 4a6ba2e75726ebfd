from __future__ import annotations

import os
from pathlib import Path

import typer

from sdlc import __version__
from sdlc.changelog.blocks import CHANGELOG_FILENAME, release_date_for
from sdlc.cli.commands.changelog_cmd import changelog_app
from sdlc.cli.commands.config_cmd import config_app
from sdlc.cli.commands.release_cmd import (
    bump_version,
    current_version,
    preview,
    update_changelog,
    validate,
)
from sdlc.cli.context import ROOT_ENV_VAR
from sdlc.core.errors import ErrorCode
from sdlc.core.result import Ok
from sdlc.platform.files import read_optional_text

# Checkout root of the tool itself, where its own CHANGELOG.md lives.
TOOL_ROOT = Path(__file__).resolve().parents[2]


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command("current-version")(current_version)
app.command()(preview)
app.command("bump-version")(bump_version)
app.command("update-changelog")(update_changelog)
app.command()(validate)

# Sub-apps
app.add_typer(config_app, name="config", help="Read and write .sdlc.json")
app.add_typer(changelog_app, name="changelog", help="Inspect CHANGELOG.md")


def version_line() -> str:
    """``sdlc <version>``, plus the release date when the tool's changelog has one."""
    line = f"sdlc {__version__}"
    content = read_optional_text(TOOL_ROOT / CHANGELOG_FILENAME)
    if isinstance(content, Ok) and content.value:
        release_date = release_date_for(content.value, __version__)
        if release_date:
            line += f" ({release_date})"
    return line


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(version_line())
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    root: Path | None = typer.Option(
        None,
        "--root",
        help="Project root (defaults to the current directory)",
    ),
) -> None:
    if root is not None:
        try:
            resolved = root.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --root: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not resolved.is_dir():
            typer.echo(f"error: --root '{resolved}' is not a directory", err=True)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

        os.environ[ROOT_ENV_VAR] = str(resolved)


def main() -> None:
    app()
