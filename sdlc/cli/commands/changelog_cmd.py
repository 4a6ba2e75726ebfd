from __future__ import annotations

import typer

from sdlc.changelog.blocks import (
    count_change_lines,
    extract_block,
    first_version,
    release_date_for,
)
from sdlc.changelog.update import changelog_path
from sdlc.cli.context import build_context
from sdlc.core.errors import SdlcError
from sdlc.output.console import Style
from sdlc.platform.files import read_optional_text

from ._helpers import fail, unwrap_or_exit

changelog_app = typer.Typer(add_completion=False, no_args_is_help=True)


@changelog_app.command("show")
def show(
    version: str | None = typer.Argument(None, help="Version to show (default: latest)"),
) -> None:
    """Show one version block of CHANGELOG.md."""
    ctx = build_context()
    path = changelog_path(ctx.root)
    content = unwrap_or_exit(read_optional_text(path), ctx)
    if content is None:
        fail(
            SdlcError(
                kind="file",
                message=f"{path.name} not found",
                hint=str(path),
                command='sdlc bump-version --message "Your release message"',
            ),
            ctx,
        )

    target = version or first_version(content)
    block = extract_block(content, target) if target else None
    if target is None or block is None:
        fail(
            SdlcError(
                kind="validation",
                message=f"No changelog entry for {target or 'any version'}",
                hint=str(path),
            ),
            ctx,
        )

    date = release_date_for(content, target)
    ctx.console.header(f"{target} ({date or 'undated'})")
    ctx.console.print(block.rstrip("\n"))
    ctx.console.newline()
    ctx.console.print(f"{count_change_lines(block)} change(s)", Style.DIM)
