from __future__ import annotations

import typer

from sdlc.cli.context import build_context
from sdlc.core.config import CONFIG_FILE_NAME, CONFIG_KEYS, load_config, set_config_value
from sdlc.core.errors import SdlcError
from sdlc.output.console import Style

from ._helpers import fail, unwrap_or_exit

config_app = typer.Typer(add_completion=False, no_args_is_help=True)


def _check_key(key: str) -> None:
    if key not in CONFIG_KEYS:
        ctx = build_context()
        fail(
            SdlcError(
                kind="validation",
                message=f"Unknown config key: {key}",
                hint=f"Valid keys: {', '.join(CONFIG_KEYS)}",
            ),
            ctx,
        )


@config_app.command("list")
def list_config() -> None:
    """Show the effective configuration."""
    ctx = build_context()
    raw = unwrap_or_exit(load_config(ctx.root), ctx) or {}
    if not raw:
        ctx.console.info(f"No {CONFIG_FILE_NAME} found, using defaults")

    effective = {
        "language": ctx.config.language,
        "tracker": ctx.config.tracker,
        "repo": ctx.config.repo,
        "view": ctx.config.view,
    }
    for key, value in effective.items():
        source = "" if key in raw else " (default)"
        shown = value if value is not None else "-"
        ctx.console.print(f"{key} = {shown}{source}")
    for key, value in ctx.config.extra.items():
        ctx.console.print(f"{key} = {value}", Style.DIM)


@config_app.command("get")
def get(key: str = typer.Argument(..., help="Configuration key")) -> None:
    """Print one configuration value."""
    _check_key(key)
    ctx = build_context()
    value = getattr(ctx.config, key)
    ctx.console.print("" if value is None else str(value))


@config_app.command("set")
def set_(
    key: str = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="Value to set"),
) -> None:
    """Set a configuration value in .sdlc.json."""
    ctx = build_context()
    unwrap_or_exit(set_config_value(ctx.root, key, value), ctx)
    ctx.console.success(f"{key} = {value}")


@config_app.command("unset")
def unset(key: str = typer.Argument(..., help="Configuration key")) -> None:
    """Remove a configuration value (revert to default)."""
    _check_key(key)
    ctx = build_context()
    raw = unwrap_or_exit(load_config(ctx.root), ctx) or {}
    if key not in raw:
        ctx.console.info(f"{key} is not set (already using default)")
        return

    path = unwrap_or_exit(set_config_value(ctx.root, key, None), ctx)
    ctx.console.success(f"{key} removed (will use default)")
    if path is None:
        ctx.console.print(f"{CONFIG_FILE_NAME} deleted (no keys left)", Style.DIM)
