from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from sdlc.core.config import SdlcConfig, get_config
from sdlc.core.errors import exit_code_for
from sdlc.core.result import Err
from sdlc.git.repository import Repository
from sdlc.output.console import ConsoleProtocol, RichConsole

ROOT_ENV_VAR = "SDLC_ROOT"


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    config: SdlcConfig
    console: ConsoleProtocol

    @property
    def repo(self) -> Repository:
        return Repository(self.root)


def project_root() -> Path:
    """``--root`` (via SDLC_ROOT) if given, else the current directory."""
    env = os.environ.get(ROOT_ENV_VAR)
    if env:
        return Path(env)
    return Path.cwd()


def build_context(console: ConsoleProtocol | None = None) -> CLIContext:
    console = console or RichConsole()
    root = project_root()

    config = get_config(root)
    if isinstance(config, Err):
        console.error(config.error.pretty())
        raise typer.Exit(code=int(exit_code_for(config.error.kind)))

    return CLIContext(root=root, config=config.value, console=console)
