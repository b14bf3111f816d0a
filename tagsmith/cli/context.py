from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from tagsmith.core.config import ReleaseConfig, load_config
from tagsmith.core.errors import ErrorCode
from tagsmith.core.result import Err, Ok
from tagsmith.git.repository import Repository
from tagsmith.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    config: ReleaseConfig
    console: ConsoleProtocol


def build_context(repo: Path) -> CLIContext:
    try:
        root = repo.expanduser().resolve()
    except OSError as e:
        typer.echo(f"error: invalid --repo: {e}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if not root.is_dir():
        typer.echo(f"error: --repo '{root}' is not a directory", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    # A subdirectory releases the whole repository; outside a repository the
    # path is kept and the preflight check reports it.
    toplevel = Repository(root).toplevel()
    if isinstance(toplevel, Ok):
        root = toplevel.value

    config_result = load_config(root)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(root=root, config=config_result.value, console=RichConsole())
