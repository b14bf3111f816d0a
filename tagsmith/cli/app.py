from __future__ import annotations

from pathlib import Path

import typer

from tagsmith import __version__
from tagsmith.cli.context import build_context
from tagsmith.cli.errors import print_release_error, release_exit_code
from tagsmith.core.result import Err
from tagsmith.release.semver import VERSION_TAG_PATTERN
from tagsmith.services.workflow import is_affirmative, prepare_release, print_summary


app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
    help="Prepare a release: bump the manifest, regenerate the changelog, commit and sign a tag.",
)


def _confirm_suggestion(tag: str) -> bool:
    answer = typer.prompt(f"Use suggested version {tag}? [Y/n]", default="", show_default=False)
    return is_affirmative(answer)


@app.command()
def release(
    version_tag: str | None = typer.Argument(
        None,
        help=f"Tag to release, matching {VERSION_TAG_PATTERN}. Suggested by git-cliff when omitted.",
        show_default=False,
    ),
    repo: Path = typer.Option(
        Path("."),
        "--repo",
        help="Repository root.",
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    ctx = build_context(repo)

    prepared = prepare_release(
        root=ctx.root,
        config=ctx.config,
        candidate=version_tag,
        confirm=_confirm_suggestion,
        console=ctx.console,
    )
    if isinstance(prepared, Err):
        print_release_error(prepared.error, ctx.console)
        raise typer.Exit(code=release_exit_code(prepared.error))

    summary = print_summary(
        root=ctx.root,
        config=ctx.config,
        release=prepared.value,
        console=ctx.console,
    )
    if isinstance(summary, Err):
        print_release_error(summary.error, ctx.console)
        raise typer.Exit(code=release_exit_code(summary.error))


def main() -> None:
    app()
