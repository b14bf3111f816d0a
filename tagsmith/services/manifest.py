"""Manifest version updates through the project's package manager."""

from __future__ import annotations

from pathlib import Path

from tagsmith.core.config import VERSION_PLACEHOLDER, ReleaseConfig
from tagsmith.core.result import Err, Ok, Result
from tagsmith.platform.process import run as run_process
from tagsmith.release.errors import ReleaseError
from tagsmith.services.errors import tool_error

# First match wins.
MANIFEST_COMMANDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "package.json",
        ("npm", "version", VERSION_PLACEHOLDER, "--no-git-tag-version", "--allow-same-version"),
    ),
    ("Cargo.toml", ("cargo", "set-version", VERSION_PLACEHOLDER)),
    ("pyproject.toml", ("uv", "version", VERSION_PLACEHOLDER)),
)


def resolve_version_command(
    *, root: Path, config: ReleaseConfig
) -> Result[tuple[str, ...], ReleaseError]:
    if config.version_command is not None:
        return Ok(config.version_command)

    for manifest, command in MANIFEST_COMMANDS:
        if (root / manifest).is_file():
            return Ok(command)

    names = ", ".join(manifest for manifest, _ in MANIFEST_COMMANDS)
    return Err(
        ReleaseError(
            kind="no_manifest",
            message=f"no manifest found in {root} (looked for {names})",
            hint="set version_command in .tagsmith.toml",
        )
    )


def render_version_command(command: tuple[str, ...], version: str) -> list[str]:
    return [part.replace(VERSION_PLACEHOLDER, version) for part in command]


def set_manifest_version(
    *, root: Path, command: tuple[str, ...], version: str
) -> Result[None, ReleaseError]:
    cmd = render_version_command(command, version)
    result = run_process(cmd, cwd=root)
    if isinstance(result, Err):
        return Err(tool_error(result.error, f"failed to set manifest version to {version}"))
    return Ok(None)
