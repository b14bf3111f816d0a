"""Release preparation workflow.

A run is strictly linear:

    preflight -> resolve version -> validate -> write (manifest, changelog,
    commit) -> tag -> summary

Every step returns a Result; the first Err ends the run. Nothing is rolled
back: once the writer has started, a later failure leaves its changes (or
its commit) in place for the operator to deal with.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from tagsmith.core.config import ReleaseConfig
from tagsmith.core.result import Err, Ok, Result
from tagsmith.git.remote import web_url_from_remote
from tagsmith.git.repository import GitStatus, Repository
from tagsmith.output.console import ConsoleProtocol, Style
from tagsmith.release.errors import ReleaseError
from tagsmith.release.semver import SemVer, manifest_version, validate_version_tag
from tagsmith.services.cliff import (
    ensure_cliff_available,
    render_tag_description,
    suggest_next_version,
    write_changelog,
)
from tagsmith.services.errors import git_error
from tagsmith.services.manifest import resolve_version_command, set_manifest_version

# Receives the suggested tag, returns True to go ahead with it.
ConfirmSuggestion = Callable[[str], bool]

_AFFIRMATIVE = frozenset({"", "y", "yes"})


@dataclass(frozen=True, slots=True)
class PreparedRelease:
    tag: str
    version: SemVer
    commit_message: str
    description: str
    branch: str | None
    web_url: str | None


def is_affirmative(answer: str) -> bool:
    """Empty input (the default) or exactly y/yes in any case."""
    return answer.lower() in _AFFIRMATIVE


def release_commit_message(tag: str, *, marker: str) -> str:
    return f"{marker} chore(release): prepare for {tag}"


def tag_paragraphs(tag: str, description: str) -> list[str]:
    if not description:
        return [f"Release {tag}"]
    return [f"Release {tag}", description]


def check_clean_tree(repo: Repository) -> Result[GitStatus, ReleaseError]:
    if not repo.exists():
        return Err(
            ReleaseError(
                kind="not_a_repo",
                message=f"not a git repository: {repo.path}",
                hint="run tagsmith inside a git repository or pass --repo",
            )
        )

    status = repo.status()
    if isinstance(status, Err):
        return Err(git_error(status.error, "git status failed"))

    if not status.value.is_clean:
        paths = ", ".join(e.path for e in status.value.entries)
        return Err(
            ReleaseError(
                kind="dirty_tree",
                message="working tree has uncommitted changes",
                hint=f"commit or stash first: {paths}",
            )
        )
    return Ok(status.value)


def resolve_version_tag(
    *,
    root: Path,
    candidate: str | None,
    confirm: ConfirmSuggestion,
    console: ConsoleProtocol,
) -> Result[str, ReleaseError]:
    if candidate is not None:
        return Ok(candidate)

    available = ensure_cliff_available()
    if isinstance(available, Err):
        return available

    console.info("asking git-cliff for the next version")
    suggested = suggest_next_version(root=root)
    if isinstance(suggested, Err):
        return suggested

    tag = suggested.value
    if not confirm(tag):
        return Err(ReleaseError(kind="declined", message=f"release of {tag} cancelled"))
    return Ok(tag)


def write_release(
    *,
    repo: Repository,
    config: ReleaseConfig,
    tag: str,
    version_command: tuple[str, ...],
    console: ConsoleProtocol,
) -> Result[str, ReleaseError]:
    """Update manifest and changelog, then commit both.

    Returns:
        Ok(commit message) on success.
    """
    version = manifest_version(tag)

    console.info(f"setting manifest version to {version}")
    written = set_manifest_version(root=repo.path, command=version_command, version=version)
    if isinstance(written, Err):
        return written

    console.info(f"regenerating {config.changelog}")
    changelog = write_changelog(root=repo.path, tag=tag, changelog=config.changelog)
    if isinstance(changelog, Err):
        return changelog

    staged = repo.add_all()
    if isinstance(staged, Err):
        return Err(git_error(staged.error, "failed to stage release changes"))

    message = release_commit_message(tag, marker=config.commit_marker)
    committed = repo.commit(message)
    if isinstance(committed, Err):
        return Err(git_error(committed.error, "failed to commit release changes"))

    console.success(f"committed: {message}")
    return Ok(message)


def tag_release(*, repo: Repository, tag: str, console: ConsoleProtocol) -> Result[str, ReleaseError]:
    """Create the signed tag; returns the generated description."""
    description = render_tag_description(root=repo.path)
    if isinstance(description, Err):
        return description

    console.info(f"creating signed tag {tag}")
    created = repo.create_signed_tag(tag, tag_paragraphs(tag, description.value))
    if isinstance(created, Err):
        return Err(git_error(created.error, f"failed to create signed tag {tag}"))

    console.success(f"tagged {tag}")
    return Ok(description.value)


def prepare_release(
    *,
    root: Path,
    config: ReleaseConfig,
    candidate: str | None,
    confirm: ConfirmSuggestion,
    console: ConsoleProtocol,
) -> Result[PreparedRelease, ReleaseError]:
    repo = Repository(root)

    clean = check_clean_tree(repo)
    if isinstance(clean, Err):
        return clean

    resolved = resolve_version_tag(root=root, candidate=candidate, confirm=confirm, console=console)
    if isinstance(resolved, Err):
        return resolved
    tag = resolved.value

    version = validate_version_tag(tag)
    if isinstance(version, Err):
        return version

    # Everything that can be checked is checked before the first write.
    available = ensure_cliff_available()
    if isinstance(available, Err):
        return available
    command = resolve_version_command(root=root, config=config)
    if isinstance(command, Err):
        return command

    console.header(f"Preparing {tag}")
    message = write_release(
        repo=repo,
        config=config,
        tag=tag,
        version_command=command.value,
        console=console,
    )
    if isinstance(message, Err):
        return message

    description = tag_release(repo=repo, tag=tag, console=console)
    if isinstance(description, Err):
        return description

    remote_url = repo.remote_url(config.remote)
    return Ok(
        PreparedRelease(
            tag=tag,
            version=version.value,
            commit_message=message.value,
            description=description.value,
            branch=repo.current_branch(),
            web_url=web_url_from_remote(remote_url) if remote_url else None,
        )
    )


def print_summary(
    *,
    root: Path,
    config: ReleaseConfig,
    release: PreparedRelease,
    console: ConsoleProtocol,
) -> Result[None, ReleaseError]:
    repo = Repository(root)

    log = repo.last_commit()
    if isinstance(log, Err):
        return Err(git_error(log.error, "git log failed"))
    console.header("Latest commit")
    console.block(log.value)

    shown = repo.show_tag(release.tag)
    if isinstance(shown, Err):
        return Err(git_error(shown.error, f"git show {release.tag} failed"))
    console.header(f"Tag {release.tag}")
    console.block(shown.value)

    ref = release.branch or "HEAD"
    console.header("Next step")
    console.print("Push the release commit and tag:")
    console.block(f"git push --atomic {config.remote} {ref} {release.tag}")
    if release.web_url:
        console.print(f"Release page: {release.web_url}/releases/tag/{release.tag}", Style.DIM)
    return Ok(None)
