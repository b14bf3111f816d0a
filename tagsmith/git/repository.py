"""Git repository abstraction.

This module provides the Repository class for the git operations a release
needs: status, staging, committing, signed tagging and read-only queries.
All operations return Result types for proper error handling.

Usage:
    repo = Repository(Path("/path/to/repo"))

    match repo.status():
        case Ok(status) if status.is_clean:
            print("Working tree clean")
        case Ok(status):
            for entry in status.entries:
                print(entry.xy, entry.path)
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from tagsmith.core.result import Err, Ok, Result
from tagsmith.platform.process import ProcessError
from tagsmith.platform.process import run as run_process

__all__ = [
    "GitError",
    "GitStatus",
    "Repository",
    "StatusEntry",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """A single entry in git status.

    Attributes:
        xy: Two-character status code (e.g., "M ", " M", "??")
        path: File path
    """

    xy: str
    path: str


@dataclass(frozen=True, slots=True)
class GitStatus:
    """Parsed git status.

    Attributes:
        entries: All status entries (staged, unstaged, untracked)
    """

    entries: tuple[StatusEntry, ...] = field(default_factory=tuple)

    @property
    def is_clean(self) -> bool:
        """True if working tree has no changes, untracked files included."""
        return len(self.entries) == 0


class Repository:
    """Git repository abstraction.

    Attributes:
        path: Path to the repository root
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def exists(self) -> bool:
        """Check if this is a valid git repository (worktrees use a .git file)."""
        return (self.path / ".git").exists()

    def toplevel(self) -> Result[Path, GitError]:
        """Resolve the root of the working tree containing this path.

        Runs `git rev-parse --show-toplevel`, so a subdirectory resolves to
        the repository root.
        """
        result = self._run(["rev-parse", "--show-toplevel"])
        match result:
            case Err(e):
                return Err(self._error("rev-parse --show-toplevel", e, "not a git repository"))
            case Ok(stdout):
                return Ok(Path(stdout.strip()))

    def status(self) -> Result[GitStatus, GitError]:
        """Get repository status.

        Runs `git status --porcelain=v1` and parses the output.
        """
        result = self._run(["status", "--porcelain=v1"])
        match result:
            case Err(e):
                return Err(self._error("status", e, "git status failed"))
            case Ok(stdout):
                return Ok(self._parse_status(stdout))

    def current_branch(self) -> str | None:
        """Get current branch name.

        Returns None if detached HEAD or error.
        """
        result = self._run(["rev-parse", "--abbrev-ref", "HEAD"])
        match result:
            case Ok(stdout):
                branch = stdout.strip()
                return None if branch == "HEAD" else branch
            case Err(_):
                return None

    def add_all(self) -> Result[None, GitError]:
        """Stage every change in the working tree (`git add -A`)."""
        result = self._run(["add", "-A"])
        match result:
            case Err(e):
                return Err(self._error("add -A", e, "git add failed"))
            case Ok(_):
                return Ok(None)

    def commit(self, message: str) -> Result[str, GitError]:
        """Commit staged changes.

        Returns:
            Ok(git's summary output) on success
            Err(GitError) on failure (nothing staged, hook rejected, ...)
        """
        result = self._run(["commit", "-m", message])
        match result:
            case Err(e):
                return Err(self._error("commit", e, "git commit failed"))
            case Ok(stdout):
                return Ok(stdout.strip())

    def create_signed_tag(self, name: str, paragraphs: list[str]) -> Result[None, GitError]:
        """Create a signed, annotated tag on HEAD.

        Each paragraph becomes one `-m` argument; git joins them with a blank
        line. Lines starting with "#" are kept: the default cleanup mode
        would strip them as comments. Signing uses the user's configured key
        (user.signingkey).
        """
        args = ["tag", "-s", "-a", "--cleanup=whitespace", name]
        for paragraph in paragraphs:
            args.extend(["-m", paragraph])

        result = self._run(args)
        match result:
            case Err(e):
                return Err(self._error("tag -s -a", e, f"failed to create tag {name}"))
            case Ok(_):
                return Ok(None)

    def last_commit(self) -> Result[str, GitError]:
        """Return the `git log -1` entry for HEAD."""
        result = self._run(["log", "-1"])
        match result:
            case Err(e):
                return Err(self._error("log -1", e, "git log failed"))
            case Ok(stdout):
                return Ok(stdout.rstrip())

    def show_tag(self, name: str) -> Result[str, GitError]:
        """Return the tag object (tagger, message, signature) and its commit header."""
        result = self._run(["show", "--no-patch", name])
        match result:
            case Err(e):
                return Err(self._error("show", e, f"git show {name} failed"))
            case Ok(stdout):
                return Ok(stdout.rstrip())

    def remote_url(self, remote: str) -> str | None:
        """Get the fetch URL of a remote.

        Returns None if the remote is not configured.
        """
        result = self._run(["remote", "get-url", remote])
        match result:
            case Ok(stdout):
                return stdout.strip() or None
            case Err(_):
                return None

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(["git", "-C", str(self.path), *args], cwd=self.path)

    @staticmethod
    def _error(command: str, e: ProcessError, fallback: str) -> GitError:
        return GitError(
            command=command,
            message=e.detail or fallback,
            returncode=e.returncode,
        )

    def _parse_status(self, output: str) -> GitStatus:
        """Parse git status --porcelain=v1 output."""
        entries: list[StatusEntry] = []
        for line in output.splitlines():
            entry = self._parse_entry(line)
            if entry:
                entries.append(entry)

        return GitStatus(entries=tuple(entries))

    def _parse_entry(self, line: str) -> StatusEntry | None:
        """Parse a single status entry line: XY path"""
        if len(line) < 4:
            return None

        return StatusEntry(xy=line[:2], path=line[3:])
