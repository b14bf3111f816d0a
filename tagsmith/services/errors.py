"""Translation of lower-layer failures into ReleaseError."""

from __future__ import annotations

from tagsmith.git.repository import GitError
from tagsmith.platform.process import ProcessError
from tagsmith.release.errors import ReleaseError


def tool_error(error: ProcessError, message: str) -> ReleaseError:
    """Translate a failed external command.

    A command that never ran (returncode -1) is reported as a missing tool.
    """
    if error.returncode < 0:
        return ReleaseError(
            kind="tool_missing",
            message=f"{error.command[0]}: could not run",
            hint=error.detail or None,
        )
    return ReleaseError(
        kind="tool_failed",
        message=message,
        hint=error.detail or None,
        returncode=error.returncode,
    )


def git_error(error: GitError, message: str) -> ReleaseError:
    if error.returncode < 0:
        return ReleaseError(kind="tool_missing", message="git: could not run", hint=error.message)
    return ReleaseError(
        kind="tool_failed",
        message=message,
        hint=error.message,
        returncode=error.returncode,
    )
