"""Error presentation and exit code mapping for release runs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tagsmith.core.errors import ErrorCode
from tagsmith.output.console import Style
from tagsmith.release.errors import ReleaseError

if TYPE_CHECKING:
    from tagsmith.output.console import ConsoleProtocol

__all__ = ["print_release_error", "release_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def release_exit_code(error: ReleaseError) -> int:
    """Exit code for a failed run; failing tools keep their own code."""
    match error.kind:
        case "dirty_tree" | "declined" | "invalid_version" | "no_suggestion":
            return int(ErrorCode.USER_ERROR)
        case "not_a_repo" | "tool_missing" | "no_manifest":
            return int(ErrorCode.ENV_ERROR)
        case "tool_failed":
            if error.returncode is not None and error.returncode > 0:
                return error.returncode
            return int(ErrorCode.ENV_ERROR)
