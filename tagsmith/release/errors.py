"""Error types for release preparation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ReleaseErrorKind = Literal[
    "dirty_tree",
    "declined",
    "invalid_version",
    "no_suggestion",
    "not_a_repo",
    "tool_missing",
    "no_manifest",
    "tool_failed",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Canonical release error payload.

    Attributes:
        kind: Failure category, used to pick the exit code.
        message: One-line description for the operator.
        hint: The failing tool's diagnostic output, or what to do next.
        returncode: Exit code of the failing external tool (tool_failed only).
    """

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None
    returncode: int | None = None
