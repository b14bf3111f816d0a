"""Explicit success/failure values.

Every step of a release (git, git-cliff, the package manager) can fail.
Instead of raising, each step returns either ``Ok(value)`` or
``Err(error)`` and the caller decides whether to continue. Only the CLI
layer turns an ``Err`` into output and an exit code.

Usage:
    match repo.status():
        case Ok(status) if status.is_clean:
            ...
        case Ok(status):
            return Err(ReleaseError(kind="dirty_tree", message="..."))
        case Err(e):
            return Err(ReleaseError(kind="not_a_repo", message=e.message))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A step that succeeded.

    Attributes:
        value: What the step produced.
    """

    value: T

    def unwrap(self) -> T:
        """Return the produced value."""
        return self.value

    def unwrap_err(self) -> None:
        """Raise, since a successful step carries no error.

        Raises:
            ValueError: Always.
        """
        raise ValueError(f"called unwrap_err on Ok: {self.value}")

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A step that failed.

    Attributes:
        error: Structured description of the failure.
    """

    error: E

    def unwrap(self) -> None:
        """Raise with the carried error.

        Raises:
            ValueError: Always.
        """
        raise ValueError(f"called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E:
        """Return the carried error."""
        return self.error

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
