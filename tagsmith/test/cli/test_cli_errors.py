from __future__ import annotations

import pytest

from tagsmith.cli.errors import print_release_error, release_exit_code
from tagsmith.output.console import MockConsole, Style
from tagsmith.release.errors import ReleaseError, ReleaseErrorKind


@pytest.mark.parametrize(
    ("kind", "code"),
    [
        ("dirty_tree", 1),
        ("declined", 1),
        ("invalid_version", 1),
        ("no_suggestion", 1),
        ("not_a_repo", 2),
        ("tool_missing", 2),
        ("no_manifest", 2),
    ],
)
def test_exit_code_by_kind(kind: ReleaseErrorKind, code: int) -> None:
    assert release_exit_code(ReleaseError(kind=kind, message="x")) == code


def test_tool_failure_propagates_tool_exit_code() -> None:
    err = ReleaseError(kind="tool_failed", message="git tag failed", returncode=128)
    assert release_exit_code(err) == 128


def test_tool_failure_without_positive_code_is_env_error() -> None:
    assert release_exit_code(ReleaseError(kind="tool_failed", message="x")) == 2
    assert release_exit_code(ReleaseError(kind="tool_failed", message="x", returncode=-1)) == 2


def test_print_release_error_with_hint() -> None:
    console = MockConsole()
    print_release_error(
        ReleaseError(kind="invalid_version", message="invalid version tag: '1.2.3'", hint="v1.2.3"),
        console,
    )
    assert console.messages == ["error: invalid version tag: '1.2.3'", "hint: v1.2.3"]
    assert console.outputs[1].style == Style.DIM


def test_print_release_error_without_hint() -> None:
    console = MockConsole()
    print_release_error(ReleaseError(kind="declined", message="cancelled"), console)
    assert console.messages == ["error: cancelled"]
