"""Tests for tagsmith.platform.process module."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from tagsmith.core.result import Err, Ok
from tagsmith.platform.process import ProcessError, run


class TestProcessError:
    """Test ProcessError dataclass."""

    def test_detail_prefers_stderr(self) -> None:
        error = ProcessError(("npm",), 1, "out\n", "  err\n")
        assert error.detail == "err"

    def test_detail_falls_back_to_stdout(self) -> None:
        error = ProcessError(("npm",), 1, "out\n", "")
        assert error.detail == "out"

    def test_frozen(self) -> None:
        error = ProcessError(("cmd",), 1, "", "")
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]


class TestRun:
    """Test run function."""

    def test_success_returns_stdout(self, tmp_path: Path) -> None:
        result = run([sys.executable, "-c", "print('hello')"], cwd=tmp_path)

        assert isinstance(result, Ok)
        assert "hello" in result.value

    def test_failure_returns_error(self, tmp_path: Path) -> None:
        result = run([sys.executable, "-c", "import sys; sys.exit(42)"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 42

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run(["nonexistent_command_12345"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert len(result.error.stderr) > 0

    def test_captures_stderr(self, tmp_path: Path) -> None:
        result = run(
            [sys.executable, "-c", "import sys; sys.stderr.write('error msg'); sys.exit(1)"],
            cwd=tmp_path,
        )

        assert isinstance(result, Err)
        assert "error msg" in result.error.stderr

    def test_env_is_layered_over_current_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TAGSMITH_INHERITED", "kept")
        script = (
            "import os; "
            "print(os.environ['TAGSMITH_INHERITED'], os.environ['GIT_CLIFF_TEMPLATE'])"
        )

        result = run([sys.executable, "-c", script], cwd=tmp_path, env={"GIT_CLIFF_TEMPLATE": "body"})

        assert isinstance(result, Ok)
        assert result.value.split() == ["kept", "body"]

    @patch("subprocess.run")
    def test_no_env_inherits_unchanged(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = subprocess.CompletedProcess(args=["git"], returncode=0, stdout="", stderr="")

        run(["git", "status"], cwd=tmp_path)

        assert mock_run.call_args.kwargs["env"] is None
        assert mock_run.call_args.kwargs["cwd"] == str(tmp_path)
