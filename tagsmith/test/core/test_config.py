"""Tests for tagsmith.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from tagsmith.core.config import (
    DEFAULT_CHANGELOG,
    DEFAULT_COMMIT_MARKER,
    DEFAULT_REMOTE,
    ReleaseConfig,
    load_config,
)
from tagsmith.core.result import Err, Ok


class TestReleaseConfig:
    def test_defaults(self) -> None:
        config = ReleaseConfig()
        assert config.changelog == "CHANGELOG.md"
        assert config.remote == "origin"
        assert config.version_command is None
        assert config.commit_marker == "🔖"

    def test_frozen(self) -> None:
        config = ReleaseConfig()
        with pytest.raises(AttributeError):
            config.remote = "upstream"  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = ReleaseConfig.from_dict(
            {
                "changelog": "docs/CHANGELOG.md",
                "remote": "upstream",
                "version_command": ["cargo", "set-version", "{version}"],
                "commit_marker": "🚀",
            }
        )
        assert config.changelog == "docs/CHANGELOG.md"
        assert config.remote == "upstream"
        assert config.version_command == ("cargo", "set-version", "{version}")
        assert config.commit_marker == "🚀"

    def test_from_dict_empty_uses_defaults(self) -> None:
        assert ReleaseConfig.from_dict({}) == ReleaseConfig()

    def test_rejects_non_string(self) -> None:
        with pytest.raises(ValueError, match="remote"):
            ReleaseConfig.from_dict({"remote": 3})

    def test_rejects_command_without_placeholder(self) -> None:
        with pytest.raises(ValueError, match="version"):
            ReleaseConfig.from_dict({"version_command": ["npm", "version", "patch"]})

    def test_rejects_command_with_non_strings(self) -> None:
        with pytest.raises(ValueError, match="version_command"):
            ReleaseConfig.from_dict({"version_command": ["npm", 1]})


class TestLoadConfig:
    def test_no_config_returns_defaults(self, tmp_path: Path) -> None:
        result = load_config(tmp_path)
        assert isinstance(result, Ok)
        assert result.value == ReleaseConfig()

    def test_dedicated_file(self, tmp_path: Path) -> None:
        (tmp_path / ".tagsmith.toml").write_text(
            'changelog = "HISTORY.md"\nremote = "upstream"\n', encoding="utf-8"
        )
        result = load_config(tmp_path)
        assert isinstance(result, Ok)
        assert result.value.changelog == "HISTORY.md"
        assert result.value.remote == "upstream"
        assert result.value.commit_marker == DEFAULT_COMMIT_MARKER

    def test_pyproject_tool_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "demo"\n\n[tool.tagsmith]\n'
            'version_command = ["uv", "version", "{version}"]\n',
            encoding="utf-8",
        )
        result = load_config(tmp_path)
        assert isinstance(result, Ok)
        assert result.value.version_command == ("uv", "version", "{version}")
        assert result.value.changelog == DEFAULT_CHANGELOG

    def test_pyproject_without_table_returns_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")
        result = load_config(tmp_path)
        assert isinstance(result, Ok)
        assert result.value.remote == DEFAULT_REMOTE

    def test_dedicated_file_wins_over_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / ".tagsmith.toml").write_text('remote = "a"\n', encoding="utf-8")
        (tmp_path / "pyproject.toml").write_text('[tool.tagsmith]\nremote = "b"\n', encoding="utf-8")
        result = load_config(tmp_path)
        assert isinstance(result, Ok)
        assert result.value.remote == "a"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / ".tagsmith.toml"
        path.write_text("remote = \n", encoding="utf-8")
        result = load_config(tmp_path)
        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

    def test_invalid_structure(self, tmp_path: Path) -> None:
        (tmp_path / ".tagsmith.toml").write_text("changelog = 12\n", encoding="utf-8")
        result = load_config(tmp_path)
        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message
