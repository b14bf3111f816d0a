"""Per-repository release configuration.

Configuration is optional. It is read from the repository root, first from
``.tagsmith.toml`` (top-level keys), then from the ``[tool.tagsmith]``
table of ``pyproject.toml``. Missing keys fall back to defaults.

Example ``.tagsmith.toml``:
    changelog = "docs/CHANGELOG.md"
    remote = "upstream"
    version_command = ["npm", "version", "{version}", "--no-git-tag-version"]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_str_list, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CHANGELOG",
    "DEFAULT_COMMIT_MARKER",
    "DEFAULT_REMOTE",
    "VERSION_PLACEHOLDER",
    "ConfigError",
    "ReleaseConfig",
    "load_config",
]

CONFIG_FILENAME = ".tagsmith.toml"
PYPROJECT_FILENAME = "pyproject.toml"

DEFAULT_CHANGELOG = "CHANGELOG.md"
DEFAULT_REMOTE = "origin"
DEFAULT_COMMIT_MARKER = "🔖"

# Replaced by the numeric version (1.2.3) in version_command.
VERSION_PLACEHOLDER = "{version}"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Settings for a release run.

    Attributes:
        changelog: Changelog path, relative to the repository root.
        remote: Remote used for the web URL and the push command.
        version_command: Command that writes the manifest version, with a
            ``{version}`` placeholder. None means auto-detect.
        commit_marker: Prefix of the release commit subject.
    """

    changelog: str = DEFAULT_CHANGELOG
    remote: str = DEFAULT_REMOTE
    version_command: tuple[str, ...] | None = None
    commit_marker: str = DEFAULT_COMMIT_MARKER

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ReleaseConfig:
        """Create a ReleaseConfig from a parsed TOML table.

        Raises:
            ValueError: If a known key has the wrong type.
        """
        for key in ("changelog", "remote", "commit_marker"):
            if key in data and get_str(data, key) is None:
                raise ValueError(f"'{key}' must be a non-empty string")

        version_command: tuple[str, ...] | None = None
        if "version_command" in data:
            version_command = get_str_list(data, "version_command")
            if not version_command:
                raise ValueError("'version_command' must be a non-empty list of strings")
            if not any(VERSION_PLACEHOLDER in part for part in version_command):
                raise ValueError(f"'version_command' must contain {VERSION_PLACEHOLDER}")

        return cls(
            changelog=get_str(data, "changelog") or DEFAULT_CHANGELOG,
            remote=get_str(data, "remote") or DEFAULT_REMOTE,
            version_command=version_command,
            commit_marker=get_str(data, "commit_marker") or DEFAULT_COMMIT_MARKER,
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def _find_table(root: Path) -> Result[tuple[StrDict, Path] | None, ConfigError]:
    dedicated = root / CONFIG_FILENAME
    if dedicated.is_file():
        parsed = _parse_toml(dedicated)
        if isinstance(parsed, Err):
            return parsed
        return Ok((parsed.value, dedicated))

    pyproject = root / PYPROJECT_FILENAME
    if pyproject.is_file():
        parsed = _parse_toml(pyproject)
        if isinstance(parsed, Err):
            return parsed
        tool = get_table(parsed.value, "tool") or {}
        table = get_table(tool, "tagsmith")
        if table is not None:
            return Ok((table, pyproject))

    return Ok(None)


def load_config(root: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load the release configuration of the repository at ``root``.

    Args:
        root: Repository root directory.

    Returns:
        Ok(ReleaseConfig), with defaults when no configuration exists,
        or Err(ConfigError) when a configuration exists but is invalid.
    """
    found = _find_table(root)
    if isinstance(found, Err):
        return found
    if found.value is None:
        return Ok(ReleaseConfig())

    table, path = found.value
    try:
        return Ok(ReleaseConfig.from_dict(table))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))
