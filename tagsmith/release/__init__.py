"""Release domain: version tags and release errors."""

from __future__ import annotations

from tagsmith.release.errors import ReleaseError, ReleaseErrorKind
from tagsmith.release.semver import (
    VERSION_TAG_PATTERN,
    SemVer,
    manifest_version,
    parse_version_tag,
    validate_version_tag,
)

__all__ = [
    "ReleaseError",
    "ReleaseErrorKind",
    "SemVer",
    "VERSION_TAG_PATTERN",
    "manifest_version",
    "parse_version_tag",
    "validate_version_tag",
]
