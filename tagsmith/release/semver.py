from __future__ import annotations

import re
from dataclasses import dataclass

from tagsmith.core.result import Err, Ok, Result
from tagsmith.release.errors import ReleaseError

VERSION_TAG_PATTERN = r"^v\d+\.\d+\.\d+$"

# fullmatch + ASCII: no trailing newline, no non-ASCII digits
_TAG_RE = re.compile(r"v(\d+)\.(\d+)\.(\d+)", re.ASCII)


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def manifest_version(tag: str) -> str:
    """Version as written to the manifest: the tag without its "v" prefix."""
    return tag.removeprefix("v")


def parse_version_tag(tag: str) -> SemVer | None:
    m = _TAG_RE.fullmatch(tag)
    if m is None:
        return None
    return SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def validate_version_tag(tag: str) -> Result[SemVer, ReleaseError]:
    parsed = parse_version_tag(tag)
    if parsed is None:
        return Err(
            ReleaseError(
                kind="invalid_version",
                message=f"invalid version tag: '{tag}'",
                hint=f"expected a tag matching {VERSION_TAG_PATTERN} (e.g. v1.2.3)",
            )
        )
    return Ok(parsed)
