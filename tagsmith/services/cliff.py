from __future__ import annotations

import json
import re
import shutil
from pathlib import Path

from tagsmith.core.result import Err, Ok, Result
from tagsmith.core.structured import as_str_dict, get_str
from tagsmith.platform.process import run as run_process
from tagsmith.release.errors import ReleaseError
from tagsmith.services.errors import tool_error
from tagsmith.services.templates import (
    CHANGELOG_BODY_ENV,
    CHANGELOG_BODY_TEMPLATE,
    TAG_DESCRIPTION_ENV,
    TAG_DESCRIPTION_TEMPLATE,
)

CLIFF = "git-cliff"

# git-cliff's GitHub integration turns "#42" into a markdown link.
_PR_LINK_RE = re.compile(
    r"\[#(?P<number>\d+)\]\(https://github\.com/[^/\s)]+/[^/\s)]+/(?:issues|pull)/\d+\)"
)


def ensure_cliff_available() -> Result[None, ReleaseError]:
    if shutil.which(CLIFF) is None:
        return Err(
            ReleaseError(
                kind="tool_missing",
                message=f"{CLIFF}: missing",
                hint="Install git-cliff: https://git-cliff.org/docs/installation",
            )
        )
    return Ok(None)


def parse_suggested_version(payload: str) -> str | None:
    """Extract the bumped version from `git-cliff --bump --context` output."""
    try:
        obj: object = json.loads(payload)
    except json.JSONDecodeError:
        return None

    if not isinstance(obj, list) or not obj:
        return None
    first = as_str_dict(obj[0])
    if first is None:
        return None
    return get_str(first, "version")


def suggest_next_version(*, root: Path) -> Result[str, ReleaseError]:
    result = run_process([CLIFF, "--unreleased", "--bump", "--context"], cwd=root)
    if isinstance(result, Err):
        return Err(tool_error(result.error, "git-cliff could not suggest a version"))

    version = parse_suggested_version(result.value)
    if version is None:
        return Err(
            ReleaseError(
                kind="no_suggestion",
                message="git-cliff did not suggest a version",
                hint="are there unreleased commits? pass the tag explicitly: tagsmith v1.2.3",
            )
        )
    return Ok(version)


def write_changelog(*, root: Path, tag: str, changelog: str) -> Result[None, ReleaseError]:
    """Regenerate the whole changelog, with unreleased commits filed under `tag`."""
    result = run_process(
        [CLIFF, "--tag", tag, "--output", changelog],
        cwd=root,
        env={CHANGELOG_BODY_ENV: CHANGELOG_BODY_TEMPLATE},
    )
    if isinstance(result, Err):
        return Err(tool_error(result.error, f"git-cliff failed to write {changelog}"))
    return Ok(None)


def strip_pr_links(text: str) -> str:
    """Rewrite `[#42](https://github.com/owner/repo/issues/42)` as `#42`."""
    return _PR_LINK_RE.sub(r"#\g<number>", text)


def render_tag_description(*, root: Path) -> Result[str, ReleaseError]:
    """Render the unreleased commits as plain text for a tag annotation."""
    result = run_process(
        [CLIFF, "--unreleased", "--strip", "all"],
        cwd=root,
        env={TAG_DESCRIPTION_ENV: TAG_DESCRIPTION_TEMPLATE},
    )
    if isinstance(result, Err):
        return Err(tool_error(result.error, "git-cliff failed to render the tag description"))
    return Ok(strip_pr_links(result.value).strip())
