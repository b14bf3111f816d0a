"""Browsing URLs derived from git remote URLs."""

from __future__ import annotations

import re

__all__ = ["web_url_from_remote"]

# scp-like syntax: git@github.com:owner/repo.git
_SCP_RE = re.compile(r"^[\w.-]+@(?P<host>[^:/]+):(?P<path>.+)$")


def web_url_from_remote(remote_url: str) -> str:
    """Map a remote URL to the URL a browser can open.

    `git@host:owner/repo.git` becomes `https://host/owner/repo`. Any other
    URL is returned as-is apart from a trailing `.git`.
    """
    url = remote_url.strip()
    m = _SCP_RE.match(url)
    if m is not None:
        url = f"https://{m.group('host')}/{m.group('path')}"
    return url.removesuffix(".git")
