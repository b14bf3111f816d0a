"""Git operations module.

Usage:
    from tagsmith.git import Repository, web_url_from_remote

    repo = Repository(Path("/path/to/repo"))
    url = repo.remote_url("origin")
    if url is not None:
        print(web_url_from_remote(url))
"""

from tagsmith.git.remote import web_url_from_remote
from tagsmith.git.repository import (
    GitError,
    GitStatus,
    Repository,
    StatusEntry,
)

__all__ = [
    # Repository
    "GitError",
    "GitStatus",
    "Repository",
    "StatusEntry",
    # Remote
    "web_url_from_remote",
]
