"""Release preparation for git repositories driven by git-cliff."""

__version__ = "0.1.0"
