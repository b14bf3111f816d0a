"""Platform abstraction layer."""

from .process import (
    ProcessError,
    run,
)

__all__ = [
    # process
    "ProcessError",
    "run",
]
