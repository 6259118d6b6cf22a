"""Exceptions raised by repository backends"""

from pathlib import Path


class RepositoryError(Exception):
    """Base class for all repository failures."""


class PostNotFoundError(RepositoryError, LookupError):
    """Raised when an update or delete targets an id that is not stored."""

    def __init__(self, post_id: int):
        self.post_id = post_id
        super().__init__(f"Post {post_id} not found")


class StorageUnavailableError(RepositoryError):
    """Raised when the backing file cannot be read, parsed or written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Storage at '{path}' is unavailable: {reason}")
