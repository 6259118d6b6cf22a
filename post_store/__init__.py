"""Post storage behind a swappable repository interface"""

from post_store.entities import CreatePost, Post, UpdatePost
from post_store.errors import PostNotFoundError, RepositoryError, StorageUnavailableError
from post_store.file_repository import FileRepository
from post_store.in_memory_repository import InMemoryRepository
from post_store.repository import RecordRepository, RepositoryConfig
from post_store.store import StoreRepository

__all__ = [
    "Post",
    "CreatePost",
    "UpdatePost",
    "StoreRepository",
    "RecordRepository",
    "RepositoryConfig",
    "InMemoryRepository",
    "FileRepository",
    "RepositoryError",
    "PostNotFoundError",
    "StorageUnavailableError",
]
