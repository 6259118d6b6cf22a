"""Settings and backend selection via Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from post_store.file_repository import FileRepository
from post_store.in_memory_repository import InMemoryRepository
from post_store.repository import RepositoryConfig
from post_store.store import StoreRepository

Backend = Literal["in-memory", "file"]


class StoreSettings(BaseSettings):
    """Store configuration loaded from POST_STORE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="POST_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    backend: Backend = "file"
    file_path: Path = Path("db.json")
    json_indent: int | None = Field(default=None, ge=0)
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> StoreSettings:
    """Get cached settings instance."""
    return StoreSettings()


def create_repository(
    settings: StoreSettings | None = None, config: RepositoryConfig | None = None
) -> StoreRepository:
    """Build the backend named by ``settings.backend``."""
    settings = settings or get_settings()
    if settings.backend == "in-memory":
        return InMemoryRepository(config)
    return FileRepository(settings.file_path, config, indent=settings.json_indent)
