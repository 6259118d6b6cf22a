"""Repository base class"""

import logging
from abc import abstractmethod
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from post_store.entities import CreatePost, Post, UpdatePost
from post_store.errors import PostNotFoundError
from post_store.store import StoreRepository

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    """Get current UTC timestamp as a datetime object"""
    return datetime.now(UTC)


class RepositoryConfig(BaseModel):
    """Configuration options for Repository"""

    model_config = {"arbitrary_types_allowed": True}

    clock: Callable[[], datetime] = Field(
        default=_utc_now, description="Source of created/updated timestamps"
    )


T_schema = TypeVar("T_schema", bound=BaseModel)


class RecordRepository(StoreRepository, Generic[T_schema]):
    """StoreRepository implemented over an ordered list of backend records.

    Subclasses own the record shape (T_schema) and provide:
        _load_records / _save_records: where the list lives
        to_schema_entity / to_domain_entity: translation at the boundary
        apply_update: copy of a record with new content fields
        matches_id: compare a record against a public integer id

    Id assignment is ``len(records) + 1``. After a delete this can hand out an
    id that was used before, or one that is still in use.
    """

    def __init__(self, config: RepositoryConfig | None = None):
        self.config = config or RepositoryConfig()

    @abstractmethod
    async def _load_records(self) -> list[T_schema]:
        """Return the current record list."""

    @abstractmethod
    async def _save_records(self, records: list[T_schema]) -> None:
        """Make ``records`` the current record list."""

    @abstractmethod
    def to_schema_entity(self, fields: dict[str, Any]) -> T_schema:
        """Build a record from public field names (id, title, ..., updated)."""

    @abstractmethod
    def to_domain_entity(self, schema_entity: T_schema) -> Post:
        """Convert a record to the public Post model."""

    @abstractmethod
    def apply_update(self, schema_entity: T_schema, fields: dict[str, Any]) -> T_schema:
        """Return a copy of the record with title, description, body and updated replaced."""

    @abstractmethod
    def matches_id(self, schema_entity: T_schema, post_id: int) -> bool:
        """Whether the record is the one identified by ``post_id``."""

    def _apply_automatic_fields(
        self, data: dict[str, Any], is_create: bool = True
    ) -> dict[str, Any]:
        """Stamp created and updated on create, updated alone on update"""
        current_time = self.config.clock()
        if is_create:
            data["created"] = current_time
        data["updated"] = current_time
        return data

    def _find_index(self, records: list[T_schema], post_id: int) -> int | None:
        for index, record in enumerate(records):
            if self.matches_id(record, post_id):
                return index
        return None

    async def get_all_posts(self) -> list[Post]:
        records = await self._load_records()
        return [self.to_domain_entity(record) for record in records]

    async def get_post_by_id(self, post_id: int) -> Post | None:
        records = await self._load_records()
        index = self._find_index(records, post_id)
        if index is None:
            return None
        return self.to_domain_entity(records[index])

    async def create_post(self, post: CreatePost) -> Post:
        records = list(await self._load_records())
        fields = self._apply_automatic_fields(post.model_dump(), is_create=True)
        fields["id"] = len(records) + 1

        record = self.to_schema_entity(fields)
        records.append(record)
        await self._save_records(records)

        logger.debug("Created post %s", fields["id"])
        return self.to_domain_entity(record)

    async def update_post(self, post: UpdatePost) -> Post:
        records = list(await self._load_records())
        index = self._find_index(records, post.id)
        if index is None:
            logger.debug("Update of missing post %s", post.id)
            raise PostNotFoundError(post.id)

        fields = self._apply_automatic_fields(
            post.model_dump(exclude={"id"}), is_create=False
        )
        record = self.apply_update(records[index], fields)
        records[index] = record
        await self._save_records(records)

        logger.debug("Updated post %s", post.id)
        return self.to_domain_entity(record)

    async def delete_post(self, post_id: int) -> int:
        records = list(await self._load_records())
        index = self._find_index(records, post_id)
        if index is None:
            logger.debug("Delete of missing post %s", post_id)
            raise PostNotFoundError(post_id)

        del records[index]
        await self._save_records(records)

        logger.debug("Deleted post %s", post_id)
        return post_id
