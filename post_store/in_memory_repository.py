"""Repository that keeps posts in process memory"""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel

from post_store.entities import Post
from post_store.entity_mapper import EntityMapper
from post_store.repository import RecordRepository, RepositoryConfig

# Sample rows every new instance starts from
SEED_POSTS: tuple[dict[str, str], ...] = (
    {
        "id": "1",
        "post_title": "First Post",
        "post_body": "This is the first post",
        "post_description": "This is the first post",
        "post_created": "2021-01-01",
        "post_updated": "2021-01-01",
        "username": "johndoe",
    },
    {
        "id": "2",
        "post_title": "Second Post",
        "post_body": "This is the second post",
        "post_description": "This is the second post",
        "post_created": "2021-01-01",
        "post_updated": "2021-01-01",
        "username": "janedoe",
    },
)


class MemoryPost(BaseModel):
    """In-memory record shape. Not exposed outside this module."""

    id: str
    post_title: str
    post_body: str
    post_description: str
    post_created: str
    post_updated: str
    username: str


def _parse_timestamp(value: str) -> datetime:
    """Parse ISO-8601 text, reading date-only or offset-less values as UTC"""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


class InMemoryRepository(RecordRepository[MemoryPost]):
    """Stores posts in a list owned by the instance.

    Each instance gets its own copy of SEED_POSTS, so instances never share
    state.
    """

    def __init__(self, config: RepositoryConfig | None = None):
        super().__init__(config)
        self.entity_mapper = EntityMapper(MemoryPost)
        self._posts = self.entity_mapper.map_rows_to_entities(SEED_POSTS)

    async def _load_records(self) -> list[MemoryPost]:
        return self._posts

    async def _save_records(self, records: list[MemoryPost]) -> None:
        self._posts = records

    def matches_id(self, schema_entity: MemoryPost, post_id: int) -> bool:
        return schema_entity.id == str(post_id)

    def to_schema_entity(self, fields: dict[str, Any]) -> MemoryPost:
        return MemoryPost(
            id=str(fields["id"]),
            post_title=fields["title"],
            post_body=fields["body"],
            post_description=fields["description"],
            post_created=fields["created"].isoformat(),
            post_updated=fields["updated"].isoformat(),
            username=fields["created_by"],
        )

    def apply_update(self, schema_entity: MemoryPost, fields: dict[str, Any]) -> MemoryPost:
        return schema_entity.model_copy(
            update={
                "post_title": fields["title"],
                "post_body": fields["body"],
                "post_description": fields["description"],
                "post_updated": fields["updated"].isoformat(),
            }
        )

    def to_domain_entity(self, schema_entity: MemoryPost) -> Post:
        return Post(
            id=int(schema_entity.id),
            title=schema_entity.post_title,
            description=schema_entity.post_description,
            body=schema_entity.post_body,
            created_by=schema_entity.username,
            created=_parse_timestamp(schema_entity.post_created),
            updated=_parse_timestamp(schema_entity.post_updated),
        )
