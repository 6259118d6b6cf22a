"""Repository that stores posts in a JSON file"""

import asyncio
import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, field_validator, model_validator

from post_store.entities import Post
from post_store.entity_mapper import EntityMapper
from post_store.errors import StorageUnavailableError
from post_store.repository import RecordRepository, RepositoryConfig
from post_store.storage_context import StorageManager

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path("db.json")


class FilePost(BaseModel):
    """File record shape. Not exposed outside this module."""

    id: int
    title: str
    desc: str
    body: str
    author: str
    added: datetime
    updated: datetime

    @field_validator("added", "updated")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @model_validator(mode="after")
    def _check_timestamps(self) -> "FilePost":
        if self.added > self.updated:
            raise ValueError("added must not be later than updated")
        return self


class FileRepository(RecordRepository[FilePost]):
    """Stores posts as a JSON array in a single file.

    The file is read on the first operation only; after that the in-memory
    copy is the source of truth and every mutation rewrites the whole file.
    Changes made to the file by anything else after the first read are never
    seen. There is no locking, and a failed write can leave the file
    truncated.
    """

    def __init__(
        self,
        path: str | Path = DEFAULT_PATH,
        config: RepositoryConfig | None = None,
        *,
        encoding: str = "utf-8",
        indent: int | None = None,
    ):
        super().__init__(config)
        self.path = Path(path)
        self.encoding = encoding
        self.indent = indent
        self.entity_mapper = EntityMapper(FilePost)
        self._posts: list[FilePost] | None = None

    async def _load_records(self) -> list[FilePost]:
        if self._posts is None:
            self._posts = await asyncio.to_thread(self._read_file)
        return self._posts

    async def _save_records(self, records: list[FilePost]) -> None:
        await asyncio.to_thread(self._write_file, records)
        self._posts = records

    def _read_file(self) -> list[FilePost]:
        try:
            rows = json.loads(self.path.read_text(encoding=self.encoding))
        except OSError as exc:
            logger.warning("Could not read %s: %s", self.path, exc)
            raise StorageUnavailableError(self.path, str(exc)) from exc
        except UnicodeDecodeError as exc:
            logger.warning("Could not decode %s as %s: %s", self.path, self.encoding, exc)
            raise StorageUnavailableError(self.path, f"not valid {self.encoding}: {exc}") from exc
        except json.JSONDecodeError as exc:
            logger.warning("Malformed JSON in %s: %s", self.path, exc)
            raise StorageUnavailableError(self.path, f"malformed JSON: {exc}") from exc

        if not isinstance(rows, list):
            logger.warning("Expected a JSON array in %s", self.path)
            raise StorageUnavailableError(self.path, "expected a JSON array of posts")

        try:
            records = self.entity_mapper.map_rows_to_entities(rows)
        except (ValueError, TypeError) as exc:
            logger.warning("Invalid post record in %s: %s", self.path, exc)
            raise StorageUnavailableError(self.path, f"invalid post record: {exc}") from exc

        StorageManager.log_operation("read", self.path, len(records))
        return records

    def _write_file(self, records: list[FilePost]) -> None:
        rows = self.entity_mapper.map_entities_to_rows(records)
        try:
            self.path.write_text(
                json.dumps(rows, indent=self.indent), encoding=self.encoding
            )
        except OSError as exc:
            logger.warning("Could not write %s: %s", self.path, exc)
            raise StorageUnavailableError(self.path, str(exc)) from exc

        StorageManager.log_operation("write", self.path, len(records))

    def matches_id(self, schema_entity: FilePost, post_id: int) -> bool:
        return schema_entity.id == post_id

    def to_schema_entity(self, fields: dict[str, Any]) -> FilePost:
        return FilePost(
            id=fields["id"],
            title=fields["title"],
            desc=fields["description"],
            body=fields["body"],
            author=fields["created_by"],
            added=fields["created"],
            updated=fields["updated"],
        )

    def apply_update(self, schema_entity: FilePost, fields: dict[str, Any]) -> FilePost:
        return schema_entity.model_copy(
            update={
                "title": fields["title"],
                "desc": fields["description"],
                "body": fields["body"],
                "updated": fields["updated"],
            }
        )

    def to_domain_entity(self, schema_entity: FilePost) -> Post:
        return Post(
            id=schema_entity.id,
            title=schema_entity.title,
            description=schema_entity.desc,
            body=schema_entity.body,
            created_by=schema_entity.author,
            created=schema_entity.added,
            updated=schema_entity.updated,
        )
