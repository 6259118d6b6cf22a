from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel


T = TypeVar("T", bound=BaseModel)


class EntityMapper(Generic[T]):
    """Composition class for converting between stored rows and record entities"""

    def __init__(self, entity_class: type[T]):
        self.entity_class = entity_class

    def map_row_to_entity(self, row: Mapping[str, Any]) -> T:
        """Validate a raw row into a record entity"""
        return self.entity_class.model_validate(dict(row))

    def map_rows_to_entities(self, rows: Iterable[Mapping[str, Any]]) -> list[T]:
        """Validate raw rows into record entities"""
        return [self.map_row_to_entity(row) for row in rows]

    def map_entities_to_rows(self, entities: Iterable[T]) -> list[dict[str, Any]]:
        """Dump record entities to JSON-compatible rows"""
        return [entity.model_dump(mode="json") for entity in entities]
