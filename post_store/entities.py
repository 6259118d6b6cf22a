from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class BaseEntity(BaseModel):
    """Base entity class for public domain models."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)
    id: int = Field(gt=0)


class Post(BaseEntity):
    """A post as seen by callers of any repository backend."""

    title: str
    description: str
    body: str
    created_by: str
    created: datetime
    updated: datetime

    @model_validator(mode="after")
    def _check_timestamps(self) -> "Post":
        if self.created > self.updated:
            raise ValueError("created must not be later than updated")
        return self


class CreatePost(BaseModel):
    """Fields supplied by the caller when creating a post.

    The id and both timestamps are assigned by the repository.
    """

    title: str
    description: str
    body: str
    created_by: str


class UpdatePost(BaseModel):
    """Fields that may change on an existing post.

    created_by and created are fixed at creation; updated is recomputed.
    """

    id: int = Field(gt=0)
    title: str
    description: str
    body: str
