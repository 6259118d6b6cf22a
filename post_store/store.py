"""Repository contract shared by every storage backend"""

from abc import ABC, abstractmethod

from post_store.entities import CreatePost, Post, UpdatePost


class StoreRepository(ABC):
    """CRUD capability set over posts.

    Callers hold a StoreRepository and never see the backend's own record
    shape; every method returns public Post models.
    """

    @abstractmethod
    async def get_all_posts(self) -> list[Post]:
        """Return every stored post in backend order."""

    @abstractmethod
    async def get_post_by_id(self, post_id: int) -> Post | None:
        """Return the post with the given id, or None when there is none."""

    @abstractmethod
    async def create_post(self, post: CreatePost) -> Post:
        """Store a new post and return it with its assigned id and timestamps."""

    @abstractmethod
    async def update_post(self, post: UpdatePost) -> Post:
        """Replace title, description and body of an existing post.

        Raises:
            PostNotFoundError: no post has ``post.id``
        """

    @abstractmethod
    async def delete_post(self, post_id: int) -> int:
        """Remove a post and return its id.

        Raises:
            PostNotFoundError: no post has ``post_id``
        """
