from datetime import UTC, datetime, timedelta

from post_store.entities import CreatePost, Post, UpdatePost
from post_store.errors import PostNotFoundError
from post_store.store import StoreRepository


class FakeClock:
    """Clock that advances by a fixed step on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.current = start or datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        self.calls += 1
        return now


class StubRepository(StoreRepository):
    """Hand-written stand-in for a real backend, serving a fixed list."""

    def __init__(self, posts: list[Post] | None = None):
        self.posts = list(posts or [])
        self.lookups: list[int] = []

    async def get_all_posts(self) -> list[Post]:
        return list(self.posts)

    async def get_post_by_id(self, post_id: int) -> Post | None:
        self.lookups.append(post_id)
        return next((post for post in self.posts if post.id == post_id), None)

    async def create_post(self, post: CreatePost) -> Post:
        moment = datetime(2024, 1, 1, tzinfo=UTC)
        created = Post(
            id=len(self.posts) + 1,
            title=post.title,
            description=post.description,
            body=post.body,
            created_by=post.created_by,
            created=moment,
            updated=moment,
        )
        self.posts.append(created)
        return created

    async def update_post(self, post: UpdatePost) -> Post:
        raise PostNotFoundError(post.id)

    async def delete_post(self, post_id: int) -> int:
        raise PostNotFoundError(post_id)
