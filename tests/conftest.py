import pytest

from post_store.entities import CreatePost
from post_store.file_repository import FileRepository
from post_store.in_memory_repository import InMemoryRepository


@pytest.fixture
def db_path(tmp_path):
    """Backing file holding an empty JSON array."""
    path = tmp_path / "db.json"
    path.write_text("[]", encoding="utf-8")
    return path


@pytest.fixture
def in_memory_repo():
    return InMemoryRepository()


@pytest.fixture
def file_repo(db_path):
    return FileRepository(db_path)


@pytest.fixture(params=["in-memory", "file"])
def repo(request, db_path):
    """Each backend in turn, behind the same contract."""
    if request.param == "in-memory":
        return InMemoryRepository()
    return FileRepository(db_path)


@pytest.fixture
def new_post():
    return CreatePost(title="T", description="D", body="B", created_by="alice")
