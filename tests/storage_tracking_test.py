"""Tests for storage operation tracking"""

import pytest

from post_store.entities import UpdatePost
from post_store.storage_context import StorageManager, StorageTracker


@pytest.mark.asyncio
async def test_file_is_read_once_and_written_per_mutation(file_repo, db_path, new_post):
    async with StorageManager.track_operations() as tracker:
        created = await file_repo.create_post(new_post)
        await file_repo.get_all_posts()
        await file_repo.get_post_by_id(created.id)
        await file_repo.update_post(
            UpdatePost(id=created.id, title="x", description="y", body="z")
        )
        await file_repo.delete_post(created.id)

        reads = tracker.get_operations("read")
        writes = tracker.get_operations("write")

    assert len(reads) == 1
    assert reads[0].record_count == 0
    assert [log.record_count for log in writes] == [1, 1, 0]
    assert all(log.path == str(db_path) for log in tracker.get_operations())


@pytest.mark.asyncio
async def test_reads_only_do_not_write(file_repo):
    async with StorageManager.track_operations() as tracker:
        await file_repo.get_all_posts()
        await file_repo.get_post_by_id(1)

    assert tracker.count() == 1
    assert tracker.get_operations("write") == []


@pytest.mark.asyncio
async def test_in_memory_backend_touches_no_storage(in_memory_repo, new_post):
    async with StorageManager.track_operations() as tracker:
        await in_memory_repo.create_post(new_post)

    assert tracker.count() == 0


@pytest.mark.asyncio
async def test_no_tracker_outside_context(file_repo):
    assert StorageManager.get_tracker() is None

    await file_repo.get_all_posts()

    assert StorageManager.get_tracker() is None


@pytest.mark.asyncio
async def test_nested_tracking_reuses_outer_tracker(file_repo, new_post):
    async with StorageManager.track_operations() as outer:
        async with StorageManager.track_operations() as inner:
            await file_repo.create_post(new_post)

        assert inner is outer
        assert outer.is_enabled()

    assert outer.count() == 2


def test_tracker_to_dict_and_clear():
    tracker = StorageTracker()
    tracker.log_operation("read", "db.json", 3)
    assert tracker.count() == 0

    tracker.enable()
    tracker.log_operation("read", "db.json", 3)

    entries = tracker.to_dict()
    assert len(entries) == 1
    assert entries[0]["operation"] == "read"
    assert entries[0]["record_count"] == 3
    assert "timestamp" in entries[0]

    tracker.clear()
    assert tracker.count() == 0
