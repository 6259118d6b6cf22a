import logging
from contextlib import asynccontextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class StorageLog:
    """Represents one read or write of a backing file"""

    operation: str
    path: str
    record_count: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __repr__(self) -> str:
        return f"StorageLog(operation={self.operation!r}, path={self.path!r}, record_count={self.record_count}, timestamp={self.timestamp})"


class StorageTracker:
    """Tracks storage operations executed during a context"""

    def __init__(self):
        self.operations: list[StorageLog] = []
        self._enabled: bool = False

    def enable(self):
        """Enable operation tracking"""
        self._enabled = True

    def disable(self):
        """Disable operation tracking"""
        self._enabled = False

    def is_enabled(self) -> bool:
        """Check if operation tracking is enabled"""
        return self._enabled

    def log_operation(self, operation: str, path: str, record_count: int):
        """Record an operation if tracking is enabled"""
        if self._enabled:
            self.operations.append(
                StorageLog(operation=operation, path=path, record_count=record_count)
            )

    def get_operations(self, operation: str | None = None) -> list[StorageLog]:
        """Get logged operations, optionally only those of one kind"""
        if operation is None:
            return self.operations.copy()
        return [log for log in self.operations if log.operation == operation]

    def clear(self):
        """Clear all logged operations"""
        self.operations.clear()

    def count(self) -> int:
        """Get the number of logged operations"""
        return len(self.operations)

    def to_dict(self) -> list[dict[str, Any]]:
        """Convert logged operations to a list of dictionaries"""
        return [
            {
                "operation": log.operation,
                "path": log.path,
                "record_count": log.record_count,
                "timestamp": log.timestamp.isoformat(),
            }
            for log in self.operations
        ]


# Context variable to store the storage tracker
_storage_tracker: ContextVar[StorageTracker | None] = ContextVar(
    "storage_tracker", default=None
)


class StorageManager:
    """Entry point for storage operation logging and tracking"""

    @classmethod
    def get_tracker(cls) -> StorageTracker | None:
        """Get the current storage tracker from context"""
        return _storage_tracker.get()

    @classmethod
    def log_operation(cls, operation: str, path: Path, record_count: int):
        """Log an operation and hand it to the current tracker if available"""
        logger.debug("%s %s (%d records)", operation, path, record_count)
        tracker = _storage_tracker.get()
        if tracker:
            tracker.log_operation(operation, str(path), record_count)

    @classmethod
    @asynccontextmanager
    async def track_operations(cls):
        """Context manager for storage operation tracking.

        async with StorageManager.track_operations() as tracker:
            await repo.create_post(data)
            writes = tracker.get_operations("write")
        """
        current_tracker = _storage_tracker.get()

        if current_tracker:
            # Already have a tracker, just enable it
            was_enabled = current_tracker.is_enabled()
            current_tracker.enable()
            try:
                yield current_tracker
            finally:
                if not was_enabled:
                    current_tracker.disable()
        else:
            tracker = StorageTracker()
            tracker.enable()
            token = _storage_tracker.set(tracker)
            try:
                yield tracker
            finally:
                _storage_tracker.reset(token)
