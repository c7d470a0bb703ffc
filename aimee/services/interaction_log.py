"""Bounded in-memory history of queries and email sends."""

import logging
import threading
import time

from aimee.config import settings
from aimee.models.log_entry import LogEntry, LogEntryType

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 100


class InteractionLog:
    """Most-recent-first log capped at ``max_entries``.

    New entries are inserted at the front; once the cap is exceeded the
    oldest entries are dropped.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self._lock = threading.Lock()
        self._entries: list[LogEntry] = []
        self._last_id = 0

    def next_id(self) -> int:
        """Millisecond timestamp id, bumped so ids strictly increase."""
        with self._lock:
            candidate = time.time_ns() // 1_000_000
            self._last_id = max(candidate, self._last_id + 1)
            return self._last_id

    def record(self, entry: LogEntry) -> LogEntry:
        """Prepend an entry and evict anything past the cap."""
        with self._lock:
            self._entries.insert(0, entry)
            evicted = len(self._entries) - self.max_entries
            if evicted > 0:
                del self._entries[self.max_entries:]
        if evicted > 0:
            logger.debug("Interaction log evicted %d entries", evicted)
        return entry

    def record_query(self, query: str, response: str, user_id: str) -> LogEntry:
        return self.record(
            LogEntry(id=self.next_id(), query=query, response=response, user_id=user_id)
        )

    def record_email(self, recipient: str, user_id: str) -> LogEntry:
        return self.record(
            LogEntry(
                id=self.next_id(),
                response=f"Email sent to {recipient}",
                user_id=user_id,
                type=LogEntryType.EMAIL_SENT,
                recipient=recipient,
            )
        )

    def list(self) -> list[LogEntry]:
        """Return entries newest first."""
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_interaction_log: InteractionLog | None = None
_interaction_log_lock = threading.Lock()


def get_interaction_log() -> InteractionLog:
    """FastAPI dependency returning the process-wide interaction log.

    Created on first use so the cap comes from the loaded settings.
    """
    global _interaction_log
    if _interaction_log is None:
        with _interaction_log_lock:
            if _interaction_log is None:
                _interaction_log = InteractionLog(settings.log_max_entries)
    return _interaction_log
