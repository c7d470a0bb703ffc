"""Tests for the bounded interaction log."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from aimee.models.log_entry import LogEntry, LogEntryType
from aimee.services import interaction_log
from aimee.services.interaction_log import InteractionLog, get_interaction_log


class TestInteractionLog:
    """Ordering, capping and id assignment."""

    def test_newest_first(self) -> None:
        log = InteractionLog()
        log.record_query("first", "a", "user-1")
        log.record_query("second", "b", "user-1")
        assert [e.query for e in log.list()] == ["second", "first"]

    def test_cap_keeps_most_recent(self) -> None:
        log = InteractionLog(max_entries=100)
        for i in range(1, 151):
            log.record_query(f"query {i}", "ok", "user-1")

        entries = log.list()
        assert len(entries) == 100
        assert entries[0].query == "query 150"
        assert entries[-1].query == "query 51"

    def test_small_cap(self) -> None:
        log = InteractionLog(max_entries=1)
        log.record_query("old", "ok", "u")
        log.record_query("new", "ok", "u")
        assert [e.query for e in log.list()] == ["new"]

    def test_invalid_cap(self) -> None:
        with pytest.raises(ValueError):
            InteractionLog(max_entries=0)

    def test_ids_strictly_increase(self) -> None:
        log = InteractionLog()
        ids = [log.record_query(str(i), "ok", "u").id for i in range(50)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 50

    def test_record_query_fields(self) -> None:
        entry = InteractionLog().record_query("syrah price", "Syrah is $25", "user-7")
        assert entry.type == LogEntryType.QUERY
        assert entry.user_id == "user-7"
        assert entry.recipient is None
        assert entry.timestamp

    def test_record_email(self) -> None:
        entry = InteractionLog().record_email("Johnson Winery", "user-1")
        assert entry.type == LogEntryType.EMAIL_SENT
        assert entry.recipient == "Johnson Winery"
        assert entry.response == "Email sent to Johnson Winery"
        assert entry.query is None

    def test_clear(self) -> None:
        log = InteractionLog()
        log.record_query("q", "r", "u")
        log.clear()
        assert len(log) == 0

    def test_list_is_a_copy(self) -> None:
        log = InteractionLog()
        log.record_query("q", "r", "u")
        log.list().clear()
        assert len(log) == 1


class TestConcurrency:
    """Shared-log access from many threads."""

    def test_concurrent_records_respect_cap(self) -> None:
        log = InteractionLog(max_entries=100)

        with ThreadPoolExecutor(max_workers=16) as pool:
            entries = list(
                pool.map(lambda i: log.record_query(f"q{i}", "ok", "u"), range(500))
            )

        assert len(log) == log.max_entries
        assert len({entry.id for entry in entries}) == 500
        kept_ids = [entry.id for entry in log.list()]
        assert len(set(kept_ids)) == 100

    def test_shared_log_created_once(self, monkeypatch) -> None:
        monkeypatch.setattr(interaction_log, "_interaction_log", None)

        with ThreadPoolExecutor(max_workers=16) as pool:
            logs = list(pool.map(lambda _: get_interaction_log(), range(64)))

        assert all(log is logs[0] for log in logs)


class TestLogEntrySerialization:
    def test_camel_case_user_id(self) -> None:
        entry = LogEntry(id=1, query="q", response="r", user_id="u")
        data = entry.model_dump(by_alias=True)
        assert data["userId"] == "u"
        assert data["type"] == "query"

    def test_accepts_alias(self) -> None:
        entry = LogEntry(id=1, response="r", userId="u", type="email_sent")
        assert entry.user_id == "u"
        assert entry.type == "email_sent"
