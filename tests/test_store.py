"""Tests for the in-memory run storage."""

from datetime import datetime, timezone

from app.detection.summary import summarize
from app.models import DetectionConfig, DetectionRun


def make_run(run_id="run-1", created_at="2026-02-22T10:00:00Z") -> DetectionRun:
    return DetectionRun(
        run_id=run_id,
        created_at=datetime.fromisoformat(created_at.replace("Z", "+00:00")),
        config=DetectionConfig(),
        total_transactions=0,
        batch_count=0,
        flagged=[],
        errors=[],
        summary=summarize([]),
    )


class TestRunStoreAdd:
    def test_add_and_get(self, store):
        store.add(make_run("run-1"))
        assert store.get("run-1").run_id == "run-1"

    def test_get_missing(self, store):
        assert store.get("nope") is None

    def test_get_all_insertion_order(self, store):
        store.add(make_run("run-1"))
        store.add(make_run("run-2"))
        store.add(make_run("run-3"))
        assert [r.run_id for r in store.get_all()] == ["run-1", "run-2", "run-3"]

    def test_same_id_replaces(self, store):
        store.add(make_run("run-1", "2026-02-22T10:00:00Z"))
        store.add(make_run("run-1", "2026-02-22T11:00:00Z"))
        assert len(store.get_all()) == 1
        assert store.get("run-1").created_at.hour == 11


class TestRunStoreTimeFilter:
    def test_filter_by_since(self, store):
        store.add(make_run("old", "2026-02-22T10:00:00Z"))
        store.add(make_run("new", "2026-02-22T14:00:00Z"))
        since = datetime(2026, 2, 22, 12, 0, tzinfo=timezone.utc)
        assert [r.run_id for r in store.get_all(since=since)] == ["new"]

    def test_filter_by_until(self, store):
        store.add(make_run("old", "2026-02-22T10:00:00Z"))
        store.add(make_run("new", "2026-02-22T14:00:00Z"))
        until = datetime(2026, 2, 22, 12, 0, tzinfo=timezone.utc)
        assert [r.run_id for r in store.get_all(until=until)] == ["old"]

    def test_bounds_inclusive(self, store):
        store.add(make_run("edge", "2026-02-22T12:00:00Z"))
        edge = datetime(2026, 2, 22, 12, 0, tzinfo=timezone.utc)
        assert len(store.get_all(since=edge, until=edge)) == 1
