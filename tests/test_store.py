"""
Integration tests for the state container.

The store is opened over in-memory or temp-dir storage; an activity
logger stub records what the store reports.
"""

import json
from datetime import date

import pytest

from lifebooster.audit import ActivityLogger
from lifebooster.models import TrashKind
from lifebooster.reducers import add_expense, add_task, move_to_trash, toggle_task
from lifebooster.services.storage import DocumentStore, InMemoryStorage, KeyValueStorage
from lifebooster.errors import StorageError
from lifebooster.store import LifeStore, create_store

from tests.conftest import NOW, later


KEY = "lifebooster_data"
DAY = date(2024, 5, 10)


class RecordingActivityLogger(ActivityLogger):
    """Keeps every event instead of only logging it."""

    def __init__(self):
        super().__init__()
        self.events = []

    def log(self, event):
        self.events.append(event)
        super().log(event)

    @property
    def event_types(self):
        return [event.event_type.value for event in self.events]


class WriteFailingStorage(InMemoryStorage):
    """Reads work, writes fail."""

    def set_item(self, key, value):
        raise StorageError("disk full", key=key)


@pytest.fixture
def activity():
    return RecordingActivityLogger()


@pytest.fixture(autouse=True)
def fixed_currency(monkeypatch):
    monkeypatch.setenv("LIFEBOOSTER_LOCALE", "fr_MA.UTF-8")


def _open(storage, activity, now=NOW):
    persistence = DocumentStore(storage, key=KEY, activity_logger=activity)
    return LifeStore.open(persistence, activity_logger=activity, now=now)


class TestOpen:
    """Tests for opening a store."""

    def test_first_run_creates_and_saves(self, activity):
        """Test an empty slot gives a fresh document that is saved at once."""
        storage = InMemoryStorage()
        store = _open(storage, activity)

        assert store.document.currency == "MAD"
        assert store.document.has_onboarded is False
        assert store.document.join_date == NOW
        assert KEY in storage
        assert activity.event_types == ["document_created"]

    def test_reopen_loads_and_touches(self, activity):
        """Test a stored document is loaded and its last-active time updated."""
        storage = InMemoryStorage()
        first = _open(storage, activity)
        first.dispatch(add_task, "Read", day=DAY, now=later(1))

        second = _open(storage, activity, now=later(3600))
        assert second.document.user_id == first.document.user_id
        assert [t.text for t in second.document.tasks] == ["Read"]
        assert second.document.last_active_date == later(3600)
        assert "document_loaded" in activity.event_types

    def test_corrupt_document_backed_up_then_replaced(self, activity):
        """Test a corrupt blob is copied aside before a fresh document replaces it."""
        storage = InMemoryStorage({KEY: "{broken"})
        store = _open(storage, activity)

        assert store.document.tasks == []
        assert activity.event_types[:3] == [
            "document_load_failed",
            "document_backed_up",
            "document_created",
        ]
        assert storage.get_item(f"{KEY}.corrupt-20240510T093000") == "{broken"
        assert json.loads(storage.get_item(KEY))["userId"] == store.document.user_id

    def test_older_document_with_loose_records_is_kept(self, activity):
        """Test records the older app allowed do not wipe the document."""
        legacy = {
            "hasOnboarded": True,
            "name": "Yasmine",
            "joinDate": "2023-01-01T08:00:00.000Z",
            "tasks": [
                {"id": "1", "text": "Read", "completed": False,
                 "priority": "high", "date": "2023-01-02", "time": "08:00 AM"}
            ],
            "expenses": [
                {"id": "2", "amount": -5, "description": "Refund",
                 "date": "2023-01-02T09:00:00.000Z"},
                {"id": "3", "amount": 12, "description": "y" * 250,
                 "date": "2023-01-02T10:00:00.000Z"},
                {"id": "4", "amount": 3, "description": "  ",
                 "date": "2023-01-02T11:00:00.000Z"},
            ],
        }
        storage = InMemoryStorage({KEY: json.dumps(legacy)})
        store = _open(storage, activity)

        assert [t.text for t in store.document.tasks] == ["Read"]
        assert len(store.document.expenses) == 3
        assert store.document.expenses[0].amount == -5
        assert "document_load_failed" not in activity.event_types
        assert json.loads(storage.get_item(KEY))["tasks"][0]["text"] == "Read"

    def test_first_run_makes_no_backup(self, activity):
        """Test an empty slot is not reported as backed up."""
        _open(InMemoryStorage(), activity)
        assert "document_backed_up" not in activity.event_types


class TestDispatch:
    """Tests for applying reducers through the store."""

    def test_accepted_change_is_saved(self, activity):
        """Test an accepted change replaces the document and is persisted."""
        storage = InMemoryStorage()
        store = _open(storage, activity)

        assert store.dispatch(add_expense, "12.50", "Lunch", now=later(1)) is True
        stored = json.loads(storage.get_item(KEY))
        assert stored["expenses"][0]["description"] == "Lunch"
        assert activity.events[-1].action == "add_expense"

    def test_refused_change_is_noop(self, activity):
        """Test invalid input leaves the document and storage unchanged."""
        storage = InMemoryStorage()
        store = _open(storage, activity)
        before = store.document
        blob = storage.get_item(KEY)

        assert store.dispatch(add_expense, "abc", "Lunch", now=later(1)) is False
        assert store.document is before
        assert storage.get_item(KEY) == blob
        assert activity.event_types[-1] == "action_rejected"
        assert "amount" in activity.events[-1].error_message

    def test_unknown_id_is_noop(self, activity):
        """Test acting on a missing record is refused quietly."""
        store = _open(InMemoryStorage(), activity)
        assert store.dispatch(toggle_task, "missing") is False

    def test_trash_through_store(self, activity):
        """Test a full soft-delete goes through dispatch."""
        store = _open(InMemoryStorage(), activity)
        store.dispatch(add_task, "Read", day=DAY, now=later(1))
        task = store.document.tasks[0]

        assert store.dispatch(move_to_trash, task, TrashKind.TASK, now=later(2)) is True
        assert store.document.tasks == []
        assert store.document.trash[0].data == task

    def test_failed_write_keeps_change(self, activity):
        """Test a failed write is logged but the change still applies in memory."""
        store = _open(WriteFailingStorage(), activity)
        assert store.dispatch(add_task, "Read", day=DAY, now=later(1)) is True
        assert len(store.document.tasks) == 1
        assert "document_save_failed" in activity.event_types


class TestReset:
    """Tests for factory reset."""

    def test_reset_erases_everything(self, activity):
        """Test reset replaces the stored document with a fresh one."""
        storage = InMemoryStorage()
        store = _open(storage, activity)
        store.dispatch(add_task, "Read", day=DAY, now=later(1))

        fresh = store.reset(now=later(60))
        assert fresh is store.document
        assert fresh.tasks == []
        assert fresh.join_date == later(60)
        assert json.loads(storage.get_item(KEY))["tasks"] == []
        assert activity.event_types[-1] == "factory_reset"


class TestCreateStore:
    """Tests for the store factory."""

    def test_create_store_with_backend(self):
        """Test a custom backend can be supplied."""
        storage = InMemoryStorage()
        store = create_store(storage=storage)
        assert isinstance(store, LifeStore)
        assert KEY in storage

    def test_create_store_on_disk(self, tmp_path):
        """Test the default backend writes into the data directory."""
        store = create_store(data_dir=tmp_path)
        store.dispatch(add_task, "Read", day=DAY)
        assert (tmp_path / f"{KEY}.json").exists()

        reopened = create_store(data_dir=tmp_path)
        assert [t.text for t in reopened.document.tasks] == ["Read"]

    def test_backend_must_implement_interface(self):
        """Test the storage interface cannot be used directly."""
        with pytest.raises(TypeError):
            KeyValueStorage()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
