"""
Tests for LifeBooster

Test strategy:
1. Unit tests for models, reducers and derived views
2. Integration tests for the store with in-memory or temp-dir storage
3. Every clock is injected, so results never depend on the wall time
"""

import json
import re
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from lifebooster.models import (
    CURRENT_SCHEMA_VERSION,
    ActivityEvent,
    ActivityEventBuilder,
    ActivityEventType,
    ActivitySeverity,
    Expense,
    ExpenseTrashItem,
    LifeDocument,
    Loan,
    LoanType,
    Notification,
    Priority,
    Task,
    TaskTrashItem,
    TrashKind,
    generate_user_id,
    initial_document,
    new_entity_id,
    wrap_for_trash,
)

from tests.conftest import NOW


class TestEntityModels:
    """Tests for the stored entity models."""

    def test_task_creation_by_stored_keys(self):
        """Test Task accepts the camelCase stored layout."""
        task = Task.model_validate(
            {"id": "1", "text": "Pay rent", "date": "2024-05-10", "time": "09:30"}
        )
        assert task.day == date(2024, 5, 10)
        assert task.time_label == "09:30"
        assert task.priority == Priority.MEDIUM
        assert task.completed is False

    def test_task_strips_whitespace(self):
        """Test that whitespace is stripped from task text."""
        task = Task(id="1", text="  Pay rent  ", day=date(2024, 5, 10))
        assert task.text == "Pay rent"

    def test_task_is_frozen(self):
        """Test that entities cannot be edited in place."""
        task = Task(id="1", text="Pay rent", day=date(2024, 5, 10))
        with pytest.raises(ValidationError):
            task.completed = True

    def test_stored_expense_keeps_older_shapes(self):
        """Test stored records with negative amounts or blank text still load."""
        expense = Expense.model_validate(
            {"id": "1", "amount": -5, "description": "   ", "date": NOW.isoformat()}
        )
        assert expense.amount == Decimal("-5")
        assert expense.description == ""

    def test_stored_text_has_no_length_cap(self):
        """Test long stored text is kept as-is."""
        task = Task.model_validate({"id": "1", "text": "x" * 2000, "date": "2024-05-10"})
        assert len(task.text) == 2000

    def test_expense_accepts_numeric_amount(self):
        """Test that plain JSON numbers are read as Decimal."""
        expense = Expense.model_validate(
            {"id": "1", "amount": 12.5, "description": "Lunch", "date": NOW.isoformat()}
        )
        assert expense.amount == Decimal("12.5")

    def test_loan_bare_due_date_is_utc(self):
        """Test that a date-only due date is read as UTC midnight."""
        loan = Loan.model_validate(
            {
                "id": "1",
                "person": "Sam",
                "amount": "200",
                "type": "lent",
                "createdAt": "2024-05-01T10:00:00Z",
                "dueDate": "2024-06-01",
            }
        )
        assert loan.loan_type == LoanType.LENT
        assert loan.due_date == datetime(2024, 6, 1, tzinfo=timezone.utc)

    def test_notification_defaults(self):
        """Test Notification default read flag and type."""
        note = Notification(id="1", title="Welcome", sent_at=NOW)
        assert note.read is False
        assert note.kind.value == "info"
        assert note.message == ""

    def test_new_entity_id_from_clock(self):
        """Test ids are the clock reading in milliseconds."""
        assert new_entity_id(NOW) == str(int(NOW.timestamp() * 1000))


class TestLifeDocument:
    """Tests for the root document model."""

    def test_initial_document_defaults(self):
        """Test a fresh document has every collection empty."""
        doc = initial_document("MAD", now=NOW)
        assert doc.currency == "MAD"
        assert doc.has_onboarded is False
        assert doc.name == "User"
        assert doc.join_date == NOW
        assert doc.last_active_date == NOW
        assert doc.schema_version == CURRENT_SCHEMA_VERSION
        assert doc.tasks == [] and doc.trash == [] and doc.notifications == []

    def test_generate_user_id_format(self):
        """Test the display id is a prefix plus four digits."""
        assert re.fullmatch(r"OP-\d{4}", generate_user_id())
        assert generate_user_id("ID-").startswith("ID-")

    def test_document_rejects_bad_currency(self):
        """Test currency must be a three-letter upper-case code."""
        with pytest.raises(ValidationError):
            initial_document("usd", now=NOW)

    def test_to_json_uses_stored_keys(self, document):
        """Test serialization uses camelCase and omits unset optionals."""
        raw = json.loads(document.to_json())
        assert raw["userId"] == document.user_id
        assert raw["hasOnboarded"] is False
        assert raw["schemaVersion"] == CURRENT_SCHEMA_VERSION
        assert "profileImage" not in raw

    def test_amounts_serialize_as_strings(self, document):
        """Test Decimal amounts keep their exact value in JSON."""
        expense = Expense(
            id="1", amount=Decimal("12.50"), description="Lunch", occurred_at=NOW
        )
        doc = document.model_copy(update={"expenses": [expense]})
        raw = json.loads(doc.to_json())
        assert raw["expenses"][0]["amount"] == "12.50"

    def test_trash_entries_rebuild_concrete_types(self, document):
        """Test trash entries are rebuilt by their type tag."""
        raw = json.loads(document.to_json())
        raw["trash"] = [
            {
                "type": "expense",
                "deletedAt": NOW.isoformat(),
                "data": {
                    "id": "7",
                    "amount": "3",
                    "description": "Tea",
                    "date": NOW.isoformat(),
                },
            },
            {
                "type": "task",
                "deletedAt": NOW.isoformat(),
                "data": {"id": "7", "text": "Read", "date": "2024-05-10"},
            },
        ]
        doc = LifeDocument.model_validate(raw)
        assert isinstance(doc.trash[0], ExpenseTrashItem)
        assert isinstance(doc.trash[1], TaskTrashItem)
        assert doc.trash[0].kind == TrashKind.EXPENSE
        assert doc.trash[1].entity_id == "7"

    def test_unknown_trash_type_rejected(self, document):
        """Test an unknown trash tag fails validation."""
        raw = json.loads(document.to_json())
        raw["trash"] = [{"type": "meeting", "deletedAt": NOW.isoformat(), "data": {}}]
        with pytest.raises(ValidationError):
            LifeDocument.model_validate(raw)

    def test_wrap_for_trash_picks_type(self):
        """Test wrap_for_trash builds the entry class for the kind."""
        task = Task(id="1", text="Read", day=date(2024, 5, 10))
        item = wrap_for_trash(TrashKind.TASK, task, deleted_at=NOW)
        assert isinstance(item, TaskTrashItem)
        assert item.data == task


class TestActivityModels:
    """Tests for activity event models."""

    def test_activity_event_creation(self):
        """Test ActivityEvent model creation."""
        event = ActivityEvent(
            event_type=ActivityEventType.DOCUMENT_LOADED,
            description="Loaded",
        )
        assert event.severity == ActivitySeverity.INFO
        assert event.event_id is not None

    def test_activity_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = ActivityEventBuilder.action_rejected("add_task", "text: must not be empty")
        log_dict = event.to_log_dict()
        assert log_dict["event_type"] == "action_rejected"
        assert log_dict["severity"] == "warning"
        assert log_dict["action"] == "add_task"
        assert log_dict["error_message"] == "text: must not be empty"

    def test_builder_save_failed_is_error(self):
        """Test storage write failures are logged as errors."""
        event = ActivityEventBuilder.save_failed("lifebooster_data", "disk full")
        assert event.severity == ActivitySeverity.ERROR
        assert event.details == {"key": "lifebooster_data"}

    def test_builder_factory_reset(self):
        """Test factory reset keeps the previous user id."""
        event = ActivityEventBuilder.factory_reset("OP-1234")
        assert event.event_type == ActivityEventType.FACTORY_RESET
        assert event.details["previous_user_id"] == "OP-1234"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
