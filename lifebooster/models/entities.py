"""
Core Entity Models for LifeBooster

These models define the schema of every record kept in the life document.
They are designed to:
1. Enforce type safety at runtime
2. Be immutable - reducers build new values instead of editing old ones
3. Serialize to the same camelCase JSON the document has always been stored in

DESIGN DECISION: Python attributes are snake_case, stored keys are camelCase.
The alias generator bridges the two, and `populate_by_name` lets code
construct models with either spelling.

Day buckets (`day`, stored as "date") are plain calendar dates with no time
component. Timestamps are timezone-aware datetimes.

IMPORTANT: These models describe what a stored document may hold, not what
new input may be. Older documents contain negative amounts, blank or very
long text, so there are no sign or length limits here. Limits on new input
are enforced by lifebooster.validation before an entity is built.
"""

import time
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class Priority(str, Enum):
    """Task priority, highest first."""
    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


PRIORITY_ORDER = {
    Priority.URGENT: 0,
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}


class LoanType(str, Enum):
    """Direction of a loan relative to the user."""
    LENT = "lent"          # Someone owes the user
    BORROWED = "borrowed"  # The user owes someone


class Mood(str, Enum):
    """Daily mood scale."""
    GREAT = "great"
    GOOD = "good"
    NEUTRAL = "neutral"
    BAD = "bad"
    AWFUL = "awful"


class NotificationType(str, Enum):
    """Notification severity, used only for display."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class TransactionKind(str, Enum):
    """Which money collection a transaction came from."""
    INCOME = "income"
    EXPENSE = "expense"


class DayHealth(str, Enum):
    """
    Calendar classification of a day's task completion.

    NONE means the day had no tasks at all, which is different
    from LOW (tasks existed but fewer than half were done).
    """
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# =============================================================================
# HELPERS
# =============================================================================

def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def _assume_utc(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


# Stored timestamps without an offset (e.g. a bare "2024-05-01" due date)
# are read as UTC so they can be compared with aware ones.
Timestamp = Annotated[datetime, AfterValidator(_assume_utc)]


def new_entity_id(now: Optional[datetime] = None) -> str:
    """
    Build an entity id from the wall-clock time in milliseconds.

    Ids only need to be unique inside their own collection. Two entities
    created in the same millisecond will collide; that is accepted.
    """
    if now is None:
        return str(time.time_ns() // 1_000_000)
    return str(int(now.timestamp() * 1000))


class LifeModel(BaseModel):
    """Base for every stored model: frozen, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        str_strip_whitespace=True,
    )


# =============================================================================
# TIME MANAGEMENT
# =============================================================================

class Task(LifeModel):
    """A to-do item filed under a single day bucket."""

    id: str = Field(..., min_length=1)
    text: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    day: date = Field(..., alias="date")
    time_label: Optional[str] = Field(
        default=None,
        alias="time",
        description="Time of day the task was written down, e.g. '09:30'"
    )


class Challenge(LifeModel):
    """A long-term goal, tagged to the day it was set."""

    id: str = Field(..., min_length=1)
    text: str
    completed: bool = False
    day: date = Field(..., alias="date")


class Mistake(LifeModel):
    """A lesson-log entry."""

    id: str = Field(..., min_length=1)
    text: str
    day: date = Field(..., alias="date")


class MoodEntry(LifeModel):
    """
    Mood for one day.

    Keyed by day, not by id: a document holds at most one entry per day.
    """

    day: date = Field(..., alias="date")
    mood: Mood


# =============================================================================
# MONEY
# =============================================================================

class Expense(LifeModel):
    """Money going out."""

    id: str = Field(..., min_length=1)
    amount: Decimal
    description: str
    occurred_at: Timestamp = Field(..., alias="date")


class Income(LifeModel):
    """Money coming in."""

    id: str = Field(..., min_length=1)
    amount: Decimal
    description: str
    occurred_at: Timestamp = Field(..., alias="date")


class Loan(LifeModel):
    """
    Money lent to or borrowed from a person.

    `is_paid` is a terminal flag, not a delete: settled loans stay in the
    collection until the user trashes them.
    """

    id: str = Field(..., min_length=1)
    person: str
    amount: Decimal
    loan_type: LoanType = Field(..., alias="type")
    is_paid: bool = False
    created_at: Timestamp
    due_date: Optional[Timestamp] = None
    note: Optional[str] = None


class Transaction(LifeModel):
    """
    An income or expense merged into one list for display.

    Never stored - the two source collections stay separate.
    """

    kind: TransactionKind
    id: str
    amount: Decimal
    description: str
    occurred_at: Timestamp = Field(..., alias="date")


# =============================================================================
# NOTIFICATIONS
# =============================================================================

class Notification(LifeModel):
    """An entry in the append-only notification log."""

    id: str = Field(..., min_length=1)
    title: str
    message: str = ""
    sent_at: Timestamp = Field(..., alias="date")
    read: bool = False
    kind: NotificationType = Field(default=NotificationType.INFO, alias="type")


# Any record that can be moved to the trash
Entity = Union[Task, Expense, Income, Loan, Challenge, Mistake]
