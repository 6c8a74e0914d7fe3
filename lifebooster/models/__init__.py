"""
Data Models Package

This package contains all Pydantic models used in LifeBooster.
Everything stored in the life document must conform to these schemas.
"""

from lifebooster.models.entities import (
    PRIORITY_ORDER,
    Challenge,
    DayHealth,
    Entity,
    Expense,
    Income,
    LifeModel,
    Loan,
    LoanType,
    Mistake,
    Mood,
    MoodEntry,
    Notification,
    NotificationType,
    Priority,
    Task,
    Timestamp,
    Transaction,
    TransactionKind,
    new_entity_id,
    utc_now,
)
from lifebooster.models.trash import (
    HOME_COLLECTIONS,
    TRASH_ITEM_TYPES,
    ChallengeTrashItem,
    ExpenseTrashItem,
    IncomeTrashItem,
    LoanTrashItem,
    MistakeTrashItem,
    TaskTrashItem,
    TrashItem,
    TrashKind,
    wrap_for_trash,
)
from lifebooster.models.document import (
    CURRENT_SCHEMA_VERSION,
    DEFAULT_NAME,
    SUPPORTED_CURRENCIES,
    Gender,
    LifeDocument,
    generate_user_id,
    initial_document,
)
from lifebooster.models.activity import (
    ActivityEvent,
    ActivityEventBuilder,
    ActivityEventType,
    ActivitySeverity,
)

__all__ = [
    # Entity models
    "PRIORITY_ORDER",
    "Challenge",
    "DayHealth",
    "Entity",
    "Expense",
    "Income",
    "LifeModel",
    "Loan",
    "LoanType",
    "Mistake",
    "Mood",
    "MoodEntry",
    "Notification",
    "NotificationType",
    "Priority",
    "Task",
    "Timestamp",
    "Transaction",
    "TransactionKind",
    "new_entity_id",
    "utc_now",
    # Trash models
    "HOME_COLLECTIONS",
    "TRASH_ITEM_TYPES",
    "ChallengeTrashItem",
    "ExpenseTrashItem",
    "IncomeTrashItem",
    "LoanTrashItem",
    "MistakeTrashItem",
    "TaskTrashItem",
    "TrashItem",
    "TrashKind",
    "wrap_for_trash",
    # Document
    "CURRENT_SCHEMA_VERSION",
    "DEFAULT_NAME",
    "SUPPORTED_CURRENCIES",
    "Gender",
    "LifeDocument",
    "generate_user_id",
    "initial_document",
    # Activity models
    "ActivityEvent",
    "ActivityEventBuilder",
    "ActivityEventType",
    "ActivitySeverity",
]
