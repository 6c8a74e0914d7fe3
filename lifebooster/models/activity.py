"""
Activity Models for LifeBooster

Every state-container action is recorded as a structured event.
This provides:
1. A trace of what changed the document and when
2. Debugging information when input is refused or storage misbehaves
3. A record of destructive actions (purge, factory reset)

DESIGN DECISION: Activity events go to the local structured log only.
They are never written into the life document itself.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from lifebooster.models.entities import utc_now


class ActivityEventType(str, Enum):
    """Types of events the store records."""
    # Document lifecycle
    DOCUMENT_CREATED = "document_created"
    DOCUMENT_LOADED = "document_loaded"
    DOCUMENT_LOAD_FAILED = "document_load_failed"
    DOCUMENT_SAVE_FAILED = "document_save_failed"
    DOCUMENT_BACKED_UP = "document_backed_up"
    FACTORY_RESET = "factory_reset"

    # Reducer dispatch
    ACTION_APPLIED = "action_applied"
    ACTION_REJECTED = "action_rejected"


class ActivitySeverity(str, Enum):
    """Severity level for activity events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ActivityEvent(BaseModel):
    """A single activity event."""

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=utc_now,
        description="When the event occurred (UTC)"
    )
    event_type: ActivityEventType
    severity: ActivitySeverity = ActivitySeverity.INFO

    # Which reducer, if any, this is about
    action: Optional[str] = Field(
        default=None,
        description="Name of the reducer that was dispatched"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(default_factory=dict)
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "action": self.action,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class ActivityEventBuilder:
    """
    Helper class to build activity events with common patterns.

    Usage:
        event = ActivityEventBuilder.action_applied("add_task")
        event = ActivityEventBuilder.save_failed("disk full")
    """

    @staticmethod
    def document_created(user_id: str, currency: str) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.DOCUMENT_CREATED,
            description="Started a fresh document",
            details={
                "user_id": user_id,
                "currency": currency,
            },
        )

    @staticmethod
    def document_loaded(user_id: str, schema_version: int) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.DOCUMENT_LOADED,
            description="Loaded stored document",
            details={
                "user_id": user_id,
                "schema_version": schema_version,
            },
        )

    @staticmethod
    def load_failed(key: str, reason: str) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.DOCUMENT_LOAD_FAILED,
            severity=ActivitySeverity.WARNING,
            description=f"Stored document under '{key}' could not be used",
            error_message=reason,
            details={"key": key},
        )

    @staticmethod
    def save_failed(key: str, reason: str) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.DOCUMENT_SAVE_FAILED,
            severity=ActivitySeverity.ERROR,
            description=f"Document could not be written under '{key}'",
            error_message=reason,
            details={"key": key},
        )

    @staticmethod
    def document_backed_up(key: str, backup_key: str) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.DOCUMENT_BACKED_UP,
            severity=ActivitySeverity.WARNING,
            description=f"Unusable document under '{key}' copied to '{backup_key}'",
            details={
                "key": key,
                "backup_key": backup_key,
            },
        )

    @staticmethod
    def action_applied(action: str) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.ACTION_APPLIED,
            severity=ActivitySeverity.DEBUG,
            action=action,
            description=f"Applied {action}",
        )

    @staticmethod
    def action_rejected(action: str, reason: str) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.ACTION_REJECTED,
            severity=ActivitySeverity.WARNING,
            action=action,
            description=f"Rejected {action}",
            error_message=reason,
        )

    @staticmethod
    def factory_reset(user_id: str) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.FACTORY_RESET,
            severity=ActivitySeverity.WARNING,
            description="All data erased by factory reset",
            details={"previous_user_id": user_id},
        )
