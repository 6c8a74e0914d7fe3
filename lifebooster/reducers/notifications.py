"""Notification log reducers. The log is append-only; only the read flag changes."""

from datetime import datetime
from typing import Optional, Union

from lifebooster.models.document import LifeDocument
from lifebooster.models.entities import (
    Notification,
    NotificationType,
    new_entity_id,
    utc_now,
)
from lifebooster.reducers.common import replace_by_id
from lifebooster.validation import optional_text, parse_choice, require_text


def push_notification(
    document: LifeDocument,
    title: str,
    message: str = "",
    kind: Union[str, NotificationType] = NotificationType.INFO,
    now: Optional[datetime] = None,
) -> LifeDocument:
    now = now or utc_now()
    notification = Notification(
        id=new_entity_id(now),
        title=require_text(title, "title", max_length=200),
        message=optional_text(message, "message") or "",
        sent_at=now,
        kind=parse_choice(kind, NotificationType, "type"),
    )
    return document.model_copy(
        update={"notifications": [*document.notifications, notification]}
    )


def mark_notification_read(document: LifeDocument, notification_id: str) -> LifeDocument:
    notifications = replace_by_id(
        document.notifications, notification_id, "notifications", read=True
    )
    return document.model_copy(update={"notifications": notifications})


def mark_all_notifications_read(document: LifeDocument) -> LifeDocument:
    notifications = [
        n if n.read else n.model_copy(update={"read": True})
        for n in document.notifications
    ]
    return document.model_copy(update={"notifications": notifications})
