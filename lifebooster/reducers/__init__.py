"""
Reducers Package

Pure functions of the form (document, payload...) -> document.
None of them mutate the document they are given.
"""

from lifebooster.reducers.finance import (
    add_expense,
    add_income,
    add_loan,
    toggle_loan_paid,
)
from lifebooster.reducers.journal import (
    add_challenge,
    add_mistake,
    set_mood,
    toggle_challenge,
)
from lifebooster.reducers.notifications import (
    mark_all_notifications_read,
    mark_notification_read,
    push_notification,
)
from lifebooster.reducers.profile import (
    complete_onboarding,
    log_out,
    rename,
    set_cover_image,
    set_currency,
    set_gender,
    set_profile_image,
    touch_last_active,
)
from lifebooster.reducers.tasks import add_task, toggle_task
from lifebooster.reducers.trash import move_to_trash, purge, restore_from_trash

__all__ = [
    # Tasks
    "add_task",
    "toggle_task",
    # Journal
    "add_challenge",
    "add_mistake",
    "set_mood",
    "toggle_challenge",
    # Money
    "add_expense",
    "add_income",
    "add_loan",
    "toggle_loan_paid",
    # Notifications
    "mark_all_notifications_read",
    "mark_notification_read",
    "push_notification",
    # Profile
    "complete_onboarding",
    "log_out",
    "rename",
    "set_cover_image",
    "set_currency",
    "set_gender",
    "set_profile_image",
    "touch_last_active",
    # Trash
    "move_to_trash",
    "purge",
    "restore_from_trash",
]
