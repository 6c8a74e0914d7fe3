"""Derived views over the life document."""

from lifebooster.queries.insights import (
    balance,
    cash_flow_split,
    challenges_for_day,
    completion_ratio,
    current_streak,
    day_health,
    has_unread_notifications,
    is_overdue,
    loan_progress,
    mistakes_for_day,
    month_health,
    mood_for_day,
    notifications_newest_first,
    open_loans,
    outstanding_loan_total,
    settled_loans,
    spent_on_day,
    tasks_for_day,
    total_expense,
    total_income,
    transactions,
    unread_notifications,
)

__all__ = [
    "balance",
    "cash_flow_split",
    "challenges_for_day",
    "completion_ratio",
    "current_streak",
    "day_health",
    "has_unread_notifications",
    "is_overdue",
    "loan_progress",
    "mistakes_for_day",
    "month_health",
    "mood_for_day",
    "notifications_newest_first",
    "open_loans",
    "outstanding_loan_total",
    "settled_loans",
    "spent_on_day",
    "tasks_for_day",
    "total_expense",
    "total_income",
    "transactions",
    "unread_notifications",
]
