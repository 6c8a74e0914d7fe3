"""
Derived Views

DESIGN DECISION: Every figure shown to the user is recomputed from the full
collections on each call. Nothing is cached, so there is nothing to
invalidate - the document is the only source of truth.

GUARANTEES:
- Pure functions of the document (plus an explicit clock where needed)
- Empty input gives a defined answer (0, NONE, None), never an exception
"""

import calendar
from datetime import date, datetime, timedelta, tzinfo
from decimal import Decimal
from typing import Iterable, Optional

from lifebooster.models.document import LifeDocument
from lifebooster.models.entities import (
    PRIORITY_ORDER,
    Challenge,
    DayHealth,
    Loan,
    LoanType,
    Mistake,
    Mood,
    Notification,
    Task,
    Transaction,
    TransactionKind,
    utc_now,
)


def _total(amounts: Iterable[Decimal]) -> Decimal:
    return sum(amounts, Decimal("0"))


# =============================================================================
# MONEY
# =============================================================================

def total_income(document: LifeDocument) -> Decimal:
    return _total(income.amount for income in document.incomes)


def total_expense(document: LifeDocument) -> Decimal:
    return _total(expense.amount for expense in document.expenses)


def balance(document: LifeDocument) -> Decimal:
    """All income minus all expenses, over the whole history."""
    return total_income(document) - total_expense(document)


def cash_flow_split(document: LifeDocument) -> tuple[float, float]:
    """
    Share of total money volume that was income vs expense, in percent.

    Returns (0.0, 0.0) when nothing has been recorded.
    """
    income = total_income(document)
    expense = total_expense(document)
    volume = income + expense
    if volume == 0:
        return 0.0, 0.0
    return float(income / volume * 100), float(expense / volume * 100)


def transactions(document: LifeDocument) -> list[Transaction]:
    """Incomes and expenses merged into one list, newest first."""
    merged = [
        Transaction(
            kind=TransactionKind.EXPENSE,
            id=e.id,
            amount=e.amount,
            description=e.description,
            occurred_at=e.occurred_at,
        )
        for e in document.expenses
    ] + [
        Transaction(
            kind=TransactionKind.INCOME,
            id=i.id,
            amount=i.amount,
            description=i.description,
            occurred_at=i.occurred_at,
        )
        for i in document.incomes
    ]
    return sorted(merged, key=lambda tx: tx.occurred_at, reverse=True)


def spent_on_day(
    document: LifeDocument,
    day: date,
    tz: Optional[tzinfo] = None,
) -> Decimal:
    """
    Total expenses whose timestamp falls on `day`.

    Timestamps are converted to `tz` (default: the local timezone) before
    their calendar date is compared.
    """
    return _total(
        e.amount for e in document.expenses if e.occurred_at.astimezone(tz).date() == day
    )


# =============================================================================
# LOANS
# =============================================================================

def open_loans(document: LifeDocument) -> list[Loan]:
    return [loan for loan in document.loans if not loan.is_paid]


def settled_loans(document: LifeDocument) -> list[Loan]:
    return [loan for loan in document.loans if loan.is_paid]


def outstanding_loan_total(document: LifeDocument, loan_type: LoanType) -> Decimal:
    """Sum of unpaid loans of one direction. Settled loans are excluded."""
    return _total(loan.amount for loan in open_loans(document) if loan.loan_type == loan_type)


def loan_progress(loan: Loan, now: Optional[datetime] = None) -> Optional[float]:
    """
    How far through its term a loan is, as a percentage clamped to 0-100.

    Returns None for loans without a due date.
    """
    if loan.due_date is None:
        return None
    now = now or utc_now()
    term = (loan.due_date - loan.created_at).total_seconds()
    if term <= 0:
        return 0.0
    elapsed = (now - loan.created_at).total_seconds()
    return min(100.0, max(0.0, elapsed / term * 100))


def is_overdue(loan: Loan, now: Optional[datetime] = None) -> bool:
    """True once an unpaid loan is past its due date."""
    if loan.is_paid or loan.due_date is None:
        return False
    return (now or utc_now()) > loan.due_date


# =============================================================================
# TASKS & PRODUCTIVITY
# =============================================================================

def tasks_for_day(document: LifeDocument, day: date) -> list[Task]:
    """
    Tasks filed under `day`, in display order.

    Open tasks come before completed ones; within each group tasks are
    ordered urgent -> low, keeping insertion order for ties.
    """
    tasks = [task for task in document.tasks if task.day == day]
    return sorted(tasks, key=lambda t: (t.completed, PRIORITY_ORDER[t.priority]))


def completion_ratio(document: LifeDocument, day: date) -> float:
    """Completed / total tasks for the day; 0.0 when there are none."""
    tasks = [task for task in document.tasks if task.day == day]
    if not tasks:
        return 0.0
    return sum(1 for task in tasks if task.completed) / len(tasks)


def day_health(document: LifeDocument, day: date) -> DayHealth:
    """Classify a day for the calendar view."""
    if not any(task.day == day for task in document.tasks):
        return DayHealth.NONE
    ratio = completion_ratio(document, day)
    if ratio == 1:
        return DayHealth.HIGH
    if ratio >= 0.5:
        return DayHealth.MEDIUM
    return DayHealth.LOW


def month_health(document: LifeDocument, year: int, month: int) -> dict[date, DayHealth]:
    """day_health for every day of a calendar month."""
    days_in_month = calendar.monthrange(year, month)[1]
    return {
        day: day_health(document, day)
        for day in (date(year, month, n) for n in range(1, days_in_month + 1))
    }


def current_streak(document: LifeDocument, today: Optional[date] = None) -> int:
    """
    Number of consecutive fully completed days ending today.

    Walks backward from today. A day counts only if it has at least one
    task and every task is done; the first day that fails ends the streak.
    A day with no tasks breaks the streak, today included.
    """
    by_day: dict[date, list[bool]] = {}
    for task in document.tasks:
        by_day.setdefault(task.day, []).append(task.completed)

    day = today or date.today()
    streak = 0
    while by_day.get(day) and all(by_day[day]):
        streak += 1
        day -= timedelta(days=1)
    return streak


# =============================================================================
# JOURNAL
# =============================================================================

def challenges_for_day(document: LifeDocument, day: date) -> list[Challenge]:
    return [c for c in document.challenges if c.day == day]


def mistakes_for_day(document: LifeDocument, day: date) -> list[Mistake]:
    return [m for m in document.mistakes if m.day == day]


def mood_for_day(document: LifeDocument, day: date) -> Optional[Mood]:
    for entry in document.moods:
        if entry.day == day:
            return entry.mood
    return None


# =============================================================================
# NOTIFICATIONS
# =============================================================================

def unread_notifications(document: LifeDocument) -> list[Notification]:
    return [n for n in document.notifications if not n.read]


def has_unread_notifications(document: LifeDocument) -> bool:
    return any(not n.read for n in document.notifications)


def notifications_newest_first(document: LifeDocument) -> list[Notification]:
    return list(reversed(document.notifications))
