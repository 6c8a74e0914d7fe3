"""
Money reducers: expenses, incomes and loans.

Expenses and incomes are two parallel collections that are never merged
in storage. Loans carry a paid flag that settles them without deleting.
"""

from datetime import date, datetime
from typing import Optional, Union

from lifebooster.models.document import LifeDocument
from lifebooster.models.entities import (
    Expense,
    Income,
    Loan,
    LoanType,
    new_entity_id,
    utc_now,
)
from lifebooster.reducers.common import find_by_id, prepend, replace_by_id
from lifebooster.validation import (
    optional_text,
    parse_amount,
    parse_choice,
    parse_timestamp,
    require_text,
)
from lifebooster.validation.inputs import AmountInput


def add_expense(
    document: LifeDocument,
    amount: AmountInput,
    description: str,
    now: Optional[datetime] = None,
) -> LifeDocument:
    """Record money spent, timestamped `now`."""
    amount = parse_amount(amount)
    description = require_text(description, "description", max_length=200)
    now = now or utc_now()
    expense = Expense(
        id=new_entity_id(now),
        amount=amount,
        description=description,
        occurred_at=now,
    )
    return document.model_copy(update={"expenses": prepend(document.expenses, expense)})


def add_income(
    document: LifeDocument,
    amount: AmountInput,
    description: str,
    now: Optional[datetime] = None,
) -> LifeDocument:
    """Record money received, timestamped `now`."""
    amount = parse_amount(amount)
    description = require_text(description, "description", max_length=200)
    now = now or utc_now()
    income = Income(
        id=new_entity_id(now),
        amount=amount,
        description=description,
        occurred_at=now,
    )
    return document.model_copy(update={"incomes": prepend(document.incomes, income)})


def add_loan(
    document: LifeDocument,
    amount: AmountInput,
    person: str,
    loan_type: Union[str, LoanType],
    due_date: Optional[Union[str, date, datetime]] = None,
    note: Optional[str] = None,
    now: Optional[datetime] = None,
) -> LifeDocument:
    """
    Record a loan to or from `person`.

    A blank `due_date` means the loan has no deadline.
    """
    amount = parse_amount(amount)
    person = require_text(person, "person", max_length=200)
    loan_type = parse_choice(loan_type, LoanType, "type")
    due = parse_timestamp(due_date, "dueDate")
    now = now or utc_now()
    loan = Loan(
        id=new_entity_id(now),
        person=person,
        amount=amount,
        loan_type=loan_type,
        created_at=now,
        due_date=due,
        note=optional_text(note, "note"),
    )
    return document.model_copy(update={"loans": prepend(document.loans, loan)})


def toggle_loan_paid(document: LifeDocument, loan_id: str) -> LifeDocument:
    """Mark a loan settled, or reopen a settled one."""
    loan = find_by_id(document.loans, loan_id, "loans")
    loans = replace_by_id(document.loans, loan_id, "loans", is_paid=not loan.is_paid)
    return document.model_copy(update={"loans": loans})
