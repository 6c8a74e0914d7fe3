"""
Trash Models for LifeBooster

A trashed record keeps its full original shape so it can be restored.

DESIGN DECISION: TrashItem is a tagged union, one class per entity kind,
discriminated on `type`. Loading a document rebuilds each wrapped record as
its concrete model, and restoring dispatches on the tag instead of guessing
from the payload.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field

from lifebooster.models.entities import (
    Challenge,
    Entity,
    Expense,
    Income,
    LifeModel,
    Loan,
    Mistake,
    Task,
    Timestamp,
)


class TrashKind(str, Enum):
    """Kinds of records that can be soft-deleted."""
    TASK = "task"
    EXPENSE = "expense"
    INCOME = "income"
    LOAN = "loan"
    CHALLENGE = "challenge"
    MISTAKE = "mistake"


class _TrashItemBase(LifeModel):
    deleted_at: Timestamp

    @property
    def kind(self) -> TrashKind:
        return TrashKind(self.type)

    @property
    def entity_id(self) -> str:
        return self.data.id


class TaskTrashItem(_TrashItemBase):
    type: Literal["task"] = "task"
    data: Task


class ExpenseTrashItem(_TrashItemBase):
    type: Literal["expense"] = "expense"
    data: Expense


class IncomeTrashItem(_TrashItemBase):
    type: Literal["income"] = "income"
    data: Income


class LoanTrashItem(_TrashItemBase):
    type: Literal["loan"] = "loan"
    data: Loan


class ChallengeTrashItem(_TrashItemBase):
    type: Literal["challenge"] = "challenge"
    data: Challenge


class MistakeTrashItem(_TrashItemBase):
    type: Literal["mistake"] = "mistake"
    data: Mistake


TrashItem = Annotated[
    Union[
        TaskTrashItem,
        ExpenseTrashItem,
        IncomeTrashItem,
        LoanTrashItem,
        ChallengeTrashItem,
        MistakeTrashItem,
    ],
    Field(discriminator="type"),
]


TRASH_ITEM_TYPES: dict[TrashKind, type[_TrashItemBase]] = {
    TrashKind.TASK: TaskTrashItem,
    TrashKind.EXPENSE: ExpenseTrashItem,
    TrashKind.INCOME: IncomeTrashItem,
    TrashKind.LOAN: LoanTrashItem,
    TrashKind.CHALLENGE: ChallengeTrashItem,
    TrashKind.MISTAKE: MistakeTrashItem,
}

# Document attribute each kind lives in while it is not trashed
HOME_COLLECTIONS: dict[TrashKind, str] = {
    TrashKind.TASK: "tasks",
    TrashKind.EXPENSE: "expenses",
    TrashKind.INCOME: "incomes",
    TrashKind.LOAN: "loans",
    TrashKind.CHALLENGE: "challenges",
    TrashKind.MISTAKE: "mistakes",
}


def wrap_for_trash(kind: TrashKind, entity: Entity, deleted_at: datetime) -> TrashItem:
    """Build the trash entry of the right concrete type for `kind`."""
    return TRASH_ITEM_TYPES[kind](data=entity, deleted_at=deleted_at)
