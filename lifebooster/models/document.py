"""
Root Document Model for LifeBooster

The whole of a user's data is one LifeDocument. It is the single unit of
persistence: loaded once at start-up, replaced (never edited) by every
reducer, and written back in full after each change.
"""

import random
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from lifebooster.models.entities import (
    Challenge,
    Expense,
    Income,
    LifeModel,
    Loan,
    Mistake,
    MoodEntry,
    Notification,
    Task,
    Timestamp,
    utc_now,
)
from lifebooster.models.trash import TrashItem


# Bumped whenever the stored layout gains fields that need backfilling.
CURRENT_SCHEMA_VERSION = 1

DEFAULT_NAME = "User"

SUPPORTED_CURRENCIES: dict[str, str] = {
    "MAD": "Moroccan Dirham",
    "AED": "United Arab Emirates Dirham",
    "USD": "United States Dollar",
    "EUR": "Euro",
    "GBP": "British Pound",
    "SAR": "Saudi Riyal",
    "QAR": "Qatari Rial",
    "DZD": "Algerian Dinar",
    "TND": "Tunisian Dinar",
    "EGP": "Egyptian Pound",
    "CAD": "Canadian Dollar",
}


class Gender(str, Enum):
    """Profile gender, used for wording only."""
    MALE = "male"
    FEMALE = "female"


class LifeDocument(LifeModel):
    """
    The single persisted aggregate of all user data.

    Every collection is always present (possibly empty) - older stored
    documents are brought up to this shape by the upgrade step before
    they are validated.
    """

    schema_version: int = Field(default=CURRENT_SCHEMA_VERSION, ge=0)

    # Profile
    has_onboarded: bool = False
    join_date: Timestamp
    user_id: str = Field(..., min_length=1)
    name: str = DEFAULT_NAME
    profile_image: Optional[str] = Field(
        default=None,
        description="Profile picture as a data URL"
    )
    cover_image: Optional[str] = Field(
        default=None,
        description="Profile cover picture as a data URL"
    )
    gender: Gender = Gender.MALE
    currency: str = Field(..., pattern=r"^[A-Z]{3}$")
    last_active_date: Timestamp

    # Collections
    tasks: list[Task] = Field(default_factory=list)
    challenges: list[Challenge] = Field(default_factory=list)
    expenses: list[Expense] = Field(default_factory=list)
    incomes: list[Income] = Field(default_factory=list)
    loans: list[Loan] = Field(default_factory=list)
    mistakes: list[Mistake] = Field(default_factory=list)
    moods: list[MoodEntry] = Field(default_factory=list)
    trash: list[TrashItem] = Field(default_factory=list)
    notifications: list[Notification] = Field(default_factory=list)

    def to_json(self) -> str:
        """Serialize in the stored layout (camelCase, unset optionals omitted)."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


def generate_user_id(prefix: str = "OP-") -> str:
    """Short display id, e.g. 'OP-4821'. Not a security token."""
    return f"{prefix}{random.randint(1000, 9999)}"


def initial_document(
    currency: str,
    now: Optional[datetime] = None,
    user_id_prefix: str = "OP-",
) -> LifeDocument:
    """Fresh document for a first run or after a factory reset."""
    now = now or utc_now()
    return LifeDocument(
        join_date=now,
        last_active_date=now,
        user_id=generate_user_id(user_id_prefix),
        currency=currency,
    )
