"""
Input Validation at the Reducer Boundary

DESIGN DECISION: Raw user input is checked before any entity is built.
If a check fails, InvalidInputError is raised and the reducer produces
nothing - there is no such thing as a half-added record.

IMPORTANT: Validation NEVER silently fixes issues beyond trimming
surrounding whitespace. A value that cannot be read as-is is refused.
"""

from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional, TypeVar, Union

from lifebooster.errors import InvalidInputError


AmountInput = Union[str, int, float, Decimal]
DayInput = Union[str, date]
E = TypeVar("E", bound=Enum)


def require_text(value: Optional[str], field: str, max_length: int = 500) -> str:
    """Return the trimmed text, refusing empty or oversized input."""
    if value is None:
        raise InvalidInputError(field, "is required")
    text = value.strip()
    if not text:
        raise InvalidInputError(field, "must not be empty")
    if len(text) > max_length:
        raise InvalidInputError(field, f"must be at most {max_length} characters")
    return text


def optional_text(value: Optional[str], field: str, max_length: int = 1000) -> Optional[str]:
    """Like require_text, but blank input means 'not given'."""
    if value is None or not value.strip():
        return None
    return require_text(value, field, max_length)


def parse_amount(value: Optional[AmountInput], field: str = "amount") -> Decimal:
    """
    Read a currency amount.

    Accepts numbers or numeric strings. Refuses blanks, non-numeric text,
    NaN/infinity, booleans and negative values.
    """
    if value is None or isinstance(value, bool):
        raise InvalidInputError(field, "is required")

    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise InvalidInputError(field, "is required")

    try:
        # str() first so floats keep their short repr (0.1 -> "0.1")
        amount = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, ValueError):
        raise InvalidInputError(field, f"{value!r} is not a number")

    if not amount.is_finite():
        raise InvalidInputError(field, "must be a finite number")
    if amount < 0:
        raise InvalidInputError(field, "must not be negative")
    return amount


def parse_day(value: Optional[DayInput], field: str = "date") -> date:
    """Read a day bucket from a date or an ISO 'YYYY-MM-DD' string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not value.strip():
        raise InvalidInputError(field, "is required")
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise InvalidInputError(field, f"{value!r} is not a YYYY-MM-DD date")


def parse_timestamp(value: Optional[Union[str, date, datetime]], field: str) -> Optional[datetime]:
    """
    Read an optional timestamp.

    Blank means 'not given'. A bare date is taken as midnight UTC of that
    day, which is how due dates picked from a calendar arrive.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        raise InvalidInputError(field, f"{value!r} is not an ISO date or timestamp")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_choice(value: Union[str, E, None], choices: type[E], field: str) -> E:
    """Read one member of `choices` from a member or its string value."""
    if isinstance(value, choices):
        return value
    try:
        return choices(value)
    except ValueError:
        allowed = ", ".join(member.value for member in choices)
        raise InvalidInputError(field, f"{value!r} is not one of: {allowed}")
