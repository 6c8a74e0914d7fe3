"""Input validation package."""

from lifebooster.validation.inputs import (
    optional_text,
    parse_choice,
    parse_amount,
    parse_day,
    parse_timestamp,
    require_text,
)

__all__ = [
    "optional_text",
    "parse_choice",
    "parse_amount",
    "parse_day",
    "parse_timestamp",
    "require_text",
]
