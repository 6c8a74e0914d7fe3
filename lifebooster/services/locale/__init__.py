"""Locale-derived defaults."""

from lifebooster.services.locale.currency import (
    currency_for_locale,
    currency_for_timezone,
    detect_default_currency,
    locale_region,
)

__all__ = [
    "currency_for_locale",
    "currency_for_timezone",
    "detect_default_currency",
    "locale_region",
]
