"""
Default Currency Detection

Best-effort guess of the user's currency from locale and timezone hints.
Only used when a document is first created or is missing its currency.

DESIGN DECISION: Detection never fails. Anything unexpected falls through
to the configured fallback currency; a wrong guess is cheap because the
user can change the currency at any time.
"""

import locale
import os
from typing import Optional

import structlog

from lifebooster.config import get_settings


logger = structlog.get_logger(__name__)


# Locale region -> currency. Checked before the timezone.
REGION_CURRENCIES = {
    "MA": "MAD",  # Morocco
    "AE": "AED",  # UAE
    "US": "USD",
    "GB": "GBP",
    "SA": "SAR",  # Saudi Arabia
    "QA": "QAR",  # Qatar
    "DZ": "DZD",  # Algeria
    "TN": "TND",  # Tunisia
    "EG": "EGP",  # Egypt
    "CA": "CAD",
    "FR": "EUR",
    "DE": "EUR",
    "ES": "EUR",
    "IT": "EUR",
    "NL": "EUR",
}

# Timezone name fragments -> currency, in match order.
TIMEZONE_CURRENCIES = [
    (("Casablanca",), "MAD"),
    (("Dubai",), "AED"),
    (("Paris", "Berlin", "Madrid", "Rome", "Amsterdam"), "EUR"),
    (("London",), "GBP"),
    (("Riyadh",), "SAR"),
    (("Qatar",), "QAR"),
    (("Algiers",), "DZD"),
    (("Tunis",), "TND"),
    (("Cairo",), "EGP"),
    (("Toronto", "Vancouver"), "CAD"),
    (("New_York", "Los_Angeles", "Chicago"), "USD"),
]


def locale_region(locale_name: Optional[str]) -> Optional[str]:
    """
    Pull the region out of a locale name.

    'fr_MA.UTF-8' -> 'MA', 'en-US' -> 'US', 'C' -> None
    """
    if not locale_name:
        return None
    base = locale_name.split(".", 1)[0].split("@", 1)[0]
    parts = base.replace("-", "_").split("_")
    if len(parts) < 2:
        return None
    region = parts[1].upper()
    return region if len(region) == 2 and region.isalpha() else None


def currency_for_locale(locale_name: Optional[str]) -> Optional[str]:
    region = locale_region(locale_name)
    return REGION_CURRENCIES.get(region) if region else None


def currency_for_timezone(timezone_name: Optional[str]) -> Optional[str]:
    if not timezone_name:
        return None
    for fragments, currency in TIMEZONE_CURRENCIES:
        if any(fragment in timezone_name for fragment in fragments):
            return currency
    return None


def _system_locale() -> Optional[str]:
    name = locale.getlocale()[0]
    return name or os.environ.get("LC_ALL") or os.environ.get("LANG")


def detect_default_currency(
    locale_name: Optional[str] = None,
    timezone_name: Optional[str] = None,
) -> str:
    """
    Guess the user's currency code.

    Args:
        locale_name: Locale to inspect. Defaults to the configured override,
                     then the process locale.
        timezone_name: IANA timezone to inspect. Defaults to the configured
                       override, then the TZ environment variable.

    Returns:
        A three-letter currency code; the configured fallback if nothing matched.
    """
    app_settings = get_settings().app
    fallback = app_settings.fallback_currency

    try:
        locale_name = locale_name or app_settings.locale or _system_locale()
        timezone_name = timezone_name or app_settings.timezone or os.environ.get("TZ")

        currency = currency_for_locale(locale_name) or currency_for_timezone(timezone_name)
    except Exception as e:
        logger.warning("currency_detection_failed", error=str(e))
        return fallback

    if currency is None:
        logger.debug(
            "currency_detection_fallback",
            locale=locale_name,
            timezone=timezone_name,
            fallback=fallback,
        )
        return fallback
    return currency
