"""
Stored Document Upgrade

Older stored documents may be missing fields that later versions added.
Before validation, the raw JSON object is passed through a list of
versioned upgrade steps, each taking the document one version forward.

DESIGN DECISION: Upgrades are one-way and idempotent. A document that is
already current is returned untouched; running a step on a document that
already has a field never overwrites it.
"""

from datetime import datetime
from typing import Any, Callable, Optional

from lifebooster.config import get_settings
from lifebooster.models.document import (
    CURRENT_SCHEMA_VERSION,
    DEFAULT_NAME,
    Gender,
    generate_user_id,
)
from lifebooster.models.entities import utc_now
from lifebooster.services.locale import detect_default_currency


RawDocument = dict[str, Any]

COLLECTION_KEYS = (
    "tasks",
    "challenges",
    "expenses",
    "incomes",
    "loans",
    "mistakes",
    "moods",
    "trash",
    "notifications",
)


def _missing(raw: RawDocument, key: str) -> bool:
    return raw.get(key) in (None, "")


def _backfill_fields(
    raw: RawDocument,
    now: datetime,
    detect_currency: Callable[[], str],
) -> RawDocument:
    """Version 0 -> 1: give every absent field a type-correct default."""
    upgraded = dict(raw)

    for key in COLLECTION_KEYS:
        if _missing(upgraded, key):
            upgraded[key] = []

    if _missing(upgraded, "currency"):
        upgraded["currency"] = detect_currency()
    if _missing(upgraded, "userId"):
        upgraded["userId"] = generate_user_id(get_settings().app.user_id_prefix)
    if _missing(upgraded, "gender"):
        upgraded["gender"] = Gender.MALE.value
    if _missing(upgraded, "name"):
        upgraded["name"] = DEFAULT_NAME
    if _missing(upgraded, "joinDate"):
        upgraded["joinDate"] = now.isoformat()
    if _missing(upgraded, "lastActiveDate"):
        upgraded["lastActiveDate"] = now.isoformat()
    if "hasOnboarded" not in upgraded:
        upgraded["hasOnboarded"] = False

    upgraded["schemaVersion"] = 1
    return upgraded


# UPGRADE_STEPS[n] takes a version-n document to version n+1
UPGRADE_STEPS = [
    _backfill_fields,
]


def stored_version(raw: RawDocument) -> int:
    """Schema version of a raw document; documents from before versioning are 0."""
    version = raw.get("schemaVersion", 0)
    return version if isinstance(version, int) and version >= 0 else 0


def upgrade_document(
    raw: RawDocument,
    now: Optional[datetime] = None,
    detect_currency: Callable[[], str] = detect_default_currency,
) -> RawDocument:
    """
    Bring a raw stored document up to CURRENT_SCHEMA_VERSION.

    Args:
        raw: The parsed JSON object as stored
        now: Timestamp used for backfilled dates
        detect_currency: Source of a currency when none is stored

    Returns:
        A new dict at the current version (or `raw` itself if already current)
    """
    version = stored_version(raw)
    if version >= CURRENT_SCHEMA_VERSION:
        return raw

    now = now or utc_now()
    upgraded = raw
    for step in UPGRADE_STEPS[version:]:
        upgraded = step(upgraded, now, detect_currency)
    return upgraded
