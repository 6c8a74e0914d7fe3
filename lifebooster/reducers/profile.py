"""
Profile reducers: onboarding, identity and preferences.

None of these touch the entity collections.
"""

from datetime import datetime
from typing import Optional, Union

from lifebooster.errors import InvalidInputError
from lifebooster.models.document import SUPPORTED_CURRENCIES, Gender, LifeDocument
from lifebooster.models.entities import utc_now
from lifebooster.validation import parse_choice, require_text


NAME_MAX_LENGTH = 100


def complete_onboarding(
    document: LifeDocument,
    name: str,
    now: Optional[datetime] = None,
) -> LifeDocument:
    """Finish first-run setup: store the user's name and start the clock."""
    return document.model_copy(
        update={
            "has_onboarded": True,
            "join_date": now or utc_now(),
            "name": require_text(name, "name", max_length=NAME_MAX_LENGTH),
        }
    )


def log_out(document: LifeDocument) -> LifeDocument:
    """Send the user back to onboarding. All data is kept."""
    return document.model_copy(update={"has_onboarded": False})


def rename(document: LifeDocument, name: str) -> LifeDocument:
    return document.model_copy(
        update={"name": require_text(name, "name", max_length=NAME_MAX_LENGTH)}
    )


def set_currency(document: LifeDocument, currency: str) -> LifeDocument:
    code = (currency or "").strip().upper()
    if code not in SUPPORTED_CURRENCIES:
        raise InvalidInputError(
            "currency",
            f"{currency!r} is not supported; choose one of {', '.join(SUPPORTED_CURRENCIES)}",
        )
    return document.model_copy(update={"currency": code})


def set_gender(document: LifeDocument, gender: Union[str, Gender]) -> LifeDocument:
    return document.model_copy(update={"gender": parse_choice(gender, Gender, "gender")})


def _image_value(image: Optional[str], field: str) -> Optional[str]:
    if image is None:
        return None
    if not image.startswith("data:image/"):
        raise InvalidInputError(field, "must be a data:image/... URL")
    return image


def set_profile_image(document: LifeDocument, image: Optional[str]) -> LifeDocument:
    """Store a profile picture (data URL). None removes it."""
    return document.model_copy(
        update={"profile_image": _image_value(image, "profileImage")}
    )


def set_cover_image(document: LifeDocument, image: Optional[str]) -> LifeDocument:
    """Store a cover picture (data URL). None removes it."""
    return document.model_copy(update={"cover_image": _image_value(image, "coverImage")})


def touch_last_active(document: LifeDocument, now: Optional[datetime] = None) -> LifeDocument:
    return document.model_copy(update={"last_active_date": now or utc_now()})
