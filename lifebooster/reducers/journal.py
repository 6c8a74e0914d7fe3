"""
Reducers for the personal journal: long-term goals (challenges),
lessons learned (mistakes) and daily mood.
"""

from datetime import date, datetime
from typing import Optional, Union

from lifebooster.models.document import LifeDocument
from lifebooster.models.entities import (
    Challenge,
    Mistake,
    Mood,
    MoodEntry,
    new_entity_id,
    utc_now,
)
from lifebooster.reducers.common import find_by_id, prepend, replace_by_id
from lifebooster.validation import parse_choice, parse_day, require_text


def add_challenge(
    document: LifeDocument,
    text: str,
    day: Optional[Union[str, date]] = None,
    now: Optional[datetime] = None,
) -> LifeDocument:
    """Add a long-term goal, filed under `day` (default: the local date of `now`)."""
    text = require_text(text, "text")
    now = now or utc_now()
    day = parse_day(day) if day is not None else now.astimezone().date()
    challenge = Challenge(id=new_entity_id(now), text=text, day=day)
    return document.model_copy(
        update={"challenges": prepend(document.challenges, challenge)}
    )


def toggle_challenge(document: LifeDocument, challenge_id: str) -> LifeDocument:
    challenge = find_by_id(document.challenges, challenge_id, "challenges")
    challenges = replace_by_id(
        document.challenges,
        challenge_id,
        "challenges",
        completed=not challenge.completed,
    )
    return document.model_copy(update={"challenges": challenges})


def add_mistake(
    document: LifeDocument,
    text: str,
    day: Optional[Union[str, date]] = None,
    now: Optional[datetime] = None,
) -> LifeDocument:
    """Log a lesson learned, filed under `day` (default: the local date of `now`)."""
    text = require_text(text, "text", max_length=1000)
    now = now or utc_now()
    day = parse_day(day) if day is not None else now.astimezone().date()
    mistake = Mistake(id=new_entity_id(now), text=text, day=day)
    return document.model_copy(update={"mistakes": prepend(document.mistakes, mistake)})


def set_mood(
    document: LifeDocument,
    day: Union[str, date],
    mood: Union[str, Mood],
) -> LifeDocument:
    """
    Record the mood for a day.

    At most one entry exists per day: an existing entry is replaced in
    place, otherwise a new one is appended.
    """
    day = parse_day(day)
    entry = MoodEntry(day=day, mood=parse_choice(mood, Mood, "mood"))

    moods = list(document.moods)
    for index, existing in enumerate(moods):
        if existing.day == day:
            moods[index] = entry
            break
    else:
        moods.append(entry)
    return document.model_copy(update={"moods": moods})
