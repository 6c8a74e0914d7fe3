"""Shared fixtures for LifeBooster tests."""

from datetime import datetime, timedelta, timezone

import pytest

from lifebooster.models import LifeDocument, initial_document


NOW = datetime(2024, 5, 10, 9, 30, tzinfo=timezone.utc)


def later(seconds: int) -> datetime:
    """A clock reading `seconds` after NOW, so generated ids never collide."""
    return NOW + timedelta(seconds=seconds)


@pytest.fixture
def document() -> LifeDocument:
    """A fresh, empty document in USD."""
    return initial_document("USD", now=NOW)
