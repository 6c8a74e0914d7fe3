"""
Shared building blocks for reducers.

Every reducer takes a LifeDocument and returns a new one. Collections are
rebuilt as new lists; entities that do not change are carried over as-is.

Ids can collide inside a collection (two records created in the same
millisecond), so every helper here acts on exactly one element: the first
one that matches.
"""

from typing import Any, Sequence, TypeVar

from lifebooster.errors import EntityNotFoundError
from lifebooster.models.entities import LifeModel


M = TypeVar("M", bound=LifeModel)


def prepend(items: Sequence[M], entity: M) -> list[M]:
    """New list with `entity` first - the newest record sorts first."""
    return [entity, *items]


def index_by_id(items: Sequence[M], entity_id: str, collection: str) -> int:
    """
    Position of the first entry with `entity_id`.

    Raises:
        EntityNotFoundError: If no entry has that id
    """
    for index, item in enumerate(items):
        if item.id == entity_id:
            return index
    raise EntityNotFoundError(collection, entity_id)


def find_by_id(items: Sequence[M], entity_id: str, collection: str) -> M:
    return items[index_by_id(items, entity_id, collection)]


def replace_by_id(
    items: Sequence[M],
    entity_id: str,
    collection: str,
    **changes: Any,
) -> list[M]:
    """
    New list where the first entry with `entity_id` is a shallow-merged copy.

    Raises:
        EntityNotFoundError: If no entry has that id
    """
    index = index_by_id(items, entity_id, collection)
    result = list(items)
    result[index] = items[index].model_copy(update=changes)
    return result


def without_index(items: Sequence[M], index: int) -> list[M]:
    """New list with the element at `index` left out."""
    return [*items[:index], *items[index + 1:]]
