"""
Soft-Delete Reducers

DESIGN DECISION: Nothing leaves the document without passing through the
trash. A record is always in exactly one place - its home collection or
the trash - and each reducer here moves it in a single document
replacement, never in two visible steps.

Trash entries are matched on (kind, id), not id alone. Ids are only unique
within their own collection, so a task and an expense trashed with the
same id stay independently restorable.
"""

from datetime import datetime
from typing import Any, Callable, Optional, Sequence, Union

from lifebooster.errors import EntityNotFoundError
from lifebooster.models.document import LifeDocument
from lifebooster.models.entities import Entity, utc_now
from lifebooster.models.trash import HOME_COLLECTIONS, TrashItem, TrashKind, wrap_for_trash
from lifebooster.reducers.common import index_by_id, without_index
from lifebooster.validation import parse_choice


def _matches(item: TrashItem, kind: TrashKind, entity_id: str) -> bool:
    return item.kind == kind and item.entity_id == entity_id


def _locate(
    items: Sequence[Any],
    exact: Any,
    entity_id: str,
    collection: str,
    predicate: Callable[[Any], bool],
) -> int:
    """
    Position of `exact` itself if present, else of the first entry passing
    `predicate`. Ids can collide, so the exact record wins over an id match.
    """
    for index, item in enumerate(items):
        if item == exact:
            return index
    for index, item in enumerate(items):
        if predicate(item):
            return index
    raise EntityNotFoundError(collection, entity_id)


def move_to_trash(
    document: LifeDocument,
    entity: Union[Entity, str],
    kind: Union[str, TrashKind],
    now: Optional[datetime] = None,
) -> LifeDocument:
    """
    Soft-delete a record.

    Args:
        entity: The record, or just its id
        kind: Which collection it lives in

    Raises:
        EntityNotFoundError: If the record is not in its home collection
    """
    kind = parse_choice(kind, TrashKind, "type")
    collection = HOME_COLLECTIONS[kind]
    home = getattr(document, collection)

    if isinstance(entity, str):
        index = index_by_id(home, entity, collection)
    else:
        index = _locate(
            home, entity, entity.id, collection, lambda item: item.id == entity.id
        )

    # Trash the stored copy, so the entry always has the right concrete shape
    item = wrap_for_trash(kind, home[index], deleted_at=now or utc_now())

    return document.model_copy(
        update={
            "trash": [item, *document.trash],
            collection: without_index(home, index),
        }
    )


def restore_from_trash(document: LifeDocument, trash_item: TrashItem) -> LifeDocument:
    """
    Put a trashed record back at the end of its home collection.

    Restored records are not treated as new, so they are appended rather
    than prepended.
    """
    kind, entity_id = trash_item.kind, trash_item.entity_id
    index = _locate(
        document.trash,
        trash_item,
        entity_id,
        "trash",
        lambda item: _matches(item, kind, entity_id),
    )
    stored = document.trash[index]

    collection = HOME_COLLECTIONS[kind]
    home = getattr(document, collection)
    return document.model_copy(
        update={
            "trash": without_index(document.trash, index),
            collection: [*home, stored.data],
        }
    )


def purge(
    document: LifeDocument,
    entity_id: str,
    kind: Union[str, TrashKind],
) -> LifeDocument:
    """
    Permanently delete a trashed record. Unrecoverable.

    Only the first matching trash entry is removed; no other collection
    is touched.
    """
    kind = parse_choice(kind, TrashKind, "type")
    for index, item in enumerate(document.trash):
        if _matches(item, kind, entity_id):
            return document.model_copy(
                update={"trash": without_index(document.trash, index)}
            )
    raise EntityNotFoundError("trash", entity_id)
