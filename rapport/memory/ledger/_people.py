"""Person CRUD operations for RelationshipLedger."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rapport.memory.entities import Person

from . import _graph

if TYPE_CHECKING:
    from . import RelationshipLedger

logger = logging.getLogger(__name__)

# Fields a caller may change on an existing person
PERSON_UPDATE_FIELDS = frozenset({"name", "avatar", "x", "y"})


def add_person(ledger: RelationshipLedger, person: Person) -> None:
    """Insert a person.

    No duplicate-id check is made: a reused id overwrites the stored person
    in place and keeps its original position in the insertion order.

    Args:
        ledger: RelationshipLedger instance.
        person: Fully formed person, id supplied by the caller.
    """
    with ledger._lock:
        if person.id in ledger._people:
            logger.warning(f"Person id {person.id} already present, overwriting")
        ledger._people[person.id] = person
        _graph.invalidate_graph(ledger)
    logger.debug(f"Added person: {person.name} ({person.id})")


def get_person(ledger: RelationshipLedger, person_id: str) -> Person | None:
    """Get a person by id, or None."""
    with ledger._lock:
        return ledger._people.get(person_id)


def update_person(ledger: RelationshipLedger, person_id: str, **updates: Any) -> bool:
    """Update fields of an existing person.

    Args:
        ledger: RelationshipLedger instance.
        person_id: Person to update.
        **updates: Any of name, avatar, x, y.

    Returns:
        True if updated, False if the person does not exist.

    Raises:
        ValueError: If an unknown field is passed.
    """
    invalid = set(updates) - PERSON_UPDATE_FIELDS
    if invalid:
        raise ValueError(f"Invalid person fields: {sorted(invalid)}")

    with ledger._lock:
        person = ledger._people.get(person_id)
        if person is None:
            return False
        ledger._people[person_id] = person.model_copy(update=updates)
        _graph.invalidate_graph(ledger)
    logger.debug(f"Updated person {person_id}: {sorted(updates)}")
    return True


def update_person_position(ledger: RelationshipLedger, person_id: str, x: float, y: float) -> bool:
    """Move a person on the layout canvas.

    Returns:
        True if moved, False if the person does not exist.
    """
    return update_person(ledger, person_id, x=x, y=y)


def delete_person(ledger: RelationshipLedger, person_id: str) -> bool:
    """Delete a person and cascade to every relationship that references them.

    Network events are left alone: their participant lists and impacts may
    keep naming the deleted ids.

    Args:
        ledger: RelationshipLedger instance.
        person_id: Person to delete.

    Returns:
        True if deleted, False if not found.
    """
    with ledger._lock:
        if ledger._people.pop(person_id, None) is None:
            return False

        orphaned = [rel_id for rel_id, rel in ledger._relationships.items() if rel.involves(person_id)]
        for rel_id in orphaned:
            del ledger._relationships[rel_id]
        _graph.invalidate_graph(ledger)

    logger.debug(f"Deleted person {person_id} and {len(orphaned)} relationship(s)")
    return True


def list_people(ledger: RelationshipLedger) -> list[Person]:
    """List all people in insertion order."""
    with ledger._lock:
        return list(ledger._people.values())
