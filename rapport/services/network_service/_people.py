"""Person management functions for NetworkService."""

from __future__ import annotations

import logging
import random
import uuid
from typing import TYPE_CHECKING

from rapport.memory.entities import Person
from rapport.memory.ledger import RelationshipLedger

from ._lookups import not_found

if TYPE_CHECKING:
    from rapport.services.network_service import NetworkService

logger = logging.getLogger(__name__)


def generate_position(svc: NetworkService) -> tuple[float, float]:
    """Pick a random spot inside the configured layout box."""
    settings = svc.settings
    x = settings.layout_origin_x + random.random() * settings.layout_width
    y = settings.layout_origin_y + random.random() * settings.layout_height
    return x, y


def add_person(
    svc: NetworkService,
    ledger: RelationshipLedger,
    name: str,
    avatar: str | None = None,
) -> Person:
    """Create a person with a generated id and position.

    Args:
        svc: NetworkService instance.
        ledger: RelationshipLedger instance.
        name: Display name.
        avatar: Optional image reference.

    Returns:
        The new person.
    """
    x, y = generate_position(svc)
    person = Person(id=str(uuid.uuid4()), name=name, avatar=avatar, x=x, y=y)
    ledger.add_person(person)
    logger.info(f"Added person: {name} ({person.id})")
    return person


def delete_person(svc: NetworkService, ledger: RelationshipLedger, person_id: str) -> bool:
    """Delete a person and cascade to their relationships.

    Returns:
        True if deleted, False if not found.

    Raises:
        EntityNotFoundError: If strict lookups are enabled and the person is unknown.
    """
    cascaded = len(ledger.relationships_for_person(person_id))
    logger.info(f"Deleting person {person_id}")
    if not ledger.delete_person(person_id):
        not_found(svc, "person", person_id)
        return False
    logger.debug(f"Person {person_id} deleted along with {cascaded} relationship(s)")
    return True


def move_person(
    svc: NetworkService, ledger: RelationshipLedger, person_id: str, x: float, y: float
) -> bool:
    """Store a new layout position for a person (after a drag in the graph view).

    Returns:
        True if moved, False if not found.

    Raises:
        EntityNotFoundError: If strict lookups are enabled and the person is unknown.
    """
    if not ledger.update_person_position(person_id, x, y):
        not_found(svc, "person", person_id)
        return False
    return True


def rename_person(
    svc: NetworkService,
    ledger: RelationshipLedger,
    person_id: str,
    name: str | None = None,
    avatar: str | None = None,
) -> bool:
    """Change a person's name and/or avatar.

    Returns:
        True if updated, False if not found.

    Raises:
        EntityNotFoundError: If strict lookups are enabled and the person is unknown.
    """
    updates: dict[str, str] = {}
    if name is not None:
        updates["name"] = name
    if avatar is not None:
        updates["avatar"] = avatar
    if not updates:
        logger.debug(f"rename_person called for {person_id} with nothing to change")
        return ledger.get_person(person_id) is not None

    if not ledger.update_person(person_id, **updates):
        not_found(svc, "person", person_id)
        return False
    logger.info(f"Updated person {person_id}: {sorted(updates)}")
    return True
