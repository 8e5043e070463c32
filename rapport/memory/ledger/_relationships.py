"""Relationship CRUD and event recording for RelationshipLedger."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rapport.memory.entities import Relationship, RelationshipEvent
from rapport.utils.constants import clamp_health

from . import _graph

if TYPE_CHECKING:
    from . import RelationshipLedger

logger = logging.getLogger(__name__)


def add_relationship(ledger: RelationshipLedger, relationship: Relationship) -> None:
    """Insert a relationship exactly as given.

    Neither the existence of both people nor the uniqueness of the pair is
    checked here. A second relationship for an already related pair is
    stored, but relationship_for_pair() keeps returning the first one.

    Args:
        ledger: RelationshipLedger instance.
        relationship: Fully formed relationship, directional overlay included.
    """
    with ledger._lock:
        ledger._relationships[relationship.id] = relationship
        _graph.invalidate_graph(ledger)
    logger.debug(
        f"Added relationship: {relationship.person1_id} --{relationship.type}--> "
        f"{relationship.person2_id} (health={relationship.health_score})"
    )


def get_relationship(ledger: RelationshipLedger, relationship_id: str) -> Relationship | None:
    """Get a relationship by id, or None."""
    with ledger._lock:
        return ledger._relationships.get(relationship_id)


def delete_relationship(ledger: RelationshipLedger, relationship_id: str) -> bool:
    """Delete a relationship together with its own event history.

    Returns:
        True if deleted, False if not found.
    """
    with ledger._lock:
        if ledger._relationships.pop(relationship_id, None) is None:
            return False
        _graph.invalidate_graph(ledger)
    logger.debug(f"Deleted relationship {relationship_id}")
    return True


def apply_health_delta(
    ledger: RelationshipLedger, relationship_id: str, delta: int
) -> Relationship | None:
    """Add a delta to a relationship's health score, clamped to [-100, 100].

    Callers must hold ledger._lock when this is part of a larger update.

    Args:
        ledger: RelationshipLedger instance.
        relationship_id: Relationship to adjust.
        delta: Signed change requested.

    Returns:
        The updated relationship, or None if it does not exist.
    """
    with ledger._lock:
        relationship = ledger._relationships.get(relationship_id)
        if relationship is None:
            return None
        updated = relationship.model_copy(
            update={"health_score": clamp_health(relationship.health_score + delta)}
        )
        ledger._relationships[relationship_id] = updated
        _graph.invalidate_graph(ledger)
    return updated


def record_event(
    ledger: RelationshipLedger, relationship_id: str, event: RelationshipEvent
) -> Relationship | None:
    """Record an event against a relationship.

    Health becomes clamp(health + event.impact, -100, 100). The event is
    appended with its raw impact, so at the bounds the stored impacts no
    longer add up to the health score. A non-empty changes_relationship_to
    replaces the relationship type outright.

    Args:
        ledger: RelationshipLedger instance.
        relationship_id: Relationship the event happened in.
        event: The event to record.

    Returns:
        The updated relationship, or None if the relationship does not exist
        (the event is dropped).
    """
    with ledger._lock:
        relationship = ledger._relationships.get(relationship_id)
        if relationship is None:
            logger.debug(f"record_event: relationship {relationship_id} not found, dropping event")
            return None

        new_health = clamp_health(relationship.health_score + event.impact)
        new_type = event.changes_relationship_to or relationship.type
        updated = relationship.model_copy(
            update={
                "health_score": new_health,
                "events": [*relationship.events, event],
                "type": new_type,
            }
        )
        ledger._relationships[relationship_id] = updated
        _graph.invalidate_graph(ledger)

    logger.debug(
        f"Recorded event {event.id} ({event.category}, {event.impact:+d}) on {relationship_id}: "
        f"health {relationship.health_score} -> {new_health}"
        + (f", type {relationship.type} -> {new_type}" if new_type != relationship.type else "")
    )
    return updated


def list_relationships(ledger: RelationshipLedger) -> list[Relationship]:
    """List all relationships in insertion order."""
    with ledger._lock:
        return list(ledger._relationships.values())
