"""Network event storage and impact application for RelationshipLedger."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rapport.memory.entities import NetworkEvent, Relationship

from ._relationships import apply_health_delta

if TYPE_CHECKING:
    from . import RelationshipLedger

logger = logging.getLogger(__name__)


def add_network_event(ledger: RelationshipLedger, event: NetworkEvent) -> list[Relationship]:
    """Store a network event and apply each of its impacts once.

    The whole pass runs under the ledger lock, so readers see either none or
    all of the impacts. Impacts change health_score only; nothing is
    appended to the relationships' own event lists. Impacts naming a
    relationship that no longer exists are skipped.

    Args:
        ledger: RelationshipLedger instance.
        event: Network event with its impacts already computed.

    Returns:
        The relationships that were updated, in impact order.
    """
    updated: list[Relationship] = []
    with ledger._lock:
        ledger._network_events[event.id] = event
        for impact in event.impacts:
            relationship = apply_health_delta(ledger, impact.relationship_id, impact.impact)
            if relationship is None:
                logger.debug(
                    f"Network event {event.id}: relationship {impact.relationship_id} "
                    f"not found, impact skipped"
                )
                continue
            updated.append(relationship)

    logger.debug(
        f"Added network event {event.id} ({event.category}): "
        f"{len(event.participants)} participant(s), {len(updated)}/{len(event.impacts)} "
        f"impact(s) applied"
    )
    return updated


def get_network_event(ledger: RelationshipLedger, event_id: str) -> NetworkEvent | None:
    """Get a network event by id, or None."""
    with ledger._lock:
        return ledger._network_events.get(event_id)


def delete_network_event(ledger: RelationshipLedger, event_id: str) -> bool:
    """Delete a network event record.

    Health changes it applied stay in place; there is no rollback.

    Returns:
        True if deleted, False if not found.
    """
    with ledger._lock:
        if ledger._network_events.pop(event_id, None) is None:
            return False
    logger.debug(f"Deleted network event {event_id} (impacts not reversed)")
    return True


def list_network_events(ledger: RelationshipLedger) -> list[NetworkEvent]:
    """List all network events in insertion order."""
    with ledger._lock:
        return list(ledger._network_events.values())
