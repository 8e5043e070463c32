"""Read-only projections over RelationshipLedger state.

Nothing here is cached: every call scans the current collections.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rapport.memory.entities import NetworkEvent, Person, Relationship

if TYPE_CHECKING:
    from . import RelationshipLedger


def relationships_for_person(ledger: RelationshipLedger, person_id: str) -> list[Relationship]:
    """All relationships a person takes part in, in insertion order."""
    with ledger._lock:
        return [rel for rel in ledger._relationships.values() if rel.involves(person_id)]


def relationship_for_pair(
    ledger: RelationshipLedger, person_a: str, person_b: str
) -> Relationship | None:
    """First relationship joining the unordered pair (a, b), or None."""
    with ledger._lock:
        for rel in ledger._relationships.values():
            if rel.connects(person_a, person_b):
                return rel
    return None


def events_for_person(ledger: RelationshipLedger, person_id: str) -> list[NetworkEvent]:
    """Network events whose participants include the person."""
    with ledger._lock:
        return [event for event in ledger._network_events.values() if person_id in event.participants]


def events_for_relationship(ledger: RelationshipLedger, relationship_id: str) -> list[NetworkEvent]:
    """Network events with at least one impact naming the relationship."""
    with ledger._lock:
        return [
            event
            for event in ledger._network_events.values()
            if event.impact_for(relationship_id) is not None
        ]


def people_without_relationships(ledger: RelationshipLedger) -> list[Person]:
    """People who are not a party to any relationship."""
    with ledger._lock:
        related: set[str] = set()
        for rel in ledger._relationships.values():
            related.add(rel.person1_id)
            related.add(rel.person2_id)
        return [person for person in ledger._people.values() if person.id not in related]
