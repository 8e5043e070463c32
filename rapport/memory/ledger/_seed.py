"""Demonstration network loaded into an empty ledger on startup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rapport.memory.entities import Person, Relationship, RelationshipEvent

if TYPE_CHECKING:
    from . import RelationshipLedger

logger = logging.getLogger(__name__)


def _sample_people() -> list[Person]:
    return [
        Person(id="1", name="Alex", x=300, y=200),
        Person(id="2", name="Jordan", x=500, y=150),
        Person(id="3", name="Sam", x=400, y=350),
        Person(id="4", name="Casey", x=200, y=300),
    ]


def _sample_relationships() -> list[Relationship]:
    # Health scores are the stored values, not a replay of the events
    return [
        Relationship(
            id="r1",
            person1_id="1",
            person2_id="2",
            type="Marriage",
            health_score=65,
            events=[
                RelationshipEvent(
                    id="e1",
                    type="positive",
                    category="Trip Together",
                    description="Anniversary trip to Paris",
                    impact=18,
                    date="2025-06-15",
                ),
                RelationshipEvent(
                    id="e2",
                    type="negative",
                    category="Argument",
                    description="Disagreement about finances",
                    impact=-8,
                    date="2025-08-20",
                ),
                RelationshipEvent(
                    id="e3",
                    type="positive",
                    category="Support",
                    description="Helped during work crisis",
                    impact=12,
                    date="2025-10-05",
                ),
            ],
        ),
        Relationship(
            id="r2",
            person1_id="1",
            person2_id="3",
            type="Best Friend",
            health_score=80,
            events=[
                RelationshipEvent(
                    id="e4",
                    type="positive",
                    category="Quality Time",
                    description="Weekly game nights",
                    impact=8,
                    date="2025-09-01",
                ),
                RelationshipEvent(
                    id="e5",
                    type="positive",
                    category="Gift",
                    description="Thoughtful birthday present",
                    impact=10,
                    date="2025-11-12",
                ),
            ],
        ),
        Relationship(
            id="r3",
            person1_id="2",
            person2_id="4",
            type="Colleague",
            health_score=45,
            events=[
                RelationshipEvent(
                    id="e6",
                    type="negative",
                    category="Lie",
                    description="Took credit for shared work",
                    impact=-12,
                    date="2025-07-22",
                ),
                RelationshipEvent(
                    id="e7",
                    type="positive",
                    category="Apology",
                    description="Sincere apology and correction",
                    impact=15,
                    date="2025-07-30",
                ),
            ],
        ),
        Relationship(
            id="r4",
            person1_id="3",
            person2_id="4",
            type="Family",
            health_score=30,
            events=[
                RelationshipEvent(
                    id="e8",
                    type="negative",
                    category="Fight",
                    description="Heated argument at family dinner",
                    impact=-15,
                    date="2025-12-25",
                ),
                RelationshipEvent(
                    id="e9",
                    type="negative",
                    category="Neglect",
                    description="Forgot important milestone",
                    impact=-5,
                    date="2025-11-15",
                ),
            ],
        ),
    ]


def seed_sample_data(ledger: RelationshipLedger) -> bool:
    """Load the demonstration network unless the ledger already has people.

    Args:
        ledger: RelationshipLedger instance.

    Returns:
        True if sample data was loaded, False if the ledger was not empty.
    """
    with ledger._lock:
        if not ledger.is_empty():
            logger.debug("seed_sample_data: ledger already populated, skipping")
            return False

        for person in _sample_people():
            ledger.add_person(person)
        for relationship in _sample_relationships():
            ledger.add_relationship(relationship)

    logger.info(
        f"Seeded sample network: {ledger.count_people()} people, "
        f"{ledger.count_relationships()} relationships"
    )
    return True
