"""In-memory relationship ledger with NetworkX graph projection."""

import logging
import threading
from typing import Any

from networkx import MultiGraph

from rapport.memory.entities import NetworkEvent, Person, Relationship, RelationshipEvent

from . import _graph, _network_events, _people, _queries, _relationships, _seed

logger = logging.getLogger(__name__)


class RelationshipLedger:
    """Authoritative store for people, relationships and network events.

    One ledger object owns all network state and is passed explicitly to the
    code that reads or mutates it. Every collection is an insertion-ordered
    dict keyed by id. All operations take the same RLock, so a ledger can be
    shared between threads even though the application itself is single
    threaded.

    Missing ids are never an error here: mutations on unknown ids are
    no-ops that return None/False. Stricter checks live in the services.
    """

    def __init__(self) -> None:
        """Create an empty ledger."""
        self._lock = threading.RLock()
        self._people: dict[str, Person] = {}
        self._relationships: dict[str, Relationship] = {}
        self._network_events: dict[str, NetworkEvent] = {}
        self._graph: MultiGraph | None = None
        logger.debug("RelationshipLedger created")

    def __repr__(self) -> str:
        return (
            f"RelationshipLedger(people={len(self._people)}, "
            f"relationships={len(self._relationships)}, "
            f"network_events={len(self._network_events)})"
        )

    # ========== People ==========

    def add_person(self, person: Person) -> None:
        """Insert a person. The caller guarantees the id is unique."""
        _people.add_person(self, person)

    def get_person(self, person_id: str) -> Person | None:
        """Get a person by id."""
        return _people.get_person(self, person_id)

    def update_person(self, person_id: str, **updates: Any) -> bool:
        """Update name, avatar or position of a person."""
        return _people.update_person(self, person_id, **updates)

    def update_person_position(self, person_id: str, x: float, y: float) -> bool:
        """Move a person on the layout canvas."""
        return _people.update_person_position(self, person_id, x, y)

    def delete_person(self, person_id: str) -> bool:
        """Delete a person and every relationship they are part of."""
        return _people.delete_person(self, person_id)

    def list_people(self) -> list[Person]:
        """List all people in insertion order."""
        return _people.list_people(self)

    def count_people(self) -> int:
        """Count people."""
        with self._lock:
            return len(self._people)

    # ========== Relationships ==========

    def add_relationship(self, relationship: Relationship) -> None:
        """Insert a relationship as given, overlay fields included."""
        _relationships.add_relationship(self, relationship)

    def get_relationship(self, relationship_id: str) -> Relationship | None:
        """Get a relationship by id."""
        return _relationships.get_relationship(self, relationship_id)

    def delete_relationship(self, relationship_id: str) -> bool:
        """Delete a relationship and its event history."""
        return _relationships.delete_relationship(self, relationship_id)

    def record_event(
        self, relationship_id: str, event: RelationshipEvent
    ) -> Relationship | None:
        """Record an event against a relationship, updating health and type."""
        return _relationships.record_event(self, relationship_id, event)

    def list_relationships(self) -> list[Relationship]:
        """List all relationships in insertion order."""
        return _relationships.list_relationships(self)

    def count_relationships(self) -> int:
        """Count relationships."""
        with self._lock:
            return len(self._relationships)

    # ========== Network Events ==========

    def add_network_event(self, event: NetworkEvent) -> list[Relationship]:
        """Store a network event and apply all of its impacts."""
        return _network_events.add_network_event(self, event)

    def get_network_event(self, event_id: str) -> NetworkEvent | None:
        """Get a network event by id."""
        return _network_events.get_network_event(self, event_id)

    def delete_network_event(self, event_id: str) -> bool:
        """Delete a network event record. Health changes are kept."""
        return _network_events.delete_network_event(self, event_id)

    def list_network_events(self) -> list[NetworkEvent]:
        """List all network events in insertion order."""
        return _network_events.list_network_events(self)

    # ========== Queries ==========

    def relationships_for_person(self, person_id: str) -> list[Relationship]:
        """Relationships a person takes part in."""
        return _queries.relationships_for_person(self, person_id)

    def relationship_for_pair(self, person_a: str, person_b: str) -> Relationship | None:
        """First relationship joining an unordered pair of people."""
        return _queries.relationship_for_pair(self, person_a, person_b)

    def events_for_person(self, person_id: str) -> list[NetworkEvent]:
        """Network events a person participated in."""
        return _queries.events_for_person(self, person_id)

    def events_for_relationship(self, relationship_id: str) -> list[NetworkEvent]:
        """Network events with an impact on a relationship."""
        return _queries.events_for_relationship(self, relationship_id)

    def people_without_relationships(self) -> list[Person]:
        """People not part of any relationship."""
        return _queries.people_without_relationships(self)

    # ========== Graph ==========

    def get_graph(self) -> MultiGraph:
        """Get the NetworkX projection of the network, building it if needed."""
        return _graph.get_graph(self)

    def get_connected_people(self, person_id: str, max_depth: int = 1) -> list[Person]:
        """People reachable from a person within max_depth relationships."""
        return _graph.get_connected_people(self, person_id, max_depth)

    def find_path(self, person_a: str, person_b: str) -> list[str]:
        """Shortest chain of person ids linking two people."""
        return _graph.find_path(self, person_a, person_b)

    # ========== Housekeeping ==========

    def is_empty(self) -> bool:
        """Whether the ledger holds no people."""
        with self._lock:
            return not self._people

    def seed_sample_data(self) -> bool:
        """Load the demonstration network if the ledger has no people yet."""
        return _seed.seed_sample_data(self)

    def clear(self) -> None:
        """Remove everything from the ledger."""
        with self._lock:
            self._people.clear()
            self._relationships.clear()
            self._network_events.clear()
            _graph.invalidate_graph(self)
        logger.info("Ledger cleared")


__all__ = ["RelationshipLedger"]
