"""Network service - the calls the presentation layer makes against a ledger.

Sub-modules:
    _people         - Person creation, moves, renames, deletion
    _relationships  - Relationship creation/deletion and per-relationship events
    _propagation    - Network events: affected relationships, impacts, application
    _lookups        - Handling of unknown ids
"""

import logging
from collections.abc import Iterable, Mapping

from rapport.memory.entities import (
    DirectionalOverlay,
    EventType,
    NetworkEvent,
    Person,
    Relationship,
)
from rapport.memory.ledger import RelationshipLedger
from rapport.settings import Settings

from . import _people, _propagation, _relationships
from ._propagation import AffectedRelationship

logger = logging.getLogger(__name__)

__all__ = ["AffectedRelationship", "NetworkService"]


class NetworkService:
    """People, relationship and event management service.

    Builds fully formed entities from UI input, validates them at the
    boundary according to settings, and hands them to the ledger. The
    ledger is passed into every call rather than held by the service.
    """

    def __init__(self, settings: Settings | None = None):
        """Initialize NetworkService.

        Args:
            settings: Application settings. If None, loads from rapport/settings.json.
        """
        logger.debug("Initializing NetworkService")
        self.settings = settings or Settings.load()
        logger.debug("NetworkService initialized successfully")

    # ========== PEOPLE ==========

    def add_person(
        self, ledger: RelationshipLedger, name: str, avatar: str | None = None
    ) -> Person:
        """Add a person with a generated id and layout position.

        Args:
            ledger: RelationshipLedger instance.
            name: Display name.
            avatar: Optional image reference.

        Returns:
            The new person.
        """
        return _people.add_person(self, ledger, name, avatar)

    def move_person(self, ledger: RelationshipLedger, person_id: str, x: float, y: float) -> bool:
        """Store a person's new layout position."""
        return _people.move_person(self, ledger, person_id, x, y)

    def rename_person(
        self,
        ledger: RelationshipLedger,
        person_id: str,
        name: str | None = None,
        avatar: str | None = None,
    ) -> bool:
        """Change a person's name and/or avatar."""
        return _people.rename_person(self, ledger, person_id, name, avatar)

    def delete_person(self, ledger: RelationshipLedger, person_id: str) -> bool:
        """Delete a person and every relationship they are part of."""
        return _people.delete_person(self, ledger, person_id)

    # ========== RELATIONSHIPS ==========

    def add_relationship(
        self,
        ledger: RelationshipLedger,
        person1_id: str,
        person2_id: str,
        relationship_type: str,
        overlay: DirectionalOverlay | None = None,
        health_score: int | None = None,
    ) -> Relationship:
        """Create a relationship between two people.

        Args:
            ledger: RelationshipLedger instance.
            person1_id: First person.
            person2_id: Second person.
            relationship_type: Type label (catalog or custom).
            overlay: Optional asymmetric perception fields.
            health_score: Starting health, defaults to settings.default_health_score.

        Returns:
            The new relationship.

        Raises:
            RelationshipValidationError: If validation is enabled and the pair is invalid.
        """
        return _relationships.add_relationship(
            self, ledger, person1_id, person2_id, relationship_type, overlay, health_score
        )

    def delete_relationship(self, ledger: RelationshipLedger, relationship_id: str) -> bool:
        """Delete a relationship."""
        return _relationships.delete_relationship(self, ledger, relationship_id)

    def record_event(
        self,
        ledger: RelationshipLedger,
        relationship_id: str,
        category: str,
        description: str,
        impact: int | None = None,
        event_type: EventType | None = None,
        date: str | None = None,
        image: str | None = None,
        changes_relationship_to: str | None = None,
    ) -> Relationship | None:
        """Record an event on one relationship.

        Omitted impact, type and type transition are taken from the event
        category catalog.

        Returns:
            The updated relationship, or None if it does not exist.

        Raises:
            ValidationError: If category/description is empty or date is malformed.
            EntityNotFoundError: If strict lookups are enabled and the id is unknown.
        """
        event = _relationships.build_relationship_event(
            category,
            description,
            impact=impact,
            event_type=event_type,
            date=date,
            image=image,
            changes_relationship_to=changes_relationship_to,
        )
        return _relationships.record_event(self, ledger, relationship_id, event)

    # ========== NETWORK EVENTS ==========

    def suggest_affected_relationships(
        self,
        ledger: RelationshipLedger,
        participants: list[str],
        manual_relationship_ids: Iterable[str] | None = None,
    ) -> list[AffectedRelationship]:
        """Preview which relationships a network event would touch."""
        return _propagation.suggest_affected_relationships(
            ledger, participants, manual_relationship_ids
        )

    def create_network_event(
        self,
        ledger: RelationshipLedger,
        category: str,
        description: str,
        participants: list[str],
        date: str | None = None,
        impact_overrides: Mapping[str, int] | None = None,
        manual_relationship_ids: Iterable[str] | None = None,
        image: str | None = None,
    ) -> NetworkEvent:
        """Create a network event and apply its impacts to the ledger.

        Raises:
            NetworkEventValidationError: If input is incomplete or has fewer than
                two participants.
        """
        return _propagation.create_network_event(
            self,
            ledger,
            category,
            description,
            participants,
            date=date,
            impact_overrides=impact_overrides,
            manual_relationship_ids=manual_relationship_ids,
            image=image,
        )

    def delete_network_event(self, ledger: RelationshipLedger, event_id: str) -> bool:
        """Delete a network event record without reversing its impacts."""
        return _propagation.delete_network_event(self, ledger, event_id)

    # ========== QUERIES ==========

    def get_relationships(
        self, ledger: RelationshipLedger, person_id: str | None = None
    ) -> list[Relationship]:
        """Get relationships, optionally filtered by person."""
        if person_id:
            return ledger.relationships_for_person(person_id)
        return ledger.list_relationships()

    def get_network_events(
        self,
        ledger: RelationshipLedger,
        person_id: str | None = None,
        relationship_id: str | None = None,
    ) -> list[NetworkEvent]:
        """Get network events, optionally filtered by person or relationship.

        Raises:
            ValueError: If both filters are given.
        """
        if person_id and relationship_id:
            raise ValueError("Filter by person_id or relationship_id, not both")
        if person_id:
            return ledger.events_for_person(person_id)
        if relationship_id:
            return ledger.events_for_relationship(relationship_id)
        return ledger.list_network_events()
