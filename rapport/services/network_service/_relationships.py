"""Relationship management functions for NetworkService."""

from __future__ import annotations

import logging
import uuid
from datetime import date as date_cls
from typing import TYPE_CHECKING

from rapport.memory.catalog import get_event_category
from rapport.memory.entities import (
    DirectionalOverlay,
    EventType,
    Relationship,
    RelationshipEvent,
)
from rapport.memory.ledger import RelationshipLedger
from rapport.utils.constants import HEALTH_MAX, HEALTH_MIN, IMPACT_MAX, IMPACT_MIN
from rapport.utils.exceptions import RelationshipValidationError, ValidationError

from ._lookups import not_found

if TYPE_CHECKING:
    from rapport.services.network_service import NetworkService

logger = logging.getLogger(__name__)


def normalize_date(value: str | None) -> str:
    """Return an ISO 8601 calendar date, defaulting to today.

    Raises:
        ValidationError: If value is not a YYYY-MM-DD date.
    """
    if value is None:
        return date_cls.today().isoformat()
    try:
        return date_cls.fromisoformat(value).isoformat()
    except ValueError as e:
        raise ValidationError(f"Invalid event date {value!r}: expected YYYY-MM-DD") from e


def _validate_pair(ledger: RelationshipLedger, person1_id: str, person2_id: str) -> None:
    """Reject self-relationships and people missing from the ledger."""
    if person1_id == person2_id:
        raise RelationshipValidationError(
            f"Cannot create self-referential relationship: person {person1_id} cannot "
            f"have a relationship with themselves",
            person1_id=person1_id,
            person2_id=person2_id,
            reason="self_loop",
            suggestions=["Choose a different second person"],
        )
    if ledger.get_person(person1_id) is None:
        raise RelationshipValidationError(
            f"Person with ID '{person1_id}' does not exist",
            person1_id=person1_id,
            person2_id=person2_id,
            reason="person1_not_found",
            suggestions=["Verify the first person ID is correct"],
        )
    if ledger.get_person(person2_id) is None:
        raise RelationshipValidationError(
            f"Person with ID '{person2_id}' does not exist",
            person1_id=person1_id,
            person2_id=person2_id,
            reason="person2_not_found",
            suggestions=["Verify the second person ID is correct"],
        )


def _validate_health(person1_id: str, person2_id: str, **readings: int | None) -> None:
    """Reject health readings outside the clamp bounds."""
    for field, value in readings.items():
        if value is not None and not HEALTH_MIN <= value <= HEALTH_MAX:
            raise RelationshipValidationError(
                f"{field} must be between {HEALTH_MIN} and {HEALTH_MAX}, got {value}",
                person1_id=person1_id,
                person2_id=person2_id,
                reason="health_out_of_range",
                suggestions=[f"Use a value between {HEALTH_MIN} and {HEALTH_MAX}"],
            )


def add_relationship(
    svc: NetworkService,
    ledger: RelationshipLedger,
    person1_id: str,
    person2_id: str,
    relationship_type: str,
    overlay: DirectionalOverlay | None = None,
    health_score: int | None = None,
) -> Relationship:
    """Create a relationship between two people.

    A pair that is already related gets a second relationship; this is
    logged but allowed, and pair lookups keep returning the older one.

    Args:
        svc: NetworkService instance.
        ledger: RelationshipLedger instance.
        person1_id: First person.
        person2_id: Second person.
        relationship_type: Type label, any string.
        overlay: Optional asymmetric perception fields.
        health_score: Starting health, defaults to settings.default_health_score.

    Returns:
        The new relationship.

    Raises:
        RelationshipValidationError: If validation is enabled and the pair is
            a self-loop or names an unknown person, or if any health reading
            lies outside [-100, 100].
    """
    if svc.settings.relationship_validation_enabled:
        _validate_pair(ledger, person1_id, person2_id)

    if health_score is None:
        health_score = svc.settings.default_health_score
    overlay_fields = overlay.model_dump(exclude_none=True) if overlay else {}
    _validate_health(
        person1_id,
        person2_id,
        health_score=health_score,
        p1_to_p2_health=overlay_fields.get("p1_to_p2_health"),
        p2_to_p1_health=overlay_fields.get("p2_to_p1_health"),
    )

    existing = ledger.relationship_for_pair(person1_id, person2_id)
    if existing is not None:
        logger.warning(
            f"People {person1_id} and {person2_id} are already related via {existing.id} "
            f"({existing.type}); creating a second relationship"
        )

    relationship = Relationship(
        id=str(uuid.uuid4()),
        person1_id=person1_id,
        person2_id=person2_id,
        type=relationship_type,
        health_score=health_score,
        **overlay_fields,
    )
    logger.info(f"Adding relationship: {person1_id} <-> {person2_id} ({relationship_type})")
    ledger.add_relationship(relationship)
    return relationship


def delete_relationship(svc: NetworkService, ledger: RelationshipLedger, relationship_id: str) -> bool:
    """Delete a relationship.

    Returns:
        True if deleted, False if not found.

    Raises:
        EntityNotFoundError: If strict lookups are enabled and the id is unknown.
    """
    logger.info(f"Deleting relationship {relationship_id}")
    if not ledger.delete_relationship(relationship_id):
        not_found(svc, "relationship", relationship_id)
        return False
    return True


def build_relationship_event(
    category: str,
    description: str,
    impact: int | None = None,
    event_type: EventType | None = None,
    date: str | None = None,
    image: str | None = None,
    changes_relationship_to: str | None = None,
) -> RelationshipEvent:
    """Build a relationship event, filling blanks from the category catalog.

    Omitted impact, type and transition come from the catalog entry for
    category; custom categories fall back to 0, "neutral" and no transition.
    Pass changes_relationship_to="" to suppress a catalog transition.

    Raises:
        ValidationError: If category or description is empty, or date is malformed.
    """
    if not category.strip():
        raise ValidationError("Event category is required")
    if not description.strip():
        raise ValidationError("Event description is required")

    catalog_entry = get_event_category(category)
    if impact is None:
        impact = catalog_entry.default_impact if catalog_entry else 0
    elif not IMPACT_MIN <= impact <= IMPACT_MAX:
        # Stored as given; only the health score is clamped
        logger.warning(
            f"Impact {impact} for {category!r} is outside the usual {IMPACT_MIN}..{IMPACT_MAX} range"
        )
    if event_type is None:
        event_type = catalog_entry.type if catalog_entry else "neutral"
    if changes_relationship_to is None and catalog_entry is not None:
        changes_relationship_to = catalog_entry.changes_relationship_to

    return RelationshipEvent(
        id=str(uuid.uuid4()),
        type=event_type,
        category=category,
        description=description,
        impact=impact,
        date=normalize_date(date),
        image=image,
        changes_relationship_to=changes_relationship_to or None,
    )


def record_event(
    svc: NetworkService,
    ledger: RelationshipLedger,
    relationship_id: str,
    event: RelationshipEvent,
) -> Relationship | None:
    """Record an event on a relationship.

    Returns:
        The updated relationship, or None if the relationship is unknown.

    Raises:
        EntityNotFoundError: If strict lookups are enabled and the id is unknown.
    """
    before = ledger.get_relationship(relationship_id)
    updated = ledger.record_event(relationship_id, event)
    if updated is None:
        not_found(svc, "relationship", relationship_id)
        return None

    assert before is not None  # record_event found it
    logger.info(
        f"Recorded {event.category} on {relationship_id}: "
        f"health {before.health_score} -> {updated.health_score}"
    )
    if updated.type != before.type:
        logger.info(f"Relationship {relationship_id} changed type: {before.type} -> {updated.type}")
    return updated
