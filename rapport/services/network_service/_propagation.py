"""Network event propagation: from participants to per-relationship impacts.

A network event involves several people at once. The relationships it
touches are found by pairing the participants (only pairs that already have
a relationship count) plus any relationships the caller attaches by hand.
Each touched relationship gets one signed impact, and the event is then
applied to the ledger in a single pass.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rapport.memory.catalog import get_event_category
from rapport.memory.entities import EventImpact, NetworkEvent, Relationship
from rapport.memory.ledger import RelationshipLedger
from rapport.utils.exceptions import NetworkEventValidationError
from rapport.utils.logging_config import log_context

from ._lookups import not_found
from ._relationships import normalize_date

if TYPE_CHECKING:
    from rapport.services.network_service import NetworkService

logger = logging.getLogger(__name__)

MIN_PARTICIPANTS = 2


@dataclass
class AffectedRelationship:
    """A relationship a network event will touch.

    Attributes:
        relationship: The relationship as it was when suggested.
        is_auto: True if found by pairing participants, False if attached manually.
    """

    relationship: Relationship
    is_auto: bool = True


def impact_reason(description: str) -> str:
    """Default explanation attached to each impact of an event."""
    return f"Involved in: {description}"


def suggest_affected_relationships(
    ledger: RelationshipLedger,
    participants: list[str],
    manual_relationship_ids: Iterable[str] | None = None,
) -> list[AffectedRelationship]:
    """Work out which relationships a shared event touches.

    Every pair (participants[i], participants[j]) with i < j that already
    has a relationship is included, in selection order. Participants with no
    direct relationship are not connected by the event. Manually attached
    relationships follow, skipping any already included and any id the
    ledger does not know.

    Args:
        ledger: RelationshipLedger instance.
        participants: Person ids in the order they were selected.
        manual_relationship_ids: Extra relationships to include.

    Returns:
        Affected relationships, auto-suggested first.
    """
    affected: list[AffectedRelationship] = []
    seen: set[str] = set()

    for i in range(len(participants)):
        for j in range(i + 1, len(participants)):
            relationship = ledger.relationship_for_pair(participants[i], participants[j])
            if relationship is None or relationship.id in seen:
                continue
            seen.add(relationship.id)
            affected.append(AffectedRelationship(relationship=relationship, is_auto=True))

    for relationship_id in manual_relationship_ids or ():
        if relationship_id in seen:
            logger.debug(f"Manual relationship {relationship_id} already included, skipping")
            continue
        relationship = ledger.get_relationship(relationship_id)
        if relationship is None:
            logger.warning(f"Manual relationship {relationship_id} not found, skipping")
            continue
        seen.add(relationship_id)
        affected.append(AffectedRelationship(relationship=relationship, is_auto=False))

    logger.debug(
        f"suggest_affected_relationships: {len(participants)} participant(s) -> "
        f"{sum(a.is_auto for a in affected)} auto, {sum(not a.is_auto for a in affected)} manual"
    )
    return affected


def build_impacts(
    affected: list[AffectedRelationship],
    category: str,
    description: str,
    impact_overrides: Mapping[str, int] | None = None,
) -> list[EventImpact]:
    """Assign one impact to each affected relationship.

    The impact is the caller's override for that relationship if given, else
    the category's default impact, else 0.

    Args:
        affected: Output of suggest_affected_relationships().
        category: Event category name.
        description: Event description, used for the reason text.
        impact_overrides: Per-relationship impact chosen by the caller.

    Returns:
        Impacts in the same order as affected.
    """
    overrides = impact_overrides or {}
    catalog_entry = get_event_category(category)
    default_impact = catalog_entry.default_impact if catalog_entry else 0
    reason = impact_reason(description)

    return [
        EventImpact(
            relationship_id=a.relationship.id,
            impact=overrides.get(a.relationship.id, default_impact),
            reason=reason,
        )
        for a in affected
    ]


def _validate_event_input(category: str, description: str, participants: list[str]) -> None:
    if not category.strip():
        raise NetworkEventValidationError("Event category is required", reason="missing_category")
    if not description.strip():
        raise NetworkEventValidationError(
            "Event description is required", reason="missing_description"
        )
    if len(participants) < MIN_PARTICIPANTS:
        raise NetworkEventValidationError(
            f"A network event needs at least {MIN_PARTICIPANTS} participants, "
            f"got {len(participants)}",
            reason="too_few_participants",
        )


def create_network_event(
    svc: NetworkService,
    ledger: RelationshipLedger,
    category: str,
    description: str,
    participants: list[str],
    date: str | None = None,
    impact_overrides: Mapping[str, int] | None = None,
    manual_relationship_ids: Iterable[str] | None = None,
    image: str | None = None,
) -> NetworkEvent:
    """Create a network event and apply its impacts.

    Args:
        svc: NetworkService instance.
        ledger: RelationshipLedger instance.
        category: Event category (catalog name or custom).
        description: What happened.
        participants: Person ids involved, in selection order. Duplicates are dropped.
        date: ISO calendar date, defaults to today.
        impact_overrides: Per-relationship impact chosen by the caller.
        manual_relationship_ids: Relationships to include beyond participant pairs.
        image: Optional image reference.

    Returns:
        The stored network event.

    Raises:
        NetworkEventValidationError: If category or description is empty, or
            fewer than two distinct participants are given.
        ValidationError: If date is malformed.
    """
    participants = list(dict.fromkeys(participants))
    _validate_event_input(category, description, participants)

    catalog_entry = get_event_category(category)
    event_id = str(uuid.uuid4())

    with log_context(event_id[:8]):
        affected = suggest_affected_relationships(ledger, participants, manual_relationship_ids)
        event = NetworkEvent(
            id=event_id,
            type=catalog_entry.type if catalog_entry else "neutral",
            category=category,
            description=description,
            date=normalize_date(date),
            image=image,
            participants=participants,
            impacts=build_impacts(affected, category, description, impact_overrides),
        )
        updated = ledger.add_network_event(event)
        logger.info(
            f"Created network event {category!r} with {len(participants)} participants, "
            f"{len(updated)} relationship(s) affected"
        )
    return event


def delete_network_event(svc: NetworkService, ledger: RelationshipLedger, event_id: str) -> bool:
    """Delete a network event record. Health changes it caused are kept.

    Returns:
        True if deleted, False if not found.

    Raises:
        EntityNotFoundError: If strict lookups are enabled and the id is unknown.
    """
    logger.info(f"Deleting network event {event_id}")
    if not ledger.delete_network_event(event_id):
        not_found(svc, "network_event", event_id)
        return False
    return True
