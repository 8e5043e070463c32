"""Static event category and relationship type vocabularies.

These are fixed data, not runtime configuration. The relationship type list
is a suggestion set: relationships may carry any custom type string.
"""

import logging

from rapport.memory.entities import EventCategory

logger = logging.getLogger(__name__)

EVENT_CATEGORIES: tuple[EventCategory, ...] = (
    # Negative events
    EventCategory(name="Fight", type="negative", default_impact=-15),
    EventCategory(name="Argument", type="negative", default_impact=-8),
    EventCategory(name="Betrayal", type="negative", default_impact=-25),
    EventCategory(name="Neglect", type="negative", default_impact=-5),
    EventCategory(name="Lie", type="negative", default_impact=-12),
    # Positive events
    EventCategory(name="Gift", type="positive", default_impact=10),
    EventCategory(name="Support", type="positive", default_impact=12),
    EventCategory(name="Quality Time", type="positive", default_impact=8),
    EventCategory(name="Apology", type="positive", default_impact=15),
    EventCategory(name="Celebration", type="positive", default_impact=10),
    EventCategory(name="Trip Together", type="positive", default_impact=18),
    EventCategory(name="Achievement", type="positive", default_impact=7),
    # Events that also change the relationship type
    EventCategory(
        name="Marriage", type="positive", default_impact=25, changes_relationship_to="Marriage"
    ),
    EventCategory(
        name="Engagement", type="positive", default_impact=20, changes_relationship_to="Engaged"
    ),
    EventCategory(name="Divorce", type="negative", default_impact=-30, changes_relationship_to="Ex"),
    EventCategory(name="Breakup", type="negative", default_impact=-20, changes_relationship_to="Ex"),
    EventCategory(
        name="Reconciliation",
        type="positive",
        default_impact=15,
        changes_relationship_to="Partner",
    ),
    EventCategory(
        name="Became Friends", type="positive", default_impact=10, changes_relationship_to="Friend"
    ),
    EventCategory(
        name="Became Best Friends",
        type="positive",
        default_impact=15,
        changes_relationship_to="Best Friend",
    ),
    EventCategory(
        name="Started Dating",
        type="positive",
        default_impact=15,
        changes_relationship_to="Partner",
    ),
)

RELATIONSHIP_TYPES: tuple[str, ...] = (
    "Marriage",
    "Engaged",
    "Partner",
    "Family",
    "Friend",
    "Best Friend",
    "Colleague",
    "Acquaintance",
    "Ex",
    "Estranged",
)

_CATEGORIES_BY_NAME: dict[str, EventCategory] = {c.name: c for c in EVENT_CATEGORIES}

# Health label thresholds, checked top-down (score >= threshold)
HEALTH_LABELS: tuple[tuple[int, str], ...] = (
    (60, "Thriving"),
    (20, "Good"),
    (-20, "Neutral"),
    (-60, "Strained"),
)


def get_event_category(name: str) -> EventCategory | None:
    """Look up a catalog category by exact name.

    Args:
        name: Category name, e.g. "Marriage".

    Returns:
        The category, or None for custom (uncatalogued) categories.
    """
    category = _CATEGORIES_BY_NAME.get(name)
    if category is None:
        logger.debug(f"get_event_category: '{name}' is not a catalog category")
    return category


def categories_by_group() -> dict[str, list[EventCategory]]:
    """Group the catalog the way the event picker presents it.

    Categories that change the relationship type go to "transitions" only;
    the rest are split by positive/negative.
    """
    groups: dict[str, list[EventCategory]] = {"positive": [], "negative": [], "transitions": []}
    for category in EVENT_CATEGORIES:
        if category.changes_relationship_to:
            groups["transitions"].append(category)
        elif category.type in ("positive", "negative"):
            groups[category.type].append(category)
    return groups


def health_label(score: int) -> str:
    """Describe a health score in words."""
    for threshold, label in HEALTH_LABELS:
        if score >= threshold:
            return label
    return "Critical"


def health_trend(score: int) -> str:
    """Return "up", "down" or "flat" for the trend indicator next to a score."""
    if score >= 20:
        return "up"
    if score <= -20:
        return "down"
    return "flat"


def health_percent(score: int) -> float:
    """Map a -100..100 score onto the 0..100 fill of a health gauge."""
    return max(0.0, (score + 100) / 2)
