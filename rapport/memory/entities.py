"""Entity models for the relationship network."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from rapport.utils.constants import DEFAULT_HEALTH_SCORE, HEALTH_MAX, HEALTH_MIN

EventType = Literal["positive", "negative", "neutral"]


class Person(BaseModel):
    """A person in the network.

    Position is only used by the graph renderer; the ledger sets it at
    creation and otherwise leaves it alone.
    """

    id: str
    name: str
    avatar: str | None = None  # URL or data URI, never interpreted here
    x: float = 0.0
    y: float = 0.0


class RelationshipEvent(BaseModel):
    """Something that happened between the two people of one relationship."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: EventType
    category: str
    description: str
    impact: int  # Raw requested delta, nominally -30..30
    date: str  # ISO 8601 calendar date, e.g. "2025-06-15"
    image: str | None = None
    changes_relationship_to: str | None = None


class Relationship(BaseModel):
    """A relationship between two people.

    The pair is unordered for identity and lookup, but the directional
    overlay fields are read from person 1's side (p1_to_p2_*) and person 2's
    side (p2_to_p1_*).
    """

    id: str
    person1_id: str
    person2_id: str
    type: str  # Marriage, Friend, Colleague, ... or anything custom
    health_score: int = Field(default=DEFAULT_HEALTH_SCORE, ge=HEALTH_MIN, le=HEALTH_MAX)
    events: list[RelationshipEvent] = Field(default_factory=list)

    # Directional overlay, only set for asymmetric relationships
    p1_to_p2_type: str | None = None
    p2_to_p1_type: str | None = None
    p1_to_p2_health: int | None = Field(default=None, ge=HEALTH_MIN, le=HEALTH_MAX)
    p2_to_p1_health: int | None = Field(default=None, ge=HEALTH_MIN, le=HEALTH_MAX)

    @property
    def is_asymmetric(self) -> bool:
        """Whether any directional overlay field is present."""
        return any(
            value is not None
            for value in (
                self.p1_to_p2_type,
                self.p2_to_p1_type,
                self.p1_to_p2_health,
                self.p2_to_p1_health,
            )
        )

    def involves(self, person_id: str) -> bool:
        """Check if a person is one of the two parties."""
        return self.person1_id == person_id or self.person2_id == person_id

    def connects(self, person_a: str, person_b: str) -> bool:
        """Check if this relationship joins the unordered pair (a, b)."""
        return (self.person1_id == person_a and self.person2_id == person_b) or (
            self.person1_id == person_b and self.person2_id == person_a
        )

    def other_person_id(self, person_id: str) -> str | None:
        """Return the id of the other party, or None if person_id is not a party."""
        if self.person1_id == person_id:
            return self.person2_id
        if self.person2_id == person_id:
            return self.person1_id
        return None


class DirectionalOverlay(BaseModel):
    """Asymmetric perception supplied when creating a relationship."""

    p1_to_p2_type: str | None = None
    p2_to_p1_type: str | None = None
    p1_to_p2_health: int | None = Field(default=None, ge=HEALTH_MIN, le=HEALTH_MAX)
    p2_to_p1_health: int | None = Field(default=None, ge=HEALTH_MIN, le=HEALTH_MAX)


class EventImpact(BaseModel):
    """The health delta a network event applies to one relationship."""

    model_config = ConfigDict(frozen=True)

    relationship_id: str
    impact: int
    reason: str | None = None


class NetworkEvent(BaseModel):
    """An event shared by several people, rippling across their relationships."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: EventType
    category: str
    description: str
    date: str
    image: str | None = None
    participants: tuple[str, ...] = ()
    impacts: tuple[EventImpact, ...] = ()

    def impact_for(self, relationship_id: str) -> EventImpact | None:
        """Return the impact entry naming a relationship, if any."""
        for impact in self.impacts:
            if impact.relationship_id == relationship_id:
                return impact
        return None


class EventCategory(BaseModel):
    """A catalog entry describing a kind of event and its default impact."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: EventType
    default_impact: int
    changes_relationship_to: str | None = None
