"""Tests for entity models."""

import pytest
from pydantic import ValidationError

from rapport.memory.entities import (
    DirectionalOverlay,
    EventImpact,
    NetworkEvent,
    Person,
    Relationship,
    RelationshipEvent,
)


def _event(**overrides) -> RelationshipEvent:
    fields = {
        "id": "e1",
        "type": "positive",
        "category": "Gift",
        "description": "Birthday present",
        "impact": 10,
        "date": "2025-11-12",
    }
    fields.update(overrides)
    return RelationshipEvent(**fields)


class TestPerson:
    """Tests for Person."""

    def test_defaults(self):
        """Avatar is optional and position defaults to the origin."""
        person = Person(id="p1", name="Alex")
        assert person.avatar is None
        assert (person.x, person.y) == (0.0, 0.0)


class TestRelationship:
    """Tests for Relationship."""

    def test_default_health_is_fifty(self):
        """A fresh relationship starts at health 50 with no events."""
        rel = Relationship(id="r1", person1_id="a", person2_id="b", type="Friend")
        assert rel.health_score == 50
        assert rel.events == []

    @pytest.mark.parametrize("score", [-101, 101])
    def test_health_out_of_range_rejected(self, score):
        """Health scores outside [-100, 100] are rejected at construction."""
        with pytest.raises(ValidationError):
            Relationship(id="r1", person1_id="a", person2_id="b", type="Friend", health_score=score)

    def test_health_bounds_accepted(self):
        """The bounds themselves are valid."""
        low = Relationship(id="r1", person1_id="a", person2_id="b", type="Ex", health_score=-100)
        high = Relationship(id="r2", person1_id="a", person2_id="b", type="Ex", health_score=100)
        assert low.health_score == -100
        assert high.health_score == 100

    def test_pair_helpers(self):
        """involves/connects/other_person_id treat the pair as unordered."""
        rel = Relationship(id="r1", person1_id="a", person2_id="b", type="Friend")

        assert rel.involves("a")
        assert rel.involves("b")
        assert not rel.involves("c")
        assert rel.connects("a", "b")
        assert rel.connects("b", "a")
        assert not rel.connects("a", "c")
        assert rel.other_person_id("a") == "b"
        assert rel.other_person_id("b") == "a"
        assert rel.other_person_id("c") is None

    def test_symmetric_by_default(self):
        """Without overlay fields a relationship is symmetric."""
        rel = Relationship(id="r1", person1_id="a", person2_id="b", type="Friend")
        assert rel.is_asymmetric is False
        assert rel.p1_to_p2_type is None
        assert rel.p2_to_p1_health is None

    def test_asymmetric_overlay(self):
        """Any overlay field makes the relationship asymmetric."""
        rel = Relationship(
            id="r1",
            person1_id="a",
            person2_id="b",
            type="Friend",
            p1_to_p2_type="Best Friend",
            p2_to_p1_health=20,
        )
        assert rel.is_asymmetric is True

    @pytest.mark.parametrize("field", ["p1_to_p2_health", "p2_to_p1_health"])
    @pytest.mark.parametrize("score", [-101, 500])
    def test_directional_health_out_of_range_rejected(self, field, score):
        """Directional health readings share the [-100, 100] bounds."""
        with pytest.raises(ValidationError):
            Relationship(id="r1", person1_id="a", person2_id="b", type="Friend", **{field: score})
        with pytest.raises(ValidationError):
            DirectionalOverlay(**{field: score})


class TestRelationshipEvent:
    """Tests for RelationshipEvent."""

    def test_frozen(self):
        """Events cannot be edited once created."""
        event = _event()
        with pytest.raises(ValidationError):
            event.impact = 5

    def test_invalid_type_rejected(self):
        """Type must be positive, negative or neutral."""
        with pytest.raises(ValidationError):
            _event(type="ecstatic")

    def test_impact_not_range_checked(self):
        """Impacts beyond the nominal -30..30 are stored as given."""
        assert _event(impact=75).impact == 75


class TestNetworkEvent:
    """Tests for NetworkEvent."""

    def test_impact_for(self):
        """impact_for returns the entry naming a relationship, or None."""
        event = NetworkEvent(
            id="n1",
            type="positive",
            category="Celebration",
            description="Graduation party",
            date="2025-05-01",
            participants=["a", "b"],
            impacts=[EventImpact(relationship_id="r1", impact=10)],
        )
        assert event.impact_for("r1").impact == 10
        assert event.impact_for("r2") is None

    def test_empty_impacts_allowed(self):
        """A network event with no impacts is valid."""
        event = NetworkEvent(
            id="n1", type="neutral", category="Other", description="Met up", date="2025-05-01"
        )
        assert event.impacts == ()
        assert event.participants == ()

    def test_frozen(self):
        """Stored network events cannot be altered after the fact."""
        event = NetworkEvent(
            id="n1",
            type="positive",
            category="Celebration",
            description="Party",
            date="2025-05-01",
            participants=["a", "b"],
            impacts=[EventImpact(relationship_id="r1", impact=10)],
        )

        assert isinstance(event.impacts, tuple)
        assert not hasattr(event.impacts, "append")
        with pytest.raises(ValidationError):
            event.impacts = ()
        with pytest.raises(ValidationError):
            event.impacts[0].impact = 30
