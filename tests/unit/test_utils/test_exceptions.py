"""Tests for the exception hierarchy."""

import pytest

from rapport.utils.exceptions import (
    ConfigError,
    EntityNotFoundError,
    NetworkEventValidationError,
    RapportError,
    RelationshipValidationError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Tests for inheritance between exception classes."""

    @pytest.mark.parametrize(
        "exc_class",
        [ValidationError, ConfigError, EntityNotFoundError],
    )
    def test_direct_subclasses(self, exc_class):
        """Top-level errors derive from RapportError."""
        assert issubclass(exc_class, RapportError)

    @pytest.mark.parametrize(
        "exc_class", [RelationshipValidationError, NetworkEventValidationError]
    )
    def test_validation_subclasses(self, exc_class):
        """Specific validation errors can be caught as ValidationError."""
        assert issubclass(exc_class, ValidationError)

    def test_catch_all(self):
        """Every application error is caught by except RapportError."""
        with pytest.raises(RapportError):
            raise NetworkEventValidationError("bad")


class TestRelationshipValidationError:
    """Tests for RelationshipValidationError."""

    def test_attributes(self):
        """Context is stored on the exception."""
        error = RelationshipValidationError(
            "Cannot relate",
            person1_id="a",
            person2_id="a",
            reason="self_loop",
            suggestions=["Pick someone else"],
        )

        assert str(error) == "Cannot relate"
        assert error.person1_id == "a"
        assert error.person2_id == "a"
        assert error.reason == "self_loop"
        assert error.suggestions == ["Pick someone else"]

    def test_defaults(self):
        """Omitted context defaults to None and an empty suggestion list."""
        error = RelationshipValidationError("Cannot relate")
        assert error.reason is None
        assert error.suggestions == []


class TestOtherErrors:
    """Tests for EntityNotFoundError and NetworkEventValidationError."""

    def test_entity_not_found(self):
        """Entity type and id are kept."""
        error = EntityNotFoundError("Person not found: p1", entity_type="person", entity_id="p1")
        assert str(error) == "Person not found: p1"
        assert (error.entity_type, error.entity_id) == ("person", "p1")

    def test_network_event_validation(self):
        """The reason is kept."""
        error = NetworkEventValidationError("Too few", reason="too_few_participants")
        assert error.reason == "too_few_participants"
