"""Centralized exception hierarchy for Rapport.

Exception Hierarchy:

    RapportError (base for all application errors)
    ├── ValidationError (validation failures at the service boundary)
    │   ├── RelationshipValidationError (self-loops, unknown people)
    │   └── NetworkEventValidationError (too few participants, missing fields)
    ├── EntityNotFoundError (lookup of an unknown id in strict mode)
    └── ConfigError (configuration parsing/validation failures)

The ledger itself never raises for unknown ids: those are silent no-ops.
These exceptions only surface from the services layer.

Usage:
    from rapport.utils.exceptions import RelationshipValidationError

    try:
        services.network.add_relationship(ledger, alice_id, alice_id, "Friend")
    except RelationshipValidationError as e:
        logger.warning("Rejected relationship: %s", e.reason)
"""

import logging

logger = logging.getLogger(__name__)


class RapportError(Exception):
    """Base exception for all Rapport errors.

    All custom exceptions should inherit from this class to allow
    catching all application-specific errors with a single except clause.
    """

    pass


class ValidationError(RapportError):
    """Raised when input validation fails at the service boundary."""

    pass


class ConfigError(RapportError):
    """Raised when configuration parsing or validation fails."""

    pass


class EntityNotFoundError(RapportError):
    """Raised when an operation references an id that is not in the ledger.

    Only raised when strict lookups are enabled in settings; otherwise the
    services log a warning and return None/False.

    Attributes:
        entity_type: Kind of entity looked up ("person", "relationship", "network_event").
        entity_id: The id that could not be found.
    """

    def __init__(self, message: str, entity_type: str | None = None, entity_id: str | None = None):
        """Initialize EntityNotFoundError.

        Args:
            message: Human-readable error message.
            entity_type: Kind of entity that was looked up.
            entity_id: The missing id.
        """
        super().__init__(message)
        self.entity_type = entity_type
        self.entity_id = entity_id


class RelationshipValidationError(ValidationError):
    """Raised when relationship validation fails.

    This indicates an attempt to create a relationship with unknown people
    or a person related to themselves.

    Attributes:
        person1_id: The first person ID that was provided.
        person2_id: The second person ID that was provided.
        reason: Why the validation failed (e.g., "person1_not_found", "self_loop").
        suggestions: List of suggested fixes or alternatives.
    """

    def __init__(
        self,
        message: str,
        person1_id: str | None = None,
        person2_id: str | None = None,
        reason: str | None = None,
        suggestions: list[str] | None = None,
    ):
        """
        Initialize RelationshipValidationError with context about the failed relationship.

        Parameters:
            message (str): Human-readable error message.
            person1_id (str | None): The first person ID that was provided.
            person2_id (str | None): The second person ID that was provided.
            reason (str | None): Why validation failed (e.g., "person1_not_found",
                "person2_not_found", "self_loop").
            suggestions (list[str] | None): List of suggested fixes or alternatives.
        """
        super().__init__(message)
        self.person1_id = person1_id
        self.person2_id = person2_id
        self.reason = reason
        self.suggestions = suggestions or []
        logger.debug(
            "RelationshipValidationError initialized: person1_id=%s, person2_id=%s, reason=%s",
            person1_id,
            person2_id,
            reason,
        )


class NetworkEventValidationError(ValidationError):
    """Raised when a network event cannot be created from the given input.

    Attributes:
        reason: Why validation failed (e.g., "too_few_participants",
            "missing_description", "missing_category").
    """

    def __init__(self, message: str, reason: str | None = None):
        """Initialize NetworkEventValidationError.

        Args:
            message: Human-readable error message.
            reason: Machine-readable failure reason.
        """
        super().__init__(message)
        self.reason = reason
