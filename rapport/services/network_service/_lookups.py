"""Handling of unknown ids at the service boundary."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rapport.utils.exceptions import EntityNotFoundError

if TYPE_CHECKING:
    from rapport.services.network_service import NetworkService

logger = logging.getLogger(__name__)


def not_found(svc: NetworkService, entity_type: str, entity_id: str) -> None:
    """Report an operation on an unknown id.

    Logs a warning, or raises when strict lookups are enabled.

    Raises:
        EntityNotFoundError: If settings.strict_lookups is True.
    """
    if svc.settings.strict_lookups:
        raise EntityNotFoundError(
            f"{entity_type.replace('_', ' ').capitalize()} not found: {entity_id}",
            entity_type=entity_type,
            entity_id=entity_id,
        )
    logger.warning(f"{entity_type} {entity_id} not found, ignoring")
