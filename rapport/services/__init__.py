"""Services layer - business logic separated from the presentation layer.

This module provides a clean interface between the UI and the in-memory
relationship ledger.
"""

import logging
from dataclasses import dataclass

from rapport.memory.ledger import RelationshipLedger
from rapport.settings import Settings

from .network_service import AffectedRelationship, NetworkService

logger = logging.getLogger(__name__)

__all__ = ["AffectedRelationship", "NetworkService", "ServiceContainer"]


@dataclass
class ServiceContainer:
    """Dependency injection container for services and the ledger they share.

    Usage:
        settings = Settings.load()
        services = ServiceContainer(settings)

        alice = services.network.add_person(services.ledger, "Alice")
    """

    settings: Settings
    ledger: RelationshipLedger
    network: NetworkService

    def __init__(self, settings: Settings | None = None, ledger: RelationshipLedger | None = None):
        """Create the ledger and wire services around it.

        Args:
            settings: Application settings. If omitted, loaded via Settings.load().
            ledger: Existing ledger to use. If omitted, a new one is created and,
                when settings.seed_sample_data is set, seeded with the demo network.
        """
        logger.info("Initializing ServiceContainer...")
        self.settings = settings or Settings.load()
        if ledger is None:
            ledger = RelationshipLedger()
            if self.settings.seed_sample_data:
                ledger.seed_sample_data()
        self.ledger = ledger
        self.network = NetworkService(self.settings)
        logger.info(f"ServiceContainer ready: {self.ledger!r}")
