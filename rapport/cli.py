"""Rapport - relationship health tracking for small social networks.

Prints the current state of the network: every relationship with its type,
health score and health label, followed by the network events.

Usage:
    python -m rapport                    # Seed the demo network and print it
    python -m rapport --no-seed          # Start from an empty network
    python -m rapport --log-level DEBUG  # Verbose logging
"""

import argparse
import logging
import sys
from dataclasses import replace

from rapport.memory.catalog import health_label
from rapport.memory.ledger import RelationshipLedger
from rapport.utils.exceptions import ConfigError
from rapport.utils.logging_config import log_performance, setup_logging

logger = logging.getLogger(__name__)


def print_network(ledger: RelationshipLedger) -> None:
    """Print people, relationships and network events to stdout."""
    people = {person.id: person.name for person in ledger.list_people()}
    print(f"People ({len(people)}): {', '.join(people.values()) or '-'}")

    relationships = ledger.list_relationships()
    print(f"\nRelationships ({len(relationships)}):")
    for rel in relationships:
        name1 = people.get(rel.person1_id, "Unknown")
        name2 = people.get(rel.person2_id, "Unknown")
        print(
            f"  {name1} & {name2}: {rel.type}, health {rel.health_score:+d} "
            f"({health_label(rel.health_score)}), {len(rel.events)} event(s)"
        )

    network_events = ledger.list_network_events()
    if network_events:
        print(f"\nNetwork events ({len(network_events)}):")
        for event in network_events:
            print(f"  {event.date} {event.category}: {event.description} ({len(event.impacts)} impacts)")


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments, defaults to sys.argv[1:].

    Returns:
        Process exit status.
    """
    parser = argparse.ArgumentParser(description="Rapport - relationship health tracking")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (defaults to the value in settings.json)",
    )
    parser.add_argument("--no-seed", action="store_true", help="Do not load the demo network")
    parser.add_argument("--no-log-file", action="store_true", help="Log to console only")
    args = parser.parse_args(argv)

    from rapport.services import ServiceContainer
    from rapport.settings import Settings

    try:
        settings = Settings.load()
    except ConfigError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 1

    if args.no_seed:
        # Leave the cached instance untouched
        settings = replace(settings, seed_sample_data=False)

    setup_logging(
        level=args.log_level or settings.log_level,
        log_file=None if args.no_log_file else settings.log_file,
    )

    with log_performance(logger, "startup"):
        services = ServiceContainer(settings)

    print_network(services.ledger)
    return 0

