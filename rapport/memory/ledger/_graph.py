"""NetworkX graph projection of RelationshipLedger.

The graph is a derived cache, rebuilt lazily after any mutation. It is what
the force-directed renderer consumes and what the traversal helpers walk.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import networkx as nx
from networkx import MultiGraph

from rapport.memory.entities import Person

if TYPE_CHECKING:
    from . import RelationshipLedger

logger = logging.getLogger(__name__)


def invalidate_graph(ledger: RelationshipLedger) -> None:
    """Drop the cached graph so the next access rebuilds it."""
    ledger._graph = None


def rebuild_graph(ledger: RelationshipLedger) -> None:
    """Rebuild the NetworkX graph from ledger state.

    Callers must hold ledger._lock before calling this function.

    Args:
        ledger: RelationshipLedger instance.
    """
    graph = nx.MultiGraph()

    for person in ledger._people.values():
        graph.add_node(person.id, name=person.name, avatar=person.avatar, x=person.x, y=person.y)

    # One edge per relationship, keyed by relationship id so duplicates of a
    # pair stay distinct
    for rel in ledger._relationships.values():
        graph.add_edge(
            rel.person1_id,
            rel.person2_id,
            key=rel.id,
            type=rel.type,
            health_score=rel.health_score,
        )

    ledger._graph = graph
    logger.debug(
        f"Graph rebuilt: {graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges"
    )


def get_graph(ledger: RelationshipLedger) -> MultiGraph:
    """Get the NetworkX graph (lazy-loaded).

    Args:
        ledger: RelationshipLedger instance.

    Returns:
        Undirected multigraph of people and relationships.
    """
    with ledger._lock:
        if ledger._graph is None:
            rebuild_graph(ledger)
        assert ledger._graph is not None  # Guaranteed by rebuild_graph
        return ledger._graph


def find_path(ledger: RelationshipLedger, person_a: str, person_b: str) -> list[str]:
    """Find the shortest chain of relationships between two people.

    Args:
        ledger: RelationshipLedger instance.
        person_a: Starting person ID
        person_b: Target person ID

    Returns:
        List of person IDs forming the path, empty if no path exists
    """
    graph = get_graph(ledger)
    try:
        path: list[str] = nx.shortest_path(graph, person_a, person_b)
        return path
    except (nx.NetworkXNoPath, nx.NodeNotFound):
        return []


def get_connected_people(ledger: RelationshipLedger, person_id: str, max_depth: int = 1) -> list[Person]:
    """Get all people within max_depth relationships of a person.

    Args:
        ledger: RelationshipLedger instance.
        person_id: Starting person ID
        max_depth: Maximum number of hops

    Returns:
        Connected people (excluding the starting person), nearest first
    """
    logger.debug("get_connected_people called: person_id=%s, max_depth=%d", person_id, max_depth)
    graph = get_graph(ledger)
    if person_id not in graph:
        return []

    distances = nx.single_source_shortest_path_length(graph, person_id, cutoff=max_depth)
    ordered = sorted((d, node) for node, d in distances.items() if node != person_id)

    with ledger._lock:
        # Relationships may name people that were never added
        return [ledger._people[node] for _, node in ordered if node in ledger._people]
