# search/paths.py
import math
from collections.abc import Sequence

from pathsearch.app.protocols import NavGraph
from pathsearch.domain.entities.geography import Connection, Node


def cheapest_connection(graph: NavGraph, a: Node, b: Node) -> Connection | None:
    best = None
    for conn in graph.get_node_connections(a.index):
        if conn.to_index == b.index and (best is None or conn.cost < best.cost):
            best = conn
    return best


def is_valid_path(graph: NavGraph, nodes: Sequence[Node]) -> bool:
    """True when every consecutive pair is joined by a connection in travel direction."""
    if not nodes:
        return False
    return all(cheapest_connection(graph, a, b) is not None for a, b in zip(nodes, nodes[1:]))


def path_cost(graph: NavGraph, nodes: Sequence[Node]) -> float:
    """Sum of the cheapest connection costs along `nodes`; inf if a hop is missing."""
    total = 0.0
    for a, b in zip(nodes, nodes[1:]):
        conn = cheapest_connection(graph, a, b)
        if conn is None:
            return math.inf
        total += conn.cost
    return total
