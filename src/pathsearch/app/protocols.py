from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from pathsearch.domain.entities.geography import Connection, Node, Path, Point


# ------------- Graph access --------------------
@runtime_checkable
class NavGraph(Protocol):
    """
    Read-only view of a directed, weighted graph.
    Responsibilities:
    • Resolve a node index to its node (raise InvalidNodeError when unknown).
    • Report a node's 2D position for heuristic evaluation.
    • List a node's outgoing connections (cost >= 0, parallel edges allowed).
    The search never mutates the graph; concurrent searches need concurrent-safe reads.
    """

    def get_node(self, index: int) -> Node: ...
    def get_node_pos(self, node: Node) -> Point: ...
    def get_node_connections(self, index: int) -> Sequence[Connection]: ...


@runtime_checkable
class Heuristic(Protocol):
    """
    Estimated remaining cost from absolute axis deltas (dx, dy), both >= 0.
    Must not overestimate for the returned path to be optimal; nothing checks this.
    """

    def __call__(self, dx: float, dy: float) -> float: ...


@runtime_checkable
class RoutePlanner(Protocol):
    """
    Responsibilities:
      • Compute a path between two node indices.
      • Compute network cost between node indices.
    """

    def route(self, a: int, b: int) -> Path | None: ...
    def distance(self, a: int, b: int) -> float: ...


# --------------- Observability -------------------------


class SearchHooks(Protocol):
    def search_start(self, *, start: Node, goal: Node, h0: float): ...
    def expand(self, node: Node, *, g: float, f: float, expanded: int, open_size: int): ...
    def reopen(self, node: Node, *, old_g: float, new_g: float): ...
    def search_end(self, *, start: Node, goal: Node, found: bool, **extra): ...
    def error(self, *, reason: str, **kw): ...
