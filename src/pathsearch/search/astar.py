# search/astar.py
"""
A* shortest-path search over a borrowed `NavGraph`.

Open set: a heap of (f, seq, record) plus a node-keyed index that decides
which heap entry is live. `seq` grows with every insertion, so among equal
f-costs the record inserted first is expanded first, and a replacement
record queues behind everything already inserted. Closed set: node-keyed
dict; a cheaper path to a closed node reopens it.
"""

import heapq
import time
from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Literal

from pathsearch.app.protocols import Heuristic, NavGraph, SearchHooks
from pathsearch.domain.entities.geography import Connection, Node
from pathsearch.search.errors import InvalidNodeError, PathReconstructionError
from pathsearch.search.hooks import NoopHooks


@dataclass(eq=False)
class NodeRecord:
    node: Node
    connection: Connection | None  # connection used to reach node; None for start
    g: float  # cost so far
    f: float  # g + heuristic to goal


@dataclass(frozen=True)
class NoPathFound:
    start: Node
    goal: Node
    expanded: int = 0
    reason: Literal["exhausted", "budget"] = "exhausted"

    def __bool__(self) -> bool:
        return False


@dataclass
class SearchResult:
    start: Node
    goal: Node
    path: list[Node] | None
    cost: float
    expanded: int
    reopened: int
    reason: Literal["exhausted", "budget"] | None = None

    @property
    def found(self) -> bool:
        return self.path is not None

    def outcome(self) -> list[Node] | NoPathFound:
        if self.path is None:
            return NoPathFound(self.start, self.goal, self.expanded, self.reason or "exhausted")
        return self.path


class _Relax(Enum):
    SKIP = "skip"
    INSERT = "insert"
    REPLACE_OPEN = "replace_open"
    REOPEN = "reopen"


class AStar:
    def __init__(
        self,
        graph: NavGraph,
        heuristic: Heuristic,
        *,
        hooks: SearchHooks | None = None,
        max_expansions: int | None = None,
    ):
        if max_expansions is not None and max_expansions < 1:
            raise ValueError(f"max_expansions must be >= 1, got {max_expansions}")
        self.graph = graph
        self.heuristic = heuristic
        self.max_expansions = max_expansions
        self._hooks = hooks or NoopHooks()

    def find_path(self, start: Node | int, goal: Node | int) -> list[Node] | NoPathFound:
        """Ordered start..goal nodes, or a falsy NoPathFound."""
        return self.search(start, goal).outcome()

    def search(self, start: Node | int, goal: Node | int) -> SearchResult:
        t0 = time.perf_counter()
        start, goal = self._resolve(start), self._resolve(goal)
        h0 = self._heuristic_cost(start, goal)
        self._hooks.search_start(start=start, goal=goal, h0=h0)

        if start.index == goal.index:
            result = SearchResult(start, goal, [start], 0.0, expanded=0, reopened=0)
            self._finish(result, t0)
            return result

        heap: list[tuple[float, int, NodeRecord]] = []
        open_: dict[int, NodeRecord] = {}
        closed: dict[int, NodeRecord] = {}
        seq = count()

        def push(rec: NodeRecord) -> None:
            open_[rec.node.index] = rec
            heapq.heappush(heap, (rec.f, next(seq), rec))

        push(NodeRecord(start, None, 0.0, h0))
        current: NodeRecord | None = None
        expanded = reopened = 0
        reason = "exhausted"

        while heap:
            _, _, rec = heapq.heappop(heap)
            if open_.get(rec.node.index) is not rec:
                continue  # superseded by a cheaper record
            if rec.node.index == goal.index:
                current = rec
                break
            if self.max_expansions is not None and expanded >= self.max_expansions:
                reason = "budget"
                break

            expanded += 1
            self._hooks.expand(rec.node, g=rec.g, f=rec.f, expanded=expanded, open_size=len(open_))

            for conn in self.graph.get_node_connections(rec.node.index):
                g = conn.cost + rec.g
                action = self._relax(conn.to_index, g, open_, closed)
                if action is _Relax.SKIP:
                    continue
                if action is _Relax.REOPEN:
                    stale = closed.pop(conn.to_index)
                    reopened += 1
                    self._hooks.reopen(stale.node, old_g=stale.g, new_g=g)
                target = self.graph.get_node(conn.to_index)
                push(NodeRecord(target, conn, g, g + self._heuristic_cost(target, goal)))

            if open_.get(rec.node.index) is rec:
                del open_[rec.node.index]
            closed[rec.node.index] = rec

        if current is None:
            result = SearchResult(
                start, goal, None, float("inf"), expanded=expanded, reopened=reopened, reason=reason
            )
        else:
            path = self._reconstruct(current, start, open_, closed)
            result = SearchResult(start, goal, path, current.g, expanded=expanded, reopened=reopened)
        self._finish(result, t0)
        return result

    # --------------- internals -----------------

    @staticmethod
    def _relax(
        to_index: int, g: float, open_: dict[int, NodeRecord], closed: dict[int, NodeRecord]
    ) -> _Relax:
        old = closed.get(to_index)
        if old is not None:
            return _Relax.SKIP if old.g <= g else _Relax.REOPEN
        old = open_.get(to_index)
        if old is not None:
            # push() overwrites the index entry; the old heap entry goes stale
            return _Relax.SKIP if old.g <= g else _Relax.REPLACE_OPEN
        return _Relax.INSERT

    def _reconstruct(
        self,
        rec: NodeRecord,
        start: Node,
        open_: dict[int, NodeRecord],
        closed: dict[int, NodeRecord],
    ) -> list[Node]:
        path = [rec.node]
        budget = len(open_) + len(closed)
        while rec.node.index != start.index:
            conn = rec.connection
            prev = None
            if conn is not None and budget > 0:
                # predecessor may sit in open if it was reopened after rec was pushed
                prev = closed.get(conn.from_index) or open_.get(conn.from_index)
            if prev is None:
                self._hooks.error(reason="reconstruct", node=rec.node.index)
                raise PathReconstructionError(
                    f"no predecessor record for node {rec.node.index} while backtracking to {start.index}"
                )
            path.append(prev.node)
            rec = prev
            budget -= 1
        path.reverse()
        return path

    def _resolve(self, ref: Node | int) -> Node:
        index = ref.index if isinstance(ref, Node) else ref
        try:
            node = self.graph.get_node(index)
        except InvalidNodeError:
            self._hooks.error(reason="invalid_node", ref=repr(ref))
            raise
        if isinstance(ref, Node) and node != ref:
            self._hooks.error(reason="invalid_node", ref=repr(ref))
            raise InvalidNodeError(ref, f"node {ref!r} does not belong to this graph")
        return node

    def _heuristic_cost(self, node: Node, goal: Node) -> float:
        dx, dy = self.graph.get_node_pos(node).delta(self.graph.get_node_pos(goal))
        return self.heuristic(dx, dy)

    def _finish(self, result: SearchResult, t0: float) -> None:
        self._hooks.search_end(
            start=result.start,
            goal=result.goal,
            found=result.found,
            cost=result.cost,
            length=len(result.path) if result.path else 0,
            expanded=result.expanded,
            reopened=result.reopened,
            reason=result.reason,
            wall_ms=(time.perf_counter() - t0) * 1000,
        )


def find_path(
    graph: NavGraph,
    heuristic: Heuristic,
    start: Node | int,
    goal: Node | int,
    **kw,
) -> list[Node] | NoPathFound:
    return AStar(graph, heuristic, **kw).find_path(start, goal)
