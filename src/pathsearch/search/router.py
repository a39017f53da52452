import math

from pathsearch.app.protocols import Heuristic, NavGraph, RoutePlanner, SearchHooks
from pathsearch.domain.entities.geography import Path, Segment
from pathsearch.search.astar import AStar
from pathsearch.search.paths import cheapest_connection


class NetworkRouter(RoutePlanner):
    def __init__(
        self,
        graph: NavGraph,
        heuristic: Heuristic,
        *,
        hooks: SearchHooks | None = None,
        max_expansions: int | None = None,
    ):
        self.G = graph
        self.finder = AStar(graph, heuristic, hooks=hooks, max_expansions=max_expansions)

    def route(self, a, b):
        nodes = self.finder.find_path(a, b)
        if not nodes:
            return None
        segs, total = [], 0.0
        for u, v in zip(nodes, nodes[1:]):
            conn = cheapest_connection(self.G, u, v)
            total += conn.cost
            segs.append(Segment(self.G.get_node_pos(u), self.G.get_node_pos(v), conn.cost, conn))
        return Path(nodes, segs, total)

    def distance(self, a, b):
        path = self.route(a, b)
        return math.inf if path is None else path.total_cost
