# domain/graph.py
import math
from collections.abc import Iterable, Sequence

from pathsearch.domain.entities.geography import Connection, Node, Point
from pathsearch.search.errors import InvalidNodeError


class Graph2D:
    """
    In-memory directed graph over 2D nodes.
    Indices are stable for the graph's lifetime; connections keep insertion order.
    """

    def __init__(self):
        self._nodes: dict[int, Node] = {}
        self._out: dict[int, list[Connection]] = {}
        self._next = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, index) -> bool:
        return index in self._nodes

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes.values())

    @property
    def connections(self) -> list[Connection]:
        return [c for conns in self._out.values() for c in conns]

    # --------------- building -----------------

    def add_node(self, point: Point, index: int | None = None) -> Node:
        if index is None:
            index = self._next
        if index in self._nodes:
            raise ValueError(f"node index {index} already in graph")
        node = Node(index, point)
        self._nodes[index] = node
        self._out[index] = []
        self._next = max(self._next, index + 1)
        return node

    def add_connection(self, from_index: int, to_index: int, cost: float | None = None) -> Connection:
        a, b = self.get_node(from_index), self.get_node(to_index)
        if cost is None:
            cost = a.point.distance(b.point)
        if not math.isfinite(cost) or cost < 0:
            raise ValueError(f"connection cost must be finite and >= 0, got {cost}")
        conn = Connection(from_index, to_index, float(cost))
        self._out[from_index].append(conn)
        return conn

    def add_bidirectional(self, a: int, b: int, cost: float | None = None) -> tuple[Connection, Connection]:
        return self.add_connection(a, b, cost), self.add_connection(b, a, cost)

    # --------------- NavGraph -----------------

    def get_node(self, index: int) -> Node:
        try:
            return self._nodes[index]
        except KeyError:
            raise InvalidNodeError(index) from None

    def get_node_pos(self, node: Node) -> Point:
        return self.get_node(node.index).point

    def get_node_connections(self, index: int) -> Sequence[Connection]:
        try:
            return tuple(self._out[index])
        except KeyError:
            raise InvalidNodeError(index) from None


def grid_index(col: int, row: int, width: int) -> int:
    return row * width + col


def grid_graph(
    width: int,
    height: int,
    *,
    cell_size: float = 1.0,
    diagonal: bool = False,
    blocked: Iterable[tuple[int, int]] = (),
) -> Graph2D:
    """
    Build a width x height grid; node (col, row) sits at the cell centre and has
    index row * width + col. Connections are bidirectional with Euclidean cost.
    Blocked cells keep their node but get no connections in or out.
    """
    if width < 1 or height < 1:
        raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
    walls = set(blocked)
    outside = [(c, r) for c, r in walls if not (0 <= c < width and 0 <= r < height)]
    if outside:
        raise ValueError(f"blocked cells outside {width}x{height} grid: {sorted(outside)}")
    g = Graph2D()
    for row in range(height):
        for col in range(width):
            g.add_node(
                Point((col + 0.5) * cell_size, (row + 0.5) * cell_size),
                index=grid_index(col, row, width),
            )

    steps = [(1, 0), (-1, 0), (0, 1), (0, -1)]
    if diagonal:
        steps += [(1, 1), (1, -1), (-1, 1), (-1, -1)]
    for row in range(height):
        for col in range(width):
            if (col, row) in walls:
                continue
            for dc, dr in steps:
                c, r = col + dc, row + dr
                if not (0 <= c < width and 0 <= r < height) or (c, r) in walls:
                    continue
                g.add_connection(grid_index(col, row, width), grid_index(c, r, width))
    return g
