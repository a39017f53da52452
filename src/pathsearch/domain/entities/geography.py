import math
from dataclasses import dataclass


# Core geometry types shared by graphs, heuristics and routing
@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def delta(self, other: "Point") -> tuple[float, float]:
        """Absolute per-axis displacement to `other`."""
        return abs(other.x - self.x), abs(other.y - self.y)

    def distance(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Node:
    index: int
    point: Point


@dataclass(frozen=True, eq=False)
class Connection:
    # identity equality: parallel connections between the same nodes are distinct
    from_index: int
    to_index: int
    cost: float


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    cost: float
    connection: Connection | None = None


@dataclass
class Path:
    nodes: list[Node]
    segments: list[Segment]
    total_cost: float
