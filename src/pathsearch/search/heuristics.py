# search/heuristics.py
"""
Stock heuristics over absolute axis deltas (dx, dy).

Pick one consistent with the graph's connection costs: `euclidean` for
straight-line costs, `manhattan` for 4-connected grids, `octile` for
8-connected grids. `squared_euclidean` overestimates and trades optimality
for fewer expansions.
"""

import math

SQRT2_MINUS_1 = math.sqrt(2.0) - 1.0


def zero(dx: float, dy: float) -> float:
    # degenerates the search to Dijkstra
    return 0.0


def manhattan(dx: float, dy: float) -> float:
    return float(dx + dy)


def euclidean(dx: float, dy: float) -> float:
    return math.hypot(dx, dy)


def squared_euclidean(dx: float, dy: float) -> float:
    return float(dx * dx + dy * dy)


def octile(dx: float, dy: float) -> float:
    return float(max(dx, dy) + SQRT2_MINUS_1 * min(dx, dy))


def chebyshev(dx: float, dy: float) -> float:
    return float(max(dx, dy))


class Scaled:
    """Multiply another heuristic by a non-negative factor (e.g. cost units per meter)."""

    def __init__(self, fn, scale: float):
        if scale < 0:
            raise ValueError(f"heuristic scale must be >= 0, got {scale}")
        self.fn, self.scale = fn, scale

    def __call__(self, dx: float, dy: float) -> float:
        return self.scale * self.fn(dx, dy)

    def __repr__(self) -> str:
        return f"Scaled({getattr(self.fn, '__name__', self.fn)!s}, {self.scale})"
