# domain/generators.py
import numpy as np

from pathsearch.domain.entities.geography import Point
from pathsearch.domain.graph import Graph2D


def random_graph(
    rng: np.random.Generator,
    n_nodes: int,
    *,
    extent: float = 100.0,
    out_degree: int = 3,
    detour: float = 0.5,
) -> Graph2D:
    """
    Nodes uniform in [0, extent]^2, each with `out_degree` connections to distinct
    random targets. Cost = straight-line length * (1 + U[0, detour]) so the
    Euclidean heuristic never overestimates.
    """
    if n_nodes < 1:
        raise ValueError(f"n_nodes must be >= 1, got {n_nodes}")
    if detour < 0:
        raise ValueError(f"detour must be >= 0, got {detour}")
    g = Graph2D()
    xy = rng.uniform(0.0, extent, size=(n_nodes, 2))
    for x, y in xy:
        g.add_node(Point(float(x), float(y)))

    k = min(out_degree, n_nodes - 1)
    if k <= 0:
        return g
    for u in range(n_nodes):
        others = np.delete(np.arange(n_nodes), u)
        targets = rng.choice(others, size=k, replace=False)
        for v in targets:
            v = int(v)
            length = g.get_node(u).point.distance(g.get_node(v).point)
            g.add_connection(u, v, length * (1.0 + float(rng.uniform(0.0, detour))))
    return g
