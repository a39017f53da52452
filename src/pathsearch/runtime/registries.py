# runtime/registries.py
from collections.abc import Callable
from typing import Any

from pathsearch.app.protocols import Heuristic
from pathsearch.config.models import (
    GraphUnion,
    GridGraphModel,
    HeuristicModel,
    InlineGraphModel,
    RandomGraphModel,
)
from pathsearch.domain.entities.geography import Point
from pathsearch.domain.generators import random_graph
from pathsearch.domain.graph import Graph2D, grid_graph
from pathsearch.search import heuristics
from pathsearch.search.heuristics import Scaled

GraphFactory = Callable[[Any, dict], Graph2D]

_heuristic_registry: dict[str, Heuristic] = {}
_graph_registry: dict[str, GraphFactory] = {}


# ------------------- Heuristics ---------------------------


def register_heuristic(kind: str, fn: Heuristic) -> Heuristic:
    _heuristic_registry[kind] = fn
    return fn


for _fn in (
    heuristics.zero,
    heuristics.manhattan,
    heuristics.euclidean,
    heuristics.squared_euclidean,
    heuristics.octile,
    heuristics.chebyshev,
):
    register_heuristic(_fn.__name__, _fn)


def make_heuristic(cfg: HeuristicModel) -> Heuristic:
    try:
        fn = _heuristic_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown heuristic kind {cfg.kind!r}")
    return fn if cfg.scale == 1.0 else Scaled(fn, cfg.scale)


# ------------------- Graphs ---------------------------


def register_graph(kind: str):
    def deco(fn: GraphFactory):
        _graph_registry[kind] = fn
        return fn

    return deco


def make_graph(cfg: GraphUnion, *, deps: dict) -> Graph2D:
    try:
        factory = _graph_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown graph kind {cfg.kind!r}")
    return factory(cfg, deps)


@register_graph("grid")
def _make_grid(cfg: GridGraphModel, deps):
    return grid_graph(
        cfg.width,
        cfg.height,
        cell_size=cfg.cell_size,
        diagonal=cfg.diagonal,
        blocked=cfg.blocked,
    )


@register_graph("random")
def _make_random(cfg: RandomGraphModel, deps):
    rng = deps["rng"]
    return random_graph(
        rng,
        cfg.n_nodes,
        extent=cfg.extent,
        out_degree=cfg.out_degree,
        detour=cfg.detour,
    )


@register_graph("inline")
def _make_inline(cfg: InlineGraphModel, deps):
    g = Graph2D()
    for n in cfg.nodes:
        g.add_node(Point(n.x, n.y), index=n.index)
    for c in cfg.connections:
        g.add_connection(c.from_index, c.to_index, c.cost)
    return g
