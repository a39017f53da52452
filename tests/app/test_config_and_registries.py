import pytest
from pydantic import ValidationError

from pathsearch.config.models import GridGraphModel, HeuristicModel, InlineGraphModel, ScenarioModel
from pathsearch.runtime.registries import make_graph, make_heuristic, register_heuristic
from pathsearch.runtime.rng import RNGRegistry
from pathsearch.search import heuristics
from pathsearch.search.heuristics import Scaled

INLINE = {
    "kind": "inline",
    "nodes": [{"index": 0, "x": 0, "y": 0}, {"index": 1, "x": 3, "y": 4}],
    "connections": [{"from": 0, "to": 1}, {"from": 1, "to": 0, "cost": 2.0}],
}


def test_scenario_defaults():
    m = ScenarioModel.model_validate({"name": "s", "graph": {"kind": "grid", "width": 2, "height": 2}})
    assert isinstance(m.graph, GridGraphModel)
    assert m.search.heuristic.kind == "euclidean"
    assert m.search.max_expansions is None
    assert m.log.level == "INFO"
    assert m.queries == []


@pytest.mark.parametrize(
    "graph",
    [
        {**INLINE, "connections": [{"from": 0, "to": 9}]},
        {**INLINE, "connections": [{"from": 0, "to": 1, "cost": -1.0}]},
        {**INLINE, "nodes": [{"index": 0, "x": 0, "y": 0}, {"index": 0, "x": 1, "y": 1}]},
        {"kind": "grid", "width": 0, "height": 2},
        {"kind": "grid", "width": 2, "height": 2, "blocked": [(2, 0)]},
        {"kind": "random", "n_nodes": 5, "detour": -0.1},
        {"kind": "hex", "size": 3},
    ],
)
def test_bad_graph_configs_are_rejected(graph):
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate({"name": "bad", "graph": graph})


def test_search_and_log_validation():
    base = {"name": "s", "graph": {"kind": "grid", "width": 2, "height": 2}}
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate({**base, "search": {"max_expansions": 0}})
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate({**base, "search": {"heuristic": {"scale": -2}}})
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate({**base, "log": {"level": "TRACE"}})
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate({**base, "surprise": True})


def test_make_heuristic():
    assert make_heuristic(HeuristicModel(kind="manhattan")) is heuristics.manhattan
    scaled = make_heuristic(HeuristicModel(kind="octile", scale=2.0))
    assert isinstance(scaled, Scaled)
    assert scaled(1.0, 0.0) == pytest.approx(2.0)
    with pytest.raises(ValueError, match="Unknown heuristic kind"):
        make_heuristic(HeuristicModel(kind="telepathy"))


def test_register_custom_heuristic():
    register_heuristic("double_chebyshev", lambda dx, dy: 2 * max(dx, dy))
    h = make_heuristic(HeuristicModel(kind="double_chebyshev"))
    assert h(1.0, 3.0) == 6.0


def test_make_graph_kinds():
    deps = {"rng": RNGRegistry(1).stream("graph")}
    grid = make_graph(GridGraphModel(width=3, height=2), deps=deps)
    assert len(grid) == 6

    inline = make_graph(InlineGraphModel.model_validate(INLINE), deps=deps)
    costs = [c.cost for c in inline.connections]
    assert costs == pytest.approx([5.0, 2.0])

    m = ScenarioModel.model_validate({"name": "r", "graph": {"kind": "random", "n_nodes": 7}})
    rnd = make_graph(m.graph, deps=deps)
    assert len(rnd) == 7 and len(rnd.connections) == 21
