# pathsearch/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from pathsearch.app.protocols import Heuristic
from pathsearch.config.models import ScenarioModel
from pathsearch.domain.graph import Graph2D
from pathsearch.io.recorder import JsonlSink, Recorder
from pathsearch.io.search_logging import SearchLogging
from pathsearch.runtime.registries import make_graph, make_heuristic
from pathsearch.runtime.rng import RNGRegistry
from pathsearch.search.astar import AStar, SearchResult
from pathsearch.search.hooks import NoopHooks
from pathsearch.search.router import NetworkRouter


@dataclass
class App:
    model: ScenarioModel
    rng: RNGRegistry
    graph: Graph2D
    heuristic: Heuristic
    finder: AStar
    router: NetworkRouter

    def run_queries(self) -> list[SearchResult]:
        return [self.finder.search(q.start, q.goal) for q in self.model.queries]


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) RNG & graph
    rng_registry = RNGRegistry(model.seed, scenario=model.name)
    graph = make_graph(model.graph, deps={"rng": rng_registry.substream("graph", model.graph.kind)})

    # 2) Hooks
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            recorder=recorder or Recorder(JsonlSink()),
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 3) Search
    heuristic = make_heuristic(model.search.heuristic)
    finder = AStar(graph, heuristic, hooks=hooks, max_expansions=model.search.max_expansions)
    router = NetworkRouter(graph, heuristic, hooks=hooks, max_expansions=model.search.max_expansions)
    return App(model, rng_registry, graph, heuristic, finder, router)
