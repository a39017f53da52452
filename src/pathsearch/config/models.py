from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- GRAPHS ---------------------


class GridGraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["grid"] = "grid"
    width: int = Field(ge=1)
    height: int = Field(ge=1)
    cell_size: float = Field(default=1.0, gt=0)
    diagonal: bool = False
    blocked: list[tuple[int, int]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_blocked(self):
        for c, r in self.blocked:
            if not (0 <= c < self.width and 0 <= r < self.height):
                raise ValueError(f"blocked cell {(c, r)} outside {self.width}x{self.height} grid")
        return self


class RandomGraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["random"] = "random"
    n_nodes: int = Field(ge=1)
    extent: float = Field(default=100.0, gt=0)
    out_degree: int = Field(default=3, ge=0)
    detour: float = Field(default=0.5, ge=0)


class InlineNodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    index: int
    x: float
    y: float


class InlineConnectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    from_index: int = Field(alias="from")
    to_index: int = Field(alias="to")
    cost: float | None = None  # None => straight-line length

    @field_validator("cost")
    @classmethod
    def _nonneg(cls, v: float | None, info: ValidationInfo) -> float | None:
        if v is not None and (not isfinite(v) or v < 0):
            raise ValueError(f"{info.field_name} must be finite and >= 0")
        return v


class InlineGraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["inline"] = "inline"
    nodes: list[InlineNodeModel]
    connections: list[InlineConnectionModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_refs(self):
        seen = [n.index for n in self.nodes]
        if len(seen) != len(set(seen)):
            raise ValueError("node indices must be unique")
        known = set(seen)
        for c in self.connections:
            for ref in (c.from_index, c.to_index):
                if ref not in known:
                    raise ValueError(f"connection references unknown node {ref}")
        return self


GraphUnion = Annotated[
    GridGraphModel | RandomGraphModel | InlineGraphModel,
    Field(discriminator="kind"),
]

# ----------------- SEARCH ---------------------


class HeuristicModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: str = "euclidean"  # any name in the heuristic registry
    scale: float = Field(default=1.0, ge=0)


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    heuristic: HeuristicModel = Field(default_factory=HeuristicModel)
    max_expansions: int | None = Field(default=None, ge=1)


class QueryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    start: int
    goal: int


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    seed: int = 123
    log: LogModel = LogModel()
    graph: GraphUnion
    search: SearchModel = Field(default_factory=SearchModel)
    queries: list[QueryModel] = Field(default_factory=list)
