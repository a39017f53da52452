# io/search_logging.py
import json
import logging
import sys
from dataclasses import dataclass

from pathsearch.domain.entities.geography import Node
from pathsearch.io.recorder import Recorder
from pathsearch.search.hooks import NoopHooks


def _default_json_logger(name="pathsearch", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


@dataclass
class SearchSummary:
    run_id: str
    start: int
    goal: int
    found: bool
    cost: float | None
    length: int
    expanded: int
    reopened: int
    reason: str | None
    wall_ms: float


class SearchLogging(NoopHooks):
    """
    Structured JSON logs for search lifecycle; summaries also go to the recorder.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(getattr(logging, level), msg, extra={"extra": {"run_id": self.run_id, **extra}})

    # search lifecycle

    def search_start(self, *, start: Node, goal: Node, h0: float):
        self._emit("INFO", "search_start", start=start.index, goal=goal.index, h0=h0)

    def expand(self, node: Node, *, g: float, f: float, expanded: int, open_size: int):
        if self.debug and (expanded % self.sample_every) == 0:
            self._emit("DEBUG", "expand", node=node.index, g=g, f=f, expanded=expanded, open=open_size)

    def reopen(self, node: Node, *, old_g: float, new_g: float):
        if self.debug:
            self._emit("DEBUG", "reopen", node=node.index, old_g=old_g, new_g=new_g)

    def search_end(self, *, start: Node, goal: Node, found: bool, **extra):
        cost = extra.get("cost")
        summary = SearchSummary(
            run_id=self.run_id,
            start=start.index,
            goal=goal.index,
            found=found,
            cost=cost if found else None,
            length=extra.get("length", 0),
            expanded=extra.get("expanded", 0),
            reopened=extra.get("reopened", 0),
            reason=extra.get("reason"),
            wall_ms=extra.get("wall_ms", 0.0),
        )
        self._emit(
            "INFO" if found else "WARNING",
            "search_end",
            start=summary.start,
            goal=summary.goal,
            found=found,
            cost=summary.cost,
            length=summary.length,
            expanded=summary.expanded,
            reopened=summary.reopened,
            reason=summary.reason,
            wall_ms=round(summary.wall_ms, 3),
        )
        if self.recorder:
            self.recorder.emit(summary)

    def error(self, *, reason: str, **kw):
        self._emit("ERROR", "search_error", reason=reason, **kw)
