# search/errors.py


class SearchError(Exception):
    """Base class for pathsearch failures raised as exceptions."""


class InvalidNodeError(SearchError, LookupError):
    """Caller supplied a node index or node object the graph does not own."""

    def __init__(self, ref, msg: str | None = None):
        self.ref = ref
        super().__init__(msg or f"invalid node reference {ref!r}")


class PathReconstructionError(SearchError, RuntimeError):
    """Backtrace could not locate a predecessor record; bookkeeping is broken."""
