# runtime/rng.py
from __future__ import annotations

from functools import cache
from zlib import crc32

import numpy as np


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _crc32_u32(s: str) -> int:
    return _u32(crc32(s.encode("utf-8")))


class RNGRegistry:
    """
    Deterministic registry of numpy.random.Generator streams.
    Derivation path: [master_seed, scenario, stream, *parts]
    """

    def __init__(self, master_seed: int, *, scenario: str | int = 0):
        self.master_seed = _u32(master_seed)
        self.scenario_tag = _crc32_u32(str(scenario))

    @cache
    def substream(self, name: str, *parts: int | str) -> np.random.Generator:
        """
        Get (and cache) a named generator, optionally sub-keyed.
        Example: gen = reg.substream("graph", "random", 3)
        """
        key = [_crc32_u32(name)]
        for p in parts:
            key.append(_u32(int(p)) if isinstance(p, (int, np.integer)) else _crc32_u32(str(p)))
        ss = np.random.SeedSequence(entropy=[self.master_seed, self.scenario_tag, *key])
        return np.random.Generator(np.random.PCG64(ss))

    def stream(self, name: str) -> np.random.Generator:
        return self.substream(name)
