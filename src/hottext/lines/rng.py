from __future__ import annotations

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Capability the store selects lines with."""

    def choose_index(self, n: int) -> int:
        """
        Returns an index in range(n), each with probability 1/n.
        n is always >= 1 when called by VariantStore.
        """
        ...


class PyRandomSource:
    """RandomSource backed by a random.Random instance."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def choose_index(self, n: int) -> int:
        if n < 1:
            raise ValueError(f"cannot choose among {n} items")
        return self.rng.randrange(n)


class SeededRandomSource(PyRandomSource):
    def __init__(self, seed: int):
        super().__init__(random.Random(seed))
        self.seed = seed


def default_random_source(seed: Optional[int] = None) -> PyRandomSource:
    """
    Process-level source used when the caller injects none.
    An explicit seed wins, then HOTTEXT_SEED; otherwise it is non-deterministic.
    """
    if seed is None:
        from hottext.config import Settings

        seed = Settings.from_env().seed

    if seed is None:
        return PyRandomSource()
    return SeededRandomSource(seed)
