"""Open-addressing probe sequences: linear and double hashing."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from typing import Any

from .strhash import StringHash

DOUBLE_HASH_MOD_VALUES = (
    7, 19, 43, 89, 193, 389, 787, 1583, 3191, 6397, 12841, 25703, 51431, 102871,
    205721, 411503, 823051, 1646221, 3292463, 6584957, 13169963, 26339921, 52679927,
    105359939, 210719881, 421439749, 842879563, 1685759113,
)


class ProbingExhausted(LookupError):
    """Raised when a probe sequence has visited as many slots as the table has."""


def modulus_for_table_size(table_size: int) -> int:
    """Return the largest double-hash modulus below ``table_size``.

    The smallest modulus is returned when none is smaller than the table.
    """
    modulus = DOUBLE_HASH_MOD_VALUES[0]
    for value in DOUBLE_HASH_MOD_VALUES:
        if value >= table_size:
            break
        modulus = value
    return modulus


class Prober:
    """Probe sequence with a fixed step of one slot per attempt.

    ``init`` starts a new sequence; each call to ``next`` yields the next
    slot index, and after ``m`` attempts ``ProbingExhausted`` is raised.
    """

    def __init__(self) -> None:
        self.start = 0
        self.m = 0
        self.num_probes = 0
        self._step = 1

    def init(self, start: int, m: int, key: Any) -> None:
        """Begin a sequence at ``start`` over a table of ``m`` slots."""
        self.start = start
        self.m = m
        self.num_probes = 0

    def _exhausted(self) -> bool:
        return self.num_probes >= self.m

    def next(self) -> int:
        """Return the next slot index in the sequence."""
        if self._exhausted():
            raise ProbingExhausted("probe sequence exhausted")
        loc = (self.start + self.num_probes * self._step) % self.m
        self.num_probes += 1
        return loc

    def __iter__(self) -> Iterator[int]:
        while True:
            try:
                loc = self.next()
            except ProbingExhausted:
                return
            yield loc


class LinearProber(Prober):
    """Visit consecutive slots, wrapping around the end of the table."""

    def next(self) -> int:
        """Return the next consecutive slot index."""
        if self._exhausted():
            raise ProbingExhausted("probe sequence exhausted")
        loc = (self.start + self.num_probes) % self.m
        self.num_probes += 1
        return loc


class DoubleHashProber(Prober):
    """Step through the table by a key-dependent stride from a second hash."""

    def __init__(self, h2: Callable[[Hashable], int] | None = None) -> None:
        super().__init__()
        self.h2 = StringHash() if h2 is None else h2
        self.dhstep = 1

    def init(self, start: int, m: int, key: Any) -> None:
        """Begin a sequence and derive the stride from ``h2(key)``."""
        super().init(start, m, key)
        modulus = modulus_for_table_size(m)
        self.dhstep = modulus - self.h2(key) % modulus

    def next(self) -> int:
        """Return the next slot index, advancing by the stride."""
        if self._exhausted():
            raise ProbingExhausted("probe sequence exhausted")
        loc = (self.start + self.num_probes * self.dhstep) % self.m
        self.num_probes += 1
        return loc