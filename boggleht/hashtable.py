"""Open-addressing hash table with pluggable probing and prime resizing."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TextIO, TypeVar

from .probing import DoubleHashProber, LinearProber, Prober, ProbingExhausted
from .strhash import StringHash

K = TypeVar("K")
V = TypeVar("V")

CAPACITIES = (
    11, 23, 47, 97, 197, 397, 797, 1597, 3203, 6421, 12853, 25717, 51437, 102877,
    205759, 411527, 823117, 1646237, 3292489, 6584983, 13169977, 26339969, 52679969,
    105359969, 210719881, 421439783, 842879579, 1685759167,
)


@dataclass
class _HashItem(Generic[K, V]):
    key: K
    value: V
    deleted: bool = False


class HashTable(Generic[K, V]):
    """Map keys to values with open addressing and lazy deletion.

    Removed entries stay in place as tombstones until the table grows past
    ``resize_alpha`` and is rehashed into the next prime capacity.
    """

    def __init__(
        self,
        resize_alpha: float = 0.4,
        prober: Prober | None = None,
        hash_func: Callable[[K], int] | None = None,
        key_equal: Callable[[K, K], bool] | None = None,
    ) -> None:
        self._resize_alpha = resize_alpha
        self._prober = LinearProber() if prober is None else prober
        self._hash = hash if hash_func is None else hash_func
        self._equal = operator.eq if key_equal is None else key_equal
        self._capacity_index = 0
        self._table: list[_HashItem[K, V] | None] = [None] * CAPACITIES[0]
        self._count = 0
        self._total_probes = 0

    def __len__(self) -> int:
        return self._count

    def empty(self) -> bool:
        """Return True if the table holds no live entries."""
        return self._count == 0

    def insert(self, key: K, value: V) -> None:
        """Add ``key`` with ``value``, or update the value of an existing key.

        Raises RuntimeError if no free slot can be found.
        """
        if self._count / len(self._table) >= self._resize_alpha:
            self._resize()
        loc = self._probe(key)
        if loc is None:
            raise RuntimeError("no free location found")
        slot = self._table[loc]
        if slot is not None:
            slot.value = value
        else:
            self._table[loc] = _HashItem(key, value)
            self._count += 1

    def remove(self, key: K) -> None:
        """Mark the entry for ``key`` as deleted; do nothing if it is absent."""
        loc = self._probe(key)
        if loc is None:
            return
        slot = self._table[loc]
        if slot is not None and not slot.deleted:
            slot.deleted = True
            self._count -= 1

    def find(self, key: K) -> tuple[K, V] | None:
        """Return the ``(key, value)`` pair for ``key``, or None if absent."""
        item = self._internal_find(key)
        return None if item is None else (item.key, item.value)

    def at(self, key: K) -> V:
        """Return the value for ``key``; raise KeyError if it is absent."""
        item = self._internal_find(key)
        if item is None:
            raise KeyError("Bad key")
        return item.value

    def __getitem__(self, key: K) -> V:
        return self.at(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.insert(key, value)

    def __contains__(self, key: object) -> bool:
        return self._internal_find(key) is not None  # type: ignore[arg-type]

    def report_all(self, out: TextIO | None = None) -> None:
        """Write every occupied bucket, tombstones included, to ``out``."""
        stream = sys.stdout if out is None else out
        for index, slot in enumerate(self._table):
            if slot is not None:
                stream.write(f"Bucket {index}: {slot.key} {slot.value}\n")

    def clear_total_probes(self) -> None:
        """Reset the probe counter."""
        self._total_probes = 0

    def total_probes(self) -> int:
        """Return the number of probe attempts made by lookups so far."""
        return self._total_probes

    def _internal_find(self, key: K) -> _HashItem[K, V] | None:
        loc = self._probe(key)
        if loc is None:
            return None
        return self._table[loc]

    def _probe(self, key: K) -> int | None:
        capacity = len(self._table)
        self._prober.init(self._hash(key) % capacity, capacity, key)
        while True:
            self._total_probes += 1
            try:
                loc = self._prober.next()
            except ProbingExhausted:
                return None
            slot = self._table[loc]
            if slot is None:
                return loc
            if not slot.deleted and self._equal(slot.key, key):
                return loc

    def _resize(self) -> None:
        if self._capacity_index + 1 >= len(CAPACITIES):
            raise RuntimeError("no more capacities exist")
        self._capacity_index += 1
        capacity = CAPACITIES[self._capacity_index]
        old = self._table
        self._table = [None] * capacity
        for item in old:
            if item is None or item.deleted:
                continue
            self._prober.init(self._hash(item.key) % capacity, capacity, item.key)
            for loc in self._prober:
                if self._table[loc] is None:
                    self._table[loc] = item
                    break
            else:
                raise RuntimeError("no free location found while resizing")


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise a double-hashed table and print what happens."""
    del argv
    table: HashTable[str, Any] = HashTable(0.7, DoubleHashProber(StringHash()))
    for i in range(10):
        table.insert(f"hi{i}", i)
    if table.find("hi1") is not None:
        print("Found hi1")
        table["hi1"] = table["hi1"] + 1
        print(f"Incremented hi1's value to: {table['hi1']}")
    if table.find("doesnotexist") is None:
        print("Did not find: doesnotexist")
    print(f"HT size: {len(table)}")
    table.remove("hi7")
    table.remove("hi9")
    print(f"HT size: {len(table)}")
    if table.find("hi9") is not None:
        print("Found hi9")
    else:
        print("Did not find hi9")
    table.insert("hi7", 17)
    print(f"size: {len(table)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())