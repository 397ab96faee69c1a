"""Open-addressing hash table with pluggable probing strategies."""

from __future__ import annotations

import sys
from collections.abc import Callable, Hashable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TextIO

from hashboggle.strhash import StringHash

CAPACITIES = (
    11, 23, 47, 97, 197, 397, 797, 1597, 3203, 6421, 12853, 25717, 51437,
    102877, 205759, 411527, 823117, 1646237, 3292489, 6584983, 13169977,
    26339969, 52679969, 105359969, 210719881, 421439783, 842879579,
    1685759167,
)

DOUBLE_HASH_MOD_VALUES = (
    7, 19, 43, 89, 193, 389, 787, 1583, 3191, 6397, 12841, 25703, 51431,
    102871, 205721, 411503, 823051, 1646221, 3292463, 6584957, 13169963,
    26339921, 52679927, 105359939, 210719881, 421439749, 842879563,
    1685759113,
)


class Prober(Protocol):
    def probe(self, start: int, m: int, key: Any) -> Iterator[int]: ...


class LinearProber:
    """Visit consecutive slots starting from the home slot."""

    def probe(self, start: int, m: int, key: Any) -> Iterator[int]:
        """Yield at most ``m`` slot indices."""
        for i in range(m):
            yield (start + i) % m


class DoubleHashProber:
    """Step through slots by a key-dependent stride from a second hash."""

    def __init__(self, hash2: Callable[[Any], int] | None = None) -> None:
        self.hash2 = hash2 if hash2 is not None else StringHash()

    def step(self, m: int, key: Any) -> int:
        """Return the stride for ``key`` in a table of ``m`` slots."""
        mod = DOUBLE_HASH_MOD_VALUES[0]
        for value in DOUBLE_HASH_MOD_VALUES:
            if value >= m:
                break
            mod = value
        return mod - (self.hash2(key) % mod)

    def probe(self, start: int, m: int, key: Any) -> Iterator[int]:
        """Yield at most ``m`` slot indices."""
        stride = self.step(m, key)
        for i in range(m):
            yield (start + stride * i) % m


@dataclass
class _Entry:
    key: Any
    value: Any
    deleted: bool = False


class HashTable:
    """Hash table using open addressing and tombstone deletion."""

    def __init__(
        self,
        alpha: float = 0.4,
        prober: Prober | None = None,
        hash_func: Callable[[Any], int] | None = None,
    ) -> None:
        self._alpha = alpha
        self._prober: Prober = prober if prober is not None else LinearProber()
        self._hash: Callable[[Any], int] = hash_func if hash_func is not None else hash
        self._capacity_index = 0
        self._table: list[_Entry | None] = [None] * CAPACITIES[0]
        self._size = 0
        self._deleted = 0
        self._total_probes = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __contains__(self, key: Hashable) -> bool:
        return self.find(key) is not None

    def __getitem__(self, key: Hashable) -> Any:
        return self.at(key)

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self.insert(key, value)

    def _slots(self, key: Any) -> Iterator[int]:
        m = len(self._table)
        for loc in self._prober.probe(self._hash(key) % m, m, key):
            self._total_probes += 1
            yield loc
        # the final, exhausted probe counts as well
        self._total_probes += 1

    def _matches(self, entry: _Entry, key: Any) -> bool:
        return not entry.deleted and entry.key == key

    def insert(self, key: Hashable, value: Any) -> None:
        """Add ``key`` or replace its value."""
        load = (self._size + self._deleted) / len(self._table)
        if load >= self._alpha:
            self._resize()
        for loc in self._slots(key):
            entry = self._table[loc]
            if entry is None:
                self._table[loc] = _Entry(key, value)
                self._size += 1
                return
            if self._matches(entry, key):
                entry.value = value
                return
        raise RuntimeError("HashTable full")

    def remove(self, key: Hashable) -> None:
        """Delete ``key`` if present; absent keys are ignored."""
        entry = self._find_entry(key)
        if entry is not None:
            entry.deleted = True
            self._size -= 1
            self._deleted += 1

    def find(self, key: Hashable) -> tuple[Any, Any] | None:
        """Return the ``(key, value)`` pair, or None when absent."""
        entry = self._find_entry(key)
        return None if entry is None else (entry.key, entry.value)

    def at(self, key: Hashable) -> Any:
        """Return the value for ``key``; raise KeyError when absent."""
        entry = self._find_entry(key)
        if entry is None:
            raise KeyError("Bad key")
        return entry.value

    def report_all(self, out: TextIO | None = None) -> None:
        """Write every occupied bucket, tombstones included."""
        out = sys.stdout if out is None else out
        for index, entry in enumerate(self._table):
            if entry is not None:
                out.write(f"Bucket {index}: {entry.key} {entry.value}\n")

    def total_probes(self) -> int:
        """Return the number of probes made so far."""
        return self._total_probes

    def _find_entry(self, key: Any) -> _Entry | None:
        for loc in self._slots(key):
            entry = self._table[loc]
            if entry is None:
                return None
            if self._matches(entry, key):
                return entry
        return None

    def _resize(self) -> None:
        if self._capacity_index + 1 >= len(CAPACITIES):
            raise RuntimeError("No more capacity")
        self._capacity_index += 1
        old_table = self._table
        self._table = [None] * CAPACITIES[self._capacity_index]
        self._size = 0
        self._deleted = 0
        for entry in old_table:
            if entry is not None and not entry.deleted:
                self.insert(entry.key, entry.value)


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise a double-hashing table and report what happens."""
    table = HashTable(0.7, DoubleHashProber(StringHash()))
    for i in range(10):
        table.insert(f"hi{i}", i)
    if table.find("hi1") is not None:
        print("Found hi1")
        table["hi1"] += 1
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