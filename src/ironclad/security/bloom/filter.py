"""Security bloom – a fixed-size bloom filter over strings."""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from ironclad.kernel.errors import InvalidInputError

__all__ = ["BloomFilter"]

_UINT32 = 0xFFFFFFFF


def _int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _utf16_units(item: str) -> Iterable[int]:
    encoded = item.encode("utf-16-le", "surrogatepass")
    return (int.from_bytes(encoded[i : i + 2], "little") for i in range(0, len(encoded), 2))


class BloomFilter:
    """Probabilistic set of strings: "possibly present" or "definitely absent".

    Each seed picks one bit per item. False positives are possible, false
    negatives are not as long as the seeds and bit array stay unchanged.

    Usage::

        seen = BloomFilter(100, seeds=[1, 7])
        seen.add("apple")
        assert "apple" in seen
    """

    def __init__(self, size: int = 100, seeds: Sequence[int] = ()) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise InvalidInputError("Bloom filter size must be a positive integer", argument="size")
        checked = tuple(seeds)
        if any(isinstance(s, bool) or not isinstance(s, int) for s in checked):
            raise InvalidInputError("Bloom filter seeds must be integers", argument="seeds")
        self._size = size
        self._seeds = checked
        self._bits = bytearray(size)

    @property
    def size(self) -> int:
        return self._size

    @property
    def seeds(self) -> tuple[int, ...]:
        return self._seeds

    def _index(self, item: str, seed: int) -> int:
        h = seed
        for unit in _utf16_units(item):
            h = _int32((h << 5) - h + unit)
        return abs(h) % self._size

    def indexes(self, item: str) -> list[int]:
        """Bit positions *item* maps to, one per seed."""
        item = self._check(item)
        return [self._index(item, seed) for seed in self._seeds]

    def add(self, item: str) -> None:
        for index in self.indexes(item):
            self._bits[index] = 1

    def check(self, item: str) -> bool:
        return all(self._bits[index] for index in self.indexes(item))

    def __contains__(self, item: Any) -> bool:
        return isinstance(item, str) and self.check(item)

    @staticmethod
    def _check(item: Any) -> str:
        if not isinstance(item, str):
            raise InvalidInputError(
                f"Bloom filter items must be strings, got {type(item).__name__}", argument="item"
            )
        return item

    def __repr__(self) -> str:
        return f"BloomFilter(size={self._size}, seeds={list(self._seeds)!r}, set_bits={sum(self._bits)})"
