from __future__ import annotations

from typing import Any, Generic, TypeVar

U = TypeVar("U")


def _hashable(obj: Any) -> bool:
    try:
        hash(obj)
    except TypeError:
        return False
    return True


class IndexedComparator(Generic[U]):
    """
    Order values by their position in a reference sequence.

    The first occurrence of a value in `objs` defines its rank. Values not
    found rank before every known value, or after them all when
    `at_end_if_miss` is true. Two values with the same rank compare equal,
    which includes two missing values.
    """

    __slots__ = ("_positions", "_unhashable", "_miss_rank")

    def __init__(self, *objs: U, at_end_if_miss: bool = False):
        self._positions: dict[Any, int] = {}
        # (position, value) for reference values that cannot be dict keys
        self._unhashable: list[tuple[int, U]] = []
        for i, obj in enumerate(objs):
            if _hashable(obj):
                self._positions.setdefault(obj, i)
            else:
                self._unhashable.append((i, obj))
        self._miss_rank = len(objs) if at_end_if_miss else -1

    @property
    def at_end_if_miss(self) -> bool:
        return self._miss_rank >= 0

    def rank(self, value: U) -> int:
        best = self._positions.get(value) if _hashable(value) else None
        for i, obj in self._unhashable:
            if best is not None and i > best:
                break
            if obj == value:
                best = i
                break
        return self._miss_rank if best is None else best

    def __call__(self, o1: U, o2: U) -> int:
        r1 = self.rank(o1)
        r2 = self.rank(o2)
        return (r1 > r2) - (r1 < r2)
