from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Iterable, Iterator, TypeVar

if TYPE_CHECKING:
    from ..model.toolkit_settings_model import ToolkitSettings

T = TypeVar("T")

logger = logging.getLogger(__name__)

_MISSING = object()


class PartitionIter(Iterator[list[T]], Generic[T]):
    """
    Lazily group an iterable into lists of at most `partition_size` elements.

    Elements keep their source order and none are dropped. Only the final
    partition may be shorter than `partition_size`. The source is pulled on
    demand: `has_next()` reads at most one element ahead, and each partition
    is a fresh list handed over to the caller.

    Not thread-safe; drive an instance from a single consumer.
    """

    def __init__(self, iterable: Iterable[T], partition_size: int):
        if isinstance(partition_size, bool) or not isinstance(partition_size, int):
            raise TypeError(
                f"partition_size must be an int, got {type(partition_size).__name__}")
        if partition_size < 1:
            raise ValueError(f"partition_size must be >= 1, got {partition_size}")
        self._it = iter(iterable)
        self._partition_size = partition_size
        self._pending: object = _MISSING
        self._exhausted = False
        self._pulled = 0

    @classmethod
    def from_settings(cls, iterable: Iterable[T], settings: ToolkitSettings) -> PartitionIter[T]:
        return cls(iterable, settings.partition_size)

    @property
    def partition_size(self) -> int:
        return self._partition_size

    def _pull(self) -> object:
        if self._pending is not _MISSING:
            item, self._pending = self._pending, _MISSING
            return item
        if self._exhausted:
            return _MISSING
        item = next(self._it, _MISSING)
        if item is _MISSING:
            self._exhausted = True
            logger.debug("source exhausted after %d element(s)", self._pulled)
        else:
            self._pulled += 1
        return item

    def has_next(self) -> bool:
        if self._pending is _MISSING:
            self._pending = self._pull()
        return self._pending is not _MISSING

    def __iter__(self) -> PartitionIter[T]:
        return self

    def __next__(self) -> list[T]:
        partition: list[T] = []
        while len(partition) < self._partition_size:
            item = self._pull()
            if item is _MISSING:
                break
            partition.append(item)  # type: ignore[arg-type]
        if not partition:
            raise StopIteration
        return partition
