"""In-memory indexed data source.

A reference backend for ``IndexedDataSource`` that can be swapped for
memory-mapped or remote storage later.  Values are copied in and out through
the owning algebra, so the store never shares a cell with its callers.

No locking is done here: a store is owned by one logical caller for the
duration of an algorithm call.
"""

from __future__ import annotations

import operator
from typing import Generic, Iterable, TypeVar

from dark_algebra.errors import StorageIndexError

U = TypeVar("U")


class ListDataSource(Generic[U]):
    """Fixed-size list of values backed by a Python list.

    ``algebra`` must be Constructible and Assignable for the value type.
    """

    def __init__(self, algebra, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        self._algebra = algebra
        self._cells: list[U] = [algebra.ctor() for _ in range(size)]

    @classmethod
    def from_values(cls, algebra, values: Iterable[U]) -> ListDataSource[U]:
        """Build a store holding copies of ``values``."""
        items = list(values)
        store = cls(algebra, len(items))
        for i, value in enumerate(items):
            store.set(i, value)
        return store

    # -- helpers -------------------------------------------------------------

    def _check_index(self, index: int) -> int:
        """Return ``index`` as a plain int, or raise StorageIndexError.

        Anything implementing ``__index__`` is accepted, except bools.
        """
        size = len(self._cells)
        if isinstance(index, bool):
            raise StorageIndexError(index, size)
        try:
            i = operator.index(index)
        except TypeError:
            raise StorageIndexError(index, size) from None
        if not 0 <= i < size:
            raise StorageIndexError(index, size)
        return i

    # -- IndexedDataSource ---------------------------------------------------

    def size(self) -> int:
        return len(self._cells)

    def set(self, index: int, value: U) -> None:
        i = self._check_index(index)
        self._algebra.assign(value, self._cells[i])

    def get(self, index: int, out: U) -> None:
        i = self._check_index(index)
        self._algebra.assign(self._cells[i], out)
