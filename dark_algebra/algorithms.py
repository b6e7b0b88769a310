"""
Generic algorithms.

Each function is written only against the capability protocols it names
and the ``IndexedDataSource`` protocol, so it runs unchanged over any
algebra / value / storage combination that provides them.  None of them
looks inside a value.

Errors raised by the algebra or the storage propagate immediately; an
algorithm stops at the first failure and does not try the remaining
elements.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from dark_algebra.errors import DomainError
from dark_algebra.interfaces import IndexedDataSource, Invertible

logger = logging.getLogger(__name__)

U = TypeVar("U")


def transform_list(
    algebra,
    transform_fn: Callable[[U], None],
    storage: IndexedDataSource[U],
) -> int:
    """
    Apply ``transform_fn`` in place to every element of ``storage``.

    Requires: Constructible (one scratch value).

    Each element is read into the scratch value, mutated, and written back
    to the same index.  Every index in ``[0, size())`` is visited exactly
    once; an empty storage results in no calls.  Returns the number of
    elements transformed.
    """
    tmp = algebra.ctor()
    count = storage.size()
    logger.debug(f"Transforming {count} elements")
    for i in range(count):
        storage.get(i, tmp)
        transform_fn(tmp)
        storage.set(i, tmp)
    return count


def fill_list(value: U, storage: IndexedDataSource[U]) -> int:
    """Copy ``value`` into every slot of ``storage``; returns the slot count."""
    count = storage.size()
    for i in range(count):
        storage.set(i, value)
    return count


def sum_list(algebra, storage: IndexedDataSource[U], out: U) -> None:
    """
    Sum every element of ``storage`` into ``out``.

    Requires: Constructible, Zero, Addition, Assignable.

    Overflow follows the algebra's policy at each step.  ``out`` is written
    once, at the end, so a failing addition leaves it untouched.
    """
    acc = algebra.ctor()
    tmp = algebra.ctor()
    algebra.zero(acc)
    count = storage.size()
    logger.debug(f"Summing {count} elements")
    for i in range(count):
        storage.get(i, tmp)
        algebra.add2b(tmp, acc)
    algebra.assign(acc, out)


def max_list(algebra, storage: IndexedDataSource[U], out: U) -> Optional[int]:
    """
    Copy the greatest element of ``storage`` into ``out``.

    Requires: Constructible, Ordered, Assignable.

    Returns the index of the first greatest element, or ``None`` when the
    storage is empty (in which case ``out`` is not touched).
    """
    count = storage.size()
    if count == 0:
        return None

    best = algebra.ctor()
    tmp = algebra.ctor()
    best_index = 0
    storage.get(0, best)
    for i in range(1, count):
        storage.get(i, tmp)
        if algebra.is_greater(tmp, best):
            algebra.assign(tmp, best)
            best_index = i
    algebra.assign(best, out)
    return best_index


def integer_power(algebra, n: int, a: U, out: U) -> None:
    """
    Raise ``a`` to the integer power ``n`` and store the result in ``out``.

    Requires: Constructible, Unity, Multiplication, Assignable; a negative
    ``n`` additionally requires Invertible and raises DomainError without
    it.  ``a ** 0`` is unity for every ``a``.

    The product is built by square-and-multiply, so the number of steps
    grows with the bit length of ``n``, not with ``n``.  The algebra's
    overflow policy is applied after every square and every product; a
    base is only squared when a higher bit of ``n`` still needs it.  ``a``
    and ``out`` may be the same object, and ``out`` is written last.
    """
    if n < 0 and not isinstance(algebra, Invertible):
        raise DomainError(
            f"negative exponent {n} requires an invertible algebra, "
            f"got {type(algebra).__name__}"
        )

    result = algebra.ctor()
    algebra.unity(result)
    base = algebra.ctor()
    algebra.assign(a, base)
    k = abs(n)
    while k:
        if k & 1:
            algebra.multiply2a(result, base)
        k >>= 1
        if k:
            algebra.square(base)
    if n < 0:
        algebra.invert(result)
    algebra.assign(result, out)
