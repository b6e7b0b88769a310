"""Shared fixtures for algebra tests."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

import pytest

from dark_algebra.algebra import SINT4, BoundedIntegerAlgebra
from dark_algebra.algorithms import integer_power
from dark_algebra.bounds import Bounds, OverflowStrategy
from dark_algebra.errors import DivisionByZero, ParseError
from dark_algebra.storage import ListDataSource

TINY_CLAMP = Bounds(lo=-8, hi=7, overflow=OverflowStrategy.CLAMP)
TINY_ERROR = Bounds(lo=-8, hi=7, overflow=OverflowStrategy.ERROR)

# Wider domains, too large for exhaustive law checks
INT8 = Bounds.signed(8)
INT16 = Bounds.signed(16)
UINT8 = Bounds.unsigned(8)


# ---------------------------------------------------------------------------
# A rational backend standing in for an external Invertible algebra
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class RationalCell:
    val: Fraction = Fraction(0)


class RationalAlgebra:
    """Exact rationals: Zero, Unity, Equality, Constructible, Assignable,
    Multiplication, Invertible."""

    def is_zero(self, a):
        return a.val == 0

    def zero(self, out):
        out.val = Fraction(0)

    def is_unity(self, a):
        return a.val == 1

    def unity(self, out):
        out.val = Fraction(1)

    def is_eq(self, a, b):
        return a.val == b.val

    def is_not_eq(self, a, b):
        return a.val != b.val

    def ctor(self):
        return RationalCell()

    def ctor_from_ref(self, other):
        return RationalCell(other.val)

    def ctor_from_str(self, text):
        try:
            return RationalCell(Fraction(text))
        except (ValueError, ZeroDivisionError):
            raise ParseError(text, "not a rational") from None

    def assign(self, src, dst):
        dst.val = src.val

    def square(self, a):
        a.val = a.val * a.val

    def multiply2a(self, a, b):
        a.val = a.val * b.val

    def multiply2b(self, a, b):
        b.val = a.val * b.val

    def multiply3c(self, a, b, c):
        c.val = a.val * b.val

    def power(self, n, a):
        integer_power(self, n, a, a)

    def power2b(self, n, a, b):
        integer_power(self, n, a, b)

    def _divisor(self, b):
        if self.is_zero(b):
            raise DivisionByZero("division by zero")
        return b.val

    def invert(self, a):
        a.val = 1 / self._divisor(a)

    def invert2b(self, a, b):
        b.val = 1 / self._divisor(a)

    def divide2a(self, a, b):
        a.val = a.val / self._divisor(b)

    def divide2b(self, a, b):
        b.val = a.val / self._divisor(b)

    def divide3c(self, a, b, c):
        c.val = a.val / self._divisor(b)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def alg() -> BoundedIntegerAlgebra:
    return SINT4


@pytest.fixture
def alg_clamp() -> BoundedIntegerAlgebra:
    return BoundedIntegerAlgebra(TINY_CLAMP)


@pytest.fixture
def alg_error() -> BoundedIntegerAlgebra:
    return BoundedIntegerAlgebra(TINY_ERROR)


@pytest.fixture
def rational() -> RationalAlgebra:
    return RationalAlgebra()


@pytest.fixture
def store_123(alg) -> ListDataSource:
    """Three-element SINT4 store holding [1, 2, 3]."""
    return ListDataSource.from_values(alg, [alg.from_int(v) for v in (1, 2, 3)])


def contents(store, algebra) -> list:
    """Read every stored value back out as plain ``val`` fields."""
    out = []
    tmp = algebra.ctor()
    for i in range(store.size()):
        store.get(i, tmp)
        out.append(tmp.val)
    return out
