"""
Bounded integer algebra.

``BoundedIntegerAlgebra`` is the authority for what arithmetic on a
``BoundedInt`` cell means.  Each operation:

  1. Performs the raw computation on plain Python ints
  2. Brings the result back into the domain through its ``Bounds``
  3. Only then writes the output cell

so a failing operation (ERROR overflow policy, bad input) never leaves a
half-written output behind.

Implemented capabilities: Zero, Unity, Equality, Ordered, Constructible,
Assignable, Addition, Multiplication, Negatable.  Not Invertible: integer
division is not an inverse of multiplication, so ``power`` with a negative
exponent raises DomainError.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from dark_algebra.algorithms import integer_power
from dark_algebra.bounds import Bounds, OverflowStrategy, SINT4_BOUNDS
from dark_algebra.errors import DomainError, ParseError
from dark_algebra.values import BoundedInt

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class BoundedIntegerAlgebra:
    """
    Arithmetic over ``BoundedInt`` values confined to ``bounds``.

    Instances hold no mutable state and may be shared freely between
    callers and threads.
    """

    bounds: Bounds

    # -- internal helpers ---------------------------------------------------

    def _store(self, raw: int, out: BoundedInt) -> None:
        out.val = self.bounds.apply(raw)

    # -- Zero ---------------------------------------------------------------

    def is_zero(self, a: BoundedInt) -> bool:
        return a.val == 0

    def zero(self, out: BoundedInt) -> None:
        if not self.bounds.contains(0):
            raise DomainError(f"0 is outside bounds [{self.bounds.lo}, {self.bounds.hi}]")
        out.val = 0

    # -- Unity --------------------------------------------------------------

    def is_unity(self, a: BoundedInt) -> bool:
        return a.val == 1

    def unity(self, out: BoundedInt) -> None:
        if not self.bounds.contains(1):
            raise DomainError(f"1 is outside bounds [{self.bounds.lo}, {self.bounds.hi}]")
        out.val = 1

    # -- Equality -----------------------------------------------------------

    def is_eq(self, a: BoundedInt, b: BoundedInt) -> bool:
        return a.val == b.val

    def is_not_eq(self, a: BoundedInt, b: BoundedInt) -> bool:
        return not self.is_eq(a, b)

    # -- Ordered ------------------------------------------------------------

    def is_less(self, a: BoundedInt, b: BoundedInt) -> bool:
        return a.val < b.val

    def is_less_eq(self, a: BoundedInt, b: BoundedInt) -> bool:
        return a.val <= b.val

    def is_greater(self, a: BoundedInt, b: BoundedInt) -> bool:
        return a.val > b.val

    def is_greater_eq(self, a: BoundedInt, b: BoundedInt) -> bool:
        return a.val >= b.val

    # -- Constructible ------------------------------------------------------

    def ctor(self) -> BoundedInt:
        return BoundedInt(0 if self.bounds.contains(0) else self.bounds.lo)

    def ctor_from_ref(self, other: BoundedInt) -> BoundedInt:
        return BoundedInt(other.val)

    def ctor_from_str(self, text: str) -> BoundedInt:
        """Parse a base-10 integer; out-of-domain text is a parse failure."""
        stripped = text.strip()
        if not _INTEGER_RE.fullmatch(stripped):
            raise ParseError(text, "not a base-10 integer")
        try:
            value = int(stripped)
        except ValueError:
            # digit count past the interpreter's int conversion limit
            raise ParseError(text, "integer literal too long") from None
        if not self.bounds.contains(value):
            raise ParseError(
                text, f"outside bounds [{self.bounds.lo}, {self.bounds.hi}]"
            )
        return BoundedInt(value)

    def from_int(self, value: int) -> BoundedInt:
        """Build a cell from a plain int that must already be in the domain."""
        if not self.bounds.contains(value):
            raise DomainError(
                f"{value} is outside bounds [{self.bounds.lo}, {self.bounds.hi}]"
            )
        return BoundedInt(value)

    # -- Assignable ---------------------------------------------------------

    def assign(self, src: BoundedInt, dst: BoundedInt) -> None:
        dst.val = src.val

    # -- Addition -----------------------------------------------------------

    def double(self, a: BoundedInt) -> None:
        self._store(a.val + a.val, a)

    def add2b(self, a: BoundedInt, b: BoundedInt) -> None:
        self._store(a.val + b.val, b)

    def add3c(self, a: BoundedInt, b: BoundedInt, c: BoundedInt) -> None:
        self._store(a.val + b.val, c)

    def subtract2a(self, a: BoundedInt, b: BoundedInt) -> None:
        self._store(a.val - b.val, a)

    def subtract2b(self, a: BoundedInt, b: BoundedInt) -> None:
        self._store(a.val - b.val, b)

    def subtract3c(self, a: BoundedInt, b: BoundedInt, c: BoundedInt) -> None:
        self._store(a.val - b.val, c)

    # -- Multiplication -----------------------------------------------------

    def square(self, a: BoundedInt) -> None:
        self._store(a.val * a.val, a)

    def multiply2a(self, a: BoundedInt, b: BoundedInt) -> None:
        self._store(a.val * b.val, a)

    def multiply2b(self, a: BoundedInt, b: BoundedInt) -> None:
        self._store(a.val * b.val, b)

    def multiply3c(self, a: BoundedInt, b: BoundedInt, c: BoundedInt) -> None:
        self._store(a.val * b.val, c)

    def power(self, n: int, a: BoundedInt) -> None:
        integer_power(self, n, a, a)

    def power2b(self, n: int, a: BoundedInt, b: BoundedInt) -> None:
        integer_power(self, n, a, b)

    # -- Negatable ----------------------------------------------------------

    def negate(self, a: BoundedInt) -> None:
        self._store(-a.val, a)

    def negate2b(self, a: BoundedInt, b: BoundedInt) -> None:
        self._store(-a.val, b)


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def sint(bits: int, overflow: OverflowStrategy = OverflowStrategy.WRAP) -> BoundedIntegerAlgebra:
    """Algebra for signed ``bits``-wide integers."""
    return BoundedIntegerAlgebra(Bounds.signed(bits, overflow))


def uint(bits: int, overflow: OverflowStrategy = OverflowStrategy.WRAP) -> BoundedIntegerAlgebra:
    """Algebra for unsigned ``bits``-wide integers."""
    return BoundedIntegerAlgebra(Bounds.unsigned(bits, overflow))


# 4-bit signed wrapping integers, domain [-8, 7]
SINT4 = BoundedIntegerAlgebra(SINT4_BOUNDS)
