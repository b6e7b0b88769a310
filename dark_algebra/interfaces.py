"""
Capability interfaces for algebra objects.

Each protocol describes one algebraic property of a value type ``U`` and is
implemented by an *algebra object*, never by the values themselves.  The
protocols are deliberately small and independent: a value type that only
needs ordering implements ``Ordered`` and nothing else, and a generic
algorithm asks only for the protocols it actually calls.

Naming convention for multi-argument operations
------------------------------------------------
A trailing digit and letter give the operand count and the slot that
receives the result:

    add3c(a, b, c)       a + b -> c
    subtract2a(a, b)     a - b -> a
    subtract2b(a, b)     a - b -> b

Arguments named ``out`` (or the lettered result slot) are mutable value
objects that the algebra rewrites in place.  An operation that raises
leaves its output argument untouched.

All protocols are ``runtime_checkable`` so callers can ask
``isinstance(alg, Invertible)``; the check only looks at method names.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

U = TypeVar("U")


# ---------------------------------------------------------------------------
# Identities
# ---------------------------------------------------------------------------

@runtime_checkable
class Zero(Protocol[U]):
    """``zero(out)`` followed by ``is_zero(out)`` is always true."""

    def is_zero(self, a: U) -> bool: ...

    def zero(self, out: U) -> None: ...


@runtime_checkable
class Unity(Protocol[U]):
    """``unity(out)`` followed by ``is_unity(out)`` is always true."""

    def is_unity(self, a: U) -> bool: ...

    def unity(self, out: U) -> None: ...


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

@runtime_checkable
class Equality(Protocol[U]):
    """``is_not_eq`` is the exact negation of ``is_eq``."""

    def is_eq(self, a: U, b: U) -> bool: ...

    def is_not_eq(self, a: U, b: U) -> bool: ...


@runtime_checkable
class Ordered(Protocol[U]):
    """A total order: exactly one of a < b, a == b, a > b holds."""

    def is_less(self, a: U, b: U) -> bool: ...

    def is_less_eq(self, a: U, b: U) -> bool: ...

    def is_greater(self, a: U, b: U) -> bool: ...

    def is_greater_eq(self, a: U, b: U) -> bool: ...


# ---------------------------------------------------------------------------
# Construction and copying
# ---------------------------------------------------------------------------

@runtime_checkable
class Constructible(Protocol[U]):
    """Produces fresh values that share nothing with their arguments."""

    def ctor(self) -> U: ...

    def ctor_from_ref(self, other: U) -> U: ...

    def ctor_from_str(self, text: str) -> U:
        """Parse ``text``; raises ParseError when it is not in the domain."""
        ...


@runtime_checkable
class Assignable(Protocol[U]):
    def assign(self, src: U, dst: U) -> None:
        """Copy the logical value of ``src`` into ``dst``."""
        ...


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

@runtime_checkable
class Addition(Protocol[U]):
    """In-place and out-of-place addition; the algebra decides overflow."""

    def double(self, a: U) -> None: ...                       # a + a -> a

    def add2b(self, a: U, b: U) -> None: ...                  # a + b -> b

    def add3c(self, a: U, b: U, c: U) -> None: ...            # a + b -> c

    def subtract2a(self, a: U, b: U) -> None: ...             # a - b -> a

    def subtract2b(self, a: U, b: U) -> None: ...             # a - b -> b

    def subtract3c(self, a: U, b: U, c: U) -> None: ...       # a - b -> c


@runtime_checkable
class Multiplication(Protocol[U]):
    """
    Multiplication and integer powers.

    ``power`` with a negative exponent is only meaningful for algebras that
    are also ``Invertible``; others raise DomainError.
    """

    def square(self, a: U) -> None: ...                       # a * a -> a

    def multiply2a(self, a: U, b: U) -> None: ...             # a * b -> a

    def multiply2b(self, a: U, b: U) -> None: ...             # a * b -> b

    def multiply3c(self, a: U, b: U, c: U) -> None: ...       # a * b -> c

    def power(self, n: int, a: U) -> None: ...                # a ^ n -> a

    def power2b(self, n: int, a: U, b: U) -> None: ...        # a ^ n -> b


@runtime_checkable
class Negatable(Protocol[U]):
    """Negating twice gives back a value equal to the original."""

    def negate(self, a: U) -> None: ...                       # -a -> a

    def negate2b(self, a: U, b: U) -> None: ...               # -a -> b


@runtime_checkable
class Invertible(Protocol[U]):
    """Division; a zero divisor raises DivisionByZero."""

    def invert(self, a: U) -> None: ...                       # 1 / a -> a

    def invert2b(self, a: U, b: U) -> None: ...               # 1 / a -> b

    def divide2a(self, a: U, b: U) -> None: ...               # a / b -> a

    def divide2b(self, a: U, b: U) -> None: ...               # a / b -> b

    def divide3c(self, a: U, b: U, c: U) -> None: ...         # a / b -> c


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------

@runtime_checkable
class IndexedDataSource(Protocol[U]):
    """
    Linear, zero-based, bounds-checked storage of values of one type.

    ``set`` copies the caller's value into storage and ``get`` overwrites
    the caller's holder; neither hands out references to stored values.
    An index outside ``[0, size())`` raises StorageIndexError.
    """

    def size(self) -> int: ...

    def set(self, index: int, value: U) -> None: ...

    def get(self, index: int, out: U) -> None: ...
