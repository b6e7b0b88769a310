"""
Error taxonomy for algebra objects, storage backends and generic algorithms.

Every class derives from ``AlgebraError`` *and* from the closest builtin
exception, so callers can catch either the library-specific kind or the
idiomatic Python one (``except ZeroDivisionError`` keeps working).
"""

from __future__ import annotations


class AlgebraError(Exception):
    """Base class for every failure raised by this package."""


class ParseError(AlgebraError, ValueError):
    """Raised when text cannot be turned into a value of the domain."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse {text!r}: {reason}")


class DomainError(AlgebraError, ValueError):
    """Raised when an operation is requested outside what the algebra supports."""


class DivisionByZero(AlgebraError, ZeroDivisionError):
    """Raised on division or inversion by a value the algebra considers zero."""


class StorageIndexError(AlgebraError, IndexError):
    """Raised when an indexed data source is addressed out of range."""

    def __init__(self, index: object, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index {index!r} out of range for size {size}")


class OverflowPolicyViolation(AlgebraError, OverflowError):
    """Raised by algebras that fail, rather than wrap or saturate, on overflow."""

    def __init__(self, raw: int, lo: int, hi: int) -> None:
        self.raw = raw
        self.lo = lo
        self.hi = hi
        super().__init__(f"Result {raw} is outside bounds [{lo}, {hi}]")
