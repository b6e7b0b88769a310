"""
Integer domains for bounded algebras.

A Bounds value is the *domain* an algebra promises to stay inside, together
with the policy it applies when a raw arithmetic result escapes it.  The
policy belongs to the algebra that owns the bounds, never to the values:
the same ``BoundedInt`` cell can be driven by a wrapping, saturating or
failing algebra.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dark_algebra.errors import OverflowPolicyViolation


class OverflowStrategy(str, Enum):
    """What to do when a result would exceed the bounds."""

    WRAP = "wrap"        # Modular wrap-around (two's complement style)
    CLAMP = "clamp"      # Saturate at lo/hi
    ERROR = "error"      # Raise OverflowPolicyViolation


@dataclass(frozen=True)
class Bounds:
    """
    An integer domain [lo, hi] with explicit overflow semantics.

    Every result an algebra writes is guaranteed to live in [lo, hi].
    """

    lo: int
    hi: int
    overflow: OverflowStrategy = OverflowStrategy.WRAP

    def __post_init__(self):
        if self.lo > self.hi:
            raise ValueError(f"lo ({self.lo}) must be <= hi ({self.hi})")

    @classmethod
    def signed(cls, bits: int, overflow: OverflowStrategy = OverflowStrategy.WRAP) -> Bounds:
        """Two's-complement domain of the given bit width."""
        if bits < 1:
            raise ValueError(f"bits must be >= 1, got {bits}")
        half = 1 << (bits - 1)
        return cls(lo=-half, hi=half - 1, overflow=overflow)

    @classmethod
    def unsigned(cls, bits: int, overflow: OverflowStrategy = OverflowStrategy.WRAP) -> Bounds:
        """Unsigned domain of the given bit width."""
        if bits < 1:
            raise ValueError(f"bits must be >= 1, got {bits}")
        return cls(lo=0, hi=(1 << bits) - 1, overflow=overflow)

    @property
    def width(self) -> int:
        """Total number of representable values (the wrap modulus)."""
        return self.hi - self.lo + 1

    def contains(self, value: int) -> bool:
        return self.lo <= value <= self.hi

    def all_values(self) -> range:
        return range(self.lo, self.hi + 1)

    def apply(self, raw: int) -> int:
        """Apply the overflow strategy to bring a raw result into bounds."""
        if self.lo <= raw <= self.hi:
            return raw

        if self.overflow == OverflowStrategy.CLAMP:
            return max(self.lo, min(self.hi, raw))

        if self.overflow == OverflowStrategy.WRAP:
            return self.lo + (raw - self.lo) % self.width

        # ERROR
        raise OverflowPolicyViolation(raw, self.lo, self.hi)


# ---------------------------------------------------------------------------
# Common bounds presets
# ---------------------------------------------------------------------------

SINT4_BOUNDS = Bounds.signed(4)
