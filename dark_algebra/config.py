"""Validated configuration for bounded integer algebras.

An ``AlgebraConfig`` describes a domain declaratively (bit width,
signedness, overflow policy) so that callers can build an algebra from
plain data such as ``{"bits": 4, "overflow": "wrap"}``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from dark_algebra.algebra import BoundedIntegerAlgebra
from dark_algebra.bounds import Bounds, OverflowStrategy
from dark_algebra.factory import AlgebraFactory


class AlgebraConfig(BaseModel):
    """Settings for one bounded integer algebra."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    bits: int = Field(..., ge=1, le=64, description="Bit width of the domain")
    signed: bool = True
    overflow: OverflowStrategy = OverflowStrategy.WRAP

    def bounds(self) -> Bounds:
        if self.signed:
            return Bounds.signed(self.bits, self.overflow)
        return Bounds.unsigned(self.bits, self.overflow)

    def build(self) -> BoundedIntegerAlgebra:
        """Return a factory-verified algebra for these settings."""
        return AlgebraFactory.create(self.bounds())
