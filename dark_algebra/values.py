"""Value carriers operated on by algebra objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class BoundedInt:
    """
    A mutable storage cell for one integer of a bounded domain.

    It has no arithmetic and no equality of its own: which domain it lives
    in, how it overflows and when two cells are equal are all decided by
    the algebra that operates on it.
    """

    val: int = 0
