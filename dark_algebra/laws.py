"""
Algebraic laws for bounded integer algebras.

A Law is a named, checkable statement about an algebra.  It is purely
declarative: it says WHAT must hold for every choice of inputs, and the
factory decides HOW to search the inputs.

Each law has:
  - a human-readable description
  - an arity: how many free integers from the domain it quantifies over
  - a predicate ``(algebra, *ints) -> bool`` that builds its own cells

Laws that only hold when nothing saturates are guarded, so under a CLAMP
policy they are vacuously true for the inputs that would saturate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from dark_algebra.bounds import Bounds, OverflowStrategy
from dark_algebra.values import BoundedInt


# ---------------------------------------------------------------------------
# Core law primitives
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Law:
    """A single verifiable property of an algebra."""

    name: str
    description: str
    arity: int
    predicate: Callable[..., bool]

    def check(self, algebra: Any, *args: int) -> bool:
        """Evaluate the law for one choice of inputs."""
        return self.predicate(algebra, *args)


@dataclass
class LawSuite:
    """An ordered collection of laws for one capability."""

    name: str
    laws: list[Law] = field(default_factory=list)

    def add(self, law: Law) -> None:
        self.laws.append(law)

    def __iter__(self):
        return iter(self.laws)

    def __len__(self):
        return len(self.laws)


def _cells(*values: int) -> list[BoundedInt]:
    return [BoundedInt(v) for v in values]


# ---------------------------------------------------------------------------
# Suite builders
# ---------------------------------------------------------------------------

def identity_laws(bounds: Bounds) -> LawSuite:
    """Zero and Unity: setters agree with predicates and act as identities."""
    has_zero = bounds.contains(0)
    has_one = bounds.contains(1)

    def zero_then_is_zero(alg, a):
        (x,) = _cells(a)
        alg.zero(x)
        return alg.is_zero(x)

    def unity_then_is_unity(alg, a):
        (x,) = _cells(a)
        alg.unity(x)
        return alg.is_unity(x)

    def additive_identity(alg, a):
        x, z = _cells(a, a)
        alg.zero(z)
        alg.add2b(x, z)
        return alg.is_eq(z, x)

    def multiplicative_identity(alg, a):
        x, u = _cells(a, a)
        alg.unity(u)
        alg.multiply2b(x, u)
        return alg.is_eq(u, x)

    suite = LawSuite(name="identity")
    suite.add(Law(
        name="zero_is_zero",
        description="zero(x) then is_zero(x)",
        arity=1,
        predicate=lambda alg, a: zero_then_is_zero(alg, a) if has_zero else True,
    ))
    suite.add(Law(
        name="unity_is_unity",
        description="unity(x) then is_unity(x)",
        arity=1,
        predicate=lambda alg, a: unity_then_is_unity(alg, a) if has_one else True,
    ))
    suite.add(Law(
        name="additive_identity",
        description="a + 0 == a",
        arity=1,
        predicate=lambda alg, a: additive_identity(alg, a) if has_zero else True,
    ))
    suite.add(Law(
        name="multiplicative_identity",
        description="a * 1 == a",
        arity=1,
        predicate=lambda alg, a: multiplicative_identity(alg, a) if has_one else True,
    ))
    return suite


def equality_laws(bounds: Bounds) -> LawSuite:
    """Equality is an equivalence and is_not_eq is its negation."""
    suite = LawSuite(name="equality")
    suite.add(Law(
        name="not_eq_negates_eq",
        description="is_not_eq(a, b) == not is_eq(a, b)",
        arity=2,
        predicate=lambda alg, a, b: (
            alg.is_not_eq(*_cells(a, b)) == (not alg.is_eq(*_cells(a, b)))
        ),
    ))
    suite.add(Law(
        name="reflexive",
        description="a == a",
        arity=1,
        predicate=lambda alg, a: alg.is_eq(*_cells(a, a)),
    ))
    suite.add(Law(
        name="symmetric",
        description="a == b implies b == a",
        arity=2,
        predicate=lambda alg, a, b: (
            alg.is_eq(*_cells(a, b)) == alg.is_eq(*_cells(b, a))
        ),
    ))
    return suite


def order_laws(bounds: Bounds) -> LawSuite:
    """Ordered is a total order consistent with Equality."""

    def trichotomy(alg, a, b):
        x, y = _cells(a, b)
        held = [alg.is_less(x, y), alg.is_eq(x, y), alg.is_greater(x, y)]
        return held.count(True) == 1

    suite = LawSuite(name="order")
    suite.add(Law(
        name="trichotomy",
        description="exactly one of a < b, a == b, a > b",
        arity=2,
        predicate=trichotomy,
    ))
    suite.add(Law(
        name="less_eq",
        description="a <= b iff a < b or a == b",
        arity=2,
        predicate=lambda alg, a, b: alg.is_less_eq(*_cells(a, b)) == (
            alg.is_less(*_cells(a, b)) or alg.is_eq(*_cells(a, b))
        ),
    ))
    suite.add(Law(
        name="greater_eq",
        description="a >= b iff a > b or a == b",
        arity=2,
        predicate=lambda alg, a, b: alg.is_greater_eq(*_cells(a, b)) == (
            alg.is_greater(*_cells(a, b)) or alg.is_eq(*_cells(a, b))
        ),
    ))
    suite.add(Law(
        name="converse",
        description="a < b iff b > a",
        arity=2,
        predicate=lambda alg, a, b: (
            alg.is_less(*_cells(a, b)) == alg.is_greater(*_cells(b, a))
        ),
    ))
    return suite


def additive_laws(bounds: Bounds) -> LawSuite:
    """Addition and subtraction, in all their in-place forms."""
    lo, hi = bounds.lo, bounds.hi
    wraps = bounds.overflow == OverflowStrategy.WRAP

    def closure(alg, a, b):
        x, y, c = _cells(a, b, 0)
        alg.add3c(x, y, c)
        return lo <= c.val <= hi

    def commutativity(alg, a, b):
        x, y, c1, c2 = _cells(a, b, 0, 0)
        alg.add3c(x, y, c1)
        alg.add3c(y, x, c2)
        return alg.is_eq(c1, c2)

    def double_matches_add(alg, a):
        x, d, c = _cells(a, a, 0)
        alg.double(d)
        alg.add3c(x, x, c)
        return alg.is_eq(d, c)

    def add_forms_agree(alg, a, b):
        x, y, c = _cells(a, b, 0)
        alg.add3c(x, y, c)
        alg.add2b(x, y)
        return alg.is_eq(y, c)

    def subtract_forms_agree(alg, a, b):
        x, y, c = _cells(a, b, 0)
        alg.subtract3c(x, y, c)
        xa, ya = _cells(a, b)
        alg.subtract2a(xa, ya)
        xb, yb = _cells(a, b)
        alg.subtract2b(xb, yb)
        return alg.is_eq(xa, c) and alg.is_eq(yb, c)

    def round_trip(alg, a, b):
        x, y = _cells(a, b)
        alg.add2b(x, y)
        alg.subtract2a(y, x)
        return alg.is_eq(y, BoundedInt(b))

    def self_inverse(alg, a):
        x, c = _cells(a, 0)
        alg.subtract3c(x, x, c)
        return alg.is_zero(c)

    suite = LawSuite(name="addition")
    suite.add(Law("closure", "Result stays within bounds", 2, closure))
    suite.add(Law("commutativity", "a + b == b + a", 2, commutativity))
    suite.add(Law("double", "double(a) == a + a", 1, double_matches_add))
    suite.add(Law("add_forms_agree", "add2b and add3c agree", 2, add_forms_agree))
    suite.add(Law(
        "subtract_forms_agree",
        "subtract2a, subtract2b and subtract3c agree",
        2,
        subtract_forms_agree,
    ))
    suite.add(Law(
        name="round_trip",
        description="(a + b) - a == b  [always under WRAP, else when a + b is in bounds]",
        arity=2,
        predicate=lambda alg, a, b: (
            not (wraps or lo <= a + b <= hi) or round_trip(alg, a, b)
        ),
    ))
    suite.add(Law(
        name="self_inverse",
        description="a - a == 0",
        arity=1,
        predicate=lambda alg, a: self_inverse(alg, a) if bounds.contains(0) else True,
    ))
    return suite


def negation_laws(bounds: Bounds) -> LawSuite:
    """Negation is an involution and agrees with subtraction from zero."""
    lo, hi = bounds.lo, bounds.hi
    wraps = bounds.overflow == OverflowStrategy.WRAP

    def involution(alg, a):
        x, orig = _cells(a, a)
        alg.negate(x)
        alg.negate(x)
        return alg.is_eq(x, orig)

    def matches_subtract(alg, a):
        x, n, z, s = _cells(a, 0, 0, 0)
        alg.negate2b(x, n)
        alg.zero(z)
        alg.subtract3c(z, x, s)
        return alg.is_eq(n, s)

    suite = LawSuite(name="negation")
    suite.add(Law(
        name="involution",
        description="-(-a) == a  [always under WRAP, else when -a is in bounds]",
        arity=1,
        predicate=lambda alg, a: not (wraps or lo <= -a <= hi) or involution(alg, a),
    ))
    suite.add(Law(
        name="matches_subtract",
        description="-a == 0 - a",
        arity=1,
        predicate=lambda alg, a: matches_subtract(alg, a) if bounds.contains(0) else True,
    ))
    return suite


def multiplicative_laws(bounds: Bounds) -> LawSuite:
    """Multiplication and non-negative integer powers."""
    lo, hi = bounds.lo, bounds.hi

    def closure(alg, a, b):
        x, y, c = _cells(a, b, 0)
        alg.multiply3c(x, y, c)
        return lo <= c.val <= hi

    def commutativity(alg, a, b):
        x, y, c1, c2 = _cells(a, b, 0, 0)
        alg.multiply3c(x, y, c1)
        alg.multiply3c(y, x, c2)
        return alg.is_eq(c1, c2)

    def square_matches_multiply(alg, a):
        x, s, c = _cells(a, a, 0)
        alg.square(s)
        alg.multiply3c(x, x, c)
        return alg.is_eq(s, c)

    def zero_annihilates(alg, a):
        x, z = _cells(a, 0)
        alg.zero(z)
        alg.multiply2a(x, z)
        return alg.is_zero(x)

    def power_zero(alg, a):
        x, p = _cells(a, 0)
        alg.power2b(0, x, p)
        return alg.is_unity(p)

    def power_two(alg, a):
        x, p = _cells(a, a)
        alg.power(2, p)
        alg.square(x)
        return alg.is_eq(p, x)

    suite = LawSuite(name="multiplication")
    suite.add(Law("closure", "Result stays within bounds", 2, closure))
    suite.add(Law("commutativity", "a * b == b * a", 2, commutativity))
    suite.add(Law("square", "square(a) == a * a", 1, square_matches_multiply))
    suite.add(Law(
        name="zero_annihilates",
        description="a * 0 == 0",
        arity=1,
        predicate=lambda alg, a: zero_annihilates(alg, a) if bounds.contains(0) else True,
    ))
    suite.add(Law(
        name="power_zero",
        description="a ^ 0 == 1",
        arity=1,
        predicate=lambda alg, a: power_zero(alg, a) if bounds.contains(1) else True,
    ))
    suite.add(Law(
        name="power_two",
        description="a ^ 2 == square(a)",
        arity=1,
        predicate=lambda alg, a: power_two(alg, a) if bounds.contains(1) else True,
    ))
    return suite


def all_law_suites(bounds: Bounds) -> list[LawSuite]:
    """Every suite a BoundedIntegerAlgebra over ``bounds`` must satisfy."""
    return [
        identity_laws(bounds),
        equality_laws(bounds),
        order_laws(bounds),
        additive_laws(bounds),
        negation_laws(bounds),
        multiplicative_laws(bounds),
    ]
