"""
Law conformance tests.

These test the factory's end-to-end verification:
  - A correct algebra passes verification under every overflow policy.
  - A broken algebra is rejected with a counterexample.
  - Exhaustive verification actually checks all combinations.
"""

import logging
from dataclasses import dataclass

import pytest

from dark_algebra.algebra import BoundedIntegerAlgebra, SINT4
from conftest import INT8, INT16
from dark_algebra.bounds import Bounds, SINT4_BOUNDS, OverflowStrategy
from dark_algebra.errors import AlgebraError, DivisionByZero, OverflowPolicyViolation
from dark_algebra.factory import (
    AlgebraFactory,
    VerificationError,
    VerificationReport,
    _generate_samples,
)
from dark_algebra.laws import Law, LawSuite, additive_laws, all_law_suites, identity_laws
from dark_algebra.values import BoundedInt


@dataclass(frozen=True)
class NonWrappingAlgebra(BoundedIntegerAlgebra):
    """Forgets to renormalise add3c results."""

    def add3c(self, a: BoundedInt, b: BoundedInt, c: BoundedInt) -> None:
        c.val = a.val + b.val


# ---------------------------------------------------------------------------
# Factory produces verified algebras
# ---------------------------------------------------------------------------

class TestFactoryProducesVerified:
    def test_sint4(self):
        alg = AlgebraFactory.create(SINT4_BOUNDS)
        assert isinstance(alg, BoundedIntegerAlgebra)
        assert alg == SINT4

    @pytest.mark.parametrize("overflow", list(OverflowStrategy))
    def test_every_policy(self, overflow):
        bounds = Bounds(lo=-8, hi=7, overflow=overflow)
        alg = AlgebraFactory.create(bounds)
        assert alg.bounds.overflow == overflow

    def test_unsigned_bounds(self):
        alg = AlgebraFactory.create(Bounds.unsigned(4))
        assert alg.bounds.lo == 0
        assert alg.bounds.hi == 15

    def test_sampled_bounds(self):
        alg = AlgebraFactory.create(INT8)
        assert alg.bounds == INT8

    def test_wide_bounds(self):
        alg = AlgebraFactory.create(INT16)
        assert alg.bounds.width == 65_536

    def test_single_value_bounds(self):
        """Bounds where lo == hi: everything wraps to that value."""
        alg = AlgebraFactory.create(Bounds(lo=0, hi=0))
        c = BoundedInt(0)
        alg.add3c(BoundedInt(0), BoundedInt(0), c)
        assert c.val == 0

    def test_domain_without_zero(self):
        alg = AlgebraFactory.create(Bounds(lo=1, hi=5))
        assert alg.ctor().val == 1

    def test_one_bit_signed(self):
        AlgebraFactory.create(Bounds.signed(1))

    def test_verify_returns_one_report_per_suite(self):
        reports = AlgebraFactory.verify(SINT4)
        assert [r.suite_name for r in reports] == [
            "identity", "equality", "order", "addition", "negation", "multiplication",
        ]
        assert all(r.passed for r in reports)

    def test_logs_success(self, caplog):
        caplog.set_level(logging.INFO, logger="dark_algebra.factory")
        AlgebraFactory.create(SINT4_BOUNDS)
        assert "Verified algebra over [-8, 7] (wrap)" in caplog.text


# ---------------------------------------------------------------------------
# Factory rejects broken algebras
# ---------------------------------------------------------------------------

class TestFactoryRejectsBroken:
    def test_broken_algebra_rejected(self):
        with pytest.raises(VerificationError) as exc_info:
            AlgebraFactory.verify(NonWrappingAlgebra(SINT4_BOUNDS))
        report = exc_info.value.report
        assert report.suite_name == "addition"
        assert report.failures[0].law_name == "closure"
        assert report.failures[0].counterexample == (-8, -8)

    def test_verification_error_is_algebra_error(self):
        with pytest.raises(AlgebraError, match="Verification failed"):
            AlgebraFactory.verify(NonWrappingAlgebra(SINT4_BOUNDS))

    def test_logs_failure(self, caplog):
        with pytest.raises(VerificationError):
            AlgebraFactory.verify(NonWrappingAlgebra(SINT4_BOUNDS))
        assert "failed addition" in caplog.text

    def test_report_has_counterexample(self):
        """When a law fails, the report includes a counterexample."""
        bad_suite = LawSuite(name="bad_addition")
        bad_suite.add(Law(
            name="always_negative",
            description="result is always negative",
            arity=2,
            predicate=lambda alg, a, b: a + b < 0,
        ))

        report = AlgebraFactory._verify_suite(bad_suite, SINT4, SINT4_BOUNDS)
        assert isinstance(report, VerificationReport)
        assert not report.passed
        assert report.results[0].counterexample is not None
        assert "FAIL" in report.summary()


# ---------------------------------------------------------------------------
# Exhaustive verification coverage
# ---------------------------------------------------------------------------

class TestExhaustiveVerification:
    def test_pairs_checked_exhaustively(self):
        """For SINT4 (-8..7), addition closure checks 16*16 = 256 pairs."""
        closure = additive_laws(SINT4_BOUNDS).laws[0]
        assert closure.name == "closure"

        result = AlgebraFactory._verify_law(closure, SINT4, SINT4_BOUNDS)
        assert result.passed
        assert result.tests_run == SINT4_BOUNDS.width ** 2

    def test_singles_checked_exhaustively(self):
        zero_law = identity_laws(SINT4_BOUNDS).laws[0]
        assert zero_law.name == "zero_is_zero"

        result = AlgebraFactory._verify_law(zero_law, SINT4, SINT4_BOUNDS)
        assert result.tests_run == SINT4_BOUNDS.width

    def test_large_domains_are_sampled(self):
        alg = BoundedIntegerAlgebra(INT8)
        closure = additive_laws(INT8).laws[0]
        result = AlgebraFactory._verify_law(closure, alg, INT8)
        assert result.passed
        assert result.tests_run == AlgebraFactory.SAMPLE_COUNT

    def test_samples_start_with_edges_and_are_seeded(self):
        samples = _generate_samples(INT8, 2, 100, seed=0)
        assert samples[0] == (-128, -128)
        assert (127, 127) in samples
        assert len(samples) == 100
        assert samples == _generate_samples(INT8, 2, 100, seed=0)
        assert all(INT8.contains(v) for combo in samples for v in combo)

    def test_every_law_has_a_name_and_arity(self):
        for suite in all_law_suites(SINT4_BOUNDS):
            for law in suite:
                assert law.name
                assert law.arity in (1, 2)


# ---------------------------------------------------------------------------
# Errors raised while checking a law
# ---------------------------------------------------------------------------

def _raising_law(exc):
    def predicate(alg, a):
        if a == 3:
            raise exc
        return True
    return Law(name="raises_at_3", description="raises for a == 3", arity=1,
               predicate=predicate)


class TestErrorsDuringVerification:
    def test_overflow_skips_the_input(self):
        law = _raising_law(OverflowPolicyViolation(9, -8, 7))
        result = AlgebraFactory._verify_law(law, SINT4, SINT4_BOUNDS)
        assert result.passed
        assert result.tests_run == SINT4_BOUNDS.width

    def test_division_by_zero_propagates(self):
        law = _raising_law(DivisionByZero("inverse of zero"))
        with pytest.raises(DivisionByZero):
            AlgebraFactory._verify_law(law, SINT4, SINT4_BOUNDS)

    def test_division_by_zero_escapes_verify(self):
        """A law broken by division by zero never yields a passing report."""
        @dataclass(frozen=True)
        class DividingAlgebra(BoundedIntegerAlgebra):
            def square(self, a: BoundedInt) -> None:
                raise DivisionByZero("square via division")

        with pytest.raises(DivisionByZero):
            AlgebraFactory.verify(DividingAlgebra(SINT4_BOUNDS))
