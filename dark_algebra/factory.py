"""
The algebra factory.

The factory does NOT just construct algebra objects - it *verifies* them
against their laws before releasing them.

Flow:
  1. Caller requests an algebra for a given Bounds.
  2. Factory builds the BoundedIntegerAlgebra.
  3. Factory checks every law suite against it.
  4. If verification passes  -> return the algebra.
     If verification fails   -> raise, never hand out a broken instance.

Generic algorithms can then rely on the laws without checking them again.
"""

from __future__ import annotations

import itertools
import logging
import random
from dataclasses import dataclass, field
from typing import Any, Optional

from dark_algebra.algebra import BoundedIntegerAlgebra
from dark_algebra.bounds import Bounds
from dark_algebra.errors import AlgebraError, OverflowPolicyViolation
from dark_algebra.laws import Law, LawSuite, all_law_suites

logger = logging.getLogger(__name__)


@dataclass
class VerificationResult:
    """Outcome of verifying one law."""

    law_name: str
    passed: bool
    counterexample: Optional[tuple] = None
    tests_run: int = 0

    def __repr__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        ce = f"  counterexample={self.counterexample}" if self.counterexample else ""
        return f"[{status}] {self.law_name} ({self.tests_run} tests){ce}"


@dataclass
class VerificationReport:
    """Aggregate result of verifying one law suite."""

    suite_name: str
    results: list[VerificationResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failures(self) -> list[VerificationResult]:
        return [r for r in self.results if not r.passed]

    def summary(self) -> str:
        lines = [f"--- {self.suite_name} ---"]
        for r in self.results:
            lines.append(f"  {r}")
        status = "ALL PASSED" if self.passed else "FAILED"
        lines.append(f"  => {status}")
        return "\n".join(lines)


class VerificationError(AlgebraError):
    """Raised when an algebra fails one of its laws."""

    def __init__(self, report: VerificationReport):
        self.report = report
        super().__init__(f"Verification failed:\n{report.summary()}")


# ---------------------------------------------------------------------------
# The factory
# ---------------------------------------------------------------------------

class AlgebraFactory:
    """
    Produces BoundedIntegerAlgebra instances that satisfy their laws.

    A law is checked *exhaustively* when the number of input combinations
    (``width ** arity``) is small enough; otherwise against every
    combination of edge values plus a seeded random sample, so repeated
    runs check the same inputs.
    """

    EXHAUSTIVE_LIMIT = 4096     # max combinations for brute-force check
    SAMPLE_COUNT = 2000
    SEED = 0

    # Failures that mean "law not applicable here", not "law violated".
    # Anything else raised by a law propagates out of verify().
    _EXPECTED_ERRORS = (OverflowPolicyViolation,)

    @classmethod
    def create(cls, bounds: Bounds) -> BoundedIntegerAlgebra:
        """Build, verify, and return a BoundedIntegerAlgebra."""
        algebra = BoundedIntegerAlgebra(bounds=bounds)
        cls.verify(algebra)
        return algebra

    @classmethod
    def verify(cls, algebra: Any, bounds: Optional[Bounds] = None) -> list[VerificationReport]:
        """Check every law suite; raise VerificationError on the first failing suite."""
        bounds = bounds if bounds is not None else algebra.bounds
        reports = []
        for suite in all_law_suites(bounds):
            report = cls._verify_suite(suite, algebra, bounds)
            if not report.passed:
                logger.warning(
                    f"Algebra over [{bounds.lo}, {bounds.hi}] failed "
                    f"{suite.name}: {[r.law_name for r in report.failures]}"
                )
                raise VerificationError(report)
            reports.append(report)
        logger.info(
            f"Verified algebra over [{bounds.lo}, {bounds.hi}] "
            f"({bounds.overflow.value}): {sum(len(r.results) for r in reports)} laws passed"
        )
        return reports

    # -- internal ---------------------------------------------------------

    @classmethod
    def _verify_suite(
        cls, suite: LawSuite, algebra: Any, bounds: Bounds
    ) -> VerificationReport:
        report = VerificationReport(suite_name=suite.name)
        for law in suite:
            report.results.append(cls._verify_law(law, algebra, bounds))
        return report

    @classmethod
    def _verify_law(
        cls, law: Law, algebra: Any, bounds: Bounds
    ) -> VerificationResult:
        if bounds.width ** law.arity <= cls.EXHAUSTIVE_LIMIT:
            inputs = itertools.product(bounds.all_values(), repeat=law.arity)
        else:
            inputs = _generate_samples(bounds, law.arity, cls.SAMPLE_COUNT, cls.SEED)

        tests_run = 0
        for combo in inputs:
            tests_run += 1
            try:
                if not law.check(algebra, *combo):
                    return VerificationResult(
                        law_name=law.name,
                        passed=False,
                        counterexample=combo,
                        tests_run=tests_run,
                    )
            except cls._EXPECTED_ERRORS:
                pass

        return VerificationResult(
            law_name=law.name,
            passed=True,
            tests_run=tests_run,
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _generate_samples(
    bounds: Bounds, arity: int, count: int, seed: int
) -> list[tuple[int, ...]]:
    """Edge-case combinations followed by seeded random fill up to ``count``."""
    rng = random.Random(seed)

    edge_values = [bounds.lo, bounds.lo + 1, -1, 0, 1, bounds.hi - 1, bounds.hi]
    edge_values = sorted({v for v in edge_values if bounds.contains(v)})

    samples: list[tuple[int, ...]] = list(itertools.product(edge_values, repeat=arity))

    while len(samples) < count:
        samples.append(tuple(rng.randint(bounds.lo, bounds.hi) for _ in range(arity)))

    return samples
