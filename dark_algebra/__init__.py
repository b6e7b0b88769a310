"""Generic algebra objects, capability protocols and the algorithms built on them."""

from dark_algebra.algebra import SINT4, BoundedIntegerAlgebra, sint, uint
from dark_algebra.algorithms import (
    fill_list,
    integer_power,
    max_list,
    sum_list,
    transform_list,
)
from dark_algebra.bounds import Bounds, OverflowStrategy
from dark_algebra.config import AlgebraConfig
from dark_algebra.errors import (
    AlgebraError,
    DivisionByZero,
    DomainError,
    OverflowPolicyViolation,
    ParseError,
    StorageIndexError,
)
from dark_algebra.factory import AlgebraFactory, VerificationError
from dark_algebra.interfaces import (
    Addition,
    Assignable,
    Constructible,
    Equality,
    IndexedDataSource,
    Invertible,
    Multiplication,
    Negatable,
    Ordered,
    Unity,
    Zero,
)
from dark_algebra.storage import ListDataSource
from dark_algebra.values import BoundedInt

__all__ = [
    "Addition",
    "AlgebraConfig",
    "AlgebraError",
    "AlgebraFactory",
    "Assignable",
    "Bounds",
    "BoundedInt",
    "BoundedIntegerAlgebra",
    "Constructible",
    "DivisionByZero",
    "DomainError",
    "Equality",
    "IndexedDataSource",
    "Invertible",
    "ListDataSource",
    "Multiplication",
    "Negatable",
    "Ordered",
    "OverflowPolicyViolation",
    "OverflowStrategy",
    "ParseError",
    "SINT4",
    "StorageIndexError",
    "Unity",
    "VerificationError",
    "Zero",
    "fill_list",
    "integer_power",
    "max_list",
    "sint",
    "sum_list",
    "transform_list",
    "uint",
]
