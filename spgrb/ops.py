"""Unary and binary operators, monoid identities and semirings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class UnaryOp:
    """A named single-argument operator."""

    name: str
    fn: Callable[[Any], Any]

    def __call__(self, value: Any) -> Any:
        return self.fn(value)


@dataclass(frozen=True)
class BinaryOp:
    """A named two-argument operator, optionally with a monoid identity.

    ``identity_fn`` maps a scalar type (``int``, ``float``, ``bool``) to the
    identity element of the operator for that type.
    """

    name: str
    fn: Callable[[Any, Any], Any]
    identity_fn: Optional[Callable[[type], Any]] = None

    def __call__(self, lhs: Any, rhs: Any) -> Any:
        return self.fn(lhs, rhs)

    def identity(self, kind: type = float) -> Any:
        """Return the identity element for values of type ``kind``."""
        if self.identity_fn is None:
            raise TypeError(f"operator {self.name!r} has no identity element")
        return self.identity_fn(kind)

    def is_monoid(self) -> bool:
        """True when the operator has an identity element."""
        return self.identity_fn is not None


def _lowest(kind: type) -> Any:
    # Integers are unbounded, so negative infinity stands in for the lowest value.
    if issubclass(kind, bool):
        return False
    if issubclass(kind, float):
        return -math.inf
    return -math.inf


def _highest(kind: type) -> Any:
    if issubclass(kind, bool):
        return True
    if issubclass(kind, float):
        return math.inf
    return math.inf


def _max(a: Any, b: Any) -> Any:
    return b if a < b else a


def _min(a: Any, b: Any) -> Any:
    return b if b < a else a


plus = BinaryOp("plus", lambda a, b: a + b, lambda kind: kind(0))
minus = BinaryOp("minus", lambda a, b: a - b)
multiplies = BinaryOp("multiplies", lambda a, b: a * b, lambda kind: kind(1))
times = multiplies
divides = BinaryOp("divides", lambda a, b: a / b)
maximum = BinaryOp("max", _max, _lowest)
minimum = BinaryOp("min", _min, _highest)
modulus = BinaryOp("modulus", lambda a, b: a % b)

logical_and = BinaryOp(
    "logical_and", lambda a, b: bool(a) and bool(b), lambda kind: kind(True)
)
logical_or = BinaryOp(
    "logical_or", lambda a, b: bool(a) or bool(b), lambda kind: kind(False)
)
logical_xor = BinaryOp(
    "logical_xor", lambda a, b: bool(a) != bool(b), lambda kind: kind(False)
)
logical_xnor = BinaryOp("logical_xnor", lambda a, b: bool(a) == bool(b))

take_left = BinaryOp("take_left", lambda left, right: left)
take_right = BinaryOp("take_right", lambda left, right: right)

negate = UnaryOp("negate", lambda a: -a)
logical_not = UnaryOp("logical_not", lambda a: not a)


@dataclass(frozen=True)
class Semiring:
    """A pair of operators: ``reduce_op`` adds, ``combine_op`` multiplies."""

    reduce_op: Callable[[Any, Any], Any]
    combine_op: Callable[[Any, Any], Any]

    def combine(self, a: Any, b: Any) -> Any:
        return self.combine_op(a, b)

    def reduce(self, a: Any, b: Any) -> Any:
        return self.reduce_op(a, b)


def make_semiring(reduce: Callable[[Any, Any], Any],
                  combine: Callable[[Any, Any], Any]) -> Semiring:
    """Build a semiring from a reduce and a combine operator."""
    return Semiring(reduce, combine)


plus_multiplies = Semiring(plus, multiplies)
plus_times = plus_multiplies
min_plus = Semiring(minimum, plus)
max_plus = Semiring(maximum, plus)
min_multiplies = Semiring(minimum, multiplies)
min_times = min_multiplies
min_max = Semiring(minimum, maximum)
max_min = Semiring(maximum, minimum)
max_multiplies = Semiring(maximum, multiplies)
max_times = max_multiplies
plus_min = Semiring(plus, minimum)

lor_land = Semiring(logical_or, logical_and)
land_lor = Semiring(logical_and, logical_or)
lxor_land = Semiring(logical_xor, logical_and)
lxnor_lor = Semiring(logical_xnor, logical_or)


def lower_triangle(entry: Any) -> bool:
    """True for a matrix entry strictly below the diagonal."""
    (i, j), _ = entry
    return j < i


def upper_triangle(entry: Any) -> bool:
    """True for a matrix entry strictly above the diagonal."""
    (i, j), _ = entry
    return i < j