"""
Calculator -- Pluggable primitive arithmetic over a numeric representation.

Responsibility:
    Defines the capability set every numeric backend must provide and ships
    the built-in backends. Nothing above this layer performs raw arithmetic
    on amounts directly; values, rounding, scale normalization, allocation
    and conversion are all written once against ``Calculator``.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Leaf module: imports only money_kernel.exceptions.

Invariants enforced:
    - Amounts are integers in the representation; ``coerce`` rejects anything
      with a fractional part.
    - ``integer_divide`` truncates toward zero and ``modulo`` takes the sign of
      the dividend, so ``a == b * integer_divide(a, b) + modulo(a, b)``.
    - Fixed-width backends never wrap or lose precision silently; any result
      outside their range raises ``AmountOverflowError``.

Failure modes:
    - DivisionByZeroError from integer_divide / modulo with a zero divisor.
    - AmountOverflowError from Int64Calculator / FloatCalculator.
    - InvalidAmountError from coerce with a non-integral or wrong-typed value.
    - UnknownCalculatorError from get_calculator with an unregistered name.

Usage:
    from money_kernel.domain.calculator import get_calculator

    calc = get_calculator("int64")
    calc.add(calc.coerce(500), calc.coerce(250))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Context, Decimal
from typing import ClassVar, Generic, TypeVar

from money_kernel.exceptions import (
    AmountOverflowError,
    DivisionByZeroError,
    InvalidAmountError,
    UnknownCalculatorError,
)

A = TypeVar("A")


class Calculator(ABC, Generic[A]):
    """
    Capability set of primitive operations for one numeric representation.

    Contract:
        Stateless strategy object. All operations are pure and total over
        the representation's domain except division and modulo by zero.
    Guarantees:
        - compare returns exactly -1, 0 or 1.
        - to_number is lossy and reserved for formatting.
    Non-goals:
        - Does NOT know about currencies, scales or rounding.
    """

    name: ClassVar[str]

    @abstractmethod
    def add(self, augend: A, addend: A) -> A: ...

    @abstractmethod
    def subtract(self, minuend: A, subtrahend: A) -> A: ...

    @abstractmethod
    def multiply(self, multiplicand: A, multiplier: A) -> A: ...

    @abstractmethod
    def integer_divide(self, dividend: A, divisor: A) -> A: ...

    @abstractmethod
    def modulo(self, dividend: A, divisor: A) -> A: ...

    @abstractmethod
    def power(self, base: A, exponent: A) -> A: ...

    @abstractmethod
    def compare(self, a: A, b: A) -> int: ...

    @abstractmethod
    def increment(self, value: A) -> A: ...

    @abstractmethod
    def decrement(self, value: A) -> A: ...

    @abstractmethod
    def zero(self) -> A: ...

    @abstractmethod
    def one(self) -> A: ...

    @abstractmethod
    def coerce(self, value: object) -> A:
        """Convert an int (or a value of this representation) into ``A``."""

    @abstractmethod
    def to_number(self, value: A) -> float: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class _IntegralCalculator(Calculator[A]):
    """
    Shared implementation for backends whose values are exact integers.

    Every operation is computed on Python ints and converted back through
    ``_from_int``, which is where range limits are enforced. Subclasses only
    supply the conversion hooks and an optional ``limit``.
    """

    limit: ClassVar[int | None] = None

    @abstractmethod
    def _to_int(self, value: A) -> int: ...

    @abstractmethod
    def _wrap(self, value: int) -> A: ...

    def _from_int(self, value: int) -> A:
        if self.limit is not None and abs(value) > self.limit:
            raise AmountOverflowError(value, self.name, self.limit)
        return self._wrap(value)

    def add(self, augend: A, addend: A) -> A:
        return self._from_int(self._to_int(augend) + self._to_int(addend))

    def subtract(self, minuend: A, subtrahend: A) -> A:
        return self._from_int(self._to_int(minuend) - self._to_int(subtrahend))

    def multiply(self, multiplicand: A, multiplier: A) -> A:
        return self._from_int(self._to_int(multiplicand) * self._to_int(multiplier))

    def integer_divide(self, dividend: A, divisor: A) -> A:
        a, b = self._to_int(dividend), self._to_int(divisor)
        if b == 0:
            raise DivisionByZeroError(dividend, "integer_divide")
        quotient = abs(a) // abs(b)
        return self._from_int(quotient if (a < 0) == (b < 0) else -quotient)

    def modulo(self, dividend: A, divisor: A) -> A:
        a, b = self._to_int(dividend), self._to_int(divisor)
        if b == 0:
            raise DivisionByZeroError(dividend, "modulo")
        remainder = abs(a) % abs(b)
        # Sign follows the dividend
        return self._from_int(-remainder if a < 0 else remainder)

    def power(self, base: A, exponent: A) -> A:
        exp = self._to_int(exponent)
        if exp < 0:
            raise InvalidAmountError(exponent, "Exponent must be a non-negative integer")
        return self._from_int(self._to_int(base) ** exp)

    def compare(self, a: A, b: A) -> int:
        x, y = self._to_int(a), self._to_int(b)
        return (x > y) - (x < y)

    def increment(self, value: A) -> A:
        return self._from_int(self._to_int(value) + 1)

    def decrement(self, value: A) -> A:
        return self._from_int(self._to_int(value) - 1)

    def zero(self) -> A:
        return self._wrap(0)

    def one(self) -> A:
        return self._wrap(1)

    def coerce(self, value: object) -> A:
        if isinstance(value, bool):
            raise InvalidAmountError(value, "Amount must be an integer, not bool")
        if isinstance(value, int):
            return self._from_int(value)
        if isinstance(value, float):
            if not value.is_integer():
                raise InvalidAmountError(value)
            return self._from_int(int(value))
        if isinstance(value, Decimal):
            if not value.is_finite() or value != value.to_integral_value():
                raise InvalidAmountError(value)
            return self._from_int(int(value))
        raise InvalidAmountError(value, f"Unsupported amount type {type(value).__name__}")

    def to_number(self, value: A) -> float:
        return float(value)


class IntegerCalculator(_IntegralCalculator[int]):
    """Arbitrary-precision backend on Python ``int``."""

    name = "int"

    def _to_int(self, value: int) -> int:
        return value

    def _wrap(self, value: int) -> int:
        return value


class Int64Calculator(IntegerCalculator):
    """Signed 64-bit backend. Results outside the range raise instead of wrapping."""

    name = "int64"
    # Symmetric range so negation is always representable
    limit = 2**63 - 1


class FloatCalculator(_IntegralCalculator[float]):
    """
    IEEE-754 double backend restricted to safe integers.

    Every integer with magnitude up to 2**53 - 1 is exactly representable as a
    double; beyond that adjacent integers collapse, so results past the limit
    raise ``AmountOverflowError``.
    """

    name = "float"
    limit = 2**53 - 1

    def _to_int(self, value: float) -> int:
        return int(value)

    def _wrap(self, value: int) -> float:
        return float(value)


class DecimalCalculator(_IntegralCalculator[Decimal]):
    """Backend on integral ``decimal.Decimal`` values."""

    name = "decimal"

    def _to_int(self, value: Decimal) -> int:
        return int(value)

    def _wrap(self, value: int) -> Decimal:
        # Context precision grows with the digit count so no rounding occurs
        digits = len(str(abs(value)))
        return Context(prec=max(28, digits)).create_decimal(value)


_CALCULATORS: dict[str, Calculator] = {
    calc.name: calc
    for calc in (
        IntegerCalculator(),
        Int64Calculator(),
        FloatCalculator(),
        DecimalCalculator(),
    )
}

DEFAULT_CALCULATOR: Calculator[int] = _CALCULATORS["int"]


def get_calculator(name: str) -> Calculator:
    """Resolve a built-in calculator backend by name."""
    try:
        return _CALCULATORS[name]
    except KeyError:
        raise UnknownCalculatorError(name, tuple(sorted(_CALCULATORS))) from None


def available_calculators() -> tuple[str, ...]:
    """Names of the built-in backends."""
    return tuple(sorted(_CALCULATORS))
