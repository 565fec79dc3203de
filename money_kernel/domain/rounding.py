"""
Rounding -- Pluggable rounding policies over Calculator primitives.

Responsibility:
    Divide an integer amount by a positive integer factor and resolve the
    remainder according to an explicit policy. Scaling an amount down by N
    digits is the special case where the factor is ``base ** N``.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Depends only on money_kernel.domain.calculator.

Invariants enforced:
    - Every policy is a no-op on exact quotients (remainder zero), so
      rounding an amount already representable at the target scale is
      idempotent.
    - Halfway detection compares |remainder| with factor - |remainder| on
      integers, so no intermediate exceeds the factor and no fractional
      value is ever materialized.

Failure modes:
    - DivisionByZeroError propagated from the calculator for a zero factor.

Usage:
    from money_kernel.domain.rounding import RoundingMode, drop_digits

    drop_digits(25, 1, 10, calculator, RoundingMode.HALF_EVEN)  # -> 2
    drop_digits(35, 1, 10, calculator, RoundingMode.HALF_EVEN)  # -> 4
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from money_kernel.domain.calculator import Calculator

A = TypeVar("A")


class RoundingMode(str, Enum):
    """Policy for resolving a non-zero remainder."""

    HALF_EVEN = "half_even"  # Banker's rounding: ties to even digit
    HALF_ODD = "half_odd"  # Ties to odd digit
    HALF_UP = "half_up"  # Ties toward +infinity
    HALF_DOWN = "half_down"  # Ties toward -infinity
    HALF_AWAY_FROM_ZERO = "half_away_from_zero"
    HALF_TOWARDS_ZERO = "half_towards_zero"
    TRUNCATE = "truncate"  # Always toward zero
    CEILING = "ceiling"  # Always toward +infinity
    FLOOR = "floor"  # Always toward -infinity

    def apply(self, amount: A, factor: A, calculator: Calculator[A]) -> A:
        """Divide ``amount`` by ``factor`` and round per this policy."""
        return round_quotient(amount, factor, calculator, self)


DEFAULT_ROUNDING = RoundingMode.HALF_EVEN


def round_quotient(
    amount: A,
    factor: A,
    calculator: Calculator[A],
    mode: RoundingMode = DEFAULT_ROUNDING,
) -> A:
    """
    Return ``amount / factor`` rounded to an integer.

    Preconditions:
        - factor is non-zero. A negative factor is folded into the sign of
          the amount.
    Postconditions:
        - When factor divides amount exactly the exact quotient is returned
          regardless of mode.
    Raises:
        DivisionByZeroError: factor is zero.
    """
    zero = calculator.zero()
    if calculator.compare(factor, zero) < 0:
        amount = calculator.subtract(zero, amount)
        factor = calculator.subtract(zero, factor)

    # Truncated quotient; the remainder carries the sign of the amount
    quotient = calculator.integer_divide(amount, factor)
    remainder = calculator.modulo(amount, factor)
    if calculator.compare(remainder, zero) == 0:
        return quotient

    is_positive = calculator.compare(amount, zero) > 0
    toward = quotient
    away = calculator.increment(quotient) if is_positive else calculator.decrement(quotient)

    match mode:
        case RoundingMode.TRUNCATE:
            return toward
        case RoundingMode.CEILING:
            return away if is_positive else toward
        case RoundingMode.FLOOR:
            return toward if is_positive else away

    two = calculator.increment(calculator.one())
    abs_remainder = remainder if is_positive else calculator.subtract(zero, remainder)
    half_cmp = calculator.compare(abs_remainder, calculator.subtract(factor, abs_remainder))
    if half_cmp < 0:
        return toward
    if half_cmp > 0:
        return away

    # Exactly halfway
    match mode:
        case RoundingMode.HALF_AWAY_FROM_ZERO:
            return away
        case RoundingMode.HALF_TOWARDS_ZERO:
            return toward
        case RoundingMode.HALF_UP:
            return away if is_positive else toward
        case RoundingMode.HALF_DOWN:
            return toward if is_positive else away
        case RoundingMode.HALF_EVEN | RoundingMode.HALF_ODD:
            quotient_is_even = calculator.compare(calculator.modulo(quotient, two), zero) == 0
            keep = quotient_is_even if mode is RoundingMode.HALF_EVEN else not quotient_is_even
            return toward if keep else away
        case _:
            raise ValueError(f"Unknown rounding mode: {mode}")


def drop_digits(
    amount: A,
    digits: int,
    base: int,
    calculator: Calculator[A],
    mode: RoundingMode = DEFAULT_ROUNDING,
) -> A:
    """Re-express ``amount`` at ``digits`` fewer places of ``base``, rounding per mode."""
    if digits == 0:
        return amount
    factor = calculator.power(calculator.coerce(base), calculator.coerce(digits))
    return round_quotient(amount, factor, calculator, mode)
