"""
Arithmetic -- add, subtract, multiply, divide and percentage on Money.

Responsibility:
    Thin orchestration of scale normalization, Calculator primitives and a
    rounding policy. Two variants exist for each operation:

    * ``unsafe_*`` skips validation for callers that have already
      guaranteed currency and scale compatibility. It never reads currency
      codes and keeps the left operand's currency and scale.
    * ``safe_*`` (and the plain ``multiply`` / ``divide`` / ``percentage``)
      validates first and fails fast with a typed error rather than
      producing a silently wrong amount.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.

Invariants enforced:
    - Results are computed as exact rationals and only ever reduced to an
      integer amount through the declared RoundingMode; nothing truncates
      silently.
    - Operands are never mutated; every call returns a new Money.

Failure modes:
    - CurrencyMismatchError from safe_add / safe_subtract / add_many.
    - EmptyOperandsError from add_many with no values.
    - DivisionByZeroError from divide with a zero divisor.
    - InvalidAmountError for a non-integer / non-ScaledAmount factor.
    - InvalidPercentageError for percentages outside [0, 100].
    - InvalidScaleError for a negative target scale.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from money_kernel.domain.rounding import DEFAULT_ROUNDING, RoundingMode, round_quotient
from money_kernel.domain.scale import normalize_pair, normalize_scale
from money_kernel.domain.values import Money, ScaledAmount, check_scale
from money_kernel.exceptions import (
    DivisionByZeroError,
    InvalidAmountError,
    InvalidPercentageError,
)
from money_kernel.logging_config import get_logger

logger = get_logger("domain.arithmetic")


def _as_factor(value: object, operation: str) -> ScaledAmount:
    if isinstance(value, ScaledAmount):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return ScaledAmount(value, 0)
    logger.warning("invalid_factor", extra={
        "operation": operation,
        "factor_type": type(value).__name__,
    })
    raise InvalidAmountError(value, f"{operation} factor must be an int or ScaledAmount")


def _rescale_rational(
    value: Money,
    numerator: int,
    denominator: int,
    target_scale: int,
    rounding: RoundingMode,
) -> Money:
    """
    Money for ``value * numerator / denominator`` at ``target_scale``.

    The real-world amount is ``amount / base**scale``; expressed at the
    target scale it becomes ``amount * numerator * base**target /
    (base**scale * denominator)``, reduced to one rounded integer quotient.
    """
    calc = value.calculator
    base = calc.coerce(value.currency.base)
    top = calc.multiply(value.amount, calc.coerce(numerator))
    bottom = calc.coerce(denominator)
    if target_scale >= value.scale:
        top = calc.multiply(top, calc.power(base, calc.coerce(target_scale - value.scale)))
    else:
        bottom = calc.multiply(bottom, calc.power(base, calc.coerce(value.scale - target_scale)))
    return value.with_amount(round_quotient(top, bottom, calc, rounding), target_scale)


# ---------------------------------------------------------------------------
# Add / subtract
# ---------------------------------------------------------------------------


def unsafe_add(augend: Money, addend: Money) -> Money:
    """Add raw amounts. Assumes matching currency and scale."""
    return augend.with_amount(augend.calculator.add(augend.amount, addend.amount))


def unsafe_subtract(minuend: Money, subtrahend: Money) -> Money:
    """Subtract raw amounts. Assumes matching currency and scale."""
    return minuend.with_amount(minuend.calculator.subtract(minuend.amount, subtrahend.amount))


def safe_add(augend: Money, addend: Money) -> Money:
    """Add two same-currency values at their common (highest) scale."""
    left, right = normalize_pair(augend, addend, "add")
    return unsafe_add(left, right)


def safe_subtract(minuend: Money, subtrahend: Money) -> Money:
    """Subtract two same-currency values at their common (highest) scale."""
    left, right = normalize_pair(minuend, subtrahend, "subtract")
    return unsafe_subtract(left, right)


def add_many(values: Sequence[Money]) -> Money:
    """Sum one or more same-currency values. Raises EmptyOperandsError for none."""
    normalized = normalize_scale(values, "add")
    total = normalized[0]
    for value in normalized[1:]:
        total = unsafe_add(total, value)
    return total


# ---------------------------------------------------------------------------
# Multiply
# ---------------------------------------------------------------------------


def unsafe_multiply(multiplicand: Money, multiplier: int | ScaledAmount) -> Money:
    """
    Product with no validation at scale ``multiplicand.scale + multiplier.scale``.

    Exact for decimal currencies. In other bases the decimal factor is
    re-expressed in the currency base, and a product that does not fit the
    summed scale is rounded half-even.
    """
    factor = ScaledAmount.of(multiplier)
    calc = multiplicand.calculator
    scale = multiplicand.scale + factor.scale
    if multiplicand.currency.base != 10:
        return _rescale_rational(
            multiplicand, factor.amount, 10**factor.scale, scale, DEFAULT_ROUNDING
        )
    return multiplicand.with_amount(
        calc.multiply(multiplicand.amount, calc.coerce(factor.amount)), scale
    )


def multiply(
    multiplicand: Money,
    multiplier: int | ScaledAmount,
    *,
    scale: int | None = None,
    rounding: RoundingMode = DEFAULT_ROUNDING,
) -> Money:
    """
    Multiply by an integer or an exact decimal factor.

    Args:
        multiplicand: Value to scale.
        multiplier: int, or ScaledAmount for a non-integral factor
            (``ScaledAmount(15, 1)`` is 1.5).
        scale: Result scale. Defaults to the multiplicand's scale.
        rounding: Policy applied when the exact product does not fit the
            result scale.
    """
    factor = _as_factor(multiplier, "multiply")
    target = multiplicand.scale if scale is None else check_scale(scale)
    return _rescale_rational(multiplicand, factor.amount, 10**factor.scale, target, rounding)


# ---------------------------------------------------------------------------
# Divide
# ---------------------------------------------------------------------------


def unsafe_divide(
    dividend: Money,
    divisor: Any,
    rounding: RoundingMode = DEFAULT_ROUNDING,
) -> Money:
    """Divide the raw amount by an integer at the same scale, rounding per policy."""
    calc = dividend.calculator
    return dividend.with_amount(
        round_quotient(dividend.amount, calc.coerce(divisor), calc, rounding)
    )


def divide(
    dividend: Money,
    divisor: int | ScaledAmount,
    *,
    scale: int | None = None,
    rounding: RoundingMode = DEFAULT_ROUNDING,
) -> Money:
    """
    Divide by an integer or exact decimal divisor.

    The quotient is computed exactly and reduced to the target scale
    (default: the dividend's scale) through ``rounding``. Request a larger
    ``scale`` for extra precision headroom.
    """
    factor = _as_factor(divisor, "divide")
    if factor.amount == 0:
        logger.warning("division_by_zero", extra={
            "amount": str(dividend.amount),
            "currency": dividend.currency.code,
        })
        raise DivisionByZeroError(dividend.amount, "divide")
    target = dividend.scale if scale is None else check_scale(scale)
    return _rescale_rational(dividend, 10**factor.scale, factor.amount, target, rounding)


# ---------------------------------------------------------------------------
# Percentage
# ---------------------------------------------------------------------------


def percentage(
    value: Money,
    percent: int | ScaledAmount,
    *,
    rounding: RoundingMode = DEFAULT_ROUNDING,
) -> Money:
    """
    ``percent`` % of ``value`` at the value's scale.

    Raises:
        InvalidPercentageError: percent is outside [0, 100].
    """
    factor = _as_factor(percent, "percentage")
    if factor.amount < 0 or factor.amount > 100 * 10**factor.scale:
        logger.warning("invalid_percentage", extra={"percentage": str(factor)})
        raise InvalidPercentageError(str(factor))
    return _rescale_rational(value, factor.amount, 100 * 10**factor.scale, value.scale, rounding)
