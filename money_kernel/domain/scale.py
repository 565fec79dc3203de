"""
Scale -- Aligning and changing the decimal scale of Money values.

Responsibility:
    Brings values of the same currency to a common scale before any binary
    operation, and moves a single value to a new scale (exactly when
    scaling up, through a rounding policy when scaling down).

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.

Invariants enforced:
    - Normalization only ever scales UP (multiplication by a positive power
      of the currency base), so it is lossless.
    - normalize_pair(a, b) and normalize_pair(b, a) yield the same rescaled
      amounts in swapped order.
    - Currency mismatch is detected before any rescaling is attempted.

Failure modes:
    - CurrencyMismatchError when operands do not share a currency code.
    - InvalidScaleError for a negative target scale.
    - EmptyOperandsError for an empty sequence.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from money_kernel.domain.rounding import DEFAULT_ROUNDING, RoundingMode, drop_digits
from money_kernel.domain.values import Money, check_scale
from money_kernel.exceptions import CurrencyMismatchError, EmptyOperandsError
from money_kernel.logging_config import get_logger

logger = get_logger("domain.scale")


def assert_same_currency(values: Sequence[Money], operation: str = "") -> None:
    """Raise CurrencyMismatchError unless every value shares the first value's code."""
    if not values:
        raise EmptyOperandsError(operation or "assert_same_currency")
    first = values[0].currency.code
    for other in values[1:]:
        if other.currency.code != first:
            logger.warning("currency_mismatch", extra={
                "operation": operation,
                "currency1": first,
                "currency2": other.currency.code,
            })
            raise CurrencyMismatchError(first, other.currency.code, operation)


def _scale_up_amount(value: Money, new_scale: int) -> Any:
    calc = value.calculator
    if new_scale == value.scale:
        return value.amount
    factor = calc.power(calc.coerce(value.currency.base), calc.coerce(new_scale - value.scale))
    return calc.multiply(value.amount, factor)


def transform_scale(
    value: Money,
    new_scale: int,
    rounding: RoundingMode = DEFAULT_ROUNDING,
) -> Money:
    """
    Re-express ``value`` at ``new_scale``.

    Scaling up is exact. Scaling down drops digits through ``rounding``;
    for amounts already exact at the lower scale this is lossless under
    every policy.
    """
    check_scale(new_scale)
    if new_scale >= value.scale:
        return value.with_amount(_scale_up_amount(value, new_scale), new_scale)
    amount = drop_digits(
        value.amount,
        value.scale - new_scale,
        value.currency.base,
        value.calculator,
        rounding,
    )
    return value.with_amount(amount, new_scale)


def normalize_pair(a: Money, b: Money, operation: str = "normalize") -> tuple[Money, Money]:
    """Re-express two same-currency values at ``max(a.scale, b.scale)``."""
    assert_same_currency((a, b), operation)
    target = max(a.scale, b.scale)
    return (
        a.with_amount(_scale_up_amount(a, target), target),
        b.with_amount(_scale_up_amount(b, target), target),
    )


def normalize_scale(values: Sequence[Money], operation: str = "normalize") -> tuple[Money, ...]:
    """Re-express any number of same-currency values at their highest scale."""
    assert_same_currency(values, operation)
    target = max(v.scale for v in values)
    return tuple(v.with_amount(_scale_up_amount(v, target), target) for v in values)


def trim_scale(value: Money) -> Money:
    """
    Drop trailing zero digits from the amount, never below currency.exponent.

    ``Money(10500, USD, scale=4)`` trims to ``Money(105, USD, scale=2)``.
    """
    calc = value.calculator
    zero = calc.zero()
    base = calc.coerce(value.currency.base)
    amount, scale = value.amount, value.scale
    while scale > value.currency.exponent and calc.compare(calc.modulo(amount, base), zero) == 0:
        amount = calc.integer_divide(amount, base)
        scale -= 1
    if scale == value.scale:
        return value
    return value.with_amount(amount, scale)


def has_sub_units(value: Money) -> bool:
    """True when the amount has a fractional part in major currency units."""
    calc = value.calculator
    factor = calc.power(calc.coerce(value.currency.base), calc.coerce(value.scale))
    return calc.compare(calc.modulo(value.amount, factor), calc.zero()) != 0
