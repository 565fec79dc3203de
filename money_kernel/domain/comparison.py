"""Comparison -- ordering and equality of Money values across scales."""

from __future__ import annotations

from collections.abc import Sequence

from money_kernel.domain.scale import normalize_pair, normalize_scale
from money_kernel.domain.values import Money


def compare(a: Money, b: Money) -> int:
    """-1, 0 or 1 after scale normalization. Currencies must match."""
    left, right = normalize_pair(a, b, "compare")
    return left.calculator.compare(left.amount, right.amount)


def equal(a: Money, b: Money) -> bool:
    """Same currency and same real-world amount (scales may differ)."""
    return have_same_currency((a, b)) and compare(a, b) == 0


def less_than(a: Money, b: Money) -> bool:
    return compare(a, b) < 0


def less_than_or_equal(a: Money, b: Money) -> bool:
    return compare(a, b) <= 0


def greater_than(a: Money, b: Money) -> bool:
    return compare(a, b) > 0


def greater_than_or_equal(a: Money, b: Money) -> bool:
    return compare(a, b) >= 0


def minimum(values: Sequence[Money]) -> Money:
    """Lowest value, expressed at the common scale of all inputs."""
    normalized = normalize_scale(values, "minimum")
    lowest = normalized[0]
    for value in normalized[1:]:
        if value.calculator.compare(value.amount, lowest.amount) < 0:
            lowest = value
    return lowest


def maximum(values: Sequence[Money]) -> Money:
    """Highest value, expressed at the common scale of all inputs."""
    normalized = normalize_scale(values, "maximum")
    highest = normalized[0]
    for value in normalized[1:]:
        if value.calculator.compare(value.amount, highest.amount) > 0:
            highest = value
    return highest


def is_zero(value: Money) -> bool:
    return value.is_zero


def is_positive(value: Money) -> bool:
    return value.is_positive


def is_negative(value: Money) -> bool:
    return value.is_negative


def have_same_currency(values: Sequence[Money]) -> bool:
    codes = {value.currency.code for value in values}
    return len(codes) <= 1


def have_same_amount(values: Sequence[Money]) -> bool:
    """Same real-world amount after normalization. Currencies must match."""
    normalized = normalize_scale(values, "have_same_amount")
    first = normalized[0]
    return all(
        first.calculator.compare(first.amount, value.amount) == 0
        for value in normalized[1:]
    )
