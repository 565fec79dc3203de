"""
Tests for Money arithmetic.

Verifies:
- Safe operations validate currency and normalize scale
- Unsafe operations skip validation and keep the left operand's metadata
- Multiply / divide / percentage compute exactly and round once
- Typed errors for bad factors, zero divisors and out-of-range percentages
"""

from fractions import Fraction

import pytest

from money_kernel.domain.arithmetic import (
    add_many,
    divide,
    multiply,
    percentage,
    safe_add,
    safe_subtract,
    unsafe_add,
    unsafe_divide,
    unsafe_multiply,
    unsafe_subtract,
)
from money_kernel.domain.calculator import get_calculator
from money_kernel.domain.rounding import RoundingMode
from money_kernel.domain.values import Money, ScaledAmount
from money_kernel.exceptions import (
    AmountOverflowError,
    CurrencyMismatchError,
    DivisionByZeroError,
    EmptyOperandsError,
    InvalidAmountError,
    InvalidPercentageError,
    InvalidScaleError,
)


def usd(amount, scale=None, calculator=None):
    return Money.of(amount, "USD", scale, calculator)


class TestAddSubtract:
    """Tests for safe and unsafe add / subtract."""

    def test_safe_add(self):
        assert safe_add(usd(500), usd(250)) == usd(750)

    def test_safe_subtract(self):
        assert safe_subtract(usd(500), usd(750)) == usd(-250)

    def test_safe_add_normalizes(self):
        assert safe_add(usd(100), usd(5, scale=3)) == usd(1005, scale=3)

    def test_safe_subtract_normalizes(self):
        assert safe_subtract(usd(1, scale=0), usd(1, scale=2)) == usd(99)

    def test_safe_add_mismatch(self):
        with pytest.raises(CurrencyMismatchError) as exc_info:
            safe_add(usd(100), Money.of(100, "EUR"))
        assert exc_info.value.operation == "add"
        assert exc_info.value.code == "CURRENCY_MISMATCH"

    def test_safe_subtract_mismatch(self):
        with pytest.raises(CurrencyMismatchError):
            safe_subtract(usd(100), Money.of(100, "EUR"))

    def test_unsafe_add_skips_currency_check(self):
        result = unsafe_add(usd(100), Money.of(100, "EUR"))
        assert result == usd(200)

    def test_unsafe_add_keeps_left_scale(self):
        result = unsafe_add(usd(100), usd(5, scale=3))
        assert result == usd(105)

    def test_unsafe_subtract(self):
        assert unsafe_subtract(usd(100), usd(30)) == usd(70)

    def test_add_many(self):
        total = add_many([usd(1), usd(10, scale=3), usd(2)])
        assert total == usd(40, scale=3)

    def test_add_many_single(self):
        assert add_many([usd(7)]) == usd(7)

    def test_add_many_empty(self):
        with pytest.raises(EmptyOperandsError) as exc_info:
            add_many([])
        assert exc_info.value.code == "EMPTY_OPERANDS"

    def test_add_many_mismatch(self):
        with pytest.raises(CurrencyMismatchError):
            add_many([usd(1), Money.of(1, "EUR")])

    def test_calculator_preserved(self):
        calc = get_calculator("decimal")
        result = safe_add(usd(1, calculator=calc), usd(2, calculator=calc))
        assert result.calculator is calc

    def test_int64_overflow_surfaces(self):
        calc = get_calculator("int64")
        with pytest.raises(AmountOverflowError):
            safe_add(usd(2**63 - 1, calculator=calc), usd(1, calculator=calc))


class TestMultiply:
    """Tests for multiply and unsafe_multiply."""

    def test_integer_multiplier(self):
        assert multiply(usd(250), 4) == usd(1000)

    def test_scaled_multiplier(self):
        assert multiply(usd(100), ScaledAmount(15, 1)) == usd(150)

    def test_rounding_default_half_even(self):
        assert multiply(usd(101), ScaledAmount(5, 1)) == usd(50)
        assert multiply(usd(103), ScaledAmount(5, 1)) == usd(52)

    def test_rounding_policy(self):
        assert multiply(usd(101), ScaledAmount(5, 1), rounding=RoundingMode.HALF_UP) == usd(51)
        assert multiply(usd(101), ScaledAmount(5, 1), rounding=RoundingMode.FLOOR) == usd(50)

    def test_explicit_scale_keeps_precision(self):
        assert multiply(usd(101), ScaledAmount(5, 1), scale=3) == usd(505, scale=3)

    def test_negative_amount(self):
        assert multiply(usd(-101), ScaledAmount(5, 1), rounding=RoundingMode.HALF_UP) == usd(-50)

    def test_invalid_factor(self):
        with pytest.raises(InvalidAmountError):
            multiply(usd(100), 1.5)
        with pytest.raises(InvalidAmountError):
            multiply(usd(100), "2")

    def test_invalid_scale(self):
        with pytest.raises(InvalidScaleError):
            multiply(usd(100), 2, scale=-1)

    def test_unsafe_multiply_sums_scales(self):
        result = unsafe_multiply(usd(100), ScaledAmount(15, 1))
        assert result == usd(1500, scale=3)

    def test_unsafe_multiply_int(self):
        assert unsafe_multiply(usd(100), 3) == usd(300)

    def test_unsafe_multiply_base_five_matches_multiply(self):
        """A decimal factor means the same product in a base-5 currency."""
        two_ariary = Money.of(10, "MGA")
        factor = ScaledAmount(15, 1)
        unsafe = unsafe_multiply(two_ariary, factor)
        safe = multiply(two_ariary, factor)
        assert unsafe == Money.of(75, "MGA", scale=2)
        assert Fraction(unsafe.amount, 5**unsafe.scale) == Fraction(3)
        assert Fraction(safe.amount, 5**safe.scale) == Fraction(3)


class TestDivide:
    """Tests for divide and unsafe_divide."""

    def test_integer_divisor(self):
        assert divide(usd(1000), 4) == usd(250)

    def test_non_terminating_rounded(self):
        assert divide(usd(100), 3) == usd(33)
        assert divide(usd(200), 3) == usd(67)

    def test_extra_precision(self):
        assert divide(usd(100), 3, scale=4) == usd(3333, scale=4)

    def test_scaled_divisor(self):
        assert divide(usd(100), ScaledAmount(5, 1)) == usd(200)

    def test_tie_policy(self):
        assert divide(usd(5), 2) == usd(2)
        assert divide(usd(7), 2) == usd(4)
        assert divide(usd(5), 2, rounding=RoundingMode.HALF_AWAY_FROM_ZERO) == usd(3)
        assert divide(usd(-5), 2, rounding=RoundingMode.HALF_UP) == usd(-2)

    def test_negative_divisor(self):
        assert divide(usd(100), -4) == usd(-25)

    def test_divide_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            divide(usd(100), 0)
        with pytest.raises(DivisionByZeroError):
            divide(usd(100), ScaledAmount(0, 2))

    def test_unsafe_divide(self):
        assert unsafe_divide(usd(5), 2) == usd(2)
        assert unsafe_divide(usd(5), 2, RoundingMode.CEILING) == usd(3)

    def test_unsafe_divide_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            unsafe_divide(usd(5), 0)


class TestPercentage:
    """Tests for percentage."""

    def test_whole_percent(self):
        assert percentage(usd(1000), 50) == usd(500)

    def test_fractional_percent(self):
        assert percentage(usd(1000), ScaledAmount(125, 1)) == usd(125)

    def test_rounded(self):
        assert percentage(usd(1001), 50) == usd(500)
        assert percentage(usd(1001), 50, rounding=RoundingMode.HALF_UP) == usd(501)

    def test_bounds_inclusive(self):
        assert percentage(usd(1000), 0) == usd(0)
        assert percentage(usd(1000), 100) == usd(1000)
        assert percentage(usd(1000), ScaledAmount(10000, 2)) == usd(1000)

    @pytest.mark.parametrize("percent", [101, -1, ScaledAmount(1001, 1)])
    def test_out_of_range(self, percent):
        with pytest.raises(InvalidPercentageError) as exc_info:
            percentage(usd(1000), percent)
        assert exc_info.value.code == "INVALID_PERCENTAGE"


class TestBackendsAgree:
    """Arithmetic gives identical integer results on every backend."""

    def test_divide(self, calculator):
        value = usd(100, calculator=calculator)
        result = divide(value, 3, scale=4)
        assert result.amount == calculator.coerce(3333)
        assert result.calculator is calculator

    def test_multiply(self, calculator):
        value = usd(101, calculator=calculator)
        assert multiply(value, ScaledAmount(5, 1)).amount == calculator.coerce(50)
