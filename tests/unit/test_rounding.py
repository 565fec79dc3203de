"""
Tests for rounding policies.

Verifies:
- Each RoundingMode on ties, non-ties and exact quotients, for both signs
- drop_digits in base 10 and base 5
- Backend independence of the results
"""

import pytest

from money_kernel.domain.calculator import DEFAULT_CALCULATOR, get_calculator
from money_kernel.domain.rounding import (
    DEFAULT_ROUNDING,
    RoundingMode,
    drop_digits,
    round_quotient,
)
from money_kernel.exceptions import DivisionByZeroError

M = RoundingMode

# (amount, factor) -> expected per mode; 15/10 is a positive tie, -15/10 a negative tie
TIE_CASES = [
    (M.HALF_EVEN, 15, 2),
    (M.HALF_EVEN, 25, 2),
    (M.HALF_EVEN, -15, -2),
    (M.HALF_EVEN, -25, -2),
    (M.HALF_ODD, 15, 1),
    (M.HALF_ODD, 25, 3),
    (M.HALF_ODD, -25, -3),
    (M.HALF_UP, 15, 2),
    (M.HALF_UP, -15, -1),
    (M.HALF_DOWN, 15, 1),
    (M.HALF_DOWN, -15, -2),
    (M.HALF_AWAY_FROM_ZERO, 15, 2),
    (M.HALF_AWAY_FROM_ZERO, -15, -2),
    (M.HALF_TOWARDS_ZERO, 15, 1),
    (M.HALF_TOWARDS_ZERO, -15, -1),
    (M.TRUNCATE, 15, 1),
    (M.TRUNCATE, -15, -1),
    (M.CEILING, 15, 2),
    (M.CEILING, -15, -1),
    (M.FLOOR, 15, 1),
    (M.FLOOR, -15, -2),
]


class TestRoundQuotient:
    """Tests for round_quotient."""

    @pytest.mark.parametrize("mode,amount,expected", TIE_CASES)
    def test_ties(self, mode, amount, expected):
        assert round_quotient(amount, 10, DEFAULT_CALCULATOR, mode) == expected

    @pytest.mark.parametrize("mode", list(RoundingMode))
    def test_exact_quotient_unchanged(self, mode):
        assert round_quotient(120, 10, DEFAULT_CALCULATOR, mode) == 12
        assert round_quotient(-120, 10, DEFAULT_CALCULATOR, mode) == -12

    @pytest.mark.parametrize(
        "mode", [m for m in RoundingMode if m.value.startswith("half")]
    )
    def test_half_modes_round_to_nearest_off_tie(self, mode):
        assert round_quotient(14, 10, DEFAULT_CALCULATOR, mode) == 1
        assert round_quotient(16, 10, DEFAULT_CALCULATOR, mode) == 2
        assert round_quotient(-14, 10, DEFAULT_CALCULATOR, mode) == -1
        assert round_quotient(-16, 10, DEFAULT_CALCULATOR, mode) == -2

    def test_directed_modes_off_tie(self):
        assert round_quotient(11, 10, DEFAULT_CALCULATOR, M.CEILING) == 2
        assert round_quotient(19, 10, DEFAULT_CALCULATOR, M.FLOOR) == 1
        assert round_quotient(-19, 10, DEFAULT_CALCULATOR, M.TRUNCATE) == -1
        assert round_quotient(-11, 10, DEFAULT_CALCULATOR, M.FLOOR) == -2

    def test_odd_factor_tie_detection(self):
        """With an odd factor, 2*|r| never equals the factor, so no ties."""
        assert round_quotient(5, 3, DEFAULT_CALCULATOR, M.HALF_DOWN) == 2
        assert round_quotient(4, 3, DEFAULT_CALCULATOR, M.HALF_UP) == 1

    def test_negative_factor_folded_into_sign(self):
        assert round_quotient(15, -10, DEFAULT_CALCULATOR, M.HALF_UP) == -1
        assert round_quotient(-15, -10, DEFAULT_CALCULATOR, M.HALF_UP) == 2

    def test_zero_factor(self):
        with pytest.raises(DivisionByZeroError):
            round_quotient(15, 0, DEFAULT_CALCULATOR)

    def test_apply_delegates(self):
        assert M.HALF_EVEN.apply(35, 10, DEFAULT_CALCULATOR) == 4

    def test_default_is_half_even(self):
        assert DEFAULT_ROUNDING is M.HALF_EVEN

    @pytest.mark.parametrize("mode,amount,expected", TIE_CASES)
    def test_backends_agree(self, calculator, mode, amount, expected):
        c = calculator
        result = round_quotient(c.coerce(amount), c.coerce(10), c, mode)
        assert result == c.coerce(expected)

    def test_int64_large_factor_does_not_overflow(self):
        """Remainders above half the int64 range still round."""
        calc = get_calculator("int64")
        factor = 2**62 + 10
        assert round_quotient(2**62 + 6, factor, calc, M.HALF_EVEN) == 1
        assert round_quotient(-(2**62 + 6), factor, calc, M.HALF_EVEN) == -1
        assert round_quotient(2**61, factor, calc, M.HALF_EVEN) == 0

    @pytest.mark.parametrize(
        "mode,expected",
        [(M.HALF_EVEN, 0), (M.HALF_ODD, 1), (M.HALF_UP, 1), (M.HALF_DOWN, 0)],
    )
    def test_int64_tie_near_limit(self, mode, expected):
        calc = get_calculator("int64")
        assert round_quotient(2**61 + 1, 2**62 + 2, calc, mode) == expected


class TestDropDigits:
    """Tests for drop_digits."""

    def test_banker_rounding_examples(self):
        assert drop_digits(25, 1, 10, DEFAULT_CALCULATOR, M.HALF_EVEN) == 2
        assert drop_digits(35, 1, 10, DEFAULT_CALCULATOR, M.HALF_EVEN) == 4

    def test_multiple_digits(self):
        assert drop_digits(12345, 3, 10, DEFAULT_CALCULATOR, M.HALF_EVEN) == 12
        assert drop_digits(12500, 3, 10, DEFAULT_CALCULATOR, M.HALF_EVEN) == 12
        assert drop_digits(13500, 3, 10, DEFAULT_CALCULATOR, M.HALF_EVEN) == 14

    def test_zero_digits_is_identity(self):
        assert drop_digits(12345, 0, 10, DEFAULT_CALCULATOR, M.FLOOR) == 12345

    def test_base_five(self):
        # 13 fifths = 2.6 -> 3 to nearest; 12 fifths = 2.4 -> 2
        assert drop_digits(13, 1, 5, DEFAULT_CALCULATOR, M.HALF_EVEN) == 3
        assert drop_digits(12, 1, 5, DEFAULT_CALCULATOR, M.HALF_EVEN) == 2
        assert drop_digits(13, 1, 5, DEFAULT_CALCULATOR, M.TRUNCATE) == 2
