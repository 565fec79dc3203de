"""
Unit tests for the Money value object and its companions.

Verifies:
- Construction, defaults and validation
- Immutability and structural equality
- Snapshot round trips
- ScaledAmount and ExchangeRate construction
- MoneyFactory defaults
- Operator overloads
"""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from money_kernel.domain.calculator import DEFAULT_CALCULATOR, get_calculator
from money_kernel.domain.currency import Currency
from money_kernel.domain.values import (
    ExchangeRate,
    Money,
    MoneyFactory,
    MoneySnapshot,
    ScaledAmount,
)
from money_kernel.exceptions import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidCurrencyError,
    InvalidExchangeRateError,
    InvalidScaleError,
)


class TestMoneyConstruction:
    """Tests for Money.of and validation."""

    def test_scale_defaults_to_exponent(self, usd, jpy):
        assert Money.of(1050, usd).scale == 2
        assert Money.of(1050, jpy).scale == 0

    def test_currency_by_code(self, usd):
        money = Money.of(500, "usd")
        assert money.currency == usd

    def test_explicit_scale(self):
        money = Money.of(10500, "USD", scale=4)
        assert money.amount == 10500
        assert money.scale == 4

    def test_zero(self):
        zero = Money.zero("EUR")
        assert zero.amount == 0
        assert zero.is_zero
        assert zero.scale == 2

    @pytest.mark.parametrize("amount", [10.5, Decimal("1.01"), "100", None])
    def test_fractional_amount_rejected(self, amount):
        with pytest.raises(InvalidAmountError):
            Money.of(amount, "USD")

    @pytest.mark.parametrize("scale", [-1, 1.0, "2"])
    def test_invalid_scale_rejected(self, scale):
        with pytest.raises(InvalidScaleError):
            Money.of(100, "USD", scale=scale)

    def test_unknown_currency_code_rejected(self):
        with pytest.raises(InvalidCurrencyError):
            Money.of(100, "XXY")

    def test_custom_currency(self, btc):
        money = Money.of(150_000_000, btc)
        assert money.scale == 8
        assert money.to_units() == (1, 50_000_000)

    def test_calculator_backend(self):
        money = Money.of(100, "USD", calculator=get_calculator("decimal"))
        assert money.amount == Decimal(100)
        assert isinstance(money.amount, Decimal)

    def test_with_amount_keeps_currency_and_calculator(self):
        calc = get_calculator("int64")
        money = Money.of(100, "USD", calculator=calc)
        other = money.with_amount(250, scale=3)
        assert other.currency == money.currency
        assert other.calculator is calc
        assert other.scale == 3

    def test_constructor_defaults_missing_calculator(self):
        money = Money(100, "USD", calculator=None)
        assert money.calculator is DEFAULT_CALCULATOR
        assert money.amount == 100
        assert money + Money.of(1, "USD") == Money.of(101, "USD")


class TestMoneyImmutability:
    """Money never changes after construction."""

    def test_frozen(self):
        money = Money.of(100, "USD")
        with pytest.raises((FrozenInstanceError, AttributeError)):
            money.amount = 200

    def test_operations_return_new_instances(self):
        a = Money.of(100, "USD")
        b = Money.of(50, "USD")
        total = a + b
        assert total is not a
        assert a.amount == 100
        assert b.amount == 50


class TestMoneyEquality:
    """Equality is structural; value equality lives in comparison.equal."""

    def test_same_fields_equal(self):
        assert Money.of(100, "USD") == Money.of(100, "USD")
        assert hash(Money.of(100, "USD")) == hash(Money.of(100, "USD"))

    def test_different_scale_not_structurally_equal(self):
        assert Money.of(100, "USD", scale=2) != Money.of(1000, "USD", scale=3)

    def test_calculator_ignored_for_equality(self):
        assert Money.of(100, "USD") == Money.of(100, "USD", calculator=get_calculator("int64"))

    def test_currency_matters(self):
        assert Money.of(100, "USD") != Money.of(100, "EUR")


class TestMoneyPredicates:
    """Sign and sub-unit predicates."""

    def test_signs(self):
        assert Money.of(5, "USD").is_positive
        assert Money.of(-5, "USD").is_negative
        assert not Money.of(0, "USD").is_positive
        assert not Money.of(0, "USD").is_negative

    def test_has_sub_units(self):
        assert Money.of(1050, "USD").has_sub_units
        assert not Money.of(1000, "USD").has_sub_units

    def test_has_sub_units_base_five(self, mga):
        assert Money.of(7, mga).has_sub_units
        assert not Money.of(10, mga).has_sub_units


class TestMoneyFormattingSupport:
    """to_units / to_number / str."""

    def test_to_units(self):
        assert Money.of(1050, "USD").to_units() == (10, 50)

    def test_to_units_negative(self):
        assert Money.of(-1050, "USD").to_units() == (-10, -50)

    def test_to_units_base_five(self, mga):
        assert Money.of(13, mga).to_units() == (2, 3)

    def test_to_number(self):
        assert Money.of(1050, "USD").to_number() == pytest.approx(10.5)

    def test_str(self):
        assert str(Money.of(1050, "USD")) == "1050 USD (scale 2)"


class TestMoneySnapshot:
    """Snapshot interchange form."""

    def test_round_trip(self):
        money = Money.of(1050, "USD", scale=3)
        assert Money.from_snapshot(money.to_snapshot()) == money

    def test_dict_round_trip(self, mga):
        money = Money.of(13, mga)
        data = money.to_dict()
        assert data == {
            "amount": 13,
            "currency": {"code": "MGA", "base": 5, "exponent": 1},
            "scale": 1,
        }
        assert Money.from_snapshot(data) == money

    def test_from_dict_with_code_and_no_scale(self):
        snapshot = MoneySnapshot.from_dict({"amount": 500, "currency": "JPY"})
        assert snapshot.scale == 0
        assert snapshot.currency.code == "JPY"

    def test_from_snapshot_with_calculator(self):
        snapshot = Money.of(100, "USD").to_snapshot()
        money = Money.from_snapshot(snapshot, get_calculator("decimal"))
        assert isinstance(money.amount, Decimal)

    def test_snapshot_validated_on_rehydration(self):
        with pytest.raises(InvalidAmountError):
            Money.from_snapshot({"amount": 1.5, "currency": "USD", "scale": 2})


class TestMoneyOperators:
    """Operator overloads delegate to the safe operations."""

    def test_add_and_subtract(self):
        assert Money.of(100, "USD") + Money.of(50, "USD") == Money.of(150, "USD")
        assert Money.of(100, "USD") - Money.of(150, "USD") == Money.of(-50, "USD")

    def test_add_normalizes_scale(self):
        result = Money.of(100, "USD") + Money.of(1, "USD", scale=3)
        assert result == Money.of(1001, "USD", scale=3)

    def test_add_currency_mismatch(self):
        with pytest.raises(CurrencyMismatchError):
            Money.of(100, "USD") + Money.of(100, "EUR")

    def test_add_non_money_unsupported(self):
        with pytest.raises(TypeError):
            Money.of(100, "USD") + 5

    def test_neg_and_abs(self):
        assert -Money.of(100, "USD") == Money.of(-100, "USD")
        assert abs(Money.of(-100, "USD")) == Money.of(100, "USD")

    def test_multiply(self):
        assert Money.of(100, "USD") * 3 == Money.of(300, "USD")
        assert 3 * Money.of(100, "USD") == Money.of(300, "USD")
        assert Money.of(100, "USD") * ScaledAmount(15, 1) == Money.of(150, "USD")

    def test_ordering_across_scales(self):
        assert Money.of(100, "USD") < Money.of(1001, "USD", scale=3)
        assert Money.of(100, "USD") <= Money.of(1000, "USD", scale=3)
        assert Money.of(101, "USD") > Money.of(1000, "USD", scale=3)
        assert Money.of(100, "USD") >= Money.of(1000, "USD", scale=3)

    def test_ordering_currency_mismatch(self):
        with pytest.raises(CurrencyMismatchError):
            Money.of(100, "USD") < Money.of(100, "EUR")


class TestScaledAmount:
    """Tests for ScaledAmount."""

    def test_of_int(self):
        assert ScaledAmount.of(3) == ScaledAmount(3, 0)

    def test_from_decimal(self):
        assert ScaledAmount.from_decimal(Decimal("1.10")) == ScaledAmount(110, 2)
        assert ScaledAmount.from_decimal(Decimal("-0.5")) == ScaledAmount(-5, 1)
        assert ScaledAmount.from_decimal(Decimal("1E+2")) == ScaledAmount(100, 0)

    def test_from_decimal_rejects_non_finite(self):
        with pytest.raises(InvalidAmountError):
            ScaledAmount.from_decimal(Decimal("Infinity"))

    def test_validation(self):
        with pytest.raises(InvalidAmountError):
            ScaledAmount(1.5, 1)
        with pytest.raises(InvalidScaleError):
            ScaledAmount(15, -1)

    def test_str(self):
        assert str(ScaledAmount(110, 2)) == "110e-2"
        assert str(ScaledAmount(3)) == "3"


class TestExchangeRate:
    """Tests for ExchangeRate."""

    def test_of_scaled(self):
        rate = ExchangeRate.of_scaled(89, 2)
        assert (rate.numerator, rate.denominator) == (89, 100)

    def test_of_variants(self):
        assert ExchangeRate.of(2) == ExchangeRate(2, 1)
        assert ExchangeRate.of(ScaledAmount(110, 2)) == ExchangeRate(110, 100)
        rate = ExchangeRate(1, 3)
        assert ExchangeRate.of(rate) is rate

    def test_inverse(self):
        assert ExchangeRate(110, 100).inverse() == ExchangeRate(100, 110)

    @pytest.mark.parametrize("numerator,denominator", [(0, 1), (-1, 1), (1, 0), (1, -2)])
    def test_non_positive_rejected(self, numerator, denominator):
        with pytest.raises(InvalidExchangeRateError):
            ExchangeRate(numerator, denominator)

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidExchangeRateError):
            ExchangeRate(1.1, 1)

    def test_str(self):
        assert str(ExchangeRate(110, 100)) == "110/100"


class TestMoneyFactory:
    """Tests for MoneyFactory defaults."""

    def test_defaults(self):
        factory = MoneyFactory(default_currency="USD", default_amount=0)
        money = factory.create()
        assert money == Money.of(0, "USD")

    def test_explicit_arguments_win(self):
        factory = MoneyFactory(default_currency="USD", default_amount=100)
        money = factory.create(5, "EUR", 3)
        assert money == Money.of(5, "EUR", scale=3)

    def test_calculator_bound(self):
        calc = get_calculator("float")
        factory = MoneyFactory(calculator=calc, default_currency=Currency("USD"))
        money = factory.create(250)
        assert money.calculator is calc
        assert isinstance(money.amount, float)
        assert factory.zero().amount == 0.0

    def test_missing_currency(self):
        with pytest.raises(InvalidCurrencyError):
            MoneyFactory().create(100)

    def test_from_snapshot_uses_factory_calculator(self):
        calc = get_calculator("decimal")
        factory = MoneyFactory(calculator=calc)
        money = factory.from_snapshot(Money.of(100, "USD").to_snapshot())
        assert isinstance(money.amount, Decimal)
