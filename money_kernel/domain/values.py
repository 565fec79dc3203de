"""
Values -- Immutable, self-validating monetary value objects.

Responsibility:
    Provides the value types every monetary computation flows through:
    Money (amount + currency + scale), its plain MoneySnapshot interchange
    form, ScaledAmount (exact decimal factors) and ExchangeRate (exact
    rationals). MoneyFactory binds construction to a single calculator
    backend and a set of defaults.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Imported by every other domain module. Operator overloads delegate to
    money_kernel.domain.arithmetic / comparison, which are imported lazily
    because they themselves build on these types.

Invariants enforced:
    - amount is always an integer in the calculator's representation; a
      fractional value is never read or written.
    - scale is a non-negative int; it defaults to currency.exponent.
    - Every operation returns a new instance; nothing is mutated in place.
    - from_snapshot(to_snapshot(v)) == v.

Failure modes:
    - InvalidAmountError for non-integral amounts.
    - InvalidScaleError for negative or non-integer scales.
    - InvalidCurrencyError for unknown currency codes passed as strings.
    - InvalidExchangeRateError for zero/negative rates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from money_kernel.domain.calculator import DEFAULT_CALCULATOR, Calculator
from money_kernel.domain.currency import Currency, CurrencyRegistry
from money_kernel.exceptions import (
    InvalidAmountError,
    InvalidCurrencyError,
    InvalidExchangeRateError,
    InvalidScaleError,
)


def check_scale(scale: object) -> int:
    if not isinstance(scale, int) or isinstance(scale, bool) or scale < 0:
        raise InvalidScaleError(scale)
    return scale


def _check_int(value: object, label: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidAmountError(value, f"{label} must be an integer")
    return value


def _resolve_currency(currency: Currency | str) -> Currency:
    if isinstance(currency, Currency):
        return currency
    if isinstance(currency, str):
        return CurrencyRegistry.get(currency)
    raise InvalidCurrencyError(repr(currency), "currency must be Currency or str")


@dataclass(frozen=True, slots=True)
class ScaledAmount:
    """
    Exact decimal factor: ``amount / 10 ** scale``.

    Used for multipliers, divisors, percentages and allocation ratios that
    are not whole numbers. ``ScaledAmount(110, 2)`` is 1.10.
    """

    amount: int
    scale: int = 0

    def __post_init__(self) -> None:
        _check_int(self.amount, "ScaledAmount amount")
        check_scale(self.scale)

    @classmethod
    def of(cls, value: int | ScaledAmount) -> ScaledAmount:
        """Lift a plain int into a ScaledAmount at scale 0."""
        if isinstance(value, ScaledAmount):
            return value
        return cls(_check_int(value, "Factor"), 0)

    @classmethod
    def from_decimal(cls, value: Decimal) -> ScaledAmount:
        """Exact conversion from a finite Decimal (``Decimal("1.10")`` -> 110 at scale 2)."""
        if not isinstance(value, Decimal) or not value.is_finite():
            raise InvalidAmountError(value, "Expected a finite Decimal")
        sign, digits, exponent = value.as_tuple()
        amount = int("".join(map(str, digits)) or "0")
        if sign:
            amount = -amount
        if exponent >= 0:
            return cls(amount * 10**exponent, 0)
        return cls(amount, -exponent)

    def __str__(self) -> str:
        return f"{self.amount}e-{self.scale}" if self.scale else str(self.amount)


@dataclass(frozen=True, slots=True)
class ExchangeRate:
    """
    Exact positive exchange rate ``numerator / denominator``.

    Contract:
        1 unit of the source currency = numerator / denominator units of
        the target currency. Rates are supplied by the caller; nothing here
        looks them up.
    Guarantees:
        - numerator > 0 and denominator > 0, both ints.
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.numerator, int) or isinstance(self.numerator, bool):
            raise InvalidExchangeRateError(self.numerator, self.denominator, "numerator must be an integer")
        if not isinstance(self.denominator, int) or isinstance(self.denominator, bool):
            raise InvalidExchangeRateError(self.numerator, self.denominator, "denominator must be an integer")
        if self.denominator <= 0:
            raise InvalidExchangeRateError(self.numerator, self.denominator, "denominator must be positive")
        if self.numerator <= 0:
            raise InvalidExchangeRateError(self.numerator, self.denominator, "rate must be positive")

    @classmethod
    def of_scaled(cls, amount: int, scale: int = 0, base: int = 10) -> ExchangeRate:
        """Rate from an amount+scale pair (``of_scaled(89, 2)`` is 0.89)."""
        return cls(amount, base ** check_scale(scale))

    @classmethod
    def of(cls, rate: ExchangeRate | ScaledAmount | int) -> ExchangeRate:
        if isinstance(rate, ExchangeRate):
            return rate
        if isinstance(rate, ScaledAmount):
            return cls.of_scaled(rate.amount, rate.scale)
        return cls(rate)

    def inverse(self) -> ExchangeRate:
        return ExchangeRate(self.denominator, self.numerator)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


@dataclass(frozen=True, slots=True)
class MoneySnapshot:
    """Plain ``{amount, currency, scale}`` triple for formatting and persistence."""

    amount: Any
    currency: Currency
    scale: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "amount": self.amount,
            "currency": self.currency.to_dict(),
            "scale": self.scale,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MoneySnapshot:
        currency = data["currency"]
        if isinstance(currency, dict):
            currency = Currency.from_dict(currency)
        else:
            currency = _resolve_currency(currency)
        scale = data.get("scale")
        return cls(
            amount=data["amount"],
            currency=currency,
            scale=currency.exponent if scale is None else scale,
        )


@dataclass(frozen=True, slots=True)
class Money:
    """
    Monetary amount value object.

    Contract:
        ``amount`` counts the smallest sub-unit at ``scale`` (1050 at scale 2
        is 10.50). The amount is never separated from its currency and scale.
    Guarantees:
        - Immutable and hashable; the calculator takes no part in equality,
          hashing or repr.
        - Structural equality: ``Money(100, USD, 2) != Money(1000, USD, 3)``
          even though they denote the same value. Use
          ``comparison.equal`` for value equality across scales.
        - Operators enforce the same-currency constraint.
    Non-goals:
        - Does NOT format itself; formatters read ``to_snapshot()`` or
          ``to_units()``.
        - Does NOT auto-round.
    """

    amount: Any
    currency: Currency
    scale: int | None = None
    calculator: Calculator = field(
        default=DEFAULT_CALCULATOR, compare=False, repr=False, hash=False
    )

    def __post_init__(self) -> None:
        if self.calculator is None:
            object.__setattr__(self, "calculator", DEFAULT_CALCULATOR)
        object.__setattr__(self, "currency", _resolve_currency(self.currency))
        if self.scale is None:
            object.__setattr__(self, "scale", self.currency.exponent)
        check_scale(self.scale)
        object.__setattr__(self, "amount", self.calculator.coerce(self.amount))

    @classmethod
    def of(
        cls,
        amount: Any,
        currency: Currency | str,
        scale: int | None = None,
        calculator: Calculator | None = None,
    ) -> Money:
        """
        Factory method for creating Money.

        Args:
            amount: Integer count of sub-units at ``scale``.
            currency: Currency or ISO 4217 code.
            scale: Digits after the radix point. Defaults to currency.exponent.
            calculator: Numeric backend. Defaults to arbitrary-precision int.

        Raises:
            InvalidAmountError, InvalidScaleError, InvalidCurrencyError.
        """
        return cls(
            amount=amount,
            currency=currency,
            scale=scale,
            calculator=calculator or DEFAULT_CALCULATOR,
        )

    @classmethod
    def zero(
        cls,
        currency: Currency | str,
        scale: int | None = None,
        calculator: Calculator | None = None,
    ) -> Money:
        """Create a zero amount in the given currency."""
        calc = calculator or DEFAULT_CALCULATOR
        return cls.of(calc.zero(), currency, scale, calc)

    def with_amount(self, amount: Any, scale: int | None = None) -> Money:
        """New Money sharing currency and calculator, with a new amount (and scale)."""
        return Money(
            amount=amount,
            currency=self.currency,
            scale=self.scale if scale is None else scale,
            calculator=self.calculator,
        )

    # -- snapshot ----------------------------------------------------------

    def to_snapshot(self) -> MoneySnapshot:
        return MoneySnapshot(amount=self.amount, currency=self.currency, scale=self.scale)

    @classmethod
    def from_snapshot(
        cls,
        snapshot: MoneySnapshot | dict[str, Any],
        calculator: Calculator | None = None,
    ) -> Money:
        if isinstance(snapshot, dict):
            snapshot = MoneySnapshot.from_dict(snapshot)
        return cls.of(snapshot.amount, snapshot.currency, snapshot.scale, calculator)

    def to_dict(self) -> dict[str, Any]:
        return self.to_snapshot().to_dict()

    # -- predicates ----------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.calculator.compare(self.amount, self.calculator.zero()) == 0

    @property
    def is_positive(self) -> bool:
        return self.calculator.compare(self.amount, self.calculator.zero()) > 0

    @property
    def is_negative(self) -> bool:
        return self.calculator.compare(self.amount, self.calculator.zero()) < 0

    @property
    def has_sub_units(self) -> bool:
        from money_kernel.domain.scale import has_sub_units

        return has_sub_units(self)

    # -- formatting support --------------------------------------------------

    def to_units(self) -> tuple[Any, Any]:
        """Split into ``(major, minor)`` at this scale: 1050 at scale 2 -> (10, 50)."""
        calc = self.calculator
        factor = calc.power(calc.coerce(self.currency.base), calc.coerce(self.scale))
        return calc.integer_divide(self.amount, factor), calc.modulo(self.amount, factor)

    def to_number(self) -> float:
        """Lossy float of the real-world value. Formatting only."""
        return self.calculator.to_number(self.amount) / float(self.currency.base) ** self.scale

    # -- operators -----------------------------------------------------------

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        from money_kernel.domain.arithmetic import safe_add

        return safe_add(self, other)

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        from money_kernel.domain.arithmetic import safe_subtract

        return safe_subtract(self, other)

    def __neg__(self) -> Money:
        calc = self.calculator
        return self.with_amount(calc.subtract(calc.zero(), self.amount))

    def __abs__(self) -> Money:
        return -self if self.is_negative else self

    def __mul__(self, factor: int | ScaledAmount) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, ScaledAmount)):
            return NotImplemented
        from money_kernel.domain.arithmetic import multiply

        return multiply(self, factor)

    def __rmul__(self, factor: int | ScaledAmount) -> Money:
        return self.__mul__(factor)

    def __lt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        from money_kernel.domain.comparison import less_than

        return less_than(self, other)

    def __le__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        from money_kernel.domain.comparison import less_than_or_equal

        return less_than_or_equal(self, other)

    def __gt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        from money_kernel.domain.comparison import greater_than

        return greater_than(self, other)

    def __ge__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        from money_kernel.domain.comparison import greater_than_or_equal

        return greater_than_or_equal(self, other)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency.code} (scale {self.scale})"


class MoneyFactory:
    """
    Money construction bound to one calculator backend and a set of defaults.

    Contract:
        Explicit, caller-owned replacement for process-wide defaults. Missing
        amount defaults to ``default_amount``; missing currency to
        ``default_currency``; missing scale to the currency exponent.
    """

    def __init__(
        self,
        calculator: Calculator = DEFAULT_CALCULATOR,
        default_currency: Currency | str | None = None,
        default_amount: int = 0,
    ):
        self.calculator = calculator
        self.default_currency = (
            _resolve_currency(default_currency) if default_currency is not None else None
        )
        self.default_amount = default_amount

    def create(
        self,
        amount: Any = None,
        currency: Currency | str | None = None,
        scale: int | None = None,
    ) -> Money:
        resolved = currency if currency is not None else self.default_currency
        if resolved is None:
            raise InvalidCurrencyError("None", "No currency given and no default configured")
        return Money.of(
            self.default_amount if amount is None else amount,
            resolved,
            scale,
            self.calculator,
        )

    def zero(self, currency: Currency | str | None = None, scale: int | None = None) -> Money:
        return self.create(self.calculator.zero(), currency, scale)

    def from_snapshot(self, snapshot: MoneySnapshot | dict[str, Any]) -> Money:
        return Money.from_snapshot(snapshot, self.calculator)

    def __repr__(self) -> str:
        return (
            f"MoneyFactory({self.calculator!r}, "
            f"default_currency={self.default_currency!r}, "
            f"default_amount={self.default_amount!r})"
        )
