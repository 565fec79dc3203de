"""
Module: money_engines.conversion
Responsibility:
    Re-express a monetary amount in another currency using a caller-supplied
    exact exchange rate, at an explicit target scale and rounding policy.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import money_kernel.

Invariants enforced:
    - Rates are exact rationals; the converted amount is computed exactly
      and reduced once through the declared RoundingMode.
    - Conversion intentionally crosses currencies, so the same-currency
      guard of the binary operations does not apply.
    - The source value is never modified.

Failure modes:
    - InvalidExchangeRateError for zero/negative rates.
    - ExchangeRateNotFoundError when convert_with_rates has no rate for the
      target currency.
    - InvalidScaleError for a negative target scale.

Usage:
    from money_engines.conversion import ConversionEngine
    from money_kernel.domain.values import ExchangeRate, Money

    engine = ConversionEngine()
    eur = engine.convert(
        value=Money.of(100, "USD"),
        currency="EUR",
        rate=ExchangeRate(110, 100),
    )
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from money_engines.tracer import traced_engine
from money_kernel.domain.currency import Currency, CurrencyRegistry
from money_kernel.domain.rounding import DEFAULT_ROUNDING, RoundingMode, round_quotient
from money_kernel.domain.values import ExchangeRate, Money, ScaledAmount, check_scale
from money_kernel.exceptions import ExchangeRateNotFoundError
from money_kernel.logging_config import get_logger

logger = get_logger("engines.conversion")

Rate = ExchangeRate | ScaledAmount | int


class ConversionEngine:
    """
    Convert Money between currencies with exact rates.

    Contract:
        Pure function of (value, currency, rate, scale, rounding).
    Guarantees:
        - result = value * rate, expressed at ``scale`` (default: the target
          currency's exponent), rounded once by ``rounding``.
        - The result keeps the source value's calculator.
    Non-goals:
        - Does NOT look up exchange rates.
    """

    def __init__(self, default_rounding: RoundingMode = DEFAULT_ROUNDING):
        self.default_rounding = default_rounding

    @traced_engine("conversion", "1.0", fingerprint_fields=("value", "currency", "rate", "scale"))
    def convert(
        self,
        value: Money,
        currency: Currency | str,
        rate: Rate,
        scale: int | None = None,
        rounding: RoundingMode | None = None,
    ) -> Money:
        """
        Convert ``value`` into ``currency`` at ``rate``.

        Args:
            value: Source amount.
            currency: Target Currency or ISO 4217 code.
            rate: ExchangeRate, ScaledAmount (amount+scale pair) or int.
            scale: Target scale. Defaults to the target currency exponent.
            rounding: Policy for the remainder. Defaults to the engine's.

        Returns:
            New Money in the target currency.
        """
        target_currency = currency if isinstance(currency, Currency) else CurrencyRegistry.get(currency)
        exchange_rate = ExchangeRate.of(rate)
        target_scale = target_currency.exponent if scale is None else check_scale(scale)
        mode = rounding or self.default_rounding

        calc = value.calculator
        source_base = calc.coerce(value.currency.base)
        target_base = calc.coerce(target_currency.base)

        # amount / sb**s * n / d at target scale t: amount * n * tb**t / (sb**s * d)
        top = calc.multiply(
            calc.multiply(value.amount, calc.coerce(exchange_rate.numerator)),
            calc.power(target_base, calc.coerce(target_scale)),
        )
        bottom = calc.multiply(
            calc.power(source_base, calc.coerce(value.scale)),
            calc.coerce(exchange_rate.denominator),
        )
        amount = round_quotient(top, bottom, calc, mode)

        converted = Money.of(amount, target_currency, target_scale, calc)
        logger.info("conversion_completed", extra={
            "from_currency": value.currency.code,
            "to_currency": target_currency.code,
            "source_amount": str(value.amount),
            "source_scale": value.scale,
            "converted_amount": str(converted.amount),
            "scale": target_scale,
            "rate": str(exchange_rate),
            "rounding": mode.value,
        })
        return converted

    def convert_with_rates(
        self,
        value: Money,
        currency: Currency | str,
        rates: Mapping[str, Rate],
        scale: int | None = None,
        rounding: RoundingMode | None = None,
    ) -> Money:
        """Convert using a rate table keyed by target currency code."""
        target_currency = currency if isinstance(currency, Currency) else CurrencyRegistry.get(currency)
        rate: Any = rates.get(target_currency.code)
        if rate is None:
            logger.warning("conversion_rate_missing", extra={
                "from_currency": value.currency.code,
                "to_currency": target_currency.code,
            })
            raise ExchangeRateNotFoundError(value.currency.code, target_currency.code)
        return self.convert(
            value=value,
            currency=target_currency,
            rate=rate,
            scale=scale,
            rounding=rounding,
        )


_default_engine = ConversionEngine()


def convert(
    value: Money,
    currency: Currency | str,
    rate: Rate,
    scale: int | None = None,
    rounding: RoundingMode = DEFAULT_ROUNDING,
) -> Money:
    """Module-level shortcut for ConversionEngine.convert."""
    return _default_engine.convert(
        value=value,
        currency=currency,
        rate=rate,
        scale=scale,
        rounding=rounding,
    )
