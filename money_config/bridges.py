"""
Config -> Kernel Bridges.

Functions that convert an EngineConfig into kernel and engine objects.
These live in money_config (the producer) because the kernel must NEVER
import money_config.

Usage:
    from money_config import get_active_config
    from money_config.bridges import build_money_factory

    config = get_active_config()
    factory = build_money_factory(config)
    price = factory.create(1999)
"""

from __future__ import annotations

from money_config.schema import EngineConfig
from money_engines.conversion import ConversionEngine
from money_kernel.domain.calculator import Calculator, get_calculator
from money_kernel.domain.currency import Currency, CurrencyRegistry
from money_kernel.domain.values import MoneyFactory


def resolve_currency(config: EngineConfig, code: str) -> Currency:
    """Currency for ``code``: declared currencies first, then ISO 4217."""
    definition = config.currency_def(code)
    if definition is not None:
        return Currency(definition.code, definition.base, definition.exponent)
    return CurrencyRegistry.get(code)


def build_calculator(config: EngineConfig) -> Calculator:
    return get_calculator(config.calculator)


def build_money_factory(config: EngineConfig) -> MoneyFactory:
    """MoneyFactory bound to the configured backend and defaults."""
    return MoneyFactory(
        calculator=build_calculator(config),
        default_currency=resolve_currency(config, config.default_currency),
        default_amount=config.default_amount,
    )


def build_conversion_engine(config: EngineConfig) -> ConversionEngine:
    return ConversionEngine(default_rounding=config.default_rounding)
