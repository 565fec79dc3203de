"""
Pytest fixtures for the money kernel test suite.

Provides:
- Common currencies (ISO and a custom non-ISO unit)
- Access to every calculator backend
- Logging state reset between tests
"""

import pytest

from money_kernel.domain.calculator import available_calculators, get_calculator
from money_kernel.domain.currency import Currency, CurrencyRegistry
from money_kernel.logging_config import LogContext, reset_logging


@pytest.fixture(autouse=True)
def _isolated_logging():
    """Tests never leak handlers or context fields into each other."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()


@pytest.fixture
def usd() -> Currency:
    return CurrencyRegistry.get("USD")


@pytest.fixture
def eur() -> Currency:
    return CurrencyRegistry.get("EUR")


@pytest.fixture
def jpy() -> Currency:
    return CurrencyRegistry.get("JPY")


@pytest.fixture
def mga() -> Currency:
    """Malagasy ariary: base 5, one sub-unit digit (1 ariary = 5 iraimbilanja)."""
    return CurrencyRegistry.get("MGA")


@pytest.fixture
def btc() -> Currency:
    return Currency("BTC", base=10, exponent=8)


@pytest.fixture(params=available_calculators())
def calculator(request):
    """Parametrizes a test over every built-in backend."""
    return get_calculator(request.param)
