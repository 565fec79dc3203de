"""
EngineConfig schema.

Defines the caller-owned configuration for the money engines. YAML files
are parsed into these types by the loader; bridges turn them into kernel
objects (calculator, factory, conversion engine). Nothing here is global:
callers hold the EngineConfig they loaded and pass it where needed.
"""

from __future__ import annotations

from dataclasses import dataclass

from money_kernel.domain.rounding import DEFAULT_ROUNDING, RoundingMode


@dataclass(frozen=True)
class CurrencyDef:
    """A non-ISO currency made available by code."""

    code: str
    base: int = 10
    exponent: int = 2


@dataclass(frozen=True)
class EngineConfig:
    """Defaults for constructing and operating on Money."""

    config_id: str = "default"
    version: int = 1
    calculator: str = "int"
    default_currency: str = "USD"
    default_amount: int = 0
    default_rounding: RoundingMode = DEFAULT_ROUNDING
    currencies: tuple[CurrencyDef, ...] = ()
    checksum: str = ""

    def currency_def(self, code: str) -> CurrencyDef | None:
        normalized = code.upper().strip()
        for definition in self.currencies:
            if definition.code.upper() == normalized:
                return definition
        return None
