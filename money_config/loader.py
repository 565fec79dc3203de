"""
Configuration Loader (``money_config.loader``).

Responsibility
--------------
Loads YAML engine configuration files and parses them into the frozen
``money_config.schema`` dataclasses, validating every field on the way.

Invariants enforced
-------------------
* Parse errors raise ``ConfigurationError`` naming the offending field; no
  silent defaults for present-but-invalid values.
* ``compute_checksum`` produces a deterministic SHA-256 hash of the parsed
  document for configuration identity and change detection.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Invalid values  -> ``ConfigurationError``.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from money_config.schema import CurrencyDef, EngineConfig
from money_kernel.domain.calculator import available_calculators
from money_kernel.domain.currency import CurrencyRegistry
from money_kernel.domain.rounding import RoundingMode
from money_kernel.exceptions import ConfigurationError

_DEFAULTS = EngineConfig()


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ConfigurationError: if the document is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(str(path), "top-level YAML document must be a mapping")
    return data


def compute_checksum(data: dict[str, Any]) -> str:
    """Deterministic SHA-256 of a parsed configuration document."""
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def _int_field(data: dict[str, Any], name: str, default: int, minimum: int | None = None) -> int:
    value = data.get(name, default)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigurationError(name, f"expected an integer, got {value!r}")
    if minimum is not None and value < minimum:
        raise ConfigurationError(name, f"must be >= {minimum}, got {value}")
    return value


def parse_currency_def(data: dict[str, Any]) -> CurrencyDef:
    """Parse a CurrencyDef from a dict."""
    if not isinstance(data, dict) or not data.get("code"):
        raise ConfigurationError("currencies", f"each entry needs a code, got {data!r}")
    code = str(data["code"]).upper().strip()
    return CurrencyDef(
        code=code,
        base=_int_field(data, "base", 10, minimum=2),
        exponent=_int_field(data, "exponent", 2, minimum=0),
    )


def parse_rounding(value: Any) -> RoundingMode:
    if isinstance(value, RoundingMode):
        return value
    try:
        return RoundingMode(str(value).lower())
    except ValueError:
        choices = ", ".join(m.value for m in RoundingMode)
        raise ConfigurationError(
            "default_rounding", f"unknown mode {value!r}; expected one of {choices}"
        ) from None


def parse_engine_config(data: dict[str, Any]) -> EngineConfig:
    """
    Parse and validate an EngineConfig from a dict.

    Postconditions:
        - calculator names a built-in backend.
        - default_currency is ISO 4217 or declared under ``currencies``.
    Raises:
        ConfigurationError: on any invalid field.
    """
    calculator = str(data.get("calculator", _DEFAULTS.calculator))
    if calculator not in available_calculators():
        raise ConfigurationError(
            "calculator",
            f"unknown backend {calculator!r}; expected one of {', '.join(available_calculators())}",
        )

    raw_currencies = data.get("currencies") or []
    if not isinstance(raw_currencies, list):
        raise ConfigurationError("currencies", "expected a list")
    currencies = tuple(parse_currency_def(entry) for entry in raw_currencies)

    default_currency = str(data.get("default_currency", _DEFAULTS.default_currency)).upper().strip()
    declared = {c.code for c in currencies}
    if default_currency not in declared and not CurrencyRegistry.is_valid(default_currency):
        raise ConfigurationError(
            "default_currency", f"{default_currency!r} is neither ISO 4217 nor declared"
        )

    return EngineConfig(
        config_id=str(data.get("config_id", _DEFAULTS.config_id)),
        version=_int_field(data, "version", _DEFAULTS.version, minimum=1),
        calculator=calculator,
        default_currency=default_currency,
        default_amount=_int_field(data, "default_amount", _DEFAULTS.default_amount),
        default_rounding=parse_rounding(data.get("default_rounding", _DEFAULTS.default_rounding.value)),
        currencies=currencies,
        checksum=compute_checksum(data),
    )


def load_config(path: Path) -> EngineConfig:
    """Load and parse an EngineConfig from a YAML file."""
    return parse_engine_config(load_yaml_file(path))
