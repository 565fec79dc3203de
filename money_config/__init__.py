"""
money_config -- single public entrypoint for engine configuration.

Responsibility:
    Provides ``get_active_config()``, which returns a frozen ``EngineConfig``
    loaded from YAML. The arithmetic core never reads configuration itself;
    callers hold the returned config and turn it into kernel objects through
    ``money_config.bridges``.

Architecture position:
    Configuration -- sits above ``money_kernel`` and ``money_engines``.
    The kernel MUST NEVER import from ``money_config``.

Failure modes:
    - ``FileNotFoundError`` -- the requested YAML file does not exist.
    - ``yaml.YAMLError`` -- the file is not valid YAML.
    - ``ConfigurationError`` -- a field fails validation.

Audit relevance:
    Every successful ``get_active_config()`` call emits a
    ``MONEY_CONFIG_TRACE`` log entry with the config id, version, checksum,
    backend and default rounding mode.
"""

from __future__ import annotations

from pathlib import Path

from money_config.loader import load_config
from money_config.schema import CurrencyDef, EngineConfig
from money_kernel.logging_config import get_logger

_logger = get_logger("config")

_DEFAULT_CONFIG_FILE = Path(__file__).parent / "sets" / "default.yaml"


def get_active_config(config_path: Path | None = None) -> EngineConfig:
    """
    Load the engine configuration.

    Args:
        config_path: YAML file to load. Defaults to the packaged
            ``money_config/sets/default.yaml``.

    Returns:
        EngineConfig -- frozen, validated.
    """
    path = Path(config_path) if config_path is not None else _DEFAULT_CONFIG_FILE
    config = load_config(path)

    _logger.info(
        "MONEY_CONFIG_TRACE",
        extra={
            "trace_type": "MONEY_CONFIG_TRACE",
            "config_id": config.config_id,
            "config_version": config.version,
            "checksum": config.checksum,
            "calculator": config.calculator,
            "default_currency": config.default_currency,
            "default_rounding": config.default_rounding.value,
            "currency_count": len(config.currencies),
        },
    )
    return config


__all__ = [
    "CurrencyDef",
    "EngineConfig",
    "get_active_config",
]
