"""
Module: money_engines
Responsibility:
    Package entrypoint that re-exports the public symbols of the pure
    calculation engines built on the money kernel.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import money_kernel (and sibling engine modules).
    MUST NOT import money_config.

Invariants enforced:
    - Determinism: identical inputs always produce identical outputs.
    - Every engine invocation is traced via ``@traced_engine``
      (see ``money_engines.tracer``), emitting MONEY_ENGINE_TRACE log
      records with engine name, version, input fingerprint and duration.

Usage:
    from money_engines.allocation import AllocationEngine
    from money_engines.conversion import ConversionEngine
"""

from money_engines.allocation import (
    AllocationEngine,
    AllocationLine,
    AllocationResult,
    allocate,
    allocation_is_conserved,
    distribute,
)
from money_engines.conversion import ConversionEngine, convert
from money_engines.tracer import compute_input_fingerprint, traced_engine

__all__ = [
    "AllocationEngine",
    "AllocationLine",
    "AllocationResult",
    "ConversionEngine",
    "allocate",
    "allocation_is_conserved",
    "compute_input_fingerprint",
    "convert",
    "distribute",
    "traced_engine",
]
