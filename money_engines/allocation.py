"""
Module: money_engines.allocation
Responsibility:
    Split a monetary amount into parts by ratios so that the parts sum
    exactly to the original amount, using the largest-remainder method.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import money_kernel.

Invariants enforced:
    - Conservation: sum(shares) == source amount, to the sub-unit.
    - Every share keeps the source currency, scale and calculator.
    - A zero ratio always receives exactly zero.
    - Leftover sub-units go one at a time to the shares with the largest
      fractional remainder; ties go to the earliest ratio.
    - Determinism: identical inputs always produce identical shares.

Failure modes:
    - InvalidRatiosError on an empty ratio list, a negative or non-numeric
      ratio, or ratios that are all zero.

Usage:
    from money_engines.allocation import AllocationEngine
    from money_kernel.domain.values import Money

    engine = AllocationEngine()
    result = engine.allocate(amount=Money.of(100, "USD"), ratios=[1, 1, 1])
    result.shares  # (34, 33, 33) cents
"""

from __future__ import annotations

import functools
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from money_engines.tracer import traced_engine
from money_kernel.domain.comparison import have_same_currency
from money_kernel.domain.values import Money, ScaledAmount
from money_kernel.exceptions import InvalidRatiosError
from money_kernel.logging_config import get_logger

logger = get_logger("engines.allocation")

Ratio = int | ScaledAmount


@dataclass(frozen=True)
class AllocationLine:
    """
    Result of allocation to a single ratio.

    Contract:
        Frozen dataclass representing the outcome for one ratio position.
    Guarantees:
        - ``received_remainder`` is True when this line absorbed one of the
          leftover sub-units after flooring.
    """

    index: int
    ratio: ScaledAmount
    allocated: Money
    received_remainder: bool


@dataclass(frozen=True)
class AllocationResult:
    """
    Complete allocation result.

    Contract:
        Frozen dataclass summarising an allocation run.
    Guarantees:
        - ``lines`` are in the order of the input ratios.
        - The allocated amounts sum to ``source_amount.amount``.
    Non-goals:
        - Does not persist the result; callers are responsible for storage.
    """

    source_amount: Money
    lines: tuple[AllocationLine, ...]

    @property
    def shares(self) -> tuple[Money, ...]:
        return tuple(line.allocated for line in self.lines)

    @property
    def ratios(self) -> tuple[ScaledAmount, ...]:
        return tuple(line.ratio for line in self.lines)

    @property
    def remainder_units(self) -> int:
        """How many leftover sub-units were handed out after flooring."""
        return sum(1 for line in self.lines if line.received_remainder)


def _normalize_ratios(ratios: Sequence[Ratio]) -> tuple[tuple[ScaledAmount, ...], list[int]]:
    """Validate ratios and bring them to a common scale as plain ints."""
    described = [str(r) for r in ratios]
    if not ratios:
        raise InvalidRatiosError(described, "at least one ratio is required")

    scaled: list[ScaledAmount] = []
    for ratio in ratios:
        if isinstance(ratio, ScaledAmount):
            scaled.append(ratio)
        elif isinstance(ratio, int) and not isinstance(ratio, bool):
            scaled.append(ScaledAmount(ratio, 0))
        else:
            raise InvalidRatiosError(described, f"unsupported ratio type {type(ratio).__name__}")

    if any(r.amount < 0 for r in scaled):
        raise InvalidRatiosError(described, "ratios must be non-negative")
    if all(r.amount == 0 for r in scaled):
        raise InvalidRatiosError(described, "at least one ratio must be positive")

    highest = max(r.scale for r in scaled)
    return tuple(scaled), [r.amount * 10 ** (highest - r.scale) for r in scaled]


class AllocationEngine:
    """
    Allocate an amount across ratios with exact conservation.

    Contract:
        Pure functions with deterministic remainder distribution.
        No I/O, no database access.
    Guarantees:
        - Each share is floor(|amount| * ratio / total); the leftover is
          distributed by largest fractional remainder, earliest first.
        - Negative amounts are split by magnitude and the sign re-applied,
          so every share moves in the same direction as the source.
        - All arithmetic goes through the source value's calculator.
    Non-goals:
        - Does not decide ratios; callers supply them.
    """

    @traced_engine("allocation", "1.0", fingerprint_fields=("amount", "ratios"))
    def allocate(self, amount: Money, ratios: Sequence[Ratio]) -> AllocationResult:
        """
        Allocate ``amount`` proportionally to ``ratios``.

        Args:
            amount: Amount to split.
            ratios: Non-negative ints or ScaledAmounts, at least one positive.

        Returns:
            AllocationResult with one line per ratio.

        Raises:
            InvalidRatiosError: empty, negative, non-numeric or all-zero ratios.
        """
        t0 = time.monotonic()
        logger.info("allocation_started", extra={
            "amount": str(amount.amount),
            "currency": amount.currency.code,
            "scale": amount.scale,
            "ratio_count": len(ratios),
        })

        try:
            scaled, weights = _normalize_ratios(ratios)
        except InvalidRatiosError as exc:
            logger.warning("allocation_invalid_ratios", extra={
                "ratios": exc.ratios,
                "reason": exc.reason,
            })
            raise

        calc = amount.calculator
        zero = calc.zero()
        negative = amount.is_negative
        magnitude = calc.subtract(zero, amount.amount) if negative else amount.amount

        coerced = [calc.coerce(w) for w in weights]
        total = zero
        for weight in coerced:
            total = calc.add(total, weight)

        shares: list[Any] = []
        remainders: list[Any] = []
        for weight in coerced:
            product = calc.multiply(magnitude, weight)
            shares.append(calc.integer_divide(product, total))
            remainders.append(calc.modulo(product, total))

        leftover = magnitude
        for share in shares:
            leftover = calc.subtract(leftover, share)

        def by_remainder(i: int, j: int) -> int:
            # Largest remainder first; earlier index wins ties
            order = calc.compare(remainders[j], remainders[i])
            return order if order != 0 else (i > j) - (i < j)

        eligible = [i for i, w in enumerate(weights) if w > 0]
        received = [False] * len(shares)
        for index in sorted(eligible, key=functools.cmp_to_key(by_remainder)):
            if calc.compare(leftover, zero) <= 0:
                break
            shares[index] = calc.increment(shares[index])
            received[index] = True
            leftover = calc.decrement(leftover)

        lines = tuple(
            AllocationLine(
                index=i,
                ratio=scaled[i],
                allocated=amount.with_amount(calc.subtract(zero, share) if negative else share),
                received_remainder=received[i],
            )
            for i, share in enumerate(shares)
        )
        result = AllocationResult(source_amount=amount, lines=lines)

        # INVARIANT: conservation -- shares sum to the source amount
        assert allocation_is_conserved(amount, result.shares), (
            f"Allocation conservation violated for {amount.amount} over {weights}"
        )

        logger.info("allocation_completed", extra={
            "amount": str(amount.amount),
            "currency": amount.currency.code,
            "line_count": len(lines),
            "remainder_units": result.remainder_units,
            "duration_ms": round((time.monotonic() - t0) * 1000, 2),
        })
        return result

    def distribute(self, amount: Money, parts: int) -> AllocationResult:
        """Split ``amount`` into ``parts`` equal shares (earliest shares absorb the leftover)."""
        if not isinstance(parts, int) or isinstance(parts, bool) or parts < 1:
            raise InvalidRatiosError([str(parts)], "parts must be a positive integer")
        return self.allocate(amount=amount, ratios=[1] * parts)


_default_engine = AllocationEngine()


def allocate(value: Money, ratios: Sequence[Ratio]) -> tuple[Money, ...]:
    """Shares of ``value`` by ``ratios``; see AllocationEngine.allocate."""
    return _default_engine.allocate(amount=value, ratios=ratios).shares


def distribute(value: Money, parts: int) -> tuple[Money, ...]:
    return _default_engine.distribute(value, parts).shares


def allocation_is_conserved(source: Money, shares: Sequence[Money]) -> bool:
    """True when shares share the source currency and sum to it exactly."""
    if not shares or not have_same_currency([source, *shares]):
        return False
    calc = source.calculator
    total = calc.zero()
    for share in shares:
        if share.scale != source.scale:
            return False
        total = calc.add(total, share.amount)
    return calc.compare(total, source.amount) == 0
