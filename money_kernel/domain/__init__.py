"""
Pure domain layer.

This module contains the monetary value objects and the arithmetic engine
with NO dependencies on:
- Database
- Time/clock
- I/O

All domain objects are immutable and deterministic.
"""

from money_kernel.domain.arithmetic import (
    add_many,
    divide,
    multiply,
    percentage,
    safe_add,
    safe_subtract,
    unsafe_add,
    unsafe_divide,
    unsafe_multiply,
    unsafe_subtract,
)
from money_kernel.domain.calculator import (
    DEFAULT_CALCULATOR,
    Calculator,
    DecimalCalculator,
    FloatCalculator,
    Int64Calculator,
    IntegerCalculator,
    available_calculators,
    get_calculator,
)
from money_kernel.domain.comparison import (
    compare,
    equal,
    greater_than,
    greater_than_or_equal,
    have_same_amount,
    have_same_currency,
    is_negative,
    is_positive,
    is_zero,
    less_than,
    less_than_or_equal,
    maximum,
    minimum,
)
from money_kernel.domain.currency import Currency, CurrencyInfo, CurrencyRegistry
from money_kernel.domain.rounding import (
    DEFAULT_ROUNDING,
    RoundingMode,
    drop_digits,
    round_quotient,
)
from money_kernel.domain.scale import (
    has_sub_units,
    normalize_pair,
    normalize_scale,
    transform_scale,
    trim_scale,
)
from money_kernel.domain.values import (
    ExchangeRate,
    Money,
    MoneyFactory,
    MoneySnapshot,
    ScaledAmount,
)

__all__ = [
    # Calculator
    "Calculator",
    "DEFAULT_CALCULATOR",
    "DecimalCalculator",
    "FloatCalculator",
    "Int64Calculator",
    "IntegerCalculator",
    "available_calculators",
    "get_calculator",
    # Rounding
    "DEFAULT_ROUNDING",
    "RoundingMode",
    "drop_digits",
    "round_quotient",
    # Currency
    "Currency",
    "CurrencyInfo",
    "CurrencyRegistry",
    # Values
    "ExchangeRate",
    "Money",
    "MoneyFactory",
    "MoneySnapshot",
    "ScaledAmount",
    # Scale
    "has_sub_units",
    "normalize_pair",
    "normalize_scale",
    "transform_scale",
    "trim_scale",
    # Arithmetic
    "add_many",
    "divide",
    "multiply",
    "percentage",
    "safe_add",
    "safe_subtract",
    "unsafe_add",
    "unsafe_divide",
    "unsafe_multiply",
    "unsafe_subtract",
    # Comparison
    "compare",
    "equal",
    "greater_than",
    "greater_than_or_equal",
    "have_same_amount",
    "have_same_currency",
    "is_negative",
    "is_positive",
    "is_zero",
    "less_than",
    "less_than_or_equal",
    "maximum",
    "minimum",
]
