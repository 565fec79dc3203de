"""
Typed Exception Hierarchy for the Money Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Monetary arithmetic must fail precisely. Generic exceptions like ValueError
or ArithmeticError force callers to parse error messages, which is fragile
and hard to test. Every error raised by the kernel therefore:

  1. Has a TYPED exception class (catch by type, not message)
  2. Has a CODE class attribute (machine-readable, API-safe)
  3. Carries structured DATA as attributes (not just a message string)

Example:
    try:
        total = safe_add(price, shipping)
    except CurrencyMismatchError as e:
        log.warning("mixed currencies", extra={"left": e.currency1})
        api_response(code=e.code)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    MoneyKernelError (base)
    |
    +-- CurrencyError
    |   +-- InvalidCurrencyError
    |   +-- CurrencyMismatchError
    |
    +-- ValidationError
    |   +-- InvalidAmountError
    |   +-- InvalidScaleError
    |   +-- InvalidPercentageError
    |   +-- EmptyOperandsError
    |
    +-- CalculationError
    |   +-- DivisionByZeroError
    |   +-- AmountOverflowError
    |   +-- UnknownCalculatorError
    |
    +-- AllocationError
    |   +-- InvalidRatiosError
    |
    +-- ExchangeRateError
    |   +-- InvalidExchangeRateError
    |   +-- ExchangeRateNotFoundError
    |
    +-- ConfigurationError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category      | Code                    | When Raised
--------------|-------------------------|------------------------------------------
Currency      | INVALID_CURRENCY        | Unknown code, bad base or exponent
              | CURRENCY_MISMATCH       | Safe binary operation across currencies
--------------|-------------------------|------------------------------------------
Validation    | INVALID_AMOUNT          | Non-integral or wrong-typed amount
              | INVALID_SCALE           | Negative or non-integer scale
              | INVALID_PERCENTAGE      | Percentage outside [0, 100]
              | EMPTY_OPERANDS          | Empty sequence where one value is needed
--------------|-------------------------|------------------------------------------
Calculation   | DIVISION_BY_ZERO        | integer_divide / modulo / divide by zero
              | AMOUNT_OVERFLOW         | Result outside a fixed-width backend
              | UNKNOWN_CALCULATOR      | No backend registered under that name
--------------|-------------------------|------------------------------------------
Allocation    | INVALID_RATIOS          | Empty, negative, or all-zero ratios
--------------|-------------------------|------------------------------------------
Exchange Rate | INVALID_EXCHANGE_RATE   | Zero/negative rate or bad denominator
              | EXCHANGE_RATE_NOT_FOUND | No rate for the requested currency
--------------|-------------------------|------------------------------------------
Config        | CONFIGURATION_ERROR     | Malformed engine configuration

===============================================================================
DESIGN DECISIONS
===============================================================================

1. Inherit from Exception, not ValueError. Domain errors are catchable as a
   group without mixing in programming errors.

2. ``code`` is a class attribute. Codes are static per type and can be read
   without instantiation.

3. Context is stored as attributes so that the structured log formatter can
   emit it as ``exc_*`` fields.

===============================================================================
"""


class MoneyKernelError(Exception):
    """
    Base exception for all money kernel errors.

    All subclasses must have a ``code`` class attribute for machine-readable
    error identification.
    """

    code: str = "MONEY_KERNEL_ERROR"


# Currency-related exceptions


class CurrencyError(MoneyKernelError):
    """Base exception for currency-related errors."""

    code: str = "CURRENCY_ERROR"


class InvalidCurrencyError(CurrencyError):
    """Currency code or currency metadata is not valid."""

    code: str = "INVALID_CURRENCY"

    def __init__(self, currency: str, reason: str = "Invalid currency"):
        self.currency = currency
        self.reason = reason
        super().__init__(f"{reason}: {currency!r}")


class CurrencyMismatchError(CurrencyError):
    """Attempted a same-currency operation on mismatched currencies."""

    code: str = "CURRENCY_MISMATCH"

    def __init__(self, currency1: str, currency2: str, operation: str = ""):
        self.currency1 = currency1
        self.currency2 = currency2
        self.operation = operation
        prefix = f"Cannot {operation}: " if operation else ""
        super().__init__(f"{prefix}Currency mismatch: {currency1} vs {currency2}")


# Validation exceptions


class ValidationError(MoneyKernelError):
    """Base exception for invalid construction or operation arguments."""

    code: str = "VALIDATION_ERROR"


class InvalidAmountError(ValidationError):
    """Amount is not an integer in the chosen numeric representation."""

    code: str = "INVALID_AMOUNT"

    def __init__(self, amount: object, reason: str = "Amount must be an integer"):
        self.amount = repr(amount)
        self.reason = reason
        super().__init__(f"{reason}, got {amount!r}")


class InvalidScaleError(ValidationError):
    """Scale is negative or not an integer."""

    code: str = "INVALID_SCALE"

    def __init__(self, scale: object):
        self.scale = repr(scale)
        super().__init__(f"Scale must be a non-negative integer, got {scale!r}")


class InvalidPercentageError(ValidationError):
    """Percentage argument is outside [0, 100]."""

    code: str = "INVALID_PERCENTAGE"

    def __init__(self, percentage: str):
        self.percentage = percentage
        super().__init__(f"Percentage must be between 0 and 100, got {percentage}")


class EmptyOperandsError(ValidationError):
    """An n-ary operation received no values."""

    code: str = "EMPTY_OPERANDS"

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} requires at least one value")


# Calculation exceptions


class CalculationError(MoneyKernelError):
    """Base exception for numeric backend failures."""

    code: str = "CALCULATION_ERROR"


class DivisionByZeroError(CalculationError):
    """Integer division or modulo with a zero divisor."""

    code: str = "DIVISION_BY_ZERO"

    def __init__(self, dividend: object, operation: str = "integer_divide"):
        self.dividend = repr(dividend)
        self.operation = operation
        super().__init__(f"Division by zero in {operation} (dividend {dividend!r})")


class AmountOverflowError(CalculationError):
    """Result does not fit the fixed-width numeric representation."""

    code: str = "AMOUNT_OVERFLOW"

    def __init__(self, value: object, backend: str, limit: int):
        self.value = repr(value)
        self.backend = backend
        self.limit = limit
        super().__init__(
            f"{backend} calculator overflow: {value!r} exceeds +/-{limit}"
        )


class UnknownCalculatorError(CalculationError):
    """No calculator backend is registered under the requested name."""

    code: str = "UNKNOWN_CALCULATOR"

    def __init__(self, name: str, available: tuple[str, ...] = ()):
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown calculator {name!r}; available: {', '.join(available)}"
        )


# Allocation exceptions


class AllocationError(MoneyKernelError):
    """Base exception for allocation errors."""

    code: str = "ALLOCATION_ERROR"


class InvalidRatiosError(AllocationError):
    """Ratio list is empty, contains a negative ratio, or sums to zero."""

    code: str = "INVALID_RATIOS"

    def __init__(self, ratios: list[str], reason: str):
        self.ratios = ratios
        self.reason = reason
        super().__init__(f"Invalid allocation ratios {ratios}: {reason}")


# Exchange rate exceptions


class ExchangeRateError(MoneyKernelError):
    """Base exception for exchange rate errors."""

    code: str = "EXCHANGE_RATE_ERROR"


class InvalidExchangeRateError(ExchangeRateError):
    """Exchange rate is zero, negative, or has a non-positive denominator."""

    code: str = "INVALID_EXCHANGE_RATE"

    def __init__(self, numerator: object, denominator: object, reason: str):
        self.numerator = repr(numerator)
        self.denominator = repr(denominator)
        self.reason = reason
        super().__init__(f"Invalid exchange rate {numerator}/{denominator}: {reason}")


class ExchangeRateNotFoundError(ExchangeRateError):
    """No exchange rate supplied for the requested target currency."""

    code: str = "EXCHANGE_RATE_NOT_FOUND"

    def __init__(self, from_currency: str, to_currency: str):
        self.from_currency = from_currency
        self.to_currency = to_currency
        super().__init__(
            f"No exchange rate supplied for {from_currency}/{to_currency}"
        )


# Configuration exceptions


class ConfigurationError(MoneyKernelError):
    """Engine configuration is malformed."""

    code: str = "CONFIGURATION_ERROR"

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration for {field!r}: {reason}")
