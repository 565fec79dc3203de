"""
Money Kernel

Exact monetary arithmetic over pluggable numeric representations:
- Integer amounts at an explicit decimal scale, never binary floating point
- Calculator backends for arbitrary-precision int, int64, safe-integer
  float and integral Decimal
- Explicit rounding policies on every lossy operation
- Typed errors and structured JSON logging
"""

__version__ = "0.1.0"
