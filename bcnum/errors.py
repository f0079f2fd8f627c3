"""Error classes for bcmath operations.

Every error carries an ErrorKind so a host can pick per-kind behaviour
(raise, warn and return a sentinel, map to a status code) without an
isinstance chain. The engine never recovers from these internally.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

__all__ = [
    "ErrorKind",
    "BcMathError",
    "MalformedOperand",
    "DivisionByZero",
    "NegativeExponent",
    "NonIntegerOperand",
    "NonIntegerExponent",
    "NegativeRadicand",
    "InvalidScale",
]


class ErrorKind(Enum):
    """Kinds of errors reported by the engine."""

    MALFORMED_OPERAND = "malformed_operand"
    DIVISION_BY_ZERO = "division_by_zero"
    NEGATIVE_EXPONENT = "negative_exponent"
    NON_INTEGER_OPERAND = "non_integer_operand"
    NON_INTEGER_EXPONENT = "non_integer_exponent"
    NEGATIVE_RADICAND = "negative_radicand"
    INVALID_SCALE = "invalid_scale"


class BcMathError(Exception):
    """Base error for bcmath operations."""

    kind: ClassVar[ErrorKind]


class MalformedOperand(BcMathError, ValueError):
    """Operand text is not a well-formed decimal literal."""

    kind = ErrorKind.MALFORMED_OPERAND


class DivisionByZero(BcMathError, ZeroDivisionError):
    """Divisor or modulus compares equal to zero."""

    kind = ErrorKind.DIVISION_BY_ZERO


class NegativeExponent(BcMathError, ValueError):
    """Exponent of pow or powmod is negative."""

    kind = ErrorKind.NEGATIVE_EXPONENT


class NonIntegerOperand(BcMathError, ValueError):
    """Operand must be an integer (scale 0) but has a fractional part."""

    kind = ErrorKind.NON_INTEGER_OPERAND


class NonIntegerExponent(NonIntegerOperand):
    """Exponent of pow or powmod has a fractional part."""

    kind = ErrorKind.NON_INTEGER_EXPONENT


class NegativeRadicand(BcMathError, ValueError):
    """Square root of a negative number."""

    kind = ErrorKind.NEGATIVE_RADICAND


class InvalidScale(BcMathError, ValueError):
    """Explicit scale argument is negative."""

    kind = ErrorKind.INVALID_SCALE
