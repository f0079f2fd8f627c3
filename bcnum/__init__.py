"""bcnum - arbitrary-precision decimal arithmetic with bcmath semantics."""

from bcnum.context import ScaleContext, new_context
from bcnum.engine import BcMath
from bcnum.errors import (
    BcMathError,
    DivisionByZero,
    ErrorKind,
    InvalidScale,
    MalformedOperand,
    NegativeExponent,
    NegativeRadicand,
    NonIntegerExponent,
    NonIntegerOperand,
)
from bcnum.parsing import format_number, parse
from bcnum.value import BcNum, Sign

__version__ = "0.1.0"
__all__ = [
    # Call surface
    "BcMath",
    "ScaleContext",
    "new_context",
    # Values
    "BcNum",
    "Sign",
    "parse",
    "format_number",
    # Errors
    "ErrorKind",
    "BcMathError",
    "MalformedOperand",
    "DivisionByZero",
    "NegativeExponent",
    "NonIntegerOperand",
    "NonIntegerExponent",
    "NegativeRadicand",
    "InvalidScale",
    "__version__",
]
