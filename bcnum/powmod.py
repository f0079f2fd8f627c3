"""Modular exponentiation.

Kept apart from pow because the arguments are constrained differently
(all operands integral, modulus non-zero) and intermediate results never
grow past modulus**2: every product is reduced right away.
"""

from __future__ import annotations

from bcnum import kernel
from bcnum.arithmetic import exponent_value
from bcnum.compare import sign_of
from bcnum.errors import DivisionByZero, NonIntegerOperand
from bcnum.kernel import Magnitude
from bcnum.value import BcNum

__all__ = ["powmod"]


def _mulmod(a: Magnitude, b: Magnitude, modulus: Magnitude) -> Magnitude:
    _, remainder = kernel.divide_with_remainder(kernel.multiply(a, b), modulus)
    return remainder


def powmod(base: BcNum, exponent: BcNum, modulus: BcNum, scale: int) -> BcNum:
    """(base ** exponent) mod modulus, padded to `scale` fraction digits.

    Uses the truncated remainder, so the result is negative only when the
    base is negative and the exponent odd; the modulus sign is irrelevant.

    Args:
        base: Integer base
        exponent: Non-negative integer exponent
        modulus: Non-zero integer modulus
        scale: Fraction digits of the (always integral) result

    Raises:
        NonIntegerOperand: If base or modulus has fraction digits
        NonIntegerExponent: If the exponent has fraction digits
        NegativeExponent: If the exponent is negative
        DivisionByZero: If the modulus is zero
    """
    if base.scale:
        raise NonIntegerOperand("Base must be an integer")
    if modulus.scale:
        raise NonIntegerOperand("Modulus must be an integer")
    count = exponent_value(exponent)
    if sign_of(modulus) == 0:
        raise DivisionByZero("Modulo by zero")

    m = modulus.coefficient
    _, reduced_base = kernel.divide_with_remainder(base.coefficient, m)
    # Starting from 1 mod m covers exponent 0 and modulus 1
    _, result = kernel.divide_with_remainder(kernel.ONE, m)

    # Left-to-right: square for every bit, multiply in the base for set bits
    for bit in format(count, "b"):
        result = _mulmod(result, result, m)
        if bit == "1":
            result = _mulmod(result, reduced_base, m)

    negative = base.is_negative and count % 2 == 1
    return BcNum.from_coefficient(result, 0, negative=negative).rescale(scale)
