"""Decimal arithmetic on BcNum values.

Each operation aligns its operands to a common scale, hands the magnitudes
to the kernel and builds an exact result, which is then truncated to the
target scale. Scale rules differ per operator:

    add, sub  explicit scale, else max(scale_a, scale_b)
    mul       min(scale_a + scale_b, scale)
    div       scale
    mod       explicit scale, else max(scale_a, scale_b)
    pow       min(scale_a * exponent, scale)
    sqrt      scale

`scale` for mul, div, pow and sqrt is always supplied by the caller; the
call surface fills it from the context's default scale.
"""

from __future__ import annotations

from bcnum import kernel
from bcnum.compare import sign_of
from bcnum.errors import DivisionByZero, NegativeExponent, NegativeRadicand, NonIntegerExponent
from bcnum.kernel import Magnitude
from bcnum.value import BcNum

__all__ = ["add", "sub", "mul", "div", "mod", "pow", "sqrt", "exponent_value"]

TWO: Magnitude = kernel.from_int(2)


def _signed_sum(a: BcNum, b: BcNum, scale: int | None) -> BcNum:
    width = max(a.scale, b.scale)
    magnitude_a = a.coefficient_at(width)
    magnitude_b = b.coefficient_at(width)

    if a.sign is b.sign:
        magnitude = kernel.add(magnitude_a, magnitude_b)
        negative = a.is_negative
    elif kernel.compare(magnitude_a, magnitude_b) >= 0:
        magnitude = kernel.subtract(magnitude_a, magnitude_b)
        negative = a.is_negative
    else:
        magnitude = kernel.subtract(magnitude_b, magnitude_a)
        negative = b.is_negative

    exact = BcNum.from_coefficient(magnitude, width, negative=negative)
    return exact.rescale(width if scale is None else scale)


def add(a: BcNum, b: BcNum, scale: int | None = None) -> BcNum:
    """a + b, exact at max(a.scale, b.scale) unless a scale is given."""
    return _signed_sum(a, b, scale)


def sub(a: BcNum, b: BcNum, scale: int | None = None) -> BcNum:
    """a - b, exact at max(a.scale, b.scale) unless a scale is given."""
    return _signed_sum(a, b.negate(), scale)


def mul(a: BcNum, b: BcNum, scale: int) -> BcNum:
    """a * b with at most `scale` fraction digits.

    The exact product has a.scale + b.scale digits; excess digits are
    truncated, so mul(1.99, 1.99, 1) == 3.9.
    """
    product = kernel.multiply(a.coefficient, b.coefficient)
    exact = BcNum.from_coefficient(
        product,
        a.scale + b.scale,
        negative=a.is_negative != b.is_negative,
    )
    return exact.truncate(scale)


def div(a: BcNum, b: BcNum, scale: int) -> BcNum:
    """a / b truncated to exactly `scale` fraction digits.

    Raises:
        DivisionByZero: If b compares equal to zero
    """
    if sign_of(b) == 0:
        raise DivisionByZero("Division by zero")

    # q = trunc(a / b * 10**digits) = trunc(coef_a * 10**(digits + scale_b - scale_a) / coef_b)
    digits = scale + 1
    shift = digits + b.scale - a.scale
    dividend, divisor = a.coefficient, b.coefficient
    if shift >= 0:
        dividend = kernel.shift_left(dividend, shift)
    else:
        divisor = kernel.shift_left(divisor, -shift)

    quotient, _ = kernel.divide_with_remainder(dividend, divisor)
    exact = BcNum.from_coefficient(
        quotient,
        digits,
        negative=a.is_negative != b.is_negative,
    )
    return exact.truncate(scale)


def mod(a: BcNum, b: BcNum, scale: int | None = None) -> BcNum:
    """Remainder of truncating division: a - b * trunc(a / b).

    The remainder is exact at max(a.scale, b.scale) and takes the sign of
    the dividend: mod(-7, 3) == -1, mod(7, -3) == 1.

    Raises:
        DivisionByZero: If b compares equal to zero
    """
    if sign_of(b) == 0:
        raise DivisionByZero("Modulo by zero")

    width = max(a.scale, b.scale)
    quotient = div(a, b, 0)
    remainder = sub(a, mul(b, quotient, width))
    return remainder.rescale(width if scale is None else scale)


def exponent_value(exponent: BcNum) -> int:
    """Validate an integer exponent and return it as an iteration count.

    Raises:
        NonIntegerExponent: If the exponent has fraction digits
        NegativeExponent: If the exponent is negative
    """
    if exponent.scale:
        raise NonIntegerExponent("Exponent must be an integer")
    if exponent.is_negative:
        raise NegativeExponent("Exponent must not be negative")
    return kernel.to_int(exponent.coefficient)


def _power(base: Magnitude, exponent: int) -> Magnitude:
    """base ** exponent by square-and-multiply."""
    result = kernel.ONE
    square = base
    while True:
        if exponent & 1:
            result = kernel.multiply(result, square)
        exponent >>= 1
        if not exponent:
            return result
        square = kernel.multiply(square, square)


def pow(base: BcNum, exponent: BcNum, scale: int) -> BcNum:
    """base ** exponent with at most `scale` fraction digits.

    The exact power has base.scale * exponent fraction digits; pow(x, 0) is 1.

    Raises:
        NonIntegerExponent: If the exponent has fraction digits
        NegativeExponent: If the exponent is negative
    """
    count = exponent_value(exponent)
    if count == 0:
        return BcNum.from_coefficient(kernel.ONE, 0)
    if base.is_zero:
        return BcNum.zero(min(base.scale * count, scale))

    magnitude = _power(base.coefficient, count)
    exact = BcNum.from_coefficient(
        magnitude,
        base.scale * count,
        negative=base.is_negative and count % 2 == 1,
    )
    return exact.truncate(scale)


def _integer_sqrt(n: Magnitude) -> Magnitude:
    """floor(sqrt(n)) by Newton iteration from an upper bound."""
    if not n:
        return kernel.ZERO
    # 10 ** ceil(digits / 2) is always >= sqrt(n)
    x = kernel.shift_left(kernel.ONE, (kernel.digit_count(n) + 1) // 2)
    while True:
        quotient, _ = kernel.divide_with_remainder(n, x)
        y, _ = kernel.divide_with_remainder(kernel.add(x, quotient), TWO)
        if kernel.compare(y, x) >= 0:
            return x
        x = y


def sqrt(a: BcNum, scale: int) -> BcNum:
    """Square root truncated to exactly `scale` fraction digits.

    Raises:
        NegativeRadicand: If a is negative
    """
    if sign_of(a) < 0:
        raise NegativeRadicand("Square root of a negative number")

    # sqrt(coef / 10**s) * 10**t == sqrt(coef * 10**(2t - s))
    shift = 2 * scale - a.scale
    if shift >= 0:
        radicand = kernel.shift_left(a.coefficient, shift)
    else:
        # floor(sqrt(floor(x))) == floor(sqrt(x)), so dropping digits is safe
        radicand = kernel.shift_right(a.coefficient, -shift)

    return BcNum.from_coefficient(_integer_sqrt(radicand), scale)
