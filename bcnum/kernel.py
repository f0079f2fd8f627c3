"""Unsigned arbitrary-precision integer kernel.

Magnitudes are tuples of base 10^9 limbs, least significant limb first.
Zero is the empty tuple, and every function returns normalized magnitudes
(no zero limbs at the most significant end). All decimal operations reduce
to these functions once their operands have been aligned to a common scale.

Usage pattern:
    from bcnum import kernel

    a = kernel.from_digits("123456789012345678901234567890")
    b = kernel.from_digits("987654321")
    q, r = kernel.divide_with_remainder(a, b)
    kernel.to_digits(q)
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    # Types
    "Magnitude",
    # Errors
    "KernelUnderflow",
    # Constants
    "BASE",
    "BASE_DIGITS",
    "KARATSUBA_THRESHOLD",
    "ZERO",
    "ONE",
    # Conversions
    "from_digits",
    "to_digits",
    "from_int",
    "to_int",
    "digit_count",
    "is_zero",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide_with_remainder",
    "compare",
    "shift_left",
    "shift_right",
]

Magnitude = tuple[int, ...]

BASE_DIGITS = 9
BASE = 10**BASE_DIGITS

# Below this many limbs in the shorter operand, schoolbook multiplication wins
KARATSUBA_THRESHOLD = 48

ZERO: Magnitude = ()
ONE: Magnitude = (1,)


class KernelUnderflow(ArithmeticError):
    """Subtraction with a subtrahend larger than the minuend.

    Callers compare before subtracting, so this signals a bug in the
    caller rather than bad user input.
    """

    pass


def _normalize(limbs: Sequence[int]) -> Magnitude:
    """Strip zero limbs from the most significant end."""
    end = len(limbs)
    while end and limbs[end - 1] == 0:
        end -= 1
    return tuple(limbs[:end])


# =============================================================================
# Conversions
# =============================================================================


def from_digits(digits: str) -> Magnitude:
    """Build a magnitude from a string of ASCII decimal digits.

    Leading zeros are allowed and dropped.

    Raises:
        ValueError: If digits is empty or contains anything but 0-9
    """
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"Expected decimal digits, got {digits[:40]!r}")
    limbs = []
    end = len(digits)
    while end > 0:
        start = max(0, end - BASE_DIGITS)
        limbs.append(int(digits[start:end]))
        end = start
    return _normalize(limbs)


def to_digits(m: Magnitude) -> str:
    """Render a magnitude as decimal digits, most significant first."""
    if not m:
        return "0"
    head = str(m[-1])
    return head + "".join(f"{limb:09d}" for limb in reversed(m[:-1]))


def from_int(value: int) -> Magnitude:
    """Build a magnitude from a non-negative Python int."""
    if value < 0:
        raise ValueError(f"Magnitude cannot be negative: {value}")
    limbs = []
    while value:
        value, limb = divmod(value, BASE)
        limbs.append(limb)
    return tuple(limbs)


def to_int(m: Magnitude) -> int:
    """Fold a magnitude into a Python int.

    Works limb by limb, so it is not subject to the interpreter's limit on
    decimal string conversion.
    """
    value = 0
    for limb in reversed(m):
        value = value * BASE + limb
    return value


def digit_count(m: Magnitude) -> int:
    """Number of decimal digits in m (1 for zero)."""
    if not m:
        return 1
    return (len(m) - 1) * BASE_DIGITS + len(str(m[-1]))


def is_zero(m: Magnitude) -> bool:
    return not m


# =============================================================================
# Comparison
# =============================================================================


def compare(a: Magnitude, b: Magnitude) -> int:
    """Three-way comparison of two normalized magnitudes.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


# =============================================================================
# Addition and subtraction
# =============================================================================


def add(a: Magnitude, b: Magnitude) -> Magnitude:
    """Sum of two magnitudes."""
    if len(a) < len(b):
        a, b = b, a
    result = []
    carry = 0
    for i, limb in enumerate(a):
        total = limb + carry + (b[i] if i < len(b) else 0)
        if total >= BASE:
            result.append(total - BASE)
            carry = 1
        else:
            result.append(total)
            carry = 0
    if carry:
        result.append(carry)
    return tuple(result)


def subtract(a: Magnitude, b: Magnitude) -> Magnitude:
    """Difference a - b.

    Raises:
        KernelUnderflow: If b > a
    """
    if compare(a, b) < 0:
        raise KernelUnderflow(f"Underflow: {to_digits(a)[:40]} - {to_digits(b)[:40]}")
    result = []
    borrow = 0
    for i, limb in enumerate(a):
        diff = limb - borrow - (b[i] if i < len(b) else 0)
        if diff < 0:
            result.append(diff + BASE)
            borrow = 1
        else:
            result.append(diff)
            borrow = 0
    return _normalize(result)


# =============================================================================
# Multiplication
# =============================================================================


def _multiply_small(m: Magnitude, factor: int) -> Magnitude:
    """Multiply by a single limb (0 <= factor < BASE)."""
    result = []
    carry = 0
    for limb in m:
        carry, low = divmod(limb * factor + carry, BASE)
        result.append(low)
    if carry:
        result.append(carry)
    return _normalize(result)


def _multiply_schoolbook(a: Magnitude, b: Magnitude) -> Magnitude:
    result = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        if x == 0:
            continue
        carry = 0
        for j, y in enumerate(b):
            carry, result[i + j] = divmod(result[i + j] + x * y + carry, BASE)
        result[i + len(b)] = carry
    return _normalize(result)


def _shift_limbs(m: Magnitude, count: int) -> Magnitude:
    """Multiply by BASE**count."""
    if not m:
        return ZERO
    return (0,) * count + m


def multiply(a: Magnitude, b: Magnitude) -> Magnitude:
    """Product of two magnitudes.

    Schoolbook below KARATSUBA_THRESHOLD limbs, Karatsuba splitting above.
    """
    if not a or not b:
        return ZERO
    if min(len(a), len(b)) < KARATSUBA_THRESHOLD:
        return _multiply_schoolbook(a, b)

    half = max(len(a), len(b)) // 2
    a_low, a_high = _normalize(a[:half]), a[half:]
    b_low, b_high = _normalize(b[:half]), b[half:]

    z0 = multiply(a_low, b_low)
    z2 = multiply(a_high, b_high)
    # (a_low + a_high)(b_low + b_high) - z0 - z2 = a_low*b_high + a_high*b_low
    z1 = subtract(subtract(multiply(add(a_low, a_high), add(b_low, b_high)), z0), z2)

    return add(add(_shift_limbs(z2, 2 * half), _shift_limbs(z1, half)), z0)


# =============================================================================
# Division
# =============================================================================


def _divide_small(m: Magnitude, divisor: int) -> tuple[Magnitude, int]:
    """Divide by a single limb (0 < divisor < BASE)."""
    quotient = [0] * len(m)
    remainder = 0
    for i in range(len(m) - 1, -1, -1):
        quotient[i], remainder = divmod(remainder * BASE + m[i], divisor)
    return _normalize(quotient), remainder


def _divide_knuth(a: Magnitude, b: Magnitude) -> tuple[Magnitude, Magnitude]:
    """Long division for a divisor of two or more limbs (Knuth, TAOCP 4.3.1 D).

    Requires a >= b and len(b) >= 2.
    """
    n = len(b)
    m = len(a) - n

    # Scale both operands so the divisor's top limb is at least BASE // 2;
    # this keeps each trial quotient digit within 2 of the true one.
    factor = BASE // (b[-1] + 1)
    divisor = _multiply_small(b, factor)
    rem = list(_multiply_small(a, factor))
    rem.extend([0] * (len(a) + 1 - len(rem)))

    top, second = divisor[-1], divisor[-2]
    quotient = [0] * (m + 1)

    for j in range(m, -1, -1):
        qhat, rhat = divmod(rem[j + n] * BASE + rem[j + n - 1], top)
        while qhat >= BASE or qhat * second > rhat * BASE + rem[j + n - 2]:
            qhat -= 1
            rhat += top
            if rhat >= BASE:
                break

        # rem[j : j+n+1] -= qhat * divisor
        borrow = 0
        carry = 0
        for i in range(n):
            carry, low = divmod(qhat * divisor[i] + carry, BASE)
            diff = rem[i + j] - low - borrow
            if diff < 0:
                rem[i + j] = diff + BASE
                borrow = 1
            else:
                rem[i + j] = diff
                borrow = 0
        top_diff = rem[j + n] - carry - borrow

        if top_diff < 0:
            # qhat was one too large: add the divisor back
            qhat -= 1
            carry = 0
            for i in range(n):
                carry, rem[i + j] = divmod(rem[i + j] + divisor[i] + carry, BASE)
            top_diff += carry

        rem[j + n] = top_diff
        quotient[j] = qhat

    remainder, _ = _divide_small(_normalize(rem[:n]), factor)
    return _normalize(quotient), remainder


def divide_with_remainder(a: Magnitude, b: Magnitude) -> tuple[Magnitude, Magnitude]:
    """Truncating division: returns (q, r) with q * b + r == a and r < b.

    Raises:
        ZeroDivisionError: If b is zero. Callers check for zero divisors
            first and raise their own error, so this is a contract violation.
    """
    if not b:
        raise ZeroDivisionError("Kernel division by zero")
    if compare(a, b) < 0:
        return ZERO, a
    if len(b) == 1:
        quotient, remainder = _divide_small(a, b[0])
        return quotient, from_int(remainder)
    return _divide_knuth(a, b)


# =============================================================================
# Decimal shifts
# =============================================================================


def shift_left(m: Magnitude, places: int) -> Magnitude:
    """Multiply by 10**places."""
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    if not m or places == 0:
        return m
    limbs, digits = divmod(places, BASE_DIGITS)
    if digits:
        m = _multiply_small(m, 10**digits)
    return _shift_limbs(m, limbs)


def shift_right(m: Magnitude, places: int) -> Magnitude:
    """Divide by 10**places, discarding the remainder."""
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    limbs, digits = divmod(places, BASE_DIGITS)
    m = m[limbs:]
    if digits and m:
        m, _ = _divide_small(m, 10**digits)
    return m

