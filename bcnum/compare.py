"""Scale-aware three-way comparison."""

from __future__ import annotations

from bcnum import kernel
from bcnum.value import BcNum

__all__ = ["compare", "sign_of", "is_zero"]


def sign_of(value: BcNum) -> int:
    """Return -1, 0 or 1 according to the sign of value."""
    if value.is_zero:
        return 0
    return -1 if value.is_negative else 1


def is_zero(value: BcNum) -> bool:
    return sign_of(value) == 0


def compare(a: BcNum, b: BcNum, scale: int | None = None) -> int:
    """Compare a and b, looking at `scale` fraction digits.

    Digits beyond the comparison scale are ignored, never rounded, so
    compare(1.001, 1, scale=2) == 0. Zero of any scale equals zero of any
    other scale.

    Args:
        a: First operand
        b: Second operand
        scale: Fraction digits to compare; defaults to max(a.scale, b.scale)

    Returns:
        -1 if a < b, 0 if equal, 1 if a > b
    """
    if scale is None:
        scale = max(a.scale, b.scale)
    a = a.truncate(scale)
    b = b.truncate(scale)

    sign_a, sign_b = sign_of(a), sign_of(b)
    if sign_a != sign_b:
        return -1 if sign_a < sign_b else 1
    if sign_a == 0:
        return 0

    width = max(a.scale, b.scale)
    order = kernel.compare(a.coefficient_at(width), b.coefficient_at(width))
    return -order if sign_a < 0 else order
