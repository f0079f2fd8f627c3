"""Conversion between decimal literals and BcNum values.

Accepted grammar: an optional sign, one or more ASCII digits, and an optional
point followed by one or more digits. Leading integer zeros are dropped;
trailing fraction zeros are kept since they set the operand's scale.
"""

from __future__ import annotations

import re
from typing import Any

from bcnum.errors import InvalidScale, MalformedOperand
from bcnum.value import BcNum, Sign

__all__ = ["parse", "format_number", "parse_scale"]

# [0-9] rather than \d: only ASCII digits are valid
_NUMBER_RE = re.compile(r"([+-]?)([0-9]+)(?:\.([0-9]+))?")

# Operands are echoed back in error messages up to this length
_PREVIEW_LENGTH = 40


def _preview(text: str) -> str:
    if len(text) <= _PREVIEW_LENGTH:
        return repr(text)
    return repr(text[:_PREVIEW_LENGTH]) + "..."


def parse(text: str) -> BcNum:
    """Parse a decimal literal.

    Args:
        text: Literal such as "42", "-0.050" or "+3.14"

    Returns:
        The parsed value; "-0.00" becomes non-negative zero of scale 2

    Raises:
        MalformedOperand: If text is not a string or does not match the grammar
    """
    if not isinstance(text, str):
        raise MalformedOperand(f"Operand must be a string, got {type(text).__name__}")

    match = _NUMBER_RE.fullmatch(text)
    if match is None:
        raise MalformedOperand(f"Operand is not a well-formed number: {_preview(text)}")

    sign_text, integer, fraction = match.groups()
    return BcNum(
        Sign.NEGATIVE if sign_text == "-" else Sign.POSITIVE,
        integer.lstrip("0") or "0",
        fraction or "",
    )


def format_number(value: BcNum) -> str:
    """Render a value in canonical form.

    The minus sign only appears for non-zero negatives, and exactly
    `value.scale` fraction digits follow the point.
    """
    sign = "-" if value.is_negative else ""
    if value.scale:
        return f"{sign}{value.integer_digits}.{value.fraction_digits}"
    return f"{sign}{value.integer_digits}"


def parse_scale(scale: Any) -> int | None:
    """Validate an explicit scale argument.

    Returns:
        The scale, or None when the caller did not supply one

    Raises:
        TypeError: If scale is not an int (bool is rejected too)
        InvalidScale: If scale is negative
    """
    if scale is None:
        return None
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise TypeError(f"scale must be an int, got {type(scale).__name__}")
    if scale < 0:
        raise InvalidScale(f"scale must be non-negative, got {scale}")
    return scale
