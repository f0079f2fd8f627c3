"""Fixed-point decimal value.

BcNum stores a signed decimal as its integer digits and fraction digits.
The scale is the number of fraction digits. Nothing here ever rounds:
truncate() and rescale() are the only places digits are dropped, and every
operation finishes through one of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bcnum import kernel
from bcnum.kernel import Magnitude

__all__ = ["Sign", "BcNum"]


class Sign(Enum):
    """Sign of a BcNum. Zero is always POSITIVE."""

    POSITIVE = 1
    NEGATIVE = -1


def _is_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


@dataclass(frozen=True, slots=True)
class BcNum:
    """Signed arbitrary-precision fixed-point number.

    Attributes:
        sign: Sign of the value (zero is normalized to POSITIVE)
        integer_digits: Digits left of the point, no leading zeros except "0"
        fraction_digits: Digits right of the point; its length is the scale

    Examples:
        BcNum(Sign.NEGATIVE, "12", "50")  # -12.50, scale 2
        BcNum(Sign.NEGATIVE, "0", "00")   # stored as 0.00 (non-negative)
    """

    sign: Sign
    integer_digits: str
    fraction_digits: str = ""

    def __post_init__(self) -> None:
        if not _is_digits(self.integer_digits):
            raise ValueError(f"Invalid integer digits: {self.integer_digits[:40]!r}")
        if len(self.integer_digits) > 1 and self.integer_digits[0] == "0":
            raise ValueError(f"Integer digits have leading zeros: {self.integer_digits[:40]!r}")
        if self.fraction_digits and not _is_digits(self.fraction_digits):
            raise ValueError(f"Invalid fraction digits: {self.fraction_digits[:40]!r}")
        if self.sign is Sign.NEGATIVE and self.is_zero:
            object.__setattr__(self, "sign", Sign.POSITIVE)

    # --- Properties ---

    @property
    def scale(self) -> int:
        """Number of digits after the decimal point."""
        return len(self.fraction_digits)

    @property
    def is_zero(self) -> bool:
        return self.integer_digits == "0" and not self.fraction_digits.strip("0")

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    @property
    def coefficient(self) -> Magnitude:
        """Magnitude as an integer: |value| * 10**scale."""
        return kernel.from_digits(self.integer_digits + self.fraction_digits)

    def coefficient_at(self, scale: int) -> Magnitude:
        """Magnitude of the value rescaled to `scale`: |value| * 10**scale, truncated."""
        return self.rescale(scale).coefficient

    # --- Construction ---

    @classmethod
    def zero(cls, scale: int = 0) -> BcNum:
        return cls(Sign.POSITIVE, "0", "0" * scale)

    @classmethod
    def from_coefficient(cls, magnitude: Magnitude, scale: int, negative: bool = False) -> BcNum:
        """Build the value magnitude / 10**scale with the given sign.

        Args:
            magnitude: Kernel magnitude holding all digits of the value
            scale: How many of the lowest digits belong to the fraction
            negative: True for a negative result (ignored when zero)
        """
        if scale < 0:
            raise ValueError(f"scale must be non-negative, got {scale}")
        digits = kernel.to_digits(magnitude)
        if scale:
            digits = digits.rjust(scale + 1, "0")
            integer, fraction = digits[:-scale], digits[-scale:]
        else:
            integer, fraction = digits, ""
        return cls(Sign.NEGATIVE if negative else Sign.POSITIVE, integer, fraction)

    # --- Derived values ---

    def negate(self) -> BcNum:
        flipped = Sign.POSITIVE if self.is_negative else Sign.NEGATIVE
        return BcNum(flipped, self.integer_digits, self.fraction_digits)

    def abs(self) -> BcNum:
        if not self.is_negative:
            return self
        return BcNum(Sign.POSITIVE, self.integer_digits, self.fraction_digits)

    def truncate(self, scale: int) -> BcNum:
        """Drop fraction digits beyond `scale`. Never rounds, never pads."""
        if scale < 0:
            raise ValueError(f"scale must be non-negative, got {scale}")
        if scale >= self.scale:
            return self
        return BcNum(self.sign, self.integer_digits, self.fraction_digits[:scale])

    def rescale(self, scale: int) -> BcNum:
        """Return the value with exactly `scale` fraction digits.

        Extra digits are truncated; missing digits are zero-padded.
        """
        if scale <= self.scale:
            return self.truncate(scale)
        return BcNum(self.sign, self.integer_digits, self.fraction_digits.ljust(scale, "0"))
