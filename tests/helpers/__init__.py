"""Test helpers module for shared test utilities.

- constants: Known results and malformed literals
- factories: Context factory and deterministic random operands
"""

from tests.helpers.constants import (
    MALFORMED_LITERALS,
    ONE_SEVENTH_30,
    PRIME_1E9_7,
    SQRT_2_50,
    TWO_POW_100,
)
from tests.helpers.factories import (
    make_context,
    random_decimal_literal,
    random_int,
    random_int_pairs,
)

__all__ = [
    # Constants
    "MALFORMED_LITERALS",
    "ONE_SEVENTH_30",
    "PRIME_1E9_7",
    "SQRT_2_50",
    "TWO_POW_100",
    # Factories
    "make_context",
    "random_decimal_literal",
    "random_int",
    "random_int_pairs",
]
