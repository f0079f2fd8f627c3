"""Tests for the base 10^9 limb kernel.

Python ints serve as the reference for every operation.
"""

import random

import pytest

from bcnum import kernel
from bcnum.kernel import BASE, KARATSUBA_THRESHOLD, KernelUnderflow
from tests.helpers import random_int, random_int_pairs


def mag(value: int) -> kernel.Magnitude:
    return kernel.from_int(value)


def val(m: kernel.Magnitude) -> int:
    return int(kernel.to_digits(m))


class TestConversions:
    """Tests for digit and int conversions."""

    def test_zero_is_empty_tuple(self):
        """Zero has no limbs in every representation."""
        assert kernel.from_digits("0") == ()
        assert kernel.from_digits("0000") == ()
        assert kernel.from_int(0) == ()
        assert kernel.to_digits(()) == "0"

    def test_limbs_are_little_endian(self):
        """Least significant limb comes first."""
        assert kernel.from_digits("1000000002") == (2, 1)
        assert kernel.from_digits("123456789012345678") == (12345678, 123456789)

    def test_leading_zeros_dropped(self):
        """Leading zeros never produce high zero limbs."""
        assert kernel.from_digits("000000000000000042") == (42,)

    def test_inner_limbs_zero_padded(self):
        """Inner limbs render with all nine digits."""
        assert kernel.to_digits((5, 0, 7)) == "7000000000000000005"

    @pytest.mark.parametrize("digits", ["", "12a", "-1", "1.5", " 1", "١"])
    def test_invalid_digits_rejected(self, digits):
        """Anything but ASCII digits is rejected."""
        with pytest.raises(ValueError):
            kernel.from_digits(digits)

    def test_from_int_negative_rejected(self):
        """Magnitudes are unsigned."""
        with pytest.raises(ValueError):
            kernel.from_int(-1)

    def test_int_round_trip(self):
        """from_int and to_digits agree with str()."""
        rng = random.Random(1)
        for _ in range(50):
            value = random_int(rng, 80)
            assert kernel.to_digits(kernel.from_int(value)) == str(value)
            assert kernel.from_digits(str(value)) == kernel.from_int(value)

    @pytest.mark.parametrize(
        "value,expected",
        [(0, 1), (7, 1), (10, 2), (999_999_999, 9), (10**9, 10), (10**27 - 1, 27)],
    )
    def test_digit_count(self, value, expected):
        """digit_count reports decimal digits, 1 for zero."""
        assert kernel.digit_count(mag(value)) == expected

    def test_to_int(self):
        assert kernel.to_int(kernel.ZERO) == 0
        assert kernel.to_int(mag(10**20 + 7)) == 10**20 + 7

    def test_to_int_beyond_string_conversion_limit(self):
        """Folding limbs works for magnitudes of any length."""
        assert kernel.to_int(kernel.from_digits("9" * 5000)) == 10**5000 - 1

    def test_is_zero(self):
        assert kernel.is_zero(kernel.ZERO)
        assert not kernel.is_zero(kernel.ONE)


class TestCompare:
    """Tests for three-way magnitude comparison."""

    def test_length_decides_first(self):
        """More limbs always means larger."""
        assert kernel.compare(mag(BASE), mag(BASE - 1)) == 1
        assert kernel.compare(mag(BASE - 1), mag(BASE)) == -1

    def test_equal(self):
        assert kernel.compare(mag(12345678901234), mag(12345678901234)) == 0
        assert kernel.compare(kernel.ZERO, kernel.ZERO) == 0

    def test_matches_python(self):
        """Comparison agrees with int ordering."""
        for a, b in random_int_pairs(seed=2, count=100, max_digits=30):
            expected = (a > b) - (a < b)
            assert kernel.compare(mag(a), mag(b)) == expected


class TestAddSubtract:
    """Tests for addition and subtraction."""

    def test_carry_across_limbs(self):
        """Carries ripple through every limb."""
        result = kernel.add(mag(10**27 - 1), kernel.ONE)
        assert result == mag(10**27)
        assert len(result) == 4

    def test_add_zero(self):
        assert kernel.add(mag(42), kernel.ZERO) == mag(42)
        assert kernel.add(kernel.ZERO, kernel.ZERO) == kernel.ZERO

    def test_borrow_across_limbs(self):
        """Borrows ripple through every limb and high zeros are stripped."""
        assert kernel.subtract(mag(10**27), kernel.ONE) == mag(10**27 - 1)

    def test_subtract_to_zero(self):
        """x - x is the empty tuple."""
        assert kernel.subtract(mag(10**20 + 5), mag(10**20 + 5)) == kernel.ZERO

    def test_underflow_raises(self):
        """Subtracting a larger magnitude is a caller bug."""
        with pytest.raises(KernelUnderflow):
            kernel.subtract(mag(1), mag(2))

    def test_underflow_is_arithmetic_error(self):
        assert issubclass(KernelUnderflow, ArithmeticError)

    def test_matches_python(self):
        """add and subtract agree with int arithmetic."""
        for a, b in random_int_pairs(seed=3, count=200):
            assert val(kernel.add(mag(a), mag(b))) == a + b
            high, low = max(a, b), min(a, b)
            assert val(kernel.subtract(mag(high), mag(low))) == high - low


class TestMultiply:
    """Tests for schoolbook and Karatsuba multiplication."""

    def test_by_zero(self):
        assert kernel.multiply(mag(123), kernel.ZERO) == kernel.ZERO
        assert kernel.multiply(kernel.ZERO, mag(123)) == kernel.ZERO

    def test_by_one(self):
        assert kernel.multiply(mag(10**40 + 7), kernel.ONE) == mag(10**40 + 7)

    def test_max_limbs(self):
        """Largest limb products carry correctly."""
        a = 10**36 - 1
        assert val(kernel.multiply(mag(a), mag(a))) == a * a

    def test_schoolbook_matches_python(self):
        for a, b in random_int_pairs(seed=4, count=200, max_digits=100):
            assert val(kernel.multiply(mag(a), mag(b))) == a * b

    def test_karatsuba_matches_python(self):
        """Operands above the threshold take the Karatsuba path."""
        rng = random.Random(5)
        min_digits = KARATSUBA_THRESHOLD * 9 + 1
        for _ in range(5):
            a = rng.randrange(10 ** (min_digits - 1), 10 ** (min_digits + 600))
            b = rng.randrange(10 ** (min_digits - 1), 10 ** (min_digits + 600))
            assert val(kernel.multiply(mag(a), mag(b))) == a * b

    def test_karatsuba_with_zero_limbs(self):
        """Split halves that are mostly zero still combine correctly."""
        digits = KARATSUBA_THRESHOLD * 9 * 2
        a = 10**digits + 1
        b = 10**digits - 1
        assert val(kernel.multiply(mag(a), mag(b))) == a * b

    def test_karatsuba_unbalanced(self):
        """A long operand times one just above the threshold."""
        a = 7**3000
        b = 3**1000
        assert len(mag(b)) >= KARATSUBA_THRESHOLD
        assert val(kernel.multiply(mag(a), mag(b))) == a * b

    def test_result_normalized(self):
        """No zero limbs at the high end."""
        for a, b in random_int_pairs(seed=6, count=50):
            product = kernel.multiply(mag(a), mag(b))
            assert not product or product[-1] != 0


class TestDivideWithRemainder:
    """Tests for short and long division."""

    def test_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            kernel.divide_with_remainder(mag(5), kernel.ZERO)

    def test_dividend_smaller_than_divisor(self):
        """a < b gives (0, a)."""
        assert kernel.divide_with_remainder(mag(5), mag(7)) == (kernel.ZERO, mag(5))

    def test_zero_dividend(self):
        assert kernel.divide_with_remainder(kernel.ZERO, mag(3)) == (kernel.ZERO, kernel.ZERO)

    def test_exact_division(self):
        q, r = kernel.divide_with_remainder(mag(10**30), mag(10**15))
        assert val(q) == 10**15
        assert r == kernel.ZERO

    def test_single_limb_divisor(self):
        q, r = kernel.divide_with_remainder(mag(10**20 + 3), mag(7))
        assert (val(q), val(r)) == divmod(10**20 + 3, 7)

    def test_long_division_matches_python(self):
        """Knuth division agrees with divmod for multi-limb divisors."""
        for a, b in random_int_pairs(seed=7, count=300, max_digits=90):
            q, r = kernel.divide_with_remainder(mag(a), mag(b))
            assert (val(q), val(r)) == divmod(a, b)

    def test_add_back_cases(self):
        """Divisors with top limb just below BASE/2 and tricky dividends."""
        cases = [
            (BASE**3 - 1, BASE**2 // 2 - 1),
            (BASE**4, BASE**2 + 1),
            (BASE**4 - 1, BASE**2 - 1),
            (2 * BASE**5 + BASE**3, BASE**3 - 1),
            ((BASE**2 - 1) * (BASE**2 - 3), BASE**2 - 3),
            (10**45 + 10**36, 10**18 + 1),
        ]
        for a, b in cases:
            q, r = kernel.divide_with_remainder(mag(a), mag(b))
            assert (val(q), val(r)) == divmod(a, b)

    def test_large_operands(self):
        """Division of numbers with hundreds of digits."""
        a = 13**700
        b = 11**300
        q, r = kernel.divide_with_remainder(mag(a), mag(b))
        assert (val(q), val(r)) == divmod(a, b)


class TestDecimalShifts:
    """Tests for multiplying and dividing by powers of ten."""

    @pytest.mark.parametrize("places", [0, 1, 8, 9, 10, 18, 25])
    def test_shift_left(self, places):
        assert val(kernel.shift_left(mag(123456789123), places)) == 123456789123 * 10**places

    @pytest.mark.parametrize("places", [0, 1, 8, 9, 10, 18, 25])
    def test_shift_right(self, places):
        value = 98765432109876543210123
        assert val(kernel.shift_right(mag(value), places)) == value // 10**places

    def test_shift_zero(self):
        assert kernel.shift_left(kernel.ZERO, 12) == kernel.ZERO
        assert kernel.shift_right(kernel.ZERO, 12) == kernel.ZERO

    def test_shift_right_past_all_digits(self):
        assert kernel.shift_right(mag(999), 3) == kernel.ZERO
        assert kernel.shift_right(mag(10**20), 40) == kernel.ZERO

    def test_negative_places_rejected(self):
        with pytest.raises(ValueError):
            kernel.shift_left(mag(1), -1)
        with pytest.raises(ValueError):
            kernel.shift_right(mag(1), -1)
