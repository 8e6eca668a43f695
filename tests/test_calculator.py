"""Unit tests for the calculator module."""

import unittest
from unittest import mock

import numpy as np

import multiples_pkg.calculator as calculator
from multiples_pkg.calculator import (
    compute,
    count_multiples,
    format_multiples,
    is_multiple_of_either,
    multiples_for,
)
from multiples_pkg.types import InvalidInputError, Record


def brute_force(a, b, end):
    return [n for n in range(1, end + 1) if n % a == 0 or n % b == 0]


class TestCompute(unittest.TestCase):
    """Test the core multiples computation."""

    def test_two_and_three(self):
        self.assertEqual(compute(2, 3, 10), [2, 3, 4, 6, 8, 9, 10])

    def test_equal_divisors(self):
        self.assertEqual(compute(5, 5, 20), [5, 10, 15, 20])

    def test_divisor_one_matches_everything(self):
        self.assertEqual(compute(1, 2, 5), [1, 2, 3, 4, 5])
        self.assertEqual(compute(7, 1, 3), [1, 2, 3])

    def test_zero_bound_is_empty(self):
        self.assertEqual(compute(3, 7, 0), [])

    def test_negative_bound_is_empty(self):
        self.assertEqual(compute(3, 7, -5), [])

    def test_bound_below_both_divisors(self):
        self.assertEqual(compute(4, 9, 3), [])

    def test_divisor_above_bound_is_ignored(self):
        self.assertEqual(compute(3, 1000, 10), [3, 6, 9])

    def test_bound_is_inclusive(self):
        self.assertEqual(compute(4, 6, 12)[-1], 12)

    def test_returns_plain_ints(self):
        result = compute(2, 3, 10)
        self.assertTrue(all(type(n) is int for n in result))

    def test_matches_brute_force(self):
        for a in range(1, 9):
            for b in range(1, 9):
                for end in (0, 1, 7, 24, 61):
                    with self.subTest(a=a, b=b, end=end):
                        self.assertEqual(compute(a, b, end), brute_force(a, b, end))

    def test_strictly_ascending_without_duplicates(self):
        result = compute(6, 4, 500)
        self.assertEqual(result, sorted(set(result)))
        self.assertTrue(all(1 <= n <= 500 for n in result))

    def test_chunk_boundaries(self):
        # Small batches force many chunk edges, including one landing on the bound
        with mock.patch.object(calculator.config, "RANGE_CHUNK_SIZE", 7):
            self.assertEqual(compute(3, 5, 100), brute_force(3, 5, 100))
            self.assertEqual(compute(2, 9, 14), brute_force(2, 9, 14))

    def test_accepts_numpy_integers(self):
        self.assertEqual(compute(np.int64(2), np.int32(3), np.int64(6)), [2, 3, 4, 6])


class TestComputeInvalidInput(unittest.TestCase):
    """Zero, negative or non-integer divisors are rejected."""

    def test_zero_first_divisor(self):
        with self.assertRaises(InvalidInputError):
            compute(0, 3, 10)

    def test_zero_second_divisor(self):
        with self.assertRaises(InvalidInputError):
            compute(3, 0, 10)

    def test_zero_divisor_with_zero_bound(self):
        with self.assertRaises(InvalidInputError):
            compute(0, 3, 0)

    def test_negative_divisor(self):
        with self.assertRaises(InvalidInputError) as ctx:
            compute(-2, 3, 10)
        self.assertEqual(ctx.exception.code, "INVALID_INPUT")

    def test_non_integer_divisor(self):
        with self.assertRaises(InvalidInputError) as ctx:
            compute(2.5, 3, 10)
        self.assertEqual(ctx.exception.code, "NOT_AN_INTEGER")

    def test_bool_is_not_an_integer_here(self):
        with self.assertRaises(InvalidInputError):
            compute(True, 3, 10)

    def test_string_bound(self):
        with self.assertRaises(InvalidInputError):
            compute(2, 3, "10")


class TestCountMultiples(unittest.TestCase):
    """Inclusion-exclusion count agrees with the listing."""

    def test_known_count(self):
        self.assertEqual(count_multiples(2, 3, 10), 7)

    def test_agrees_with_compute(self):
        for a, b, end in [(2, 3, 1000), (4, 6, 999), (7, 7, 100), (1, 13, 50), (12, 18, 5)]:
            with self.subTest(a=a, b=b, end=end):
                self.assertEqual(count_multiples(a, b, end), len(compute(a, b, end)))

    def test_zero_bound(self):
        self.assertEqual(count_multiples(2, 3, 0), 0)

    def test_large_bound_without_listing(self):
        end = 2**32 - 1
        self.assertEqual(count_multiples(1, 5, end), end)

    def test_zero_divisor(self):
        with self.assertRaises(InvalidInputError):
            count_multiples(2, 0, 10)


class TestFormatting(unittest.TestCase):

    def test_space_separated(self):
        self.assertEqual(format_multiples([2, 3, 4]), "2 3 4")

    def test_empty(self):
        self.assertEqual(format_multiples([]), "")

    def test_custom_delimiter(self):
        self.assertEqual(format_multiples([5, 10], delimiter=","), "5,10")

    def test_is_multiple_of_either(self):
        self.assertTrue(is_multiple_of_either(9, 2, 3))
        self.assertFalse(is_multiple_of_either(7, 2, 3))

    def test_multiples_for_record(self):
        result = multiples_for(Record(a=4, b=6, end=12))
        self.assertEqual(result.end, 12)
        self.assertEqual(result.numbers, [4, 6, 8, 12])
        self.assertEqual(result.format_line(), "4 6 8 12")
        self.assertEqual(result.format_line("bounded"), "12:4 6 8 12")


if __name__ == "__main__":
    unittest.main()
