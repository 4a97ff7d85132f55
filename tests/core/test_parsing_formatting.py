"""
Unit tests for input parsing and display formatting helpers.
"""
import unittest

from calctech.utils.formatting import (
    format_clock,
    format_currency,
    format_duration,
    format_number,
    format_percent,
)
from calctech.utils.parsing import parse_number, parse_number_list


class TestParseNumber(unittest.TestCase):

    def test_plain_numbers(self):
        self.assertEqual(parse_number("3.5"), (3.5, None))
        self.assertEqual(parse_number(" 42 "), (42.0, None))
        self.assertEqual(parse_number("-1e3"), (-1000.0, None))
        self.assertEqual(parse_number(7), (7, None))

    def test_blank_is_an_error(self):
        value, error = parse_number("   ")
        self.assertIsNone(value)
        self.assertEqual(error, "A value is required.")
        self.assertEqual(parse_number(None)[1], "A value is required.")

    def test_rejects_booleans(self):
        self.assertIsNotNone(parse_number(True)[1])

    def test_rejects_bad_text(self):
        value, error = parse_number("abc")
        self.assertIsNone(value)
        self.assertIn("not a valid number", error)

    def test_rejects_non_finite(self):
        self.assertIsNotNone(parse_number("inf")[1])
        self.assertIsNotNone(parse_number("nan")[1])
        self.assertIsNotNone(parse_number(float("-inf"))[1])


class TestParseNumberList(unittest.TestCase):

    def test_mixed_separators(self):
        self.assertEqual(parse_number_list("1, 2 3\n4"), ([1, 2, 3, 4], []))

    def test_rejected_tokens(self):
        self.assertEqual(parse_number_list("1, two, 3"), ([1, 3], ["two"]))

    def test_empty(self):
        self.assertEqual(parse_number_list(""), ([], []))


class TestFormatting(unittest.TestCase):

    def test_currency(self):
        self.assertEqual(format_currency(1234.5), "$1,234.50")
        self.assertEqual(format_currency(-5), "-$5.00")
        self.assertEqual(format_currency(None), "")

    def test_number(self):
        self.assertEqual(format_number(1234567), "1,234,567")
        self.assertEqual(format_number(3.14159), "3.14")
        self.assertEqual(format_number("Scalene Right"), "Scalene Right")
        self.assertIs(format_number(True), True)

    def test_percent(self):
        self.assertEqual(format_percent(5.1162), "5.12%")

    def test_durations(self):
        self.assertEqual(format_duration(1503), "25:03")
        self.assertEqual(format_duration(15190), "4:13:10")
        self.assertEqual(format_clock(129600), "36:00:00")
        self.assertEqual(format_clock(59), "00:00:59")


if __name__ == "__main__":
    unittest.main()
