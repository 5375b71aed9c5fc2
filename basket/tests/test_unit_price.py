from decimal import Decimal
import unittest

from basket.logic.pricing.unit_price import UNITS, normalize, parse_size, unit_class


class TestNormalize(unittest.TestCase):

    def test_missing_size(self):
        self.assertIsNone(normalize(None, 2.50))
        self.assertIsNone(normalize("", 2.50))
        self.assertIsNone(normalize("   ", 2.50))

    def test_worked_examples(self):
        self.assertEqual(normalize("1kg", 2.50), Decimal("2.50"))
        self.assertEqual(normalize("500g", 1.20), Decimal("2.40"))
        self.assertEqual(normalize("1L", 2.50), Decimal("2.50"))
        self.assertEqual(normalize("500ml", 1.80), Decimal("3.60"))
        self.assertEqual(normalize("6 pieces", 3.60), Decimal("0.60"))

    def test_case_insensitive_unit(self):
        self.assertEqual(normalize("1KG", 2.50), normalize("1kg", 2.50))
        self.assertEqual(normalize("500ML", 1.80), Decimal("3.60"))
        self.assertEqual(normalize("2 STÜCK", 1.00), Decimal("0.50"))

    def test_decimal_amount(self):
        self.assertEqual(normalize("1.5kg", 3.75), Decimal("2.50"))
        self.assertEqual(normalize("0.5 l", 1.00), Decimal("2.00"))

    def test_milligrams(self):
        self.assertEqual(normalize("500mg", 1.00), Decimal("2000.00"))

    def test_whitespace_around_and_between(self):
        self.assertEqual(normalize("  500 g  ", "1.20"), Decimal("2.40"))

    def test_price_as_string_or_decimal(self):
        self.assertEqual(normalize("500g", "1.20"), Decimal("2.40"))
        self.assertEqual(normalize("500g", Decimal("1.20")), Decimal("2.40"))

    def test_invalid_inputs(self):
        self.assertIsNone(normalize("invalid", 2.50))
        self.assertIsNone(normalize("1kg", -1.00))
        self.assertIsNone(normalize("1kg", 0))
        self.assertIsNone(normalize("1kg", "abc"))
        self.assertIsNone(normalize("1kg", None))
        self.assertIsNone(normalize("1kg", float("nan")))
        self.assertIsNone(normalize("1kg", float("inf")))

    def test_unrecognized_or_malformed_size(self):
        self.assertIsNone(normalize("1 kilo", 2.50))
        self.assertIsNone(normalize("kg", 2.50))
        self.assertIsNone(normalize("1kg extra", 2.50))
        self.assertIsNone(normalize("1,5kg", 2.50))
        self.assertIsNone(normalize("-1kg", 2.50))

    def test_zero_amount(self):
        self.assertIsNone(normalize("0kg", 2.50))
        self.assertIsNone(normalize("0.0 pieces", 2.50))

    def test_rounds_half_away_from_zero(self):
        # 1.00 / 8 = 0.125 per item
        self.assertEqual(normalize("8 pcs", 1.00), Decimal("0.13"))
        # 0.10 / 3 = 0.0333...
        self.assertEqual(normalize("3x", 0.10), Decimal("0.03"))

    def test_result_rounding_to_zero_is_unavailable(self):
        self.assertIsNone(normalize("1000kg", 0.01))

    def test_huge_price_on_tiny_size(self):
        # 1e25 per milligram is 1e31 per kg, past the default 28 digit precision
        self.assertEqual(normalize("1mg", "1e25"), Decimal("1e31"))
        self.assertEqual(str(normalize("1mg", "1e25"))[-3:], ".00")

    def test_positive_for_every_unit(self):
        for token in UNITS:
            with self.subTest(unit=token):
                value = normalize(f"2{token}", 4.00)
                self.assertIsNotNone(value)
                self.assertGreater(value, 0)


class TestParseSize(unittest.TestCase):

    def test_unit_classes(self):
        self.assertEqual(unit_class("500g"), "kg")
        self.assertEqual(unit_class("1L"), "L")
        self.assertEqual(unit_class("6 pcs"), "item")
        self.assertIsNone(unit_class("a bunch"))

    def test_amount_in_base_units(self):
        self.assertEqual(parse_size("250ml"), (Decimal("0.25"), "L"))
        self.assertIsNone(parse_size(None))
