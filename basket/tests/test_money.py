from decimal import Decimal
import unittest

from basket.logic.pricing.money import money_str, round_money, to_money


class TestMoney(unittest.TestCase):

    def test_to_money(self):
        self.assertEqual(to_money(2.5), Decimal("2.5"))
        self.assertEqual(to_money("1.20"), Decimal("1.20"))
        self.assertEqual(to_money(3), Decimal("3"))
        self.assertIsNone(to_money(True))
        self.assertIsNone(to_money(""))
        self.assertIsNone(to_money("12,50"))
        self.assertIsNone(to_money(["1"]))

    def test_float_goes_through_str(self):
        # Decimal(1.1) would carry the binary expansion
        self.assertEqual(to_money(1.1), Decimal("1.1"))

    def test_round_money(self):
        self.assertEqual(round_money(Decimal("2.345")), Decimal("2.35"))
        self.assertEqual(round_money(Decimal("-2.345")), Decimal("-2.35"))
        self.assertEqual(str(round_money(Decimal("6"))), "6.00")

    def test_money_str(self):
        self.assertEqual(money_str(Decimal("2.5")), "2.50")
        self.assertIsNone(money_str(None))

    def test_round_money_beyond_context_precision(self):
        self.assertEqual(round_money(Decimal("1e27")), Decimal("1e27"))
        self.assertEqual(str(round_money(Decimal("12345678901234567890123456789.125"))),
                         "12345678901234567890123456789.13")
