import copy
from decimal import Decimal
import unittest

from basket.logic.shopping.aggregation import aggregate


def _item(price, shop_id="shop-1", status="pending", actual=None, name="Product"):
    return {
        "id": f"item-{name}",
        "productId": f"product-{name}",
        "status": status,
        "actualPrice": actual,
        "notes": None,
        "product": {"id": f"product-{name}", "name": name, "size": None, "price": Decimal(str(price)), "pricePerUnit": None},
        "shop": {"id": shop_id, "name": f"Shop {shop_id}", "address": "123 Test Street"},
    }


class TestAggregate(unittest.TestCase):

    def test_empty_list(self):
        result = aggregate([])
        self.assertEqual(result["groups"], [])
        self.assertEqual(result["overallExpectedTotal"], Decimal("0.00"))
        self.assertEqual(result["overallActualTotal"], Decimal("0.00"))
        self.assertEqual(result["totalItemCount"], 0)

    def test_single_shop_pending(self):
        result = aggregate([_item("2.50", name="a"), _item("3.50", name="b")])
        self.assertEqual(len(result["groups"]), 1)
        group = result["groups"][0]
        self.assertEqual(group["expectedTotal"], Decimal("6.00"))
        self.assertEqual(group["actualTotal"], Decimal("0.00"))
        self.assertEqual(group["itemCount"], 2)

    def test_actual_price_overrides(self):
        result = aggregate([_item("2.50", status="bought", actual=Decimal("2.00"))])
        self.assertEqual(result["groups"][0]["actualTotal"], Decimal("2.00"))
        self.assertEqual(result["overallActualTotal"], Decimal("2.00"))
        self.assertEqual(result["overallExpectedTotal"], Decimal("2.50"))

    def test_falls_back_to_product_price(self):
        result = aggregate([_item("2.50", status="bought", actual=None)])
        self.assertEqual(result["overallActualTotal"], Decimal("2.50"))

    def test_decimal_precision(self):
        items = [_item(p, status="bought", name=p) for p in ("1.11", "2.22", "3.33")]
        result = aggregate(items)
        self.assertEqual(result["overallExpectedTotal"], Decimal("6.66"))
        self.assertEqual(result["overallActualTotal"], Decimal("6.66"))

    def test_float_prices_sum_without_drift(self):
        items = [_item(0.1, status="bought", name=str(i)) for i in range(3)]
        result = aggregate(items)
        self.assertEqual(result["overallActualTotal"], Decimal("0.30"))

    def test_mixed_statuses(self):
        items = [
            _item("2.00", status="bought", name="a"),
            _item("3.00", status="pending", name="b"),
            _item("4.00", status="not_bought", name="c"),
        ]
        result = aggregate(items)
        self.assertEqual(result["overallExpectedTotal"], Decimal("9.00"))
        self.assertEqual(result["overallActualTotal"], Decimal("2.00"))

    def test_non_bought_statuses_excluded(self):
        for status in ("pending", "not_bought", "wrong_price", "not_available", "lost", None):
            with self.subTest(status=status):
                result = aggregate([_item("5.00", status=status, actual=Decimal("4.00"))])
                self.assertEqual(result["overallActualTotal"], Decimal("0.00"))
                self.assertEqual(result["overallExpectedTotal"], Decimal("5.00"))

    def test_groups_in_first_appearance_order(self):
        items = [
            _item("1.00", shop_id="B", name="b1"),
            _item("2.00", shop_id="A", name="a1"),
            _item("3.00", shop_id="B", name="b2"),
        ]
        result = aggregate(items)
        self.assertEqual([g["shop"]["id"] for g in result["groups"]], ["B", "A"])
        self.assertEqual([i["product"]["name"] for i in result["groups"][0]["items"]], ["b1", "b2"])
        self.assertEqual([i["product"]["name"] for i in result["groups"][1]["items"]], ["a1"])
        self.assertEqual(result["groups"][0]["expectedTotal"], Decimal("4.00"))
        self.assertEqual(result["totalItemCount"], 3)

    def test_items_kept_as_given(self):
        items = [_item("1.00", name="x")]
        result = aggregate(items)
        self.assertIs(result["groups"][0]["items"][0], items[0])

    def test_missing_address_is_none(self):
        item = _item("1.00")
        item["shop"] = {"id": "s", "name": "Corner"}
        result = aggregate([item])
        self.assertEqual(result["groups"][0]["shop"], {"id": "s", "name": "Corner", "address": None})

    def test_idempotent_and_input_untouched(self):
        items = [_item("1.25", status="bought", name="a"), _item("2.75", shop_id="2", name="b")]
        snapshot = copy.deepcopy(items)
        first = aggregate(items)
        second = aggregate(items)
        self.assertEqual(first, second)
        self.assertEqual(items, snapshot)

    def test_huge_prices_still_total(self):
        items = [_item("1e27", status="bought", name="a"), _item("1e27", name="b")]
        result = aggregate(items)
        self.assertEqual(result["overallExpectedTotal"], Decimal("2e27"))
        self.assertEqual(result["overallActualTotal"], Decimal("1e27"))
