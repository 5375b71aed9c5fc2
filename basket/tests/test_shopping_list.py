from decimal import Decimal
import unittest

from basket.domain.ShoppingList import ShoppingList, ShoppingListItem


class TestShoppingList(unittest.TestCase):

    def setUp(self):
        self.shopping_list = ShoppingList("user-1", "Weekly")
        self.milk = ShoppingListItem("milk")
        self.bread = ShoppingListItem("bread")
        self.shopping_list.add_item(self.milk)
        self.shopping_list.add_item(self.bread)

    def test_items_keep_order(self):
        self.assertEqual(self.shopping_list.get_items(), [self.milk, self.bread])
        self.assertEqual(self.milk.status, "pending")

    def test_get_item(self):
        self.assertIs(self.shopping_list.get_item(self.bread.id), self.bread)
        self.assertIsNone(self.shopping_list.get_item("missing"))

    def test_remove_products(self):
        self.assertEqual(self.shopping_list.remove_products(["milk", "cheese"]), 1)
        self.assertEqual(self.shopping_list.get_items(), [self.bread])

    def test_item_update(self):
        self.milk.update({"status": "bought", "actual_price": Decimal("1.5")})
        self.assertEqual(self.milk.actual_price, Decimal("1.50"))
        self.milk.update({"notes": "on sale"})
        self.assertEqual(self.milk.status, "bought")
        self.assertEqual(self.milk.actual_price, Decimal("1.50"))
        self.milk.update({"actual_price": None})
        self.assertIsNone(self.milk.actual_price)

    def test_completion(self):
        self.shopping_list.set_completed(True)
        stamp = self.shopping_list.completed_at
        self.assertIsNotNone(stamp)
        self.shopping_list.set_completed(True)
        self.assertEqual(self.shopping_list.completed_at, stamp)
        self.shopping_list.set_completed(False)
        self.assertIsNone(self.shopping_list.completed_at)

    def test_from_dict(self):
        data = self.shopping_list.to_dict()
        data["items"][0]["actualPrice"] = "2.00"
        loaded = ShoppingList.from_dict(data)
        self.assertEqual([i.product_id for i in loaded.get_items()], ["milk", "bread"])
        self.assertEqual(loaded.get_items()[0].actual_price, Decimal("2.00"))
