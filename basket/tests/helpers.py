"""Shared fixtures for the HTTP tests: a TestClient and a throwaway data directory per test."""
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from basket.api.api_run import app
from basket.infra import paths


class ApiTestCase(unittest.TestCase):
    USER = "user-1"

    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        # Keep the real data files out of the tests
        self._tmp = tempfile.TemporaryDirectory()
        self._original_data_dir = paths.DATA_DIR
        paths.use_data_dir(Path(self._tmp.name))

    def tearDown(self):
        paths.use_data_dir(self._original_data_dir)
        self._tmp.cleanup()

    def headers(self, user=None):
        return {"X-User-Id": user or self.USER}

    def create_shop(self, name="Test Shop", address="123 Test Street", user=None):
        resp = self.client.post('/api/shops', json={'name': name, 'address': address}, headers=self.headers(user))
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()['shop']

    def create_product(self, shop_id, name="Test Product", price=9.99, size="1kg", user=None):
        body = {'name': name, 'shopId': shop_id, 'price': price}
        if size is not None:
            body['size'] = size
        resp = self.client.post('/api/products', json=body, headers=self.headers(user))
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()['product']

    def create_list(self, product_ids, name=None, user=None):
        body = {'productIds': product_ids}
        if name is not None:
            body['name'] = name
        resp = self.client.post('/api/shopping-lists', json=body, headers=self.headers(user))
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()['shoppingList']

    def get_list(self, list_id, user=None):
        resp = self.client.get(f'/api/shopping-lists/{list_id}', headers=self.headers(user))
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()['shoppingList']

    def list_items(self, list_id):
        """Items of a list in shop-group order."""
        return [item for group in self.get_list(list_id)['itemsByShop'] for item in group['items']]

    def update_item(self, list_id, item_id, **body):
        resp = self.client.put(f'/api/shopping-lists/{list_id}/items/{item_id}', json=body, headers=self.headers())
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()['item']
