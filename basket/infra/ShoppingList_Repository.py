import logging
from typing import Iterable, List, Optional

from basket.domain.ShoppingList import ShoppingList
from basket.infra import paths
from basket.infra.Json_Store import JsonRepository

logger = logging.getLogger(__name__)


class ShoppingListRepository(JsonRepository[ShoppingList]):
    def _path(self):
        return paths.SHOPPING_LISTS_FILE

    def _from_dict(self, data: dict) -> ShoppingList:
        return ShoppingList.from_dict(data)

    def list_for_user(self, user_id: str) -> List[ShoppingList]:
        """User's shopping lists, newest first."""
        return list(reversed(self.find(lambda sl: sl.user_id == user_id)))

    def get_for_user(self, list_id: str, user_id: str) -> Optional[ShoppingList]:
        shopping_list = self.get(list_id)
        if shopping_list is None or shopping_list.user_id != user_id:
            return None
        return shopping_list

    def delete(self, list_id: str) -> bool:
        removed = self.delete_where(lambda sl: sl.id == list_id)
        if removed:
            logger.info("Deleted shopping list %s", list_id)
        return bool(removed)

    def remove_products(self, product_ids: Iterable[str]) -> int:
        """Drop items referencing the given products from every list."""
        product_ids = set(product_ids)
        if not product_ids:
            return 0
        removed = 0
        with self.transaction():
            lists = self._load()
            for shopping_list in lists:
                removed += shopping_list.remove_products(product_ids)
            if removed:
                self._store(lists)
        if removed:
            logger.info("Removed %d shopping list items for deleted products", removed)
        return removed
