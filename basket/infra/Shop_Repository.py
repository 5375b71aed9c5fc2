import logging
from typing import List, Optional

from basket.domain.Shop import Shop
from basket.infra import paths
from basket.infra.Json_Store import JsonRepository

logger = logging.getLogger(__name__)


class ShopRepository(JsonRepository[Shop]):
    def _path(self):
        return paths.SHOPS_FILE

    def _from_dict(self, data: dict) -> Shop:
        return Shop.from_dict(data)

    def list_for_user(self, user_id: str) -> List[Shop]:
        """User's shops, newest first."""
        return list(reversed(self.find(lambda s: s.user_id == user_id)))

    def get_for_user(self, shop_id: str, user_id: str) -> Optional[Shop]:
        shop = self.get(shop_id)
        if shop is None or shop.user_id != user_id:
            return None
        return shop

    def delete(self, shop_id: str) -> bool:
        removed = self.delete_where(lambda s: s.id == shop_id)
        if removed:
            logger.info("Deleted shop %s", shop_id)
        return bool(removed)
