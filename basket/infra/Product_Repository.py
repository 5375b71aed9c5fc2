import logging
from typing import Iterable, List, Optional

from basket.domain.Product import Product
from basket.infra import paths
from basket.infra.Json_Store import JsonRepository

logger = logging.getLogger(__name__)


class ProductRepository(JsonRepository[Product]):
    def _path(self):
        return paths.PRODUCTS_FILE

    def _from_dict(self, data: dict) -> Product:
        return Product.from_dict(data)

    def list_for_user(self, user_id: str, search: Optional[str] = None,
                      shop_id: Optional[str] = None) -> List[Product]:
        """User's products, newest first, optionally filtered by a name substring and shop."""
        needle = (search or '').strip().lower()

        def _match(p: Product) -> bool:
            if p.user_id != user_id:
                return False
            if needle and needle not in p.name.lower():
                return False
            if shop_id and p.shop_id != shop_id:
                return False
            return True

        return list(reversed(self.find(_match)))

    def get_for_user(self, product_id: str, user_id: str) -> Optional[Product]:
        product = self.get(product_id)
        if product is None or product.user_id != user_id:
            return None
        return product

    def get_many_for_user(self, product_ids: Iterable[str], user_id: str) -> List[Product]:
        wanted = set(product_ids)
        return self.find(lambda p: p.id in wanted and p.user_id == user_id)

    def delete_for_shop(self, shop_id: str) -> List[Product]:
        removed = self.delete_where(lambda p: p.shop_id == shop_id)
        if removed:
            logger.info("Deleted %d products of shop %s", len(removed), shop_id)
        return removed

    def delete(self, product_id: str) -> bool:
        removed = self.delete_where(lambda p: p.id == product_id)
        if removed:
            logger.info("Deleted product %s", product_id)
        return bool(removed)
