import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from basket.domain.Offer import Offer
from basket.infra import paths
from basket.infra.Json_Store import JsonRepository

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class OfferRepository(JsonRepository[Offer]):
    def _path(self):
        return paths.OFFERS_FILE

    def _from_dict(self, data: dict) -> Offer:
        return Offer.from_dict(data)

    def list_for_products(self, product_ids: Iterable[str], shop_ids: Iterable[str],
                          product_id: Optional[str] = None,
                          shop_id: Optional[str] = None) -> List[Offer]:
        """Offers whose product and shop are both among the given (owned) ids, latest start first."""
        products = set(product_ids)
        shops = set(shop_ids)

        def _match(o: Offer) -> bool:
            if o.product_id not in products or o.shop_id not in shops:
                return False
            if product_id and o.product_id != product_id:
                return False
            if shop_id and o.shop_id != shop_id:
                return False
            return True

        offers = self.find(_match)
        offers.sort(key=lambda o: o.start_time or _EPOCH, reverse=True)
        return offers

    def delete(self, offer_id: str) -> bool:
        removed = self.delete_where(lambda o: o.id == offer_id)
        if removed:
            logger.info("Deleted offer %s", offer_id)
        return bool(removed)

    def delete_for(self, product_ids: Iterable[str] = (), shop_id: Optional[str] = None) -> int:
        """Delete offers of any of the products or at the given shop."""
        products = set(product_ids)
        removed = self.delete_where(lambda o: o.product_id in products or (shop_id is not None and o.shop_id == shop_id))
        if removed:
            logger.info("Deleted %d offers", len(removed))
        return len(removed)
