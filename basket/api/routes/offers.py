import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from basket.api.deps import current_user
from basket.domain.Offer import Offer
from basket.infra.Offer_Repository import OfferRepository
from basket.infra.Product_Repository import ProductRepository
from basket.infra.Shop_Repository import ShopRepository
from basket.utilities.validators import OfferInput, OfferUpdateInput

router = APIRouter(prefix="/api/offers", tags=["offers"])
logger = logging.getLogger(__name__)


class _Owned:
    """The caller's products and shops, indexed by id. Offers are visible through both."""

    def __init__(self, user_id: str):
        self.products = {p.id: p for p in ProductRepository().list_for_user(user_id)}
        self.shops = {s.id: s for s in ShopRepository().list_for_user(user_id)}

    def offers(self, product_id: Optional[str] = None, shop_id: Optional[str] = None):
        return OfferRepository().list_for_products(self.products, self.shops,
                                                   product_id=product_id, shop_id=shop_id)

    def offer(self, offer_id: str) -> Offer:
        offer = OfferRepository().get(offer_id)
        if not offer or offer.product_id not in self.products or offer.shop_id not in self.shops:
            raise HTTPException(status_code=404, detail="Offer not found")
        return offer

    def view(self, offer: Offer) -> dict:
        data = offer.to_dict()
        product = self.products.get(offer.product_id)
        shop = self.shops.get(offer.shop_id)
        data["product"] = product.summary() if product else None
        data["shop"] = shop.summary() if shop else None
        return data


@router.get("")
def list_offers(product_id: Optional[str] = Query(default=None, alias="productId"),
                shop_id: Optional[str] = Query(default=None, alias="shopId"),
                user_id: str = Depends(current_user)):
    owned = _Owned(user_id)
    return {"offers": [owned.view(o) for o in owned.offers(product_id, shop_id)]}


@router.get("/{offer_id}")
def get_offer(offer_id: str, user_id: str = Depends(current_user)):
    owned = _Owned(user_id)
    offer = owned.offer(offer_id)
    data = owned.view(offer)
    if data["product"] is not None:
        data["product"]["shopId"] = owned.products[offer.product_id].shop_id
    return {"offer": data}


@router.post("", status_code=201)
def create_offer(payload: OfferInput, user_id: str = Depends(current_user)):
    owned = _Owned(user_id)
    if payload.product_id not in owned.products:
        raise HTTPException(status_code=400, detail="Invalid product")
    if payload.shop_id not in owned.shops:
        raise HTTPException(status_code=400, detail="Invalid shop")
    offer = Offer(payload.product_id, payload.shop_id, payload.offer_price,
                  payload.start_time, payload.end_time)
    OfferRepository().add(offer)
    logger.info("Created offer %s for product %s", offer.id, offer.product_id)
    return {"offer": owned.view(offer)}


@router.put("/{offer_id}")
def update_offer(offer_id: str, payload: OfferUpdateInput, user_id: str = Depends(current_user)):
    owned = _Owned(user_id)
    offer = owned.offer(offer_id)
    changes = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
    start = changes.get("start_time", offer.start_time)
    end = changes.get("end_time", offer.end_time)
    if start >= end:
        raise HTTPException(status_code=400, detail="startTime must be before endTime")
    offer.update(changes)
    OfferRepository().save(offer)
    return {"offer": owned.view(offer)}


@router.delete("/{offer_id}")
def delete_offer(offer_id: str, user_id: str = Depends(current_user)):
    offer = _Owned(user_id).offer(offer_id)
    OfferRepository().delete(offer.id)
    return {"message": "Offer deleted successfully"}
