import logging

from fastapi import APIRouter, Depends, HTTPException

from basket.api.deps import current_user
from basket.domain.Shop import Shop
from basket.infra.Offer_Repository import OfferRepository
from basket.infra.Product_Repository import ProductRepository
from basket.infra.Shop_Repository import ShopRepository
from basket.infra.ShoppingList_Repository import ShoppingListRepository
from basket.utilities.validators import ShopInput, ShopUpdateInput

router = APIRouter(prefix="/api/shops", tags=["shops"])
logger = logging.getLogger(__name__)


def _shop_or_404(shop_id: str, user_id: str) -> Shop:
    shop = ShopRepository().get_for_user(shop_id, user_id)
    if not shop:
        raise HTTPException(status_code=404, detail="Shop not found")
    return shop


def _public(shop: Shop) -> dict:
    data = shop.to_dict()
    data.pop("userId", None)
    return data


@router.get("")
def list_shops(user_id: str = Depends(current_user)):
    return {"shops": [_public(s) for s in ShopRepository().list_for_user(user_id)]}


@router.get("/{shop_id}")
def get_shop(shop_id: str, user_id: str = Depends(current_user)):
    return {"shop": _public(_shop_or_404(shop_id, user_id))}


@router.post("", status_code=201)
def create_shop(payload: ShopInput, user_id: str = Depends(current_user)):
    shop = ShopRepository().add(Shop(user_id, payload.name, payload.address))
    logger.info("Created shop %s for user %s", shop.id, user_id)
    return {"shop": _public(shop)}


@router.put("/{shop_id}")
def update_shop(shop_id: str, payload: ShopUpdateInput, user_id: str = Depends(current_user)):
    shop = _shop_or_404(shop_id, user_id)
    shop.update(name=payload.name, address=payload.address)
    ShopRepository().save(shop)
    return {"shop": _public(shop)}


@router.delete("/{shop_id}")
def delete_shop(shop_id: str, user_id: str = Depends(current_user)):
    """Delete a shop together with its products, their offers and list items."""
    shop = _shop_or_404(shop_id, user_id)
    products = ProductRepository().delete_for_shop(shop.id)
    product_ids = [p.id for p in products]
    OfferRepository().delete_for(product_ids, shop_id=shop.id)
    ShoppingListRepository().remove_products(product_ids)
    ShopRepository().delete(shop.id)
    return {"message": "Shop deleted successfully"}
