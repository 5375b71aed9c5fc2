import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from basket.api.deps import current_user
from basket.domain.Product import Product
from basket.infra.Offer_Repository import OfferRepository
from basket.infra.Product_Repository import ProductRepository
from basket.infra.Shop_Repository import ShopRepository
from basket.infra.ShoppingList_Repository import ShoppingListRepository
from basket.utilities.validators import ProductInput, ProductUpdateInput

router = APIRouter(prefix="/api/products", tags=["products"])
logger = logging.getLogger(__name__)


def _product_or_404(product_id: str, user_id: str) -> Product:
    product = ProductRepository().get_for_user(product_id, user_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


def _require_shop(shop_id: str, user_id: str):
    shop = ShopRepository().get_for_user(shop_id, user_id)
    if not shop:
        raise HTTPException(status_code=404, detail="Shop not found")
    return shop


def _public(product: Product, shop=None, with_address: bool = False) -> dict:
    data = product.to_dict()
    data.pop("userId", None)
    data["shop"] = shop.summary(with_address=with_address) if shop else None
    return data


@router.get("")
def list_products(search: Optional[str] = Query(default=None),
                  shop_id: Optional[str] = Query(default=None, alias="shopId"),
                  user_id: str = Depends(current_user)):
    shops = {s.id: s for s in ShopRepository().list_for_user(user_id)}
    products = ProductRepository().list_for_user(user_id, search=search, shop_id=shop_id)
    return {"products": [_public(p, shops.get(p.shop_id)) for p in products]}


@router.get("/{product_id}")
def get_product(product_id: str, user_id: str = Depends(current_user)):
    product = _product_or_404(product_id, user_id)
    shop = ShopRepository().get_for_user(product.shop_id, user_id)
    return {"product": _public(product, shop, with_address=True)}


@router.post("", status_code=201)
def create_product(payload: ProductInput, user_id: str = Depends(current_user)):
    shop = _require_shop(payload.shop_id, user_id)
    product = Product.create(user_id, shop.id, payload.name, payload.price, payload.size)
    ProductRepository().add(product)
    logger.info("Created product %s (unit price %s) for user %s", product.id, product.price_per_unit, user_id)
    return {"product": _public(product, shop)}


@router.put("/{product_id}")
def update_product(product_id: str, payload: ProductUpdateInput, user_id: str = Depends(current_user)):
    product = _product_or_404(product_id, user_id)
    changes = payload.model_dump(exclude_unset=True)
    if "shop_id" in changes:
        _require_shop(changes["shop_id"], user_id)
    product.update(changes)
    ProductRepository().save(product)
    shop = ShopRepository().get_for_user(product.shop_id, user_id)
    return {"product": _public(product, shop)}


@router.delete("/{product_id}")
def delete_product(product_id: str, user_id: str = Depends(current_user)):
    """Delete a product together with its offers and list items."""
    product = _product_or_404(product_id, user_id)
    OfferRepository().delete_for([product.id])
    ShoppingListRepository().remove_products([product.id])
    ProductRepository().delete(product.id)
    return {"message": "Product deleted successfully"}
