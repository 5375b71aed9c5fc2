import logging
from typing import Dict

from fastapi import APIRouter, Depends, HTTPException

from basket.api.deps import current_user
from basket.domain.Product import Product
from basket.domain.Shop import Shop
from basket.domain.ShoppingList import ShoppingList, ShoppingListItem
from basket.infra.Product_Repository import ProductRepository
from basket.infra.Shop_Repository import ShopRepository
from basket.infra.ShoppingList_Repository import ShoppingListRepository
from basket.logic.shopping.aggregation import aggregate
from basket.utilities.validators import (
    ShoppingListInput,
    ShoppingListItemUpdateInput,
    ShoppingListUpdateInput,
)

router = APIRouter(prefix="/api/shopping-lists", tags=["shopping-lists"])
logger = logging.getLogger(__name__)


def _list_or_404(list_id: str, user_id: str) -> ShoppingList:
    shopping_list = ShoppingListRepository().get_for_user(list_id, user_id)
    if not shopping_list:
        raise HTTPException(status_code=404, detail="Shopping list not found")
    return shopping_list


def _summary(shopping_list: ShoppingList) -> dict:
    return {
        "id": shopping_list.id,
        "name": shopping_list.name,
        "createdAt": shopping_list.created_at,
        "updatedAt": shopping_list.updated_at,
        "completedAt": shopping_list.completed_at,
        "totalItems": len(shopping_list.items),
    }


def _item_view(item: ShoppingListItem, product: Product, shop: Shop) -> dict:
    """Display form of one list item, as consumed by the aggregator."""
    data = item.to_dict()
    data["product"] = {
        "id": product.id,
        "name": product.name,
        "size": product.size,
        "price": product.price,
        "pricePerUnit": product.price_per_unit,
        "unitClass": product.unit_class,
    }
    data["shop"] = shop.summary() if shop else {"id": product.shop_id, "name": None, "address": None}
    return data


@router.get("")
def list_shopping_lists(user_id: str = Depends(current_user)):
    lists = ShoppingListRepository().list_for_user(user_id)
    return {"shoppingLists": [_summary(sl) for sl in lists]}


@router.get("/{list_id}")
def get_shopping_list(list_id: str, user_id: str = Depends(current_user)):
    """Shopping list with its items grouped by shop and expected/actual totals."""
    shopping_list = _list_or_404(list_id, user_id)
    products: Dict[str, Product] = {p.id: p for p in ProductRepository().list_for_user(user_id)}
    shops: Dict[str, Shop] = {s.id: s for s in ShopRepository().list_for_user(user_id)}

    views = []
    for item in shopping_list.get_items():
        product = products.get(item.product_id)
        if product is None:
            logger.warning("List %s references missing product %s; skipping item", list_id, item.product_id)
            continue
        views.append(_item_view(item, product, shops.get(product.shop_id)))

    totals = aggregate(views)
    result = _summary(shopping_list)
    result.update({
        "itemsByShop": totals["groups"],
        "overallExpectedTotal": totals["overallExpectedTotal"],
        "overallActualTotal": totals["overallActualTotal"],
        "totalItems": totals["totalItemCount"],
    })
    return {"shoppingList": result}


@router.post("", status_code=201)
def create_shopping_list(payload: ShoppingListInput, user_id: str = Depends(current_user)):
    product_ids = payload.product_ids
    found = ProductRepository().get_many_for_user(product_ids, user_id)
    if len(set(product_ids)) != len(product_ids) or len(found) != len(product_ids):
        raise HTTPException(status_code=400, detail="Invalid products")

    shopping_list = ShoppingList(user_id, payload.name)
    for product_id in product_ids:
        shopping_list.add_item(ShoppingListItem(product_id))
    ShoppingListRepository().add(shopping_list)
    logger.info("Created shopping list %s with %d items for user %s",
                shopping_list.id, len(product_ids), user_id)
    return {"shoppingList": _summary(shopping_list)}


@router.put("/{list_id}")
def update_shopping_list(list_id: str, payload: ShoppingListUpdateInput, user_id: str = Depends(current_user)):
    shopping_list = _list_or_404(list_id, user_id)
    changes = payload.model_dump(exclude_unset=True)
    if "name" in changes:
        shopping_list.rename(changes["name"] or None)
    if changes.get("completed") is not None:
        shopping_list.set_completed(changes["completed"])
    ShoppingListRepository().save(shopping_list)
    return {"shoppingList": _summary(shopping_list)}


@router.put("/{list_id}/items/{item_id}")
def update_shopping_list_item(list_id: str, item_id: str, payload: ShoppingListItemUpdateInput,
                              user_id: str = Depends(current_user)):
    repo = ShoppingListRepository()
    with repo.transaction():
        shopping_list = repo.get_for_user(list_id, user_id)
        item = shopping_list.get_item(item_id) if shopping_list else None
        if not item:
            raise HTTPException(status_code=404, detail="Shopping list item not found")
        item.update(payload.model_dump(exclude_unset=True))
        repo.save(shopping_list)
    logger.info("Shopping list %s item %s -> %s", list_id, item_id, item.status)
    data = item.to_dict()
    product = ProductRepository().get_for_user(item.product_id, user_id)
    data["product"] = product.summary() if product else None
    return {"item": data}


@router.delete("/{list_id}")
def delete_shopping_list(list_id: str, user_id: str = Depends(current_user)):
    shopping_list = _list_or_404(list_id, user_id)
    ShoppingListRepository().delete(shopping_list.id)
    return {"message": "Shopping list deleted successfully"}
