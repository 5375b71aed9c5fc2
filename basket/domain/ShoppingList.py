"""ShoppingList aggregate: a named list of product entries with a purchase status each."""
from decimal import Decimal
from typing import Iterable, List, Optional
from uuid import uuid4

from basket.logic.pricing.money import round_money, to_money
from basket.utilities.clock import now_iso
from basket.utilities.constants import STATUS_PENDING


class ShoppingListItem:
    def __init__(self, product_id: str, status: str = STATUS_PENDING,
                 actual_price: Optional[Decimal] = None, notes: Optional[str] = None,
                 id: Optional[str] = None, created_at: Optional[str] = None,
                 updated_at: Optional[str] = None):
        self.id = id or str(uuid4())
        self.product_id = product_id
        self.status = status
        self.actual_price = round_money(actual_price) if actual_price is not None else None
        self.notes = notes
        self.created_at = created_at or now_iso()
        self.updated_at = updated_at or self.created_at

    def update(self, changes: dict):
        '''
        Applies a partial update. Keys: status, actual_price, notes.
        Present keys are applied even when None (clears actual price / notes).
        '''
        if "status" in changes and changes["status"] is not None:
            self.status = changes["status"]
        if "actual_price" in changes:
            price = changes["actual_price"]
            self.actual_price = round_money(price) if price is not None else None
        if "notes" in changes:
            self.notes = changes["notes"]
        self.updated_at = now_iso()

    def __str__(self) -> str:
        return f"{self.product_id} [{self.status}]"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return ShoppingListItem(
            product_id=d.get("productId", ""),
            status=d.get("status") or STATUS_PENDING,
            actual_price=to_money(d.get("actualPrice")),
            notes=d.get("notes"),
            id=d.get("id"),
            created_at=d.get("createdAt"),
            updated_at=d.get("updatedAt"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "productId": self.product_id,
            "status": self.status,
            "actualPrice": self.actual_price,
            "notes": self.notes,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


class ShoppingList:
    def __init__(self, user_id: str, name: Optional[str] = None,
                 items: Optional[List[ShoppingListItem]] = None,
                 id: Optional[str] = None, created_at: Optional[str] = None,
                 updated_at: Optional[str] = None, completed_at: Optional[str] = None):
        self.id = id or str(uuid4())
        self.user_id = user_id
        self.name = name
        self.items: List[ShoppingListItem] = items[:] if items else []
        self.created_at = created_at or now_iso()
        self.updated_at = updated_at or self.created_at
        self.completed_at = completed_at

    def add_item(self, item: ShoppingListItem):
        '''
        Adds an item to the shopping list. Items keep their insertion order.
        '''
        self.items.append(item)

    def get_item(self, item_id: str) -> Optional[ShoppingListItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def get_items(self):
        '''
        Returns the list of shopping list items.
        '''
        return self.items

    def remove_products(self, product_ids: Iterable[str]) -> int:
        '''
        Drops every item referencing one of the given products; returns how many were removed.
        '''
        doomed = set(product_ids)
        before = len(self.items)
        self.items = [i for i in self.items if i.product_id not in doomed]
        removed = before - len(self.items)
        if removed:
            self.updated_at = now_iso()
        return removed

    def rename(self, name: Optional[str]):
        self.name = name
        self.updated_at = now_iso()

    def set_completed(self, completed: bool):
        if completed and not self.completed_at:
            self.completed_at = now_iso()
        elif not completed:
            self.completed_at = None
        self.updated_at = now_iso()

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Shopping List {self.name or self.id} Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return ShoppingList(
            user_id=d.get("userId", ""),
            name=d.get("name"),
            items=[ShoppingListItem.from_dict(i) for i in d.get("items") or []],
            id=d.get("id"),
            created_at=d.get("createdAt"),
            updated_at=d.get("updatedAt"),
            completed_at=d.get("completedAt"),
        )

    def to_dict(self):
        '''
        Converts the ShoppingList to a dictionary for JSON persistence.
        '''
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "completedAt": self.completed_at,
            "items": [item.to_dict() for item in self.items],
        }
