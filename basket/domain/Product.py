"""Product domain entity: name, package size, price and its normalized unit price."""
from decimal import Decimal
from typing import Optional
from uuid import uuid4

from basket.logic.pricing.money import ZERO, round_money, to_money
from basket.logic.pricing.unit_price import normalize, unit_class as size_unit_class
from basket.utilities.clock import now_iso


class Product:
    def __init__(self, user_id: str, shop_id: str, name: str, price: Decimal,
                 size: Optional[str] = None, price_per_unit: Optional[Decimal] = None,
                 id: Optional[str] = None, created_at: Optional[str] = None,
                 updated_at: Optional[str] = None):
        self.id = id or str(uuid4())
        self.user_id = user_id
        self.shop_id = shop_id
        self.name = name
        self.size = size
        self.price = round_money(price)
        self.price_per_unit = price_per_unit
        self.created_at = created_at or now_iso()
        self.updated_at = updated_at or self.created_at

    @staticmethod
    def create(user_id: str, shop_id: str, name: str, price: Decimal, size: Optional[str] = None):
        '''Builds a new product with its unit price computed from size and price.'''
        product = Product(user_id, shop_id, name, price, size)
        product.recompute_unit_price()
        return product

    @property
    def unit_class(self) -> Optional[str]:
        return size_unit_class(self.size) if self.price_per_unit is not None else None

    def recompute_unit_price(self):
        self.price_per_unit = normalize(self.size, self.price)

    def update(self, changes: dict):
        '''
        Applies a partial update. Keys: name, shop_id, size, price.
        The unit price is recomputed from the merged size and price whenever either changes.
        '''
        if "name" in changes:
            self.name = changes["name"]
        if "shop_id" in changes:
            self.shop_id = changes["shop_id"]
        if "size" in changes:
            self.size = changes["size"]
        if "price" in changes:
            self.price = round_money(changes["price"])
        if "size" in changes or "price" in changes:
            self.recompute_unit_price()
        self.updated_at = now_iso()

    def summary(self) -> dict:
        return {"id": self.id, "name": self.name, "price": self.price, "size": self.size}

    def __str__(self) -> str:
        parts = [f"{self.name} - {self.price}"]
        if self.size:
            parts.append(self.size)
        if self.price_per_unit is not None:
            parts.append(f"{self.price_per_unit}/{self.unit_class}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a Product from its stored form. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Product(
            user_id=d.get("userId", ""),
            shop_id=d.get("shopId", ""),
            name=d.get("name", ""),
            price=to_money(d.get("price")) or ZERO,
            size=d.get("size"),
            price_per_unit=to_money(d.get("pricePerUnit")),
            id=d.get("id"),
            created_at=d.get("createdAt"),
            updated_at=d.get("updatedAt"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "shopId": self.shop_id,
            "name": self.name,
            "size": self.size,
            "price": self.price,
            "pricePerUnit": self.price_per_unit,
            "unitClass": self.unit_class,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
