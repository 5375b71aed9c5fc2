"""Offer domain entity: a promotional price for a product at a shop during a time window."""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import uuid4

from basket.logic.pricing.money import ZERO, round_money, to_money
from basket.utilities.clock import now_iso, parse_iso


class Offer:
    def __init__(self, product_id: str, shop_id: str, offer_price: Decimal,
                 start_time: datetime, end_time: datetime,
                 id: Optional[str] = None, created_at: Optional[str] = None,
                 updated_at: Optional[str] = None):
        self.id = id or str(uuid4())
        self.product_id = product_id
        self.shop_id = shop_id
        self.offer_price = round_money(offer_price)
        self.start_time = start_time
        self.end_time = end_time
        self.created_at = created_at or now_iso()
        self.updated_at = updated_at or self.created_at

    def update(self, changes: dict):
        '''Applies a partial update. Keys: offer_price, start_time, end_time.'''
        if "offer_price" in changes:
            self.offer_price = round_money(changes["offer_price"])
        if "start_time" in changes:
            self.start_time = changes["start_time"]
        if "end_time" in changes:
            self.end_time = changes["end_time"]
        self.updated_at = now_iso()

    def __str__(self) -> str:
        return f"Offer {self.offer_price} ({self.start_time:%d-%m-%Y} - {self.end_time:%d-%m-%Y})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Offer(
            product_id=d.get("productId", ""),
            shop_id=d.get("shopId", ""),
            offer_price=to_money(d.get("offerPrice")) or ZERO,
            start_time=parse_iso(d.get("startTime")),
            end_time=parse_iso(d.get("endTime")),
            id=d.get("id"),
            created_at=d.get("createdAt"),
            updated_at=d.get("updatedAt"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "productId": self.product_id,
            "shopId": self.shop_id,
            "offerPrice": self.offer_price,
            "startTime": self.start_time.isoformat() if self.start_time else None,
            "endTime": self.end_time.isoformat() if self.end_time else None,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
