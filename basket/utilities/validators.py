"""
Input validation schemas using Pydantic for better data integrity.

Wire names are camelCase (``shopId``, ``offerPrice``); the models accept the
snake_case attribute names too.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from basket.logic.pricing.money import round_money
from basket.utilities.constants import ITEM_STATUSES, MAX_LIST_PRODUCTS, MAX_PRICE


class _Input(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


def _as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC so windows always compare."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ShopInput(_Input):
    """Schema for shop creation."""
    name: str = Field(..., min_length=1, max_length=100)
    address: Optional[str] = None


class ShopUpdateInput(_Input):
    """Schema for partial shop updates."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    address: Optional[str] = None


class ProductInput(_Input):
    """Schema for product creation. Price may arrive as a number or a numeric string."""
    name: str = Field(..., min_length=1, max_length=200)
    shop_id: str = Field(..., alias="shopId", min_length=1)
    size: Optional[str] = Field(None, max_length=50)
    price: Decimal = Field(..., gt=0, le=MAX_PRICE, allow_inf_nan=False)

    @field_validator('price')
    @classmethod
    def round_price(cls, v):
        """Prices are stored with cents precision."""
        v = round_money(v)
        if v <= 0:
            raise ValueError('Price must be at least 0.01')
        return v


class ProductUpdateInput(_Input):
    """Schema for partial product updates; ``size`` may be set to null."""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    shop_id: Optional[str] = Field(None, alias="shopId", min_length=1)
    size: Optional[str] = Field(None, max_length=50)
    price: Optional[Decimal] = Field(None, gt=0, le=MAX_PRICE, allow_inf_nan=False)

    @field_validator('price')
    @classmethod
    def round_price(cls, v):
        if v is None:
            return v
        v = round_money(v)
        if v <= 0:
            raise ValueError('Price must be at least 0.01')
        return v

    @field_validator('name', 'shop_id', 'price')
    @classmethod
    def not_null(cls, v):
        # Only size is nullable; the others may be omitted but not cleared
        if v is None:
            raise ValueError('Field cannot be null')
        return v


class OfferInput(_Input):
    """Schema for offer creation."""
    product_id: str = Field(..., alias="productId", min_length=1)
    shop_id: str = Field(..., alias="shopId", min_length=1)
    offer_price: Decimal = Field(..., alias="offerPrice", gt=0, le=MAX_PRICE, decimal_places=2, allow_inf_nan=False)
    start_time: datetime = Field(..., alias="startTime")
    end_time: datetime = Field(..., alias="endTime")

    @field_validator('start_time', 'end_time')
    @classmethod
    def aware(cls, v):
        return _as_utc(v)

    @model_validator(mode='after')
    def check_window(self):
        """Ensure the offer starts before it ends."""
        if self.start_time >= self.end_time:
            raise ValueError('startTime must be before endTime')
        return self


class OfferUpdateInput(_Input):
    """Schema for partial offer updates; the merged window is checked by the route."""
    offer_price: Optional[Decimal] = Field(None, alias="offerPrice", gt=0, le=MAX_PRICE, decimal_places=2, allow_inf_nan=False)
    start_time: Optional[datetime] = Field(None, alias="startTime")
    end_time: Optional[datetime] = Field(None, alias="endTime")

    @field_validator('start_time', 'end_time')
    @classmethod
    def aware(cls, v):
        return _as_utc(v) if v is not None else v


class ShoppingListInput(_Input):
    """Schema for shopping list creation."""
    name: Optional[str] = Field(None, max_length=200)
    product_ids: List[str] = Field(..., alias="productIds", min_length=1, max_length=MAX_LIST_PRODUCTS)

    @field_validator('name')
    @classmethod
    def blank_to_none(cls, v):
        return v or None


class ShoppingListUpdateInput(_Input):
    """Schema for renaming a list or marking it completed."""
    name: Optional[str] = Field(None, max_length=200)
    completed: Optional[bool] = None


class ShoppingListItemUpdateInput(_Input):
    """Schema for shopping list item updates. Only fields present in the body change."""
    status: Optional[str] = None
    actual_price: Optional[Decimal] = Field(None, alias="actualPrice", gt=0, le=MAX_PRICE, decimal_places=2, allow_inf_nan=False)
    notes: Optional[str] = Field(None, max_length=500)

    @field_validator('status')
    @classmethod
    def known_status(cls, v):
        if v is not None and v not in ITEM_STATUSES:
            raise ValueError(f"Status must be one of: {', '.join(ITEM_STATUSES)}")
        return v
