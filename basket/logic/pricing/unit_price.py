"""Unit-price normalization.

Turns a free-form package size ("500g", "1L", "6 pieces") plus a price into a
comparable price per kilogram, per liter or per item.

    normalize("1kg", 2.50)      -> Decimal('2.50')  per kg
    normalize("500g", 1.20)     -> Decimal('2.40')  per kg
    normalize("500ml", 1.80)    -> Decimal('3.60')  per L
    normalize("6 pieces", 3.60) -> Decimal('0.60')  per item
    normalize("invalid", 2.50)  -> None

Normalization is advisory: every invalid input yields None, nothing raises.
"""
from __future__ import annotations
import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Tuple

from basket.logic.pricing.money import round_money, to_money

logger = logging.getLogger(__name__)

__all__ = ["UNITS", "UNIT_KG", "UNIT_L", "UNIT_ITEM", "parse_size", "unit_class", "normalize"]

UNIT_KG = "kg"
UNIT_L = "L"
UNIT_ITEM = "item"

_COUNT_TOKENS = ('piece', 'pieces', 'pcs', 'pc', 'st', 'stk', 'stück', 'x', 'count', 'unit', 'units')

# token -> (unit class, divisor into the base unit)
UNITS: Dict[str, Tuple[str, Decimal]] = {
    'kg': (UNIT_KG, Decimal(1)),
    'g': (UNIT_KG, Decimal(1000)),
    'mg': (UNIT_KG, Decimal(1000000)),
    'l': (UNIT_L, Decimal(1)),
    'ml': (UNIT_L, Decimal(1000)),
    **{token: (UNIT_ITEM, Decimal(1)) for token in _COUNT_TOKENS},
}

# Amount, optional whitespace, then a run of letters; the token is checked against UNITS.
_SIZE_PATTERN = re.compile(r'([0-9]+(?:\.[0-9]+)?)\s*([^\W\d_]+)', re.IGNORECASE)


def parse_size(size: Optional[str]) -> Optional[Tuple[Decimal, str]]:
    """Return ``(amount in base units, unit class)`` for a size string, or None."""
    if not size or not isinstance(size, str) or not size.strip():
        return None
    match = _SIZE_PATTERN.fullmatch(size.strip())
    if not match:
        return None
    unit = UNITS.get(match.group(2).lower())
    if unit is None:
        return None
    unit_cls, divisor = unit
    try:
        amount = Decimal(match.group(1)) / divisor
    except InvalidOperation:
        return None
    if amount <= 0:
        return None
    return amount, unit_cls


def unit_class(size: Optional[str]) -> Optional[str]:
    """Dimension the normalized price refers to: 'kg', 'L', 'item' or None."""
    parsed = parse_size(size)
    return parsed[1] if parsed else None


def normalize(size: Optional[str], price: Any) -> Optional[Decimal]:
    """Price per base unit rounded to cents, or None when it cannot be computed."""
    price_value = to_money(price)
    if price_value is None or price_value <= 0:
        return None
    parsed = parse_size(size)
    if parsed is None:
        logger.debug("No unit price for size=%r", size)
        return None
    amount, _ = parsed
    try:
        per_unit = price_value / amount
    except (InvalidOperation, ZeroDivisionError):
        return None
    if not per_unit.is_finite():
        return None
    result = round_money(per_unit)
    # Tiny prices on huge packages can round away entirely
    if result <= 0:
        return None
    return result
