"""Shopping list cost aggregation.

Groups the items of one shopping list by shop and computes the expected and
actual totals per shop and overall.

Provides aggregate(items).
"""
from __future__ import annotations
from decimal import Decimal
from typing import Any, Dict, Iterable, List

from basket.logic.pricing.money import ZERO, round_money, to_money
from basket.utilities.constants import STATUS_BOUGHT

__all__ = ["aggregate"]


def _shop_view(shop: Any) -> Dict[str, Any]:
    shop = shop if isinstance(shop, dict) else {}
    return {
        'id': shop.get('id'),
        'name': shop.get('name'),
        'address': shop.get('address'),
    }


def _price_of(item: Dict[str, Any]) -> Decimal:
    product = item.get('product') or {}
    return to_money(product.get('price')) or ZERO


def aggregate(items: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """Group shopping list items by shop and compute cost totals.

    Args:
        items: Item display dicts in load order. Each carries ``status``,
            ``actualPrice``, ``product`` (with ``price``) and ``shop``
            (``id``, ``name``, ``address``). Items are not modified.

    Returns:
        {
          'groups': [ { 'shop': {id, name, address}, 'items': [...],
                        'expectedTotal': Decimal, 'actualTotal': Decimal,
                        'itemCount': int }, ... ],
          'overallExpectedTotal': Decimal,
          'overallActualTotal': Decimal,
          'totalItemCount': int
        }

    Every item counts towards the expected totals. Only ``bought`` items count
    towards the actual totals, at their actual price when one was recorded and
    at the product price otherwise; any other status (unknown ones included)
    adds nothing. Totals are rounded once, after summing.
    """
    groups: Dict[Any, Dict[str, Any]] = {}
    overall_expected = ZERO
    overall_actual = ZERO
    total = 0

    for item in items:
        shop = _shop_view(item.get('shop'))
        group = groups.get(shop['id'])
        if group is None:
            group = {'shop': shop, 'items': [], 'expectedTotal': ZERO, 'actualTotal': ZERO}
            groups[shop['id']] = group

        group['items'].append(item)
        total += 1

        price = _price_of(item)
        group['expectedTotal'] += price
        overall_expected += price

        if item.get('status') == STATUS_BOUGHT:
            actual = to_money(item.get('actualPrice'))
            paid = actual if actual is not None else price
            group['actualTotal'] += paid
            overall_actual += paid

    result_groups: List[Dict[str, Any]] = [
        {
            'shop': g['shop'],
            'items': g['items'],
            'expectedTotal': round_money(g['expectedTotal']),
            'actualTotal': round_money(g['actualTotal']),
            'itemCount': len(g['items']),
        }
        for g in groups.values()
    ]
    return {
        'groups': result_groups,
        'overallExpectedTotal': round_money(overall_expected),
        'overallActualTotal': round_money(overall_actual),
        'totalItemCount': total,
    }
