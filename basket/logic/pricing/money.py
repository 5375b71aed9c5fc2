"""Money helpers.

Money is a ``Decimal`` rounded to cents at every reporting boundary. Callers
convert external representations (JSON strings, floats) with ``to_money``
before handing values to the core.
"""
from __future__ import annotations
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext, localcontext
from typing import Any, Optional

__all__ = ["CENT", "ZERO", "to_money", "round_money", "money_str"]

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: Any) -> Optional[Decimal]:
    """Convert ``value`` to a finite ``Decimal`` or return None.

    Floats are converted through ``str`` so ``2.5`` becomes ``Decimal('2.5')``
    rather than its binary expansion.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        try:
            result = Decimal(str(value))
        except InvalidOperation:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            result = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None
    if not result.is_finite():
        return None
    return result


def round_money(value: Decimal) -> Decimal:
    """Round to two decimals, half away from zero.

    Large amounts need more digits than the default context carries once cents
    are added, so the precision grows with the value.
    """
    with localcontext() as ctx:
        ctx.prec = max(getcontext().prec, value.adjusted() + 3)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def money_str(value: Optional[Decimal]) -> Optional[str]:
    """Serialize money for JSON persistence ('2.50')."""
    if value is None:
        return None
    return str(round_money(value))
