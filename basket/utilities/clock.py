"""Timestamp helpers shared by the domain entities."""
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """Current UTC time as ISO-8601 ('2026-01-03T19:14:59.123456+00:00')."""
    return utc_now().isoformat()


def parse_iso(value) -> Optional[datetime]:
    """Parse an ISO-8601 string (or pass a datetime through); naive values are taken as UTC."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str) and value.strip():
        try:
            dt = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
        except ValueError:
            return None
    else:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
