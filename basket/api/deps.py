"""Shared FastAPI dependencies."""
from typing import Optional

from fastapi import Header, HTTPException, status

from basket.utilities.constants import USER_HEADER


def current_user(user_id: Optional[str] = Header(default=None, alias=USER_HEADER)) -> str:
    """Owner of the request, as asserted by the gateway in front of the API."""
    if not user_id or not user_id.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user_id.strip()
