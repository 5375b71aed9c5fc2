"""Shop domain entity: a store owned by one user."""
from typing import Optional
from uuid import uuid4

from basket.utilities.clock import now_iso


class Shop:
    def __init__(self, user_id: str, name: str, address: Optional[str] = None,
                 id: Optional[str] = None, created_at: Optional[str] = None,
                 updated_at: Optional[str] = None):
        self.id = id or str(uuid4())
        self.user_id = user_id
        self.name = name
        self.address = address
        self.created_at = created_at or now_iso()
        self.updated_at = updated_at or self.created_at

    def update(self, name: Optional[str] = None, address: Optional[str] = None):
        '''Applies a partial update; None leaves a field unchanged.'''
        if name is not None:
            self.name = name
        if address is not None:
            self.address = address
        self.updated_at = now_iso()

    def summary(self, with_address: bool = True) -> dict:
        '''Short shop reference embedded in product, offer and list views.'''
        ref = {"id": self.id, "name": self.name}
        if with_address:
            ref["address"] = self.address
        return ref

    def __str__(self) -> str:
        if self.address:
            return f"{self.name} ({self.address})"
        return self.name

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Shop(
            user_id=d.get("userId", ""),
            name=d.get("name", ""),
            address=d.get("address"),
            id=d.get("id"),
            created_at=d.get("createdAt"),
            updated_at=d.get("updatedAt"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "address": self.address,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
