from typing import Final

# Shopping list item statuses, in the order they are offered to the user
STATUS_PENDING: Final[str] = "pending"
STATUS_BOUGHT: Final[str] = "bought"
STATUS_NOT_BOUGHT: Final[str] = "not_bought"
STATUS_WRONG_PRICE: Final[str] = "wrong_price"
STATUS_NOT_AVAILABLE: Final[str] = "not_available"

ITEM_STATUSES: Final[tuple[str, ...]] = (
    STATUS_PENDING,
    STATUS_BOUGHT,
    STATUS_NOT_BOUGHT,
    STATUS_WRONG_PRICE,
    STATUS_NOT_AVAILABLE,
)

USER_HEADER: Final[str] = "X-User-Id"

MAX_LIST_PRODUCTS: Final[int] = 100

# Upper bound for any price accepted over the API
MAX_PRICE: Final[int] = 1_000_000
