"""Cart operation and failure enums."""
from enum import Enum


class CartOperation(str, Enum):
    """Mutations exposed by the cart store."""
    ADD = "add"
    REMOVE = "remove"
    UPDATE = "update"


class FailureKind(str, Enum):
    """
    Why a reconciliation did not commit.

    FETCH_FAILURE       catalog call failed or returned malformed data
    INSUFFICIENT_STOCK  requested total exceeds available stock
    NOT_FOUND           remove/update referenced a product not in the cart
    UNKNOWN_FAILURE     anything else raised during reconciliation
    """
    FETCH_FAILURE = "fetch_failure"
    INSUFFICIENT_STOCK = "insufficient_stock"
    NOT_FOUND = "not_found"
    UNKNOWN_FAILURE = "unknown_failure"
