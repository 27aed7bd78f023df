"""Stock feasibility check."""
from shopcart.models import StockRecord


def can_satisfy(requested_amount: int, stock: StockRecord) -> bool:
    """True iff `requested_amount` units fit within the available stock.

    Callers reject non-positive amounts before asking.
    """
    return requested_amount <= stock.amount
