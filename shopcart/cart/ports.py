"""Collaborator contracts consumed by the cart.

Each collaborator is injected into `CartStore`; implementations live in
`shopcart.services` and `shopcart.cart.storage`, tests use in-memory fakes.
"""
from abc import ABC, abstractmethod
from typing import Optional

from shopcart.models import CatalogProduct, StockRecord
from .models import Cart


class CatalogFetchError(Exception):
    """Catalog call failed or returned malformed data."""

    def __init__(self, message: str, product_id: Optional[int] = None):
        super().__init__(message)
        self.product_id = product_id


class CatalogService(ABC):
    """Remote source of product and stock records."""

    @abstractmethod
    async def get_stock(self, product_id: int) -> StockRecord:
        """Fetch the stock record for a product.

        Raises:
            CatalogFetchError: On transport or payload errors
        """
        pass

    @abstractmethod
    async def get_product(self, product_id: int) -> CatalogProduct:
        """Fetch the catalog entry for a product.

        Raises:
            CatalogFetchError: On transport or payload errors
        """
        pass


class DurableStore(ABC):
    """Survives process restarts; owns the cart key exclusively."""

    @abstractmethod
    async def load(self) -> Optional[Cart]:
        """Return the persisted cart, or None if nothing was saved."""
        pass

    @abstractmethod
    async def save(self, cart: Cart) -> None:
        """Persist a committed snapshot (best effort)."""
        pass


class Notifier(ABC):
    """User-facing failure reporting."""

    @abstractmethod
    def error(self, message: str) -> None:
        pass
