"""Pytest configuration and fixtures"""
import asyncio
import os
from decimal import Decimal
from typing import Dict, List, Optional

import pytest

# Set test environment variables
os.environ.setdefault("UPSTASH_REDIS_REST_URL", "https://test.upstash.io")
os.environ.setdefault("UPSTASH_REDIS_REST_TOKEN", "test_token")
os.environ.setdefault("CATALOG_API_URL", "http://catalog.test")

from shopcart.cart.models import Cart, CartItem
from shopcart.cart.ports import CatalogFetchError, CatalogService
from shopcart.cart.storage import MemoryCartStore
from shopcart.models import CatalogProduct, StockRecord
from shopcart.services.notifications import CollectingNotifier


class FakeCatalog(CatalogService):
    """In-memory catalog; yields to the loop on every call like a real fetch."""

    def __init__(self, stock: Optional[Dict[int, int]] = None):
        self.stock: Dict[int, int] = dict(stock or {})
        self.failing: set = set()
        self.calls: List[tuple] = []

    def product_for(self, product_id: int) -> CatalogProduct:
        return CatalogProduct(
            id=product_id,
            title=f"Tenis {product_id}",
            price=Decimal("179.90"),
            image=f"https://img.test/{product_id}.jpg",
        )

    async def get_stock(self, product_id: int) -> StockRecord:
        self.calls.append(("stock", product_id))
        await asyncio.sleep(0)
        if product_id in self.failing or product_id not in self.stock:
            raise CatalogFetchError("stock unavailable", product_id)
        return StockRecord(id=product_id, amount=self.stock[product_id])

    async def get_product(self, product_id: int) -> CatalogProduct:
        self.calls.append(("product", product_id))
        await asyncio.sleep(0)
        if product_id in self.failing or product_id not in self.stock:
            raise CatalogFetchError("product unavailable", product_id)
        return self.product_for(product_id)


def make_item(product_id: int, amount: int = 1) -> CartItem:
    return CartItem(
        id=product_id,
        title=f"Tenis {product_id}",
        price=Decimal("179.90"),
        image=f"https://img.test/{product_id}.jpg",
        amount=amount,
    )


@pytest.fixture
def catalog():
    """Catalog with a few products in stock"""
    return FakeCatalog({1: 3, 2: 5, 3: 2, 7: 2})


@pytest.fixture
def memory_store():
    return MemoryCartStore()


@pytest.fixture
def notifier():
    return CollectingNotifier()


@pytest.fixture
def sample_cart():
    """Cart with products 1 and 2"""
    return Cart(items=(make_item(1, 1), make_item(2, 2)))
