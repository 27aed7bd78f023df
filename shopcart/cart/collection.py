"""
Cart collection operations.

Pure functions over `Cart` snapshots. Each returns a new snapshot and
never touches the one it was given; entries that are not affected keep
their identity, and the order of the remaining entries never changes.
"""
from typing import Optional

from shopcart.models import CatalogProduct
from .models import Cart, CartItem


class CartItemNotFoundError(LookupError):
    """Operation referenced a product id that is not in the cart."""

    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} is not in the cart")
        self.product_id = product_id


def find(cart: Cart, product_id: int) -> Optional[CartItem]:
    return cart.get(product_id)


def upsert_increment(cart: Cart, product_id: int, catalog_product: Optional[CatalogProduct] = None) -> Cart:
    """
    Increment the line for `product_id` by one, or append it with amount 1.

    Args:
        cart: Current snapshot
        product_id: Product to add
        catalog_product: Catalog entry used to build a new line (required when absent)

    Returns:
        New snapshot
    """
    if find(cart, product_id) is not None:
        return Cart(items=tuple(
            item.with_amount(item.amount + 1) if item.id == product_id else item
            for item in cart.items
        ))

    if catalog_product is None:
        raise ValueError("catalog_product is required to add a new line")
    if catalog_product.id != product_id:
        raise ValueError(f"catalog_product id {catalog_product.id} does not match {product_id}")

    return Cart(items=cart.items + (CartItem.from_catalog(catalog_product, amount=1),))


def set_amount(cart: Cart, product_id: int, amount: int) -> Cart:
    """Overwrite the amount of an existing line.

    Raises:
        CartItemNotFoundError: If `product_id` is not in the cart
    """
    if find(cart, product_id) is None:
        raise CartItemNotFoundError(product_id)

    return Cart(items=tuple(
        item.with_amount(amount) if item.id == product_id else item
        for item in cart.items
    ))


def remove(cart: Cart, product_id: int) -> Cart:
    """Drop the line for `product_id`.

    Raises:
        CartItemNotFoundError: If `product_id` is not in the cart
    """
    if find(cart, product_id) is None:
        raise CartItemNotFoundError(product_id)

    return Cart(items=tuple(item for item in cart.items if item.id != product_id))
