"""
Cart Reconciler - validate-then-commit for every cart mutation.

Stock is re-read from the catalog on every mutation because it can
change between cart views. Each operation returns either a
`CommittedCart` holding the new snapshot or a `ReconcileFailure`
describing why nothing was committed; the input snapshot is never
modified.
"""
from dataclasses import dataclass
from typing import Union

from shopcart.logging import get_logger, sanitize_id_for_logging
from shopcart.models import CatalogProduct, StockRecord
from . import collection
from .constants import CartOperation, FailureKind
from .models import Cart
from .ports import CatalogFetchError, CatalogService
from .stock import can_satisfy

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommittedCart:
    """Successful reconciliation. `changed` is False for silent no-ops."""
    cart: Cart
    changed: bool = True


@dataclass(frozen=True)
class ReconcileFailure:
    """Reconciliation that committed nothing."""
    kind: FailureKind
    operation: CartOperation
    product_id: int
    detail: str = ""


ReconcileResult = Union[CommittedCart, ReconcileFailure]


class CartReconciler:
    """
    Applies add / remove / set-amount to a cart snapshot.

    Usage:
        reconciler = CartReconciler(catalog)
        result = await reconciler.add_one(cart, product_id)
        if isinstance(result, CommittedCart):
            cart = result.cart
    """

    def __init__(self, catalog: CatalogService):
        self.catalog = catalog

    async def _fetch_stock(self, product_id: int) -> StockRecord:
        stock = await self.catalog.get_stock(product_id)
        if not isinstance(stock, StockRecord) or stock.id != product_id:
            raise CatalogFetchError(f"Malformed stock record for product {product_id}", product_id)
        return stock

    async def _fetch_product(self, product_id: int) -> CatalogProduct:
        product = await self.catalog.get_product(product_id)
        if not isinstance(product, CatalogProduct) or product.id != product_id:
            raise CatalogFetchError(f"Malformed catalog entry for product {product_id}", product_id)
        return product

    def _fail(
        self,
        kind: FailureKind,
        operation: CartOperation,
        product_id: int,
        detail: str = "",
    ) -> ReconcileFailure:
        logger.debug(
            f"Cart {operation.value} rejected for product {sanitize_id_for_logging(product_id)}: {kind.value}"
        )
        return ReconcileFailure(kind=kind, operation=operation, product_id=product_id, detail=detail)

    async def add_one(self, cart: Cart, product_id: int) -> ReconcileResult:
        """
        Add one unit of a product.

        Increments the existing line when the product is already in the
        cart, otherwise fetches the catalog entry and appends it with
        amount 1. Either way the resulting amount must fit the stock.
        """
        operation = CartOperation.ADD
        try:
            stock = await self._fetch_stock(product_id)

            existing = collection.find(cart, product_id)
            if existing is not None:
                if not can_satisfy(existing.amount + 1, stock):
                    return self._fail(FailureKind.INSUFFICIENT_STOCK, operation, product_id)
                return CommittedCart(collection.upsert_increment(cart, product_id))

            product = await self._fetch_product(product_id)
            if not can_satisfy(1, stock):
                return self._fail(FailureKind.INSUFFICIENT_STOCK, operation, product_id)
            return CommittedCart(collection.upsert_increment(cart, product_id, product))
        except CatalogFetchError as e:
            return self._fail(FailureKind.FETCH_FAILURE, operation, product_id, str(e))
        except Exception as e:
            logger.error(f"Unexpected error adding product {sanitize_id_for_logging(product_id)}", exc_info=True)
            return ReconcileFailure(FailureKind.UNKNOWN_FAILURE, operation, product_id, str(e))

    async def remove_one(self, cart: Cart, product_id: int) -> ReconcileResult:
        """Remove a product line entirely."""
        operation = CartOperation.REMOVE
        try:
            return CommittedCart(collection.remove(cart, product_id))
        except collection.CartItemNotFoundError as e:
            return self._fail(FailureKind.NOT_FOUND, operation, product_id, str(e))
        except Exception as e:
            logger.error(f"Unexpected error removing product {sanitize_id_for_logging(product_id)}", exc_info=True)
            return ReconcileFailure(FailureKind.UNKNOWN_FAILURE, operation, product_id, str(e))

    async def set_amount(self, cart: Cart, product_id: int, amount: int) -> ReconcileResult:
        """
        Overwrite the quantity of a product already in the cart.

        Non-positive amounts are ignored: the cart comes back unchanged
        with `changed=False` and no catalog call is made.
        """
        operation = CartOperation.UPDATE
        if amount <= 0:
            return CommittedCart(cart, changed=False)

        try:
            stock = await self._fetch_stock(product_id)

            if collection.find(cart, product_id) is None:
                return self._fail(FailureKind.NOT_FOUND, operation, product_id)

            if not can_satisfy(amount, stock):
                return self._fail(FailureKind.INSUFFICIENT_STOCK, operation, product_id)

            return CommittedCart(collection.set_amount(cart, product_id, amount))
        except CatalogFetchError as e:
            return self._fail(FailureKind.FETCH_FAILURE, operation, product_id, str(e))
        except collection.CartItemNotFoundError as e:
            return self._fail(FailureKind.NOT_FOUND, operation, product_id, str(e))
        except Exception as e:
            logger.error(f"Unexpected error updating product {sanitize_id_for_logging(product_id)}", exc_info=True)
            return ReconcileFailure(FailureKind.UNKNOWN_FAILURE, operation, product_id, str(e))
