"""Cart store: owner of the live cart snapshot."""
import asyncio
import os
from typing import Awaitable, Callable, Optional

from shopcart.logging import get_logger, sanitize_id_for_logging
from .constants import CartOperation, FailureKind
from .messages import failure_message
from .models import Cart
from .ports import CatalogService, DurableStore, Notifier
from .reconciler import CartReconciler, CommittedCart, ReconcileFailure, ReconcileResult

logger = get_logger(__name__)

CART_LANGUAGE = os.environ.get("CART_LANGUAGE", "en")


class CartStore:
    """
    Single source of truth for the live cart.

    Runs every mutation through the reconciler, one at a time, commits
    the resulting snapshot, persists it and reports failures to the
    notifier. Nothing raised during a mutation reaches the caller.

    Usage:
        store = CartStore(catalog, RedisCartStore(), LogNotifier())
        await store.initialize()
        await store.add_product(7)
        store.cart.items
    """

    def __init__(
        self,
        catalog: CatalogService,
        store: DurableStore,
        notifier: Notifier,
        *,
        reconciler: Optional[CartReconciler] = None,
        language: Optional[str] = None,
    ):
        self.store = store
        self.notifier = notifier
        self.reconciler = reconciler or CartReconciler(catalog)
        self.language = language or CART_LANGUAGE
        self._cart = Cart()
        self._initialized = False
        # At most one reconciliation in flight
        self._lock = asyncio.Lock()

    @property
    def cart(self) -> Cart:
        """Current snapshot. Snapshots are immutable, so callers may keep it."""
        return self._cart

    async def _load(self) -> None:
        try:
            persisted = await self.store.load()
        except Exception as e:
            logger.warning(f"Failed to load persisted cart, starting empty: {e}")
            persisted = None
        self._cart = persisted if persisted is not None else Cart()
        self._initialized = True
        logger.info(f"Cart initialized with {len(self._cart)} line(s)")

    async def initialize(self) -> Cart:
        """Hydrate from the durable store once; later calls are no-ops."""
        async with self._lock:
            if not self._initialized:
                await self._load()
        return self._cart

    async def _persist(self, cart: Cart) -> None:
        try:
            await self.store.save(cart)
        except Exception as e:
            logger.warning(f"Failed to persist cart: {e}")

    def _notify(self, failure: ReconcileFailure) -> None:
        message = failure_message(failure.operation, failure.kind, self.language)
        try:
            self.notifier.error(message)
        except Exception as e:
            logger.error(f"Notifier failed: {e}")

    async def _apply(
        self,
        operation: CartOperation,
        product_id: int,
        reconcile: Callable[[Cart], Awaitable[ReconcileResult]],
    ) -> bool:
        async with self._lock:
            if not self._initialized:
                await self._load()

            try:
                result = await reconcile(self._cart)
            except Exception as e:
                logger.error(f"Reconciler raised during {operation.value}", exc_info=True)
                result = ReconcileFailure(FailureKind.UNKNOWN_FAILURE, operation, product_id, str(e))

            if isinstance(result, CommittedCart):
                if result.changed:
                    self._cart = result.cart
                    await self._persist(result.cart)
                return True

            logger.info(
                f"Cart {operation.value} failed for product "
                f"{sanitize_id_for_logging(product_id)}: {result.kind.value}"
            )
            self._notify(result)
            return False

    async def add_product(self, product_id: int) -> bool:
        """Add one unit of `product_id`. Returns True if the cart was committed."""
        return await self._apply(
            CartOperation.ADD,
            product_id,
            lambda cart: self.reconciler.add_one(cart, product_id),
        )

    async def remove_product(self, product_id: int) -> bool:
        """Remove `product_id` from the cart."""
        return await self._apply(
            CartOperation.REMOVE,
            product_id,
            lambda cart: self.reconciler.remove_one(cart, product_id),
        )

    async def update_product_amount(self, product_id: int, amount: int) -> bool:
        """Set the quantity of `product_id`; non-positive amounts are ignored."""
        return await self._apply(
            CartOperation.UPDATE,
            product_id,
            lambda cart: self.reconciler.set_amount(cart, product_id, amount),
        )
