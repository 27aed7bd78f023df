"""Cart package: snapshot models, reconciliation, storage, and the store facade."""
from .constants import CartOperation, FailureKind
from .models import CartItem, Cart
from .ports import CatalogFetchError, CatalogService, DurableStore, Notifier
from .reconciler import CartReconciler, CommittedCart, ReconcileFailure
from .service import CartStore
from .storage import MemoryCartStore, RedisCartStore

__all__ = [
    "CartOperation",
    "FailureKind",
    "CartItem",
    "Cart",
    "CatalogFetchError",
    "CatalogService",
    "DurableStore",
    "Notifier",
    "CartReconciler",
    "CommittedCart",
    "ReconcileFailure",
    "CartStore",
    "MemoryCartStore",
    "RedisCartStore",
]
