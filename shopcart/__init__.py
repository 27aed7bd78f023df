"""
shopcart - client-side shopping cart reconciled against remote stock.

This package contains:
- cart: snapshot models, collection ops, reconciler, CartStore
- services: HTTP catalog client, notifiers, money helpers
- db: Upstash Redis client and key namespace
- i18n: failure message translations

Note: Imports are lazy so `import shopcart` stays cheap and does not
require Redis credentials.
"""

__all__ = [
    "CartStore",
    "HttpCatalogService",
    "RedisCartStore",
    "get_redis",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "CartStore":
        from shopcart.cart import CartStore
        return CartStore
    elif name == "RedisCartStore":
        from shopcart.cart import RedisCartStore
        return RedisCartStore
    elif name == "HttpCatalogService":
        from shopcart.services.catalog import HttpCatalogService
        return HttpCatalogService
    elif name == "get_redis":
        from shopcart.db import get_redis
        return get_redis
    raise AttributeError(f"module 'shopcart' has no attribute '{name}'")
