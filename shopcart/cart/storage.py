"""Durable cart storage backends."""
import json
from typing import Optional

from shopcart.db import get_redis, RedisKeys, TTL
from shopcart.logging import get_logger
from .models import Cart
from .ports import DurableStore

logger = get_logger(__name__)


class RedisCartStore(DurableStore):
    """
    Persists the cart snapshot in Redis as a JSON array.

    The key is owned exclusively by this store. A corrupted payload is
    logged, deleted and reported as "nothing saved".
    """

    def __init__(self, redis=None, key: str = RedisKeys.CART, ttl: Optional[int] = TTL.CART):
        self._redis = redis  # Lazy initialization when None
        self.key = key
        self.ttl = ttl

    @property
    def redis(self):
        """Get Redis client (lazy initialization)."""
        if self._redis is None:
            try:
                self._redis = get_redis()
            except ValueError as e:
                raise ValueError(f"Redis not available: {e}. Check UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN environment variables.")
        return self._redis

    async def load(self) -> Optional[Cart]:
        """Get the persisted cart from Redis."""
        data = await self.redis.get(self.key)
        if not data:
            return None

        try:
            return Cart.from_list(json.loads(data))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Corrupted cart data under {self.key}: {e}")
            await self.redis.delete(self.key)
            return None

    async def save(self, cart: Cart) -> None:
        """Save cart to Redis with TTL."""
        payload = json.dumps(cart.to_list())
        if self.ttl:
            await self.redis.set(self.key, payload, ex=self.ttl)
        else:
            await self.redis.set(self.key, payload)

    async def clear(self) -> None:
        await self.redis.delete(self.key)


class MemoryCartStore(DurableStore):
    """Process-local store; keeps the serialized form so loads return fresh objects."""

    def __init__(self, initial: Optional[Cart] = None):
        self._payload: Optional[str] = json.dumps(initial.to_list()) if initial is not None else None

    async def load(self) -> Optional[Cart]:
        if self._payload is None:
            return None
        return Cart.from_list(json.loads(self._payload))

    async def save(self, cart: Cart) -> None:
        self._payload = json.dumps(cart.to_list())
