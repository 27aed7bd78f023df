"""
Redis client for cart persistence.

Provides a lazily created async Upstash Redis client plus the key
namespace and TTL constants the cart store relies on.
"""

import os
from typing import Optional

from upstash_redis.asyncio import Redis as AsyncRedis

# Upstash uses REST_URL and REST_TOKEN
UPSTASH_REDIS_REST_URL = os.environ.get("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")

_redis_client: Optional[AsyncRedis] = None


def get_redis() -> AsyncRedis:
    """
    Get async Upstash Redis client (singleton).

    Uses standard Upstash env var names:
    - UPSTASH_REDIS_REST_URL
    - UPSTASH_REDIS_REST_TOKEN

    Raises:
        ValueError: If the credentials are not configured
    """
    global _redis_client

    if _redis_client is None:
        if not UPSTASH_REDIS_REST_URL or not UPSTASH_REDIS_REST_TOKEN:
            raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
        _redis_client = AsyncRedis(url=UPSTASH_REDIS_REST_URL, token=UPSTASH_REDIS_REST_TOKEN)

    return _redis_client


class RedisKeys:
    """Redis keys owned by the cart."""

    # Persisted cart snapshot; no other subsystem writes here
    CART = "@RocketShoes:cart"

    @staticmethod
    def cart_key(namespace: str | None = None) -> str:
        return f"{namespace}:{RedisKeys.CART}" if namespace else RedisKeys.CART


class TTL:
    """Time-to-live constants for Redis keys (seconds)."""

    CART = 30 * 86400  # 30 days
