"""
Catalog API client.

Fetches product and stock records over HTTP:
    GET {base_url}/stock/{product_id}     -> {"id": 1, "amount": 3}
    GET {base_url}/products/{product_id}  -> {"id": 1, "title": ..., "price": ..., "image": ...}

Transient transport errors are retried here; the cart core never retries.
Every failure reaches the caller as CatalogFetchError.
"""
import os
from typing import Optional

import httpx
from pydantic import BaseModel, ValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from shopcart.cart.ports import CatalogFetchError, CatalogService
from shopcart.logging import get_logger, sanitize_id_for_logging
from shopcart.models import CatalogProduct, StockRecord

logger = get_logger(__name__)

CATALOG_API_URL = os.environ.get("CATALOG_API_URL", "http://localhost:3333")


class HttpCatalogService(CatalogService):
    """CatalogService backed by a JSON HTTP API."""

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.AsyncClient] = None):
        self.base_url = (base_url or CATALOG_API_URL).rstrip("/")
        self._http_client = client
        self._owns_client = client is None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Lazily create a shared httpx client with timeouts."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(10.0, connect=5.0, read=10.0, write=10.0),
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            )
        return self._http_client

    async def aclose(self) -> None:
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _get_json(self, path: str):
        client = await self._get_http_client()
        response = await client.get(f"{self.base_url}{path}")
        response.raise_for_status()
        return response.json()

    async def _fetch(self, path: str, model: type[BaseModel], product_id: int):
        try:
            data = await self._get_json(path)
            return model.model_validate(data)
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Catalog returned {e.response.status_code} for {path.split('/')[1]} "
                f"{sanitize_id_for_logging(product_id)}"
            )
            raise CatalogFetchError(f"Catalog request failed: {e.response.status_code}", product_id) from e
        except httpx.RequestError as e:
            logger.warning(f"Catalog unreachable: {type(e).__name__}")
            raise CatalogFetchError(f"Catalog unreachable: {e}", product_id) from e
        except (ValidationError, ValueError) as e:
            logger.warning(f"Malformed catalog payload for product {sanitize_id_for_logging(product_id)}")
            raise CatalogFetchError(f"Malformed catalog payload: {e}", product_id) from e

    async def get_stock(self, product_id: int) -> StockRecord:
        return await self._fetch(f"/stock/{product_id}", StockRecord, product_id)

    async def get_product(self, product_id: int) -> CatalogProduct:
        return await self._fetch(f"/products/{product_id}", CatalogProduct, product_id)
