# app/services/product_client.py
from typing import AsyncIterator, List

import httpx
from pydantic import TypeAdapter

from app.domain.errors import SourceUnavailable
from app.domain.schemas import Product
from app.utils.retry import http_retry
from app.utils.settings import PRODUCT_SERVICE_URL, PRODUCT_CLIENT_TIMEOUT
from app.utils.logging import get_logger

logger = get_logger(__name__)

_catalog = TypeAdapter(List[Product])


class ProductClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = PRODUCT_CLIENT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or PRODUCT_SERVICE_URL).rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def list_products(self) -> AsyncIterator[Product]:
        try:
            payload = await self._fetch_catalog()
            products = _catalog.validate_python(payload)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Product service unavailable: {e}")
            raise SourceUnavailable(f"Product service unavailable: {e}") from e

        for product in products:
            yield product

    @http_retry()
    async def _fetch_catalog(self) -> list:
        url = f"{self.base_url}/products"
        logger.info(f"ProductClient GET {url}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            return resp.json()
