# app/domain/ports.py
from datetime import datetime
from typing import AsyncIterator, Protocol
from uuid import UUID

from app.domain.schemas import Cart, Product


class ProductSource(Protocol):
    def list_products(self) -> AsyncIterator[Product]:
        """Stream the whole catalog, no filtering."""
        ...


class CartStore(Protocol):
    async def find_by_id(self, cart_id: UUID) -> Cart | None: ...

    async def save(self, cart: Cart) -> Cart: ...

    async def delete_by_id(self, cart_id: UUID) -> None: ...

    async def delete_created_before(self, timestamp: datetime) -> None: ...
