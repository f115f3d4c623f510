# app/services/cart_service.py
import asyncio
import uuid
from datetime import datetime, timezone, timedelta
from typing import Iterable, List
from uuid import UUID

from app.domain.errors import CartNotFound, NoProductsFound
from app.domain.ports import CartStore, ProductSource
from app.domain.schemas import Cart, Product
from app.utils.settings import CART_RETENTION_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)


async def resolve_products(source: ProductSource, product_ids: Iterable[UUID]) -> List[Product]:
    """
    Filter the full catalog down to the requested ids.

    Order follows the catalog, unknown ids are ignored and an empty result
    is returned as-is. A failing source propagates unchanged.
    """
    wanted = set(product_ids)
    return [product async for product in source.list_products() if product.id in wanted]


def merge_products(existing: List[Product], added: List[Product]) -> List[Product]:
    # first occurrence wins, so snapshots already in the cart are kept
    seen = set()
    merged = []
    for product in [*existing, *added]:
        if product.id in seen:
            continue
        seen.add(product.id)
        merged.append(product)
    return merged


def drop_products(existing: List[Product], product_ids: Iterable[UUID]) -> List[Product]:
    to_remove = set(product_ids)
    if not to_remove:
        return list(existing)
    return [p for p in existing if p.id not in to_remove]


class CartService:
    """
    Use cases for the shopping cart domain.

    Holds no state of its own, everything lives in the CartStore. There is no
    version check on save: two concurrent edits of the same cart both read the
    old state and the last save wins.
    """

    def __init__(
        self,
        store: CartStore,
        product_source: ProductSource,
        retention: timedelta = timedelta(seconds=CART_RETENTION_SECONDS),
    ):
        self.store = store
        self.product_source = product_source
        self.retention = retention

    #query
    async def get_cart(self, cart_id: UUID) -> Cart:
        return await self._require_cart(cart_id)

    #commands
    async def create_cart(self, product_ids: List[UUID]) -> Cart:
        products = await resolve_products(self.product_source, product_ids)
        if not products:
            raise NoProductsFound(product_ids)

        cart = Cart(
            id=uuid.uuid4(),
            products=products,
            created_at=datetime.now(timezone.utc),
        )
        saved = await self.store.save(cart)

        logger.info(f"Created cart {saved.id} with {len(saved.products)} products")
        return saved

    async def edit_cart(self, cart_id: UUID, product_ids: List[UUID]) -> Cart:
        """Replace the cart contents with the resolved products."""
        cart, products = await self._load_with_products(cart_id, product_ids)

        updated = cart.model_copy(update={"products": products})
        saved = await self.store.save(updated)

        logger.info(f"Replaced products of cart {cart_id}, now {len(saved.products)}")
        return saved

    async def add_products(self, cart_id: UUID, product_ids: List[UUID]) -> Cart:
        cart, products = await self._load_with_products(cart_id, product_ids)

        updated = cart.model_copy(update={"products": merge_products(cart.products, products)})
        saved = await self.store.save(updated)

        logger.info(
            f"Added products to cart {cart_id}: "
            f"{len(cart.products)} -> {len(saved.products)}"
        )
        return saved

    async def remove_products(self, cart_id: UUID, product_ids: List[UUID]) -> Cart:
        cart = await self._require_cart(cart_id)

        # an empty cart after removal is fine, unlike create/edit/add
        updated = cart.model_copy(update={"products": drop_products(cart.products, product_ids)})
        saved = await self.store.save(updated)

        logger.info(
            f"Removed products from cart {cart_id}: "
            f"{len(cart.products)} -> {len(saved.products)}"
        )
        return saved

    async def delete_cart(self, cart_id: UUID) -> None:
        cart = await self._require_cart(cart_id)
        await self.store.delete_by_id(cart.id)
        logger.info(f"Deleted cart {cart_id}")

    async def delete_old_carts(self, now: datetime | None = None) -> datetime:
        """Bulk-delete carts created strictly before now - retention."""
        now = now or datetime.now(timezone.utc)
        cutoff = now - self.retention
        await self.store.delete_created_before(cutoff)
        logger.info(f"Deleted carts created before {cutoff.isoformat()}")
        return cutoff

    async def _require_cart(self, cart_id: UUID) -> Cart:
        cart = await self.store.find_by_id(cart_id)
        if cart is None:
            raise CartNotFound(cart_id)
        return cart

    async def _load_with_products(self, cart_id: UUID, product_ids: List[UUID]):
        # catalog and store lookups do not depend on each other
        products, cart = await asyncio.gather(
            resolve_products(self.product_source, product_ids),
            self.store.find_by_id(cart_id),
        )
        if cart is None:
            raise CartNotFound(cart_id)
        if not products:
            raise NoProductsFound(product_ids)
        return cart, products
