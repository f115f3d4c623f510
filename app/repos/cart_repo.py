# app/repos/cart_repo.py
from datetime import datetime
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.data.models.cart import CartModel
from app.domain.errors import StoreUnavailable
from app.domain.schemas import Cart
from app.utils.logging import get_logger

logger = get_logger(__name__)


def to_cart(row: CartModel) -> Cart:
    return Cart.model_validate(
        {"id": row.id, "products": row.products, "created_at": row.created_at}
    )


def to_row(cart: Cart) -> CartModel:
    return CartModel(
        id=cart.id,
        products=[p.model_dump(mode="json") for p in cart.products],
        created_at=cart.created_at,
    )


class CartRepo:
    """CartStore backed by SQLAlchemy. Each call runs in its own session."""

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def find_by_id(self, cart_id: UUID) -> Cart | None:
        try:
            async with self.session_factory() as db:
                row = await db.get(CartModel, cart_id)
                return to_cart(row) if row else None
        except SQLAlchemyError as e:
            logger.error(f"Failed to load cart {cart_id}: {e}")
            raise StoreUnavailable(str(e)) from e

    async def save(self, cart: Cart) -> Cart:
        # upsert by id
        try:
            async with self.session_factory() as db:
                row = await db.merge(to_row(cart))
                await db.commit()
                return to_cart(row)
        except SQLAlchemyError as e:
            logger.error(f"Failed to save cart {cart.id}: {e}")
            raise StoreUnavailable(str(e)) from e

    async def delete_by_id(self, cart_id: UUID) -> None:
        try:
            async with self.session_factory() as db:
                await db.execute(delete(CartModel).where(CartModel.id == cart_id))
                await db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete cart {cart_id}: {e}")
            raise StoreUnavailable(str(e)) from e

    async def delete_created_before(self, timestamp: datetime) -> None:
        try:
            async with self.session_factory() as db:
                result = await db.execute(
                    delete(CartModel).where(CartModel.created_at < timestamp)
                )
                await db.commit()
                logger.info(f"Removed {result.rowcount} carts created before {timestamp}")
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete carts created before {timestamp}: {e}")
            raise StoreUnavailable(str(e)) from e

