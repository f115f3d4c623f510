# app/tasks/expire.py
import asyncio

from app.celery_worker import celery_app
from app.data.database import make_engine, make_session_factory
from app.domain.errors import CartServiceError
from app.repos.cart_repo import CartRepo
from app.services.cart_service import CartService
from app.services.product_client import ProductClient
from app.utils.logging import get_logger

logger = get_logger(__name__)


async def run_cleanup(service: CartService) -> bool:
    """One sweep. Errors are logged, never raised, so the next tick still runs."""
    try:
        cutoff = await service.delete_old_carts()
    except CartServiceError as e:
        logger.error(f"Error occurred during old carts removal: {e}")
        return False

    logger.info(f"Successfully removed old carts (cutoff {cutoff.isoformat()})")
    return True


async def _cleanup_once() -> bool:
    # a fresh engine per tick, asyncio.run gives every tick its own loop
    engine = make_engine()
    try:
        service = CartService(
            store=CartRepo(make_session_factory(engine)),
            product_source=ProductClient(),
        )
        return await run_cleanup(service)
    finally:
        await engine.dispose()


@celery_app.task(name="app.tasks.expire.delete_old_carts_task")
def delete_old_carts_task():
    logger.info("Delete old carts task started")
    return {"success": asyncio.run(_cleanup_once())}
