# app/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.api import create_app
from app.data.database import SessionLocal, create_tables, engine
from app.repos.cart_repo import CartRepo
from app.services.cart_service import CartService
from app.services.product_client import ProductClient
from app.utils.logging import get_logger

logger = get_logger(__name__)


def build_cart_service() -> CartService:
    return CartService(
        store=CartRepo(SessionLocal),
        product_source=ProductClient(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Initializing database...")
    await create_tables(engine)
    logger.info("Cart service started")
    yield
    await engine.dispose()
    logger.info("Cart service stopped")


app = create_app(build_cart_service(), lifespan=lifespan)

if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
