# app/api/__init__.py
from fastapi import FastAPI

from app.api.errors import register_error_handlers
from app.api.routers import carts
from app.api.routers.health import router as health_router
from app.services.cart_service import CartService


def create_app(cart_service: CartService, lifespan=None) -> FastAPI:
    app = FastAPI(title="Cart Service", version="1.0.0", lifespan=lifespan)
    app.state.cart_service = cart_service

    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(carts.router)
    return app
