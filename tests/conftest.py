"""Pytest configuration and fixtures"""
import asyncio
import os
import uuid
from datetime import datetime, timezone
from decimal import Decimal

import pytest

# Set test environment variables before the app modules read them
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PRODUCT_SERVICE_URL", "http://product-service.test")
os.environ.setdefault("CELERY_BROKER_URL", "memory://")
os.environ.setdefault("CELERY_RESULT_BACKEND", "cache+memory://")

from app.domain.schemas import Cart, Manufacturer, Product, Review  # noqa: E402
from app.services.cart_service import CartService  # noqa: E402


def make_product(name: str = "Test product", product_id: uuid.UUID | None = None, **fields) -> Product:
    data = {
        "id": product_id or uuid.uuid4(),
        "name": name,
        "description": "Test description",
        "price": Decimal("10.00"),
        "manufacturer": Manufacturer(
            id=uuid.UUID("11111111-1111-1111-1111-111111111111"),
            name="manufacturer name",
            address="address",
            contact="contact",
        ),
        "categories": ["BABY_PRODUCTS"],
        "reviews": [Review(reviewer_name="Name", comment="Comment", rating=5)],
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
        "updated_at": datetime(2024, 1, 2, tzinfo=timezone.utc),
    }
    data.update(fields)
    return Product(**data)


def make_cart(*products: Product, created_at: datetime | None = None) -> Cart:
    return Cart(
        id=uuid.uuid4(),
        products=list(products),
        created_at=created_at or datetime.now(timezone.utc),
    )


class FakeProductSource:
    """In-memory catalog, optionally failing with the given exception."""

    def __init__(self, products=(), error: Exception | None = None):
        self.products = list(products)
        self.error = error
        self.calls = 0

    async def list_products(self):
        self.calls += 1
        if self.error:
            raise self.error
        for product in self.products:
            await asyncio.sleep(0)
            yield product


class FakeCartStore:
    def __init__(self, *carts: Cart, error: Exception | None = None):
        self.carts = {cart.id: cart for cart in carts}
        self.error = error
        self.saved = []
        self.deleted = []
        self.cutoffs = []

    def _check(self):
        if self.error:
            raise self.error

    async def find_by_id(self, cart_id):
        self._check()
        cart = self.carts.get(cart_id)
        await asyncio.sleep(0)
        return cart

    async def save(self, cart):
        self._check()
        self.saved.append(cart)
        self.carts[cart.id] = cart
        return cart

    async def delete_by_id(self, cart_id):
        self._check()
        self.deleted.append(cart_id)
        self.carts.pop(cart_id, None)

    async def delete_created_before(self, timestamp):
        self._check()
        self.cutoffs.append(timestamp)
        self.carts = {
            cart_id: cart
            for cart_id, cart in self.carts.items()
            if not cart.created_at < timestamp
        }


@pytest.fixture
def product_a():
    return make_product("Product A")


@pytest.fixture
def product_b():
    return make_product("Product B")


@pytest.fixture
def product_c():
    return make_product("Product C")


@pytest.fixture
def catalog(product_a, product_b, product_c):
    return FakeProductSource([product_a, product_b, product_c])


@pytest.fixture
def store():
    return FakeCartStore()


@pytest.fixture
def service(store, catalog):
    return CartService(store=store, product_source=catalog)
