"""
Tests for CartRepo against a SQLite database
"""
import uuid
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine

from app.data.database import create_tables, make_session_factory
from app.domain.errors import StoreUnavailable
from app.repos.cart_repo import CartRepo
from tests.conftest import make_cart, make_product


@pytest_asyncio.fixture
async def repo(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'carts.db'}")
    await create_tables(engine)
    yield CartRepo(make_session_factory(engine))
    await engine.dispose()


class TestCartRepo:

    @pytest.mark.asyncio
    async def test_save_and_find(self, repo):
        cart = make_cart(make_product("a"), make_product("b"))

        saved = await repo.save(cart)
        found = await repo.find_by_id(cart.id)

        assert saved.id == cart.id
        assert found.id == cart.id
        assert found.products == cart.products

    @pytest.mark.asyncio
    async def test_find_missing(self, repo):
        assert await repo.find_by_id(uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_save_overwrites_existing(self, repo):
        first, second = make_product("first"), make_product("second")
        cart = make_cart(first)
        await repo.save(cart)

        await repo.save(cart.model_copy(update={"products": [second]}))
        found = await repo.find_by_id(cart.id)

        assert found.products == [second]

    @pytest.mark.asyncio
    async def test_save_empty_products(self, repo):
        cart = make_cart()
        await repo.save(cart)
        assert (await repo.find_by_id(cart.id)).products == []

    @pytest.mark.asyncio
    async def test_delete_by_id(self, repo):
        kept, removed = make_cart(make_product()), make_cart(make_product())
        await repo.save(kept)
        await repo.save(removed)

        await repo.delete_by_id(removed.id)

        assert await repo.find_by_id(removed.id) is None
        assert await repo.find_by_id(kept.id) is not None

    @pytest.mark.asyncio
    async def test_delete_created_before_is_strict(self, repo):
        cutoff = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
        at_cutoff = make_cart(make_product(), created_at=cutoff)
        just_before = make_cart(make_product(), created_at=cutoff - timedelta(microseconds=1))
        much_older = make_cart(make_product(), created_at=cutoff - timedelta(days=1))
        for cart in (at_cutoff, just_before, much_older):
            await repo.save(cart)

        await repo.delete_created_before(cutoff)

        assert await repo.find_by_id(at_cutoff.id) is not None
        assert await repo.find_by_id(just_before.id) is None
        assert await repo.find_by_id(much_older.id) is None

    @pytest.mark.asyncio
    async def test_database_errors_become_store_unavailable(self, tmp_path):
        # no tables created
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
        repo = CartRepo(make_session_factory(engine))
        try:
            with pytest.raises(StoreUnavailable):
                await repo.find_by_id(uuid.uuid4())
        finally:
            await engine.dispose()
