"""
Pytest configuration and fixtures.

The HTTP tests run against an in-memory stand-in for `products.repository`,
so no PostgreSQL server is needed.
"""

from datetime import datetime, timezone

import pytest


class InMemoryProducts:
    """Mirror of the repository functions backed by a dict."""

    def __init__(self):
        self.rows = {}
        self.next_id = 1
        self.calls = []

    async def list_products(self):
        self.calls.append(("list",))
        return [dict(row) for row in self.rows.values()]

    async def get_product(self, product_id):
        self.calls.append(("get", product_id))
        row = self.rows.get(product_id)
        return dict(row) if row is not None else None

    async def insert_product(self, *, name, brand, category, price, description, created_at):
        self.calls.append(("insert", name))
        product_id = self.next_id
        self.next_id += 1
        self.rows[product_id] = {
            "id": product_id,
            "name": name,
            "brand": brand,
            "category": category,
            "price": price,
            "description": description,
            "created_at": created_at,
        }
        return product_id

    async def update_product(self, product_id, *, name, brand, category, price, description):
        self.calls.append(("update", product_id))
        row = self.rows.get(product_id)
        if row is None:
            return False
        row.update(name=name, brand=brand, category=category, price=price, description=description)
        return True

    async def delete_product(self, product_id):
        self.calls.append(("delete", product_id))
        return self.rows.pop(product_id, None) is not None

    def mutations(self):
        return [call for call in self.calls if call[0] in ("insert", "update", "delete")]


class BrokenProducts:
    """Repository whose every call fails like an unreachable database."""

    def __init__(self, message="connection refused"):
        self.message = message

    def _fail(self):
        from core import db

        raise db.DatabaseError(self.message)

    async def list_products(self):
        self._fail()

    async def get_product(self, product_id):
        self._fail()

    async def insert_product(self, **fields):
        self._fail()

    async def update_product(self, product_id, **fields):
        self._fail()

    async def delete_product(self, product_id):
        self._fail()


def _install_repository(monkeypatch, fake):
    from products import repository

    for name in ("list_products", "get_product", "insert_product", "update_product", "delete_product"):
        monkeypatch.setattr(repository, name, getattr(fake, name))


def _make_client(monkeypatch):
    from fastapi.testclient import TestClient

    from core import db
    from main import app

    async def _noop():
        return None

    monkeypatch.setattr(db, "init_pool", _noop)
    monkeypatch.setattr(db, "close_pool", _noop)
    return TestClient(app)


@pytest.fixture
def store(monkeypatch):
    fake = InMemoryProducts()
    _install_repository(monkeypatch, fake)
    return fake


@pytest.fixture
def client(monkeypatch, store):
    with _make_client(monkeypatch) as test_client:
        yield test_client


@pytest.fixture
def broken_client(monkeypatch):
    _install_repository(monkeypatch, BrokenProducts())
    with _make_client(monkeypatch) as test_client:
        yield test_client


@pytest.fixture
def sample_product():
    return {
        "name": "Mug",
        "brand": "Acme",
        "category": "Kitchen",
        "price": 9.99,
        "description": "Ceramic mug",
    }


@pytest.fixture
def seeded(store):
    """Two products already in the store."""
    created = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
    store.rows[1] = {
        "id": 1,
        "name": "Kettle",
        "brand": "Acme",
        "category": "Kitchen",
        "price": 24.5,
        "description": "Electric kettle",
        "created_at": created,
    }
    store.rows[2] = {
        "id": 2,
        "name": "Lamp",
        "brand": "Lumen",
        "category": "Lighting",
        "price": 39.0,
        "description": "Desk lamp",
        "created_at": created,
    }
    store.next_id = 3
    return store
