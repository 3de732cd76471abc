"""Shared fixtures.

Each service gets its own in-memory SQLite database. The transaction
service talks to a ``TestClient`` of the real product application, so the
stock-adjustment protocol runs end to end inside the test process.
"""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from product_service import db as product_db
from product_service.api.deps import get_image_storage
from product_service.main import app as product_app
from product_service.services.image_storage import ImageStorage
from transaction_service import db as transaction_db
from transaction_service.api.deps import get_product_client
from transaction_service.main import app as transaction_app
from transaction_service.services.product_client import ProductServiceClient


def _memory_database(create_tables):
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    return engine, sessionmaker(autocommit=False, autoflush=False, bind=engine)


def _override_get_db(session_factory):
    def override():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    return override


# ---------------------------------------------------------------------------
# Product service
# ---------------------------------------------------------------------------


@pytest.fixture()
def product_sessions():
    engine, session_factory = _memory_database(product_db.create_tables)
    yield session_factory
    engine.dispose()


@pytest.fixture()
def image_root(tmp_path):
    return tmp_path / "wwwroot"


@pytest.fixture()
def product_api(product_sessions, image_root):
    """TestClient for the product service."""
    product_app.dependency_overrides[product_db.get_db] = _override_get_db(product_sessions)
    product_app.dependency_overrides[get_image_storage] = lambda: ImageStorage(image_root)
    yield TestClient(product_app)
    product_app.dependency_overrides.clear()


@pytest.fixture()
def category(product_api):
    response = product_api.post("/api/categories", json={"name": "Tools", "description": "Hand tools"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture()
def make_product(product_api, category):
    def make(**overrides):
        payload = {
            "name": "Widget",
            "price": 10.00,
            "stock": 5,
            "categoryId": category["categoryId"],
        }
        payload.update(overrides)
        response = product_api.post("/api/products", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return make


@pytest.fixture()
def widget(make_product):
    """Product{name: Widget, price: 10.00, stock: 5}."""
    return make_product()


# ---------------------------------------------------------------------------
# Transaction service
# ---------------------------------------------------------------------------


@pytest.fixture()
def transaction_sessions():
    engine, session_factory = _memory_database(transaction_db.create_tables)
    db = session_factory()
    try:
        transaction_db.seed_transaction_types(db)
    finally:
        db.close()
    yield session_factory
    engine.dispose()


@pytest.fixture()
def use_products():
    """Point the transaction service at a given ``ProductServiceClient``."""

    def use(client: ProductServiceClient):
        transaction_app.dependency_overrides[get_product_client] = lambda: client
        return client

    return use


@pytest.fixture()
def transaction_api(transaction_sessions, product_api, use_products):
    """TestClient for the transaction service wired to the product service."""
    transaction_app.dependency_overrides[transaction_db.get_db] = _override_get_db(transaction_sessions)
    use_products(ProductServiceClient("http://testserver", http=product_api))
    yield TestClient(transaction_app)
    transaction_app.dependency_overrides.clear()


def mock_products(handler) -> ProductServiceClient:
    """``ProductServiceClient`` backed by an ``httpx.MockTransport`` handler."""
    return ProductServiceClient(
        "http://products.test",
        http=httpx.Client(transport=httpx.MockTransport(handler)),
    )


@pytest.fixture()
def offline_products():
    def handler(request):
        raise httpx.ConnectError("Connection refused", request=request)

    return mock_products(handler)
