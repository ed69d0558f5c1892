"""Pytest fixtures: a fresh in-memory store and app per test."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.data.database import Store
from storefront.data.models.product import ProductModel
from storefront.main import create_app
from storefront.repos.product_repo import ProductRepo


def make_product(db, title="Backpack", price="109.95", category="men's clothing"):
    return ProductRepo(db).create_product(
        ProductModel(
            title=title,
            price=Decimal(price),
            description=f"{title} description",
            category=category,
            image=f"https://example.com/{title.lower()}.jpg",
            rating={"rate": 3.9, "count": 120},
        )
    )


@pytest.fixture
def store():
    s = Store("sqlite://")
    yield s
    s.dispose()


@pytest.fixture
def db(store):
    session = store.session()
    yield session
    session.close()


@pytest.fixture
def products(db):
    return [
        make_product(db, "Backpack", "109.95", "men's clothing"),
        make_product(db, "Ring", "9.99", "jewelery"),
        make_product(db, "Monitor", "999.99", "electronics"),
        make_product(db, "Jacket", "55.99", "men's clothing"),
    ]


@pytest.fixture
def client(store):
    app = create_app(store=store, load_catalog=False)
    with TestClient(app) as c:
        yield c
