"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import datetime

import pytest

from bodega.config import reset_settings
from bodega.core.entities import Product, Sale, SaleItem, Supplier


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Use the cheapest bcrypt cost so hashing stays fast in tests."""
    monkeypatch.setenv("SECURITY_BCRYPT_ROUNDS", "4")
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_product() -> Product:
    """Active product priced in centavos."""
    return Product(
        id=1,
        name="Soda",
        purchase_price=210,
        sale_price=325,
        tax=115,
        stock=2,
    )


@pytest.fixture
def sample_supplier() -> Supplier:
    return Supplier(id=1, name="Distribuidora Lima", ruc=20123456789)


@pytest.fixture
def sample_sale() -> Sale:
    """Two lines: 2 x 10.50 and 1 x 5.00."""
    return Sale(
        id=1,
        date=datetime(2025, 1, 10, 9, 30),
        items=[
            SaleItem(quantity=2, unit_price=1050, product_id=1),
            SaleItem(quantity=1, unit_price=500, product_id=2),
        ],
    )
