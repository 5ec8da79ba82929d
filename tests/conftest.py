from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from order_dashboard.core.config import get_settings
from order_dashboard.main import app
from order_dashboard.models import Order, OrderItem, OrderStatus, OrderType
from order_dashboard.services.board import BoardProjector, DEFAULT_COLUMNS
from order_dashboard.services.orders import (
    InMemoryOrderStore,
    get_order_store,
    reset_order_store,
    seed_orders,
)

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_order():
    """Factory for orders with sensible defaults."""
    counter = {"n": 0}

    def _make(status=OrderStatus.PENDING, order_id=None, minutes_ago=0, **overrides):
        counter["n"] += 1
        n = counter["n"]
        fields = dict(
            id=order_id or f"o{n}",
            order_number=f"#{n:03d}",
            customer_name=f"Customer {n}",
            customer_phone="555-0100",
            items=[
                OrderItem(
                    id=f"i{n}",
                    product_name="Pizza Margherita",
                    quantity=2,
                    unit_price=Decimal("10.00"),
                    total_price=Decimal("20.00"),
                )
            ],
            total_amount=Decimal("20.00"),
            status=status,
            order_type=OrderType.PICKUP,
            created_at=NOW - timedelta(minutes=minutes_ago),
        )
        fields.update(overrides)
        return Order(**fields)

    return _make


@pytest.fixture
def store():
    """Seeded store with no simulated delay."""
    return InMemoryOrderStore(seed_orders(NOW), min_latency=0, max_latency=0)


@pytest.fixture
def projector():
    return BoardProjector(DEFAULT_COLUMNS)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_order_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def fresh_settings(monkeypatch):
    """Reload settings and the store factory around a test."""
    get_settings.cache_clear()
    reset_order_store()
    yield monkeypatch
    get_settings.cache_clear()
    reset_order_store()
