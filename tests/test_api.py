from datetime import timedelta
from decimal import Decimal

from fastapi.testclient import TestClient

from order_dashboard.main import app
from order_dashboard.models import OrderStatus
from order_dashboard.services.orders import (
    InMemoryOrderStore,
    get_order_store,
    seed_orders,
    strict_validator,
)


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["board"] == "/api/board"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "operational"
    assert data["order_store"] == "healthy"
    assert data["orders"] == 6
    assert data["timestamp"].endswith(("Z", "+00:00"))


def test_list_orders(client):
    response = client.get("/api/orders")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 6
    first = data["orders"][0]
    assert first["order_number"] == "#001"
    assert Decimal(str(first["total_amount"])) == Decimal("55.00")
    assert first["total_items"] == 2


def test_list_orders_filtered_by_status(client):
    response = client.get("/api/orders", params=[("status", "ready"), ("status", "pending")])
    assert response.status_code == 200
    assert [o["id"] for o in response.json()["orders"]] == ["1", "2", "5", "6"]


def test_list_orders_rejects_unknown_status(client):
    response = client.get("/api/orders", params={"status": "lost"})
    assert response.status_code == 422


def test_get_order(client):
    response = client.get("/api/orders/4")
    assert response.status_code == 200
    assert response.json()["order_type"] == "pickup"


def test_get_missing_order(client):
    response = client.get("/api/orders/999")
    assert response.status_code == 404


def test_update_status(client):
    response = client.patch("/api/orders/1/status", json={"status": "delivered"})
    assert response.status_code == 200
    assert response.json()["status"] == "delivered"

    assert client.get("/api/orders/1").json()["status"] == "delivered"


def test_update_status_of_missing_order(client):
    before = client.get("/api/orders").json()

    response = client.patch("/api/orders/999/status", json={"status": "ready"})

    assert response.status_code == 404
    assert client.get("/api/orders").json() == before


def test_update_status_rejects_unknown_status(client):
    response = client.patch("/api/orders/1/status", json={"status": "eaten"})
    assert response.status_code == 422


def test_strict_transitions_conflict():
    strict_store = InMemoryOrderStore(
        seed_orders(), min_latency=0, max_latency=0, transitions=strict_validator()
    )
    app.dependency_overrides[get_order_store] = lambda: strict_store
    try:
        with TestClient(app) as client:
            response = client.patch("/api/orders/5/status", json={"status": "pending"})
            assert response.status_code == 409
            assert client.get("/api/orders/5").json()["status"] == "ready"
    finally:
        app.dependency_overrides.clear()


def test_board(client):
    response = client.get("/api/board")
    assert response.status_code == 200
    columns = response.json()["columns"]

    assert [c["title"] for c in columns] == ["Pending", "In Production", "Ready"]
    assert [c["color"] for c in columns] == ["#f59e0b", "#3b82f6", "#10b981"]
    assert [o["order_number"] for o in columns[0]["orders"]] == ["#001", "#002"]
    assert columns[0]["statuses"] == ["pending"]
    assert all("elapsed" in o for c in columns for o in c["orders"])


def test_board_ages_orders_against_generated_at(client, monkeypatch, now):
    monkeypatch.setattr("order_dashboard.main.utcnow", lambda: now + timedelta(minutes=30))

    data = client.get("/api/board").json()

    pending = data["columns"][0]["orders"]
    assert [o["elapsed"] for o in pending] == ["30 min ago", "35 min ago"]
    assert data["generated_at"].startswith("2024-05-01T12:30:00")


def test_board_hides_statuses_without_column(client):
    client.patch("/api/orders/6/status", json={"status": "out_for_delivery"})

    columns = client.get("/api/board").json()["columns"]

    shown = [o["id"] for c in columns for o in c["orders"]]
    assert "6" not in shown
    assert len(shown) == 5


def test_advance_order(client):
    response = client.post("/api/board/orders/1/advance", json={"column": "Pending"})

    assert response.status_code == 200
    data = response.json()
    assert data["moved"] is True
    assert data["new_status"] == OrderStatus.IN_PRODUCTION.value
    columns = {c["title"]: [o["id"] for o in c["orders"]] for c in data["board"]["columns"]}
    assert columns["Pending"] == ["2"]
    assert columns["In Production"] == ["1", "3", "4"]


def test_advance_from_last_column(client):
    response = client.post("/api/board/orders/5/advance", json={"column": "Ready"})

    assert response.status_code == 200
    data = response.json()
    assert data["moved"] is False
    assert data["new_status"] is None
    assert client.get("/api/orders/5").json()["status"] == "ready"


def test_advance_unknown_column(client):
    response = client.post("/api/board/orders/1/advance", json={"column": "Kitchen"})
    assert response.status_code == 400


def test_advance_unknown_order(client):
    response = client.post("/api/board/orders/999/advance", json={"column": "Pending"})
    assert response.status_code == 404
