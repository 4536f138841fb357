from decimal import Decimal

from fastapi.testclient import TestClient

from paysplit.api.app import app

client = TestClient(app)

PAYMENT_METHODS = [
    {"id": "PUNKTY", "discount": "15", "limit": "100.00"},
    {"id": "mZysk", "discount": "10", "limit": "180.00"},
    {"id": "BosBankrut", "discount": "5", "limit": "200.00"},
]

ORDERS = [
    {"id": "ORDER1", "value": "100.00", "promotions": ["mZysk"]},
    {"id": "ORDER2", "value": "200.00", "promotions": ["BosBankrut"]},
    {"id": "ORDER3", "value": "150.00", "promotions": ["mZysk", "BosBankrut"]},
    {"id": "ORDER4", "value": "50.00"},
]


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_allocate_in_input_order() -> None:
    response = client.post("/allocate", json={"orders": ORDERS, "payment_methods": PAYMENT_METHODS})

    assert response.status_code == 200
    body = response.json()
    assert [item["order_id"] for item in body["allocations"]] == ["ORDER1", "ORDER2", "ORDER3"]
    assert body["allocations"][0]["uses_points"] is True
    assert Decimal(body["allocations"][0]["discount_value"]) == Decimal("15")
    assert body["allocations"][1]["card_id"] == "BosBankrut"
    assert body["allocations"][2]["card_id"] == "mZysk"
    assert [failure["order_id"] for failure in body["failures"]] == ["ORDER4"]
    assert body["summary"] == ["BosBankrut 200.00", "mZysk 150.00", "PUNKTY 100.00"]
    assert Decimal(body["remaining_limits"]["mZysk"]) == Decimal("30")


def test_allocate_prioritized() -> None:
    response = client.post(
        "/allocate",
        json={"orders": ORDERS, "payment_methods": PAYMENT_METHODS, "prioritize": True},
    )

    assert response.status_code == 200
    body = response.json()
    first = body["allocations"][0]
    assert first["order_id"] == "ORDER3"
    assert first["uses_points"] is True and first["card_id"] == "mZysk"
    assert Decimal(first["points_used"]) == Decimal("100")
    assert Decimal(first["card_charge"]) == Decimal("50")
    assert body["summary"] == ["mZysk 150.00", "BosBankrut 200.00", "PUNKTY 100.00"]


def test_allocate_rejects_bad_wallet() -> None:
    duplicate_cards = [{"id": "c1", "discount": "10", "limit": "1"}, {"id": "c1", "discount": "5", "limit": "1"}]

    response = client.post("/allocate", json={"orders": ORDERS, "payment_methods": duplicate_cards})

    assert response.status_code == 400
    assert "Duplicate card id" in response.json()["detail"]

    response = client.post("/allocate", json={"orders": ORDERS, "payment_methods": []})
    assert response.status_code == 400
