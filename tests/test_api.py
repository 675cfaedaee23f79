"""
Tests for the HTTP API in `api/main.py`.

Every store is replaced with its in-memory double through
`app.dependency_overrides`; notifications go to a recording sink.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from api.dependencies import (
    get_event_store,
    get_notification_sink,
    get_payment_store,
    get_price_rule_store,
    get_product_store,
    get_sale_store,
)
from api.main import app
from domain.product import PriceRule
from fakes import (
    CANDLES_PRODUCT,
    CERAMICS_PRODUCT,
    TOTEM_PRODUCT,
    InMemoryPriceRuleStore,
    InMemoryProductStore,
    make_sale,
)

CANDLE_RULES = [
    PriceRule(1, CANDLES_PRODUCT.product_id, Decimal("19"), 1, 1, date(2020, 1, 1)),
    PriceRule(2, CANDLES_PRODUCT.product_id, Decimal("38"), 2, 3, date(2020, 1, 1)),
]


@pytest.fixture
def client(sale_store, payment_store, event_store, sink):
    overrides = {
        get_sale_store: lambda: sale_store,
        get_payment_store: lambda: payment_store,
        get_event_store: lambda: event_store,
        get_price_rule_store: lambda: InMemoryPriceRuleStore(CANDLE_RULES),
        get_product_store: lambda: InMemoryProductStore(
            [TOTEM_PRODUCT, CERAMICS_PRODUCT, CANDLES_PRODUCT], CANDLE_RULES
        ),
        get_notification_sink: lambda: sink,
    }
    app.dependency_overrides.update(overrides)
    yield TestClient(app)
    app.dependency_overrides.clear()


def _create_event(client, name="Summer Fair", start="2025-06-01", end="2025-06-03") -> dict:
    response = client.post("/api/v1/events", json={"name": name, "start_date": start, "end_date": end})
    assert response.status_code == 201
    return response.json()


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


# ============================================================================
# Events
# ============================================================================

def test_create_event_returns_days(client) -> None:
    event = _create_event(client)

    assert [d["date"] for d in event["days"]] == ["2025-06-01", "2025-06-02", "2025-06-03"]

    listed = client.get("/api/v1/events").json()
    assert [e["name"] for e in listed] == ["Summer Fair"]


def test_create_duplicate_event_is_bad_request(client) -> None:
    _create_event(client)

    response = client.post(
        "/api/v1/events",
        json={"name": "summer fair", "start_date": "2025-06-01", "end_date": "2025-06-03"},
    )

    assert response.status_code == 400
    assert "already exists" in response.json()["detail"]


def test_event_day_and_petty_cash(client) -> None:
    day_id = _create_event(client)["days"][0]["event_day_id"]

    response = client.put(f"/api/v1/event-days/{day_id}/petty-cash", json={"amount": "150.00"})
    assert response.status_code == 200
    assert Decimal(response.json()["starting_petty_cash"]) == Decimal("150")

    day = client.get(f"/api/v1/event-days/{day_id}").json()
    assert Decimal(day["starting_petty_cash"]) == Decimal("150")

    assert client.get("/api/v1/event-days/999").status_code == 404
    assert client.put("/api/v1/event-days/999/petty-cash", json={"amount": "1"}).status_code == 404


def test_event_summary(client, sale_store) -> None:
    event = _create_event(client)
    day_id = event["days"][0]["event_day_id"]
    sale_store.add(make_sale(1, TOTEM_PRODUCT, "70", quantity_units=2, event_day_id=day_id))
    client.put(f"/api/v1/event-days/{day_id}/payments/cash", json={"amount": "70"})

    response = client.get(f"/api/v1/events/{event['event_id']}/summary")

    assert response.status_code == 200
    body = response.json()
    assert body["totem_count"] == 2
    assert Decimal(body["total_revenue"]) == Decimal("70")
    assert Decimal(body["payments_by_method"]["CASH"]) == Decimal("70")
    assert Decimal(body["payments_by_method"]["CARD"]) == Decimal("0")
    assert Decimal(body["difference"]) == Decimal("0")

    assert client.get("/api/v1/events/999/summary").status_code == 404


# ============================================================================
# Products
# ============================================================================

def test_products_and_units(client) -> None:
    products = client.get("/api/v1/products").json()
    assert [p["brand"] for p in products] == ["CANDLES", "CERAMICS", "TOTEM"]
    assert products[0]["brand_label"] == "Гора"

    rules = client.get(f"/api/v1/products/{CANDLES_PRODUCT.product_id}/price-rules").json()
    assert [r["sort_order"] for r in rules] == [1, 3]

    units = client.get(
        f"/api/v1/products/{CANDLES_PRODUCT.product_id}/units",
        params={"price": "38", "on_date": "2025-06-01"},
    ).json()
    assert units == {"units": 2, "price_rule_id": 2}


# ============================================================================
# Sales
# ============================================================================

def test_create_sale_resolves_units_from_price_rules(client, sink) -> None:
    """Verify an omitted quantity is taken from the matching price tier."""

    day_id = _create_event(client)["days"][0]["event_day_id"]

    response = client.post(
        f"/api/v1/event-days/{day_id}/sales",
        json={"product_id": CANDLES_PRODUCT.product_id, "unit_price": "38.00"},
    )

    assert response.status_code == 201
    sale = response.json()
    assert sale["quantity_units"] == 2
    assert sale["price_rule_id"] == 2
    assert sale["product"]["brand"] == "CANDLES"
    assert sink.published == [
        (f"day-{day_id}", {"event": "SaleCreated", "event_day_id": day_id, "sale_id": sale["sale_id"]})
    ]


def test_create_sale_with_unknown_day_needs_explicit_quantity(client) -> None:
    response = client.post(
        "/api/v1/event-days/999/sales",
        json={"product_id": CANDLES_PRODUCT.product_id, "unit_price": "38.00"},
    )

    assert response.status_code == 404


def test_create_sale_with_invalid_price_is_bad_request(client, sink) -> None:
    response = client.post(
        "/api/v1/event-days/1/sales",
        json={"product_id": TOTEM_PRODUCT.product_id, "unit_price": "0", "quantity_units": 1},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Unit price must be greater than zero"
    assert sink.published == []


def test_sale_update_delete_cycle(client, sale_store, sink) -> None:
    sale_store.add(make_sale(10, TOTEM_PRODUCT, "40", event_day_id=4))

    updated = client.put(
        "/api/v1/sales/10",
        json={"unit_price": "80", "quantity_units": 2, "discount_value": "10"},
    )
    assert updated.status_code == 200
    assert Decimal(updated.json()["net_amount"]) == Decimal("70")

    assert client.get("/api/v1/sales/10").status_code == 200
    assert client.delete("/api/v1/sales/10").status_code == 204
    assert client.get("/api/v1/sales/10").status_code == 404
    assert [topic for topic, _ in sink.published] == ["day-4", "day-4"]


def test_unknown_sale_update_and_delete_are_not_found(client, sink) -> None:
    assert client.put("/api/v1/sales/404", json={"unit_price": "10", "quantity_units": 1}).status_code == 404
    assert client.delete("/api/v1/sales/404").status_code == 404
    assert sink.published == []


def test_brand_summary_endpoint(client, sale_store) -> None:
    sale_store.add(make_sale(1, TOTEM_PRODUCT, "40", event_day_id=1))
    sale_store.add(make_sale(2, TOTEM_PRODUCT, "70", quantity_units=2, discount="10", event_day_id=1))

    body = client.get("/api/v1/event-days/1/sales/summary").json()

    assert len(body) == 1
    assert body[0]["brand"] == "TOTEM"
    assert Decimal(body[0]["net_total"]) == Decimal("100")
    assert [s["sale_id"] for s in body[0]["sales"]] == [2, 1]


# ============================================================================
# Payments
# ============================================================================

def test_save_payment_overwrites(client) -> None:
    client.put("/api/v1/event-days/1/payments/cash", json={"amount": "20"})
    response = client.put("/api/v1/event-days/1/payments/CASH", json={"amount": "35"})

    assert response.status_code == 200
    assert response.json()["method_label"] == "Кеш"

    payments = client.get("/api/v1/event-days/1/payments").json()
    assert len(payments) == 1
    assert Decimal(payments[0]["amount"]) == Decimal("35")


def test_save_payment_unknown_method(client) -> None:
    response = client.put("/api/v1/event-days/1/payments/cheque", json={"amount": "35"})

    assert response.status_code == 400


def test_delete_payment_is_idempotent(client) -> None:
    payment = client.put("/api/v1/event-days/1/payments/card", json={"amount": "40"}).json()

    assert client.delete(f"/api/v1/payments/{payment['payment_id']}").status_code == 204
    assert client.delete(f"/api/v1/payments/{payment['payment_id']}").status_code == 204
    assert client.get("/api/v1/event-days/1/payments").json() == []


def test_payment_summary_endpoint(client, sale_store) -> None:
    sale_store.add(make_sale(1, CANDLES_PRODUCT, "57", quantity_units=3))
    sale_store.add(make_sale(2, CANDLES_PRODUCT, "38", quantity_units=2, discount="3"))
    client.put("/api/v1/event-days/1/payments/cash", json={"amount": "60"})
    client.put("/api/v1/event-days/1/payments/card", json={"amount": "40"})

    body = client.get("/api/v1/event-days/1/payments/summary").json()

    assert Decimal(body["total_payments"]) == Decimal("100")
    assert Decimal(body["total_sales"]) == Decimal("92")
    assert Decimal(body["difference"]) == Decimal("8")
    assert set(body["payments"]) == {"CASH", "CARD"}
