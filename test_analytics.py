"""
Storefront events and the four-bucket analytics summary
"""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from app.constants.analytics import build_summary, resolve_range
from app.db.crud import event as event_crud
from app.db.models import Event


def post_events(client, shop_id, event_type, count, product_id=None):
    for _ in range(count):
        body = {"shop_id": shop_id, "type": event_type}
        if product_id:
            body["product_id"] = product_id
        response = client.post("/api/event", json=body)
        assert response.status_code == 200
        assert response.json() == {"ok": True}


def test_summary_counts_last_seven_days(client, shops):
    post_events(client, "shop-a", "shop_view", 3)
    post_events(client, "shop-a", "whatsapp", 2)
    post_events(client, "shop-b", "shop_view", 4)

    response = client.get("/api/analytics", params={"shop": "shop-a", "range": "7"})
    assert response.status_code == 200
    assert response.json() == {"visitors": 3, "product_views": 0, "whatsapp": 2, "ar_views": 0}


def test_range_controls_lookback(client, db, shops):
    post_events(client, "shop-a", "product_view", 1, product_id="p-1")
    db.add(Event(shop_id="shop-a", type="ar_view", created_at=datetime.utcnow() - timedelta(days=10)))
    db.add(Event(shop_id="shop-a", type="ar_view", created_at=datetime.utcnow() - timedelta(days=100)))
    db.commit()

    def summary(range_value=None):
        params = {"shop": "shop-a"}
        if range_value is not None:
            params["range"] = range_value
        return client.get("/api/analytics", params=params).json()

    assert summary()["ar_views"] == 0
    assert summary("7")["ar_views"] == 0
    assert summary("15")["ar_views"] == 1
    assert summary("30")["ar_views"] == 1
    assert summary("365")["ar_views"] == 2
    # unsupported ranges fall back to 7 days
    assert summary("90")["ar_views"] == 0
    assert summary("90")["product_views"] == 1


def test_unknown_event_types_are_stored_but_not_bucketed(client, db, shops):
    post_events(client, "shop-a", "share", 2)
    assert db.query(Event).filter(Event.type == "share").count() == 2
    assert client.get("/api/analytics", params={"shop": "shop-a"}).json() == {
        "visitors": 0, "product_views": 0, "whatsapp": 0, "ar_views": 0,
    }


@pytest.mark.parametrize("body, message", [
    ({"type": "shop_view"}, "shop_id required"),
    ({"shop_id": "shop-a"}, "type required"),
    ({"shop_id": "shop-a", "type": ""}, "type required"),
])
def test_event_validation(client, shops, body, message):
    response = client.post("/api/event", json=body)
    assert response.status_code == 400
    assert response.json() == {"detail": message}


def test_event_for_unknown_shop(client, shops):
    response = client.post("/api/event", json={"shop_id": "nope", "type": "shop_view"})
    assert response.status_code == 400


def test_analytics_requires_shop(client):
    response = client.get("/api/analytics")
    assert response.status_code == 400
    assert response.json() == {"detail": "shop required"}


def test_bucket_listing(client):
    buckets = client.get("/api/analytics/buckets").json()
    assert {field: config["type"] for field, config in buckets.items()} == {
        "visitors": "shop_view",
        "product_views": "product_view",
        "whatsapp": "whatsapp",
        "ar_views": "ar_view",
    }


def test_resolve_range():
    assert resolve_range(None) == 7
    assert resolve_range("15") == 15
    assert resolve_range("365") == 365
    assert resolve_range("abc") == 7
    assert resolve_range("0") == 7


def test_build_summary_defaults_to_zero():
    assert build_summary({"product_view": 5}) == {
        "visitors": 0, "product_views": 5, "whatsapp": 0, "ar_views": 0,
    }


def test_malformed_json_body(client, shops):
    response = client.post(
        "/api/event",
        content="{bad",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"detail": "invalid JSON body"}


def test_unhandled_error_is_500_with_message(app, shops, monkeypatch):
    def explode(*args, **kwargs):
        raise RuntimeError("db exploded")

    monkeypatch.setattr(event_crud, "create_event", explode)
    client = TestClient(app, raise_server_exceptions=False)
    response = client.post("/api/event", json={"shop_id": "shop-a", "type": "shop_view"})
    assert response.status_code == 500
    assert response.json() == {"detail": "db exploded"}
