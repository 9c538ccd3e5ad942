from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError

from foodpos.models.sql_models import MenuItem, PaymentMethod
from foodpos.services.repositories import OrderStore


def order_payload(**overrides):
    payload = {
        "customer_id": 1000,
        "lines": [{"item_id": 2000, "quantity": 2, "claimed_subtotal": "21.00"}],
        "payment_type": "TNG",
        "credential_identifier": "TNG001",
        "credential_secret": "tng123",
    }
    payload.update(overrides)
    return payload


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"status": "FoodPOS Online"}


def test_create_order(client, db, customer, food, tng_wallet):
    response = client.post("/orders", json=order_payload())

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "COMPLETED"
    assert Decimal(body["total_price"]) == Decimal("21.00")
    assert body["customer_id"] == 1000
    assert body["payment_type"] == "TNG"
    assert len(body["details"]) == 1
    assert body["details"][0]["item_name"] == "Nasi Lemak"
    assert Decimal(body["details"][0]["subtotal"]) == Decimal("21.00")

    db.expire_all()
    assert db.get(PaymentMethod, tng_wallet.id).balance == Decimal("79.00")
    assert db.get(MenuItem, 2000).stock == 48


def test_price_mismatch_is_conflict(client, customer, food, tng_wallet):
    payload = order_payload(lines=[{"item_id": 2000, "quantity": 2, "claimed_subtotal": "100.00"}])
    response = client.post("/orders", json=payload)

    assert response.status_code == 409
    assert response.json()["error"] == "price_mismatch"


def test_bad_credential_is_payment_required(client, customer, food, tng_wallet):
    response = client.post("/orders", json=order_payload(credential_secret="wrongpass"))

    assert response.status_code == 402
    assert response.json()["error"] == "invalid_credential"


def test_unknown_customer(client, food, tng_wallet):
    response = client.post("/orders", json=order_payload(customer_id=9999))

    assert response.status_code == 404
    assert response.json()["error"] == "customer_not_found"


def test_empty_lines(client, customer):
    response = client.post("/orders", json=order_payload(lines=[]))

    assert response.status_code == 422
    assert response.json()["error"] == "empty_order"


def test_null_line(client, customer, food):
    response = client.post("/orders", json=order_payload(lines=[None]))

    assert response.status_code == 422
    assert response.json()["error"] == "invalid_line"


def test_invalid_quantity(client, customer, food):
    payload = order_payload(lines=[{"item_id": 2000, "quantity": 101, "claimed_subtotal": "1060.50"}])
    response = client.post("/orders", json=payload)

    assert response.status_code == 422
    assert response.json()["error"] == "invalid_quantity"


def test_insufficient_stock(client, db, customer, food, tng_wallet):
    food.stock = 1
    db.commit()

    response = client.post("/orders", json=order_payload())

    assert response.status_code == 409
    body = response.json()
    assert body["error"] == "insufficient_stock"
    assert "Nasi Lemak" in body["detail"]


def test_malformed_body_uses_fastapi_validation(client):
    response = client.post("/orders", json={"lines": []})
    assert response.status_code == 422
    assert "detail" in response.json()


def test_oversized_claimed_subtotal_is_rejected(client, db, customer, food, tng_wallet):
    payload = order_payload(lines=[{"item_id": 2000, "quantity": 2, "claimed_subtotal": "1e30"}])
    response = client.post("/orders", json=payload)

    assert response.status_code == 422
    db.expire_all()
    assert db.get(PaymentMethod, tng_wallet.id).balance == Decimal("100.00")


def test_out_of_range_customer_id_is_rejected(client, customer, food, tng_wallet):
    response = client.post("/orders", json=order_payload(customer_id=2**64))
    assert response.status_code == 422


def test_out_of_range_item_id_is_rejected(client, customer, food, tng_wallet):
    payload = order_payload(lines=[{"item_id": 2**64, "quantity": 2, "claimed_subtotal": "21.00"}])
    response = client.post("/orders", json=payload)
    assert response.status_code == 422


def test_database_failure_is_server_error(client, db, customer, food, tng_wallet, monkeypatch):
    def failing_save(self, order):
        raise SQLAlchemyError("disk full")

    monkeypatch.setattr(OrderStore, "save", failing_save)
    response = client.post("/orders", json=order_payload())

    assert response.status_code == 500
    assert response.json()["error"] == "persistence_failed"
    db.expire_all()
    assert db.get(PaymentMethod, tng_wallet.id).balance == Decimal("100.00")
    assert db.get(MenuItem, 2000).stock == 50


def test_order_report(client, customer, food, cheap_food, tng_wallet):
    client.post("/orders", json=order_payload())
    client.post("/orders", json=order_payload(
        lines=[{"item_id": 2001, "quantity": 3, "claimed_subtotal": "3.00"}]
    ))

    response = client.get("/orders")

    assert response.status_code == 200
    body = response.json()
    assert body["order_count"] == 2
    assert Decimal(body["revenue"]) == Decimal("24.00")
    assert len(body["orders"]) == 2


def test_get_order(client, customer, food, tng_wallet):
    order_id = client.post("/orders", json=order_payload()).json()["id"]

    assert client.get(f"/orders/{order_id}").json()["id"] == order_id
    assert client.get("/orders/424242").status_code == 404
    assert client.get(f"/orders/{2**64}").status_code == 404


def test_customer_orders(client, customer, food, tng_wallet):
    client.post("/orders", json=order_payload())

    response = client.get("/customers/1000/orders")
    assert response.status_code == 200
    assert len(response.json()) == 1

    assert client.get("/customers/9999/orders").status_code == 404
    assert client.get(f"/customers/{2**64}/orders").status_code == 404


def test_menu(client, food, cheap_food):
    response = client.get("/menu")

    assert response.status_code == 200
    names = [item["name"] for item in response.json()]
    assert names == ["Nasi Lemak", "Teh Tarik"]
