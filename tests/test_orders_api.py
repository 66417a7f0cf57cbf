from shopcms.extensions import mail
from shopcms.models.order import Order


class TestPlaceOrder:
    def test_creates_order_and_sends_confirmation(self, client, order_payload):
        with mail.record_messages() as outbox:
            response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 201
        body = response.get_json()
        assert body["message"] == "Order created successfully"
        assert body["order_number"].startswith("ORD-")
        assert len(body["order_number"]) == 12
        assert body["order"]["status"] == "pending"
        assert body["order"]["payment_status"] == "pending"
        assert body["order"]["discount_amount"] == 0.0
        assert body["order"]["total_amount"] == 1000.0
        assert body["order"]["items"][0]["name"] == "Corner Sofa"
        assert body["order"]["items"][0]["image"] == "products/sofa.jpg"

        assert len(outbox) == 1

    def test_online_payment_with_transaction_is_paid(self, client, order_payload):
        response = client.post("/api/orders", json={
            **order_payload,
            "payment_method": "bkash",
            "transaction_id": "TXN1700000000000ABC123",
        })

        assert response.status_code == 201
        assert response.get_json()["order"]["payment_status"] == "paid"

    def test_online_payment_without_transaction_is_pending(self, client, order_payload):
        response = client.post("/api/orders", json={**order_payload, "payment_method": "card"})
        assert response.get_json()["order"]["payment_status"] == "pending"

    def test_validation_errors(self, client, order_payload):
        response = client.post("/api/orders", json={
            **order_payload,
            "customer_email": "not-an-email",
            "items": [],
        })

        assert response.status_code == 422
        body = response.get_json()
        assert body["errors"]["customer_email"] == "The customer email field must be a valid email address."
        assert "items" in body["errors"]
        assert body["message"] == body["errors"]["customer_email"]
        assert Order.query.count() == 0

    def test_missing_field_is_required(self, client, order_payload):
        order_payload.pop("customer_name")
        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 422
        assert response.get_json()["errors"]["customer_name"] == "The customer name field is required."

    def test_unknown_product(self, client, order_payload):
        order_payload["items"][0]["product_id"] = "does-not-exist"
        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 422
        assert response.get_json()["errors"] == {
            "items.0.product_id": "The selected items.0.product_id is invalid.",
        }

    def test_mail_failure_does_not_fail_order(self, client, order_payload, monkeypatch):
        def broken_send(message):
            raise ConnectionRefusedError("smtp down")

        monkeypatch.setattr(mail, "send", broken_send)

        response = client.post("/api/orders", json=order_payload)
        assert response.status_code == 201
        assert Order.query.count() == 1


class TestPublicFeeds:
    def test_health(self, client):
        assert client.get("/api/health").get_json() == {"status": "ok", "service": "shopcms"}

    def test_categories_feed_lists_active_only(self, client, category, db):
        from shopcms.models.category import Category

        db.session.add(Category(name="Hidden", slug="hidden", is_active=False))
        db.session.commit()

        names = [item["name"] for item in client.get("/api/categories").get_json()]
        assert names == ["Sofas"]

    def test_unknown_api_route_is_json_404(self, client):
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.get_json()["status"] == 404

    def test_openapi_document_is_served(self, client):
        response = client.get("/openapi/shop.yaml")
        assert response.status_code == 200
        assert b"/orders" in response.data


class TestCheckoutToken:
    def test_repeated_token_returns_the_placed_order(self, client, order_payload):
        payload = {**order_payload, "checkout_token": "6f1c2f0e-4b8e-4c49-9d0e-2a0c1b7f9a11"}

        with mail.record_messages() as outbox:
            first = client.post("/api/orders", json=payload)
            second = client.post("/api/orders", json=payload)

        assert second.get_json()["order_number"] == first.get_json()["order_number"]
        assert Order.query.count() == 1
        assert len(outbox) == 1

    def test_orders_without_token_are_independent(self, client, order_payload):
        client.post("/api/orders", json=order_payload)
        client.post("/api/orders", json=order_payload)

        assert Order.query.count() == 2

    def test_empty_items_read_as_required(self, client, order_payload):
        response = client.post("/api/orders", json={**order_payload, "items": []})

        assert response.status_code == 422
        assert response.get_json()["errors"]["items"] == "The items field is required."
