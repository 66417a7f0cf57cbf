import pytest

from shopcms.models.order import Order

from conftest import INERTIA_HEADERS


@pytest.fixture
def placed_order(client, order_payload):
    response = client.post("/api/orders", json=order_payload)
    assert response.status_code == 201
    return Order.query.filter_by(order_number=response.get_json()["order_number"]).one()


class TestAdminOrders:
    def test_index_with_stats(self, admin_client, placed_order, order_payload):
        admin_client.post("/api/orders", json={
            **order_payload,
            "customer_name": "Karim Ahmed",
            "payment_method": "bkash",
            "transaction_id": "TXN1",
            "total_amount": 300,
        })

        props = admin_client.get("/admin/orders", headers=INERTIA_HEADERS).get_json()["props"]
        assert props["orders"]["total"] == 2
        assert props["orders"]["per_page"] == 10
        assert "items" not in props["orders"]["data"][0]
        assert props["stats"] == {
            "total_orders": 2,
            "pending_orders": 2,
            "total_revenue": 300.0,
            "avg_order_value": 300.0,
        }

    def test_filters(self, admin_client, placed_order):
        props = admin_client.get(
            "/admin/orders?search=rahim&status=pending&payment_status=all",
            headers=INERTIA_HEADERS,
        ).get_json()["props"]
        assert props["orders"]["total"] == 1
        assert props["filters"]["payment_status"] == "all"

        props = admin_client.get("/admin/orders?payment_status=paid", headers=INERTIA_HEADERS).get_json()["props"]
        assert props["orders"]["total"] == 0

    def test_show(self, admin_client, placed_order):
        page = admin_client.get(f"/admin/orders/{placed_order.id}", headers=INERTIA_HEADERS).get_json()
        assert page["component"] == "admin/orders/show"
        assert page["props"]["order"]["order_number"] == placed_order.order_number
        assert len(page["props"]["order"]["items"]) == 1

    def test_update_status(self, admin_client, placed_order):
        response = admin_client.put(f"/admin/orders/{placed_order.id}/status", json={"status": "shipped"})
        assert response.status_code == 303
        assert placed_order.status == "shipped"

    def test_update_payment_status(self, admin_client, placed_order):
        admin_client.put(f"/admin/orders/{placed_order.id}/payment-status", json={"payment_status": "refunded"})
        assert placed_order.payment_status == "refunded"

    def test_invalid_status(self, admin_client, placed_order):
        response = admin_client.put(f"/admin/orders/{placed_order.id}/status", json={"status": "lost"})
        assert response.status_code == 422
        assert placed_order.status == "pending"

    def test_combined_update_ignores_missing_fields(self, admin_client, placed_order):
        admin_client.put(f"/admin/orders/{placed_order.id}", json={"payment_status": "paid"})
        assert placed_order.payment_status == "paid"
        assert placed_order.status == "pending"

    def test_delete(self, admin_client, placed_order):
        response = admin_client.delete(f"/admin/orders/{placed_order.id}")
        assert response.status_code == 303
        assert response.headers["Location"] == "/admin/orders"
        assert Order.query.count() == 0

    def test_unknown_order(self, admin_client):
        response = admin_client.get("/admin/orders/nope", headers=INERTIA_HEADERS)
        assert response.status_code == 404


class TestAuditLog:
    def test_cursor_pagination(self, admin_client, placed_order):
        for status in ("processing", "shipped", "delivered"):
            admin_client.put(f"/admin/orders/{placed_order.id}/status", json={"status": status})

        first = admin_client.get("/admin/audit-logs?limit=2&entity_type=order").get_json()
        assert len(first["data"]) == 2
        assert first["meta"]["has_more"] is True

        cursor = first["meta"]["next_cursor"]
        second = admin_client.get(f"/admin/audit-logs?limit=2&entity_type=order&cursor={cursor}").get_json()
        assert len(second["data"]) == 1
        assert second["meta"]["has_more"] is False
        assert second["data"][0]["entity_id"] == placed_order.id

        back = second["meta"]["prev_cursor"]
        again = admin_client.get(
            f"/admin/audit-logs?limit=2&entity_type=order&cursor={back}&direction=prev"
        ).get_json()
        assert [log["id"] for log in again["data"]] == [log["id"] for log in first["data"]]
        assert again["meta"]["has_more"] is False

    def test_bad_cursor(self, admin_client):
        response = admin_client.get("/admin/audit-logs?cursor=not-a-cursor")
        assert response.status_code == 400
