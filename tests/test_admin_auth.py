from conftest import ADMIN_EMAIL, ADMIN_PASSWORD, INERTIA_HEADERS


class TestAdminLogin:
    def test_guest_is_redirected_to_login(self, client):
        response = client.get("/admin/orders")
        assert response.status_code == 302
        assert response.headers["Location"] == "/admin/login"

    def test_json_guest_gets_401(self, client):
        response = client.get("/admin/meetings/calendar-events", headers={"Accept": "application/json"})
        assert response.status_code == 401

    def test_login_page_renders(self, client):
        page = client.get("/admin/login", headers=INERTIA_HEADERS).get_json()
        assert page["component"] == "auth/login"
        assert page["props"]["auth"]["user"] is None

    def test_wrong_password(self, client, admin_user):
        response = client.post("/admin/login", json={"email": ADMIN_EMAIL, "password": "nope"})
        assert response.status_code == 422
        assert response.get_json()["errors"] == {"email": "The provided credentials are incorrect."}

    def test_customer_cannot_log_in(self, client, customer_user):
        response = client.post("/admin/login", json={"email": customer_user.email, "password": ADMIN_PASSWORD})
        assert response.status_code == 422
        assert response.get_json()["errors"] == {"email": "This account does not have admin access."}

    def test_missing_credentials(self, client):
        response = client.post("/admin/login", json={})
        assert response.get_json()["errors"] == {
            "email": "The email field is required.",
            "password": "The password field is required.",
        }

    def test_form_login_sets_cookie_and_shares_user(self, client, admin_user):
        response = client.post("/admin/login", data={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
        assert response.status_code == 302
        assert response.headers["Location"] == "/admin"

        page = client.get("/admin", headers=INERTIA_HEADERS).get_json()
        assert page["component"] == "admin/dashboard"
        assert page["props"]["auth"]["user"]["email"] == ADMIN_EMAIL

    def test_logout_clears_session(self, admin_client):
        admin_client.post("/admin/logout")

        response = admin_client.get("/admin/orders")
        assert response.status_code == 302
        assert response.headers["Location"] == "/admin/login"

    def test_customer_token_is_refused(self, client, customer_user, app):
        from flask_jwt_extended import create_access_token

        token = create_access_token(identity=customer_user.id, additional_claims={"role": "customer"})

        response = client.get("/admin/orders", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 302
        assert response.headers["Location"] == "/"

        response = client.get(
            "/admin/meetings/calendar-events",
            headers={"Authorization": f"Bearer {token}", "Accept": "application/json"},
        )
        assert response.status_code == 403


class TestDashboard:
    def test_stats(self, admin_client, product, client, order_payload):
        client.post("/api/orders", json=order_payload)

        props = admin_client.get("/admin", headers=INERTIA_HEADERS).get_json()["props"]
        assert props["stats"]["products"] == 1
        assert props["stats"]["orders"] == 1
        assert props["stats"]["pending_orders"] == 1
        assert len(props["latest_orders"]) == 1
