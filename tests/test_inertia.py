from conftest import ADMIN_EMAIL, INERTIA_HEADERS


class TestPageResponses:
    def test_first_load_renders_html_shell(self, client):
        response = client.get("/cart")

        assert response.status_code == 200
        assert response.mimetype == "text/html"
        body = response.get_data(as_text=True)
        assert 'name="csrf-token"' in body
        assert 'data-page="' in body
        assert "&#34;cart&#34;" in body

    def test_inertia_visit_returns_page_object(self, client):
        response = client.get("/cart?step=1", headers=INERTIA_HEADERS)

        assert response.status_code == 200
        assert response.headers["X-Inertia"] == "true"
        assert "X-Inertia" in response.vary
        assert "Cookie" in response.vary

        page = response.get_json()
        assert page["component"] == "cart"
        assert page["url"] == "/cart?step=1"
        assert page["version"] == "1"
        assert page["props"]["auth"] == {"user": None}
        assert page["props"]["flash"] == {"success": None, "error": None}
        assert page["props"]["errors"] == {}

    def test_shared_auth_user(self, admin_client):
        page = admin_client.get("/cart", headers=INERTIA_HEADERS).get_json()

        assert page["props"]["auth"]["user"]["email"] == ADMIN_EMAIL
        assert page["props"]["auth"]["user"]["role"] == "admin"

    def test_stale_asset_version_forces_full_reload(self, client):
        response = client.get("/cart", headers={"X-Inertia": "true", "X-Inertia-Version": "old"})

        assert response.status_code == 409
        assert response.headers["X-Inertia-Location"] == "http://localhost/cart"

    def test_version_ignored_outside_inertia_visits(self, client):
        assert client.get("/cart", headers={"X-Inertia-Version": "old"}).status_code == 200


class TestRedirects:
    def test_post_redirect_stays_302(self, client, product):
        response = client.post("/cart/items", data={"product_id": product.id})
        assert response.status_code == 302

    def test_delete_redirect_becomes_303(self, client):
        response = client.delete("/cart")

        assert response.status_code == 303
        assert response.headers["Location"] == "/cart"

    def test_form_method_override_redirect_becomes_303(self, client, product):
        client.post("/cart/items", data={"product_id": product.id})

        response = client.post(f"/cart/items/{product.id}", data={"_method": "PUT", "quantity": "3"})
        assert response.status_code == 303

    def test_header_method_override(self, client):
        response = client.post("/cart", headers={"X-HTTP-Method-Override": "DELETE"})
        assert response.status_code == 303

    def test_post_without_override_is_rejected(self, client, product):
        response = client.post(f"/cart/items/{product.id}", data={"quantity": "3"})
        assert response.status_code == 405


class TestErrorPages:
    def test_missing_page_renders_error_component(self, client):
        response = client.get("/products/missing", headers=INERTIA_HEADERS)

        assert response.status_code == 404
        page = response.get_json()
        assert page["component"] == "error"
        assert page["props"]["status"] == 404

    def test_api_errors_are_json(self, client):
        response = client.get("/api/missing")

        assert response.status_code == 404
        assert response.get_json()["status"] == 404
