import io
import os

from shopcms.models.audit_log import AuditLog
from shopcms.models.category import Category
from shopcms.models.product import Product

from conftest import INERTIA_HEADERS


def image(name="photo.jpg", payload=b"fake-image-bytes"):
    return (io.BytesIO(payload), name)


def stored(app, path):
    return os.path.join(app.config["UPLOAD_FOLDER"], path)


class TestCategories:
    def test_create_generates_unique_slug(self, admin_client, category):
        response = admin_client.post("/admin/categories", json={"name": "Sofas", "sort_order": 4})
        assert response.status_code == 302

        created = Category.query.filter(Category.id != category.id).one()
        assert created.slug == "sofas-2"
        assert created.order == 4
        assert AuditLog.query.filter_by(action="category.create").count() == 1

    def test_duplicate_explicit_slug(self, admin_client, category):
        response = admin_client.post("/admin/categories", json={"name": "Other", "slug": "sofas"})
        assert response.status_code == 422
        assert response.get_json()["errors"] == {"slug": "The slug has already been taken."}

    def test_category_cannot_be_its_own_parent(self, admin_client, category):
        response = admin_client.put(
            f"/admin/categories/{category.id}",
            json={"name": "Sofas", "parent_id": category.id},
        )
        assert response.status_code == 422
        assert response.get_json()["errors"] == {"parent_id": "Category cannot be its own parent"}

    def test_unknown_parent(self, admin_client):
        response = admin_client.post("/admin/categories", json={"name": "Chairs", "parent_id": "nope"})
        assert response.get_json()["errors"] == {"parent_id": "The selected parent id is invalid."}

    def test_multipart_update_replaces_image(self, app, admin_client, category):
        admin_client.post(
            f"/admin/categories/{category.id}",
            data={"_method": "PUT", "name": "Sofas", "image": image()},
            content_type="multipart/form-data",
        )
        first = Category.query.filter_by(id=category.id).one().image
        assert first.startswith("categories/")
        assert os.path.exists(stored(app, first))

        response = admin_client.post(
            f"/admin/categories/{category.id}",
            data={"_method": "PUT", "name": "Sofas", "image": image("second.png")},
            content_type="multipart/form-data",
        )
        assert response.status_code == 303

        second = Category.query.filter_by(id=category.id).one().image
        assert second.endswith(".png")
        assert not os.path.exists(stored(app, first))
        assert os.path.exists(stored(app, second))

    def test_non_image_upload_is_rejected(self, admin_client):
        response = admin_client.post(
            "/admin/categories",
            data={"name": "Chairs", "image": image("notes.txt")},
            content_type="multipart/form-data",
            headers={"Accept": "application/json"},
        )
        assert response.status_code == 422
        assert response.get_json()["errors"] == {"image": "The image field must be an image."}

    def test_post_without_override_is_not_an_update(self, admin_client, category):
        response = admin_client.post(f"/admin/categories/{category.id}", data={"name": "Renamed"})
        assert response.status_code == 405

    def test_index_filters_and_counts(self, admin_client, category, product, db):
        db.session.add(Category(name="Beds", slug="beds", order=2, is_active=False))
        db.session.commit()

        props = admin_client.get("/admin/categories?status=active", headers=INERTIA_HEADERS).get_json()["props"]
        assert [item["name"] for item in props["categories"]["data"]] == ["Sofas"]
        assert props["categories"]["data"][0]["products_count"] == 1
        assert props["categories"]["total"] == 1
        assert props["filters"] == {"search": "", "status": "active"}

        props = admin_client.get("/admin/categories?search=be", headers=INERTIA_HEADERS).get_json()["props"]
        assert [item["name"] for item in props["categories"]["data"]] == ["Beds"]

    def test_reorder(self, admin_client, category, db):
        other = Category(name="Beds", slug="beds", order=2)
        db.session.add(other)
        db.session.commit()

        response = admin_client.post("/admin/categories/reorder", json={
            "categories": [{"id": other.id, "order": 1}, {"id": category.id, "order": 2}],
        })
        assert response.status_code == 302
        assert Category.query.filter_by(id=other.id).one().order == 1
        assert Category.query.filter_by(id=category.id).one().order == 2

    def test_reorder_unknown_id(self, admin_client, category):
        response = admin_client.post("/admin/categories/reorder", json={
            "categories": [{"id": "ghost", "order": 1}],
        })
        assert response.get_json()["errors"] == {"categories.0.id": "The selected categories.0.id is invalid."}

    def test_delete(self, admin_client, category):
        response = admin_client.delete(f"/admin/categories/{category.id}")
        assert response.status_code == 303
        assert Category.query.count() == 0


class TestProducts:
    def test_create_with_images(self, app, admin_client, category):
        response = admin_client.post(
            "/admin/products",
            data={
                "name": "Recliner",
                "price": "250.00",
                "category_id": category.id,
                "images[]": [image("a.jpg"), image("b.webp")],
            },
            content_type="multipart/form-data",
        )
        assert response.status_code == 302

        product = Product.query.filter_by(slug="recliner").one()
        assert len(product.images) == 2
        assert product.images[0].startswith("products/")
        assert all(os.path.exists(stored(app, path)) for path in product.images)

    def test_update_drops_removed_stored_images_only(self, app, admin_client, product):
        os.makedirs(stored(app, "products"), exist_ok=True)
        with open(stored(app, "products/sofa.jpg"), "wb") as fh:
            fh.write(b"x")

        response = admin_client.post(
            f"/admin/products/{product.id}",
            data={
                "_method": "PUT",
                "name": "Corner Sofa",
                "price": "450",
                "existing_images[]": ["https://cdn.example.com/sofa-2.jpg"],
                "images[]": [image("new.jpg")],
            },
            content_type="multipart/form-data",
        )
        assert response.status_code == 303

        updated = Product.query.filter_by(id=product.id).one()
        assert updated.images[0] == "https://cdn.example.com/sofa-2.jpg"
        assert updated.images[1].startswith("products/")
        assert float(updated.price) == 450.0
        assert not os.path.exists(stored(app, "products/sofa.jpg"))

    def test_validation(self, admin_client):
        response = admin_client.post("/admin/products", json={"name": "", "price": -1})
        errors = response.get_json()["errors"]
        assert errors["name"] == "The name field is required."
        assert "price" in errors

    def test_index(self, admin_client, product):
        page = admin_client.get("/admin/products", headers=INERTIA_HEADERS).get_json()
        assert page["component"] == "admin/products/index"
        assert page["props"]["products"][0]["category"]["slug"] == "sofas"
        assert page["props"]["products"][0]["image_urls"][0] == "/uploads/products/sofa.jpg"

    def test_delete(self, admin_client, product):
        admin_client.delete(f"/admin/products/{product.id}")
        assert Product.query.count() == 0


class TestStorefrontCatalog:
    def test_products_filtered_by_category_slug(self, client, product, db):
        db.session.add(Product(name="Loose Lamp", slug="loose-lamp", price=20, images=[]))
        db.session.commit()

        props = client.get("/products?category=sofas", headers=INERTIA_HEADERS).get_json()["props"]
        assert [item["slug"] for item in props["products"]] == ["corner-sofa"]

    def test_inactive_product_page_is_404(self, client, product, db):
        product.is_active = False
        db.session.commit()
        assert client.get("/products/corner-sofa", headers=INERTIA_HEADERS).status_code == 404
