from decimal import Decimal

import pytest

from shopcms import create_app
from shopcms.extensions import db as _db
from shopcms.models.category import Category
from shopcms.models.product import Product
from shopcms.models.user import User

INERTIA_HEADERS = {"X-Inertia": "true", "X-Inertia-Version": "1"}

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "secret-password"


@pytest.fixture
def app(tmp_path):
    app = create_app("testing")
    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_user(db):
    user = User(email=ADMIN_EMAIL, name="Admin", role="admin")
    user.set_password(ADMIN_PASSWORD)
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def customer_user(db):
    user = User(email="customer@example.com", name="Customer", role="customer")
    user.set_password(ADMIN_PASSWORD)
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def admin_client(client, admin_user):
    """Test client carrying the admin's access-token cookie."""
    response = client.post("/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 302
    return client


@pytest.fixture
def category(db):
    category = Category(name="Sofas", slug="sofas", order=1, is_active=True)
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def product(db, category):
    product = Product(
        name="Corner Sofa",
        slug="corner-sofa",
        price=Decimal("500.00"),
        images=["products/sofa.jpg", "https://cdn.example.com/sofa-2.jpg"],
        category_id=category.id,
        is_active=True,
    )
    db.session.add(product)
    db.session.commit()
    return product


@pytest.fixture
def order_payload(product):
    return {
        "customer_name": "Rahim Uddin",
        "customer_email": "rahim@example.com",
        "customer_phone": "01712345678",
        "shipping_address": "House 12, Road 5, Dhanmondi, Dhaka",
        "payment_method": "cod",
        "items": [{"product_id": product.id, "quantity": 2, "price": 500}],
        "subtotal": 1000,
        "total_amount": 1000,
    }


@pytest.fixture
def inertia_headers():
    return dict(INERTIA_HEADERS)
