from shopcms.extensions import db
from .base import BaseModel


class Product(BaseModel):
    __tablename__ = "products"

    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False, unique=True, index=True)
    description = db.Column(db.Text, nullable=True)
    price = db.Column(db.Numeric(12, 2), nullable=False)
    sale_price = db.Column(db.Numeric(12, 2), nullable=True)
    images = db.Column(db.JSON, nullable=False, default=list)
    category_id = db.Column(db.String(36), db.ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    is_featured = db.Column(db.Boolean, default=False)
    is_new_arrival = db.Column(db.Boolean, default=False)
    is_best_seller = db.Column(db.Boolean, default=False)
    is_active = db.Column(db.Boolean, default=True, index=True)
    specifications = db.Column(db.JSON, nullable=True)
    sku = db.Column(db.String(100), nullable=True)
    stock_quantity = db.Column(db.Integer, nullable=False, default=0)

    category = db.relationship("Category", back_populates="products")

    @property
    def primary_image(self):
        return self.images[0] if self.images else None

    @property
    def display_price(self):
        return self.sale_price if self.sale_price is not None else self.price

    @property
    def on_sale(self) -> bool:
        return self.sale_price is not None and self.sale_price < self.price
