from shopcms.extensions import db
from .base import BaseModel

COLLECTION_TYPES = ("business", "family", "seating")


class Category(BaseModel):
    __tablename__ = "categories"

    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False, unique=True, index=True)
    image = db.Column(db.String(512), nullable=True)
    description = db.Column(db.Text, nullable=True)
    parent_id = db.Column(db.String(36), db.ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    is_active = db.Column(db.Boolean, default=True, index=True)
    order = db.Column(db.Integer, nullable=False, default=0)
    collection_type = db.Column(db.String(20), nullable=True)

    parent = db.relationship("Category", remote_side="Category.id", backref="children")
    products = db.relationship("Product", back_populates="category", passive_deletes=True)

    @property
    def sort_order(self) -> int:
        return self.order or 0
