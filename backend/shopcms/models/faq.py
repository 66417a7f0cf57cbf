from shopcms.extensions import db
from .base import BaseModel


class FaqCategory(BaseModel):
    __tablename__ = "faq_categories"

    name = db.Column(db.String(255), nullable=False)
    icon = db.Column(db.String(100), nullable=True)
    page_slug = db.Column(db.String(100), nullable=False, default="faqs", index=True)
    is_active = db.Column(db.Boolean, default=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    faqs = db.relationship(
        "Faq",
        back_populates="category",
        order_by="Faq.sort_order",
        cascade="all, delete-orphan",
    )

    @property
    def active_faqs(self):
        return [faq for faq in self.faqs if faq.is_active]


class Faq(BaseModel):
    __tablename__ = "faqs"

    faq_category_id = db.Column(
        db.String(36),
        db.ForeignKey("faq_categories.id", ondelete="CASCADE"),
        nullable=False,
    )
    question = db.Column(db.String(500), nullable=False)
    answer = db.Column(db.Text, nullable=False)
    is_active = db.Column(db.Boolean, default=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    category = db.relationship("FaqCategory", back_populates="faqs")
