from shopcms.extensions import db
from .base import BaseModel


class FeatureCard(BaseModel):
    __tablename__ = "feature_cards"

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    icon = db.Column(db.String(100), nullable=False)
    order = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, default=True)

    @property
    def sort_order(self) -> int:
        return self.order or 0
