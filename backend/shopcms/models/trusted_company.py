from shopcms.extensions import db
from .base import BaseModel


class TrustedCompany(BaseModel):
    __tablename__ = "trusted_companies"

    name = db.Column(db.String(255), nullable=False)
    logo = db.Column(db.String(512), nullable=True)  # stored path or external URL
    website = db.Column(db.String(255), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, default=True)

    @property
    def sort_order(self) -> int:
        return self.order or 0
