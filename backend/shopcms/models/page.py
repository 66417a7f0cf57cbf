from shopcms.extensions import db
from .base import BaseModel


class Page(BaseModel):
    __tablename__ = "pages"

    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False, unique=True, index=True)
    content = db.Column(db.Text, nullable=False)
    meta_title = db.Column(db.String(255), nullable=True)
    meta_description = db.Column(db.String(500), nullable=True)
    is_active = db.Column(db.Boolean, default=True, index=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)
