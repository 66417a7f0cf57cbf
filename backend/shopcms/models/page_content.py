from shopcms.extensions import db
from .base import BaseModel


class PageContent(BaseModel):
    """One editable section (hero, cta, faq_section, ...) of a storefront page."""

    __tablename__ = "page_contents"

    page_slug = db.Column(db.String(100), nullable=False, index=True)
    section_key = db.Column(db.String(100), nullable=False)
    title = db.Column(db.String(255), nullable=True)
    subtitle = db.Column(db.Text, nullable=True)
    content = db.Column(db.Text, nullable=True)
    image = db.Column(db.String(512), nullable=True)
    items = db.Column(db.JSON, nullable=True)
    is_active = db.Column(db.Boolean, default=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    __table_args__ = (
        db.UniqueConstraint("page_slug", "section_key", name="uq_page_content_section"),
    )
