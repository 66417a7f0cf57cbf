from typing import Any, Dict

from shopcms.extensions import db
from shopcms.models.page import Page
from shopcms.schemas.content import PageForm
from shopcms.utils.audit import log_action
from shopcms.utils.transaction import transactional
from shopcms.utils.validation import require_unique, validate_payload


def list_pages():
    return Page.query.order_by(Page.sort_order, Page.title).all()


def get_active_page(slug: str) -> Page:
    return Page.query.filter_by(slug=slug, is_active=True).first_or_404()


def create_page(*, data: Dict[str, Any]) -> Page:
    form = validate_payload(PageForm, data)
    require_unique(Page, "slug", form.slug)

    page = Page(**form.model_dump())

    with transactional():
        db.session.add(page)
        db.session.flush()

        log_action(
            action="page.create",
            entity_type="page",
            entity_id=page.id,
            payload={"title": page.title, "slug": page.slug},
        )

    return page


def update_page(*, page_id: str, data: Dict[str, Any]) -> Page:
    page = Page.query.filter_by(id=page_id).first_or_404()

    form = validate_payload(PageForm, data)
    require_unique(Page, "slug", form.slug, exclude_id=page.id)
    values = form.model_dump(exclude_unset=True)

    with transactional():
        for field, value in values.items():
            setattr(page, field, value)

        log_action(
            action="page.update",
            entity_type="page",
            entity_id=page.id,
            payload={"fields": sorted(values)},
        )

    return page


def delete_page(*, page_id: str) -> None:
    page = Page.query.filter_by(id=page_id).first_or_404()

    with transactional():
        db.session.delete(page)

        log_action(
            action="page.delete",
            entity_type="page",
            entity_id=page_id,
            payload={"slug": page.slug},
        )
