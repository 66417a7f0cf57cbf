from typing import Any, Dict

from shopcms.extensions import db
from shopcms.models.faq import Faq, FaqCategory
from shopcms.schemas.content import FaqCategoryForm, FaqForm
from shopcms.utils.audit import log_action
from shopcms.utils.transaction import transactional
from shopcms.utils.validation import require_existing, validate_payload

DEFAULT_PAGE_SLUG = "faqs"


def list_faq_categories():
    return FaqCategory.query.order_by(FaqCategory.sort_order).all()


def faq_categories_for_page(page_slug: str):
    return (
        FaqCategory.query.filter_by(page_slug=page_slug, is_active=True)
        .order_by(FaqCategory.sort_order)
        .all()
    )


def create_faq_category(*, data: Dict[str, Any]) -> FaqCategory:
    form = validate_payload(FaqCategoryForm, data)
    values = form.model_dump()
    values["page_slug"] = values["page_slug"] or DEFAULT_PAGE_SLUG

    category = FaqCategory(**values)

    with transactional():
        db.session.add(category)
        db.session.flush()

        log_action(
            action="faq_category.create",
            entity_type="faq_category",
            entity_id=category.id,
            payload={"name": category.name, "page_slug": category.page_slug},
        )

    return category


def update_faq_category(*, category_id: str, data: Dict[str, Any]) -> FaqCategory:
    category = FaqCategory.query.filter_by(id=category_id).first_or_404()

    form = validate_payload(FaqCategoryForm, data)
    values = form.model_dump(exclude_unset=True)
    if "page_slug" in values and not values["page_slug"]:
        values["page_slug"] = DEFAULT_PAGE_SLUG

    with transactional():
        for field, value in values.items():
            setattr(category, field, value)

        log_action(
            action="faq_category.update",
            entity_type="faq_category",
            entity_id=category.id,
            payload={"fields": sorted(values)},
        )

    return category


def delete_faq_category(*, category_id: str) -> None:
    """Deleting a category deletes its FAQs."""
    category = FaqCategory.query.filter_by(id=category_id).first_or_404()

    with transactional():
        db.session.delete(category)

        log_action(
            action="faq_category.delete",
            entity_type="faq_category",
            entity_id=category_id,
            payload={"name": category.name, "faqs": len(category.faqs)},
        )


def create_faq(*, data: Dict[str, Any]) -> Faq:
    form = validate_payload(FaqForm, data)
    require_existing(FaqCategory, form.faq_category_id, "faq_category_id")

    faq = Faq(**form.model_dump())

    with transactional():
        db.session.add(faq)
        db.session.flush()

        log_action(
            action="faq.create",
            entity_type="faq",
            entity_id=faq.id,
            payload={"question": faq.question},
        )

    return faq


def update_faq(*, faq_id: str, data: Dict[str, Any]) -> Faq:
    faq = Faq.query.filter_by(id=faq_id).first_or_404()

    form = validate_payload(FaqForm, data)
    require_existing(FaqCategory, form.faq_category_id, "faq_category_id")
    values = form.model_dump(exclude_unset=True)

    with transactional():
        for field, value in values.items():
            setattr(faq, field, value)

        log_action(
            action="faq.update",
            entity_type="faq",
            entity_id=faq.id,
            payload={"fields": sorted(values)},
        )

    return faq


def delete_faq(*, faq_id: str) -> None:
    faq = Faq.query.filter_by(id=faq_id).first_or_404()

    with transactional():
        db.session.delete(faq)

        log_action(
            action="faq.delete",
            entity_type="faq",
            entity_id=faq_id,
            payload={"question": faq.question},
        )
