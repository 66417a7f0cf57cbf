import json
from typing import Any, Dict, Optional

from werkzeug.datastructures import FileStorage

from shopcms.extensions import db
from shopcms.models.page_content import PageContent
from shopcms.schemas.content import ContactPageForm, PageSectionsForm
from shopcms.utils.audit import log_action
from shopcms.utils.media import delete_file, save_image
from shopcms.utils.transaction import transactional
from shopcms.utils.validation import validate_payload

SECTION_IMAGE_MAX_KB = 5120


def page_content(page_slug: str):
    """Active sections of a storefront page, in display order."""
    return (
        PageContent.query.filter_by(page_slug=page_slug, is_active=True)
        .order_by(PageContent.sort_order)
        .all()
    )


def editor_sections(page_slug: str):
    return PageContent.query.filter_by(page_slug=page_slug).order_by(PageContent.sort_order).all()


def set_section(page_slug: str, section_key: str, values: Dict[str, Any]) -> PageContent:
    """Upsert on ``(page_slug, section_key)``. Call inside a transaction."""
    record = PageContent.query.filter_by(page_slug=page_slug, section_key=section_key).first()
    if record is None:
        record = PageContent(page_slug=page_slug, section_key=section_key)
        db.session.add(record)

    for field, value in values.items():
        setattr(record, field, value)

    return record


def update_contact_page(*, data: Dict[str, Any]) -> None:
    """
    Contact page editor.

    Sections written: hero, form, hours (JSON weekday/weekend), map (only
    when given), cards (only when given), cta (JSON labels).
    """
    form = validate_payload(ContactPageForm, data)

    with transactional():
        set_section("contact", "hero", {"title": form.page_title, "subtitle": form.page_subtitle})
        set_section("contact", "form", {"title": form.form_title, "subtitle": form.form_subtitle})
        set_section("contact", "hours", {
            "content": json.dumps({"weekday": form.hours_weekday, "weekend": form.hours_weekend}),
        })

        if form.map_embed is not None:
            set_section("contact", "map", {"content": form.map_embed})

        if form.contact_cards is not None:
            set_section("contact", "cards", {
                "items": [card.model_dump() for card in form.contact_cards],
            })

        set_section("contact", "cta", {
            "title": form.cta_title,
            "subtitle": form.cta_subtitle,
            "content": json.dumps({
                "call_label": form.cta_call_label,
                "email_label": form.cta_email_label,
                "phone": form.cta_phone,
                "email": form.cta_email,
            }),
        })

        log_action(
            action="page_content.update",
            entity_type="page_content",
            entity_id=None,
            payload={"page_slug": "contact"},
        )


def update_page_sections(
    *,
    page_slug: str,
    data: Dict[str, Any],
    images: Optional[Dict[str, FileStorage]] = None,
) -> int:
    """
    Bulk section update for the help and generic page editors.

    Each submitted section is upserted; ``items`` is only touched when sent
    and a per-section upload replaces that section's image.
    """
    form = validate_payload(PageSectionsForm, data)
    images = images or {}

    stored: Dict[str, str] = {}
    for section_key, upload in images.items():
        if section_key in form.sections and upload is not None:
            stored[section_key] = save_image(
                upload,
                folder=f"pages/{page_slug}",
                field=f"sections.{section_key}.image",
                max_kb=SECTION_IMAGE_MAX_KB,
            )

    replaced = []
    with transactional():
        for section_key, section in form.sections.items():
            values = section.model_dump(exclude={"items"})
            if section.items is not None:
                values["items"] = section.items

            if section_key in stored:
                existing = PageContent.query.filter_by(page_slug=page_slug, section_key=section_key).first()
                if existing is not None and existing.image:
                    replaced.append(existing.image)
                values["image"] = stored[section_key]

            set_section(page_slug, section_key, values)

        log_action(
            action="page_content.update",
            entity_type="page_content",
            entity_id=None,
            payload={"page_slug": page_slug, "sections": sorted(form.sections)},
        )

    for path in replaced:
        delete_file(path)

    return len(form.sections)
