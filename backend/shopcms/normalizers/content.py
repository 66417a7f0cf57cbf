from shopcms.utils.media import media_url
from .common import iso


def normalize_page(page):
    return {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "content": page.content,
        "meta_title": page.meta_title,
        "meta_description": page.meta_description,
        "is_active": page.is_active,
        "sort_order": page.sort_order,
        "created_at": iso(page.created_at),
        "updated_at": iso(page.updated_at),
    }


def normalize_section(record):
    return {
        "id": record.id,
        "page_slug": record.page_slug,
        "section_key": record.section_key,
        "title": record.title,
        "subtitle": record.subtitle,
        "content": record.content,
        "image": record.image,
        "image_url": media_url(record.image),
        "items": record.items,
        "is_active": record.is_active,
        "sort_order": record.sort_order,
    }


def sections_by_key(records):
    return {record.section_key: normalize_section(record) for record in records}


def normalize_faq(faq):
    return {
        "id": faq.id,
        "faq_category_id": faq.faq_category_id,
        "question": faq.question,
        "answer": faq.answer,
        "is_active": faq.is_active,
        "sort_order": faq.sort_order,
    }


def normalize_faq_category(category, *, active_only=False):
    faqs = category.active_faqs if active_only else category.faqs
    return {
        "id": category.id,
        "name": category.name,
        "icon": category.icon,
        "page_slug": category.page_slug,
        "is_active": category.is_active,
        "sort_order": category.sort_order,
        "faqs": [normalize_faq(faq) for faq in faqs],
    }


def normalize_feature_card(card):
    return {
        "id": card.id,
        "title": card.title,
        "description": card.description,
        "icon": card.icon,
        "order": card.order,
        "sort_order": card.sort_order,
        "is_active": card.is_active,
    }


def normalize_trusted_company(company):
    return {
        "id": company.id,
        "name": company.name,
        "logo": company.logo,
        "logo_url": media_url(company.logo),
        "website": company.website,
        "order": company.order,
        "sort_order": company.sort_order,
        "is_active": company.is_active,
    }
