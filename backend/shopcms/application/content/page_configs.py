"""Editable sections per storefront page, as shown by the generic content editor."""

HERO = {"label": "Hero Section", "fields": ["title", "subtitle"]}
MAIN_CONTENT = {"label": "Main Content", "fields": ["content"], "richText": True}


def _items(label, item_fields, fields=("items",)):
    return {"label": label, "fields": list(fields), "itemFields": list(item_fields)}


def _cta(label):
    return {"label": label, "fields": ["title", "subtitle", "content"]}


PAGE_CONFIGS = {
    "help": {
        "title": "Help Center",
        "description": "Manage help center content and support information",
        "sections": {
            "hero": HERO,
            "search": {"label": "Search Section", "fields": ["title", "subtitle"]},
            "quick_links": _items("Quick Links Cards", ["icon", "title", "description", "button_text"]),
            "faq_section": {"label": "FAQ Section", "fields": ["title", "subtitle"]},
            "cta": _cta("CTA Section (Still Need Help?)"),
        },
    },
    "faqs": {
        "title": "FAQs Page",
        "description": "Manage FAQs page header and CTA sections",
        "sections": {
            "hero": HERO,
            "cta": _cta("CTA Section (Still Have Questions?)"),
        },
    },
    "stores": {
        "title": "Store Locations Page",
        "description": "Manage store locations page header, services, and CTA sections",
        "sections": {
            "hero": HERO,
            "locations_section": {"label": "Locations Section", "fields": ["title"]},
            "store_services": _items("Store Services", ["icon", "title", "description"], fields=("title", "items")),
            "cta": _cta("CTA Section (Need Help Finding?)"),
        },
    },
    "about": {
        "title": "About Page",
        "description": "Manage additional about page sections",
        "sections": {
            "features": _items("Feature Cards (Own Manufacturing, etc.)", ["icon", "title", "description"]),
            "cta": _cta("CTA Section"),
        },
    },
    "shipping": {
        "title": "Shipping Policy",
        "description": "Manage shipping policy content",
        "sections": {
            "hero": HERO,
            "shipping_methods": _items("Shipping Methods", ["name", "icon", "price", "time", "description"]),
            "zones": _items("Shipping Zones", ["zone", "areas", "standard", "express"]),
            "features": _items("Shipping Features", ["icon", "title", "description"]),
            "faqs": _items("Shipping FAQs", ["question", "answer"]),
        },
    },
    "returns": {
        "title": "Returns & Exchanges",
        "description": "Manage returns and exchanges policy",
        "sections": {
            "hero": HERO,
            "return_steps": _items("Return Process Steps", ["step", "title", "description", "icon"]),
            "eligible": _items("Eligible Items", ["text"]),
            "not_eligible": _items("Not Eligible Items", ["text"]),
            "faqs": _items("Returns FAQs", ["question", "answer"]),
        },
    },
    "warranty": {
        "title": "Warranty Information",
        "description": "Manage warranty information content",
        "sections": {
            "hero": HERO,
            "warranty_tiers": _items(
                "Warranty Tiers", ["name", "duration", "description", "icon", "color", "features"]
            ),
            "covered": _items("What's Covered", ["text"]),
            "not_covered": _items("What's Not Covered", ["text"]),
            "claim_steps": _items("Claim Process Steps", ["step", "title", "description"]),
            "faqs": _items("Warranty FAQs", ["question", "answer"]),
        },
    },
    "care": {
        "title": "Care & Maintenance",
        "description": "Manage care and maintenance guides",
        "sections": {
            "hero": HERO,
            "general_tips": _items("General Care Tips", ["icon", "title", "description"]),
            "care_categories": _items("Care by Material", ["id", "title", "icon", "tips"]),
            "dos": _items("Do's", ["text"]),
            "donts": _items("Don'ts", ["text"]),
        },
    },
    "privacy": {
        "title": "Privacy Policy",
        "description": "Manage privacy policy content",
        "sections": {"hero": HERO, "content": MAIN_CONTENT},
    },
    "terms": {
        "title": "Terms & Conditions",
        "description": "Manage terms and conditions content",
        "sections": {"hero": HERO, "content": MAIN_CONTENT},
    },
}


def page_config(page_slug: str) -> dict:
    return PAGE_CONFIGS.get(page_slug) or {
        "title": page_slug.capitalize(),
        "description": "Manage page content",
        "sections": {"hero": HERO, "content": MAIN_CONTENT},
    }
