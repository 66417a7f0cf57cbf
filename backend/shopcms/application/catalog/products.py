from typing import Any, Dict, List, Optional

from werkzeug.datastructures import FileStorage

from shopcms.extensions import db
from shopcms.models.category import Category
from shopcms.models.product import Product
from shopcms.schemas.catalog import ProductForm
from shopcms.utils.audit import log_action
from shopcms.utils.media import delete_file, save_image
from shopcms.utils.slugs import unique_slug
from shopcms.utils.transaction import transactional
from shopcms.utils.validation import require_existing, require_unique, validate_payload

IMAGE_MAX_KB = 5120


def _store_images(images: List[FileStorage]) -> List[str]:
    return [
        save_image(image, folder="products", field=f"images.{index}", max_kb=IMAGE_MAX_KB)
        for index, image in enumerate(images)
    ]


def list_products():
    return Product.query.order_by(Product.created_at.desc()).all()


def storefront_products(*, category_slug: Optional[str] = None):
    query = Product.query.filter_by(is_active=True)

    if category_slug:
        query = query.join(Category).filter(Category.slug == category_slug)

    return query.order_by(Product.created_at.desc()).all()


def create_product(*, data: Dict[str, Any], images: Optional[List[FileStorage]] = None) -> Product:
    """
    Create a product.

    Edge cases handled:
    - Slug generated from the name when omitted
    - Uploaded images stored in upload order; the first is the primary image
    """
    form = validate_payload(ProductForm, data)
    values = form.model_dump(exclude={"existing_images"})

    if values["slug"]:
        require_unique(Product, "slug", values["slug"])
    else:
        values["slug"] = unique_slug(Product, values["name"])

    require_existing(Category, values["category_id"], "category_id")

    values["images"] = _store_images(images or [])
    product = Product(**values)

    with transactional():
        db.session.add(product)
        db.session.flush()

        log_action(
            action="product.create",
            entity_type="product",
            entity_id=product.id,
            payload={"name": product.name, "slug": product.slug},
        )

    return product


def update_product(
    *,
    product_id: str,
    data: Dict[str, Any],
    images: Optional[List[FileStorage]] = None,
) -> Product:
    """
    Update a product.

    Responsibilities:
    - Keep images listed in ``existing_images``, append new uploads
    - Delete stored files that were dropped; external URLs are left alone
    """
    product = Product.query.filter_by(id=product_id).first_or_404()

    form = validate_payload(ProductForm, data)
    values = form.model_dump(exclude={"existing_images"}, exclude_unset=True)
    existing = list(form.existing_images)

    if values.get("slug"):
        require_unique(Product, "slug", values["slug"], exclude_id=product.id)
    else:
        values.pop("slug", None)

    require_existing(Category, values.get("category_id"), "category_id")

    removed = [image for image in (product.images or []) if image not in existing]
    values["images"] = existing + _store_images(images or [])

    with transactional():
        for field, value in values.items():
            setattr(product, field, value)

        log_action(
            action="product.update",
            entity_type="product",
            entity_id=product.id,
            payload={"fields": sorted(values), "removed_images": removed},
        )

    for image in removed:
        delete_file(image)

    return product


def delete_product(*, product_id: str) -> None:
    product = Product.query.filter_by(id=product_id).first_or_404()
    images = list(product.images or [])

    with transactional():
        db.session.delete(product)

        log_action(
            action="product.delete",
            entity_type="product",
            entity_id=product_id,
            payload={"name": product.name},
        )

    for image in images:
        delete_file(image)
