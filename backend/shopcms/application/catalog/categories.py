from typing import Any, Dict, Optional

from sqlalchemy import func
from werkzeug.datastructures import FileStorage

from shopcms.domain.invariants.category import assert_category_parent
from shopcms.extensions import db
from shopcms.models.category import Category
from shopcms.models.product import Product
from shopcms.schemas.catalog import CategoryForm, CategoryReorderForm
from shopcms.utils.audit import log_action
from shopcms.utils.media import delete_file, save_image
from shopcms.utils.order import apply_positions, require_known_positions
from shopcms.utils.pagination import paginate_page
from shopcms.utils.slugs import unique_slug
from shopcms.utils.transaction import transactional
from shopcms.utils.validation import (
    require_existing,
    require_unique,
    validate_payload,
)

IMAGE_MAX_KB = 5120


def list_categories(*, search: Optional[str] = None, status: Optional[str] = None, page=1, per_page=10):
    """
    Admin category table: ordered by position, with product counts.

    Returns ``(pagination, products_count_by_id)``.
    """
    query = Category.query

    if search:
        query = query.filter(Category.name.ilike(f"%{search}%"))

    if status and status != "all":
        query = query.filter(Category.is_active.is_(status == "active"))

    pagination = paginate_page(
        query.order_by(Category.order, Category.name),
        page=page,
        per_page=per_page,
    )

    ids = [category.id for category in pagination.items]
    counts = dict(
        db.session.query(Product.category_id, func.count(Product.id))
        .filter(Product.category_id.in_(ids))
        .group_by(Product.category_id)
        .all()
    ) if ids else {}

    return pagination, counts


def active_categories():
    return (
        Category.query.filter_by(is_active=True)
        .order_by(Category.order, Category.name)
        .all()
    )


def create_category(*, data: Dict[str, Any], image: Optional[FileStorage] = None) -> Category:
    """
    Create a category.

    Edge cases handled:
    - Slug generated from the name when omitted
    - Explicit slugs must be unique
    - Unknown parent rejected
    """
    form = validate_payload(CategoryForm, data)
    values = form.model_dump()

    if values["slug"]:
        require_unique(Category, "slug", values["slug"])
    else:
        values["slug"] = unique_slug(Category, values["name"])

    require_existing(Category, values["parent_id"], "parent_id")

    if image is not None:
        values["image"] = save_image(image, folder="categories", max_kb=IMAGE_MAX_KB)

    category = Category(**values)

    with transactional():
        db.session.add(category)
        db.session.flush()

        log_action(
            action="category.create",
            entity_type="category",
            entity_id=category.id,
            payload={"name": category.name, "slug": category.slug},
        )

    return category


def update_category(
    *,
    category_id: str,
    data: Dict[str, Any],
    image: Optional[FileStorage] = None,
) -> Category:
    """
    Update a category.

    Responsibilities:
    - A category is never its own parent
    - Replacing the image removes the previous file after commit
    """
    category = Category.query.filter_by(id=category_id).first_or_404()

    form = validate_payload(CategoryForm, data)
    values = form.model_dump(exclude_unset=True)

    assert_category_parent(category, values.get("parent_id"))

    if values.get("slug"):
        require_unique(Category, "slug", values["slug"], exclude_id=category.id)
    else:
        values.pop("slug", None)

    require_existing(Category, values.get("parent_id"), "parent_id")

    old_image = None
    if image is not None:
        old_image = category.image
        values["image"] = save_image(image, folder="categories", max_kb=IMAGE_MAX_KB)

    with transactional():
        for field, value in values.items():
            setattr(category, field, value)

        log_action(
            action="category.update",
            entity_type="category",
            entity_id=category.id,
            payload={"fields": sorted(values)},
        )

    if old_image:
        delete_file(old_image)

    return category


def delete_category(*, category_id: str) -> None:
    category = Category.query.filter_by(id=category_id).first_or_404()
    image = category.image

    with transactional():
        db.session.delete(category)

        log_action(
            action="category.delete",
            entity_type="category",
            entity_id=category_id,
            payload={"name": category.name},
        )

    delete_file(image)


def reorder_categories(*, data: Dict[str, Any]) -> int:
    form = validate_payload(CategoryReorderForm, data)
    positions = [position.model_dump() for position in form.categories]

    require_known_positions(Category, positions, "categories")

    with transactional():
        updated = apply_positions(Category, positions)

        log_action(
            action="category.reorder",
            entity_type="category",
            entity_id=None,
            payload={"positions": positions},
        )

    return updated
