from shopcms.utils.media import media_url
from .common import iso, money


def normalize_category(category, *, with_parent=False, products_count=None):
    data = {
        "id": category.id,
        "name": category.name,
        "slug": category.slug,
        "image": category.image,
        "image_url": media_url(category.image),
        "description": category.description,
        "parent_id": category.parent_id,
        "is_active": category.is_active,
        "order": category.order,
        "sort_order": category.sort_order,
        "collection_type": category.collection_type,
        "created_at": iso(category.created_at),
        "updated_at": iso(category.updated_at),
    }

    if with_parent:
        data["parent"] = (
            {"id": category.parent.id, "name": category.parent.name, "slug": category.parent.slug}
            if category.parent else None
        )

    if products_count is not None:
        data["products_count"] = products_count

    return data


def normalize_product(product, *, with_category=True):
    images = list(product.images or [])
    data = {
        "id": product.id,
        "name": product.name,
        "slug": product.slug,
        "description": product.description,
        "price": money(product.price),
        "sale_price": money(product.sale_price),
        "display_price": money(product.display_price),
        "on_sale": product.on_sale,
        "images": images,
        "image_urls": [media_url(image) for image in images],
        "primary_image": media_url(product.primary_image),
        "category_id": product.category_id,
        "is_featured": product.is_featured,
        "is_new_arrival": product.is_new_arrival,
        "is_best_seller": product.is_best_seller,
        "is_active": product.is_active,
        "specifications": product.specifications,
        "sku": product.sku,
        "stock_quantity": product.stock_quantity,
        "created_at": iso(product.created_at),
        "updated_at": iso(product.updated_at),
    }

    if with_category:
        data["category"] = (
            {"id": product.category.id, "name": product.category.name, "slug": product.category.slug}
            if product.category else None
        )

    return data
