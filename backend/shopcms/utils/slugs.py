from slugify import slugify


def unique_slug(model, source: str, *, exclude_id=None) -> str:
    """Slug for ``source``, suffixed with -2, -3, ... until unused on ``model``."""
    base = slugify(source) or "item"
    candidate = base
    suffix = 2

    while True:
        query = model.query.filter_by(slug=candidate)
        if exclude_id is not None:
            query = query.filter(model.id != exclude_id)
        if query.first() is None:
            return candidate
        candidate = f"{base}-{suffix}"
        suffix += 1
