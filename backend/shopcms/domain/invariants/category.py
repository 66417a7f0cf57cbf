from .exceptions import InvariantViolation


def assert_category_parent(category, parent_id):
    if parent_id is not None and category.id is not None and parent_id == category.id:
        raise InvariantViolation("Category cannot be its own parent", field="parent_id")
