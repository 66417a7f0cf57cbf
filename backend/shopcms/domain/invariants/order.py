from .exceptions import InvariantViolation


def assert_order_items(items):
    if not items:
        raise InvariantViolation("The order must contain at least one item.", field="items")

    for index, item in enumerate(items):
        if item.quantity < 1:
            raise InvariantViolation(
                "Quantity must be at least 1.",
                field=f"items.{index}.quantity",
            )
