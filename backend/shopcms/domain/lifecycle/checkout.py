from typing import Set

DETAILS = "details"
PAYMENT = "payment"
PROCESSING = "processing"

# Explicit allowed checkout step transitions
ALLOWED_CHECKOUT_TRANSITIONS: dict[str, Set[str]] = {
    DETAILS: {PAYMENT},
    PAYMENT: {DETAILS, PROCESSING},
    PROCESSING: {DETAILS, PAYMENT},
}


def assert_checkout_transition(*, from_step: str, to_step: str) -> None:
    """
    Guards checkout step changes.
    Single source of truth for the step machine.
    """
    allowed = ALLOWED_CHECKOUT_TRANSITIONS.get(from_step, set())

    if to_step not in allowed:
        raise ValueError(
            f"Illegal checkout transition: {from_step} → {to_step}"
        )
