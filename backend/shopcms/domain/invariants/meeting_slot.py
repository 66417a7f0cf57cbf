from .exceptions import InvariantViolation


def assert_slot_window(start_time: str, end_time: str):
    # HH:MM strings compare lexically in chronological order
    if end_time <= start_time:
        raise InvariantViolation(
            "The end time must be a time after start time.",
            field="end_time",
        )
