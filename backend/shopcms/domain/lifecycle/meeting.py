from shopcms.models.base import utc_now

# Status → timestamp column stamped when a meeting enters that status
STATUS_TIMESTAMPS: dict[str, str] = {
    "confirmed": "confirmed_at",
    "completed": "completed_at",
    "cancelled": "cancelled_at",
}

STATUS_COLORS: dict[str, str] = {
    "pending": "#f59e0b",
    "confirmed": "#3b82f6",
    "completed": "#10b981",
    "cancelled": "#ef4444",
}


def apply_meeting_status(meeting, new_status: str) -> bool:
    """Move a meeting to ``new_status``. Returns False when nothing changed."""
    if meeting.status == new_status:
        return False

    meeting.status = new_status

    stamp = STATUS_TIMESTAMPS.get(new_status)
    if stamp:
        setattr(meeting, stamp, utc_now())

    return True


def status_color(status: str) -> str:
    return STATUS_COLORS.get(status, "#6b7280")
