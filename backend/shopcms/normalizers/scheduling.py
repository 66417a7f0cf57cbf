from datetime import datetime, timedelta

from shopcms.domain.lifecycle.meeting import status_color
from .common import iso


def normalize_slot(slot):
    return {
        "id": slot.id,
        "day_of_week": slot.day_of_week,
        "day_name": slot.day_name,
        "start_time": slot.start_time,
        "end_time": slot.end_time,
        "is_active": slot.is_active,
    }


def normalize_meeting(meeting):
    return {
        "id": meeting.id,
        "name": meeting.name,
        "email": meeting.email,
        "phone": meeting.phone,
        "meeting_type": meeting.meeting_type,
        "purpose": meeting.purpose,
        "notes": meeting.notes,
        "date": meeting.date.isoformat(),
        "time": meeting.time,
        "status": meeting.status,
        "admin_notes": meeting.admin_notes,
        "confirmed_at": iso(meeting.confirmed_at),
        "completed_at": iso(meeting.completed_at),
        "cancelled_at": iso(meeting.cancelled_at),
        "created_at": iso(meeting.created_at),
    }


def normalize_callback(callback):
    return {
        "id": callback.id,
        "name": callback.name,
        "phone": callback.phone,
        "preferred_time": callback.preferred_time,
        "reason": callback.reason,
        "notes": callback.notes,
        "status": callback.status,
        "created_at": iso(callback.created_at),
    }


def _start_of(meeting):
    for fmt in ("%I:%M %p", "%H:%M", "%H:%M:%S"):
        try:
            clock = datetime.strptime(meeting.time.strip(), fmt).time()
            break
        except ValueError:
            continue
    else:
        clock = datetime.min.time()
    return datetime.combine(meeting.date, clock)


def normalize_calendar_event(meeting):
    """One-hour calendar block coloured by meeting status."""
    start = _start_of(meeting)
    color = status_color(meeting.status)
    return {
        "id": meeting.id,
        "title": f"{meeting.name} - {meeting.meeting_type.capitalize()}",
        "start": start.strftime("%Y-%m-%dT%H:%M:%S"),
        "end": (start + timedelta(hours=1)).strftime("%Y-%m-%dT%H:%M:%S"),
        "backgroundColor": color,
        "borderColor": color,
        "extendedProps": {
            "email": meeting.email,
            "phone": meeting.phone,
            "status": meeting.status,
            "meeting_type": meeting.meeting_type,
            "purpose": meeting.purpose,
        },
    }
