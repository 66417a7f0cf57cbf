from datetime import date
from typing import Any, Dict, Optional

from dateutil import parser as date_parser
from sqlalchemy import or_

from shopcms.domain.invariants.meeting_slot import assert_slot_window
from shopcms.domain.lifecycle.meeting import apply_meeting_status
from shopcms.domain.scheduling.availability import day_of_week, time_slots, weekly_schedule
from shopcms.extensions import db
from shopcms.models.meeting import CallbackRequest, Meeting, MeetingSlot
from shopcms.schemas.scheduling import (
    CallbackForm,
    MeetingBookingForm,
    MeetingSlotForm,
    MeetingUpdateForm,
)
from shopcms.utils.audit import log_action
from shopcms.utils.transaction import transactional
from shopcms.utils.validation import validate_payload


def parse_day(value: Optional[str]) -> Optional[date]:
    """Lenient date parsing for query-string filters; junk is ignored."""
    if not value:
        return None
    try:
        return date_parser.parse(value).date()
    except (ValueError, OverflowError):
        return None


# ----------------------------------------------------------------------
# Public booking
# ----------------------------------------------------------------------

def book_meeting(*, data: Dict[str, Any]) -> Meeting:
    form = validate_payload(MeetingBookingForm, data)
    meeting = Meeting(**form.model_dump())

    with transactional():
        db.session.add(meeting)

    return meeting


def request_callback(*, data: Dict[str, Any]) -> CallbackRequest:
    form = validate_payload(CallbackForm, data)
    callback = CallbackRequest(**form.model_dump())

    with transactional():
        db.session.add(callback)

    return callback


def active_slots():
    return (
        MeetingSlot.query.filter_by(is_active=True)
        .order_by(MeetingSlot.day_of_week, MeetingSlot.start_time)
        .all()
    )


def availability(*, on: Optional[date] = None) -> Dict[str, Any]:
    """Weekly schedule, plus 30-minute start times when a date is given."""
    result: Dict[str, Any] = {"schedule": weekly_schedule(active_slots())}

    if on is not None:
        slots = (
            MeetingSlot.query.filter_by(is_active=True, day_of_week=day_of_week(on))
            .order_by(MeetingSlot.start_time)
            .all()
        )
        result["date"] = on.isoformat()
        result["time_slots"] = time_slots(slots)

    return result


# ----------------------------------------------------------------------
# Admin
# ----------------------------------------------------------------------

def list_meetings(
    *,
    status: Optional[str] = None,
    meeting_type: Optional[str] = None,
    from_date: Optional[str] = None,
    to_date: Optional[str] = None,
    search: Optional[str] = None,
):
    query = Meeting.query

    if status:
        query = query.filter(Meeting.status == status)

    if meeting_type:
        query = query.filter(Meeting.meeting_type == meeting_type)

    start = parse_day(from_date)
    if start:
        query = query.filter(Meeting.date >= start)

    end = parse_day(to_date)
    if end:
        query = query.filter(Meeting.date <= end)

    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Meeting.name.ilike(pattern),
                Meeting.email.ilike(pattern),
                Meeting.phone.ilike(pattern),
            )
        )

    return query.order_by(Meeting.created_at.desc()).all()


def list_callbacks():
    return CallbackRequest.query.order_by(CallbackRequest.created_at.desc()).all()


def meeting_stats(today: Optional[date] = None) -> Dict[str, int]:
    today = today or date.today()
    return {
        "total_meetings": Meeting.query.count(),
        "pending_meetings": Meeting.query.filter_by(status="pending").count(),
        "confirmed_meetings": Meeting.query.filter_by(status="confirmed").count(),
        "today_meetings": Meeting.query.filter(Meeting.date == today).count(),
        "total_callbacks": CallbackRequest.query.count(),
        "pending_callbacks": CallbackRequest.query.filter_by(status="pending").count(),
    }


def get_meeting(meeting_id: str) -> Meeting:
    return Meeting.query.filter_by(id=meeting_id).first_or_404()


def update_meeting(*, meeting_id: str, data: Dict[str, Any]) -> Meeting:
    """
    Status change stamps confirmed_at / completed_at / cancelled_at.
    admin_notes is only written when sent.
    """
    meeting = get_meeting(meeting_id)
    form = validate_payload(MeetingUpdateForm, data)

    with transactional():
        changed = apply_meeting_status(meeting, form.status)

        if form.admin_notes is not None:
            meeting.admin_notes = form.admin_notes

        log_action(
            action="meeting.update",
            entity_type="meeting",
            entity_id=meeting.id,
            payload={"status": form.status, "status_changed": changed},
        )

    return meeting


def delete_meeting(*, meeting_id: str) -> None:
    meeting = get_meeting(meeting_id)

    with transactional():
        db.session.delete(meeting)

        log_action(
            action="meeting.delete",
            entity_type="meeting",
            entity_id=meeting_id,
            payload={"name": meeting.name},
        )


def calendar_meetings(*, start: Optional[str] = None, end: Optional[str] = None):
    query = Meeting.query

    start_day = parse_day(start)
    if start_day:
        query = query.filter(Meeting.date >= start_day)

    end_day = parse_day(end)
    if end_day:
        query = query.filter(Meeting.date <= end_day)

    return query.order_by(Meeting.date, Meeting.time).all()


def list_slots():
    return MeetingSlot.query.order_by(MeetingSlot.day_of_week, MeetingSlot.start_time).all()


def create_slot(*, data: Dict[str, Any]) -> MeetingSlot:
    form = validate_payload(MeetingSlotForm, data)
    assert_slot_window(form.start_time, form.end_time)

    slot = MeetingSlot(**form.model_dump())

    with transactional():
        db.session.add(slot)
        db.session.flush()

        log_action(
            action="meeting_slot.create",
            entity_type="meeting_slot",
            entity_id=slot.id,
            payload=form.model_dump(),
        )

    return slot


def update_slot(*, slot_id: str, data: Dict[str, Any]) -> MeetingSlot:
    slot = MeetingSlot.query.filter_by(id=slot_id).first_or_404()

    form = validate_payload(MeetingSlotForm, data)
    assert_slot_window(form.start_time, form.end_time)
    values = form.model_dump(exclude_unset=True)

    with transactional():
        for field, value in values.items():
            setattr(slot, field, value)

        log_action(
            action="meeting_slot.update",
            entity_type="meeting_slot",
            entity_id=slot.id,
            payload=values,
        )

    return slot


def delete_slot(*, slot_id: str) -> None:
    slot = MeetingSlot.query.filter_by(id=slot_id).first_or_404()

    with transactional():
        db.session.delete(slot)

        log_action(
            action="meeting_slot.delete",
            entity_type="meeting_slot",
            entity_id=slot_id,
        )
