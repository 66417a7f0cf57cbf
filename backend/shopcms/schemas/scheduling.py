import datetime as dt
from typing import Literal, Optional

from pydantic import Field, field_validator

from .base import FormSchema
from .fields import check_email, check_hh_mm

MeetingType = Literal["showroom", "video"]
MeetingStatus = Literal["pending", "confirmed", "completed", "cancelled"]


class MeetingSlotForm(FormSchema):
    day_of_week: int = Field(ge=0, le=6)
    start_time: str
    end_time: str
    is_active: bool = True

    @field_validator("start_time")
    @classmethod
    def _start(cls, value: str) -> str:
        return check_hh_mm(value, "start time")

    @field_validator("end_time")
    @classmethod
    def _end(cls, value: str) -> str:
        return check_hh_mm(value, "end time")


class MeetingBookingForm(FormSchema):
    name: str = Field(max_length=255)
    email: str
    phone: str = Field(max_length=20)
    meeting_type: MeetingType
    purpose: str
    notes: Optional[str] = Field(default=None, max_length=1000)
    date: dt.date
    time: str

    @field_validator("email")
    @classmethod
    def _email(cls, value: str) -> str:
        return check_email(value)


class MeetingUpdateForm(FormSchema):
    status: MeetingStatus
    admin_notes: Optional[str] = Field(default=None, max_length=1000)


class CallbackForm(FormSchema):
    name: str = Field(max_length=255)
    phone: str = Field(max_length=20)
    preferred_time: str
    reason: str
    notes: Optional[str] = Field(default=None, max_length=1000)
