from shopcms.extensions import db
from .base import BaseModel

DAY_NAMES = {
    0: "Sunday",
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
}

MEETING_TYPES = ("showroom", "video")
MEETING_STATUSES = ("pending", "confirmed", "completed", "cancelled")


class MeetingSlot(BaseModel):
    __tablename__ = "meeting_slots"

    day_of_week = db.Column(db.Integer, nullable=False, index=True)  # 0 = Sunday
    start_time = db.Column(db.String(5), nullable=False)  # HH:MM
    end_time = db.Column(db.String(5), nullable=False)
    is_active = db.Column(db.Boolean, default=True)

    @property
    def day_name(self) -> str:
        return DAY_NAMES.get(self.day_of_week, "Unknown")


class Meeting(BaseModel):
    __tablename__ = "meetings"

    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    meeting_type = db.Column(db.String(20), nullable=False)
    purpose = db.Column(db.Text, nullable=False)
    notes = db.Column(db.Text, nullable=True)
    date = db.Column(db.Date, nullable=False, index=True)
    time = db.Column(db.String(20), nullable=False)
    status = db.Column(db.String(20), nullable=False, default="pending", index=True)
    admin_notes = db.Column(db.Text, nullable=True)
    confirmed_at = db.Column(db.DateTime(timezone=True), nullable=True)
    completed_at = db.Column(db.DateTime(timezone=True), nullable=True)
    cancelled_at = db.Column(db.DateTime(timezone=True), nullable=True)


class CallbackRequest(BaseModel):
    __tablename__ = "callback_requests"

    name = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    preferred_time = db.Column(db.String(100), nullable=False)
    reason = db.Column(db.Text, nullable=False)
    notes = db.Column(db.Text, nullable=True)
    status = db.Column(db.String(20), nullable=False, default="pending", index=True)
