from shopcms.extensions import db
from .base import BaseModel, utc_now

STATUS_PENDING = "pending"
STATUS_IN_PROGRESS = "in_progress"
STATUS_RESOLVED = "resolved"
MESSAGE_STATUSES = (STATUS_PENDING, STATUS_IN_PROGRESS, STATUS_RESOLVED)


class ContactMessage(BaseModel):
    __tablename__ = "contact_messages"

    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(20), nullable=True)
    subject = db.Column(db.String(100), nullable=False)
    message = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), nullable=False, default=STATUS_PENDING, index=True)
    read_at = db.Column(db.DateTime(timezone=True), nullable=True)
    replied_at = db.Column(db.DateTime(timezone=True), nullable=True)
    reply_content = db.Column(db.Text, nullable=True)
    replied_by = db.Column(db.String(255), nullable=True)

    def mark_as_read(self):
        if not self.read_at:
            self.read_at = utc_now()

    def record_reply(self, reply_content, replied_by=None):
        self.status = STATUS_RESOLVED
        self.replied_at = utc_now()
        self.reply_content = reply_content
        self.replied_by = replied_by

    def mark_as_resolved(self):
        self.status = STATUS_RESOLVED

    @property
    def is_new(self) -> bool:
        return self.status == STATUS_PENDING

    @property
    def has_reply(self) -> bool:
        return bool(self.reply_content)
