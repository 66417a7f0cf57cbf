from typing import Any, Dict, Optional

from flask import current_app
from sqlalchemy import or_

from shopcms.application.notifications.mail import send_contact_reply
from shopcms.extensions import db
from shopcms.models.contact_message import (
    STATUS_IN_PROGRESS,
    STATUS_PENDING,
    STATUS_RESOLVED,
    ContactMessage,
)
from shopcms.schemas.messages import ContactForm, MessageStatusForm, ReplyForm
from shopcms.utils.audit import log_action
from shopcms.utils.transaction import transactional
from shopcms.utils.validation import validate_payload


class ReplyDeliveryFailed(Exception):
    """The reply email could not be sent; the message is left unchanged."""


def submit_contact_message(*, data: Dict[str, Any]) -> ContactMessage:
    """Public contact form. Stored as pending for the admin inbox."""
    form = validate_payload(ContactForm, data)

    message = ContactMessage(**form.model_dump())
    message.status = STATUS_PENDING

    with transactional():
        db.session.add(message)

    return message


def list_contact_messages(*, status: Optional[str] = None, search: Optional[str] = None):
    query = ContactMessage.query

    if status:
        query = query.filter(ContactMessage.status == status)

    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                ContactMessage.name.ilike(pattern),
                ContactMessage.email.ilike(pattern),
                ContactMessage.subject.ilike(pattern),
            )
        )

    return query.order_by(ContactMessage.created_at.desc()).all()


def message_stats() -> Dict[str, int]:
    return {
        "total": ContactMessage.query.count(),
        "pending": ContactMessage.query.filter_by(status=STATUS_PENDING).count(),
        "in_progress": ContactMessage.query.filter_by(status=STATUS_IN_PROGRESS).count(),
        "resolved": ContactMessage.query.filter_by(status=STATUS_RESOLVED).count(),
    }


def open_contact_message(*, message_id: str) -> ContactMessage:
    """Admin detail view; viewing marks the message read."""
    message = ContactMessage.query.filter_by(id=message_id).first_or_404()

    if not message.read_at:
        with transactional():
            message.mark_as_read()

    return message


def update_message_status(*, message_id: str, data: Dict[str, Any]) -> ContactMessage:
    message = ContactMessage.query.filter_by(id=message_id).first_or_404()
    form = validate_payload(MessageStatusForm, data)

    with transactional():
        message.status = form.status

        log_action(
            action="contact_message.status",
            entity_type="contact_message",
            entity_id=message.id,
            payload={"status": form.status},
        )

    return message


def reply_to_message(*, message_id: str, data: Dict[str, Any], replied_by: str) -> ContactMessage:
    """
    Email a reply to the sender and resolve the message.

    Raises ``ReplyDeliveryFailed`` when the mail server rejects the reply;
    nothing is recorded in that case.
    """
    message = ContactMessage.query.filter_by(id=message_id).first_or_404()
    form = validate_payload(ReplyForm, data)

    try:
        send_contact_reply(message, reply_content=form.reply_content, replied_by=replied_by)
    except Exception as exc:
        current_app.logger.error("Failed to send reply for contact message %s: %s", message.id, exc)
        raise ReplyDeliveryFailed(str(exc)) from exc

    with transactional():
        message.record_reply(form.reply_content, replied_by)

        log_action(
            action="contact_message.reply",
            entity_type="contact_message",
            entity_id=message.id,
            payload={"replied_by": replied_by},
        )

    return message


def resolve_message(*, message_id: str) -> ContactMessage:
    message = ContactMessage.query.filter_by(id=message_id).first_or_404()

    with transactional():
        message.mark_as_resolved()

        log_action(
            action="contact_message.resolve",
            entity_type="contact_message",
            entity_id=message.id,
        )

    return message


def delete_message(*, message_id: str) -> None:
    message = ContactMessage.query.filter_by(id=message_id).first_or_404()

    with transactional():
        db.session.delete(message)

        log_action(
            action="contact_message.delete",
            entity_type="contact_message",
            entity_id=message_id,
            payload={"subject": message.subject},
        )
