from flask import current_app, render_template
from flask_mail import Message

from shopcms.extensions import mail


def send_order_confirmation(order) -> bool:
    """
    Emails the customer a summary of ``order``.

    Delivery problems are logged and swallowed: an order is never rolled
    back because the mail server is down.
    """
    message = Message(
        subject=f"Order Confirmation - {order.order_number}",
        recipients=[order.customer_email],
        body=render_template("emails/order_confirmation.txt", order=order),
    )

    try:
        mail.send(message)
    except Exception:
        current_app.logger.exception(
            "Failed to send order confirmation email for %s", order.order_number
        )
        return False
    return True


def send_contact_reply(contact_message, *, reply_content: str, replied_by: str) -> None:
    """Raises on delivery failure; the caller decides how to report it."""
    message = Message(
        subject=f"Re: {contact_message.subject}",
        recipients=[contact_message.email],
        body=render_template(
            "emails/contact_reply.txt",
            contact_message=contact_message,
            reply_content=reply_content,
            replied_by=replied_by,
        ),
    )
    mail.send(message)
