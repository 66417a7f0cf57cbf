from .common import iso


def normalize_contact_message(message):
    return {
        "id": message.id,
        "name": message.name,
        "email": message.email,
        "phone": message.phone,
        "subject": message.subject,
        "message": message.message,
        "status": message.status,
        "is_new": message.is_new,
        "has_reply": message.has_reply,
        "read_at": iso(message.read_at),
        "replied_at": iso(message.replied_at),
        "reply_content": message.reply_content,
        "replied_by": message.replied_by,
        "created_at": iso(message.created_at),
    }
