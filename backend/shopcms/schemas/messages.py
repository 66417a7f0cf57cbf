from typing import Literal, Optional

from pydantic import Field, field_validator

from .base import FormSchema
from .fields import check_email

MessageStatus = Literal["pending", "in_progress", "resolved"]


class ContactForm(FormSchema):
    name: str = Field(max_length=255)
    email: str
    phone: Optional[str] = Field(default=None, max_length=20)
    subject: str = Field(max_length=100)
    message: str = Field(max_length=1000)

    @field_validator("email")
    @classmethod
    def _email(cls, value: str) -> str:
        return check_email(value)


class MessageStatusForm(FormSchema):
    status: MessageStatus


class ReplyForm(FormSchema):
    reply_content: str = Field(min_length=10, max_length=5000)
