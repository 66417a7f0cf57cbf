from typing import Optional

from .base import FormSchema


class LoginForm(FormSchema):
    email: str
    password: str
    remember: Optional[bool] = False
