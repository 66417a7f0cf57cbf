from typing import Any, Dict

from flask_jwt_extended import create_access_token

from shopcms.models.user import User
from shopcms.schemas.auth import LoginForm
from shopcms.utils.validation import ValidationFailed, validate_payload


def authenticate_admin(*, data: Dict[str, Any]) -> User:
    """
    Admin credential check.

    Edge cases handled:
    - Unknown email and wrong password get the same message
    - Inactive accounts are treated as unknown
    - Valid customers are refused with a dedicated message
    """
    form = validate_payload(LoginForm, data)

    user = User.query.filter_by(email=form.email.lower()).first()
    if not user or not user.is_active or not user.check_password(form.password):
        raise ValidationFailed({"email": "The provided credentials are incorrect."})

    if not user.is_admin:
        raise ValidationFailed({"email": "This account does not have admin access."})

    return user


def issue_access_token(user: User) -> str:
    return create_access_token(identity=user.id, additional_claims={"role": user.role})
