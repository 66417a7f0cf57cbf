from flask import g
from shopcms.extensions import db
from shopcms.models.audit_log import AuditLog
from typing import Optional


def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    log = AuditLog()

    log.actor_id = getattr(g, "current_user_id", None)
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id or "*"
    log.payload = payload or {}

    db.session.add(log)
