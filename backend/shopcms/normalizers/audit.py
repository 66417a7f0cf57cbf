from typing import Any, Dict

from shopcms.models.audit_log import AuditLog
from .common import iso


def normalize_audit_log(log: AuditLog) -> Dict[str, Any]:
    return {
        "id": log.id,
        "actor_id": log.actor_id,
        "action": log.action,
        "entity_type": log.entity_type,
        "entity_id": log.entity_id,
        "payload": log.payload or {},
        "created_at": iso(log.created_at),
    }
