from flask import jsonify, request

from shopcms.models.audit_log import AuditLog
from shopcms.normalizers.audit import normalize_audit_log
from shopcms.normalizers.pagination import normalize_pagination
from shopcms.utils.decorators import admin_required
from shopcms.utils.pagination import keyset_page
from . import admin_bp

AUDIT_FILTERS = ("action", "entity_type", "entity_id")


@admin_bp.route("/audit-logs", methods=["GET"])
@admin_required
def audit_logs_index():
    query = AuditLog.query
    for field in AUDIT_FILTERS:
        if value := request.args.get(field):
            query = query.filter(getattr(AuditLog, field) == value)

    logs, meta = keyset_page(
        query,
        model=AuditLog,
        cursor=request.args.get("cursor"),
        direction=request.args.get("direction", "next"),
        limit=min(request.args.get("limit", 20, type=int), 100),
    )

    return jsonify(normalize_pagination(logs, normalize_audit_log, cursor=meta))
