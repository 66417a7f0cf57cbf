from flask import flash, redirect, request

from shopcms.application.messages.contact_messages import (
    ReplyDeliveryFailed,
    delete_message,
    list_contact_messages,
    message_stats,
    open_contact_message,
    reply_to_message,
    resolve_message,
    update_message_status,
)
from shopcms.inertia import redirect_back, render_page
from shopcms.normalizers.messages import normalize_contact_message
from shopcms.utils.decorators import admin_required, current_user_or_none
from shopcms.utils.forms import request_payload, require_method_override
from . import admin_bp


@admin_bp.route("/contact-messages", methods=["GET"])
@admin_required
def contact_messages_index():
    filters = {
        "status": request.args.get("status", ""),
        "search": request.args.get("search", ""),
    }

    messages = list_contact_messages(**filters)

    return render_page("admin/contact-messages/index", {
        "messages": [normalize_contact_message(message) for message in messages],
        "stats": message_stats(),
        "filters": filters,
    })


@admin_bp.route("/contact-messages/<message_id>", methods=["GET"])
@admin_required
def contact_messages_show(message_id):
    message = open_contact_message(message_id=message_id)
    return render_page("admin/contact-messages/show", {"message": normalize_contact_message(message)})


@admin_bp.route("/contact-messages/<message_id>", methods=["PUT", "POST"])
@admin_required
def contact_messages_update(message_id):
    require_method_override("PUT")
    update_message_status(message_id=message_id, data=request_payload())
    flash("Message status updated successfully", "success")
    return redirect_back(f"/admin/contact-messages/{message_id}")


@admin_bp.route("/contact-messages/<message_id>/reply", methods=["POST"])
@admin_required
def contact_messages_reply(message_id):
    admin = current_user_or_none()
    replied_by = admin.name or admin.email if admin else "Admin"

    try:
        reply_to_message(message_id=message_id, data=request_payload(), replied_by=replied_by)
    except ReplyDeliveryFailed as exc:
        flash(f"Failed to send reply: {exc}", "error")
        return redirect_back(f"/admin/contact-messages/{message_id}")

    flash("Reply sent successfully", "success")
    return redirect_back(f"/admin/contact-messages/{message_id}")


@admin_bp.route("/contact-messages/<message_id>/resolve", methods=["POST"])
@admin_required
def contact_messages_resolve(message_id):
    resolve_message(message_id=message_id)
    flash("Message marked as resolved", "success")
    return redirect_back(f"/admin/contact-messages/{message_id}")


@admin_bp.route("/contact-messages/<message_id>", methods=["DELETE"])
@admin_required
def contact_messages_destroy(message_id):
    delete_message(message_id=message_id)
    flash("Message deleted successfully", "success")
    return redirect("/admin/contact-messages")
