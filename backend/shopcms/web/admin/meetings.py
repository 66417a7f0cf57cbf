from flask import flash, jsonify, redirect, request

from shopcms.application.scheduling.meetings import (
    calendar_meetings,
    create_slot,
    delete_meeting,
    delete_slot,
    get_meeting,
    list_callbacks,
    list_meetings,
    list_slots,
    meeting_stats,
    update_meeting,
    update_slot,
)
from shopcms.inertia import redirect_back, render_page
from shopcms.normalizers.scheduling import (
    normalize_calendar_event,
    normalize_callback,
    normalize_meeting,
    normalize_slot,
)
from shopcms.utils.decorators import admin_required
from shopcms.utils.forms import request_payload, require_method_override
from . import admin_bp

SETTINGS_URL = "/admin/meetings/settings"


@admin_bp.route("/meetings", methods=["GET"])
@admin_required
def meetings_index():
    filters = {
        "status": request.args.get("status", ""),
        "meeting_type": request.args.get("meeting_type", ""),
        "from_date": request.args.get("from_date", ""),
        "to_date": request.args.get("to_date", ""),
        "search": request.args.get("search", ""),
    }

    return render_page("admin/meetings/index", {
        "meetings": [normalize_meeting(meeting) for meeting in list_meetings(**filters)],
        "callbacks": [normalize_callback(callback) for callback in list_callbacks()],
        "stats": meeting_stats(),
        "filters": filters,
    })


@admin_bp.route("/meetings/calendar-events", methods=["GET"])
@admin_required
def meetings_calendar_events():
    meetings = calendar_meetings(start=request.args.get("start"), end=request.args.get("end"))
    return jsonify([normalize_calendar_event(meeting) for meeting in meetings])


@admin_bp.route("/meetings/settings", methods=["GET"])
@admin_required
def meetings_settings():
    return render_page("admin/meetings/settings", {
        "slots": [normalize_slot(slot) for slot in list_slots()],
    })


@admin_bp.route("/meetings/slots", methods=["POST"])
@admin_required
def meeting_slots_store():
    create_slot(data=request_payload())
    flash("Meeting slot added successfully", "success")
    return redirect_back(SETTINGS_URL)


@admin_bp.route("/meetings/slots/<slot_id>", methods=["PUT", "POST"])
@admin_required
def meeting_slots_update(slot_id):
    require_method_override("PUT")
    update_slot(slot_id=slot_id, data=request_payload())
    flash("Meeting slot updated successfully", "success")
    return redirect_back(SETTINGS_URL)


@admin_bp.route("/meetings/slots/<slot_id>", methods=["DELETE"])
@admin_required
def meeting_slots_destroy(slot_id):
    delete_slot(slot_id=slot_id)
    flash("Meeting slot deleted successfully", "success")
    return redirect_back(SETTINGS_URL)


@admin_bp.route("/meetings/<meeting_id>", methods=["GET"])
@admin_required
def meetings_show(meeting_id):
    return render_page("admin/meetings/show", {"meeting": normalize_meeting(get_meeting(meeting_id))})


@admin_bp.route("/meetings/<meeting_id>", methods=["PUT", "POST"])
@admin_required
def meetings_update(meeting_id):
    require_method_override("PUT")
    update_meeting(meeting_id=meeting_id, data=request_payload())
    flash("Meeting updated successfully", "success")
    return redirect_back(f"/admin/meetings/{meeting_id}")


@admin_bp.route("/meetings/<meeting_id>", methods=["DELETE"])
@admin_required
def meetings_destroy(meeting_id):
    delete_meeting(meeting_id=meeting_id)
    flash("Meeting deleted successfully", "success")
    return redirect("/admin/meetings")
