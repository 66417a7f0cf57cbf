from flask import flash, jsonify, request

from shopcms.application.scheduling.meetings import (
    active_slots,
    availability,
    book_meeting,
    parse_day,
    request_callback,
)
from shopcms.inertia import redirect_back, render_page
from shopcms.normalizers.scheduling import normalize_slot
from shopcms.utils.forms import request_payload
from shopcms.utils.http import wants_json
from . import storefront_bp


@storefront_bp.route("/meeting/schedule", methods=["GET"])
def meeting_schedule():
    return render_page("meeting/schedule", {
        "slots": [normalize_slot(slot) for slot in active_slots()],
    })


@storefront_bp.route("/meeting/schedule", methods=["POST"])
def meeting_book():
    book_meeting(data=request_payload())
    flash("Meeting scheduled successfully! We will send you a confirmation email shortly.", "success")
    return redirect_back("/meeting/schedule")


@storefront_bp.route("/meeting/availability", methods=["GET"])
def meeting_availability():
    result = availability(on=parse_day(request.args.get("date")))

    if wants_json():
        return jsonify(result)

    return render_page("meeting/availability", result)


@storefront_bp.route("/meeting/callback", methods=["GET"])
def meeting_callback():
    return render_page("meeting/callback")


@storefront_bp.route("/meeting/callback", methods=["POST"])
def meeting_callback_submit():
    request_callback(data=request_payload())
    flash("Callback request submitted! Our team will call you soon.", "success")
    return redirect_back("/meeting/callback")
