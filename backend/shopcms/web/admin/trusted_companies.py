from flask import flash

from shopcms.application.content.trusted_companies import (
    create_trusted_company,
    delete_trusted_company,
    list_trusted_companies,
    reorder_trusted_companies,
    update_trusted_company,
)
from shopcms.inertia import redirect_back, render_page
from shopcms.normalizers.content import normalize_trusted_company
from shopcms.utils.decorators import admin_required
from shopcms.utils.forms import request_payload, require_method_override, uploaded_file
from . import admin_bp


@admin_bp.route("/trusted-companies", methods=["GET"])
@admin_required
def trusted_companies_index():
    return render_page("admin/trusted-companies/index", {
        "companies": [normalize_trusted_company(company) for company in list_trusted_companies()],
    })


@admin_bp.route("/trusted-companies", methods=["POST"])
@admin_required
def trusted_companies_store():
    create_trusted_company(data=request_payload(), logo=uploaded_file("logo"))
    flash("Trusted company created successfully", "success")
    return redirect_back("/admin/trusted-companies")


@admin_bp.route("/trusted-companies/reorder", methods=["POST"])
@admin_required
def trusted_companies_reorder():
    reorder_trusted_companies(data=request_payload())
    flash("Trusted companies reordered successfully", "success")
    return redirect_back("/admin/trusted-companies")


@admin_bp.route("/trusted-companies/<company_id>", methods=["PUT", "POST"])
@admin_required
def trusted_companies_update(company_id):
    require_method_override("PUT")
    update_trusted_company(company_id=company_id, data=request_payload(), logo=uploaded_file("logo"))
    flash("Trusted company updated successfully", "success")
    return redirect_back("/admin/trusted-companies")


@admin_bp.route("/trusted-companies/<company_id>", methods=["DELETE"])
@admin_required
def trusted_companies_destroy(company_id):
    delete_trusted_company(company_id=company_id)
    flash("Trusted company deleted successfully", "success")
    return redirect_back("/admin/trusted-companies")
