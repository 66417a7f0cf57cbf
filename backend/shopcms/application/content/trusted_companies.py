from typing import Any, Dict, Optional

from werkzeug.datastructures import FileStorage

from shopcms.extensions import db
from shopcms.models.trusted_company import TrustedCompany
from shopcms.schemas.catalog import TrustedCompanyReorderForm
from shopcms.schemas.content import TrustedCompanyForm
from shopcms.utils.audit import log_action
from shopcms.utils.media import delete_file, save_image
from shopcms.utils.order import apply_positions, require_known_positions
from shopcms.utils.transaction import transactional
from shopcms.utils.validation import validate_payload

LOGO_MAX_KB = 2048


def list_trusted_companies(*, active_only=False):
    query = TrustedCompany.query
    if active_only:
        query = query.filter_by(is_active=True)
    return query.order_by(TrustedCompany.order, TrustedCompany.name).all()


def _resolve_logo(logo: Optional[FileStorage], logo_url: Optional[str]) -> Optional[str]:
    """An uploaded file wins over a pasted URL."""
    if logo is not None:
        return save_image(logo, folder="trusted-companies", field="logo", max_kb=LOGO_MAX_KB)
    return logo_url


def create_trusted_company(*, data: Dict[str, Any], logo: Optional[FileStorage] = None) -> TrustedCompany:
    form = validate_payload(TrustedCompanyForm, data)
    values = form.model_dump(exclude={"logo_url"})
    values["logo"] = _resolve_logo(logo, form.logo_url)

    company = TrustedCompany(**values)

    with transactional():
        db.session.add(company)
        db.session.flush()

        log_action(
            action="trusted_company.create",
            entity_type="trusted_company",
            entity_id=company.id,
            payload={"name": company.name},
        )

    return company


def update_trusted_company(
    *,
    company_id: str,
    data: Dict[str, Any],
    logo: Optional[FileStorage] = None,
) -> TrustedCompany:
    """
    Update a trusted company.

    Responsibilities:
    - A new upload or logo_url replaces the logo
    - A replaced stored logo file is deleted after commit
    """
    company = TrustedCompany.query.filter_by(id=company_id).first_or_404()

    form = validate_payload(TrustedCompanyForm, data)
    values = form.model_dump(exclude={"logo_url"}, exclude_unset=True)

    old_logo = None
    new_logo = _resolve_logo(logo, form.logo_url)
    if new_logo:
        old_logo = company.logo
        values["logo"] = new_logo

    with transactional():
        for field, value in values.items():
            setattr(company, field, value)

        log_action(
            action="trusted_company.update",
            entity_type="trusted_company",
            entity_id=company.id,
            payload={"fields": sorted(values)},
        )

    if old_logo and old_logo != new_logo:
        delete_file(old_logo)

    return company


def delete_trusted_company(*, company_id: str) -> None:
    company = TrustedCompany.query.filter_by(id=company_id).first_or_404()
    logo = company.logo

    with transactional():
        db.session.delete(company)

        log_action(
            action="trusted_company.delete",
            entity_type="trusted_company",
            entity_id=company_id,
            payload={"name": company.name},
        )

    delete_file(logo)


def reorder_trusted_companies(*, data: Dict[str, Any]) -> int:
    form = validate_payload(TrustedCompanyReorderForm, data)
    positions = [position.model_dump() for position in form.companies]

    require_known_positions(TrustedCompany, positions, "companies")

    with transactional():
        updated = apply_positions(TrustedCompany, positions)

        log_action(
            action="trusted_company.reorder",
            entity_type="trusted_company",
            entity_id=None,
            payload={"positions": positions},
        )

    return updated
