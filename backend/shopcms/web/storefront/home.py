from shopcms.application.catalog.categories import active_categories
from shopcms.application.content.feature_cards import list_feature_cards
from shopcms.application.content.trusted_companies import list_trusted_companies
from shopcms.inertia import render_page
from shopcms.normalizers.catalog import normalize_category
from shopcms.normalizers.content import normalize_feature_card, normalize_trusted_company
from . import storefront_bp


@storefront_bp.route("/", methods=["GET"])
def home():
    return render_page("home", {
        "categories": [normalize_category(category) for category in active_categories()],
        "features": [normalize_feature_card(card) for card in list_feature_cards(active_only=True)],
        "trustedCompanies": [
            normalize_trusted_company(company) for company in list_trusted_companies(active_only=True)
        ],
    })
