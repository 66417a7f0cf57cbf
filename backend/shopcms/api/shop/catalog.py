from flask import jsonify

from shopcms.application.catalog.categories import active_categories
from shopcms.application.content.feature_cards import list_feature_cards
from shopcms.application.content.trusted_companies import list_trusted_companies
from shopcms.normalizers.catalog import normalize_category
from shopcms.normalizers.content import normalize_feature_card, normalize_trusted_company
from . import shop_api_bp


@shop_api_bp.route("/feature-cards", methods=["GET"])
def feature_cards():
    return jsonify([normalize_feature_card(card) for card in list_feature_cards(active_only=True)])


@shop_api_bp.route("/trusted-companies", methods=["GET"])
def trusted_companies():
    companies = list_trusted_companies(active_only=True)
    return jsonify([normalize_trusted_company(company) for company in companies])


@shop_api_bp.route("/categories", methods=["GET"])
def categories():
    return jsonify([normalize_category(category) for category in active_categories()])
