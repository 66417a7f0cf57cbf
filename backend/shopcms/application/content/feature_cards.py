from typing import Any, Dict

from shopcms.extensions import db
from shopcms.models.feature_card import FeatureCard
from shopcms.schemas.catalog import FeatureCardReorderForm
from shopcms.schemas.content import FeatureCardForm
from shopcms.utils.audit import log_action
from shopcms.utils.order import apply_positions, require_known_positions
from shopcms.utils.transaction import transactional
from shopcms.utils.validation import validate_payload


def list_feature_cards(*, active_only=False):
    query = FeatureCard.query
    if active_only:
        query = query.filter_by(is_active=True)
    return query.order_by(FeatureCard.order, FeatureCard.created_at).all()


def create_feature_card(*, data: Dict[str, Any]) -> FeatureCard:
    form = validate_payload(FeatureCardForm, data)
    card = FeatureCard(**form.model_dump())

    with transactional():
        db.session.add(card)
        db.session.flush()

        log_action(
            action="feature_card.create",
            entity_type="feature_card",
            entity_id=card.id,
            payload={"title": card.title},
        )

    return card


def update_feature_card(*, card_id: str, data: Dict[str, Any]) -> FeatureCard:
    card = FeatureCard.query.filter_by(id=card_id).first_or_404()

    form = validate_payload(FeatureCardForm, data)
    values = form.model_dump(exclude_unset=True)

    with transactional():
        for field, value in values.items():
            setattr(card, field, value)

        log_action(
            action="feature_card.update",
            entity_type="feature_card",
            entity_id=card.id,
            payload={"fields": sorted(values)},
        )

    return card


def delete_feature_card(*, card_id: str) -> None:
    card = FeatureCard.query.filter_by(id=card_id).first_or_404()

    with transactional():
        db.session.delete(card)

        log_action(
            action="feature_card.delete",
            entity_type="feature_card",
            entity_id=card_id,
            payload={"title": card.title},
        )


def reorder_feature_cards(*, data: Dict[str, Any]) -> int:
    form = validate_payload(FeatureCardReorderForm, data)
    positions = [position.model_dump() for position in form.cards]

    require_known_positions(FeatureCard, positions, "cards")

    with transactional():
        updated = apply_positions(FeatureCard, positions)

        log_action(
            action="feature_card.reorder",
            entity_type="feature_card",
            entity_id=None,
            payload={"positions": positions},
        )

    return updated
