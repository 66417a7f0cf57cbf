from typing import Any, Dict, List, Optional

SESSION_KEY = "cart"


class Cart:
    """
    Session-scoped shopping cart.

    Lines are plain dicts so the cart survives the signed session cookie:
    ``{product_id, name, price, image, quantity}``.
    """

    def __init__(self, items: Optional[List[Dict[str, Any]]] = None):
        self.items: List[Dict[str, Any]] = [dict(item) for item in (items or [])]

    @classmethod
    def from_session(cls, session) -> "Cart":
        return cls(session.get(SESSION_KEY, []))

    def save(self, session) -> None:
        session[SESSION_KEY] = self.items

    def _find(self, product_id: str) -> Optional[Dict[str, Any]]:
        return next((item for item in self.items if item["product_id"] == product_id), None)

    def add_item(self, *, product_id: str, name: str, price: float, image: Optional[str] = None) -> None:
        existing = self._find(product_id)
        if existing:
            existing["quantity"] += 1
            return

        self.items.append({
            "product_id": product_id,
            "name": name,
            "price": float(price),
            "image": image,
            "quantity": 1,
        })

    def remove_item(self, product_id: str) -> None:
        self.items = [item for item in self.items if item["product_id"] != product_id]

    def update_quantity(self, product_id: str, quantity: int) -> None:
        if quantity <= 0:
            self.remove_item(product_id)
            return

        existing = self._find(product_id)
        if existing:
            existing["quantity"] = quantity

    def clear(self) -> None:
        self.items = []

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total_items(self) -> int:
        return sum(item["quantity"] for item in self.items)

    @property
    def total_price(self) -> float:
        return round(sum(item["price"] * item["quantity"] for item in self.items), 2)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": self.items,
            "total_items": self.total_items,
            "total_price": self.total_price,
        }
