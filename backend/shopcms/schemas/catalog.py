from decimal import Decimal
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import Field

from .base import FormSchema, OrderedForm

CollectionType = Literal["business", "family", "seating"]


class CategoryForm(OrderedForm):
    name: str = Field(max_length=255)
    slug: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    parent_id: Optional[str] = None
    is_active: bool = True
    order: int = 0
    collection_type: Optional[CollectionType] = None


class ProductForm(FormSchema):
    name: str = Field(max_length=255)
    slug: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    price: Decimal = Field(ge=0)
    sale_price: Optional[Decimal] = Field(default=None, ge=0)
    category_id: Optional[str] = None
    is_featured: bool = False
    is_new_arrival: bool = False
    is_best_seller: bool = False
    is_active: bool = True
    specifications: Optional[Union[Dict[str, Any], List[Any]]] = None
    sku: Optional[str] = Field(default=None, max_length=100)
    stock_quantity: int = Field(default=0, ge=0)
    existing_images: List[str] = Field(default_factory=list)


class Position(FormSchema):
    id: str
    order: int


class CategoryReorderForm(FormSchema):
    categories: List[Position] = Field(min_length=1)


class FeatureCardReorderForm(FormSchema):
    cards: List[Position] = Field(min_length=1)


class TrustedCompanyReorderForm(FormSchema):
    companies: List[Position] = Field(min_length=1)
