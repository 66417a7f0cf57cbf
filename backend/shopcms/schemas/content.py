from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from .base import FormSchema, OrderedForm
from .fields import check_url


class PageForm(FormSchema):
    title: str = Field(max_length=255)
    slug: str = Field(max_length=255)
    content: str
    meta_title: Optional[str] = Field(default=None, max_length=255)
    meta_description: Optional[str] = Field(default=None, max_length=500)
    is_active: bool = True
    sort_order: int = 0


class FaqCategoryForm(FormSchema):
    name: str = Field(max_length=255)
    icon: Optional[str] = Field(default=None, max_length=100)
    page_slug: Optional[str] = Field(default=None, max_length=100)
    is_active: bool = True
    sort_order: int = 0


class FaqForm(FormSchema):
    faq_category_id: str
    question: str = Field(max_length=500)
    answer: str
    is_active: bool = True
    sort_order: int = 0


class FeatureCardForm(OrderedForm):
    title: str = Field(max_length=255)
    description: str
    icon: str = Field(max_length=100)
    order: int = 0
    is_active: bool = True


class TrustedCompanyForm(OrderedForm):
    name: str = Field(max_length=255)
    logo_url: Optional[str] = Field(default=None, max_length=500)
    website: Optional[str] = Field(default=None, max_length=255)
    order: int = 0
    is_active: bool = True

    @field_validator("logo_url")
    @classmethod
    def _logo_url(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else check_url(value, "logo url")

    @field_validator("website")
    @classmethod
    def _website(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else check_url(value, "website")


class ContactCardInput(FormSchema):
    icon: Optional[str] = None
    title: Optional[str] = Field(default=None, max_length=255)
    details: Optional[List[Any]] = None


class ContactPageForm(FormSchema):
    page_title: Optional[str] = Field(default=None, max_length=255)
    page_subtitle: Optional[str] = None
    form_title: Optional[str] = Field(default=None, max_length=255)
    form_subtitle: Optional[str] = None
    hours_weekday: Optional[str] = Field(default=None, max_length=255)
    hours_weekend: Optional[str] = Field(default=None, max_length=255)
    map_embed: Optional[str] = None
    contact_cards: Optional[List[ContactCardInput]] = None
    cta_title: Optional[str] = Field(default=None, max_length=255)
    cta_subtitle: Optional[str] = None
    cta_call_label: Optional[str] = Field(default=None, max_length=255)
    cta_email_label: Optional[str] = Field(default=None, max_length=255)
    cta_phone: Optional[str] = Field(default=None, max_length=255)
    cta_email: Optional[str] = Field(default=None, max_length=255)


class PageSectionInput(FormSchema):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    content: Optional[str] = None
    is_active: bool = True
    sort_order: int = 0
    items: Optional[List[Any]] = None

    @field_validator("is_active", mode="before")
    @classmethod
    def _active_default(cls, value):
        return True if value is None else value

    @field_validator("sort_order", mode="before")
    @classmethod
    def _order_default(cls, value):
        return 0 if value is None else value


class PageSectionsForm(FormSchema):
    sections: Dict[str, PageSectionInput] = Field(default_factory=dict)
