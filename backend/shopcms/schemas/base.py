from pydantic import BaseModel, ConfigDict, model_validator


class FormSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")


class OrderedForm(FormSchema):
    """Accepts ``sort_order`` as an alias of the ``order`` column."""

    @model_validator(mode="before")
    @classmethod
    def _sort_order_alias(cls, data):
        if isinstance(data, dict) and data.get("order") is None and data.get("sort_order") is not None:
            data = {**data, "order": data["sort_order"]}
        return data
