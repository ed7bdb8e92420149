# catalog/models.py
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductIn(BaseModel):
    """Fields a client may set on a product. ``id`` is never accepted."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    description: str = ""
    price: float = Field(..., gt=0, allow_inf_nan=False)
    category: str = Field(..., min_length=1)

    @field_validator("description", mode="before")
    @classmethod
    def _blank_description(cls, v):
        return "" if v is None else v

    @field_validator("price", mode="before")
    @classmethod
    def _no_bool_price(cls, v):
        # bool is an int subclass; lax float coercion would store true as 1.0
        if isinstance(v, bool):
            raise ValueError("price must be a number")
        return v


class Product(ProductIn):
    id: int
