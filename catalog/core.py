from typing import Any, Dict, List, Optional

import pydantic

from .models import ProductIn

# Error types raised by the store and translated to HTTP statuses by the app,
# plus the helpers that turn raw payloads into records.

class CatalogError(Exception):
    """Base class for catalog failures."""


class ValidationError(CatalogError):
    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class NotFoundError(CatalogError):
    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id
        self.message = "Product not found"


class StorageError(CatalogError):
    """The products document could not be read or written."""


FIELD_MESSAGES = {
    "name": "Product name is required",
    "price": "Price must be a positive number",
    "category": "Category is required",
}

def parse_product_input(data: Any) -> ProductIn:
    if not isinstance(data, dict):
        raise ValidationError("Product payload must be a JSON object")
    try:
        return ProductIn.model_validate(data)
    except pydantic.ValidationError as exc:
        errors = []
        summary: List[str] = []
        for err in exc.errors():
            field = ".".join(str(part) for part in err["loc"]) or "body"
            errors.append({"field": field, "message": err["msg"]})
            text = FIELD_MESSAGES.get(field, f"{field}: {err['msg']}")
            if text not in summary:
                summary.append(text)
        raise ValidationError("; ".join(summary), errors) from exc


def _make_product_dict(product_id: int, p: ProductIn) -> Dict[str, Any]:
    return {
        "id": product_id,
        "name": p.name,
        "description": p.description,
        "price": p.price,
        "category": p.category
    }


def _next_id(records: List[Dict[str, Any]]) -> int:
    return max((int(r.get("id", 0)) for r in records), default=0) + 1
