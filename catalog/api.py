# catalog/api.py
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, Response, status

from .database import ProductStore
from .models import Product

# JSON REST endpoints, mounted under /api/products by create_app.
# Store errors propagate to the handlers registered in main.py.

router = APIRouter()


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


@router.get("", response_model=List[Product])
def list_products(store: ProductStore = Depends(get_store)):
    return store.list_all()


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: int, store: ProductStore = Depends(get_store)):
    return store.get_by_id(product_id)


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(payload: Any = Body(None), store: ProductStore = Depends(get_store)):
    return store.create(payload)


@router.put("/{product_id}", response_model=Product)
def update_product(
    product_id: int,
    payload: Any = Body(None),
    store: ProductStore = Depends(get_store),
):
    return store.update(product_id, payload)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, store: ProductStore = Depends(get_store)):
    store.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
