"""
Server-rendered HTML pages.

The page handlers never touch the store.  They call the JSON API through
an httpx client bound to the running app, exactly like any other HTTP
client, and hand the decoded data to the Jinja2 templates.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import httpx
from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))

API_BASE_URL = "http://catalog.internal"

router = APIRouter()


def api_client(request: Request) -> httpx.AsyncClient:
    transport = httpx.ASGITransport(app=request.app)
    return httpx.AsyncClient(transport=transport, base_url=API_BASE_URL)


def render_error(request: Request, message: str, status_code: int):
    return templates.TemplateResponse(
        request,
        "error.html",
        {"title": "Error", "message": message, "status": status_code},
        status_code=status_code,
    )


def _error_message(response: httpx.Response, default: str) -> str:
    try:
        return response.json().get("message") or default
    except ValueError:
        return default


def _categories(products: List[Dict[str, Any]]) -> List[str]:
    return sorted({p["category"] for p in products if p.get("category")})


@router.get("/")
async def home(request: Request):
    return templates.TemplateResponse(request, "home.html", {"title": "Home"})


@router.get("/products")
async def products_index(request: Request):
    try:
        async with api_client(request) as client:
            response = await client.get("/api/products")
        response.raise_for_status()
        products = response.json()
    except httpx.HTTPError as exc:
        logger.error("Error fetching products: %s", exc)
        return render_error(request, "Failed to fetch products", 500)

    return templates.TemplateResponse(
        request,
        "products/index.html",
        {"title": "Products", "products": products, "categories": _categories(products)},
    )


@router.get("/products/new")
async def new_product(request: Request):
    return templates.TemplateResponse(
        request, "products/form.html", {"title": "Add Product", "product": None}
    )


async def _fetch_product(request: Request, product_id: str):
    async with api_client(request) as client:
        response = await client.get(f"/api/products/{product_id}")
    if response.status_code != 200:
        return None
    return response.json()


@router.get("/products/{product_id}/edit")
async def edit_product(request: Request, product_id: str):
    product = await _fetch_product(request, product_id)
    if product is None:
        return render_error(request, "Product not found", 404)
    return templates.TemplateResponse(
        request, "products/form.html", {"title": "Edit Product", "product": product}
    )


@router.get("/products/{product_id}")
async def show_product(request: Request, product_id: str):
    product = await _fetch_product(request, product_id)
    if product is None:
        return render_error(request, "Product not found", 404)
    return templates.TemplateResponse(
        request, "products/show.html", {"title": product["name"], "product": product}
    )


@router.post("/products")
async def create_product_form(request: Request):
    form = await request.form()
    async with api_client(request) as client:
        response = await client.post("/api/products", json=dict(form))
    if response.status_code not in (200, 201):
        return render_error(request, _error_message(response, "Failed to create product"), 400)
    return RedirectResponse("/products", status_code=303)


@router.post("/products/{product_id}")
async def update_product_form(request: Request, product_id: str):
    form = await request.form()
    async with api_client(request) as client:
        response = await client.put(f"/api/products/{product_id}", json=dict(form))
    if response.status_code != 200:
        return render_error(request, _error_message(response, "Failed to update product"), 400)
    return RedirectResponse(f"/products/{product_id}", status_code=303)
