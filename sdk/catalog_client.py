# sdk/catalog_client.py
import requests
from typing import Any, Dict, Iterable, List, Optional
from rich import print


def filter_products(products: Iterable[Dict[str, Any]], term: str = "", category: str = "") -> List[Dict[str, Any]]:
    """Case-insensitive name search plus category filter, as the web list page does it."""
    term = (term or "").lower()
    category = (category or "").lower()
    out = []
    for p in products:
        if term not in p.get("name", "").lower():
            continue
        if category and category not in p.get("category", "").lower():
            continue
        out.append(p)
    return out


class CatalogClient:
    def __init__(self, base_url: str = "http://localhost:3001", timeout: int = 10, session: Optional[Any] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _url(self, product_id: Optional[int] = None) -> str:
        url = f"{self.base_url}/api/products"
        if product_id is not None:
            url = f"{url}/{product_id}"
        return url

    def list_products(self):
        r = self.session.get(self._url(), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: int):
        r = self.session.get(self._url(product_id), timeout=self.timeout)
        # unknown id: hand back None so callers can branch without catching
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return r.json()

    def create_product(self, name: str, price: float, category: str, description: str = ""):
        r = self.session.post(self._url(), json={
            "name": name, "description": description, "price": price, "category": category
        }, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_product(self, product_id: int, name: str, price: float, category: str, description: str = ""):
        r = self.session.put(self._url(product_id), json={
            "name": name, "description": description, "price": price, "category": category
        }, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: int) -> None:
        r = self.session.delete(self._url(product_id), timeout=self.timeout)
        r.raise_for_status()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Product catalog CLI")
    parser.add_argument("--base-url", default="http://127.0.0.1:3001", help="Catalog server URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list", help="List products")
    lp.add_argument("--search", default="", help="Only names containing this text")
    lp.add_argument("--category", default="", help="Only this category")

    gp = subparsers.add_parser("get", help="Get a product by its ID")
    gp.add_argument("--id", type=int, required=True, help="ID of the product")

    for name, help_text in (("create", "Create a product"), ("update", "Replace a product's fields")):
        sp = subparsers.add_parser(name, help=help_text)
        if name == "update":
            sp.add_argument("--id", type=int, required=True, help="ID of the product")
        sp.add_argument("--name", required=True, help="Product name")
        sp.add_argument("--price", type=float, required=True, help="Price")
        sp.add_argument("--category", required=True, help="Product category")
        sp.add_argument("--description", default="", help="Product description")

    dp = subparsers.add_parser("delete", help="Delete a product")
    dp.add_argument("--id", type=int, required=True, help="ID of the product")

    args = parser.parse_args()
    c = CatalogClient(base_url=args.base_url)

    if args.command == "list":
        print(filter_products(c.list_products(), args.search, args.category))
    elif args.command == "get":
        print(c.get_product(args.id) or f"[red]No product with id {args.id}[/red]")
    elif args.command == "create":
        print(c.create_product(args.name, args.price, args.category, args.description))
    elif args.command == "update":
        print(c.update_product(args.id, args.name, args.price, args.category, args.description))
    elif args.command == "delete":
        c.delete_product(args.id)
        print(f"[green]Deleted product {args.id}[/green]")
