# sdk/pystore.py
import os
from typing import Any, Dict, Optional

import httpx
import requests
from rich import print


class StoreAPIError(Exception):
    """Non-2xx response from the product API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class StoreClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = None, timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = requests.Session()
        self.timeout = timeout
        if api_key:
            self.session.headers.update({"x-api-key": api_key})

    @staticmethod
    def _check(r) -> None:
        if r.status_code < 400:
            return
        try:
            message = r.json().get("message", r.text)
        except ValueError:
            message = r.text
        raise StoreAPIError(r.status_code, message)

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None):
        r = self.session.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        self._check(r)
        return r

    def welcome(self) -> str:
        return self._get("/").text

    # Products
    def list_products(self, category: Optional[str] = None, page: Optional[int] = None, limit: Optional[int] = None):
        params = {}
        if category:
            params["category"] = category
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        return self._get("/api/products", params=params).json()

    def search_products(self, q: str):
        return self._get("/api/products/search", params={"q": q}).json()

    def stats(self):
        return self._get("/api/products/stats").json()

    def get_product(self, product_id: str):
        return self._get(f"/api/products/{product_id}").json()

    def create_product(self, name: str, description: str, price: float, category: str, in_stock: bool = True):
        r = self.session.post(f"{self.base_url}/api/products", json={
            "name": name, "description": description, "price": price,
            "category": category, "inStock": in_stock
        }, timeout=self.timeout)
        self._check(r)
        return r.json()

    def update_product(self, product_id: str, **fields):
        # accepts in_stock= as well as the wire name inStock=
        if "in_stock" in fields:
            fields["inStock"] = fields.pop("in_stock")
        r = self.session.put(f"{self.base_url}/api/products/{product_id}", json=fields, timeout=self.timeout)
        self._check(r)
        return r.json()

    def delete_product(self, product_id: str) -> None:
        r = self.session.delete(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        self._check(r)

    # Async listing (example)
    async def list_products_async(self, category: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        params = {"category": category} if category else {}
        headers = {"x-api-key": self.api_key} if self.api_key else {}
        async with httpx.AsyncClient(timeout=self.timeout, transport=transport) as client:
            r = await client.get(f"{self.base_url}/api/products", params=params, headers=headers)
            self._check(r)
            return r.json()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Product API client")
    parser.add_argument("--base-url", default=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"))
    parser.add_argument("--api-key", default=os.getenv("API_KEY"))
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list-products", help="List products")
    lp.add_argument("--category", help="Filter products by category")
    lp.add_argument("--page", type=int, help="Page number (1-based)")
    lp.add_argument("--limit", type=int, help="Page size")

    sp = subparsers.add_parser("search", help="Search for products by name")
    sp.add_argument("--q", required=True, help="Substring of the product name")

    subparsers.add_parser("stats", help="Product count per category")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    cp = subparsers.add_parser("create-product", help="Create a new product")
    cp.add_argument("--name", required=True)
    cp.add_argument("--description", required=True)
    cp.add_argument("--price", type=float, required=True)
    cp.add_argument("--category", required=True)
    cp.add_argument("--out-of-stock", action="store_true", help="Mark as not in stock")

    up = subparsers.add_parser("update-product", help="Update some fields of a product")
    up.add_argument("--product-id", required=True)
    up.add_argument("--name")
    up.add_argument("--description")
    up.add_argument("--price", type=float)
    up.add_argument("--category")
    up.add_argument("--in-stock", choices=["true", "false"])

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True)

    args = parser.parse_args()
    c = StoreClient(base_url=args.base_url, api_key=args.api_key)

    if args.command == "list-products":
        print(c.list_products(args.category, args.page, args.limit))
    elif args.command == "search":
        print(c.search_products(args.q))
    elif args.command == "stats":
        print(c.stats())
    elif args.command == "get-product":
        print(c.get_product(args.product_id))
    elif args.command == "create-product":
        print(c.create_product(args.name, args.description, args.price, args.category, not args.out_of_stock))
    elif args.command == "update-product":
        fields = {k: getattr(args, k) for k in ("name", "description", "price", "category") if getattr(args, k) is not None}
        if args.in_stock is not None:
            fields["inStock"] = args.in_stock == "true"
        print(c.update_product(args.product_id, **fields))
    elif args.command == "delete-product":
        c.delete_product(args.product_id)
        print(f"[green]Deleted {args.product_id}[/green]")
