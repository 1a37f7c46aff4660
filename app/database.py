from typing import Iterable, List, Optional

from .models import Product

# This file holds the in-memory product store.
# One ProductStore is built per application (see app.main.create_app) and
# everything else reaches it through that app, never through a global.

SAMPLE_PRODUCTS = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


class ProductStore:
    """Ordered in-memory collection of products.

    Insertion order is the listing order. Lookups are linear scans; callers
    check existence before replace_at/remove_by_id, which do nothing when the
    id is absent.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: List[Product] = list(products or [])

    @classmethod
    def with_sample_data(cls) -> "ProductStore":
        return cls(Product.model_validate(p) for p in SAMPLE_PRODUCTS)

    def __len__(self) -> int:
        return len(self._products)

    def _index_of(self, product_id: str) -> int:
        for i, p in enumerate(self._products):
            if p.id == product_id:
                return i
        return -1

    def list(self) -> List[Product]:
        return self._products.copy()

    def find_by_id(self, product_id: str) -> Optional[Product]:
        i = self._index_of(product_id)
        return self._products[i] if i != -1 else None

    def append(self, product: Product) -> None:
        self._products.append(product)

    def replace_at(self, product_id: str, product: Product) -> None:
        i = self._index_of(product_id)
        if i != -1:
            self._products[i] = product

    def remove_by_id(self, product_id: str) -> None:
        i = self._index_of(product_id)
        if i != -1:
            del self._products[i]
