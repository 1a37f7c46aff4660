import uuid
from typing import Dict, List, Optional

from .core import count_by_category, filter_by_category, paginate, search_by_name
from .database import ProductStore
from .errors import NotFoundError
from .logger import get_logger
from .models import Product, ProductIn, ProductPage, ProductUpdate

# This file contains the core logic for all API endpoints.
# Routes in app.main only resolve the store and delegate here.

logger = get_logger("handlers")


async def list_products_logic(
    store: ProductStore,
    category: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> ProductPage:
    products = store.list()
    if category:
        products = filter_by_category(products, category)
    return paginate(products, page, limit)


async def search_products_logic(store: ProductStore, q: Optional[str]) -> List[Product]:
    return search_by_name(store.list(), q)


async def product_stats_logic(store: ProductStore) -> Dict[str, int]:
    return count_by_category(store.list())


async def get_product_logic(store: ProductStore, product_id: str) -> Product:
    p = store.find_by_id(product_id)
    if p is None:
        raise NotFoundError()
    return p


async def create_product_logic(store: ProductStore, payload: ProductIn) -> Product:
    product = Product(id=str(uuid.uuid4()), **payload.model_dump())
    store.append(product)
    logger.info("created product %s (%s)", product.id, product.name)
    return product


async def update_product_logic(store: ProductStore, product_id: str, payload: ProductUpdate) -> Product:
    current = await get_product_logic(store, product_id)
    updated = current.model_copy(update=payload.changes())
    store.replace_at(product_id, updated)
    logger.info("updated product %s", product_id)
    return updated


async def delete_product_logic(store: ProductStore, product_id: str) -> None:
    await get_product_logic(store, product_id)
    store.remove_by_id(product_id)
    logger.info("deleted product %s", product_id)
