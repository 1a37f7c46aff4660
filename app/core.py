import re
from collections import Counter
from typing import Dict, List, Optional, Sequence

from .errors import ValidationError
from .models import Product, ProductPage

# Query helpers over a sequence of products. None of these touch the store;
# they take a list and hand back a new one.

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"\s*[+-]?[0-9]+")


def parse_int(raw: Optional[str], default: int) -> int:
    """
    Lenient query-string integer: reads a leading integer ("2abc" -> 2),
    and falls back to `default` when there is none or it parses to 0.
    """
    if raw is None:
        return default
    m = _LEADING_INT.match(raw)
    if not m:
        return default
    return int(m.group(0)) or default


def filter_by_category(products: Sequence[Product], category: str) -> List[Product]:
    wanted = category.lower()
    return [p for p in products if p.category.lower() == wanted]


def search_by_name(products: Sequence[Product], query: Optional[str]) -> List[Product]:
    if not query:
        raise ValidationError('Query parameter "q" is required')
    term = query.lower()
    return [p for p in products if term in p.name.lower()]


def paginate(products: Sequence[Product], page: Optional[str] = None, limit: Optional[str] = None) -> ProductPage:
    page_n = parse_int(page, DEFAULT_PAGE)
    limit_n = parse_int(limit, DEFAULT_LIMIT)
    offset = (page_n - 1) * limit_n
    start = max(offset, 0)
    end = max(offset + limit_n, start)
    return ProductPage(
        data=list(products[start:end]),
        total=len(products),
        page=page_n,
        limit=limit_n,
    )


def count_by_category(products: Sequence[Product]) -> Dict[str, int]:
    # categories are counted as stored, no case folding
    return dict(Counter(p.category for p in products))
