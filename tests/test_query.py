# tests/test_query.py
import pytest

from app.core import count_by_category, filter_by_category, paginate, parse_int, search_by_name
from app.errors import ValidationError
from app.models import Product


def _p(pid, name, category):
    return Product(id=pid, name=name, description="d", price=1, category=category, in_stock=True)


PRODUCTS = [
    _p("1", "Laptop", "electronics"),
    _p("2", "Smartphone", "Electronics"),
    _p("3", "Coffee Maker", "kitchen"),
    _p("4", "Phone Case", "ELECTRONICS"),
]


def test_filter_by_category_is_case_insensitive_and_ordered():
    out = filter_by_category(PRODUCTS, "eLeCtRoNiCs")
    assert [p.id for p in out] == ["1", "2", "4"]


def test_filter_by_category_exact_match_only():
    assert filter_by_category(PRODUCTS, "electro") == []


def test_search_by_name_substring_case_insensitive():
    assert [p.id for p in search_by_name(PRODUCTS, "PHONE")] == ["2", "4"]


def test_search_no_match_is_empty():
    assert search_by_name(PRODUCTS, "zz-no-match") == []


@pytest.mark.parametrize("query", [None, ""])
def test_search_requires_query(query):
    with pytest.raises(ValidationError) as exc:
        search_by_name(PRODUCTS, query)
    assert exc.value.status_code == 400
    assert exc.value.detail == 'Query parameter "q" is required'


@pytest.mark.parametrize("raw,expected", [
    (None, 10),
    ("", 10),
    ("abc", 10),
    ("0", 10),
    ("3", 3),
    ("2abc", 2),
    (" 7", 7),
    ("1.9", 1),
    ("-2", -2),
    ("\u0662", 10),
    ("\u0663\u0665", 10),
])
def test_parse_int(raw, expected):
    assert parse_int(raw, 10) == expected


def test_paginate_defaults():
    page = paginate(PRODUCTS)
    assert page.page == 1
    assert page.limit == 10
    assert page.total == 4
    assert [p.id for p in page.data] == ["1", "2", "3", "4"]


def test_paginate_second_page_of_filtered_set():
    filtered = filter_by_category(PRODUCTS, "electronics")
    page = paginate(filtered, "2", "1")
    assert [p.id for p in page.data] == ["2"]
    assert page.total == 3
    assert (page.page, page.limit) == (2, 1)


def test_paginate_out_of_range_page_is_empty():
    page = paginate(PRODUCTS, "5", "10")
    assert page.data == []
    assert page.total == 4


def test_paginate_non_numeric_falls_back():
    page = paginate(PRODUCTS, "x", "y")
    assert (page.page, page.limit) == (1, 10)


def test_paginate_negative_page_is_empty():
    page = paginate(PRODUCTS, "-1", "2")
    assert page.data == []
    assert page.page == -1


def test_count_by_category_keeps_stored_case():
    assert count_by_category(PRODUCTS) == {
        "electronics": 1,
        "Electronics": 1,
        "kitchen": 1,
        "ELECTRONICS": 1,
    }


def test_count_by_category_empty():
    assert count_by_category([]) == {}
