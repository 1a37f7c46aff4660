# tests/test_store.py
from app.database import ProductStore
from app.models import Product


def _product(pid, name="Thing", category="misc"):
    return Product(id=pid, name=name, description="d", price=1, category=category, in_stock=True)


def test_sample_data_is_in_insertion_order(store):
    assert [p.id for p in store.list()] == ["1", "2", "3"]
    assert [p.name for p in store.list()] == ["Laptop", "Smartphone", "Coffee Maker"]
    assert len(store) == 3


def test_list_returns_a_copy(store):
    listed = store.list()
    listed.clear()
    assert len(store) == 3


def test_find_by_id():
    s = ProductStore([_product("a"), _product("b", name="Other")])
    assert s.find_by_id("b").name == "Other"
    assert s.find_by_id("zzz") is None


def test_append_goes_to_the_end(store):
    store.append(_product("x"))
    assert store.list()[-1].id == "x"
    assert len(store) == 4


def test_replace_at_keeps_position(store):
    store.replace_at("2", _product("2", name="Phone"))
    assert [p.name for p in store.list()] == ["Laptop", "Phone", "Coffee Maker"]


def test_replace_and_remove_missing_id_are_noops(store):
    store.replace_at("nope", _product("nope"))
    store.remove_by_id("nope")
    assert [p.id for p in store.list()] == ["1", "2", "3"]


def test_remove_by_id(store):
    store.remove_by_id("1")
    assert [p.id for p in store.list()] == ["2", "3"]
    assert store.find_by_id("1") is None


def test_empty_store():
    s = ProductStore()
    assert s.list() == []
    assert len(s) == 0
