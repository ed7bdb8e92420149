# tests/test_store.py
import json

import pytest

from catalog.core import NotFoundError, StorageError, ValidationError
from catalog.database import SEED_PRODUCTS, ProductStore


def test_initialize_seeds_missing_document(tmp_path):
    path = tmp_path / "nested" / "dir" / "products.json"
    s = ProductStore(path)
    s.initialize()
    doc = json.loads(path.read_text(encoding="utf-8"))
    assert [p["id"] for p in doc["products"]] == [1, 2, 3]
    assert doc["products"][0]["name"] == "Laptop Pro"


def test_initialize_keeps_existing_document(empty_store):
    empty_store.initialize()
    assert empty_store.list_all() == []


def test_initialize_fails_when_directory_is_a_file(tmp_path):
    blocker = tmp_path / "data"
    blocker.write_text("not a directory")
    with pytest.raises(StorageError):
        ProductStore(blocker / "products.json").initialize()


def test_initialize_rejects_corrupt_document(tmp_path):
    path = tmp_path / "products.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageError):
        ProductStore(path).initialize()


def test_document_without_products_list_is_a_storage_error(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps({"items": []}), encoding="utf-8")
    with pytest.raises(StorageError):
        ProductStore(path).list_all()


def test_create_on_empty_store_assigns_id_one(empty_store):
    created = empty_store.create({"name": "Pen", "price": 1.5, "category": "office"})
    assert created.id == 1
    products = empty_store.list_all()
    assert len(products) == 1
    assert products[0].id == 1
    assert products[0].description == ""


def test_created_ids_exceed_existing(store):
    for i in range(5):
        existing = [p.id for p in store.list_all()]
        created = store.create({"name": f"Item {i}", "price": 2, "category": "misc"})
        assert created.id > max(existing)


def test_id_follows_max_not_count(store):
    store.delete(1)
    created = store.create({"name": "Lamp", "price": 20, "category": "home"})
    assert created.id == 4


def test_get_after_create_matches(store):
    created = store.create({"name": "Desk", "description": "Oak", "price": 150.0, "category": "home"})
    assert store.get_by_id(created.id) == created


def test_create_persists_whole_document(store):
    created = store.create({"name": "Desk", "price": 150.0, "category": "home"})
    doc = json.loads(store.path.read_text(encoding="utf-8"))
    assert doc["products"][-1] == created.model_dump()
    assert len(doc["products"]) == len(SEED_PRODUCTS) + 1


@pytest.mark.parametrize("price", [0, -5])
def test_non_positive_price_rejected(store, price):
    with pytest.raises(ValidationError) as info:
        store.create({"name": "Pen", "price": price, "category": "office"})
    assert "Price must be a positive number" in info.value.message


def test_decimal_price_accepted(store):
    assert store.create({"name": "Pen", "price": 10.5, "category": "office"}).price == 10.5


def test_empty_name_rejected(store):
    with pytest.raises(ValidationError) as info:
        store.create({"name": "   ", "price": 1, "category": "office"})
    assert info.value.errors[0]["field"] == "name"


def test_missing_category_rejected(store):
    with pytest.raises(ValidationError):
        store.create({"name": "Pen", "price": 1})


def test_non_numeric_price_rejected(store):
    with pytest.raises(ValidationError):
        store.create({"name": "Pen", "price": "cheap", "category": "office"})


def test_non_mapping_payload_rejected(store):
    with pytest.raises(ValidationError):
        store.create(["Pen", 1, "office"])


def test_failed_create_leaves_document_untouched(store):
    before = store.path.read_text(encoding="utf-8")
    with pytest.raises(ValidationError):
        store.create({"name": "", "price": 1, "category": "office"})
    assert store.path.read_text(encoding="utf-8") == before


def test_update_keeps_id_and_replaces_fields(store):
    updated = store.update(1, {"id": 99, "name": "Pen Pro", "price": 2.0, "category": "office"})
    assert updated.id == 1
    assert updated.name == "Pen Pro"
    assert updated.description == ""
    assert store.get_by_id(1) == updated
    with pytest.raises(NotFoundError):
        store.get_by_id(99)


def test_update_unknown_id(store):
    with pytest.raises(NotFoundError):
        store.update(42, {"name": "Ghost", "price": 1, "category": "x"})


def test_update_validates_input(store):
    with pytest.raises(ValidationError):
        store.update(1, {"name": "Laptop", "price": 0, "category": "electronics"})
    assert store.get_by_id(1).price == 1299.99


def test_delete_then_get_is_not_found(store):
    store.delete(2)
    assert [p.id for p in store.list_all()] == [1, 3]
    with pytest.raises(NotFoundError):
        store.get_by_id(2)


def test_delete_unknown_id(store):
    with pytest.raises(NotFoundError):
        store.delete(2000)


def test_boolean_price_rejected(store):
    with pytest.raises(ValidationError) as info:
        store.create({"name": "Pen", "price": True, "category": "office"})
    assert info.value.errors[0]["field"] == "price"
    assert len(store.list_all()) == 3


def test_numeric_string_price_accepted(store):
    assert store.create({"name": "Pen", "price": "3.25", "category": "office"}).price == 3.25


def test_initialize_marks_store_ready(tmp_path):
    s = ProductStore(tmp_path / "products.json")
    assert not s.initialized
    s.initialize()
    assert s.initialized
