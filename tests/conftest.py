# tests/conftest.py
import json

import pytest
from fastapi.testclient import TestClient

from catalog.database import ProductStore
from catalog.main import create_app


@pytest.fixture
def store(tmp_path):
    s = ProductStore(tmp_path / "data" / "products.json")
    s.initialize()
    return s


@pytest.fixture
def empty_store(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps({"products": []}), encoding="utf-8")
    return ProductStore(path)


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c
