# tests/conftest.py
"""
Fixtures communes : client HTTP et base Supabase en mémoire
"""
import os
import uuid
from types import SimpleNamespace

import pytest

os.environ.setdefault("CRON_SECRET", "test-cron-secret")

from fastapi.testclient import TestClient  # noqa: E402

from app.db import get_supabase  # noqa: E402
from main import app  # noqa: E402


class FakeQuery:
    """Sous-ensemble du query builder supabase-py utilisé par la couche CRUD"""

    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.rows = None
        self.filters = []
        self.bounds = None

    def insert(self, data):
        records = data if isinstance(data, list) else [data]
        inserted = []
        for record in records:
            row = dict(record)
            row.setdefault("id", str(uuid.uuid4()))
            self.db.tables.setdefault(self.table, []).append(row)
            inserted.append(row)
        self.rows = inserted
        return self

    def select(self, *columns):
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def in_(self, column, values):
        self.filters.append(lambda row: row.get(column) in values)
        return self

    def order(self, column, desc=False):
        return self

    def range(self, start, end):
        self.bounds = (start, end)
        return self

    def execute(self):
        if self.table in self.db.failing:
            raise RuntimeError(f"table {self.table} indisponible")
        if self.rows is None:
            rows = [
                row for row in self.db.tables.get(self.table, [])
                if all(check(row) for check in self.filters)
            ]
            if self.bounds:
                rows = rows[self.bounds[0]:self.bounds[1] + 1]
            self.rows = rows
        return SimpleNamespace(data=self.rows)


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.failing = set()
        self.rpc_calls = []
        self.rpc_result = []

    def table(self, name):
        return FakeQuery(self, name)

    def rpc(self, name, params):
        self.rpc_calls.append((name, params))
        if "rpc" in self.failing:
            raise RuntimeError("rpc indisponible")
        return SimpleNamespace(execute=lambda: SimpleNamespace(data=self.rpc_result))


@pytest.fixture
def fake_db():
    return FakeSupabase()


@pytest.fixture
def client(fake_db):
    app.dependency_overrides[get_supabase] = lambda: fake_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def listing_data():
    return {
        "title": "Villa 4 chambres à Ouaga 2000",
        "price": 350000,
        "quartier": "Ouaga 2000",
        "city": "Ouagadougou",
        "address": "Rue 15.22, Ouaga 2000",
        "property_type": "villa",
    }
