# tests/conftest.py
import re
import uuid

import pytest
from postgrest.exceptions import APIError

from db.store import SupabaseStore


_EMBED = re.compile(r"(\w+):(\w+)\(([^)]*)\)")


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Just enough of the postgrest request builder for the store adapter."""

    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.action = None
        self.payload = None
        self.columns = "*"
        self.filters = []
        self.order_by = None

    def select(self, columns="*"):
        self.action = "select"
        self.columns = columns
        return self

    def insert(self, record):
        self.action = "insert"
        self.payload = dict(record)
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def _matches(self, row):
        return all(str(row.get(c)) == str(v) for c, v in self.filters)

    def _project(self, row):
        embeds = _EMBED.findall(self.columns)
        plain = [c.strip() for c in _EMBED.sub("", self.columns).split(",") if c.strip()]

        out = dict(row) if "*" in plain else {c: row.get(c) for c in plain}
        for alias, table, cols in embeds:
            wanted = [c.strip() for c in cols.split(",")]
            ref = row.get(f"{alias}_id")
            match = next((r for r in self.client.tables.get(table, []) if r["id"] == ref), None)
            out[alias] = {c: match.get(c) for c in wanted} if match else None
        return out

    def execute(self):
        self.client.calls.append((self.table, self.action))
        if (self.table, self.action) in self.client.faults:
            raise APIError({"message": f"simulated {self.action} failure on {self.table}", "code": "500"})

        rows = self.client.tables.setdefault(self.table, [])

        if self.action == "insert":
            if (self.table, self.action) in self.client.empty_responses:
                return FakeResponse([])
            row = dict(self.payload)
            row.setdefault("id", str(uuid.uuid4()))
            rows.append(row)
            return FakeResponse([dict(row)])

        if self.action == "delete":
            removed = [r for r in rows if self._matches(r)]
            self.client.tables[self.table] = [r for r in rows if not self._matches(r)]
            return FakeResponse(removed)

        selected = [r for r in rows if self._matches(r)]
        if self.order_by:
            column, desc = self.order_by
            selected = sorted(selected, key=lambda r: r.get(column) or "", reverse=desc)
        return FakeResponse([self._project(r) for r in selected])


class FakeSupabaseClient:
    def __init__(self):
        self.tables = {"customers": [], "quotations": []}
        self.faults = set()
        self.empty_responses = set()
        self.calls = []

    def table(self, name):
        return FakeQuery(self, name)

    def fail(self, table, action):
        self.faults.add((table, action))

    def seed(self, table, **row):
        row.setdefault("id", str(uuid.uuid4()))
        self.tables.setdefault(table, []).append(row)
        return row


@pytest.fixture
def fake_client():
    return FakeSupabaseClient()


@pytest.fixture
def store(fake_client):
    return SupabaseStore(fake_client)


@pytest.fixture
def owner_id():
    return "owner-1"


@pytest.fixture
def raw_intake():
    return {
        "customer_name": "Jane Doe",
        "customer_email": "",
        "customer_phone": "",
        "destination": "Dubai, UAE",
        "start_date": "2025-06-01",
        "end_date": "2025-06-10",
        "adults": 2,
        "children": 1,
        "notes": "",
    }
