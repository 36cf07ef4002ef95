"""Shared fixtures: product rows and a fake Supabase client."""

import pytest

from catalog_ui.models.product import Product


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeRequest:
    """Chainable stand-in for a PostgREST request builder."""

    def __init__(self, client):
        self._client = client

    def _record(self, name, *args, **kwargs):
        self._client.calls.append((name, args, kwargs))
        return self

    def select(self, *args, **kwargs):
        return self._record("select", *args, **kwargs)

    def or_(self, *args, **kwargs):
        return self._record("or_", *args, **kwargs)

    def eq(self, *args, **kwargs):
        return self._record("eq", *args, **kwargs)

    def order(self, *args, **kwargs):
        return self._record("order", *args, **kwargs)

    def limit(self, *args, **kwargs):
        return self._record("limit", *args, **kwargs)

    def execute(self):
        self._client.calls.append(("execute", (), {}))
        if self._client.error is not None:
            raise self._client.error
        return FakeResponse(self._client.rows)


class FakeClient:
    """Records every builder call made against it."""

    def __init__(self, rows=None, error=None):
        self.rows = rows if rows is not None else []
        self.error = error
        self.tables = []
        self.calls = []

    def table(self, name):
        self.tables.append(name)
        return FakeRequest(self)

    def call(self, name):
        """Return the arguments of every recorded call with the given name."""
        return [args for call_name, args, _ in self.calls if call_name == name]


@pytest.fixture
def fake_client():
    """Factory for FakeClient instances."""
    return FakeClient


@pytest.fixture
def product_rows():
    return [
        {
            "id": 1,
            "name": "Siemens S7-1500 CPU",
            "category": "PLC",
            "price": 18750000,
            "stock_quantity": 4,
            "status": "active",
            "is_published": True,
            "is_available_online": True,
        },
        {
            "id": 2,
            "name": "Siemens LOGO! 8",
            "category": "PLC",
            "price": 2100000,
            "stock_quantity": 1,
            "status": "suspended",
            "is_published": True,
            "is_available_online": True,
        },
        {
            "id": 3,
            "name": "Siemens SINAMICS V20",
            "category": "Inverter",
            "price": None,
            "stock_quantity": 0,
            "status": "active",
            "is_published": True,
            "is_available_online": False,
        },
        {
            "id": 4,
            "name": "Siemens SITOP Power Supply",
            "category": "Power Supply",
            "price": 0,
            "stock_quantity": 9,
            "status": "active",
            "is_published": True,
            "is_available_online": None,
        },
    ]


@pytest.fixture
def make_product():
    """Factory building products with sensible defaults."""

    def _make(id, name="Product", **kwargs):
        kwargs.setdefault("status", "active")
        kwargs.setdefault("is_published", True)
        kwargs.setdefault("is_available_online", True)
        return Product(id=id, name=name, **kwargs)

    return _make
