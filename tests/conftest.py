"""
Shared test fixtures for the NBP rates proxy.

Provides an async test client with the quotation provider overridden,
a recording stub provider, and factories for quotations and tables.
"""

from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.errors import RatesError
from app.schemas.rate import Quotation, QuotationTable
from app.services.nbp_client import get_quotation_provider


# --- Stub provider ---


class StubProvider:
    """Returns a fixed payload (or raises a fixed error) and records each call."""

    def __init__(self, payload: dict | None = None, error: RatesError | None = None):
        self.payload = payload
        self.error = error
        self.calls: list[dict] = []

    async def fetch_table(self, kind, code, *, date=None, last=None):
        self.calls.append({"kind": kind, "code": code, "date": date, "last": last})
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def stub_provider():
    """Stub provider with an empty payload; tests set ``payload`` or ``error``."""
    return StubProvider()


# --- Sample data factories ---


def _make_quotation(no="1/C/NBP/2022", effective_date="2022-09-08", bid=None, ask=None, mid=None):
    """Create a Quotation; rate arguments are strings turned into Decimal."""
    return Quotation(
        no=no,
        effective_date=effective_date,
        bid=Decimal(bid) if bid is not None else None,
        ask=Decimal(ask) if ask is not None else None,
        mid=Decimal(mid) if mid is not None else None,
    )


def _make_table(kind, rates, currency="funt szterling", code="GBP"):
    return QuotationTable(table=kind, currency=currency, code=code, rates=tuple(rates))


@pytest.fixture
def make_quotation():
    """Factory fixture for Quotation instances."""
    return _make_quotation


@pytest.fixture
def make_table():
    """Factory fixture for QuotationTable instances."""
    return _make_table


def mid_payload(*mids, code="GBP"):
    """NBP table A body as ``resp.json(parse_float=Decimal)`` would return it."""
    return {
        "table": "A",
        "currency": "funt szterling",
        "code": code,
        "rates": [
            {"no": f"{174 + i}/A/NBP/2022", "effectiveDate": f"2022-09-0{5 + i}", "mid": Decimal(mid)}
            for i, mid in enumerate(mids)
        ],
    }


def bid_ask_payload(*pairs, code="GBP"):
    """NBP table C body; *pairs* are ``(bid, ask)`` strings."""
    return {
        "table": "C",
        "currency": "funt szterling",
        "code": code,
        "rates": [
            {
                "no": f"{174 + i}/C/NBP/2022",
                "effectiveDate": f"2022-09-0{5 + i}",
                "bid": Decimal(bid),
                "ask": Decimal(ask),
            }
            for i, (bid, ask) in enumerate(pairs)
        ],
    }


# --- Dependency Override Helpers ---


@pytest_asyncio.fixture
async def client(stub_provider):
    """
    Async HTTP test client with get_quotation_provider overridden
    to return the stub provider.
    """
    from app.main import app

    app.dependency_overrides[get_quotation_provider] = lambda: stub_provider

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
