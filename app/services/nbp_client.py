"""
NBP Web API client — fetches raw quotation tables.

Architecture:
  - QuotationProvider (protocol) defines the interface
  - NBPClient calls the public NBP API (http://api.nbp.pl)
  - MockQuotationProvider serves canned tables for local development
  - NBP_MOCK=true selects the mock provider

The client only translates HTTP outcomes into the shared error taxonomy.
No caching, no retry: every request goes to NBP once and its failure is
reported as-is.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Protocol

import httpx

from app.config import settings
from app.core.errors import (
    InvalidStateError,
    UpstreamBadRequestError,
    UpstreamError,
    UpstreamNotFoundError,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Provider protocol
# ---------------------------------------------------------------------------


class QuotationProvider(Protocol):
    async def fetch_table(
        self,
        kind: str,
        code: str,
        *,
        date: str | None = None,
        last: str | None = None,
    ) -> dict[str, Any]:
        """Return the decoded JSON body of one NBP rates query."""
        ...


def build_rates_path(
    kind: str, code: str, *, date: str | None = None, last: str | None = None
) -> str:
    """
    Path of an NBP ``exchangerates/rates`` query.

    Exactly one of *date* (single day) or *last* (trailing window of
    quotations) must be given.
    """
    if (date is None) == (last is None):
        raise ValueError("Exactly one of date or last is required")
    if date is not None:
        return f"/exchangerates/rates/{kind}/{code}/{date}/"
    return f"/exchangerates/rates/{kind}/{code}/last/{last}/"


# ---------------------------------------------------------------------------
# Live NBP client
# ---------------------------------------------------------------------------


class NBPClient:
    """Calls the NBP exchange rates endpoint."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def fetch_table(
        self,
        kind: str,
        code: str,
        *,
        date: str | None = None,
        last: str | None = None,
    ) -> dict[str, Any]:
        url = f"{self._base_url}{build_rates_path(kind, code, date=date, last=last)}"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                resp = await client.get(url, headers={"Accept": "application/json"})
                resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise self._map_status_error(exc.response, url) from exc
        except httpx.RequestError as exc:
            logger.error("NBP request error for %s: %s", url, exc)
            raise UpstreamError(f"NBP request failed: {exc}") from exc

        try:
            # parse_float keeps rates exact; they never pass through float
            payload = resp.json(parse_float=Decimal)
        except ValueError as exc:
            logger.error("NBP returned invalid JSON for %s", url)
            raise InvalidStateError("NBP returned invalid JSON") from exc

        if not isinstance(payload, dict):
            raise InvalidStateError("NBP returned unexpected payload type")
        return payload

    @staticmethod
    def _map_status_error(resp: httpx.Response, url: str) -> Exception:
        status_code = resp.status_code

        if status_code == 404:
            logger.info("NBP has no data for %s", url)
            return UpstreamNotFoundError()
        if status_code == 400:
            message = resp.text.strip() or resp.reason_phrase
            logger.warning("NBP rejected %s: %s", url, message)
            return UpstreamBadRequestError(message)

        # only the status text is forwarded; the body may be an HTML page
        logger.error("NBP request failed: %s %s", status_code, url)
        return UpstreamError(resp.reason_phrase, status_code=status_code)


# ---------------------------------------------------------------------------
# Mock provider (development)
# ---------------------------------------------------------------------------

_MOCK_NAMES: dict[str, str] = {
    "GBP": "funt szterling",
    "EUR": "euro",
    "USD": "dolar amerykański",
}

_MOCK_MID: list[tuple[str, str]] = [
    ("2022-09-05", "5.4322"),
    ("2022-09-06", "5.3902"),
    ("2022-09-07", "5.4409"),
    ("2022-09-08", "5.4128"),
    ("2022-09-09", "5.4017"),
]

_MOCK_BID_ASK: list[tuple[str, str, str]] = [
    ("2022-09-05", "5.3641", "5.4725"),
    ("2022-09-06", "5.3215", "5.4290"),
    ("2022-09-07", "5.3804", "5.4891"),
    ("2022-09-08", "5.3530", "5.4612"),
    ("2022-09-09", "5.3411", "5.4490"),
]


class MockQuotationProvider:
    """Deterministic tables for a few currencies. Unknown codes answer 404."""

    async def fetch_table(
        self,
        kind: str,
        code: str,
        *,
        date: str | None = None,
        last: str | None = None,
    ) -> dict[str, Any]:
        if code not in _MOCK_NAMES or kind not in ("A", "C"):
            raise UpstreamNotFoundError()

        if kind == "A":
            rows = [
                {"no": f"{170 + i}/A/NBP/2022", "effectiveDate": day, "mid": Decimal(mid)}
                for i, (day, mid) in enumerate(_MOCK_MID)
            ]
        else:
            rows = [
                {
                    "no": f"{170 + i}/C/NBP/2022",
                    "effectiveDate": day,
                    "bid": Decimal(bid),
                    "ask": Decimal(ask),
                }
                for i, (day, bid, ask) in enumerate(_MOCK_BID_ASK)
            ]

        if date is not None:
            rows = [row for row in rows if row["effectiveDate"] == date]
            if not rows:
                raise UpstreamNotFoundError()
        elif last is not None:
            count = int(last)
            if count == 0:
                raise UpstreamBadRequestError("400 BadRequest - Invalid number of data series")
            if count > 255:
                raise UpstreamBadRequestError(
                    "400 BadRequest - Maximum size of 255 data series has been exceeded"
                )
            rows = rows[-count:]

        return {"table": kind, "currency": _MOCK_NAMES[code], "code": code, "rates": rows}


# ---------------------------------------------------------------------------
# Factory — selects provider based on config
# ---------------------------------------------------------------------------

_provider: QuotationProvider | None = None


def get_quotation_provider() -> QuotationProvider:
    """Return the configured quotation provider (cached after first call)."""
    global _provider
    if _provider is not None:
        return _provider

    if settings.NBP_MOCK:
        logger.info("Using MockQuotationProvider for NBP tables")
        _provider = MockQuotationProvider()
    else:
        logger.info("Using NBPClient (live API at %s)", settings.NBP_API_URL)
        _provider = NBPClient(
            base_url=settings.NBP_API_URL,
            timeout=settings.NBP_TIMEOUT_SECONDS,
        )
    return _provider


def set_quotation_provider(provider: QuotationProvider | None) -> None:
    """Override the quotation provider (used in tests)."""
    global _provider
    _provider = provider
