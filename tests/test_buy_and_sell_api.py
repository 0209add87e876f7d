"""Endpoint tests: /api/buy-and-sell (NBP table C)."""

import pytest

from app.core.errors import UpstreamBadRequestError, UpstreamNotFoundError

from conftest import bid_ask_payload, mid_payload


class TestDifferenceEndpoint:

    @pytest.mark.asyncio
    async def test_returns_difference(self, client, stub_provider):
        stub_provider.payload = bid_ask_payload(
            ("4.4321", "4.4300"), ("4.3987", "4.3887"), ("4.3456", "4.3448"),
        )

        response = await client.get("/api/buy-and-sell/GBP/difference", params={"quotations": "3"})

        assert response.status_code == 200
        assert response.text == "0.0100"
        assert response.json() == 0.01
        assert stub_provider.calls == [
            {"kind": "C", "code": "GBP", "date": None, "last": "3"}
        ]

    @pytest.mark.asyncio
    async def test_detailed(self, client, stub_provider):
        stub_provider.payload = bid_ask_payload(
            ("4.4321", "4.4300"), ("4.3987", "4.3887"), ("4.3456", "4.3448"),
        )

        response = await client.get(
            "/api/buy-and-sell/GBP/difference", params={"quotations": "3", "detailed": "true"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["difference"] == "0.0100"
        assert data["rate"]["bid"] == "4.3987"
        assert data["rate"]["ask"] == "4.3887"
        assert "mid" not in data["rate"]

    @pytest.mark.asyncio
    async def test_tie_reports_earliest(self, client, stub_provider):
        stub_provider.payload = bid_ask_payload(("1.5", "1.7"), ("2.5", "2.7"), ("1.6", "1.7"))

        response = await client.get(
            "/api/buy-and-sell/GBP/difference", params={"quotations": "3", "detailed": "true"},
        )

        data = response.json()
        assert data["difference"] == "0.2"
        assert data["rate"]["no"] == "174/C/NBP/2022"

    @pytest.mark.asyncio
    async def test_upstream_404(self, client, stub_provider):
        stub_provider.error = UpstreamNotFoundError()

        response = await client.get("/api/buy-and-sell/GBP/difference", params={"quotations": "3"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_upstream_400_message(self, client, stub_provider):
        stub_provider.error = UpstreamBadRequestError("Bad Request")

        response = await client.get("/api/buy-and-sell/GBP/difference", params={"quotations": "256"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Bad Request"

    @pytest.mark.asyncio
    async def test_invalid_quotations_400(self, client, stub_provider):
        response = await client.get("/api/buy-and-sell/GBP/difference", params={"quotations": "-12"})

        assert response.status_code == 400
        assert "positive integer" in response.json()["detail"]
        assert stub_provider.calls == []

    @pytest.mark.asyncio
    async def test_invalid_currency_400(self, client, stub_provider):
        response = await client.get("/api/buy-and-sell/XXXX/difference", params={"quotations": "12"})

        assert response.status_code == 400
        assert stub_provider.calls == []

    @pytest.mark.asyncio
    async def test_missing_quotations_400(self, client, stub_provider):
        response = await client.get("/api/buy-and-sell/GBP/difference")

        assert response.status_code == 400
        assert response.json()["detail"] == "quotations parameter is required in the path"

    @pytest.mark.asyncio
    async def test_invalid_detailed_flag_422(self, client, stub_provider):
        """Only a missing parameter gets the 400 treatment."""
        response = await client.get(
            "/api/buy-and-sell/GBP/difference", params={"quotations": "3", "detailed": "maybe"},
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_table_a_payload_500(self, client, stub_provider):
        stub_provider.payload = mid_payload("5.4322")

        response = await client.get("/api/buy-and-sell/GBP/difference", params={"quotations": "1"})

        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_empty_table_500(self, client, stub_provider):
        stub_provider.payload = bid_ask_payload()

        response = await client.get("/api/buy-and-sell/GBP/difference", params={"quotations": "1"})

        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_missing_ask_500(self, client, stub_provider):
        payload = bid_ask_payload(("1.5", "1.7"))
        del payload["rates"][0]["ask"]
        stub_provider.payload = payload

        response = await client.get("/api/buy-and-sell/GBP/difference", params={"quotations": "1"})

        assert response.status_code == 500


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
