"""Unit tests for the FMP HTTP client."""

import httpx
import pytest

from fmp_mcp.client import FMP_BASE_URL, FMPClient
from fmp_mcp.errors import ConfigError, UpstreamError


def _client(handler, api_key="test-key"):
    """Build a client whose HTTP traffic goes to ``handler``."""
    return FMPClient(
        api_key_provider=lambda: api_key,
        transport=httpx.MockTransport(handler),
    )


class TestRequestBuilding:
    """Tests for URL and query construction."""

    async def test_joins_base_url_and_endpoint(self):
        """Request goes to base URL + endpoint path with GET."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=[])

        await _client(handler).call("/profile", {"symbol": "AAPL"})

        assert seen[0].method == "GET"
        assert str(seen[0].url).startswith(f"{FMP_BASE_URL}/profile?")

    async def test_api_key_first_then_params_in_order(self):
        """Credential is the first query parameter, followed by the caller's params."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=[])

        await _client(handler).call(
            "/income-statement", {"symbol": "AAPL", "period": "annual", "limit": 5}
        )

        assert seen[0].url.params.multi_items() == [
            ("apikey", "test-key"),
            ("symbol", "AAPL"),
            ("period", "annual"),
            ("limit", "5"),
        ]

    async def test_none_values_are_omitted(self):
        """None-valued params are dropped, not sent as empty strings."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=[])

        await _client(handler).call("/historical-price-eod/light", {"symbol": "AAPL", "from": None})

        params = seen[0].url.params
        assert "from" not in params
        assert params["symbol"] == "AAPL"

    def test_build_query_stringifies_values(self):
        """Numbers and booleans are coerced to their string forms."""
        client = FMPClient(api_key_provider=lambda: "k")

        query = client.build_query("k", {"limit": 10, "flag": True, "off": False})

        assert query == [("apikey", "k"), ("limit", "10"), ("flag", "true"), ("off", "false")]


class TestResponses:
    """Tests for response handling."""

    async def test_returns_parsed_json(self):
        """A 2xx JSON body is decoded."""
        client = _client(lambda request: httpx.Response(200, json=[{"symbol": "AAPL"}]))

        assert await client.call("/quote", {"symbol": "AAPL"}) == [{"symbol": "AAPL"}]

    async def test_returns_text_for_non_json_body(self):
        """A 2xx plain-text body is returned as a string so restrictions can be detected."""
        client = _client(
            lambda request: httpx.Response(200, text="Restricted Endpoint: upgrade your plan")
        )

        result = await client.call("/batch-quote", {"symbols": "AAPL"})

        assert result == "Restricted Endpoint: upgrade your plan"

    async def test_non_2xx_raises_upstream_error(self):
        """Non-2xx status raises with status, reason and the raw body."""
        client = _client(lambda request: httpx.Response(403, text="Forbidden for your plan"))

        with pytest.raises(UpstreamError) as exc_info:
            await client.call("/historical-chart/5min", {"symbol": "AAPL"})

        assert exc_info.value.status == 403
        assert exc_info.value.status_text == "Forbidden"
        assert exc_info.value.body == "Forbidden for your plan"
        assert str(exc_info.value) == "FMP API error: 403 Forbidden"

    async def test_server_error_message(self):
        """5xx errors carry the same message format."""
        client = _client(lambda request: httpx.Response(500))

        with pytest.raises(UpstreamError, match="FMP API error: 500 Internal Server Error"):
            await client.call("/quote", {"symbol": "AAPL"})


class TestCredential:
    """Tests for credential resolution."""

    async def test_missing_key_fails_before_any_request(self, no_api_key):
        """ConfigError is raised and no HTTP request is made."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=[])

        client = FMPClient(transport=httpx.MockTransport(handler))

        with pytest.raises(ConfigError):
            await client.call("/profile", {"symbol": "AAPL"})
        assert seen == []

    async def test_key_read_from_environment_per_call(self, no_api_key, monkeypatch):
        """The default provider reads the environment at call time."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=[])

        client = FMPClient(transport=httpx.MockTransport(handler))
        monkeypatch.setenv("FMP_API_KEY", "env-key")

        await client.call("/profile", {"symbol": "AAPL"})

        assert seen[0].url.params["apikey"] == "env-key"
