"""Async HTTP client for the Financial Modeling Prep "stable" REST API."""

from collections.abc import Callable, Mapping
from typing import Any

import httpx

from fmp_mcp.config import get_api_key
from fmp_mcp.errors import UpstreamError
from fmp_mcp.logging import get_logger

logger = get_logger(__name__)

FMP_BASE_URL = "https://financialmodelingprep.com/stable"
API_KEY_PARAM = "apikey"


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class FMPClient:
    """Performs exactly one GET per call against the FMP API.

    The credential is resolved on every call through ``api_key_provider``
    (by default a fresh read of the environment), never at construction.
    """

    def __init__(
        self,
        base_url: str = FMP_BASE_URL,
        api_key_provider: Callable[[], str] = get_api_key,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._api_key_provider = api_key_provider
        self._transport = transport

    def build_query(self, api_key: str, params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
        """Credential first, then every parameter that is not None, stringified."""
        query = [(API_KEY_PARAM, api_key)]
        for key, value in (params or {}).items():
            if value is not None:
                query.append((key, _query_value(value)))
        return query

    async def call(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET ``{base_url}{endpoint}`` and return the decoded body.

        Args:
            endpoint: API path starting with "/" (e.g. /profile)
            params: Query parameters; None values are omitted entirely

        Returns:
            Parsed JSON, or the raw body text when a 2xx body is not JSON
            (FMP sometimes answers plan restrictions that way)

        Raises:
            ConfigError: If no API key is configured
            UpstreamError: If the API answers with a non-2xx status
            httpx.HTTPError: On transport-level failures
        """
        api_key = self._api_key_provider()
        query = self.build_query(api_key, params)
        url = f"{self.base_url}{endpoint}"

        logger.debug("fmp_request", endpoint=endpoint, params=dict(query[1:]))
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.get(url, params=query)

        if not response.is_success:
            logger.warning(
                "fmp_request_failed",
                endpoint=endpoint,
                status=response.status_code,
                reason=response.reason_phrase,
            )
            raise UpstreamError(response.status_code, response.reason_phrase, body=response.text)

        try:
            return response.json()
        except ValueError:
            return response.text
