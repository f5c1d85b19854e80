from typing import Any

import httpx

from random_wikiquote.config import get_config
from random_wikiquote.extraction.base import RemoteError
from random_wikiquote.utils.logging import get_logger, log_api_call


def create_http_client() -> httpx.AsyncClient:
    """Build an httpx client with the configured User-Agent and per-request timeout."""
    config = get_config()
    return httpx.AsyncClient(headers={"User-Agent": config.user_agent}, timeout=config.request_timeout)


class BaseWikiquoteClient:
    """Base class for talking to the Wikiquote MediaWiki API. Holds the httpx client shared by
    every stage of the quote pipeline and turns transport problems into RemoteError."""

    def __init__(self, client: httpx.AsyncClient | None = None):
        self.api_url = get_config().api_url
        self.http_client = client or create_http_client()  # Allow for dependency injection
        self.logger = get_logger(type(self).__module__)

    @log_api_call("wikiquote")
    async def _get_json(self, params: dict[str, Any]) -> dict[str, Any]:
        """GET the API with the given query parameters and return the decoded JSON object."""
        query = {"format": "json", **params}

        try:
            response = await self.http_client.get(self.api_url, params=query)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RemoteError(f"Invalid response: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise RemoteError(f"Request failed: {type(e).__name__}: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteError(f"Malformed JSON body: {e}") from e

        if not isinstance(data, dict):
            raise RemoteError(f"Expected a JSON object, got {type(data).__name__}")

        return data
