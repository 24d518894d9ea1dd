"""
Unicode Lookup Service - Optional character metadata from unicode-table.com.

Request:  POST {base_url}a-search, form body s=<query>
Response: {"result": {"c": [[code, description], ...]}}

Every failure (network error, timeout, non-200 status, bad JSON, unexpected
shape) degrades to an empty result. Nothing raises past search().
"""

from typing import Any, Optional

import httpx
from loguru import logger

from unisearch.models import CharacterInfo

DEFAULT_BASE_URL = "https://unicode-table.com/en/"
DEFAULT_TIMEOUT = 1.0

REQUEST_HEADERS = {
    "content-type": "application/x-www-form-urlencoded; charset=UTF-8",
    "accept-language": "en-US,en;q=0.9",
}


class UnicodeLookupService:
    """
    Remote character search client.

    Example:
        >>> service = UnicodeLookupService()
        >>> rows = await service.search("coffee")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Lookup site root
            timeout: Request timeout in seconds
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=REQUEST_HEADERS,
                transport=self._transport,
            )
        return self._client

    async def search(self, query: str) -> list[CharacterInfo]:
        """
        Look up characters matching a query.

        Returns:
            Rows with both code and description present; [] on any failure
        """
        try:
            client = self._get_client()
            response = await client.post("a-search", data={"s": query})
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"Unicode lookup for {query!r} failed: {e}")
            return []

        if response.status_code != httpx.codes.OK:
            logger.warning(f"Unicode lookup returned HTTP {response.status_code}")
            return []

        try:
            payload = response.json()
        except ValueError:
            logger.warning("Unicode lookup returned malformed JSON")
            return []

        return self._parse_rows(payload)

    @staticmethod
    def _parse_rows(payload: Any) -> list[CharacterInfo]:
        if not isinstance(payload, dict):
            return []
        result = payload.get("result")
        if not isinstance(result, dict):
            return []
        rows = result.get("c")
        if not isinstance(rows, list):
            return []

        characters = []
        for row in rows:
            if not isinstance(row, (list, tuple)) or len(row) < 2:
                continue
            code, description = row[0], row[1]
            if code is None or description is None:
                continue
            characters.append(CharacterInfo(code=str(code), description=str(description)))
        return characters

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
