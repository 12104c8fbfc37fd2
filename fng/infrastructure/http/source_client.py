"""HTTP adapter for the SentimentSource port."""

import asyncio
import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from fng.domain.reading.model.value import SourceReading
from fng.domain.reading.port.source import SentimentSource
from fng.domain.shared.error import FetchError

logger = logging.getLogger(__name__)

# Looks like the mobile app's own requests; the origin occasionally blocks
# obvious bot traffic. Best-effort only.
BROWSER_HEADERS: dict[str, str] = {
    "User-Agent": "Mozilla/5.0 (Linux; Android 13; FnGApp)",
    "Accept": "*/*",
    "Accept-Language": "en-US,en;q=0.9,ko;q=0.8",
    "Cache-Control": "no-cache",
}

DEFAULT_TIMEOUT = 12.0


class HttpSentimentSource(SentimentSource):
    """Fetches a Fear & Greed payload with httpx under a hard deadline."""

    def __init__(self, client: httpx.AsyncClient, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = client
        self._timeout = timeout

    async def fetch(self, url: str) -> SourceReading:
        try:
            return await self._fetch(url)
        except FetchError:
            raise
        except Exception as e:
            # Decoder or validator failures outside the cases handled below
            raise FetchError(f"{type(e).__name__}: {e} @ {url}", url=url) from e

    async def _fetch(self, url: str) -> SourceReading:
        response = await self._get(url)
        if not response.is_success:
            raise FetchError(f"HTTP {response.status_code} @ {url}", url=url)

        payload = self._decode(response, url)
        return self._extract(payload, url)

    async def _get(self, url: str) -> httpx.Response:
        # asyncio.timeout bounds the whole exchange (connect, headers and body);
        # on expiry the in-flight request is cancelled.
        try:
            async with asyncio.timeout(self._timeout):
                response = await self._client.get(url, headers=BROWSER_HEADERS)
                return response
        except TimeoutError as e:
            raise FetchError(f"Timed out after {self._timeout:g}s @ {url}", url=url) from e
        except httpx.HTTPError as e:
            raise FetchError(f"{type(e).__name__}: {e} @ {url}", url=url) from e

    @staticmethod
    def _decode(response: httpx.Response, url: str) -> Any:
        # The origin sometimes serves JSON with an odd content type or
        # encoding; retry through the charset-aware text decoder.
        try:
            return response.json()
        except (ValueError, RecursionError):
            logger.debug("JSON decode failed for %s, retrying via text", url)
        try:
            return json.loads(response.text)
        except (ValueError, RecursionError) as e:
            raise FetchError(f"Body is not JSON @ {url}", url=url) from e

    @staticmethod
    def _extract(payload: Any, url: str) -> SourceReading:
        block = payload.get("fear_and_greed") if isinstance(payload, dict) else None
        if not isinstance(block, dict):
            raise FetchError(f"Payload missing fear_and_greed @ {url}", url=url)

        try:
            return SourceReading(score=block.get("score"), timestamp=block.get("timestamp"))
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors())
            raise FetchError(f"Payload missing or invalid fields ({fields}) @ {url}", url=url) from e
