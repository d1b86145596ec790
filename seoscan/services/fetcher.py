"""
Bounded HTML fetcher.

Retrieves a single page under a hard wall-clock budget and a byte cap.
The body is streamed, so nothing beyond the cap is ever buffered, and the
connection is released on every exit path including timeout cancellation.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, asdict

import httpx

from seoscan.config import settings
from seoscan.core.exceptions import (
    EmptyBodyError,
    FetchError,
    FetchTimeoutError,
    NotHtmlError,
    ResponseTooLargeError,
    error_for_status,
)

logger = logging.getLogger(__name__)

ACCEPT_HTML = "text/html,application/xhtml+xml"


@dataclass
class FetchResult:
    status: int
    final_url: str
    content_type: str
    size_bytes: int
    timing_ms: int
    html: str

    def to_dict(self) -> dict:
        """Fetch metadata without the document body."""
        data = asdict(self)
        data.pop("html")
        return data


class PageFetcher:
    """Fetches a page's HTML with time, size and content-type limits."""

    def __init__(
        self,
        timeout_seconds: float | None = None,
        max_bytes: int | None = None,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout_seconds = timeout_seconds or settings.FETCH_TIMEOUT_SECONDS
        self.max_bytes = max_bytes or settings.MAX_HTML_BYTES
        self.user_agent = user_agent or settings.USER_AGENT
        self.transport = transport

    async def fetch(self, url: str) -> FetchResult:
        start_time = time.time()
        try:
            return await asyncio.wait_for(self._fetch(url, start_time), timeout=self.timeout_seconds)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning(f"Timeout fetching {url} after {self.timeout_seconds}s")
            raise FetchTimeoutError() from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Error fetching {url}: {e}")
            raise FetchError(f"Failed to fetch page: {e}") from e

    async def _fetch(self, url: str, start_time: float) -> FetchResult:
        async with httpx.AsyncClient(
            timeout=self.timeout_seconds,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent, "Accept": ACCEPT_HTML},
            transport=self.transport,
        ) as client:
            async with client.stream("GET", url) as response:
                if not response.is_success:
                    raise error_for_status(response.status_code)

                content_type = response.headers.get("content-type", "")
                if "text/html" not in content_type:
                    raise NotHtmlError()

                received = 0
                chunks: list[bytes] = []
                async for chunk in response.aiter_bytes():
                    received += len(chunk)
                    if received > self.max_bytes:
                        raise ResponseTooLargeError()
                    chunks.append(chunk)

                if received == 0:
                    raise EmptyBodyError()

                timing_ms = int((time.time() - start_time) * 1000)
                logger.debug(f"Fetched {response.url} ({received} bytes in {timing_ms}ms)")

                return FetchResult(
                    status=response.status_code,
                    final_url=str(response.url),
                    content_type=content_type,
                    size_bytes=received,
                    timing_ms=timing_ms,
                    html=b"".join(chunks).decode("utf-8", errors="replace"),
                )
