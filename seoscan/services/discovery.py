"""
robots.txt and sitemap discovery.

Every probe is best-effort: failures are logged and reported as a negative
result, never raised. Only the first sitemap declared in robots.txt is
fetched, which bounds the probe to at most two requests. Each request is
capped in wall-clock time and in body size.
"""

import asyncio
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field, asdict
from urllib.parse import urljoin

import httpx

from seoscan.config import settings
from seoscan.core.exceptions import BlockedUrlError, InvalidUrlError
from seoscan.services.url_guard import assert_safe_url

logger = logging.getLogger(__name__)


@dataclass
class RobotsInfo:
    reachable: bool = False
    sitemap_urls: list[str] = field(default_factory=list)


@dataclass
class SitemapInfo:
    fetched: bool = False
    url_count: int | None = None


@dataclass
class DiscoveryResult:
    robots: RobotsInfo = field(default_factory=RobotsInfo)
    sitemap: SitemapInfo = field(default_factory=SitemapInfo)

    def to_dict(self) -> dict:
        return asdict(self)


def parse_sitemap_directives(robots_content: str) -> list[str]:
    """Collect Sitemap: URLs from robots.txt in file order."""
    sitemap_urls = []
    for line in robots_content.split("\n"):
        line = line.strip()
        if line.lower().startswith("sitemap:"):
            url = line.split(":", 1)[1].strip()
            if url:
                sitemap_urls.append(url)
    return sitemap_urls


def _localname(tag: str) -> str:
    if "}" in tag:
        return tag.rsplit("}", 1)[-1]
    return tag


def count_sitemap_entries(xml_content: str | bytes) -> int:
    """Count <url> entries of a urlset or <sitemap> entries of an index.

    Raises ET.ParseError on malformed XML.
    """
    root = ET.fromstring(xml_content)
    root_name = _localname(root.tag)
    children = [_localname(child.tag) for child in root if isinstance(child.tag, str)]

    if root_name == "urlset" and "url" in children:
        return children.count("url")
    if root_name == "sitemapindex" and "sitemap" in children:
        return children.count("sitemap")
    return 0


class DiscoveryProbe:
    """Fetches robots.txt and the first declared sitemap for a site."""

    def __init__(
        self,
        timeout_seconds: float | None = None,
        max_bytes: int | None = None,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout_seconds = timeout_seconds or settings.DISCOVERY_TIMEOUT_SECONDS
        self.max_bytes = max_bytes or settings.MAX_DISCOVERY_BYTES
        self.user_agent = user_agent or settings.USER_AGENT
        self.transport = transport

    def _client(self, accept: str) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout_seconds,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent, "Accept": accept},
            transport=self.transport,
        )

    async def probe(self, url: str) -> DiscoveryResult:
        robots = await self.fetch_robots(url)

        sitemap = SitemapInfo()
        if robots.sitemap_urls:
            sitemap = await self.fetch_sitemap(robots.sitemap_urls[0])

        return DiscoveryResult(robots=robots, sitemap=sitemap)

    async def _get_body(self, url: str, accept: str) -> bytes | None:
        """GET url within the wall-clock budget and byte cap.

        Returns None on any failure; nothing is raised.
        """
        try:
            return await asyncio.wait_for(self._download(url, accept), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(f"Timeout fetching {url} after {self.timeout_seconds}s")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Failed to fetch {url}: {e}")
        return None

    async def _download(self, url: str, accept: str) -> bytes | None:
        async with self._client(accept) as client:
            async with client.stream("GET", url) as response:
                if not response.is_success:
                    logger.info(f"Not reachable ({response.status_code}): {url}")
                    return None

                received = 0
                chunks: list[bytes] = []
                async for chunk in response.aiter_bytes():
                    received += len(chunk)
                    if received > self.max_bytes:
                        logger.warning(f"Response from {url} exceeds {self.max_bytes} bytes")
                        return None
                    chunks.append(chunk)

                return b"".join(chunks)

    async def fetch_robots(self, origin: str) -> RobotsInfo:
        robots_url = urljoin(origin, "/robots.txt")
        body = await self._get_body(robots_url, "text/plain")
        if body is None:
            return RobotsInfo()

        sitemap_urls = parse_sitemap_directives(body.decode("utf-8", errors="replace"))
        logger.debug(f"Loaded robots.txt from {robots_url} ({len(sitemap_urls)} sitemaps)")
        return RobotsInfo(reachable=True, sitemap_urls=sitemap_urls)

    async def fetch_sitemap(self, sitemap_url: str) -> SitemapInfo:
        # robots.txt is remote input; it must not steer the probe inward
        try:
            assert_safe_url(sitemap_url)
        except (BlockedUrlError, InvalidUrlError) as e:
            logger.warning(f"Skipping sitemap {sitemap_url}: {e}")
            return SitemapInfo()

        body = await self._get_body(sitemap_url, "application/xml,text/xml")
        if body is None:
            return SitemapInfo()

        try:
            url_count = count_sitemap_entries(body)
        except ET.ParseError as e:
            logger.warning(f"Invalid sitemap XML at {sitemap_url}: {e}")
            return SitemapInfo()

        return SitemapInfo(fetched=True, url_count=url_count)
