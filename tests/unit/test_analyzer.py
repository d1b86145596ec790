"""
Unit tests for the single-page analysis pipeline.
"""
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from seoscan.core.exceptions import BlockedUrlError, PageNotFoundError
from seoscan.services.analyzer import analyze_url, utc_timestamp
from seoscan.services.discovery import DiscoveryProbe
from seoscan.services.fetcher import PageFetcher

from fixtures.fake_site import make_site_handler


class TestUtcTimestamp:

    def test_milliseconds_and_z_suffix(self):
        now = datetime(2026, 1, 10, 12, 0, 0, 123456, tzinfo=timezone.utc)

        assert utc_timestamp(now) == "2026-01-10T12:00:00.123Z"

    def test_converts_to_utc(self):
        now = datetime(2026, 1, 10, 14, 30, 0, tzinfo=timezone(timedelta(hours=2)))

        assert utc_timestamp(now) == "2026-01-10T12:30:00.000Z"

    def test_defaults_to_now(self):
        assert utc_timestamp().endswith("Z")


class TestAnalyzeUrl:
    """Test analyze_url against a fake site."""

    @pytest.mark.asyncio
    async def test_report(self, page_fetcher, discovery_probe):
        report = await analyze_url("example.com", fetcher=page_fetcher, probe=discovery_probe)

        assert report.input.normalized == "https://example.com/"
        assert report.score.score == 100
        assert report.discovery.sitemap.url_count == 3
        assert report.to_dict()["status"] == "ok"
        assert "html" not in report.to_dict()["fetch"]

    @pytest.mark.asyncio
    async def test_blocked_before_any_request(self):
        requested = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request.url)
            return httpx.Response(200)

        transport = httpx.MockTransport(handler)

        with pytest.raises(BlockedUrlError):
            await analyze_url(
                "127.1",
                fetcher=PageFetcher(transport=transport),
                probe=DiscoveryProbe(transport=transport),
            )

        assert requested == []

    @pytest.mark.asyncio
    async def test_fetch_error_propagates(self):
        transport = httpx.MockTransport(make_site_handler(pages={}))

        with pytest.raises(PageNotFoundError):
            await analyze_url(
                "example.com/missing",
                fetcher=PageFetcher(transport=transport),
                probe=DiscoveryProbe(transport=transport),
            )
