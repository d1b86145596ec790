"""
Analyze API Endpoint

Synchronous single-page SEO analysis:
URL in -> fetch + discovery -> checks -> score + recommendations.
"""

from fastapi import APIRouter, Depends

from seoscan.schemas.analysis import AnalyzeRequest, AnalyzeResponse
from seoscan.schemas.common import ErrorResponse
from seoscan.services.analyzer import analyze_url
from seoscan.services.discovery import DiscoveryProbe
from seoscan.services.fetcher import PageFetcher


router = APIRouter(prefix="/analyze", tags=["Analyze"])


def get_page_fetcher() -> PageFetcher:
    return PageFetcher()


def get_discovery_probe() -> DiscoveryProbe:
    return DiscoveryProbe()


@router.post(
    "",
    response_model=AnalyzeResponse,
    summary="Analyze a page",
    description="""
    Run a single-page SEO analysis.

    1. Normalize the URL and reject private or local targets
    2. Fetch the page (9s budget, 2 MiB cap, HTML only)
    3. Probe robots.txt and the first declared sitemap
    4. Run the check catalogue, score it and derive recommendations

    Any input or fetch error is returned as `{"error": "..."}` with status 400.
    """,
    responses={400: {"model": ErrorResponse}, 429: {"model": ErrorResponse}},
)
async def analyze_page(
    request: AnalyzeRequest,
    fetcher: PageFetcher = Depends(get_page_fetcher),
    probe: DiscoveryProbe = Depends(get_discovery_probe),
) -> AnalyzeResponse:
    """Analyze a single page."""
    report = await analyze_url(request.url, fetcher=fetcher, probe=probe)
    return AnalyzeResponse.model_validate(report.to_dict())
