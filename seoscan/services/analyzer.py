"""
Single-page analysis pipeline.

URL in -> safety gate -> page fetch (with discovery probing in parallel)
-> metadata + content extraction -> checks -> score -> recommendations.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from seoscan.services.advisor import Recommendation, generate_recommendations
from seoscan.services.content_extractor import ContentStructure, extract_content
from seoscan.services.discovery import DiscoveryProbe, DiscoveryResult
from seoscan.services.fetcher import FetchResult, PageFetcher
from seoscan.services.meta_extractor import SeoMeta, extract_seo_meta
from seoscan.services.rule_engine import CheckResult, run_checks
from seoscan.services.scorer import ScoreResult, calculate_score
from seoscan.services.url_guard import assert_safe_url, normalize_url

logger = logging.getLogger(__name__)


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC time with milliseconds and a Z suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class AnalysisInput:
    raw: str
    normalized: str
    timestamp: str


@dataclass
class AnalysisReport:
    input: AnalysisInput
    fetch: FetchResult
    seo: SeoMeta
    content: ContentStructure
    discovery: DiscoveryResult
    checks: list[CheckResult] = field(default_factory=list)
    score: ScoreResult | None = None
    recommendations: list[Recommendation] = field(default_factory=list)
    status: str = "ok"

    def to_dict(self) -> dict:
        return {
            "input": vars(self.input),
            "fetch": self.fetch.to_dict(),
            "seo": self.seo.to_dict(),
            "content": self.content.to_dict(),
            "discovery": self.discovery.to_dict(),
            "checks": [c.to_dict() for c in self.checks],
            "score": self.score.to_dict() if self.score else None,
            "recommendations": [r.to_dict() for r in self.recommendations],
            "status": self.status,
        }


async def analyze_url(
    raw_url: str,
    fetcher: PageFetcher | None = None,
    probe: DiscoveryProbe | None = None,
) -> AnalysisReport:
    """Run the full analysis for one URL.

    Raises:
        InvalidUrlError, BlockedUrlError: the input was rejected.
        FetchError: the page itself could not be retrieved.
    """
    fetcher = fetcher or PageFetcher()
    probe = probe or DiscoveryProbe()

    normalized = normalize_url(raw_url)
    assert_safe_url(normalized)

    analysis_input = AnalysisInput(
        raw=raw_url,
        normalized=normalized,
        timestamp=utc_timestamp(),
    )
    logger.info(f"Analyzing {normalized}")

    # Discovery only needs the origin, so it runs alongside the page fetch
    discovery_task = asyncio.create_task(probe.probe(normalized))
    try:
        fetch_result = await fetcher.fetch(normalized)
    except BaseException:
        discovery_task.cancel()
        raise

    seo = extract_seo_meta(fetch_result.html)
    content = extract_content(fetch_result.html, normalized)
    discovery = await discovery_task

    checks = run_checks(seo=seo, discovery=discovery, content=content)
    score = calculate_score(checks)
    recommendations = generate_recommendations(checks)

    logger.info(
        f"Analysis complete for {normalized}: score {score.score} "
        f"({len(checks)} checks, {len(recommendations)} recommendations)"
    )

    return AnalysisReport(
        input=analysis_input,
        fetch=fetch_result,
        seo=seo,
        content=content,
        discovery=discovery,
        checks=checks,
        score=score,
        recommendations=recommendations,
    )
