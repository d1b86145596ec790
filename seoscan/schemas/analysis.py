"""
Analysis schemas.
"""
from typing import Literal

from pydantic import Field

from seoscan.schemas.common import BaseSchema

CheckCategory = Literal["onpage", "social", "discovery", "content"]
CheckStatus = Literal["pass", "warn", "fail"]
CheckSeverity = Literal["high", "medium", "low"]


class AnalyzeRequest(BaseSchema):
    """Request to analyze a single page."""

    url: str = Field(
        ...,
        min_length=1,
        description="Page URL to analyze; https:// is assumed when no scheme is given",
        examples=["example.com"],
    )


class AnalysisInputSchema(BaseSchema):
    raw: str
    normalized: str
    timestamp: str


class FetchInfoSchema(BaseSchema):
    status: int
    final_url: str
    content_type: str
    size_bytes: int
    timing_ms: int


class TextValueSchema(BaseSchema):
    value: str | None = None
    length: int = 0


class SeoMetaSchema(BaseSchema):
    title: TextValueSchema
    meta_description: TextValueSchema
    robots: str | None = None
    canonical: str | None = None
    open_graph: dict[str, str] = {}
    twitter: dict[str, str] = {}


class HeadingNodeSchema(BaseSchema):
    level: int
    text: str
    children: list["HeadingNodeSchema"] = []


class HeadingSummarySchema(BaseSchema):
    hierarchy: list[HeadingNodeSchema]
    h1_count: int
    has_h1: bool
    total_count: int
    issues: list[str]


class MissingAltImageSchema(BaseSchema):
    src: str
    index: int


class ImageSummarySchema(BaseSchema):
    total: int
    with_alt: int
    without_alt: int
    missing_alt_images: list[MissingAltImageSchema]


class LinkSummarySchema(BaseSchema):
    total: int
    internal: int
    external: int
    internal_links: list[str]
    external_links: list[str]


class ContentStructureSchema(BaseSchema):
    headings: HeadingSummarySchema
    images: ImageSummarySchema
    links: LinkSummarySchema


class RobotsInfoSchema(BaseSchema):
    reachable: bool
    sitemap_urls: list[str]


class SitemapInfoSchema(BaseSchema):
    fetched: bool
    url_count: int | None = None


class DiscoverySchema(BaseSchema):
    robots: RobotsInfoSchema
    sitemap: SitemapInfoSchema


class CheckResultSchema(BaseSchema):
    id: str
    label: str
    category: CheckCategory
    status: CheckStatus
    severity: CheckSeverity
    evidence: str | None = None


class ScoreSchema(BaseSchema):
    score: int
    max: int
    total: int


class RecommendationSchema(BaseSchema):
    id: str
    title: str
    category: CheckCategory
    severity: CheckSeverity
    reason: str
    how_to_fix: list[str]
    related_check_id: str


class AnalyzeResponse(BaseSchema):
    """Full single-page analysis report."""

    input: AnalysisInputSchema
    fetch: FetchInfoSchema
    seo: SeoMetaSchema
    content: ContentStructureSchema
    discovery: DiscoverySchema
    checks: list[CheckResultSchema]
    score: ScoreSchema
    recommendations: list[RecommendationSchema]
    status: Literal["ok"] = "ok"
