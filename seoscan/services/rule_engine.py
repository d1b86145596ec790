"""
SEOscan Rule Engine

Fixed catalogue of single-page checks, evaluated in table order:
1. On-Page SEO
2. Social Preview (Open Graph / Twitter)
3. Discovery (robots.txt / sitemap)
4. Content Structure

Each rule is a pure function over the extracted metadata, discovery data and
content structure. A rule returns None when it does not apply to the page,
in which case no result is emitted for it.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Callable
from urllib.parse import urlsplit

from seoscan.services.content_extractor import ContentStructure
from seoscan.services.discovery import DiscoveryResult
from seoscan.services.meta_extractor import SeoMeta

logger = logging.getLogger(__name__)

PASS = "pass"
WARN = "warn"
FAIL = "fail"


@dataclass
class CheckResult:
    id: str
    label: str
    category: str
    status: str
    severity: str
    evidence: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class CheckInput:
    seo: SeoMeta
    discovery: DiscoveryResult
    content: ContentStructure


Outcome = tuple[str, str | None] | None


@dataclass(frozen=True)
class CheckRule:
    id: str
    label: str
    category: str
    severity: str
    evaluate: Callable[[CheckInput], Outcome]


# =========================================================================
# On-Page SEO
# =========================================================================

def _title_exists(data: CheckInput) -> Outcome:
    title = data.seo.title.value
    return (PASS if title else FAIL), title or "No <title> tag found"


def _title_length(data: CheckInput) -> Outcome:
    length = data.seo.title.length
    return (PASS if 10 <= length <= 60 else WARN), f"{length} characters"


def _meta_desc_exists(data: CheckInput) -> Outcome:
    desc = data.seo.meta_description.value
    return (PASS if desc else WARN), desc or "No meta description found"


def _meta_desc_length(data: CheckInput) -> Outcome:
    if not data.seo.meta_description.value:
        return None
    length = data.seo.meta_description.length
    return (PASS if 70 <= length <= 160 else WARN), f"{length} characters"


def _canonical_exists(data: CheckInput) -> Outcome:
    canonical = data.seo.canonical
    return (PASS if canonical else WARN), canonical or "No canonical link found"


def _absolute_host(url: str) -> str:
    """Host (with port) of an absolute URL; ValueError when not absolute."""
    parts = urlsplit(url)
    if not parts.scheme or not parts.hostname:
        raise ValueError(f"Not an absolute URL: {url}")
    port = parts.port
    return f"{parts.hostname}:{port}" if port else parts.hostname


def _canonical_host_match(data: CheckInput) -> Outcome:
    canonical = data.seo.canonical
    if not canonical:
        return None

    # Compared against the first declared sitemap's host, not the page host
    try:
        canonical_host = _absolute_host(canonical)
        sitemap_urls = data.discovery.robots.sitemap_urls
        if sitemap_urls and canonical_host != _absolute_host(sitemap_urls[0]):
            return WARN, f"Canonical points to different host: {canonical_host}"
    except ValueError:
        return WARN, "Canonical URL is not a valid absolute URL"

    return PASS, canonical


def _meta_robots_noindex(data: CheckInput) -> Outcome:
    robots = data.seo.robots
    if not robots:
        return PASS, None
    return (FAIL if "noindex" in robots.lower() else PASS), robots


# =========================================================================
# Social Preview
# =========================================================================

def _open_graph_tag(key: str) -> Callable[[CheckInput], Outcome]:
    def evaluate(data: CheckInput) -> Outcome:
        value = data.seo.open_graph.get(key)
        return (PASS if value else WARN), value
    return evaluate


def _twitter_tag(key: str) -> Callable[[CheckInput], Outcome]:
    def evaluate(data: CheckInput) -> Outcome:
        value = data.seo.twitter.get(key)
        return (PASS if value else WARN), value
    return evaluate


# =========================================================================
# Discovery
# =========================================================================

def _robots_reachable(data: CheckInput) -> Outcome:
    return (PASS if data.discovery.robots.reachable else WARN), None


def _sitemap_declared(data: CheckInput) -> Outcome:
    sitemap_urls = data.discovery.robots.sitemap_urls
    return (PASS if sitemap_urls else WARN), (sitemap_urls[0] if sitemap_urls else None)


def _sitemap_fetchable(data: CheckInput) -> Outcome:
    if not data.discovery.robots.sitemap_urls:
        return None
    sitemap = data.discovery.sitemap
    if sitemap.fetched:
        return PASS, f"{sitemap.url_count or 0} URLs found"
    return WARN, "Failed to fetch sitemap"


# =========================================================================
# Content Structure
# =========================================================================

def _h1_exists(data: CheckInput) -> Outcome:
    headings = data.content.headings
    if headings.has_h1:
        return PASS, f"Found {headings.h1_count} H1"
    return FAIL, "No H1 heading found"


def _h1_single(data: CheckInput) -> Outcome:
    count = data.content.headings.h1_count
    if count <= 1:
        return None
    return WARN, f"Found {count} H1 headings - should only have one"


def _heading_hierarchy(data: CheckInput) -> Outcome:
    headings = data.content.headings
    if not headings.issues:
        return PASS, f"{headings.total_count} headings with proper hierarchy"
    return WARN, "; ".join(headings.issues)


def _images_alt(data: CheckInput) -> Outcome:
    images = data.content.images
    if images.total == 0:
        return None
    percentage = int(images.with_alt / images.total * 100 + 0.5)
    return (
        PASS if images.without_alt == 0 else WARN,
        f"{images.with_alt}/{images.total} images have alt text ({percentage}%)",
    )


def _internal_links(data: CheckInput) -> Outcome:
    count = data.content.links.internal
    return (PASS if count > 0 else WARN), f"{count} internal link{'s' if count != 1 else ''} found"


CHECK_RULES: list[CheckRule] = [
    # On-page
    CheckRule("title-exists", "Title tag exists", "onpage", "high", _title_exists),
    CheckRule("title-length", "Title length is optimal", "onpage", "medium", _title_length),
    CheckRule("meta-desc-exists", "Meta description exists", "onpage", "medium", _meta_desc_exists),
    CheckRule("meta-desc-length", "Meta description length is optimal", "onpage", "low", _meta_desc_length),
    CheckRule("canonical-exists", "Canonical URL exists", "onpage", "high", _canonical_exists),
    CheckRule("canonical-host-match", "Canonical points to same host", "onpage", "high", _canonical_host_match),
    CheckRule("meta-robots-noindex", "Page is indexable", "onpage", "high", _meta_robots_noindex),
    # Social
    CheckRule("og-title", "Open Graph title exists", "social", "medium", _open_graph_tag("og:title")),
    CheckRule("og-description", "Open Graph description exists", "social", "medium", _open_graph_tag("og:description")),
    CheckRule("og-image", "Open Graph image exists", "social", "medium", _open_graph_tag("og:image")),
    CheckRule("twitter-card", "Twitter card type defined", "social", "low", _twitter_tag("twitter:card")),
    CheckRule("twitter-title", "Twitter title exists", "social", "low", _twitter_tag("twitter:title")),
    CheckRule("twitter-image", "Twitter image exists", "social", "low", _twitter_tag("twitter:image")),
    # Discovery
    CheckRule("robots-reachable", "robots.txt is reachable", "discovery", "medium", _robots_reachable),
    CheckRule("sitemap-declared", "Sitemap declared in robots.txt", "discovery", "medium", _sitemap_declared),
    CheckRule("sitemap-fetchable", "Sitemap is fetchable", "discovery", "low", _sitemap_fetchable),
    # Content
    CheckRule("h1-exists", "H1 heading exists", "content", "high", _h1_exists),
    CheckRule("h1-single", "Only one H1 heading", "content", "medium", _h1_single),
    CheckRule("heading-hierarchy", "Heading hierarchy is logical", "content", "medium", _heading_hierarchy),
    CheckRule("images-alt", "Images have alt text", "content", "medium", _images_alt),
    CheckRule("internal-links", "Internal links present", "content", "low", _internal_links),
]


def run_checks(seo: SeoMeta, discovery: DiscoveryResult, content: ContentStructure) -> list[CheckResult]:
    """Evaluate every applicable rule, in catalogue order."""
    data = CheckInput(seo=seo, discovery=discovery, content=content)
    results = []

    for rule in CHECK_RULES:
        outcome = rule.evaluate(data)
        if outcome is None:
            continue
        status, evidence = outcome
        results.append(CheckResult(
            id=rule.id,
            label=rule.label,
            category=rule.category,
            status=status,
            severity=rule.severity,
            evidence=evidence,
        ))

    logger.debug(f"Ran {len(results)} checks, {sum(1 for r in results if r.status != PASS)} issues")
    return results
