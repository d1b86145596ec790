"""
Structural content extraction.

Builds the heading hierarchy, the image alt-text inventory and the
internal/external link inventory for a single page.
"""

import re
from dataclasses import dataclass, field, asdict
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
MAX_HEADING_TEXT = 80
EMPTY_HEADING = "(empty heading)"

# Base used only to pull a filename out of relative image sources
PLACEHOLDER_BASE = "https://placeholder.com"
FILE_EXTENSION = re.compile(r"\.[a-z]{2,4}$", re.IGNORECASE)


@dataclass
class HeadingNode:
    level: int
    text: str
    children: list["HeadingNode"] = field(default_factory=list)


@dataclass
class HeadingSummary:
    hierarchy: list[HeadingNode] = field(default_factory=list)
    h1_count: int = 0
    has_h1: bool = False
    total_count: int = 0
    issues: list[str] = field(default_factory=list)


@dataclass
class MissingAltImage:
    src: str
    index: int


@dataclass
class ImageSummary:
    total: int = 0
    with_alt: int = 0
    without_alt: int = 0
    missing_alt_images: list[MissingAltImage] = field(default_factory=list)


@dataclass
class LinkSummary:
    total: int = 0
    internal: int = 0
    external: int = 0
    internal_links: list[str] = field(default_factory=list)
    external_links: list[str] = field(default_factory=list)


@dataclass
class ContentStructure:
    headings: HeadingSummary = field(default_factory=HeadingSummary)
    images: ImageSummary = field(default_factory=ImageSummary)
    links: LinkSummary = field(default_factory=LinkSummary)

    def to_dict(self) -> dict:
        return asdict(self)


def extract_content(html: str, page_url: str) -> ContentStructure:
    """Extract headings, images and links from a page."""
    soup = BeautifulSoup(html, "lxml")

    return ContentStructure(
        headings=_extract_headings(soup),
        images=_extract_images(soup),
        links=_extract_links(soup, page_url),
    )


# =========================================================================
# Headings
# =========================================================================

def _extract_headings(soup: BeautifulSoup) -> HeadingSummary:
    flat: list[tuple[int, str]] = []
    for el in soup.find_all(HEADING_TAGS):
        level = int(el.name[1])
        text = el.get_text().strip()
        if len(text) > MAX_HEADING_TEXT:
            text = text[:MAX_HEADING_TEXT] + "..."
        flat.append((level, text or EMPTY_HEADING))

    h1_count = sum(1 for level, _ in flat if level == 1)
    hierarchy = build_heading_tree(flat)

    issues = []
    if h1_count == 0:
        issues.append("No H1 heading found")
    elif h1_count > 1:
        issues.append(f"Multiple H1 headings found ({h1_count})")

    empty_count = sum(1 for _, text in flat if text == EMPTY_HEADING)
    if empty_count > 0:
        issues.append(f"{empty_count} empty heading{'s' if empty_count > 1 else ''} found")

    issues.extend(detect_skipped_levels(hierarchy))

    return HeadingSummary(
        hierarchy=hierarchy,
        h1_count=h1_count,
        has_h1=h1_count > 0,
        total_count=len(flat),
        issues=issues,
    )


def build_heading_tree(flat: list[tuple[int, str]]) -> list[HeadingNode]:
    """Nest document-order headings under the nearest lower-level heading."""
    roots: list[HeadingNode] = []
    stack: list[HeadingNode] = []

    for level, text in flat:
        node = HeadingNode(level=level, text=text)

        while stack and stack[-1].level >= level:
            stack.pop()

        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)

        stack.append(node)

    return roots


def detect_skipped_levels(nodes: list[HeadingNode], parent_level: int = 0) -> list[str]:
    issues = []
    for node in nodes:
        expected_max = parent_level + 1
        if node.level > expected_max:
            skipped = ", ".join(f"H{lvl}" for lvl in range(expected_max, node.level))
            issues.append(f'H{node.level} found without {skipped} (in "{node.text}")')
        issues.extend(detect_skipped_levels(node.children, node.level))
    return issues


# =========================================================================
# Images
# =========================================================================

def _extract_images(soup: BeautifulSoup) -> ImageSummary:
    total = 0
    with_alt = 0
    missing = []

    for index, img in enumerate(soup.find_all("img"), start=1):
        total += 1
        src = img.get("src") or ""
        alt = img.get("alt")
        if alt is not None and alt.strip():
            with_alt += 1
        else:
            missing.append(MissingAltImage(src=format_image_src(src), index=index))

    return ImageSummary(
        total=total,
        with_alt=with_alt,
        without_alt=len(missing),
        missing_alt_images=missing,
    )


def format_image_src(src: str) -> str:
    """Shorten an image source for display."""
    if src.startswith("data:"):
        return "Inline image (data URI)"

    try:
        parts = urlsplit(urljoin(PLACEHOLDER_BASE, src))
        parts.port
    except ValueError:
        return src[:37] + "..." if len(src) > 40 else src

    filename = parts.path.split("/")[-1]
    if filename and FILE_EXTENSION.search(filename):
        return filename

    return "..." + src[-37:] if len(src) > 40 else src


# =========================================================================
# Links
# =========================================================================

def _hostname(url: str) -> str | None:
    try:
        hostname = urlsplit(url).hostname
    except ValueError:
        return None
    return hostname.lower() if hostname else None


def _resolve(base: str, href: str) -> str:
    try:
        return urljoin(base, href)
    except ValueError:
        return href


def _extract_links(soup: BeautifulSoup, page_url: str) -> LinkSummary:
    page_host = _hostname(page_url)
    if not page_host or not urlsplit(page_url).scheme:
        # Unusable base URL: skip link processing entirely
        return LinkSummary()

    internal_links: list[str] = []
    external_links: list[str] = []

    for a in soup.find_all("a", href=True):
        href = a.get("href") or ""

        if href.startswith("#") or href.startswith("javascript:"):
            continue

        if href.startswith(("/", "./", "../")):
            internal_links.append(_resolve(page_url, href))
        elif href.lower().startswith(("http://", "https://")):
            if _hostname(href) == page_host:
                internal_links.append(href)
            else:
                external_links.append(href)
        else:
            internal_links.append(_resolve(page_url, href))

    return LinkSummary(
        total=len(internal_links) + len(external_links),
        internal=len(internal_links),
        external=len(external_links),
        internal_links=internal_links,
        external_links=external_links,
    )
