"""
On-page SEO metadata extraction.
"""

import re
from dataclasses import dataclass, field, asdict

from bs4 import BeautifulSoup


@dataclass
class TextValue:
    value: str | None = None
    length: int = 0

    @classmethod
    def of(cls, value: str | None) -> "TextValue":
        return cls(value=value, length=len(value) if value else 0)


@dataclass
class SeoMeta:
    title: TextValue = field(default_factory=TextValue)
    meta_description: TextValue = field(default_factory=TextValue)
    robots: str | None = None
    canonical: str | None = None
    open_graph: dict[str, str] = field(default_factory=dict)
    twitter: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return asdict(self)


def _clean(value) -> str | None:
    if not isinstance(value, str):
        return None
    return value.strip() or None


def _collect(tags, key: str) -> dict[str, str]:
    collected = {}
    for tag in tags:
        name = tag.get(key)
        content = _clean(tag.get("content"))
        if name and content:
            collected[name] = content
    return collected


def extract_seo_meta(html: str) -> SeoMeta:
    """Extract title, description, robots, canonical and social tags."""
    soup = BeautifulSoup(html, "lxml")

    title = None
    title_tag = soup.find("title")
    if title_tag:
        title = _clean(title_tag.get_text())

    meta_description = None
    meta_desc_tag = soup.find("meta", attrs={"name": "description"})
    if meta_desc_tag:
        meta_description = _clean(meta_desc_tag.get("content"))

    robots = None
    robots_tag = soup.find("meta", attrs={"name": "robots"})
    if robots_tag:
        robots = _clean(robots_tag.get("content"))

    canonical = None
    canonical_tag = soup.find("link", attrs={"rel": "canonical"})
    if canonical_tag:
        canonical = _clean(canonical_tag.get("href"))

    open_graph = _collect(soup.find_all("meta", property=re.compile(r"^og:")), "property")
    twitter = _collect(soup.find_all("meta", attrs={"name": re.compile(r"^twitter:")}), "name")

    return SeoMeta(
        title=TextValue.of(title),
        meta_description=TextValue.of(meta_description),
        robots=robots,
        canonical=canonical,
        open_graph=open_graph,
        twitter=twitter,
    )
