"""
Analysis services for SEOscan.

- url_guard: URL normalization and private-target blocking
- fetcher: bounded HTML fetch
- meta_extractor / content_extractor: HTML signal extraction
- discovery: robots.txt and sitemap probing
- rule_engine, scorer, advisor: checks, weighted score, recommendations
- analyzer: the end-to-end pipeline
"""
