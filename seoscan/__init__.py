"""
SEOscan: single-page SEO analysis service.
"""
