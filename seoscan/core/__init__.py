"""
Core utilities for SEOscan.
"""
from seoscan.core.exceptions import (
    AnalyzerError,
    InvalidUrlError,
    BlockedUrlError,
    FetchError,
)

__all__ = [
    "AnalyzerError",
    "InvalidUrlError",
    "BlockedUrlError",
    "FetchError",
]
