"""
Pydantic schemas for SEOscan API.
"""
from seoscan.schemas.common import (
    BaseSchema,
    ErrorResponse,
    HealthResponse,
)
from seoscan.schemas.analysis import (
    AnalyzeRequest,
    AnalyzeResponse,
    CheckResultSchema,
    RecommendationSchema,
)

__all__ = [
    "BaseSchema",
    "ErrorResponse",
    "HealthResponse",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "CheckResultSchema",
    "RecommendationSchema",
]
