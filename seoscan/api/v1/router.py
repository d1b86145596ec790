"""
API v1 router aggregating all endpoints.
"""
from fastapi import APIRouter

from seoscan.api.v1.analyze import router as analyze_router

api_router = APIRouter()

api_router.include_router(analyze_router)
