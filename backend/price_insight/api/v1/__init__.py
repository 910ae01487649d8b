"""
API v1 Router

All API endpoints for the frontend.
"""

from fastapi import APIRouter

from price_insight.api.v1.endpoints import indicators

router = APIRouter()

router.include_router(indicators.router, prefix="/indicators", tags=["Indicators"])
