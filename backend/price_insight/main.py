"""
Price Insight Backend - FastAPI Application

Main entry point for the backend API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from price_insight.core.config import settings
from price_insight.core.logging import configure_logging
from price_insight.api.v1 import router as api_v1_router
from price_insight.services.indicators import get_indicator_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    configure_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Bollinger symmetric bands: {settings.bollinger_symmetric}")
    if settings.random_seed is not None:
        logger.info(f"Mock signals seeded with {settings.random_seed}")

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Price Insight Indicator API

    ## Indicators
    - **Moving averages**: SMA per requested window
    - **Momentum**: RSI, simplified MACD (EMA fast - EMA slow)
    - **Volatility**: Bollinger Bands
    - **Levels**: support / resistance from the series range

    ## Mock signals
    - Sentiment score in [-1, 1] and a candlestick pattern label,
      both randomly generated placeholders
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
if settings.allowed_origins:
    cors_origins.extend([o for o in settings.allowed_origins if o not in cors_origins])

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    healthy = await get_indicator_service().health_check()
    return {
        "status": "healthy" if healthy else "unhealthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Price Insight API",
        "docs": "/docs",
        "health": "/health",
        "sample_report": "/api/v1/indicators/sample/report",
    }
