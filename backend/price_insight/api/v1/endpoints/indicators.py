"""
Indicator API Endpoints

Endpoints for running an indicator analysis on a price series.
"""

import logging
import random
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse

from price_insight.schemas.indicators import AnalysisRequest, AnalysisReport
from price_insight.services.base import ServiceError
from price_insight.services.indicators import get_indicator_service
from price_insight.services.market_data import get_sample_prices, generate_mock_prices
from price_insight.services.reporting import format_report

logger = logging.getLogger(__name__)

router = APIRouter()


async def _run_analysis(request: AnalysisRequest) -> AnalysisReport:
    """Run the indicator service, mapping service errors to HTTP 400."""
    indicator_service = get_indicator_service()
    try:
        return await indicator_service.execute(request)
    except ServiceError as e:
        logger.warning(f"Rejected analysis request: {e}")
        raise HTTPException(status_code=400, detail=e.to_dict())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/analyze", response_model=AnalysisReport)
async def analyze(request: AnalysisRequest):
    """
    Analyze a caller-supplied price series.

    Returns:
        - SMA for each requested period
        - RSI, MACD, Bollinger Bands (null when the series is too short)
        - Mock sentiment score and candlestick pattern
        - Support/Resistance levels
    """
    return await _run_analysis(request)


@router.post("/report", response_class=PlainTextResponse)
async def analyze_report(request: AnalysisRequest):
    """Same analysis as /analyze, rendered as the plain-text report."""
    report = await _run_analysis(request)
    return format_report(report)


@router.get("/sample", response_model=AnalysisReport)
async def analyze_sample():
    """Analyze the configured sample price series with default parameters."""
    return await _run_analysis(AnalysisRequest(prices=get_sample_prices()))


@router.get("/sample/report", response_class=PlainTextResponse)
async def sample_report():
    """Plain-text report for the sample price series."""
    report = await _run_analysis(AnalysisRequest(prices=get_sample_prices()))
    return format_report(report)


@router.get("/mock", response_model=AnalysisReport)
async def analyze_mock(
    length: int = Query(default=60, ge=1, le=1000),
    base_price: float = Query(default=100.0, gt=0, allow_inf_nan=False),
    seed: Optional[int] = Query(default=None, description="Seed for a repeatable series"),
):
    """
    Analyze a randomly generated price series.

    Useful for exercising the longer-window indicators (RSI, MACD,
    Bollinger) that the short sample series cannot fill.
    """
    rng = random.Random(seed) if seed is not None else None
    prices = generate_mock_prices(length, base_price=base_price, rng=rng)
    return await _run_analysis(AnalysisRequest(prices=prices))
