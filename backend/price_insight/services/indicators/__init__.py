"""
Indicator Engine Service

CONTRACT:
    Input:  AnalysisRequest (price series + parameters)
    Output: AnalysisReport

RESPONSIBILITIES:
    - Calculate SMA, EMA, RSI, MACD and Bollinger Bands
    - Report support/resistance levels
    - Attach the mock sentiment score and candlestick label

Uses NumPy for calculations.
Indicator math is deterministic and reproducible.
"""

from price_insight.services.indicators.interface import IndicatorServiceInterface
from price_insight.services.indicators.service import IndicatorService, get_indicator_service

__all__ = [
    "IndicatorServiceInterface",
    "IndicatorService",
    "get_indicator_service",
]
