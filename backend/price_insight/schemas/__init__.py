"""
Price Insight Schema Contracts

JSON contracts between the API, the indicator service and the report
renderers. All modules must conform to these schemas.
"""

from price_insight.schemas.indicators import (
    AnalysisRequest,
    AnalysisReport,
    SMAValue,
    BollingerBandsData,
    SentimentLabel,
    CandlestickPattern,
)

__all__ = [
    # Request
    "AnalysisRequest",
    # Report
    "AnalysisReport",
    "SMAValue",
    "BollingerBandsData",
    # Enums
    "SentimentLabel",
    "CandlestickPattern",
]
