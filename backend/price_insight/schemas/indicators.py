"""
CONTRACT: Indicator Engine

Input: AnalysisRequest (price series + indicator parameters)
Output: AnalysisReport

Every indicator value is Optional: None means the series was too short
for that indicator and must be rendered as unavailable.
"""

import math
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from price_insight.core.config import settings


# =============================================================================
# ENUMS
# =============================================================================


class SentimentLabel(str, Enum):
    VERY_BULLISH = "very_bullish"
    BULLISH = "bullish"
    NEUTRAL = "neutral"
    BEARISH = "bearish"
    VERY_BEARISH = "very_bearish"


class CandlestickPattern(str, Enum):
    """Fixed set of pattern labels, in display order."""

    HAMMER = "Hammer"
    SHOOTING_STAR = "Shooting Star"
    DOJI = "Doji"
    ENGULFING = "Engulfing"
    NONE = "None"


# =============================================================================
# INPUT: AnalysisRequest
# =============================================================================


class AnalysisRequest(BaseModel):
    """
    Request for a full indicator analysis.
    Sent by: API / scripts
    Received by: Indicator Service
    """

    prices: list[float] = Field(
        ...,
        min_length=1,
        description="Chronological price samples, oldest first",
    )
    sma_periods: list[int] = Field(
        default_factory=lambda: list(settings.default_sma_periods),
        min_length=1,
        description="One SMA is reported per period, in this order",
    )
    rsi_period: int = Field(default_factory=lambda: settings.default_rsi_period, ge=1)
    macd_fast_period: int = Field(default=12, ge=1)
    macd_slow_period: int = Field(default=26, ge=1)
    bollinger_period: int = Field(
        default_factory=lambda: settings.default_bollinger_period, ge=1
    )
    bollinger_std_dev: float = Field(
        default_factory=lambda: settings.default_bollinger_std_dev, ge=0
    )
    bollinger_symmetric: bool = Field(
        default_factory=lambda: settings.bollinger_symmetric,
        description="Scale the lower band by bollinger_std_dev as well",
    )

    @field_validator("prices")
    @classmethod
    def prices_must_be_finite(cls, value: list[float]) -> list[float]:
        if not all(math.isfinite(p) for p in value):
            raise ValueError("prices must be finite numbers")
        return value

    @field_validator("sma_periods")
    @classmethod
    def sma_periods_must_be_positive(cls, value: list[int]) -> list[int]:
        if any(p < 1 for p in value):
            raise ValueError("sma_periods must be positive integers")
        return value


# =============================================================================
# OUTPUT: Report Components
# =============================================================================


class SMAValue(BaseModel):
    """Simple moving average for one window length."""

    period: int
    value: Optional[float] = None


class BollingerBandsData(BaseModel):
    """Bollinger Bands values."""

    upper: float
    middle: float
    lower: float


# =============================================================================
# OUTPUT: AnalysisReport (Complete Response)
# =============================================================================


class AnalysisReport(BaseModel):
    """
    Complete analysis of one price series.
    Returned by: Indicator Service
    Consumed by: report formatter, JSON API
    """

    timestamp: datetime
    prices_count: int = Field(..., ge=1)

    sma: list[SMAValue]
    rsi_period: int
    rsi: Optional[float] = Field(default=None, ge=0, le=100)
    macd: Optional[float] = None
    bollinger_bands: Optional[BollingerBandsData] = None

    sentiment_score: float = Field(..., ge=-1, le=1)
    sentiment_label: SentimentLabel
    candlestick_pattern: CandlestickPattern

    support: Optional[float] = None
    resistance: Optional[float] = None

    class Config:
        json_schema_extra = {
            "example": {
                "timestamp": "2024-02-04T10:30:00",
                "prices_count": 11,
                "sma": [
                    {"period": 3, "value": 117.33333333333333},
                    {"period": 5, "value": 114.4},
                ],
                "rsi_period": 14,
                "rsi": None,
                "macd": None,
                "bollinger_bands": None,
                "sentiment_score": 0.42,
                "sentiment_label": "bullish",
                "candlestick_pattern": "Doji",
                "support": 100.0,
                "resistance": 120.0,
            }
        }
