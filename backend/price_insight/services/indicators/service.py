"""
Indicator Engine Service Implementation

Runs every indicator over one price series and assembles the report.
Pure Python/NumPy calculations; only the mock signals use randomness.
"""

import logging
import random
from datetime import datetime
from typing import Optional, Sequence

from price_insight.core.config import Settings, get_settings
from price_insight.schemas.indicators import (
    AnalysisRequest,
    AnalysisReport,
    BollingerBandsData,
    SMAValue,
)
from price_insight.services.base import ValidationError
from price_insight.services.indicators.interface import IndicatorServiceInterface
from price_insight.services.indicators.calculations import (
    sma,
    rsi,
    macd,
    bollinger_bands,
    support_resistance,
)
from price_insight.services.indicators.mock_signals import (
    mock_sentiment_score,
    classify_sentiment,
    mock_candlestick_pattern,
)

logger = logging.getLogger(__name__)


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    Stateless apart from its random source: the same request always
    yields the same indicator values. Request parameters the caller does
    not set are taken from the service's own settings.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        settings: Optional[Settings] = None,
    ):
        self._settings = settings or get_settings()
        if rng is None and self._settings.random_seed is not None:
            rng = random.Random(self._settings.random_seed)
        self._rng = rng

    async def execute(self, input_data: AnalysisRequest) -> AnalysisReport:
        request = await self.validate_input(input_data)
        return self._build_report(request)

    async def validate_input(self, input_data: AnalysisRequest) -> AnalysisRequest:
        return self._check_request(input_data)

    def analyze(self, prices: Sequence[float], **params) -> AnalysisReport:
        request = AnalysisRequest(prices=list(prices), **params)
        return self._build_report(self._check_request(request))

    def _check_request(self, input_data: AnalysisRequest) -> AnalysisRequest:
        if input_data.macd_fast_period >= input_data.macd_slow_period:
            raise ValidationError(
                self.name,
                "macd_fast_period must be smaller than macd_slow_period",
                {
                    "macd_fast_period": input_data.macd_fast_period,
                    "macd_slow_period": input_data.macd_slow_period,
                },
            )
        return self._with_defaults(input_data)

    def _with_defaults(self, request: AnalysisRequest) -> AnalysisRequest:
        """Fill parameters the caller left unset from this service's settings."""
        defaults = {
            "sma_periods": list(self._settings.default_sma_periods),
            "rsi_period": self._settings.default_rsi_period,
            "bollinger_period": self._settings.default_bollinger_period,
            "bollinger_std_dev": self._settings.default_bollinger_std_dev,
            "bollinger_symmetric": self._settings.bollinger_symmetric,
        }
        unset = {k: v for k, v in defaults.items() if k not in request.model_fields_set}
        return request.model_copy(update=unset) if unset else request

    def _build_report(self, request: AnalysisRequest) -> AnalysisReport:
        prices = request.prices
        logger.debug(f"Analyzing {len(prices)} prices")

        sma_values = [
            SMAValue(period=period, value=sma(prices, period))
            for period in request.sma_periods
        ]
        rsi_value = rsi(prices, request.rsi_period)
        macd_value = macd(prices, request.macd_fast_period, request.macd_slow_period)
        bands = bollinger_bands(
            prices,
            period=request.bollinger_period,
            std_dev=request.bollinger_std_dev,
            symmetric=request.bollinger_symmetric,
        )
        support, resistance = support_resistance(prices)

        sentiment = mock_sentiment_score(self._rng)
        pattern = mock_candlestick_pattern(self._rng)

        self._log_unavailable(request, sma_values, rsi_value, macd_value, bands)

        return AnalysisReport(
            timestamp=datetime.now(),
            prices_count=len(prices),
            sma=sma_values,
            rsi_period=request.rsi_period,
            rsi=rsi_value,
            macd=macd_value,
            bollinger_bands=(
                BollingerBandsData(upper=bands.upper, middle=bands.middle, lower=bands.lower)
                if bands
                else None
            ),
            sentiment_score=sentiment,
            sentiment_label=classify_sentiment(sentiment),
            candlestick_pattern=pattern,
            support=support,
            resistance=resistance,
        )

    def _log_unavailable(self, request, sma_values, rsi_value, macd_value, bands) -> None:
        count = len(request.prices)
        for item in sma_values:
            if item.value is None:
                logger.info(f"SMA({item.period}) unavailable: {count} prices")
        if rsi_value is None:
            logger.info(f"RSI({request.rsi_period}) unavailable: {count} prices")
        if macd_value is None:
            logger.info(
                f"MACD({request.macd_fast_period},{request.macd_slow_period}) "
                f"unavailable: {count} prices"
            )
        if bands is None:
            logger.info(f"Bollinger({request.bollinger_period}) unavailable: {count} prices")

    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService()
    return _service_instance
