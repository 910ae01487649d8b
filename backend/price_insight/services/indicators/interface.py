"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod
from typing import Sequence

from price_insight.services.base import BaseService
from price_insight.schemas.indicators import AnalysisRequest, AnalysisReport


class IndicatorServiceInterface(BaseService[AnalysisRequest, AnalysisReport]):
    """
    Indicator Engine Service Contract.

    INPUT: AnalysisRequest
        - prices: chronological price series
        - indicator parameters (SMA periods, RSI period, Bollinger settings)

    OUTPUT: AnalysisReport
        - One value per indicator, None where data is insufficient
        - Mock sentiment score and candlestick label
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    async def execute(self, input_data: AnalysisRequest) -> AnalysisReport:
        """Validate the request and analyze its price series."""
        pass

    @abstractmethod
    def analyze(self, prices: Sequence[float], **params) -> AnalysisReport:
        """
        Analyze a price series synchronously.

        Args:
            prices: Chronological price samples
            **params: Any AnalysisRequest field other than prices

        Returns:
            Complete analysis report
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        pass
