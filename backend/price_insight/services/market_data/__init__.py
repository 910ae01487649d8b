"""
Market Data

Price series sources. Only local sample and mock data are supported.
"""

from price_insight.services.market_data.mock_data import get_sample_prices, generate_mock_prices

__all__ = ["get_sample_prices", "generate_mock_prices"]
