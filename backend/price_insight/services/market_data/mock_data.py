"""
Mock Data Generator

Price series for demos and development. No market data is fetched.
"""

import math
import random
from typing import Optional

from price_insight.core.config import settings


def get_sample_prices() -> list[float]:
    """Configured default series (a fresh copy on every call)."""
    return list(settings.default_prices)


def generate_mock_prices(
    length: int,
    base_price: float = 100.0,
    volatility_percent: float = 2.0,
    rng: Optional[random.Random] = None,
) -> list[float]:
    """Generate a random-walk close series starting at `base_price`."""
    if length < 1:
        raise ValueError(f"length must be a positive integer, got {length}")
    if not math.isfinite(base_price) or base_price <= 0:
        raise ValueError(f"base_price must be a positive finite number, got {base_price}")
    rng = rng or random.Random()

    price = base_price
    volatility = base_price * volatility_percent / 100
    prices = []

    for _ in range(length):
        prices.append(round(price, 2))
        # Random walk
        price = max(0.01, price + (rng.random() - 0.5) * volatility)

    return prices
