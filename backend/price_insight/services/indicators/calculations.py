"""
Technical Indicator Calculations

Pure Python/NumPy implementations over a one-dimensional price series.
Each function returns the latest indicator value, or None when the series
is too short for the requested window (insufficient data is not an error).
"""

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np


@dataclass(frozen=True)
class BollingerBands:
    """Upper, middle and lower band for the most recent window."""

    upper: float
    middle: float
    lower: float


def _as_array(prices: Sequence[float]) -> np.ndarray:
    # np.array copies, so callers' sequences are never touched
    return np.array(prices, dtype=float)


def _check_period(period: int, label: str = "period") -> None:
    if period < 1:
        raise ValueError(f"{label} must be a positive integer, got {period}")


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(prices: Sequence[float], period: int) -> Optional[float]:
    """Simple Moving Average of the last `period` prices."""
    _check_period(period)
    data = _as_array(prices)
    if len(data) < period:
        return None

    return float(np.mean(data[-period:]))


def ema(prices: Sequence[float], period: int) -> Optional[float]:
    """
    Exponential Moving Average.

    Seeded with the mean of the *first* `period` prices, then smoothed
    forward over the remainder in index order.
    """
    _check_period(period)
    data = _as_array(prices)
    if len(data) < period:
        return None

    multiplier = 2 / (period + 1)
    result = float(np.mean(data[:period]))

    for price in data[period:]:
        result = float(price) * multiplier + result * (1 - multiplier)

    return result


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def rsi(prices: Sequence[float], period: int = 14) -> Optional[float]:
    """
    Relative Strength Index over the last `period` price changes.

    Uses plain sums rather than Wilder smoothing. When there are no losses
    the divisor falls back to 1, so a pure uptrend does not pin RSI at 100.
    """
    _check_period(period)
    data = _as_array(prices)
    if len(data) < period + 1:
        return None

    deltas = np.diff(data[-(period + 1):])
    gains = float(np.sum(deltas[deltas > 0]))
    losses = float(-np.sum(deltas[deltas < 0]))

    rs = gains / (losses or 1)
    return round(100 - (100 / (1 + rs)), 2)


def macd(
    prices: Sequence[float],
    fast_period: int = 12,
    slow_period: int = 26,
) -> Optional[float]:
    """
    MACD line: EMA(fast) - EMA(slow).

    No signal line or histogram is computed.
    """
    fast_ema = ema(prices, fast_period)
    slow_ema = ema(prices, slow_period)
    if fast_ema is None or slow_ema is None:
        return None

    return fast_ema - slow_ema


# =============================================================================
# VOLATILITY INDICATORS
# =============================================================================


def bollinger_bands(
    prices: Sequence[float],
    period: int = 20,
    std_dev: float = 2.0,
    symmetric: bool = False,
) -> Optional[BollingerBands]:
    """
    Bollinger Bands over the last `period` prices.

    Uses the population standard deviation. Only the upper band is scaled
    by `std_dev` unless `symmetric` is set; the lower band otherwise sits
    one standard deviation below the mean.
    """
    _check_period(period)
    data = _as_array(prices)
    if len(data) < period:
        return None

    window = data[-period:]
    middle = float(np.mean(window))
    std = float(np.std(window))

    lower_multiplier = std_dev if symmetric else 1

    return BollingerBands(
        upper=middle + std_dev * std,
        middle=middle,
        lower=middle - lower_multiplier * std,
    )


# =============================================================================
# SUPPORT/RESISTANCE
# =============================================================================


def support_resistance(
    prices: Sequence[float],
) -> tuple[Optional[float], Optional[float]]:
    """
    Support and resistance over the whole series.

    Returns: (lowest price, highest price), or (None, None) when empty
    """
    data = _as_array(prices)
    if len(data) == 0:
        return None, None

    return float(np.min(data)), float(np.max(data))
