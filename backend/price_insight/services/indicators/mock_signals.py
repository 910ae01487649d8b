"""
Mock Market Signals

Stand-ins for a sentiment feed and a candlestick pattern classifier.
Neither looks at price data. Both draw from an injectable random source so
tests can pin the output.
"""

import random
from typing import Optional

from price_insight.schemas.indicators import CandlestickPattern, SentimentLabel

CANDLESTICK_PATTERNS = list(CandlestickPattern)


def _source(rng: Optional[random.Random]):
    # The random module exposes the same random()/choice() API as an instance
    return rng if rng is not None else random


def mock_sentiment_score(rng: Optional[random.Random] = None) -> float:
    """Uniform pseudo-random score in [-1, 1], rounded to 2 decimals."""
    score = round(_source(rng).random() * 2 - 1, 2)
    return min(1.0, max(-1.0, score))


def classify_sentiment(score: float) -> SentimentLabel:
    if score >= 0.5:
        return SentimentLabel.VERY_BULLISH
    elif score >= 0.2:
        return SentimentLabel.BULLISH
    elif score <= -0.5:
        return SentimentLabel.VERY_BEARISH
    elif score <= -0.2:
        return SentimentLabel.BEARISH
    return SentimentLabel.NEUTRAL


def mock_candlestick_pattern(rng: Optional[random.Random] = None) -> CandlestickPattern:
    """Pick one of the fixed pattern labels uniformly at random."""
    return _source(rng).choice(CANDLESTICK_PATTERNS)
