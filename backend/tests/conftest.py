import random

import pytest

from price_insight.core.config import SAMPLE_PRICES
from price_insight.services.indicators import IndicatorService


class StubRandom(random.Random):
    """Random source that always returns the same draw."""

    def __init__(self, value: float = 0.5, choice_index: int = 0):
        super().__init__()
        self.value = value
        self.choice_index = choice_index

    def random(self) -> float:
        return self.value

    def choice(self, seq):
        return seq[self.choice_index]


@pytest.fixture
def sample_prices() -> list[float]:
    return list(SAMPLE_PRICES)


@pytest.fixture
def seeded_service() -> IndicatorService:
    return IndicatorService(rng=random.Random(42))


@pytest.fixture
def stub_service() -> IndicatorService:
    # 0.71 -> score 0.42 (bullish); index 2 -> Doji
    return IndicatorService(rng=StubRandom(value=0.71, choice_index=2))
