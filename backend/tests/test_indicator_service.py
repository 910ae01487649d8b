from __future__ import annotations

import asyncio
import random

import pydantic
import pytest

from conftest import StubRandom

from price_insight.core.config import Settings
from price_insight.schemas.indicators import (
    AnalysisRequest,
    CandlestickPattern,
    SentimentLabel,
)
from price_insight.services.base import ServiceError, ValidationError
from price_insight.services.indicators import IndicatorService, get_indicator_service


def _indicator_fields(report) -> dict:
    return report.model_dump(
        exclude={"timestamp", "sentiment_score", "sentiment_label", "candlestick_pattern"}
    )


def test_analyze_sample_series(stub_service: IndicatorService, sample_prices: list[float]) -> None:
    report = stub_service.analyze(sample_prices)

    assert report.prices_count == 11
    assert [item.period for item in report.sma] == [3, 5]
    assert report.sma[0].value == pytest.approx(117.3333333)
    assert report.sma[1].value == pytest.approx(114.4)
    assert report.rsi_period == 14
    assert report.rsi is None
    assert report.macd is None
    assert report.bollinger_bands is None
    assert report.support == 100.0
    assert report.resistance == 120.0
    assert report.sentiment_score == 0.42
    assert report.sentiment_label is SentimentLabel.BULLISH
    assert report.candlestick_pattern is CandlestickPattern.DOJI


def test_analyze_passes_parameters_through(stub_service: IndicatorService) -> None:
    prices = [1.0, 2.0, 3.0, 4.0, 5.0]

    report = stub_service.analyze(
        prices,
        sma_periods=[2, 6],
        rsi_period=4,
        macd_fast_period=2,
        macd_slow_period=3,
        bollinger_period=5,
        bollinger_std_dev=2.0,
        bollinger_symmetric=True,
    )

    assert report.sma[0].value == pytest.approx(4.5)
    assert report.sma[1].value is None
    assert report.rsi == 80.0
    assert report.macd == pytest.approx(0.5)
    assert report.bollinger_bands.middle == pytest.approx(3.0)
    assert report.bollinger_bands.lower == pytest.approx(3.0 - 2 * 2.0 ** 0.5)


def test_analyze_does_not_mutate_input(seeded_service: IndicatorService, sample_prices: list[float]) -> None:
    original = list(sample_prices)
    seeded_service.analyze(sample_prices)
    assert sample_prices == original


def test_indicator_values_are_idempotent(seeded_service: IndicatorService, sample_prices: list[float]) -> None:
    first = seeded_service.analyze(sample_prices, sma_periods=[3, 5, 11], rsi_period=10)
    second = seeded_service.analyze(sample_prices, sma_periods=[3, 5, 11], rsi_period=10)

    assert _indicator_fields(first) == _indicator_fields(second)


def test_same_seed_reproduces_mock_signals(sample_prices: list[float]) -> None:
    first = IndicatorService(rng=random.Random(3)).analyze(sample_prices)
    second = IndicatorService(settings=Settings(random_seed=3)).analyze(sample_prices)

    assert first.sentiment_score == second.sentiment_score
    assert first.candlestick_pattern is second.candlestick_pattern


def test_execute_runs_request(stub_service: IndicatorService, sample_prices: list[float]) -> None:
    report = asyncio.run(stub_service.execute(AnalysisRequest(prices=sample_prices)))

    assert report.support == 100.0
    assert report.resistance == 120.0


def test_execute_rejects_inverted_macd_periods(stub_service: IndicatorService) -> None:
    request = AnalysisRequest(prices=[1.0, 2.0], macd_fast_period=26, macd_slow_period=12)

    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(stub_service.execute(request))

    assert isinstance(exc_info.value, ServiceError)
    assert exc_info.value.service_name == "IndicatorService"
    assert exc_info.value.details == {"macd_fast_period": 26, "macd_slow_period": 12}


def test_request_requires_prices() -> None:
    with pytest.raises(pydantic.ValidationError):
        AnalysisRequest(prices=[])


def test_request_rejects_non_finite_prices() -> None:
    with pytest.raises(pydantic.ValidationError):
        AnalysisRequest(prices=[1.0, float("nan")])


def test_request_rejects_non_positive_periods() -> None:
    with pytest.raises(pydantic.ValidationError):
        AnalysisRequest(prices=[1.0], sma_periods=[3, 0])
    with pytest.raises(pydantic.ValidationError):
        AnalysisRequest(prices=[1.0], rsi_period=0)


def test_single_price_still_reports_levels(stub_service: IndicatorService) -> None:
    report = stub_service.analyze([42.5])

    assert all(item.value is None for item in report.sma)
    assert report.support == 42.5
    assert report.resistance == 42.5


def test_health_check_and_singleton() -> None:
    service = get_indicator_service()

    assert service is get_indicator_service()
    assert service.name == "IndicatorService"
    assert asyncio.run(service.health_check()) is True


def test_unset_parameters_come_from_service_settings() -> None:
    service = IndicatorService(
        rng=StubRandom(),
        settings=Settings(
            default_sma_periods=[2],
            default_rsi_period=4,
            default_bollinger_period=5,
            bollinger_symmetric=True,
        ),
    )
    prices = [1.0, 2.0, 3.0, 4.0, 5.0]

    report = service.analyze(prices)

    assert [item.period for item in report.sma] == [2]
    assert report.rsi_period == 4
    assert report.bollinger_bands.lower == pytest.approx(3.0 - 2 * 2.0 ** 0.5)

    explicit = service.analyze(prices, bollinger_symmetric=False, sma_periods=[3])
    assert [item.period for item in explicit.sma] == [3]
    assert explicit.bollinger_bands.lower == pytest.approx(3.0 - 2.0 ** 0.5)


def test_execute_applies_service_settings(sample_prices: list[float]) -> None:
    service = IndicatorService(rng=StubRandom(), settings=Settings(default_sma_periods=[11]))

    report = asyncio.run(service.execute(AnalysisRequest(prices=sample_prices)))

    assert report.sma[0].period == 11
    assert report.sma[0].value == pytest.approx(109.0)
