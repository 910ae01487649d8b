"""
Application Configuration

All settings loaded from environment variables (or a local .env file).
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings

# Reference series used when the caller does not supply prices
SAMPLE_PRICES = [100.0, 102.0, 105.0, 103.0, 107.0, 110.0, 108.0, 112.0, 115.0, 117.0, 120.0]


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "Price Insight"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS (Frontend URL)
    allowed_origins: list[str] = ["http://localhost:3000"]

    # Analysis defaults
    default_prices: list[float] = SAMPLE_PRICES
    default_sma_periods: list[int] = [3, 5]
    default_rsi_period: int = 14
    default_bollinger_period: int = 20
    default_bollinger_std_dev: float = 2.0
    bollinger_symmetric: bool = False  # True applies std_dev to the lower band too

    # Mock signals: fixed seed makes sentiment/candlestick reproducible
    random_seed: Optional[int] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
