"""
Price Insight Services

Service layer containing the indicator engine, mock data and report
rendering. Each service has a defined interface (contract) and implementation.
"""

from price_insight.services.base import BaseService, ServiceError, ValidationError

__all__ = ["BaseService", "ServiceError", "ValidationError"]
