"""
Base Service Interface

Every analysis service implements this contract so the API layer can
treat them uniformly.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

RequestT = TypeVar("RequestT")
ReportT = TypeVar("ReportT")


class BaseService(ABC, Generic[RequestT, ReportT]):
    """
    Base class for analysis services.

    A service:
    - Accepts one request model
    - Produces one report model
    - May reject requests that pass schema validation but are inconsistent
    - Reports whether it is able to serve
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Service name used in logs and error payloads."""
        pass

    @abstractmethod
    async def execute(self, input_data: RequestT) -> ReportT:
        """
        Run the service on a request.

        Raises:
            ServiceError: If the request cannot be served
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        pass

    async def validate_input(self, input_data: RequestT) -> RequestT:
        """
        Cross-field validation hook.

        Field-level checks belong to the Pydantic schema; the default
        implementation returns the request unchanged.
        """
        return input_data


class ServiceError(Exception):
    """Base exception for service errors."""

    def __init__(self, service_name: str, message: str, details: dict = None):
        self.service_name = service_name
        self.message = message
        self.details = details or {}
        super().__init__(f"[{service_name}] {message}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "service": self.service_name,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(ServiceError):
    """Request is well-formed but its parameters do not fit together."""
    pass
