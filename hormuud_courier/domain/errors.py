"""
Error taxonomy for the courier.

Every error may carry the record of the HTTP exchange that produced it
(``request_response``) and, when raised out of a send, the delivery status
built up to that point (``status``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..infrastructure.http import RequestResponse
    from .entities import DeliveryStatus


class CourierError(Exception):
    """Base class for all courier errors."""

    def __init__(
        self,
        message: str,
        *,
        request_response: RequestResponse | None = None,
        status: DeliveryStatus | None = None,
    ) -> None:
        super().__init__(message)
        self.request_response = request_response
        self.status = status


class ConfigError(CourierError):
    """Raised when a channel is missing required configuration."""

    pass


class TransportError(CourierError):
    """Raised when the provider cannot be reached or answers with a non-2xx status."""

    pass


class ProtocolError(CourierError):
    """Raised when the provider response is malformed or missing fields."""

    pass


class ValidationError(CourierError):
    """Raised when an inbound webhook payload is invalid."""

    pass
