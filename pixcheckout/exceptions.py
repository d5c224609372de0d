"""Exception hierarchy for the checkout flow.

Every error carries an optional ``details`` payload (provider response,
per-field validation messages) that the HTTP layer forwards verbatim.
"""

from __future__ import annotations

from typing import Any


class CheckoutError(Exception):
    """Base exception for all checkout errors."""

    def __init__(self, message: str = "", details: Any = None) -> None:
        super().__init__(message or self.__class__.__name__)
        self.details = details


class ValidationError(CheckoutError):
    """Raised when client input fails the customer schema.

    ``details`` lists every failing field as ``{"field", "message"}``.
    """


class ConfigurationError(CheckoutError):
    """Raised when the payment gateway credential is missing."""


class PaymentGatewayError(CheckoutError):
    """Raised when the provider rejects a request or reports an error."""


class GatewayUnavailableError(PaymentGatewayError):
    """Raised when the provider cannot be reached at all."""


class NotFoundError(CheckoutError):
    """Raised when a referenced entity does not exist."""
