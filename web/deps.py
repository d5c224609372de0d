from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from pixcheckout.services.checkout_service import CheckoutService
from pixcheckout.services.customer_service import CustomerService
from pixcheckout.services.payment_service import PaymentService

logger = logging.getLogger(__name__)


def get_checkout_service(request: Request) -> CheckoutService:
    state = request.app.state
    return CheckoutService(state.customer_repo, state.billing_repo, state.gateway)


def get_payment_service(request: Request) -> PaymentService:
    state = request.app.state
    return PaymentService(state.billing_repo, state.gateway)


def get_customer_service(request: Request) -> CustomerService:
    state = request.app.state
    return CustomerService(state.customer_repo, state.billing_repo)


def error_response(status_code: int, error: str, details: Any = None) -> JSONResponse:
    """Build the ``{"error", "details"}`` body shared by every API error."""
    content: dict[str, Any] = {"error": error}
    if details is not None:
        content["details"] = details
    logger.debug("Error response %s: %s", status_code, error)
    return JSONResponse(content, status_code=status_code)


def internal_error_details(request: Request, exc: Exception) -> str:
    """Exception text in development, a generic message everywhere else."""
    if request.app.state.settings.is_development:
        return str(exc) or "Erro desconhecido"
    return "Erro desconhecido"
