from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Request

from pixcheckout.exceptions import (
    ConfigurationError,
    GatewayUnavailableError,
    PaymentGatewayError,
    ValidationError,
)
from web.deps import error_response, get_checkout_service, internal_error_details

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.post("/checkout")
def checkout(request: Request, payload: Any = Body(default=None)):
    logger.info("POST /api/checkout — checkout request received")
    service = get_checkout_service(request)
    try:
        result = service.checkout(payload if payload is not None else {})
    except ValidationError as exc:
        return error_response(400, "Dados inválidos", exc.details)
    except ConfigurationError as exc:
        logger.error("Checkout aborted: %s", exc)
        return error_response(500, "Pagamento temporariamente indisponível", exc.details)
    except GatewayUnavailableError as exc:
        logger.error("Checkout aborted, gateway unreachable: %s", exc.details)
        return error_response(500, "Erro ao criar código PIX", exc.details)
    except PaymentGatewayError as exc:
        logger.error("Checkout aborted, PIX creation rejected: %s", exc.details)
        return error_response(400, "Erro ao criar PIX", exc.details)
    except Exception as exc:
        logger.exception("Checkout failed unexpectedly")
        return error_response(500, "Erro interno do servidor", internal_error_details(request, exc))

    logger.info("Checkout completed: billing=%s pix=%s", result.billing.id, result.charge.id)
    return result.to_response()
