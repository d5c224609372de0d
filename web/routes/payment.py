from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from pixcheckout.exceptions import ConfigurationError, GatewayUnavailableError, PaymentGatewayError
from web.deps import error_response, get_payment_service, internal_error_details

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/payment")


@router.get("/check/{pix_id}")
def payment_check(request: Request, pix_id: str):
    logger.info("GET /api/payment/check/%s — checking payment status", pix_id)
    service = get_payment_service(request)
    try:
        status = service.check_payment(pix_id)
    except ConfigurationError as exc:
        logger.error("Payment check aborted: %s", exc)
        return error_response(500, "Serviço de pagamento indisponível", exc.details)
    except GatewayUnavailableError as exc:
        logger.error("Payment check failed, gateway unreachable: %s", exc.details)
        return error_response(500, "Erro interno do servidor", exc.details)
    except PaymentGatewayError as exc:
        logger.error("Payment check rejected: %s", exc.details)
        return error_response(400, "Erro ao verificar pagamento", exc.details)
    except Exception as exc:
        logger.exception("Payment check failed unexpectedly")
        return error_response(500, "Erro interno do servidor", internal_error_details(request, exc))

    logger.info("Payment %s status=%s paid=%s", pix_id, status.status, status.is_paid)
    return status.to_response()
