from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from pixcheckout.exceptions import NotFoundError
from web.deps import error_response, get_customer_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/customers")


@router.get("")
def customer_list(request: Request):
    logger.info("GET /api/customers — listing customers")
    service = get_customer_service(request)
    # Debug endpoint: only the count is exposed, never customer data.
    return {"message": "Customers endpoint available", "count": service.count_customers()}


@router.get("/{customer_id}")
def customer_detail(request: Request, customer_id: str):
    logger.info("GET /api/customers/%s — loading detail", customer_id)
    service = get_customer_service(request)
    try:
        customer = service.get_customer(customer_id)
    except NotFoundError as exc:
        logger.warning("Customer not found: id=%s", customer_id)
        return error_response(404, "Cliente não encontrado", exc.details)
    billings = service.list_billings(customer_id)
    return {
        "customer": customer.model_dump(mode="json", by_alias=True),
        "billings": [b.model_dump(mode="json", by_alias=True) for b in billings],
    }
