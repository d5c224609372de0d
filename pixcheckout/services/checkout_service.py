from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from pixcheckout.constants import CHECKOUT_AMOUNT, CHECKOUT_DESCRIPTION, PAYMENT_METHOD_PIX, PIX_EXPIRES_IN
from pixcheckout.exceptions import ConfigurationError, ValidationError
from pixcheckout.gateway.base import PaymentGateway
from pixcheckout.models import format_brl
from pixcheckout.models.billing import Billing, BillingStatus
from pixcheckout.models.customer import Customer, CustomerCreate
from pixcheckout.models.payment import CheckoutResult
from pixcheckout.repositories.base import BillingRepository, CustomerRepository

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "Campo obrigatório"


def field_errors(exc: PydanticValidationError) -> list[dict[str, str]]:
    """Turn a pydantic error list into ``[{"field", "message"}]``."""
    errors: list[dict[str, str]] = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"])
        if err["type"] == "missing":
            message = REQUIRED_MESSAGE
        elif err["type"] == "value_error":
            message = str(err["ctx"]["error"])
        else:
            message = err["msg"]
        errors.append({"field": field, "message": message})
    return errors


def validate_customer(payload: Any) -> CustomerCreate:
    try:
        return CustomerCreate.model_validate(payload)
    except PydanticValidationError as exc:
        details = field_errors(exc)
        logger.warning("Checkout rejected: %d invalid field(s): %s", len(details), [d["field"] for d in details])
        raise ValidationError("Invalid checkout data", details=details) from exc


class CheckoutService:
    def __init__(
        self,
        customers: CustomerRepository,
        billings: BillingRepository,
        gateway: PaymentGateway,
    ) -> None:
        self.customers = customers
        self.billings = billings
        self.gateway = gateway

    def checkout(self, payload: Any) -> CheckoutResult:
        """Run a full checkout: persist customer and billing, then create the PIX charge.

        A billing created before a configuration or gateway failure is left
        PENDING without an external reference.
        """
        data = validate_customer(payload)

        customer = self.customers.create(
            Customer(name=data.name, email=data.email, phone=data.phone, tax_id=data.tax_id)
        )
        logger.info("Customer created: id=%s", customer.id)

        billing = self.billings.create(
            Billing(
                customer_id=customer.id,
                amount=CHECKOUT_AMOUNT,
                status=BillingStatus.PENDING.value,
                payment_method=PAYMENT_METHOD_PIX,
            )
        )
        logger.info("Billing created: id=%s, amount=%s", billing.id, format_brl(billing.amount))

        if self.gateway.is_configured:
            customer = self._register_customer(customer)
        else:
            logger.warning("Payment gateway not configured; skipping customer registration")
            raise ConfigurationError("Payment gateway not configured", details="API key não configurada")

        charge = self.gateway.create_charge(
            amount=CHECKOUT_AMOUNT,
            description=CHECKOUT_DESCRIPTION,
            expires_in=PIX_EXPIRES_IN,
            customer=customer,
            metadata={"externalId": billing.id},
        )

        updated = self.billings.update(
            billing.id,
            external_payment_id=charge.id,
            pix_code=charge.br_code,
            qr_code_url=charge.br_code_base64,
            status=charge.status,
        )
        if updated is None:
            raise RuntimeError(f"Billing {billing.id} disappeared during checkout")
        logger.info("Checkout completed: billing=%s pix=%s status=%s", updated.id, charge.id, updated.status)
        return CheckoutResult(billing=updated, customer=customer, charge=charge)

    def _register_customer(self, customer: Customer) -> Customer:
        """Register with the gateway, swallowing any failure."""
        try:
            provider_id = self.gateway.register_customer(customer)
            if not provider_id:
                return customer
            updated = self.customers.update(customer.id, external_payment_id=provider_id)
        except Exception:
            logger.exception("Failed to register customer %s with payment gateway", customer.id)
            return customer
        logger.info("Customer %s registered with gateway: external_id=%s", customer.id, provider_id)
        return updated or customer
