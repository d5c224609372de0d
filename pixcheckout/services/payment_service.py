from __future__ import annotations

import logging

from pixcheckout.exceptions import ConfigurationError
from pixcheckout.gateway.base import PaymentGateway
from pixcheckout.models.billing import BillingStatus
from pixcheckout.models.payment import PixChargeStatus
from pixcheckout.repositories.base import BillingRepository

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(self, billings: BillingRepository, gateway: PaymentGateway) -> None:
        self.billings = billings
        self.gateway = gateway

    def check_payment(self, external_id: str) -> PixChargeStatus:
        """Query the gateway and mark the matching local billing PAID when it is.

        Only the PENDING -> PAID transition is written locally; any other
        provider status is returned to the caller untouched.
        """
        if not self.gateway.is_configured:
            logger.error("Payment check for %s refused: gateway not configured", external_id)
            raise ConfigurationError("Payment gateway not configured", details="API key não configurada")

        status = self.gateway.check_charge(external_id)

        if status.is_paid:
            self._mark_paid(external_id)
        return status

    def _mark_paid(self, external_id: str) -> None:
        billing = self.billings.get_by_external_id(external_id)
        if billing is None:
            logger.warning("Paid charge %s has no local billing", external_id)
            return
        if billing.is_paid:
            logger.debug("Billing %s already PAID", billing.id)
            return
        self.billings.update(billing.id, status=BillingStatus.PAID.value)
        logger.info("Billing %s marked PAID (pix=%s)", billing.id, external_id)
