from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from pixcheckout.models.billing import Billing, BillingStatus
from pixcheckout.models.customer import Customer


class PixCharge(BaseModel):
    """A PIX QR code charge as acknowledged by the gateway."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: str
    br_code: str
    br_code_base64: str = ""
    status: str = BillingStatus.PENDING.value
    amount: int = 0  # centavos
    expires_at: str | None = None


class PixChargeStatus(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    status: str
    expires_at: str | None = None
    amount: int | None = None

    @property
    def is_paid(self) -> bool:
        return self.status.upper() == BillingStatus.PAID.value

    def to_response(self) -> dict[str, Any]:
        return {"status": self.status, "expiresAt": self.expires_at, "isPaid": self.is_paid}


class CheckoutResult(BaseModel):
    billing: Billing
    customer: Customer
    charge: PixCharge

    def to_response(self) -> dict[str, Any]:
        """Flatten into the JSON shape returned by ``POST /api/checkout``."""
        return {
            "billing": self.billing.model_dump(mode="json", by_alias=True),
            "customer": self.customer.model_dump(mode="json", by_alias=True),
            "pixId": self.charge.id,
            "paymentId": self.charge.id,
            "pixCode": self.charge.br_code,
            "qrCodeUrl": self.charge.br_code_base64,
            "amount": self.charge.amount,
            "expiresAt": self.charge.expires_at,
        }
