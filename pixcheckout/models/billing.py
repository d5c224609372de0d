from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from pixcheckout.constants import PAYMENT_METHOD_PIX


class BillingStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    EXPIRED = "EXPIRED"
    CANCELLED = "CANCELLED"
    REFUNDED = "REFUNDED"


class Billing(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = ""
    customer_id: str
    amount: int = 0  # centavos
    status: str = BillingStatus.PENDING.value  # provider values are stored verbatim
    payment_method: str = PAYMENT_METHOD_PIX
    external_payment_id: str | None = None
    pix_code: str | None = None
    qr_code_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_paid(self) -> bool:
        return self.status == BillingStatus.PAID.value
