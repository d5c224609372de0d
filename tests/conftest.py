"""Root conftest — in-memory repositories and a scriptable gateway double."""

from __future__ import annotations

import pytest

from pixcheckout.exceptions import PaymentGatewayError
from pixcheckout.gateway.base import PaymentGateway
from pixcheckout.models.customer import Customer
from pixcheckout.models.payment import PixCharge, PixChargeStatus
from pixcheckout.repositories.memory import InMemoryBillingRepository, InMemoryCustomerRepository

MARIA = {
    "name": "Maria Silva",
    "email": "maria@example.com",
    "phone": "11999999999",
    "taxId": "12345678901",
}

PIX_1 = {
    "id": "pix_1",
    "brCode": "000201...",
    "brCodeBase64": "data:...",
    "status": "PENDING",
    "amount": 990,
    "expiresAt": "2024-01-02T00:00:00Z",
}


class FakeGateway(PaymentGateway):
    """In-process gateway that records calls and replays canned answers."""

    def __init__(self, configured: bool = True) -> None:
        self.configured = configured
        self.charge = PixCharge.model_validate(PIX_1)
        self.status = PixChargeStatus(status="PENDING", expires_at=PIX_1["expiresAt"], amount=990)
        self.provider_customer_id: str | None = "cust_1"
        self.create_error: Exception | None = None
        self.check_error: Exception | None = None
        self.register_error: Exception | None = None
        self.create_calls: list[dict] = []
        self.check_calls: list[str] = []
        self.registered: list[Customer] = []
        self.closed = False

    @property
    def is_configured(self) -> bool:
        return self.configured

    def create_charge(self, amount, description, expires_in, customer, metadata=None):
        self.create_calls.append(
            {
                "amount": amount,
                "description": description,
                "expires_in": expires_in,
                "customer": customer,
                "metadata": metadata,
            }
        )
        if self.create_error:
            raise self.create_error
        return self.charge

    def check_charge(self, external_id):
        self.check_calls.append(external_id)
        if self.check_error:
            raise self.check_error
        return self.status

    def register_customer(self, customer):
        self.registered.append(customer)
        if self.register_error:
            raise self.register_error
        return self.provider_customer_id

    def close(self):
        self.closed = True

    def mark_paid(self) -> None:
        self.status = PixChargeStatus(status="PAID", expires_at=PIX_1["expiresAt"], amount=990)

    def reject_create(self, detail="Invalid taxId") -> None:
        self.create_error = PaymentGatewayError("AbacatePay reported an error", details=detail)


@pytest.fixture()
def customer_repo() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository()


@pytest.fixture()
def billing_repo() -> InMemoryBillingRepository:
    return InMemoryBillingRepository()


@pytest.fixture()
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture()
def unconfigured_gateway() -> FakeGateway:
    return FakeGateway(configured=False)


@pytest.fixture()
def maria() -> dict[str, str]:
    return dict(MARIA)
