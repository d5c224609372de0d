from __future__ import annotations

from abc import ABC, abstractmethod

from pixcheckout.models.customer import Customer
from pixcheckout.models.payment import PixCharge, PixChargeStatus


class PaymentGateway(ABC):
    """Narrow interface over a PIX payment provider.

    Failures are raised, never returned: ``ConfigurationError`` when the
    gateway has no credential, ``PaymentGatewayError`` when the provider
    rejects the request or cannot be reached.
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool: ...

    @abstractmethod
    def create_charge(
        self,
        amount: int,
        description: str,
        expires_in: int,
        customer: Customer,
        metadata: dict[str, str] | None = None,
    ) -> PixCharge:
        """Create a PIX charge of ``amount`` centavos valid for ``expires_in`` seconds."""
        ...

    @abstractmethod
    def check_charge(self, external_id: str) -> PixChargeStatus:
        """Fetch the current provider status of a charge."""
        ...

    def register_customer(self, customer: Customer) -> str | None:
        """Register the customer with the provider and return its provider id.

        Optional; providers without a customer registry return ``None``.
        """
        return None

    def close(self) -> None:
        """Release any held transport resources."""
        return None
