"""AbacatePay REST client.

Envelope returned by every endpoint: ``{"data": {...}, "error": null}`` on
success, ``{"data": null, "error": <detail>}`` on failure.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from pixcheckout.exceptions import ConfigurationError, GatewayUnavailableError, PaymentGatewayError
from pixcheckout.gateway.base import PaymentGateway
from pixcheckout.models.customer import Customer
from pixcheckout.models.payment import PixCharge, PixChargeStatus

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.abacatepay.com/v1"


def _customer_payload(customer: Customer) -> dict[str, str]:
    return {
        "name": customer.name,
        "cellphone": customer.phone,
        "email": customer.email,
        "taxId": customer.tax_id,
    }


class AbacatePayGateway(PaymentGateway):
    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def __enter__(self) -> AbacatePayGateway:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def create_charge(
        self,
        amount: int,
        description: str,
        expires_in: int,
        customer: Customer,
        metadata: dict[str, str] | None = None,
    ) -> PixCharge:
        payload: dict[str, Any] = {
            "amount": amount,
            "expiresIn": expires_in,
            "description": description,
            "customer": _customer_payload(customer),
        }
        if metadata:
            payload["metadata"] = metadata
        logger.info("Creating PIX charge: amount=%s expires_in=%s metadata=%s", amount, expires_in, metadata)
        data = self._request("POST", "/pixQrCode/create", json=payload)
        charge = self._parse(PixCharge, data)
        logger.info("PIX charge created: id=%s status=%s", charge.id, charge.status)
        return charge

    def check_charge(self, external_id: str) -> PixChargeStatus:
        logger.info("Checking PIX charge: id=%s", external_id)
        data = self._request("GET", "/pixQrCode/check", params={"id": external_id})
        status = self._parse(PixChargeStatus, data)
        logger.info("PIX charge %s status=%s", external_id, status.status)
        return status

    def register_customer(self, customer: Customer) -> str | None:
        data = self._request("POST", "/customer/create", json=_customer_payload(customer))
        provider_id = data.get("id")
        if not isinstance(provider_id, str) or not provider_id:
            logger.warning("AbacatePay customer registered without a usable id: %r", provider_id)
            return None
        logger.info("AbacatePay customer registered: id=%s", provider_id)
        return provider_id

    def _request(self, method: str, path: str, **kwargs) -> dict[str, Any]:
        if not self.is_configured:
            raise ConfigurationError("AbacatePay API key not configured", details="API key não configurada")

        url = f"{self.base_url}{path}"
        headers = {"Authorization": f"Bearer {self.api_key}", "Accept": "application/json"}
        try:
            response = self._client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("AbacatePay %s %s failed: %s", method, path, exc)
            raise GatewayUnavailableError("AbacatePay request failed", details=str(exc)) from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        if not isinstance(body, dict):
            logger.error("AbacatePay %s %s returned non-JSON body (HTTP %s)", method, path, response.status_code)
            raise PaymentGatewayError(
                f"Unexpected AbacatePay response (HTTP {response.status_code})",
                details=response.text or None,
            )

        error = body.get("error")
        if error:
            logger.error("AbacatePay %s %s error: %s", method, path, error)
            raise PaymentGatewayError("AbacatePay reported an error", details=error)

        if response.is_error:
            logger.error("AbacatePay %s %s returned HTTP %s", method, path, response.status_code)
            raise PaymentGatewayError(f"AbacatePay returned HTTP {response.status_code}", details=body)

        data = body.get("data")
        if not isinstance(data, dict):
            logger.error("AbacatePay %s %s returned no data", method, path)
            raise PaymentGatewayError("AbacatePay response without data", details=body)
        return data

    @staticmethod
    def _parse(model, data: dict[str, Any]):
        try:
            return model.model_validate(data)
        except PydanticValidationError as exc:
            raise PaymentGatewayError("Malformed AbacatePay response", details=data) from exc
