"""Process-local repositories backed by plain dicts.

Entities live for the lifetime of the process. Every mutation happens under
the repository lock so concurrent requests never observe a half-applied
update. Callers always receive copies; mutating a returned model does not
touch storage.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from pydantic import BaseModel
from ulid import ULID

from pixcheckout.constants import SP_TZ
from pixcheckout.models.billing import Billing
from pixcheckout.models.customer import Customer
from pixcheckout.repositories.base import BillingRepository, CustomerRepository

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


def _now() -> datetime:
    return datetime.now(SP_TZ)


def _merge(current: ModelT, fields: dict) -> ModelT:
    """Shallow-overwrite ``fields`` onto ``current`` and re-validate."""
    model_cls = type(current)
    unknown = set(fields) - set(model_cls.model_fields)
    if unknown:
        raise ValueError(f"Unknown {model_cls.__name__} fields: {', '.join(sorted(unknown))}")
    protected = set(fields) & _IMMUTABLE_FIELDS
    if protected:
        raise ValueError(f"Immutable {model_cls.__name__} fields: {', '.join(sorted(protected))}")
    data = current.model_dump()
    data.update(fields)
    return model_cls.model_validate(data)


class InMemoryCustomerRepository(CustomerRepository):
    def __init__(self) -> None:
        self._customers: dict[str, Customer] = {}
        self._lock = threading.Lock()

    def create(self, customer: Customer) -> Customer:
        stored = customer.model_copy(update={"id": str(ULID()), "created_at": _now()}, deep=True)
        with self._lock:
            self._customers[stored.id] = stored
        logger.debug("Stored customer id=%s", stored.id)
        return stored.model_copy(deep=True)

    def get_by_id(self, customer_id: str) -> Customer | None:
        with self._lock:
            customer = self._customers.get(customer_id)
        return customer.model_copy(deep=True) if customer else None

    def get_by_email(self, email: str) -> Customer | None:
        return self.find_first(lambda c: c.email == email)

    def find_first(self, predicate: Callable[[Customer], bool]) -> Customer | None:
        with self._lock:
            candidates = list(self._customers.values())
        for customer in candidates:
            if predicate(customer):
                return customer.model_copy(deep=True)
        return None

    def list_all(self) -> list[Customer]:
        with self._lock:
            return [c.model_copy(deep=True) for c in self._customers.values()]

    def count(self) -> int:
        with self._lock:
            return len(self._customers)

    def update(self, customer_id: str, **fields) -> Customer | None:
        with self._lock:
            current = self._customers.get(customer_id)
            if current is None:
                return None
            updated = _merge(current, fields)
            self._customers[customer_id] = updated
        logger.debug("Updated customer id=%s fields=%s", customer_id, sorted(fields))
        return updated.model_copy(deep=True)


class InMemoryBillingRepository(BillingRepository):
    """Billing storage with a secondary index on ``external_payment_id``."""

    def __init__(self) -> None:
        self._billings: dict[str, Billing] = {}
        self._by_external_id: dict[str, str] = {}
        self._lock = threading.Lock()

    def create(self, billing: Billing) -> Billing:
        now = _now()
        stored = billing.model_copy(
            update={"id": str(ULID()), "created_at": now, "updated_at": now}, deep=True
        )
        with self._lock:
            self._billings[stored.id] = stored
            self._index(stored)
        logger.debug("Stored billing id=%s customer=%s", stored.id, stored.customer_id)
        return stored.model_copy(deep=True)

    def get_by_id(self, billing_id: str) -> Billing | None:
        with self._lock:
            billing = self._billings.get(billing_id)
        return billing.model_copy(deep=True) if billing else None

    def get_by_external_id(self, external_id: str) -> Billing | None:
        with self._lock:
            billing_id = self._by_external_id.get(external_id)
            billing = self._billings.get(billing_id) if billing_id else None
        return billing.model_copy(deep=True) if billing else None

    def find_first(self, predicate: Callable[[Billing], bool]) -> Billing | None:
        with self._lock:
            candidates = list(self._billings.values())
        for billing in candidates:
            if predicate(billing):
                return billing.model_copy(deep=True)
        return None

    def list_all(self) -> list[Billing]:
        with self._lock:
            return [b.model_copy(deep=True) for b in self._billings.values()]

    def list_by_customer(self, customer_id: str) -> list[Billing]:
        with self._lock:
            return [
                b.model_copy(deep=True) for b in self._billings.values() if b.customer_id == customer_id
            ]

    def update(self, billing_id: str, **fields) -> Billing | None:
        fields.pop("updated_at", None)
        with self._lock:
            current = self._billings.get(billing_id)
            if current is None:
                return None
            updated = _merge(current, {**fields, "updated_at": _now()})
            self._billings[billing_id] = updated
            if current.external_payment_id and current.external_payment_id != updated.external_payment_id:
                self._reindex(current.external_payment_id)
            self._index(updated)
        logger.debug("Updated billing id=%s fields=%s", billing_id, sorted(fields))
        return updated.model_copy(deep=True)

    def _index(self, billing: Billing) -> None:
        """Point the index at the first billing, in insertion order, holding the id."""
        external_id = billing.external_payment_id
        if not external_id:
            return
        holder = self._by_external_id.get(external_id)
        if holder is None:
            self._by_external_id[external_id] = billing.id
        elif holder != billing.id:
            self._reindex(external_id)

    def _reindex(self, external_id: str) -> None:
        for billing in self._billings.values():
            if billing.external_payment_id == external_id:
                self._by_external_id[external_id] = billing.id
                return
        self._by_external_id.pop(external_id, None)
