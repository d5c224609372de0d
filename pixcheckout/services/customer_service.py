from __future__ import annotations

import logging

from pixcheckout.exceptions import NotFoundError
from pixcheckout.models.billing import Billing
from pixcheckout.models.customer import Customer
from pixcheckout.repositories.base import BillingRepository, CustomerRepository

logger = logging.getLogger(__name__)


class CustomerService:
    def __init__(self, customers: CustomerRepository, billings: BillingRepository) -> None:
        self.customers = customers
        self.billings = billings

    def count_customers(self) -> int:
        result = self.customers.count()
        logger.debug("Counted %d customers", result)
        return result

    def get_customer(self, customer_id: str) -> Customer:
        result = self.customers.get_by_id(customer_id)
        logger.debug("get_customer id=%s found=%s", customer_id, result is not None)
        if result is None:
            raise NotFoundError("Customer not found", details=f"Cliente {customer_id} não existe")
        return result

    def list_billings(self, customer_id: str) -> list[Billing]:
        result = self.billings.list_by_customer(customer_id)
        logger.debug("Listed %d billings for customer=%s", len(result), customer_id)
        return result
