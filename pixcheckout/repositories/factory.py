"""Repository construction.

The web app calls these once at startup and keeps the instances on
``app.state``; each call returns a fresh, empty store.
"""

from pixcheckout.repositories.base import BillingRepository, CustomerRepository


def get_customer_repository() -> CustomerRepository:
    from pixcheckout.repositories.memory import InMemoryCustomerRepository

    return InMemoryCustomerRepository()


def get_billing_repository() -> BillingRepository:
    from pixcheckout.repositories.memory import InMemoryBillingRepository

    return InMemoryBillingRepository()
