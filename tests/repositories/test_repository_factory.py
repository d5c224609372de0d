from pixcheckout.repositories.factory import get_billing_repository, get_customer_repository
from pixcheckout.repositories.memory import InMemoryBillingRepository, InMemoryCustomerRepository


class TestFactory:
    def test_customer_repository(self):
        assert isinstance(get_customer_repository(), InMemoryCustomerRepository)

    def test_billing_repository(self):
        assert isinstance(get_billing_repository(), InMemoryBillingRepository)

    def test_each_call_is_a_fresh_store(self):
        first = get_customer_repository()
        second = get_customer_repository()
        assert first is not second
