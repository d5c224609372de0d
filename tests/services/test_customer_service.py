from unittest.mock import MagicMock

import pytest

from pixcheckout.exceptions import NotFoundError
from pixcheckout.models.billing import Billing
from pixcheckout.models.customer import Customer
from pixcheckout.services.customer_service import CustomerService


class TestCustomerService:
    def setup_method(self):
        self.customers = MagicMock()
        self.billings = MagicMock()
        self.service = CustomerService(self.customers, self.billings)

    def test_count_customers(self):
        self.customers.count.return_value = 3
        assert self.service.count_customers() == 3

    def test_get_customer(self):
        self.customers.get_by_id.return_value = Customer(
            id="c1", name="Ana", email="a@example.com", phone="1", tax_id="2"
        )
        assert self.service.get_customer("c1").name == "Ana"

    def test_get_customer_not_found(self):
        self.customers.get_by_id.return_value = None
        with pytest.raises(NotFoundError) as exc_info:
            self.service.get_customer("c404")
        assert "c404" in exc_info.value.details

    def test_list_billings(self):
        self.billings.list_by_customer.return_value = [Billing(customer_id="c1")]
        assert len(self.service.list_billings("c1")) == 1
        self.billings.list_by_customer.assert_called_once_with("c1")
