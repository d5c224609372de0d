from abc import ABC, abstractmethod
from collections.abc import Callable

from pixcheckout.models.billing import Billing
from pixcheckout.models.customer import Customer


class CustomerRepository(ABC):
    @abstractmethod
    def create(self, customer: Customer) -> Customer: ...

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Customer | None: ...

    @abstractmethod
    def get_by_email(self, email: str) -> Customer | None: ...

    @abstractmethod
    def find_first(self, predicate: Callable[[Customer], bool]) -> Customer | None: ...

    @abstractmethod
    def list_all(self) -> list[Customer]: ...

    @abstractmethod
    def count(self) -> int: ...

    @abstractmethod
    def update(self, customer_id: str, **fields) -> Customer | None: ...


class BillingRepository(ABC):
    @abstractmethod
    def create(self, billing: Billing) -> Billing: ...

    @abstractmethod
    def get_by_id(self, billing_id: str) -> Billing | None: ...

    @abstractmethod
    def get_by_external_id(self, external_id: str) -> Billing | None: ...

    @abstractmethod
    def find_first(self, predicate: Callable[[Billing], bool]) -> Billing | None: ...

    @abstractmethod
    def list_all(self) -> list[Billing]: ...

    @abstractmethod
    def list_by_customer(self, customer_id: str) -> list[Billing]: ...

    @abstractmethod
    def update(self, billing_id: str, **fields) -> Billing | None: ...
