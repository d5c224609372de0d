from __future__ import annotations

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from pixcheckout.models import only_digits

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

MIN_NAME_LENGTH = 2
MIN_PHONE_DIGITS = 10
MIN_TAX_ID_DIGITS = 11


class CustomerCreate(BaseModel):
    """Checkout input. Every invalid field is reported, not just the first."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

    name: str
    email: str
    phone: str
    tax_id: str

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if len(value) < MIN_NAME_LENGTH:
            raise ValueError("Nome deve ter pelo menos 2 caracteres")
        return value

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        if not EMAIL_RE.match(value):
            raise ValueError("E-mail inválido")
        return value

    @field_validator("phone")
    @classmethod
    def _check_phone(cls, value: str) -> str:
        if len(only_digits(value)) < MIN_PHONE_DIGITS:
            raise ValueError("Telefone deve ter pelo menos 10 dígitos")
        return value

    @field_validator("tax_id")
    @classmethod
    def _check_tax_id(cls, value: str) -> str:
        if len(only_digits(value)) < MIN_TAX_ID_DIGITS:
            raise ValueError("CPF deve ter pelo menos 11 dígitos")
        return value


class Customer(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = ""
    name: str
    email: str
    phone: str
    tax_id: str
    external_payment_id: str | None = None
    created_at: datetime | None = None
