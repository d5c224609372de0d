"""Web test fixtures — TestClient over a fresh app with a fake gateway."""

from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from pixcheckout.settings import Settings
from tests.conftest import FakeGateway
from web.app import create_app


@pytest.fixture()
def web_settings() -> Settings:
    return Settings(_env_file=None, abacatepay_api_key="abc_dev_key", environment="development")


@pytest.fixture()
def app(web_settings, gateway):
    return create_app(web_settings, gateway=gateway)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def unconfigured_app(web_settings):
    return create_app(web_settings, gateway=FakeGateway(configured=False))


@pytest.fixture()
def unconfigured_client(unconfigured_app):
    with TestClient(unconfigured_app) as test_client:
        yield test_client


@pytest.fixture()
def billing_repo(app):
    return app.state.billing_repo


@pytest.fixture()
def customer_repo(app):
    return app.state.customer_repo
