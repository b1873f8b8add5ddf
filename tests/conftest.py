"""Shared fixtures for the shipping rate service tests."""
from decimal import Decimal

import pytest

from app import create_app
from core.config import Config
from domain.models import RateConfig


class ConfigForTests(Config):
    TESTING = True
    LOG_LEVEL = "WARNING"
    ADMIN_USERNAME = "admin"
    ADMIN_PASSWORD = "secret"
    STORE_BASE_COUNTRY = "LK"
    SHIPPING_SETTINGS_SOURCE = "env"
    SHIPPING_ENABLED = "yes"
    SHIPPING_TITLE = "Custom Shipping"
    SHIPPING_SRI_LANKA_RATE = "500"
    SHIPPING_ASIA_RATE = "1500"
    SHIPPING_OTHER_COUNTRIES_RATE = "3000"


class InMemoryStore:
    """Settings store backed by a dict, counts reads."""

    def __init__(self, settings=None, base_country="LK"):
        self.settings = dict(settings or {})
        self.base_country = base_country
        self.settings_calls = 0
        self.base_country_calls = 0

    def load_method_settings(self, method_id, instance_id):
        self.settings_calls += 1
        return dict(self.settings)

    def get_base_country(self):
        self.base_country_calls += 1
        return self.base_country


@pytest.fixture
def rate_config():
    return RateConfig(
        enabled=True,
        title="Custom Shipping",
        sri_lanka_rate=Decimal("500"),
        asia_rate=Decimal("1500"),
        other_rate=Decimal("3000"),
    )


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def app(store):
    return create_app(ConfigForTests, settings_store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def config_cls():
    return ConfigForTests


@pytest.fixture
def make_store():
    return InMemoryStore
