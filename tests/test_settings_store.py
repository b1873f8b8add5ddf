"""Tests for settings stores and the rate service that reads them."""
import json
from decimal import Decimal

import pytest

from application.shipping_rate_service import ShippingRateService
from core.errors import SettingsError, UnknownMethodError
from integration.settings_store import EnvSettingsStore, JsonFileSettingsStore, build_settings_store
from integration.woocommerce_adapter import WooCommerceSettingsAdapter


class TestEnvSettingsStore:

    def test_reads_config_attributes(self, config_cls):
        class Cfg(config_cls):
            SHIPPING_ASIA_RATE = "1100"
            STORE_BASE_COUNTRY = "IN"

        store = EnvSettingsStore(Cfg)
        settings = store.load_method_settings("theme_custom_shipping", 0)
        assert settings["asia_rate"] == "1100"
        assert settings["enabled"] == "yes"
        assert store.get_base_country() == "IN"


class TestJsonFileSettingsStore:

    def _write(self, tmp_path, data):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    def test_instance_overrides_default(self, tmp_path):
        path = self._write(tmp_path, {
            "base_country": "SG",
            "methods": {
                "theme_custom_shipping": {
                    "default": {"title": "Courier", "asia_rate": "1200"},
                    "3": {"asia_rate": "900"},
                },
            },
        })
        store = JsonFileSettingsStore(path)
        assert store.load_method_settings("theme_custom_shipping", 3) == {"title": "Courier", "asia_rate": "900"}
        assert store.load_method_settings("theme_custom_shipping", 1) == {"title": "Courier", "asia_rate": "1200"}
        assert store.get_base_country() == "SG"

    def test_missing_file_means_defaults(self, tmp_path):
        store = JsonFileSettingsStore(tmp_path / "missing.json", base_country="LK")
        assert store.load_method_settings("theme_custom_shipping", 0) == {}
        assert store.get_base_country() == "LK"

    def test_malformed_json_raises(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SettingsError):
            JsonFileSettingsStore(path).load_method_settings("theme_custom_shipping", 0)

    def test_non_object_raises(self, tmp_path):
        path = self._write(tmp_path, ["a", "b"])
        with pytest.raises(SettingsError):
            JsonFileSettingsStore(path).get_base_country()


class TestBuildSettingsStore:

    def test_env(self, config_cls):
        assert isinstance(build_settings_store(config_cls), EnvSettingsStore)

    def test_file(self, tmp_path, config_cls):
        class Cfg(config_cls):
            SHIPPING_SETTINGS_SOURCE = "file"
            SHIPPING_SETTINGS_PATH = str(tmp_path / "s.json")

        store = build_settings_store(Cfg)
        assert isinstance(store, JsonFileSettingsStore)
        assert store.path == tmp_path / "s.json"

    def test_woocommerce(self, config_cls):
        class Cfg(config_cls):
            SHIPPING_SETTINGS_SOURCE = "woocommerce"
            WC_BASE_URL = "https://shop.example.lk/"
            WC_SHIPPING_ZONE_ID = 2

        store = build_settings_store(Cfg)
        assert isinstance(store, WooCommerceSettingsAdapter)
        assert store.base_url == "https://shop.example.lk"
        assert store.zone_id == 2

    def test_unknown_source(self, config_cls):
        class Cfg(config_cls):
            SHIPPING_SETTINGS_SOURCE = "redis"

        with pytest.raises(SettingsError):
            build_settings_store(Cfg)


class TestShippingRateService:

    def test_settings_override_defaults(self, make_store):
        service = ShippingRateService(make_store({"asia_rate": "999", "title": None}))
        cfg = service.load_rate_config()
        assert cfg.asia_rate == Decimal("999")
        assert cfg.title == "Custom Shipping"
        assert cfg.sri_lanka_rate == Decimal("500")

    def test_calculate_shipping_returns_one_quote(self, make_store):
        store = make_store()
        quotes = ShippingRateService(store).calculate_shipping({"destination": {"country": "PK"}}, instance_id=4)
        assert [q.id for q in quotes] == ["theme_custom_shipping_4"]
        assert quotes[0].cost == Decimal("1500")
        assert store.settings_calls == 1
        assert store.base_country_calls == 0

    def test_disabled_returns_no_quotes(self, make_store):
        store = make_store({"enabled": "no"})
        assert ShippingRateService(store).calculate_shipping({"destination": {"country": "LK"}}) == []
        assert store.base_country_calls == 0

    def test_base_country_fallback(self, make_store):
        store = make_store(base_country="LK")
        payload = ShippingRateService(store).as_api_payload({"destination": {"country": ""}})
        assert payload["resolved_country"] == "LK"
        assert payload["tier"] == "sri_lanka"
        assert payload["destination"] == {"country": None}
        assert store.base_country_calls == 1

    def test_unknown_method(self, make_store):
        with pytest.raises(UnknownMethodError):
            ShippingRateService(make_store()).calculate_shipping({"destination": {"country": "LK"}}, method_id="x")


class TestJsonFileSettingsShape:

    @pytest.mark.parametrize("data", [
        {"methods": []},
        {"methods": "theme_custom_shipping"},
        {"methods": {"theme_custom_shipping": ["x"]}},
        {"methods": {"theme_custom_shipping": {"default": ["x"]}}},
        {"methods": {"theme_custom_shipping": {"0": "enabled=no"}}},
    ])
    def test_wrong_structure_raises_settings_error(self, tmp_path, data):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(SettingsError):
            JsonFileSettingsStore(path).load_method_settings("theme_custom_shipping", 0)

    def test_other_methods_are_not_validated(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"methods": {"flat_rate": ["x"]}}), encoding="utf-8")
        assert JsonFileSettingsStore(path).load_method_settings("theme_custom_shipping", 0) == {}
