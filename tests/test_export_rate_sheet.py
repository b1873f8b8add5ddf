"""Tests for the per-country rate sheet export."""
import pandas as pd

from application.shipping_rate_service import ShippingRateService
from tools.export_rate_sheet import COLUMNS, build_rate_sheet, export_rate_sheet


def test_rate_sheet_covers_every_country_once(make_store):
    store = make_store({"asia_rate": "1234"})
    df = build_rate_sheet(ShippingRateService(store))

    assert list(df.columns) == COLUMNS
    assert df["country_code"].is_unique
    assert store.settings_calls == 1

    by_code = df.set_index("country_code")
    assert by_code.loc["LK", "tier"] == "sri_lanka"
    assert by_code.loc["LK", "cost"] == "500"
    assert by_code.loc["VN", "cost"] == "1234"
    assert by_code.loc["US", "label"] == "Custom Shipping (United States)"
    assert set(df["tier"]) == {"sri_lanka", "asia", "other"}
    assert (df["tier"] == "asia").sum() == 49


def test_disabled_method_gives_empty_sheet(make_store):
    df = build_rate_sheet(ShippingRateService(make_store({"enabled": "no"})))
    assert df.empty
    assert list(df.columns) == COLUMNS


def test_export_writes_csv(tmp_path, make_store, config_cls):
    out = tmp_path / "sheets" / "rates.csv"
    export_rate_sheet(out, service=ShippingRateService(make_store()), config=config_cls)

    assert out.exists()
    df = pd.read_csv(out, dtype=str, keep_default_na=False)
    assert list(df.columns) == COLUMNS
    assert df.loc[df["country_code"] == "NA", "country_name"].iloc[0] == "Namibia"


def test_costs_are_plain_amounts(make_store):
    df = build_rate_sheet(ShippingRateService(make_store({"other_countries_rate": "3e3"})))
    assert df.set_index("country_code").loc["US", "cost"] == "3000"
