# tools/export_rate_sheet.py
"""
Eksportuje arkusz stawek wysyłki dla wszystkich krajów ISO 3166.

Wejście:
    - ustawienia metody z aktualnego źródła (SHIPPING_SETTINGS_SOURCE)

Wyjście:
    - data/shipping/rate_sheet.csv
      Kolumny: country_code, country_name, tier, label, cost

Uruchomienie (z katalogu głównego projektu):
    python -m tools.export_rate_sheet [ścieżka.csv] [--instance-id 3]
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Optional

import pandas as pd
import pycountry

from application.shipping_rate_service import ShippingRateService
from core.config import Config
from core.logging_config import setup_logging
from domain.countries import country_display_name
from domain.models import Destination
from domain.rates import format_amount
from integration.settings_store import build_settings_store

OUTPUT_CSV = Path("data/shipping/rate_sheet.csv")

COLUMNS = ["country_code", "country_name", "tier", "label", "cost"]


def build_rate_sheet(service: ShippingRateService,
                     method_id: str = Config.DEFAULT_SHIPPING_METHOD,
                     instance_id: int = 0) -> pd.DataFrame:
    """Jedna wycena na kraj; wyłączona metoda -> pusty arkusz."""
    # ustawienia raz na cały arkusz (źródłem może być REST API sklepu)
    rate_config = service.load_rate_config(method_id, instance_id)
    calculator = service.registry.get(method_id).calculator

    rows = []
    for country in sorted(pycountry.countries, key=lambda c: c.alpha_2):
        code = country.alpha_2
        q = calculator(
            Destination(country_code=code),
            rate_config,
            "",
            method_id=method_id,
            instance_id=instance_id,
        )
        if q is None:
            continue
        rows.append({
            "country_code": code,
            "country_name": country_display_name(code),
            "tier": q.tier.value,
            "label": q.label,
            # string – CSV nie zgubi precyzji Decimal
            "cost": format_amount(q.cost),
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def export_rate_sheet(output: Path = OUTPUT_CSV,
                      service: Optional[ShippingRateService] = None,
                      instance_id: int = 0,
                      config: Any = Config) -> pd.DataFrame:
    service = service or ShippingRateService(build_settings_store(config))
    df = build_rate_sheet(service, method_id=config.DEFAULT_SHIPPING_METHOD, instance_id=instance_id)

    output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output, index=False, encoding="utf-8")

    if df.empty:
        print("[WARN] Metoda wyłączona – arkusz bez stawek.")
    else:
        counts = df["tier"].value_counts().to_dict()
        print(f"[INFO] Krajów w arkuszu: {len(df)} (progi: {counts})")
    print(f"[INFO] Arkusz zapisany do: {output.resolve()}")
    return df


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Export a per-country shipping rate sheet (CSV).")
    parser.add_argument("output", nargs="?", default=str(OUTPUT_CSV))
    parser.add_argument("--instance-id", type=int, default=0)
    args = parser.parse_args(argv)
    setup_logging(Config.LOG_LEVEL)
    export_rate_sheet(Path(args.output), instance_id=args.instance_id)


if __name__ == "__main__":
    main()
