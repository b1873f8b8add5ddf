# domain/models.py
from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Mapping

from domain.rates import (
    DEFAULT_ASIA_RATE,
    DEFAULT_OTHER_COUNTRIES_RATE,
    DEFAULT_SRI_LANKA_RATE,
    DEFAULT_TITLE,
    format_amount,
    parse_enabled,
    parse_rate,
)


class ShippingTier(Enum):
    SRI_LANKA = "sri_lanka"
    ASIA = "asia"
    OTHER = "other"


class TaxMode(Enum):
    PER_ORDER = "per_order"


@dataclass(frozen=True)
class RateConfig:
    enabled: bool = True
    title: str = DEFAULT_TITLE
    sri_lanka_rate: Decimal = DEFAULT_SRI_LANKA_RATE
    asia_rate: Decimal = DEFAULT_ASIA_RATE
    other_rate: Decimal = DEFAULT_OTHER_COUNTRIES_RATE

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "RateConfig":
        """
        Buduje konfigurację z surowych ustawień metody (klucze jak w panelu
        WooCommerce: enabled, title, sri_lanka_rate, asia_rate,
        other_countries_rate). Brakujące lub błędne wartości -> domyślne.
        """
        title = settings.get("title")
        if title is None or not str(title).strip():
            title = DEFAULT_TITLE
        return cls(
            enabled=parse_enabled(settings.get("enabled"), default=True),
            title=str(title),
            sri_lanka_rate=parse_rate(settings.get("sri_lanka_rate"), DEFAULT_SRI_LANKA_RATE),
            asia_rate=parse_rate(settings.get("asia_rate"), DEFAULT_ASIA_RATE),
            other_rate=parse_rate(settings.get("other_countries_rate"), DEFAULT_OTHER_COUNTRIES_RATE),
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "title": self.title,
            "sri_lanka_rate": format_amount(self.sri_lanka_rate),
            "asia_rate": format_amount(self.asia_rate),
            "other_countries_rate": format_amount(self.other_rate),
        }


@dataclass(frozen=True)
class Destination:
    country_code: str = ""


@dataclass(frozen=True)
class ShippingQuote:
    id: str
    label: str
    cost: Decimal
    tier: ShippingTier
    tax_mode: TaxMode = TaxMode.PER_ORDER

    def as_dict(self) -> Dict[str, Any]:
        # koszt jako string – bez utraty precyzji Decimal w JSON
        return {
            "id": self.id,
            "label": self.label,
            "cost": format_amount(self.cost),
            "tier": self.tier.value,
            "calc_tax": self.tax_mode.value,
        }
