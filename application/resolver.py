# application/resolver.py
from __future__ import annotations
from typing import Any, Mapping, Optional

from domain.countries import ASIAN_COUNTRIES, SRI_LANKA, country_display_name, normalize_country_code
from domain.models import Destination, RateConfig, ShippingQuote, ShippingTier, TaxMode

METHOD_ID = "theme_custom_shipping"


def select_tier(country_code: str) -> ShippingTier:
    """Klasyfikacja kraju – pierwsze dopasowanie wygrywa, każdy kod trafia do dokładnie jednego progu."""
    code = normalize_country_code(country_code)
    if code == SRI_LANKA:
        return ShippingTier.SRI_LANKA
    if code in ASIAN_COUNTRIES:
        return ShippingTier.ASIA
    return ShippingTier.OTHER


def resolve(
    destination: Destination,
    config: RateConfig,
    fallback_country: str,
    country_names: Optional[Mapping[str, str]] = None,
    method_id: str = METHOD_ID,
    instance_id: int = 0,
) -> Optional[ShippingQuote]:
    """
    Wycena jednej paczki według kraju docelowego.

    Zwraca None, gdy metoda jest wyłączona (brak stawki, to nie błąd).
    Nieznane lub śmieciowe kody lądują w progu "other" – nic tu nie rzuca.
    """
    if not config.enabled:
        return None

    raw_code = (destination.country_code or "").strip()
    if not raw_code:
        raw_code = (fallback_country or "").strip()
    code = normalize_country_code(raw_code)

    tier = select_tier(code)
    if tier is ShippingTier.SRI_LANKA:
        cost = config.sri_lanka_rate
        label = f"{config.title} (Sri Lanka)"
    elif tier is ShippingTier.ASIA:
        cost = config.asia_rate
        label = f"{config.title} (Asia)"
    else:
        cost = config.other_rate
        label = f"{config.title} ({country_display_name(code, country_names)})"

    return ShippingQuote(
        id=f"{method_id}_{instance_id}",
        label=label,
        cost=cost,
        tier=tier,
        tax_mode=TaxMode.PER_ORDER,
    )


def destination_from_package(package: Mapping[str, Any]) -> Destination:
    """Paczka w stylu WooCommerce: {"destination": {"country": "IN", ...}, ...}."""
    dest = package.get("destination") or {}
    country = dest.get("country") if isinstance(dest, Mapping) else None
    return Destination(country_code=str(country) if country else "")
