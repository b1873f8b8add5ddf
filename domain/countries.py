# domain/countries.py
from __future__ import annotations
from typing import Mapping, Optional

import pycountry

SRI_LANKA = "LK"

# ISO 3166-1 alpha-2 – Azja bez Sri Lanki (LK ma własny próg)
ASIAN_COUNTRIES = frozenset({
    "AF", "AM", "AZ", "BH", "BD", "BT", "BN", "KH", "CN", "GE",
    "HK", "IN", "ID", "IR", "IQ", "IL", "JP", "JO", "KZ", "KW",
    "KG", "LA", "LB", "MO", "MY", "MV", "MN", "MM", "NP", "KP",
    "OM", "PK", "PS", "PH", "QA", "SA", "SG", "KR", "SY", "TW",
    "TJ", "TH", "TL", "TR", "TM", "AE", "UZ", "VN", "YE",
})


def normalize_country_code(code: Optional[str]) -> str:
    return (code or "").strip().upper()


def country_display_name(code: str, country_names: Optional[Mapping[str, str]] = None) -> str:
    """
    Nazwa kraju do etykiety: najpierw tabela z żądania (jak WC()->countries),
    potem baza ISO 3166 z pycountry, na końcu surowy kod.
    """
    if country_names:
        name = country_names.get(code) or country_names.get(code.upper())
        if name:
            return str(name)

    if len(code) == 2 and code.isalpha():
        country = pycountry.countries.get(alpha_2=code.upper())
        if country is not None:
            # common_name tam, gdzie oficjalna nazwa jest "długa" (np. TW, KR)
            return getattr(country, "common_name", None) or country.name

    return code
