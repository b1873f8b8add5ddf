# domain/rates.py
"""
Parsowanie wartości konfiguracyjnych metody wysyłki.

Ustawienia przychodzą jako stringi (panel sklepu, .env, JSON). Parsujemy je
tolerancyjnie (bierzemy wiodącą część liczbową); brak liczby, NaN, inf -> stawka
domyślna.
"""
from __future__ import annotations
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any

DEFAULT_TITLE = "Custom Shipping"
DEFAULT_SRI_LANKA_RATE = Decimal("500")
DEFAULT_ASIA_RATE = Decimal("1500")
DEFAULT_OTHER_COUNTRIES_RATE = Decimal("3000")

# wiodąca liczba: znak, część całkowita/ułamkowa, opcjonalny wykładnik
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")

_TRUTHY = {"yes", "y", "1", "true", "on"}
_FALSY = {"no", "n", "0", "false", "off"}


def parse_rate(raw: Any, default: Decimal) -> Decimal:
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, Decimal):
        return raw if raw.is_finite() else default
    if isinstance(raw, int):
        return Decimal(raw)
    if isinstance(raw, float):
        if math.isnan(raw) or math.isinf(raw):
            return default
        return Decimal(str(raw))

    m = _LEADING_NUMBER.match(str(raw))
    if not m:
        return default
    try:
        value = Decimal(m.group(1))
    except InvalidOperation:
        return default
    return value if value.is_finite() else default


def parse_enabled(raw: Any, default: bool = True) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return default
    text = str(raw).strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    return default


def format_amount(value: Decimal) -> str:
    """Kwota bez notacji naukowej: Decimal("1E+3") -> "1000"."""
    return format(value, "f")
