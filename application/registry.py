# application/registry.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional

from application.resolver import METHOD_ID, resolve
from core.errors import DuplicateMethodError, UnknownMethodError
from domain.rates import (
    DEFAULT_ASIA_RATE,
    DEFAULT_OTHER_COUNTRIES_RATE,
    DEFAULT_SRI_LANKA_RATE,
    DEFAULT_TITLE,
)


@dataclass(frozen=True)
class ShippingMethodDescriptor:
    """
    Statyczny opis metody wysyłki: to, co panel sklepu potrzebuje, żeby ją
    wylistować i skonfigurować w strefie, plus funkcja licząca stawkę.
    """
    id: str
    method_title: str
    method_description: str
    calculator: Callable[..., Any]
    default_settings: Dict[str, str] = field(default_factory=dict)
    form_fields: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "method_title": self.method_title,
            "method_description": self.method_description,
            "default_settings": dict(self.default_settings),
            "form_fields": {k: dict(v) for k, v in self.form_fields.items()},
        }


LOCATION_BASED_SHIPPING = ShippingMethodDescriptor(
    id=METHOD_ID,
    method_title="Location-Based Shipping",
    method_description=(
        "Location-based shipping method with three-tier rates: "
        "Sri Lanka, Asia (excluding LK), and Other countries."
    ),
    calculator=resolve,
    default_settings={
        "enabled": "yes",
        "title": DEFAULT_TITLE,
        "sri_lanka_rate": str(DEFAULT_SRI_LANKA_RATE),
        "asia_rate": str(DEFAULT_ASIA_RATE),
        "other_countries_rate": str(DEFAULT_OTHER_COUNTRIES_RATE),
    },
    form_fields={
        "enabled": {
            "title": "Enable/Disable",
            "type": "checkbox",
            "label": "Enable this shipping method",
            "default": "yes",
        },
        "title": {
            "title": "Method Title",
            "type": "text",
            "description": "This controls the title which the user sees during checkout.",
            "default": DEFAULT_TITLE,
        },
        "sri_lanka_rate": {
            "title": "Sri Lanka Rate (LKR)",
            "type": "text",
            "description": "Shipping rate for Sri Lanka. Enter amount without currency symbol.",
            "default": str(DEFAULT_SRI_LANKA_RATE),
        },
        "asia_rate": {
            "title": "Asia Rate (LKR)",
            "type": "text",
            "description": "Shipping rate for Asian countries (excluding Sri Lanka).",
            "default": str(DEFAULT_ASIA_RATE),
        },
        "other_countries_rate": {
            "title": "Other Countries Rate (LKR)",
            "type": "text",
            "description": "Shipping rate for all other countries (non-Asian).",
            "default": str(DEFAULT_OTHER_COUNTRIES_RATE),
        },
    },
)


class ShippingMethodRegistry:
    def __init__(self, methods: Optional[List[ShippingMethodDescriptor]] = None) -> None:
        self._methods: Dict[str, ShippingMethodDescriptor] = {}
        for descriptor in methods or []:
            self.register(descriptor)

    def register(self, descriptor: ShippingMethodDescriptor) -> ShippingMethodDescriptor:
        if descriptor.id in self._methods:
            raise DuplicateMethodError(descriptor.id)
        self._methods[descriptor.id] = descriptor
        return descriptor

    def get(self, method_id: str) -> ShippingMethodDescriptor:
        try:
            return self._methods[method_id]
        except KeyError:
            raise UnknownMethodError(method_id) from None

    def all(self) -> List[ShippingMethodDescriptor]:
        return list(self._methods.values())

    def __contains__(self, method_id: object) -> bool:
        return method_id in self._methods

    def __iter__(self) -> Iterator[ShippingMethodDescriptor]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._methods)


def default_registry() -> ShippingMethodRegistry:
    """Nowy rejestr z wbudowaną metodą "theme_custom_shipping"."""
    return ShippingMethodRegistry([LOCATION_BASED_SHIPPING])
