# application/shipping_rate_service.py
from __future__ import annotations
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from application.registry import ShippingMethodRegistry, default_registry
from application.resolver import METHOD_ID, destination_from_package
from domain.countries import normalize_country_code
from domain.models import RateConfig, ShippingQuote

logger = logging.getLogger(__name__)


class ShippingRateService:
    """
    Spina źródło ustawień, rejestr metod i resolver.
    Ustawienia czytamy raz na wycenę i przekazujemy resolverowi jako wartość.
    """

    def __init__(self,
                 store: Any,
                 registry: Optional[ShippingMethodRegistry] = None) -> None:
        self._store = store
        self._registry = registry if registry is not None else default_registry()

    @property
    def registry(self) -> ShippingMethodRegistry:
        return self._registry

    def load_rate_config(self, method_id: str = METHOD_ID, instance_id: int = 0) -> RateConfig:
        descriptor = self._registry.get(method_id)
        settings: Dict[str, Any] = dict(descriptor.default_settings)
        raw = self._store.load_method_settings(method_id, instance_id) or {}
        # None = "nie ustawiono" -> zostaje wartość domyślna
        settings.update({k: v for k, v in raw.items() if v is not None})
        return RateConfig.from_settings(settings)

    def _quote(
        self,
        package: Mapping[str, Any],
        method_id: str,
        instance_id: int,
    ) -> Tuple[str, List[ShippingQuote]]:
        descriptor = self._registry.get(method_id)
        config = self.load_rate_config(method_id, instance_id)
        if not config.enabled:
            logger.debug("Shipping method %s_%s disabled, no rates", method_id, instance_id)
            return "", []

        destination = destination_from_package(package)
        fallback = ""
        resolved = normalize_country_code(destination.country_code)
        if not resolved:
            fallback = self._store.get_base_country()
            resolved = normalize_country_code(fallback)
            logger.debug("Package without destination country, falling back to base country %r", fallback)

        quote = descriptor.calculator(
            destination,
            config,
            fallback,
            country_names=package.get("countries"),
            method_id=method_id,
            instance_id=instance_id,
        )
        return resolved, ([quote] if quote is not None else [])

    def calculate_shipping(
        self,
        package: Mapping[str, Any],
        method_id: str = METHOD_ID,
        instance_id: int = 0,
    ) -> List[ShippingQuote]:
        """Zero albo jedna stawka dla paczki (pusta lista = metoda wyłączona)."""
        return self._quote(package, method_id, instance_id)[1]

    def as_api_payload(
        self,
        package: Mapping[str, Any],
        method_id: str = METHOD_ID,
        instance_id: int = 0,
    ) -> Dict:
        resolved, quotes = self._quote(package, method_id, instance_id)
        requested = destination_from_package(package).country_code
        return {
            "method_id": method_id,
            "instance_id": instance_id,
            "destination": {"country": requested or None},
            "resolved_country": resolved or None,
            "tier": quotes[0].tier.value if quotes else None,
            "rates": [q.as_dict() for q in quotes],
        }
