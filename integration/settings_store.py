# integration/settings_store.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional, Union
import json
import logging
from core.config import Config
from core.errors import SettingsError

logger = logging.getLogger(__name__)


class EnvSettingsStore:
    """Ustawienia metody z Config (zmienne środowiskowe / .env) – jedna konfiguracja dla wszystkich instancji."""

    def __init__(self, config: Any = Config) -> None:
        self.config = config

    def load_method_settings(self, method_id: str, instance_id: int) -> Dict[str, Any]:
        c = self.config
        return {
            "enabled": getattr(c, "SHIPPING_ENABLED", None),
            "title": getattr(c, "SHIPPING_TITLE", None),
            "sri_lanka_rate": getattr(c, "SHIPPING_SRI_LANKA_RATE", None),
            "asia_rate": getattr(c, "SHIPPING_ASIA_RATE", None),
            "other_countries_rate": getattr(c, "SHIPPING_OTHER_COUNTRIES_RATE", None),
        }

    def get_base_country(self) -> str:
        return str(getattr(self.config, "STORE_BASE_COUNTRY", "") or "")


class JsonFileSettingsStore:
    """
    Ustawienia z pliku JSON:
      {
        "base_country": "LK",
        "methods": {
          "theme_custom_shipping": {
            "default": {"title": "Courier", "asia_rate": "1200"},
            "3": {"enabled": "no"}
          }
        }
      }
    Ustawienia instancji nadpisują "default". Brak pliku -> same domyślne.
    """

    def __init__(self, path: Union[str, Path], base_country: Optional[str] = None) -> None:
        self.path = Path(path)
        self._fallback_base_country = base_country if base_country is not None else Config.STORE_BASE_COUNTRY

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            logger.warning("Settings file %s not found, using defaults", self.path)
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise SettingsError(f"Cannot read settings file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {self.path} must contain a JSON object")
        return data

    def load_method_settings(self, method_id: str, instance_id: int) -> Dict[str, Any]:
        methods = self._object(self._read().get("methods"), "methods")
        per_method = self._object(methods.get(method_id), f"methods.{method_id}")
        settings: Dict[str, Any] = {}
        settings.update(self._object(per_method.get("default"), f"methods.{method_id}.default"))
        key = str(instance_id)
        settings.update(self._object(per_method.get(key), f"methods.{method_id}.{key}"))
        return settings

    def _object(self, value: Any, where: str) -> Dict[str, Any]:
        # brak sekcji = pusty słownik; inny typ niż obiekt JSON to błąd pliku
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise SettingsError(f"Settings file {self.path}: '{where}' must be a JSON object")
        return value

    def get_base_country(self) -> str:
        return str(self._read().get("base_country") or self._fallback_base_country or "")


def build_settings_store(config: Any = Config):
    """Wybór źródła ustawień wg SHIPPING_SETTINGS_SOURCE."""
    source = str(getattr(config, "SHIPPING_SETTINGS_SOURCE", "env") or "env").strip().lower()
    if source == "env":
        return EnvSettingsStore(config)
    if source == "file":
        return JsonFileSettingsStore(
            getattr(config, "SHIPPING_SETTINGS_PATH", "data/shipping_settings.json"),
            base_country=getattr(config, "STORE_BASE_COUNTRY", None),
        )
    if source == "woocommerce":
        from integration.woocommerce_adapter import WooCommerceSettingsAdapter

        return WooCommerceSettingsAdapter(
            base_url=getattr(config, "WC_BASE_URL", ""),
            consumer_key=getattr(config, "WC_CONSUMER_KEY", ""),
            consumer_secret=getattr(config, "WC_CONSUMER_SECRET", ""),
            zone_id=getattr(config, "WC_SHIPPING_ZONE_ID", 0),
            timeout=getattr(config, "WC_TIMEOUT", 30),
        )
    raise SettingsError(f"Unknown SHIPPING_SETTINGS_SOURCE: {source}")
