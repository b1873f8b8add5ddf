# integration/woocommerce_adapter.py
from __future__ import annotations
from typing import Any, Dict, Optional, Tuple
import logging
import requests
from core.config import Config
from core.errors import SettingsError

logger = logging.getLogger(__name__)

API_PREFIX = "wp-json/wc/v3"


class WooCommerceSettingsAdapter:
    """
    WooCommerce REST API v3 – ustawienia instancji metody wysyłki w strefie
    oraz kraj bazowy sklepu.
      GET /shipping/zones/{zone_id}/methods/{instance_id}
      GET /settings/general/woocommerce_default_country
    - Autoryzacja: consumer key/secret (HTTP Basic, po HTTPS).
    - Ustawienia metody przychodzą jako {"key": {"value": ...}} – spłaszczamy.
    - Błędy HTTP/JSON -> SettingsError; ostatnie żądanie: get_last_request_info().
    """

    def __init__(self,
                 base_url: Optional[str] = None,
                 consumer_key: Optional[str] = None,
                 consumer_secret: Optional[str] = None,
                 zone_id: Optional[int] = None,
                 session: Optional[requests.Session] = None,
                 timeout: Optional[int] = None) -> None:
        self.base_url = (base_url if base_url is not None else Config.WC_BASE_URL).rstrip("/")
        if not self.base_url:
            raise SettingsError("WC_BASE_URL is not set in environment")
        self.s = session or requests.Session()
        self.auth = (
            consumer_key if consumer_key is not None else Config.WC_CONSUMER_KEY,
            consumer_secret if consumer_secret is not None else Config.WC_CONSUMER_SECRET,
        )
        self.zone_id = Config.WC_SHIPPING_ZONE_ID if zone_id is None else zone_id
        self.timeout = timeout or Config.WC_TIMEOUT

        # debug/diag
        self.last_request: Optional[Tuple[str, Dict]] = None
        self.last_status: Optional[int] = None

    # ---------------- HTTP ----------------

    def _get(self, path: str, params: Optional[Dict] = None) -> Any:
        url = f"{self.base_url}/{API_PREFIX}/{path.lstrip('/')}"
        self.last_request = (url, dict(params or {}))
        try:
            r = self.s.get(url, auth=self.auth, params=params or {}, timeout=self.timeout)
        except requests.RequestException as e:
            self.last_status = None
            raise SettingsError(f"WooCommerce request failed: {url}: {e}") from e
        self.last_status = r.status_code
        if r.status_code >= 400:
            raise SettingsError(f"WooCommerce returned HTTP {r.status_code} for {url}: {r.text[:200]}")
        try:
            return r.json()
        except ValueError as e:
            raise SettingsError(f"WooCommerce returned invalid JSON for {url}") from e

    # -------------- Settings -------------

    @staticmethod
    def _flatten_settings(payload: Dict[str, Any]) -> Dict[str, Any]:
        """{"title": {"id": "title", "value": "X"}} -> {"title": "X"}."""
        out: Dict[str, Any] = {}
        for key, field in (payload.get("settings") or {}).items():
            if isinstance(field, dict):
                out[key] = field.get("value")
            else:
                out[key] = field
        # "enabled" instancji żyje poza settings w odpowiedzi REST
        if "enabled" not in out and "enabled" in payload:
            out["enabled"] = "yes" if payload.get("enabled") else "no"
        return out

    def load_method_settings(self, method_id: str, instance_id: int) -> Dict[str, Any]:
        payload = self._get(f"shipping/zones/{self.zone_id}/methods/{instance_id}")
        if not isinstance(payload, dict):
            raise SettingsError("Unexpected shipping method payload shape")
        remote_id = payload.get("method_id")
        if remote_id and remote_id != method_id:
            raise SettingsError(
                f"Instance {instance_id} in zone {self.zone_id} is '{remote_id}', not '{method_id}'"
            )
        settings = self._flatten_settings(payload)
        logger.debug("Loaded WooCommerce settings for %s_%s: %s", method_id, instance_id, sorted(settings))
        return settings

    def get_base_country(self) -> str:
        payload = self._get("settings/general/woocommerce_default_country")
        value = str((payload or {}).get("value") or "") if isinstance(payload, dict) else ""
        # "LK:Western" -> "LK" (kraj:stan)
        return value.split(":", 1)[0].strip().upper()

    def get_last_request_info(self) -> Optional[Tuple[str, Dict, Optional[int]]]:
        if self.last_request is None:
            return None
        url, params = self.last_request
        return (url, params, self.last_status)
