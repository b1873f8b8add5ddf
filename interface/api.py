# interface/api.py
from collections.abc import Mapping
from flask import Blueprint, current_app, jsonify, request
from access_control.auth import admin_required
from core.errors import SettingsError, UnknownMethodError
from domain.countries import ASIAN_COUNTRIES, SRI_LANKA
from domain.models import ShippingTier

api_bp = Blueprint("api", __name__, url_prefix="/api")


def _service():
    return current_app.extensions["shipping_rate_service"]


def _instance_id(raw, default: int = 0):
    try:
        return int(raw)
    except (TypeError, ValueError, OverflowError):
        return None if raw not in (None, "") else default


@api_bp.errorhandler(UnknownMethodError)
def _unknown_method(e: UnknownMethodError):
    return jsonify({"error": str(e)}), 404


@api_bp.errorhandler(SettingsError)
def _settings_error(e: SettingsError):
    current_app.logger.error("Settings backend failure: %s", e)
    return jsonify({"error": "Shipping settings unavailable"}), 502


@api_bp.route("/health")
def health():
    return jsonify({"status": "ok"})


@api_bp.route("/shipping/methods")
def get_shipping_methods():
    """Metody zarejestrowane w serwisie – to, co panel stref może wylistować."""
    return jsonify({"methods": [d.as_dict() for d in _service().registry.all()]})


@api_bp.route("/shipping/tiers")
def get_shipping_tiers():
    return jsonify({
        "tiers": [
            {"tier": ShippingTier.SRI_LANKA.value, "countries": [SRI_LANKA]},
            {"tier": ShippingTier.ASIA.value, "countries": sorted(ASIAN_COUNTRIES)},
            {"tier": ShippingTier.OTHER.value, "countries": "*"},
        ]
    })


@api_bp.route("/shipping/rates", methods=["POST"])
def calculate_rates():
    """
    Wycena paczki.

    Body JSON (paczka jak w WooCommerce):
      - destination: {"country": "IN"} [wymagane, country może być puste]
      - countries: {"US": "United States", ...} (opc., nazwy do etykiety)
      - method_id (opc., domyślnie theme_custom_shipping)
      - instance_id (opc., domyślnie 0)
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, Mapping):
        return jsonify({"error": "Request body must be a JSON object"}), 400
    if not isinstance(payload.get("destination"), Mapping):
        return jsonify({"error": "Missing 'destination' object"}), 400
    countries = payload.get("countries")
    if countries is not None and not isinstance(countries, Mapping):
        return jsonify({"error": "'countries' must be an object"}), 400

    instance_id = _instance_id(payload.get("instance_id"))
    if instance_id is None:
        return jsonify({"error": "'instance_id' must be an integer"}), 400
    method_id = payload.get("method_id") or current_app.config["DEFAULT_SHIPPING_METHOD"]
    if not isinstance(method_id, str):
        return jsonify({"error": "'method_id' must be a string"}), 400

    return jsonify(_service().as_api_payload(payload, method_id=method_id, instance_id=instance_id))


@api_bp.route("/shipping/settings")
@admin_required
def get_shipping_settings():
    """Efektywna konfiguracja instancji metody (po domyślnych i parsowaniu)."""
    method_id = request.args.get("method_id") or current_app.config["DEFAULT_SHIPPING_METHOD"]
    instance_id = _instance_id(request.args.get("instance_id"))
    if instance_id is None:
        return jsonify({"error": "'instance_id' must be an integer"}), 400

    config = _service().load_rate_config(method_id, instance_id)
    return jsonify({"method_id": method_id, "instance_id": instance_id, "settings": config.as_dict()})
