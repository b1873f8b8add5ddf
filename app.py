from typing import Any, Optional

from flask import Flask
from application.shipping_rate_service import ShippingRateService
from core.config import Config
from core.logging_config import configure_logging
from integration.settings_store import build_settings_store
from interface.api import api_bp


def create_app(config_object: Any = Config, settings_store: Optional[Any] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)

    configure_logging(app)

    store = settings_store if settings_store is not None else build_settings_store(config_object)
    app.extensions["shipping_rate_service"] = ShippingRateService(store)
    app.logger.info("Shipping settings source: %s", type(store).__name__)

    # rejestracja blueprintów
    app.register_blueprint(api_bp)

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
