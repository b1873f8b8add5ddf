# core/logging_config.py
import logging
from typing import Optional

from flask import Flask

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# pakiety serwisu – dostają poziom z konfiguracji
SERVICE_LOGGERS = ("application", "integration", "interface", "tools")


def resolve_log_level(name: Optional[str], default: int = logging.INFO) -> int:
    """"debug" / "WARNING" / ... -> stała z logging; nieznana nazwa -> default."""
    level = getattr(logging, str(name or "").strip().upper(), None)
    return level if isinstance(level, int) else default


def setup_logging(level_name: Optional[str] = "INFO") -> int:
    """Logowanie dla aplikacji i skryptów z tools/ (ten sam format)."""
    log_level = resolve_log_level(level_name)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    for name in SERVICE_LOGGERS:
        logging.getLogger(name).setLevel(log_level)
    # urllib3 (requests -> REST API sklepu) gada tylko przy DEBUG
    logging.getLogger("urllib3").setLevel(log_level if log_level <= logging.DEBUG else logging.WARNING)
    return log_level


def configure_logging(app: Flask) -> None:
    log_level_name = app.config.get("LOG_LEVEL", "INFO")
    log_level = setup_logging(log_level_name)
    app.logger.setLevel(log_level)
    app.logger.info("Logging configured, level=%s", logging.getLevelName(log_level))
