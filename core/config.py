# core/config.py
import os

from dotenv import load_dotenv

# wczytanie .env (dev-friendly) zanim Config odczyta os.environ;
# .env.local uzupełnia tylko brakujące wartości
load_dotenv()
load_dotenv(dotenv_path=".env.local", override=False)


class Config:
    # Flask
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Admin – podgląd efektywnych ustawień (HTTP Basic)
    ADMIN_USERNAME = os.environ.get("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "password123")

    # Sklep – kraj bazowy, gdy paczka nie ma kraju docelowego
    STORE_BASE_COUNTRY = os.environ.get("STORE_BASE_COUNTRY", "LK")

    DEFAULT_SHIPPING_METHOD = os.environ.get("DEFAULT_SHIPPING_METHOD", "theme_custom_shipping")

    # Skąd czytamy ustawienia metody wysyłki: env | file | woocommerce
    SHIPPING_SETTINGS_SOURCE = os.environ.get("SHIPPING_SETTINGS_SOURCE", "env")
    SHIPPING_SETTINGS_PATH = os.environ.get("SHIPPING_SETTINGS_PATH", "data/shipping_settings.json")

    # Ustawienia metody (źródło "env") – surowe stringi, parsowane w domain.rates
    SHIPPING_ENABLED = os.environ.get("SHIPPING_ENABLED", "yes")
    SHIPPING_TITLE = os.environ.get("SHIPPING_TITLE", "Custom Shipping")
    SHIPPING_SRI_LANKA_RATE = os.environ.get("SHIPPING_SRI_LANKA_RATE", "500")
    SHIPPING_ASIA_RATE = os.environ.get("SHIPPING_ASIA_RATE", "1500")
    SHIPPING_OTHER_COUNTRIES_RATE = os.environ.get("SHIPPING_OTHER_COUNTRIES_RATE", "3000")

    # WooCommerce REST API (źródło "woocommerce")
    WC_BASE_URL = os.environ.get("WC_BASE_URL", "")
    WC_CONSUMER_KEY = os.environ.get("WC_CONSUMER_KEY", "")
    WC_CONSUMER_SECRET = os.environ.get("WC_CONSUMER_SECRET", "")
    WC_SHIPPING_ZONE_ID = int(os.environ.get("WC_SHIPPING_ZONE_ID", "0"))  # 0 = "Locations not covered"
    WC_TIMEOUT = int(os.environ.get("WC_TIMEOUT", "30"))
