# core/errors.py


class ShippingError(Exception):
    """Bazowy wyjątek serwisu wysyłki."""


class SettingsError(ShippingError):
    """Nie udało się wczytać ustawień metody (plik, REST API)."""


class UnknownMethodError(ShippingError, LookupError):
    def __init__(self, method_id: str) -> None:
        super().__init__(f"Unknown shipping method: {method_id}")
        self.method_id = method_id


class DuplicateMethodError(ShippingError, ValueError):
    def __init__(self, method_id: str) -> None:
        super().__init__(f"Shipping method already registered: {method_id}")
        self.method_id = method_id
