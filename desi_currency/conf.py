"""App settings, read from ``django.conf.settings`` on every call."""
from django.conf import settings


def invalid_as_zero() -> bool:
    return getattr(settings, "DESI_CURRENCY_INVALID_AS_ZERO", True)


def default_decimals() -> int:
    return getattr(settings, "DESI_CURRENCY_DEFAULT_DECIMALS", 2)


def exchange_rates():
    return getattr(settings, "DESI_CURRENCY_RATES", None)
