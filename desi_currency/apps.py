from django.apps import AppConfig


class DesiCurrencyConfig(AppConfig):
    name = "desi_currency"
    verbose_name = "Desi Currency"
