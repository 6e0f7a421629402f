"""
Fixed-table currency conversion.

There is no live rate feed: rates are a static table expressed as units of
each currency per one rupee. Projects can supply their own table through the
``DESI_CURRENCY_RATES`` setting.
"""
import logging
from decimal import Decimal
from typing import Dict, List, Optional

from . import conf
from .exceptions import UnsupportedCurrencyError
from .services import Number, _round, _to_decimal

logger = logging.getLogger(__name__)

DEFAULT_RATES: Dict[str, Decimal] = {
    "INR": Decimal("1"),
    "USD": Decimal("0.012"),
    "EUR": Decimal("0.011"),
    "GBP": Decimal("0.0095"),
    "AED": Decimal("0.044"),
    "SGD": Decimal("0.016"),
    "AUD": Decimal("0.018"),
    "CAD": Decimal("0.016"),
    "JPY": Decimal("1.79"),
    "NPR": Decimal("1.6"),
}


def get_rates(rates: Optional[Dict[str, Number]] = None) -> Dict[str, Decimal]:
    if rates is None:
        rates = conf.exchange_rates()
        if rates is None:
            logger.debug("Using built-in exchange rate table")
            return DEFAULT_RATES
        logger.debug("Using DESI_CURRENCY_RATES from settings")
    return {code.upper(): _to_decimal(rate) for code, rate in rates.items()}


def supported_currencies(rates: Optional[Dict[str, Number]] = None) -> List[str]:
    return sorted(get_rates(rates))


def convert(
    amount: Number,
    from_currency: str = "INR",
    to_currency: str = "USD",
    rates: Optional[Dict[str, Number]] = None,
) -> Decimal:
    """
    Convert an amount between two currencies through INR.

    Args:
        amount: Amount in ``from_currency``
        from_currency: ISO code of the source currency
        to_currency: ISO code of the target currency
        rates: Optional table of units per rupee; overrides settings

    Returns:
        Converted amount rounded to two decimal places
    """
    number = _to_decimal(amount)
    source, target = from_currency.upper(), to_currency.upper()
    table = get_rates(rates)
    for code in (source, target):
        if code not in table or not table[code]:
            raise UnsupportedCurrencyError(code)

    if source == target:
        return _round(number, 2)
    in_rupees = number / table[source]
    return _round(in_rupees * table[target], 2)
