"""Indian rupee formatting for Django: lakh/crore grouping, words and shorthand."""
from .exceptions import CurrencyError, InvalidAmountError, ParseError, UnsupportedCurrencyError
from .services import (
    RUPEE_SYMBOL,
    RupeePaise,
    format_accounting,
    format_amount,
    format_whole,
    format_with_suffix,
    group_digits,
    is_crores_range,
    is_lakhs_range,
    number_to_words,
    parse_amount,
    split_rupees_paise,
    symbol,
    to_crores,
    to_indian_words,
    to_lakhs,
    to_shorthand,
    to_words,
)

__all__ = [
    "RUPEE_SYMBOL",
    "RupeePaise",
    "format_amount",
    "format_whole",
    "format_accounting",
    "format_with_suffix",
    "to_words",
    "to_shorthand",
    "to_lakhs",
    "to_crores",
    "to_indian_words",
    "number_to_words",
    "group_digits",
    "parse_amount",
    "symbol",
    "is_lakhs_range",
    "is_crores_range",
    "split_rupees_paise",
    "CurrencyError",
    "InvalidAmountError",
    "ParseError",
    "UnsupportedCurrencyError",
]
