"""Indian rupee formatting and parsing.

Digit grouping follows the Indian system: the last three digits stay
together and everything before them is grouped in pairs.

>>> format_amount(123456.789)
'₹1,23,456.79'
>>> format_amount(-5000)
'-₹5,000.00'
>>> to_shorthand(1500000)
'₹15L'
>>> to_words(1500000)
'₹15 Lakh'
>>> parse_amount("1.5L")
Decimal('150000.0')

Rounding is HALF_UP on the magnitude. An amount that rounds to zero is
rendered without a sign.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import NamedTuple, Optional, Union

from .exceptions import InvalidAmountError, ParseError

Number = Union[int, float, Decimal, str]

RUPEE_SYMBOL = "₹"


@dataclass(frozen=True)
class Unit:
    name: str
    abbreviation: str
    word: str
    magnitude: Decimal


CRORE = Unit("Crore", "Cr", " Crore", Decimal(10_000_000))
LAKH = Unit("Lakh", "L", " Lakh", Decimal(100_000))
THOUSAND = Unit("Thousand", "K", "K", Decimal(1_000))

# Largest first; select_unit relies on this order.
UNITS = (CRORE, LAKH, THOUSAND)

ONES = ("", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine")
TEENS = (
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
)
TENS = ("", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety")

_SYMBOL_RE = re.compile(r"^(?:₹|rs\.?|inr)", re.IGNORECASE)
_TRAILING_SYMBOL_RE = re.compile(r"(?:₹|rs\.?|inr)$", re.IGNORECASE)
_AMOUNT_RE = re.compile(
    r"(?P<number>\d[\d,]*(?:\.\d*)?|\.\d+)"
    r"(?P<unit>crores?|cr|lakhs?|lacs?|l|thousand|k)?",
    re.IGNORECASE,
)


class RupeePaise(NamedTuple):
    rupees: int
    paise: int


def _to_decimal(value: Number) -> Decimal:
    if value is None or isinstance(value, bool):
        raise InvalidAmountError(value)
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(str(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidAmountError(value) from None
    else:
        raise InvalidAmountError(value)
    if not number.is_finite():
        raise InvalidAmountError(value)
    return number


def _round(value: Decimal, places: int) -> Decimal:
    with localcontext() as ctx:
        # Keep every integer digit; the default 28-digit context would refuse to quantize.
        ctx.prec = max(28, value.adjusted() + places + 2)
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def _finish(body: str, negative: bool, show_symbol: bool) -> str:
    if show_symbol:
        body = RUPEE_SYMBOL + body
    return "-" + body if negative else body


def _grouped(value: Decimal) -> str:
    whole, _, fraction = format(value, "f").partition(".")
    grouped = group_digits(whole)
    return f"{grouped}.{fraction}" if fraction else grouped


def _trimmed(value: Decimal) -> str:
    text = _grouped(_round(value, 2))
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def group_digits(digits: str) -> str:
    """Insert Indian thousands separators into a string of digits.

    >>> group_digits("1234567")
    '12,34,567'
    """
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def symbol() -> str:
    return RUPEE_SYMBOL


def format_amount(amount: Number, show_symbol: bool = True) -> str:
    """Indian grouped amount with two decimals, e.g. ``₹1,23,456.79``."""
    number = _to_decimal(amount)
    rounded = _round(abs(number), 2)
    return _finish(_grouped(rounded), number < 0 and rounded != 0, show_symbol)


def format_whole(amount: Number, show_symbol: bool = True) -> str:
    """Like :func:`format_amount` but rounded to whole rupees."""
    number = _to_decimal(amount)
    rounded = _round(abs(number), 0)
    return _finish(_grouped(rounded), number < 0 and rounded != 0, show_symbol)


def format_accounting(amount: Number, show_symbol: bool = True) -> str:
    """Negative amounts are wrapped in parentheses instead of carrying a minus."""
    number = _to_decimal(amount)
    formatted = format_amount(abs(number), show_symbol)
    if number < 0 and _round(abs(number), 2) != 0:
        return f"({formatted})"
    return formatted


def format_with_suffix(amount: Number, suffix: str = "", show_symbol: bool = True) -> str:
    formatted = format_amount(amount, show_symbol)
    return f"{formatted} {suffix}" if suffix else formatted


def select_unit(amount: Number) -> Optional[Unit]:
    """Return the largest unit the absolute amount reaches, or None below a thousand."""
    magnitude = abs(_to_decimal(amount))
    for unit in UNITS:
        if magnitude >= unit.magnitude:
            return unit
    return None


def _compact(amount: Number, show_symbol: bool, label_attr: str) -> str:
    number = _to_decimal(amount)
    magnitude = abs(number)
    unit = select_unit(magnitude)
    if unit is None:
        value, label = _round(magnitude, 2), ""
    else:
        value, label = _round(magnitude / unit.magnitude, 2), getattr(unit, label_attr)
    return _finish(_trimmed(value) + label, number < 0 and value != 0, show_symbol)


def to_words(amount: Number, show_symbol: bool = True) -> str:
    """Compact form with the unit spelled out: ``₹15 Lakh``, ``₹2.5 Crore``, ``₹5K``."""
    return _compact(amount, show_symbol, "word")


def to_shorthand(amount: Number, show_symbol: bool = True) -> str:
    """Compact form with the unit abbreviated: ``₹15L``, ``₹2.5Cr``, ``₹5K``."""
    return _compact(amount, show_symbol, "abbreviation")


def _in_unit(amount: Number, unit: Unit, decimals: int, show_symbol: bool) -> str:
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        raise InvalidAmountError(decimals, f"decimals must be a non-negative integer, got {decimals!r}")
    number = _to_decimal(amount)
    value = _round(abs(number) / unit.magnitude, decimals)
    plural = "" if value == 1 else "s"
    return _finish(f"{_grouped(value)} {unit.name}{plural}", number < 0 and value != 0, show_symbol)


def to_lakhs(amount: Number, decimals: int = 2, show_symbol: bool = True) -> str:
    return _in_unit(amount, LAKH, decimals, show_symbol)


def to_crores(amount: Number, decimals: int = 2, show_symbol: bool = True) -> str:
    return _in_unit(amount, CRORE, decimals, show_symbol)


def is_lakhs_range(amount: Number) -> bool:
    magnitude = abs(_to_decimal(amount))
    return LAKH.magnitude <= magnitude < CRORE.magnitude


def is_crores_range(amount: Number) -> bool:
    return abs(_to_decimal(amount)) >= CRORE.magnitude


def _split(number: Decimal) -> RupeePaise:
    rounded = _round(abs(number), 2)
    rupees = int(rounded)
    paise = int((rounded - rupees) * 100)
    return RupeePaise(-rupees if number < 0 else rupees, paise)


def split_rupees_paise(amount: Number) -> RupeePaise:
    """Split an amount into signed whole rupees and paise (0-99).

    Paise are taken from the amount rounded to two places, so 1.999 gives
    ``RupeePaise(2, 0)`` rather than 1 rupee and 100 paise.
    """
    return _split(_to_decimal(amount))


def _two_digit_words(number: int) -> str:
    if number < 10:
        return ONES[number]
    if number < 20:
        return TEENS[number - 10]
    return f"{TENS[number // 10]} {ONES[number % 10]}".strip()


def number_to_words(number: int) -> str:
    """Spell a non-negative integer using crore, lakh and thousand.

    >>> number_to_words(1234567)
    'Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven'
    """
    if isinstance(number, bool) or not isinstance(number, int) or number < 0:
        raise InvalidAmountError(number, f"Expected a non-negative integer, got {number!r}")
    if number == 0:
        return "Zero"

    crore, number = divmod(number, 10_000_000)
    lakh, number = divmod(number, 100_000)
    thousand, number = divmod(number, 1_000)
    hundred, number = divmod(number, 100)

    words = []
    if crore:
        words += [_two_digit_words(crore) if crore < 100 else number_to_words(crore), "Crore"]
    if lakh:
        words += [_two_digit_words(lakh), "Lakh"]
    if thousand:
        words += [_two_digit_words(thousand), "Thousand"]
    if hundred:
        words += [ONES[hundred], "Hundred"]
    if number:
        words.append(_two_digit_words(number))
    return " ".join(words)


def to_indian_words(amount: Number) -> str:
    """Spell out an amount in rupees and paise.

    >>> to_indian_words(12345.67)
    'Twelve Thousand Three Hundred Forty Five Rupees and Sixty Seven Paise'
    """
    number = _to_decimal(amount)
    split = _split(number)
    rupees = abs(split.rupees)
    result = f"{number_to_words(rupees)} {'Rupee' if rupees == 1 else 'Rupees'}"
    if split.paise:
        result += f" and {number_to_words(split.paise)} Paise"
    if number < 0 and (rupees or split.paise):
        return "Negative " + result
    return result


def parse_amount(text: str) -> Decimal:
    """Read an amount back from display text.

    Accepts ``₹``/``Rs.``/``INR`` before or after the number, Indian or
    Western separators, a leading minus or accounting parentheses, and a
    trailing unit
    (``Cr``/``Crore``, ``L``/``Lakh``/``Lac``, ``K``/``Thousand``).
    Raises :class:`ParseError` when no number can be read.
    """
    if text is None or isinstance(text, bool):
        raise ParseError(text)
    raw = str(text)
    cleaned = "".join(raw.split())

    negative = False
    if cleaned.startswith("(") and cleaned.endswith(")"):
        negative, cleaned = True, cleaned[1:-1]
    if cleaned.startswith("-"):
        negative, cleaned = True, cleaned[1:]
    cleaned = _SYMBOL_RE.sub("", cleaned, count=1)
    cleaned = _TRAILING_SYMBOL_RE.sub("", cleaned, count=1)
    if cleaned.startswith("-"):
        negative, cleaned = True, cleaned[1:]

    match = _AMOUNT_RE.fullmatch(cleaned)
    if not match:
        raise ParseError(raw)

    value = Decimal(match.group("number").replace(",", ""))
    unit = (match.group("unit") or "").lower()
    if unit.startswith("c"):
        value *= CRORE.magnitude
    elif unit.startswith("l"):
        value *= LAKH.magnitude
    elif unit:
        value *= THOUSAND.magnitude
    return -value if negative else value
