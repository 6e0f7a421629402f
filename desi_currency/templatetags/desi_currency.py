"""
Template tags for Indian rupee formatting

Usage in templates:
    {% load desi_currency %}
    {{ amount|rupee }}          ₹1,23,456.79
    {{ amount|short }}          ₹15L
    {{ amount|lakh:1 }}         ₹5.0 Lakhs
    {% currency %}              ₹
    {% iflakh amount %}...{% else %}...{% endiflakh %}

Values that are not numbers never break a page: the failure is logged and
the tag renders as if the amount were zero, or returns the value untouched
when ``DESI_CURRENCY_INVALID_AS_ZERO`` is False.
"""
import logging

from django import template

from desi_currency import conf, exchange, services
from desi_currency.exceptions import CurrencyError

logger = logging.getLogger(__name__)

register = template.Library()


def _render(func, value, *args):
    try:
        return func(value, *args)
    except CurrencyError as exc:
        logger.warning("Could not render %r with %s: %s", value, func.__name__, exc)
        if conf.invalid_as_zero():
            return func(0, *args)
        return value


def _decimals(arg):
    if arg is None:
        return conf.default_decimals()
    try:
        decimals = int(arg)
    except (TypeError, ValueError):
        decimals = -1
    if decimals < 0:
        logger.warning("Ignoring invalid decimals argument %r", arg)
        return conf.default_decimals()
    return decimals


def _show_symbol(arg):
    # "false", "0", "no", "off" and "" mean no symbol.
    if isinstance(arg, str):
        return arg.strip().lower() not in ("false", "0", "no", "off", "")
    return bool(arg)


@register.filter
def rupee(value, show_symbol=True):
    return _render(services.format_amount, value, _show_symbol(show_symbol))


@register.filter
def rs(value, show_symbol=True):
    return _render(services.format_amount, value, _show_symbol(show_symbol))


@register.filter
def amount(value):
    """Indian grouped amount without the rupee symbol."""
    return _render(services.format_amount, value, False)


@register.filter(name="round")
def round_rupees(value):
    return _render(services.format_whole, value)


@register.filter
def accounting(value):
    return _render(services.format_accounting, value)


@register.filter
def with_suffix(value, suffix=""):
    return _render(services.format_with_suffix, value, str(suffix))


@register.filter
def lakh(value, decimals=None):
    return _render(services.to_lakhs, value, _decimals(decimals))


@register.filter
def crore(value, decimals=None):
    return _render(services.to_crores, value, _decimals(decimals))


@register.filter
def short(value):
    return _render(services.to_shorthand, value)


@register.filter
def word(value):
    return _render(services.to_words, value)


@register.filter
def spell(value):
    return _render(services.to_indian_words, value)


@register.filter
def parse_rupee(value):
    return _render(services.parse_amount, value)


@register.filter
def convert_currency(value, currency_code="USD"):
    """Convert a rupee amount with the fixed rate table: {{ price|convert_currency:"USD" }}"""
    try:
        return exchange.convert(value, "INR", str(currency_code))
    except CurrencyError as exc:
        logger.warning("Could not convert %r to %s: %s", value, currency_code, exc)
        return value


def _in_range(check, value):
    try:
        return check(value)
    except CurrencyError as exc:
        logger.warning("Could not range-check %r: %s", value, exc)
        return False


@register.filter
def is_lakh(value):
    return _in_range(services.is_lakhs_range, value)


@register.filter
def is_crore(value):
    return _in_range(services.is_crores_range, value)


@register.simple_tag
def currency():
    """The rupee symbol."""
    return services.symbol()


class RangeNode(template.Node):
    def __init__(self, check, amount, nodelist_true, nodelist_false):
        self.check = check
        self.amount = amount
        self.nodelist_true = nodelist_true
        self.nodelist_false = nodelist_false

    def render(self, context):
        value = self.amount.resolve(context)
        if _in_range(self.check, value):
            return self.nodelist_true.render(context)
        return self.nodelist_false.render(context)


def _range_tag(tag_name, check):
    end_tag = f"end{tag_name}"

    def compile_range_tag(parser, token):
        bits = token.split_contents()
        if len(bits) != 2:
            raise template.TemplateSyntaxError(f"'{bits[0]}' tag takes exactly one argument")
        nodelist_true = parser.parse(("else", end_tag))
        token = parser.next_token()
        if token.contents == "else":
            nodelist_false = parser.parse((end_tag,))
            parser.delete_first_token()
        else:
            nodelist_false = template.NodeList()
        return RangeNode(check, parser.compile_filter(bits[1]), nodelist_true, nodelist_false)

    register.tag(tag_name, compile_range_tag)


_range_tag("iflakh", services.is_lakhs_range)
_range_tag("ifcrore", services.is_crores_range)
