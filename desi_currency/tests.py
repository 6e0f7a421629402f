from decimal import Decimal
from io import StringIO

from django.core.management import CommandError, call_command
from django.template import Context, Template, TemplateSyntaxError
from django.test import SimpleTestCase, override_settings

from desi_currency import exchange, services
from desi_currency.exceptions import (
    CurrencyError,
    InvalidAmountError,
    ParseError,
    UnsupportedCurrencyError,
)
from desi_currency.templatetags.desi_currency import convert_currency, parse_rupee


def render(source, **context):
    return Template("{% load desi_currency %}" + source).render(Context(context))


class FormatAmountTests(SimpleTestCase):
    def test_indian_grouping(self):
        cases = [
            (0, "₹0.00"),
            (12, "₹12.00"),
            (999, "₹999.00"),
            (1000, "₹1,000.00"),
            (12345, "₹12,345.00"),
            (123456, "₹1,23,456.00"),
            (1234567, "₹12,34,567.00"),
            (12345678, "₹1,23,45,678.00"),
            (9876543210.5, "₹9,87,65,43,210.50"),
        ]
        for value, expected in cases:
            self.assertEqual(services.format_amount(value), expected)

    def test_rounds_to_two_places(self):
        self.assertEqual(services.format_amount(123456.789), "₹1,23,456.79")
        self.assertEqual(services.format_amount(1.005), "₹1.01")
        self.assertEqual(services.format_amount(Decimal("1.004")), "₹1.00")

    def test_negative_sign_goes_before_symbol(self):
        self.assertEqual(services.format_amount(-5000), "-₹5,000.00")
        self.assertEqual(services.format_amount(-5000, show_symbol=False), "-5,000.00")

    def test_amount_rounding_to_zero_has_no_sign(self):
        self.assertEqual(services.format_amount(-0.001), "₹0.00")

    def test_without_symbol(self):
        self.assertEqual(services.format_amount(1234.5, show_symbol=False), "1,234.50")

    def test_numeric_strings_are_accepted(self):
        self.assertEqual(services.format_amount("123456.789"), "₹1,23,456.79")

    def test_below_thousand_has_no_comma(self):
        for value in range(0, 1000, 37):
            self.assertNotIn(",", services.format_amount(value))

    def test_thousands_have_one_comma(self):
        for value in (1000, 4321, 56789, 99999):
            whole = services.format_amount(value).split(".")[0]
            self.assertEqual(whole.count(","), 1)
            self.assertEqual(len(whole.split(",")[1]), 3)

    def test_lakhs_and_above_group_in_pairs(self):
        for value in (100000, 2345678, 98765432, 123456789012):
            whole = services.format_amount(value, show_symbol=False).split(".")[0]
            groups = whole.split(",")
            self.assertEqual(len(groups[-1]), 3)
            self.assertIn(len(groups[0]), (1, 2))
            for group in groups[1:-1]:
                self.assertEqual(len(group), 2)

    def test_group_digits(self):
        self.assertEqual(services.group_digits("123"), "123")
        self.assertEqual(services.group_digits("1234567"), "12,34,567")


class FormatVariantTests(SimpleTestCase):
    def test_format_whole(self):
        self.assertEqual(services.format_whole(123456.78), "₹1,23,457")
        self.assertEqual(services.format_whole(999.5), "₹1,000")
        self.assertEqual(services.format_whole(-0.4), "₹0")
        self.assertEqual(services.format_whole(-2500000.5, show_symbol=False), "-25,00,001")

    def test_format_accounting(self):
        self.assertEqual(services.format_accounting(-5000), "(₹5,000.00)")
        self.assertEqual(services.format_accounting(5000), "₹5,000.00")
        self.assertEqual(services.format_accounting(-1234567.891, show_symbol=False), "(12,34,567.89)")

    def test_format_with_suffix(self):
        self.assertEqual(services.format_with_suffix(1500, "only"), "₹1,500.00 only")
        self.assertEqual(services.format_with_suffix(1500), "₹1,500.00")

    def test_symbol(self):
        self.assertEqual(services.symbol(), "₹")


class CompactFormatTests(SimpleTestCase):
    def test_shorthand(self):
        self.assertEqual(services.to_shorthand(1500000), "₹15L")
        self.assertEqual(services.to_shorthand(25000000), "₹2.5Cr")
        self.assertEqual(services.to_shorthand(5000), "₹5K")
        self.assertEqual(services.to_shorthand(1234567), "₹12.35L")
        self.assertEqual(services.to_shorthand(999.5), "₹999.5")
        self.assertEqual(services.to_shorthand(0), "₹0")

    def test_words(self):
        self.assertEqual(services.to_words(1500000), "₹15 Lakh")
        self.assertEqual(services.to_words(25000000), "₹2.5 Crore")
        self.assertEqual(services.to_words(5000), "₹5K")
        self.assertEqual(services.to_words(1234, show_symbol=False), "1.23K")

    def test_negative_compact(self):
        self.assertEqual(services.to_shorthand(-123456), "-₹1.23L")
        self.assertEqual(services.to_words(-30000000), "-₹3 Crore")

    def test_rounding_can_reach_next_hundred(self):
        self.assertEqual(services.to_shorthand(9999999), "₹100L")

    def test_unit_selection(self):
        self.assertIsNone(services.select_unit(999))
        self.assertIs(services.select_unit(1000), services.THOUSAND)
        self.assertIs(services.select_unit(-100000), services.LAKH)
        self.assertIs(services.select_unit(10000000), services.CRORE)


class FixedUnitTests(SimpleTestCase):
    def test_lakhs(self):
        self.assertEqual(services.to_lakhs(500000), "₹5.00 Lakhs")
        self.assertEqual(services.to_lakhs(100000), "₹1.00 Lakh")
        self.assertEqual(services.to_lakhs(-250000, decimals=1), "-₹2.5 Lakhs")

    def test_crores(self):
        self.assertEqual(services.to_crores(10000000), "₹1.00 Crore")
        self.assertEqual(services.to_crores(25000000), "₹2.50 Crores")
        self.assertEqual(services.to_crores(15000000, decimals=0), "₹2 Crores")

    def test_singular_follows_rounded_value(self):
        self.assertEqual(services.to_lakhs(100400), "₹1.00 Lakh")
        self.assertEqual(services.to_lakhs(100400, decimals=3), "₹1.004 Lakhs")

    def test_large_values_use_indian_grouping(self):
        self.assertEqual(services.to_lakhs(10000000000), "₹1,00,000.00 Lakhs")

    def test_invalid_decimals(self):
        with self.assertRaises(InvalidAmountError):
            services.to_lakhs(100000, decimals=-1)
        with self.assertRaises(InvalidAmountError):
            services.to_crores(100000, decimals=1.5)


class IndianWordsTests(SimpleTestCase):
    def test_rupees_and_paise(self):
        self.assertEqual(
            services.to_indian_words(12345.67),
            "Twelve Thousand Three Hundred Forty Five Rupees and Sixty Seven Paise",
        )

    def test_singular_and_zero(self):
        self.assertEqual(services.to_indian_words(1), "One Rupee")
        self.assertEqual(services.to_indian_words(0), "Zero Rupees")
        self.assertEqual(services.to_indian_words(0.5), "Zero Rupees and Fifty Paise")

    def test_negative(self):
        self.assertEqual(services.to_indian_words(-100), "Negative One Hundred Rupees")
        self.assertEqual(services.to_indian_words(-0.001), "Zero Rupees")

    def test_negative_paise_only(self):
        self.assertEqual(services.to_indian_words(-0.5), "Negative Zero Rupees and Fifty Paise")
        self.assertEqual(services.split_rupees_paise(-0.5), (0, 50))

    def test_paise_carry(self):
        self.assertEqual(services.to_indian_words(1.999), "Two Rupees")

    def test_number_to_words(self):
        self.assertEqual(services.number_to_words(0), "Zero")
        self.assertEqual(services.number_to_words(20), "Twenty")
        self.assertEqual(services.number_to_words(100), "One Hundred")
        self.assertEqual(services.number_to_words(10000000), "One Crore")
        self.assertEqual(
            services.number_to_words(1234567),
            "Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven",
        )

    def test_crore_count_above_ninety_nine(self):
        self.assertEqual(services.number_to_words(1000000000), "One Hundred Crore")
        self.assertEqual(
            services.number_to_words(12345678901),
            "One Thousand Two Hundred Thirty Four Crore Fifty Six Lakh "
            "Seventy Eight Thousand Nine Hundred One",
        )

    def test_number_to_words_rejects_non_integers(self):
        for value in (-1, 1.5, True):
            with self.assertRaises(InvalidAmountError):
                services.number_to_words(value)


class SplitRupeesPaiseTests(SimpleTestCase):
    def test_split(self):
        self.assertEqual(services.split_rupees_paise(123.456), (123, 46))
        self.assertEqual(services.split_rupees_paise(-5.5), (-5, 50))
        self.assertEqual(services.split_rupees_paise(0.995), (1, 0))

    def test_split_matches_rounded_amount(self):
        for value in ("0", "0.005", "1.999", "-42.125", "99999.994", "-123456.785"):
            split = services.split_rupees_paise(value)
            self.assertTrue(0 <= split.paise <= 99)
            expected = abs(Decimal(value)).quantize(Decimal("0.01"), rounding="ROUND_HALF_UP")
            self.assertEqual(abs(split.rupees) + Decimal(split.paise) / 100, expected)


class RangeTests(SimpleTestCase):
    def test_ranges(self):
        self.assertTrue(services.is_lakhs_range(100000))
        self.assertFalse(services.is_lakhs_range(10000000))
        self.assertTrue(services.is_crores_range(10000000))
        self.assertTrue(services.is_lakhs_range(-500000))
        self.assertFalse(services.is_lakhs_range(99999.99))
        self.assertFalse(services.is_crores_range(9999999.99))

    def test_bands_are_disjoint(self):
        for value in (0, 99999, 100000, 5000000, 9999999, 10000000, -10000001, 1e12):
            in_lakhs = services.is_lakhs_range(value)
            in_crores = services.is_crores_range(value)
            below = abs(value) < 100000
            self.assertEqual([in_lakhs, in_crores, below].count(True), 1)


class ParseAmountTests(SimpleTestCase):
    def test_units(self):
        self.assertEqual(services.parse_amount("1.5L"), 150000)
        self.assertEqual(services.parse_amount("2Cr"), 20000000)
        self.assertEqual(services.parse_amount("5K"), 5000)
        self.assertEqual(services.parse_amount("2 thousand"), 2000)
        self.assertEqual(services.parse_amount("1.2 lac"), 120000)

    def test_formatted_output(self):
        self.assertEqual(services.parse_amount("-₹1,20,000.50"), Decimal("-120000.50"))
        self.assertEqual(services.parse_amount("₹15 Lakh"), 1500000)
        self.assertEqual(services.parse_amount("₹5.00 Lakhs"), 500000)
        self.assertEqual(services.parse_amount("₹2.50 Crores"), 25000000)
        self.assertEqual(services.parse_amount("(₹5,000.00)"), -5000)

    def test_symbol_prefixes(self):
        self.assertEqual(services.parse_amount("Rs. 5,000"), 5000)
        self.assertEqual(services.parse_amount("rs 250"), 250)
        self.assertEqual(services.parse_amount("INR 1,00,000"), 100000)

    def test_symbol_suffixes(self):
        self.assertEqual(services.parse_amount("500 Rs"), 500)
        self.assertEqual(services.parse_amount("5,000 Rs."), 5000)
        self.assertEqual(services.parse_amount("1.5L ₹"), 150000)
        self.assertEqual(services.parse_amount("2 Crores INR"), 20000000)
        self.assertEqual(services.parse_amount("-250 rs"), -250)

    def test_unparseable_text(self):
        for text in ("", "abc", "₹", "5X", "1.2.3L", None):
            with self.assertRaises(ParseError):
                services.parse_amount(text)

    def test_shorthand_round_trip(self):
        for amount in (1000, 1234, 56789, 123456, 1500000, 98765432, 2500000000):
            parsed = services.parse_amount(services.to_shorthand(amount))
            tolerance = services.select_unit(amount).magnitude * Decimal("0.005")
            self.assertLessEqual(abs(parsed - amount), tolerance)


class InvalidInputTests(SimpleTestCase):
    def test_non_numeric_input(self):
        for value in ("abc", None, True, float("nan"), float("inf"), [1]):
            with self.assertRaises(InvalidAmountError):
                services.format_amount(value)

    def test_errors_are_value_errors(self):
        self.assertTrue(issubclass(CurrencyError, ValueError))
        with self.assertRaises(ValueError):
            services.to_words("1,000")


class ExchangeTests(SimpleTestCase):
    def test_convert_from_rupees(self):
        self.assertEqual(exchange.convert(1000, "INR", "USD"), Decimal("12.00"))

    def test_convert_to_rupees(self):
        self.assertEqual(exchange.convert(12, "usd", "inr"), Decimal("1000.00"))

    def test_same_currency(self):
        self.assertEqual(exchange.convert(100.456, "INR", "INR"), Decimal("100.46"))

    def test_unknown_currency(self):
        with self.assertRaises(UnsupportedCurrencyError):
            exchange.convert(100, "INR", "XYZ")

    def test_explicit_rates(self):
        rates = {"INR": 1, "usd": "0.01"}
        self.assertEqual(exchange.convert(500, "INR", "USD", rates=rates), Decimal("5.00"))

    @override_settings(DESI_CURRENCY_RATES={"INR": 1, "BTC": "0.0000001"})
    def test_rates_from_settings(self):
        self.assertEqual(exchange.supported_currencies(), ["BTC", "INR"])


class TemplateTagTests(SimpleTestCase):
    def test_rupee_filters(self):
        self.assertEqual(render("{{ v|rupee }}", v=123456.789), "₹1,23,456.79")
        self.assertEqual(render("{{ v|rs }}", v=123456.789), "₹1,23,456.79")
        self.assertEqual(render("{{ v|rupee:False }}", v=123456.789), "1,23,456.79")
        self.assertEqual(render("{{ v|amount }}", v=123456.789), "1,23,456.79")

    def test_symbol_argument_as_string(self):
        self.assertEqual(render('{{ v|rupee:"false" }}', v=1500), "1,500.00")
        self.assertEqual(render('{{ v|rs:"0" }}', v=1500), "1,500.00")
        self.assertEqual(render('{{ v|rupee:"true" }}', v=1500), "₹1,500.00")
        self.assertEqual(render("{{ v|rupee:0 }}", v=1500), "1,500.00")

    def test_variant_filters(self):
        self.assertEqual(render("{{ v|round }}", v=123456.78), "₹1,23,457")
        self.assertEqual(render("{{ v|accounting }}", v=-5000), "(₹5,000.00)")
        self.assertEqual(render('{{ v|with_suffix:"only" }}', v=1500), "₹1,500.00 only")

    def test_unit_filters(self):
        self.assertEqual(render("{{ v|lakh }}", v=500000), "₹5.00 Lakhs")
        self.assertEqual(render("{{ v|lakh:1 }}", v=500000), "₹5.0 Lakhs")
        self.assertEqual(render("{{ v|crore }}", v=10000000), "₹1.00 Crore")
        self.assertEqual(render("{{ v|short }}", v=1500000), "₹15L")
        self.assertEqual(render("{{ v|word }}", v=1500000), "₹15 Lakh")

    @override_settings(DESI_CURRENCY_DEFAULT_DECIMALS=0)
    def test_default_decimals_setting(self):
        self.assertEqual(render("{{ v|crore }}", v=25000000), "₹3 Crores")

    def test_spell(self):
        self.assertEqual(render("{{ v|spell }}", v=1), "One Rupee")

    def test_currency_symbol_tag(self):
        self.assertEqual(render("{% currency %}"), "₹")

    def test_range_tags(self):
        source = "{% iflakh v %}lakhs{% else %}other{% endiflakh %}"
        self.assertEqual(render(source, v=500000), "lakhs")
        self.assertEqual(render(source, v=50), "other")
        self.assertEqual(render("{% ifcrore v %}crores{% endifcrore %}", v=20000000), "crores")
        self.assertEqual(render("{% ifcrore v %}crores{% endifcrore %}", v=200), "")

    def test_range_filters(self):
        self.assertEqual(render("{% if v|is_lakh %}yes{% endif %}", v=100000), "yes")
        self.assertEqual(render("{% if v|is_crore %}yes{% else %}no{% endif %}", v=100000), "no")

    def test_range_tag_requires_argument(self):
        with self.assertRaises(TemplateSyntaxError):
            render("{% iflakh %}x{% endiflakh %}")

    def test_invalid_value_renders_as_zero(self):
        with self.assertLogs("desi_currency", level="WARNING"):
            self.assertEqual(render("{{ v|rupee }}", v="abc"), "₹0.00")

    @override_settings(DESI_CURRENCY_INVALID_AS_ZERO=False)
    def test_invalid_value_passes_through(self):
        with self.assertLogs("desi_currency", level="WARNING"):
            self.assertEqual(render("{{ v|short }}", v="abc"), "abc")

    def test_invalid_decimals_argument_falls_back(self):
        with self.assertLogs("desi_currency", level="WARNING"):
            self.assertEqual(render('{{ v|lakh:"x" }}', v=500000), "₹5.00 Lakhs")

    def test_negative_decimals_argument_falls_back(self):
        with self.assertLogs("desi_currency", level="WARNING"):
            self.assertEqual(render("{{ v|lakh:-1 }}", v=500000), "₹5.00 Lakhs")
        with self.assertLogs("desi_currency", level="WARNING"):
            self.assertEqual(render('{{ v|crore:"-2" }}', v=10000000), "₹1.00 Crore")

    def test_invalid_value_in_range_tag(self):
        with self.assertLogs("desi_currency", level="WARNING"):
            self.assertEqual(render("{% iflakh v %}a{% else %}b{% endiflakh %}", v="abc"), "b")

    def test_parse_rupee_filter(self):
        self.assertEqual(parse_rupee("1.5L"), 150000)
        with self.assertLogs("desi_currency", level="WARNING"):
            self.assertEqual(parse_rupee("nonsense"), 0)

    def test_convert_currency_filter(self):
        self.assertEqual(convert_currency(1000, "USD"), Decimal("12.00"))
        with self.assertLogs("desi_currency", level="WARNING"):
            self.assertEqual(convert_currency(1000, "XYZ"), 1000)


class RupeeCommandTests(SimpleTestCase):
    def call(self, *args, **options):
        out = StringIO()
        call_command("rupee", *args, stdout=out, **options)
        return out.getvalue()

    def test_single_style(self):
        self.assertIn("₹1,23,456.79", self.call("123456.789", style="format"))

    def test_all_styles(self):
        output = self.call("1234567")
        self.assertIn("₹12,34,567.00", output)
        self.assertIn("₹12.35L", output)
        self.assertIn("Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven Rupees", output)

    def test_options(self):
        output = self.call("250000", "--style", "lakhs", "--decimals", "1", "--no-symbol")
        self.assertIn("2.5 Lakhs", output)
        self.assertNotIn("₹", output)

    def test_negative_amount(self):
        self.assertIn("(₹5,000.00)", self.call("-5000", style="accounting"))

    def test_parse(self):
        self.assertIn("150000", self.call(parse="1.5L"))

    def test_invalid_input(self):
        with self.assertRaises(CommandError):
            self.call("abc")
        with self.assertRaises(CommandError):
            self.call(parse="abc")
        with self.assertRaises(CommandError):
            self.call()

    def test_negative_decimals_fail_before_output(self):
        out = StringIO()
        with self.assertRaises(CommandError):
            call_command("rupee", "250000", "--decimals", "-1", stdout=out)
        self.assertEqual(out.getvalue(), "")
