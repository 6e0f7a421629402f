from django.core.management.base import BaseCommand, CommandError

from desi_currency import conf, services
from desi_currency.exceptions import CurrencyError

STYLES = {
    "format": lambda amount, opts: services.format_amount(amount, opts["symbol"]),
    "whole": lambda amount, opts: services.format_whole(amount, opts["symbol"]),
    "accounting": lambda amount, opts: services.format_accounting(amount, opts["symbol"]),
    "words": lambda amount, opts: services.to_words(amount, opts["symbol"]),
    "short": lambda amount, opts: services.to_shorthand(amount, opts["symbol"]),
    "lakhs": lambda amount, opts: services.to_lakhs(amount, opts["decimals"], opts["symbol"]),
    "crores": lambda amount, opts: services.to_crores(amount, opts["decimals"], opts["symbol"]),
    "spell": lambda amount, opts: services.to_indian_words(amount),
}


class Command(BaseCommand):
    help = "Show an amount in Indian rupee notation, or parse rupee text back into a number."

    def add_arguments(self, parser):
        parser.add_argument("amount", nargs="?", help="Amount to format, e.g. 1234567.89")
        parser.add_argument("--style", choices=sorted(STYLES), help="Print only this style")
        parser.add_argument("--decimals", type=int, help="Decimal places for the lakhs/crores styles")
        parser.add_argument("--no-symbol", action="store_true", help="Leave out the rupee symbol")
        parser.add_argument("--parse", metavar="TEXT", help="Parse text such as '1.5L' or '₹1,20,000.50'")

    def handle(self, *args, **options):
        if options["parse"] is not None:
            try:
                value = services.parse_amount(options["parse"])
            except CurrencyError as exc:
                raise CommandError(str(exc))
            self.stdout.write(self.style.SUCCESS(str(value)))
            return

        amount = options["amount"]
        if amount is None:
            raise CommandError("Provide an amount or --parse TEXT.")

        opts = {
            "symbol": not options["no_symbol"],
            "decimals": conf.default_decimals() if options["decimals"] is None else options["decimals"],
        }
        if opts["decimals"] < 0:
            raise CommandError(f"--decimals must be a non-negative integer, got {opts['decimals']}")
        styles = [options["style"]] if options["style"] else list(STYLES)
        try:
            for style in styles:
                result = STYLES[style](amount, opts)
                if options["style"]:
                    self.stdout.write(result)
                else:
                    self.stdout.write(f"{style:<11}{result}")
        except CurrencyError as exc:
            raise CommandError(str(exc))
