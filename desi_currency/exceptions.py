class CurrencyError(ValueError):
    """Base class for every error raised by desi_currency."""


class InvalidAmountError(CurrencyError):
    """A number was required but the value given is not one."""

    def __init__(self, value, message=None):
        self.value = value
        super().__init__(message or f"Invalid amount: {value!r}")


class ParseError(CurrencyError):
    """Text could not be read back as a rupee amount."""

    def __init__(self, text, message=None):
        self.text = text
        super().__init__(message or f"Cannot parse amount from {text!r}")


class UnsupportedCurrencyError(CurrencyError):
    def __init__(self, code):
        self.code = code
        super().__init__(f"Unsupported currency: {code!r}")
