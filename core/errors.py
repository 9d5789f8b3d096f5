"""Errors raised while fetching and converting ECB reference rates.

Every error aborts the whole request. ``status_code`` is the HTTP status the
API answers with, ``error`` the machine-readable code put in the body.
"""


class RatesError(Exception):
    status_code = 500
    error = "rates_error"


class UpstreamError(RatesError):
    """The ECB document could not be downloaded."""

    status_code = 502
    error = "upstream_error"


class MalformedDocumentError(RatesError):
    """The downloaded body is not well-formed XML."""

    status_code = 502
    error = "malformed_document"


class ExtractionError(RatesError):
    """The document parsed but carries none of the expected rate elements."""

    status_code = 502
    error = "extraction_error"


class FormatError(RatesError):
    """A date or rate attribute is missing or cannot be parsed."""

    status_code = 502
    error = "format_error"


class CurrencyNotFoundError(RatesError):
    """The requested base currency is absent from a snapshot being converted."""

    status_code = 500
    error = "currency_not_found"

    def __init__(self, currency: str):
        super().__init__(f"Currency {currency} not found")
        self.currency = currency
