"""
fixerio – a small client for the fixer.io currency-exchange-rate API.

    from fixerio import RequestBuilder, get_rates
    from fixerio.currencies import EUR, GBP, USD

    rates = get_rates(RequestBuilder().with_base(USD).with_symbols(EUR, GBP))
"""

from fixerio.errors import ConnectionError, FixerioError, ParseError, ReadError  # noqa: A004
from fixerio.fetch import fetch_response, get_rates
from fixerio.request import RequestBuilder
from fixerio.response import RateResponse, parse_response

__all__ = [
    "ConnectionError",
    "FixerioError",
    "ParseError",
    "RateResponse",
    "ReadError",
    "RequestBuilder",
    "fetch_response",
    "get_rates",
    "parse_response",
]
