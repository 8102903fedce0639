"""
fixerio/request.py – Request configuration and URL rendering.

A RequestBuilder is an immutable value. Each ``with_*`` call returns a new
builder, so one instance can be shared freely and specialised per call:

    eur = RequestBuilder()
    usd = eur.with_base(USD).with_symbols(EUR, GBP)

URL we render:
  {protocol}://api.fixer.io/{latest|YYYY-MM-DD}?base=EUR[&symbols=USD,GBP]
"""

import datetime
from dataclasses import dataclass, replace
from typing import Optional

from fixerio.config import API_HOST, DATE_FORMAT, DEFAULT_BASE, DEFAULT_PROTOCOL, LATEST


@dataclass(frozen=True)
class RequestBuilder:
    """Everything needed to address one fixer.io rates request."""

    base: str = DEFAULT_BASE
    protocol: str = DEFAULT_PROTOCOL
    date: Optional[str] = None
    symbols: tuple[str, ...] = ()
    host: str = API_HOST

    def with_base(self, currency: str) -> "RequestBuilder":
        """Set the base currency. The code is used verbatim."""
        return replace(self, base=currency)

    def with_secure(self, secure: bool) -> "RequestBuilder":
        """Use https when ``secure`` is true, plain http otherwise."""
        return replace(self, protocol="https" if secure else "http")

    def with_symbols(self, *currencies: str) -> "RequestBuilder":
        """
        Restrict the response to ``currencies``, in the given order.

        Replaces any earlier filter; calling with no arguments clears it.
        """
        return replace(self, symbols=tuple(currencies))

    def with_historical(self, day: Optional[datetime.date] = None) -> "RequestBuilder":
        """
        Ask for the rates published on ``day`` instead of the latest ones.

        A datetime is cut down to its calendar date. ``None`` goes back to latest.
        """
        if day is None:
            return replace(self, date=None)
        if isinstance(day, datetime.datetime):
            day = day.date()
        # strftime does not zero-pad years below 1000 on every platform
        return replace(self, date=f"{day.year:04d}-{day.month:02d}-{day.day:02d}")

    @property
    def is_historical(self) -> bool:
        return self.date is not None

    def build_url(self) -> str:
        path = self.date if self.date else LATEST
        url = f"{self.protocol}://{self.host}/{path}?base={self.base}"

        if self.symbols:
            url += "&symbols=" + ",".join(self.symbols)

        return url

    def __str__(self) -> str:
        return self.build_url()


def parse_date(value: str) -> datetime.date:
    """Parse a ``YYYY-MM-DD`` string, as accepted on the command line."""
    return datetime.datetime.strptime(value, DATE_FORMAT).date()
