"""
fixerio/response.py – Decoding of the rates payload.

Example response:
  {
    "base": "EUR",
    "date": "2016-06-09",
    "rates": {"USD": 1.1326, "GBP": 0.78498, ...}
  }

Extra fields are ignored. A payload without "rates" decodes to an empty
mapping; anything else that does not fit raises ParseError.
"""

import json
import math
from dataclasses import dataclass, field
from typing import Union

from fixerio import errors


@dataclass(frozen=True)
class RateResponse:
    base: str = ""
    date: str = ""
    rates: dict[str, float] = field(default_factory=dict)


def _reject_constant(name: str) -> float:
    # NaN and Infinity are not JSON, the stdlib decoder accepts them anyway
    raise errors.ParseError(f"Invalid JSON constant: {name}")


def _decode_rates(raw_rates: object) -> dict[str, float]:
    if raw_rates is None:
        return {}
    if not isinstance(raw_rates, dict):
        raise errors.ParseError(f"'rates' must be an object, got {type(raw_rates).__name__}")

    rates: dict[str, float] = {}
    for currency, value in raw_rates.items():
        # bool is an int subclass; true/false is not a rate
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise errors.ParseError(f"Rate for {currency} is not a number: {value!r}")
        try:
            rate = float(value)
        except OverflowError as exc:
            raise errors.ParseError(f"Rate for {currency} does not fit a float") from exc
        # 1e400 parses to inf
        if not math.isfinite(rate):
            raise errors.ParseError(f"Rate for {currency} is not finite: {value!r}")
        rates[currency] = rate
    return rates


def parse_response(body: Union[bytes, str]) -> RateResponse:
    """
    Decode a response body into a RateResponse.

    Parameters
    ----------
    body : bytes | str – raw body as read off the wire

    Raises
    ------
    errors.ParseError
        If the body is not valid JSON or not shaped like a rates payload.
    """
    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise errors.ParseError(f"Couldn't parse response: {exc}") from exc

    if not isinstance(payload, dict):
        raise errors.ParseError(f"Expected a JSON object, got {type(payload).__name__}")

    base = payload.get("base", "")
    date = payload.get("date", "")
    for name, value in (("base", base), ("date", date)):
        if not isinstance(value, str):
            raise errors.ParseError(f"'{name}' must be a string, got {value!r}")

    return RateResponse(base=base, date=date, rates=_decode_rates(payload.get("rates")))
