"""
fixerio/fetch.py – Network round trip.

One blocking GET per call, no retries, no caching. Every failure is turned
into one of the errors in fixerio.errors and re-raised immediately:

  transport failure / non-2xx status  →  errors.ConnectionError
  body cannot be read to the end      →  errors.ReadError
  body is not a rates payload         →  errors.ParseError
"""

import logging

import requests

from fixerio import errors
from fixerio.config import API_TIMEOUT_SECONDS
from fixerio.request import RequestBuilder
from fixerio.response import RateResponse, parse_response

logger = logging.getLogger(__name__)


def _read_body(response: requests.Response) -> bytes:
    try:
        return response.content
    except (requests.exceptions.RequestException, OSError) as exc:
        logger.error("Response body from %s could not be read: %s", response.url, exc)
        raise errors.ReadError(f"Couldn't read response: {exc}") from exc


def fetch_response(request: RequestBuilder, timeout: float = API_TIMEOUT_SECONDS) -> RateResponse:
    """
    Fetch and decode the full payload (base, date and rates).

    ``timeout`` is handed to requests as-is; None waits forever.
    """
    url = request.build_url()
    logger.info("Calling fixer.io API | %s", url)

    try:
        response = requests.get(url, timeout=timeout, stream=True)
    except requests.exceptions.RequestException as exc:
        logger.error("Network error reaching fixer.io API: %s", exc)
        raise errors.ConnectionError(f"Couldn't connect to server: {exc}") from exc

    try:
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            logger.error("HTTP error from fixer.io API: %s", exc)
            raise errors.ConnectionError(str(exc), status_code=response.status_code) from exc

        body = _read_body(response)
    finally:
        response.close()

    try:
        result = parse_response(body)
    except errors.ParseError as exc:
        logger.error("Unparseable response from %s: %s", url, exc)
        raise

    logger.info("Fetch done | %d rates | base=%s | date=%s", len(result.rates), result.base, result.date)
    return result


def get_rates(request: RequestBuilder, timeout: float = API_TIMEOUT_SECONDS) -> dict[str, float]:
    """
    Retrieve the exchange rates described by ``request``.

    Returns
    -------
    dict[str, float]
        Maps each currency code to its rate against the base currency.
        Example: {"USD": 1.1326, "GBP": 0.78498}
    """
    return fetch_response(request, timeout=timeout).rates
