"""
Tests for fixerio/fetch.py — mocks the API to avoid network dependency.
"""

from unittest.mock import Mock, PropertyMock, patch

import pytest
import requests

from fixerio import errors
from fixerio.currencies import EUR, GBP, USD
from fixerio.fetch import fetch_response, get_rates
from fixerio.request import RequestBuilder


def _mock_response(body=b"{}", status_code=200):
    mock = Mock()
    mock.status_code = status_code
    mock.url = "https://api.fixer.io/latest?base=EUR"
    mock.content = body
    if status_code >= 400:
        mock.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Client Error: Unprocessable Entity for url: {mock.url}"
        )
    return mock


def test_returns_rates(rates_body, rates_payload):
    with patch("fixerio.fetch.requests.get", return_value=_mock_response(rates_body)):
        rates = get_rates(RequestBuilder())
    assert rates == rates_payload["rates"]


def test_requests_built_url():
    request = RequestBuilder().with_base(USD).with_symbols(EUR, GBP).with_secure(False)
    with patch("fixerio.fetch.requests.get", return_value=_mock_response()) as get:
        get_rates(request, timeout=5)
    get.assert_called_once_with(
        "http://api.fixer.io/latest?base=USD&symbols=EUR,GBP", timeout=5, stream=True
    )


def test_rates_are_positive(rates_body):
    with patch("fixerio.fetch.requests.get", return_value=_mock_response(rates_body)):
        rates = get_rates(RequestBuilder())
    for currency, rate in rates.items():
        assert rate > 0


def test_fetch_response_keeps_base_and_date(rates_body):
    with patch("fixerio.fetch.requests.get", return_value=_mock_response(rates_body)):
        result = fetch_response(RequestBuilder())
    assert (result.base, result.date) == ("EUR", "2016-06-09")


def test_response_is_closed(rates_body):
    response = _mock_response(rates_body)
    with patch("fixerio.fetch.requests.get", return_value=response):
        get_rates(RequestBuilder())
    response.close.assert_called_once()


@pytest.mark.parametrize("exc", [
    requests.exceptions.ConnectionError("Name or service not known"),
    requests.exceptions.Timeout("timed out"),
    requests.exceptions.SSLError("certificate verify failed"),
])
def test_transport_failure_is_connection_error(exc):
    with patch("fixerio.fetch.requests.get", side_effect=exc):
        with pytest.raises(errors.ConnectionError) as info:
            get_rates(RequestBuilder())
    assert info.value.__cause__ is exc
    assert info.value.status_code is None


def test_http_error_status_is_connection_error():
    response = _mock_response(b'{"error": "Invalid base"}', status_code=422)
    with patch("fixerio.fetch.requests.get", return_value=response):
        with pytest.raises(errors.ConnectionError) as info:
            get_rates(RequestBuilder().with_base("XXX"))
    assert info.value.status_code == 422
    response.close.assert_called_once()


def test_truncated_body_is_read_error():
    response = _mock_response()
    type(response).content = PropertyMock(
        side_effect=requests.exceptions.ChunkedEncodingError("Connection broken")
    )
    with patch("fixerio.fetch.requests.get", return_value=response):
        with pytest.raises(errors.ReadError):
            get_rates(RequestBuilder())
    response.close.assert_called_once()


def test_malformed_body_is_parse_error():
    with patch("fixerio.fetch.requests.get", return_value=_mock_response(b"not json")):
        with pytest.raises(errors.ParseError):
            get_rates(RequestBuilder())


def test_errors_share_a_base():
    for cls in (errors.ConnectionError, errors.ReadError, errors.ParseError):
        assert issubclass(cls, errors.FixerioError)
