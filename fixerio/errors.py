"""
fixerio/errors.py – Exceptions raised by the fetcher.

Like ``requests.exceptions.ConnectionError``, our ``ConnectionError`` shadows
the builtin inside this namespace; refer to it as ``errors.ConnectionError``.
"""

from typing import Optional


class FixerioError(Exception):
    """Base class for every error this package raises."""


class ConnectionError(FixerioError):  # noqa: A001
    """The API could not be reached, or answered with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ReadError(FixerioError):
    """The response body could not be read to the end."""


class ParseError(FixerioError):
    """The response body is not JSON, or not shaped like a rates payload."""
