"""
Shared pytest fixtures for the fixerio test suite.
"""

import json

import pytest


# Same shape as a real fixer.io answer, trimmed to a few currencies.
# Using a fixed payload means tests are fast, deterministic, and don't hit the API.
@pytest.fixture
def rates_payload():
    return {
        "base": "EUR",
        "date": "2016-06-09",
        "rates": {"AUD": 1.5229, "GBP": 0.78498, "USD": 1.1326, "JPY": 121.56},
    }


@pytest.fixture
def rates_body(rates_payload):
    return json.dumps(rates_payload).encode("utf-8")
