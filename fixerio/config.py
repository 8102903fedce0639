"""
fixerio/config.py – Central configuration for the fixer.io client.
All tuneable parameters live here so nothing is hard-coded elsewhere.
"""

# ---------------------------------------------------------------------------
# FX Data Source – fixer.io (https://fixer.io/)
# Rates are the ECB reference rates, published once per business day.
# ---------------------------------------------------------------------------
API_HOST: str = "api.fixer.io"
API_TIMEOUT_SECONDS: int = 30

# ---------------------------------------------------------------------------
# Request defaults – what a fresh RequestBuilder asks for.
# ---------------------------------------------------------------------------
DEFAULT_BASE: str = "EUR"
DEFAULT_PROTOCOL: str = "https"

# Path segment used when no historical date is set.
LATEST: str = "latest"

# Historical dates are calendar-only: no time of day, no timezone.
DATE_FORMAT: str = "%Y-%m-%d"
