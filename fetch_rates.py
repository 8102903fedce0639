"""
fetch_rates.py – Command-line entry point for the fixer.io client.

Usage
-----
# Latest EUR-based rates for every currency
    uv run python fetch_rates.py

# USD-based rates for two currencies on a past date, over plain http
    uv run python fetch_rates.py --base USD --symbols EUR,GBP --date 2016-06-09 --insecure

Flow
----
    Build  →  RequestBuilder from the CLI options
    Fetch  →  GET + decode via fixerio.get_rates
    Print  →  {currency: rate} as JSON on stdout
"""

import argparse
import json
import logging
import sys
from typing import Optional

from fixerio import errors
from fixerio.config import API_TIMEOUT_SECONDS, DEFAULT_BASE
from fixerio.fetch import get_rates
from fixerio.request import RequestBuilder, parse_date

logger = logging.getLogger("fetch_rates")


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

def build_request(args: argparse.Namespace) -> RequestBuilder:
    request = RequestBuilder().with_base(args.base).with_secure(not args.insecure)

    if args.symbols:
        request = request.with_symbols(*[s.strip() for s in args.symbols.split(",") if s.strip()])
    if args.date:
        request = request.with_historical(args.date)

    return request


def run(request: RequestBuilder, timeout: float = API_TIMEOUT_SECONDS) -> int:
    try:
        rates = get_rates(request, timeout=timeout)
    except errors.FixerioError as exc:
        logger.error("Fetch failed: %s", exc)
        return 1

    print(json.dumps(rates, indent=2, sort_keys=True))
    return 0


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch currency exchange rates from the fixer.io API."
    )
    parser.add_argument(
        "--base",
        default=DEFAULT_BASE,
        help=f"Base currency code (default: {DEFAULT_BASE})",
    )
    parser.add_argument(
        "--symbols",
        default="",
        help="Comma-separated currency codes to return, e.g. USD,GBP (default: all)",
    )
    parser.add_argument(
        "--date",
        type=parse_date,
        default=None,
        help="Historical date in YYYY-MM-DD format (default: latest)",
    )
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Use plain http instead of https",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=API_TIMEOUT_SECONDS,
        help=f"Request timeout in seconds (default: {API_TIMEOUT_SECONDS})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s – %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    args = parse_args(argv)
    return run(build_request(args), timeout=args.timeout)


if __name__ == "__main__":
    sys.exit(main())
