"""
fixerio/currencies.py – Currency codes published by fixer.io.

The API serves the European Central Bank reference set. The constants are
plain strings so they can be passed straight to the builder:

    RequestBuilder().with_base(USD).with_symbols(EUR, GBP)

Nothing here is enforced; the builder accepts any code and an unknown one
simply comes back as an API error.
"""

AUD = "AUD"
BGN = "BGN"
BRL = "BRL"
CAD = "CAD"
CHF = "CHF"
CNY = "CNY"
CZK = "CZK"
DKK = "DKK"
EUR = "EUR"
GBP = "GBP"
HKD = "HKD"
HRK = "HRK"
HUF = "HUF"
IDR = "IDR"
ILS = "ILS"
INR = "INR"
JPY = "JPY"
KRW = "KRW"
MXN = "MXN"
MYR = "MYR"
NOK = "NOK"
NZD = "NZD"
PHP = "PHP"
PLN = "PLN"
RON = "RON"
RUB = "RUB"
SEK = "SEK"
SGD = "SGD"
THB = "THB"
TRY = "TRY"
USD = "USD"
ZAR = "ZAR"

CURRENCY_NAMES: dict[str, str] = {
    AUD: "Australian Dollar",
    BGN: "Bulgarian Lev",
    BRL: "Brazilian Real",
    CAD: "Canadian Dollar",
    CHF: "Swiss Franc",
    CNY: "Chinese Yuan Renminbi",
    CZK: "Czech Koruna",
    DKK: "Danish Krone",
    EUR: "Euro",
    GBP: "Pound Sterling",
    HKD: "Hong Kong Dollar",
    HRK: "Croatian Kuna",
    HUF: "Hungarian Forint",
    IDR: "Indonesian Rupiah",
    ILS: "Israeli Shekel",
    INR: "Indian Rupee",
    JPY: "Japanese Yen",
    KRW: "South Korean Won",
    MXN: "Mexican Peso",
    MYR: "Malaysian Ringgit",
    NOK: "Norwegian Krone",
    NZD: "New Zealand Dollar",
    PHP: "Philippine Peso",
    PLN: "Polish Zloty",
    RON: "Romanian Leu",
    RUB: "Russian Rouble",
    SEK: "Swedish Krona",
    SGD: "Singapore Dollar",
    THB: "Thai Baht",
    TRY: "Turkish Lira",
    USD: "US Dollar",
    ZAR: "South African Rand",
}

SUPPORTED_CURRENCIES: tuple[str, ...] = tuple(sorted(CURRENCY_NAMES))


def is_supported(code: str) -> bool:
    """True if fixer.io publishes rates for ``code`` (case-sensitive)."""
    return code in CURRENCY_NAMES
