from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from suite_values.domain.errors import UnknownCurrencyError
from suite_values.domain.monetary.currency import Currency

logger = logging.getLogger(__name__)


class CurrencyRegistry:
    """Read-only lookup from currency code to canonical `Currency`.

    A registry is built once from an explicit collection of currencies and never mutated
    afterward; `with_currency` returns a new registry instead. Iteration order is the order
    in which currencies were supplied.
    """

    def __init__(self, currencies: Iterable[Currency]):
        by_code: dict[str, Currency] = {}
        for currency in currencies:
            if not isinstance(currency, Currency):
                raise TypeError(f"$currencies must contain only Currency instances, but provided value is: {currency!r}")
            if currency.code in by_code:
                raise ValueError(f"Cannot build `CurrencyRegistry` because code '{currency.code}' is listed twice")
            by_code[currency.code] = currency

        self._by_code: Mapping[str, Currency] = MappingProxyType(by_code)
        logger.debug(f"Built CurrencyRegistry with {len(by_code)} currencies")

    @property
    def currencies(self) -> Mapping[str, Currency]:
        """Read-only mapping from code to Currency."""
        return self._by_code

    def get(self, code: str) -> Currency:
        """Return the registered currency for $code (case-insensitive).

        Raises:
            UnknownCurrencyError: If $code is not registered.
            TypeError: If $code is not a string.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code!r}")

        currency = self._by_code.get(code.upper())
        if currency is None:
            raise UnknownCurrencyError(f"unsupported currency code: {code.upper()}")
        return currency

    def precision_of(self, code: str) -> int:
        """Return the canonical decimal places for $code."""
        return self.get(code).decimal_places

    def is_supported(self, code: str) -> bool:
        return isinstance(code, str) and code.upper() in self._by_code

    def supported_codes(self) -> list[str]:
        return list(self._by_code)

    def with_currency(self, currency: Currency) -> CurrencyRegistry:
        """Return a new registry that also contains $currency (replacing any entry with the same code)."""
        currencies = [c for c in self._by_code.values() if c.code != currency.code]
        currencies.append(currency)
        return CurrencyRegistry(currencies)

    def __contains__(self, code: object) -> bool:
        return self.is_supported(code)

    def __len__(self) -> int:
        return len(self._by_code)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.supported_codes()})"


# Fiat currencies
USD = Currency("USD", "$", "US Dollar", 2)
EUR = Currency("EUR", "€", "Euro", 2)
GBP = Currency("GBP", "£", "British Pound", 2)
JPY = Currency("JPY", "¥", "Japanese Yen", 0)
CAD = Currency("CAD", "C$", "Canadian Dollar", 2)
AUD = Currency("AUD", "A$", "Australian Dollar", 2)
CHF = Currency("CHF", "CHF", "Swiss Franc", 2)
CNY = Currency("CNY", "¥", "Chinese Yuan", 2)
INR = Currency("INR", "₹", "Indian Rupee", 2)
BRL = Currency("BRL", "R$", "Brazilian Real", 2)
KRW = Currency("KRW", "₩", "South Korean Won", 0)
MXN = Currency("MXN", "$", "Mexican Peso", 2)
SGD = Currency("SGD", "S$", "Singapore Dollar", 2)
HKD = Currency("HKD", "HK$", "Hong Kong Dollar", 2)
NZD = Currency("NZD", "NZ$", "New Zealand Dollar", 2)
SEK = Currency("SEK", "kr", "Swedish Krona", 2)
NOK = Currency("NOK", "kr", "Norwegian Krone", 2)
DKK = Currency("DKK", "kr", "Danish Krone", 2)
PLN = Currency("PLN", "zł", "Polish Złoty", 2)
CZK = Currency("CZK", "Kč", "Czech Koruna", 2)
HUF = Currency("HUF", "Ft", "Hungarian Forint", 0)
RUB = Currency("RUB", "₽", "Russian Ruble", 2)
TRY = Currency("TRY", "₺", "Turkish Lira", 2)
ZAR = Currency("ZAR", "R", "South African Rand", 2)
ILS = Currency("ILS", "₪", "Israeli Shekel", 2)
SAR = Currency("SAR", "﷼", "Saudi Riyal", 2)
AED = Currency("AED", "د.إ", "UAE Dirham", 2)
THB = Currency("THB", "฿", "Thai Baht", 2)
MYR = Currency("MYR", "RM", "Malaysian Ringgit", 2)
IDR = Currency("IDR", "Rp", "Indonesian Rupiah", 0)
PHP = Currency("PHP", "₱", "Philippine Peso", 2)
VND = Currency("VND", "₫", "Vietnamese Dong", 0)

# Crypto currencies
BTC = Currency("BTC", "₿", "Bitcoin", 8)
ETH = Currency("ETH", "Ξ", "Ethereum", 18)

DEFAULT_REGISTRY = CurrencyRegistry(
    [
        USD, EUR, GBP, JPY, CAD, AUD, CHF, CNY, INR, BRL,
        KRW, MXN, SGD, HKD, NZD, SEK, NOK, DKK, PLN, CZK,
        HUF, RUB, TRY, ZAR, ILS, SAR, AED, THB, MYR, IDR,
        PHP, VND, BTC, ETH,
    ]
)  # fmt: skip

# Code -> canonical decimal places, derived once from the default registry
CURRENCY_PRECISIONS: Mapping[str, int] = MappingProxyType({code: c.decimal_places for code, c in DEFAULT_REGISTRY.currencies.items()})
