import pytest

from suite_values.domain.errors import UnknownCurrencyError
from suite_values.domain.monetary.currency import Currency
from suite_values.domain.monetary.currency_registry import CURRENCY_PRECISIONS, DEFAULT_REGISTRY, USD, CurrencyRegistry

# Canonical precisions every deployment relies on
EXPECTED_PRECISIONS = {
    "USD": 2, "EUR": 2, "GBP": 2, "JPY": 0, "CAD": 2, "AUD": 2, "CHF": 2, "CNY": 2, "INR": 2, "BRL": 2,
    "KRW": 0, "MXN": 2, "SGD": 2, "HKD": 2, "NZD": 2, "SEK": 2, "NOK": 2, "DKK": 2, "PLN": 2, "CZK": 2,
    "HUF": 0, "RUB": 2, "TRY": 2, "ZAR": 2, "ILS": 2, "SAR": 2, "AED": 2, "THB": 2, "MYR": 2, "IDR": 0,
    "PHP": 2, "VND": 0, "BTC": 8, "ETH": 18,
}  # fmt: skip


@pytest.mark.parametrize("code, decimal_places", sorted(EXPECTED_PRECISIONS.items()))
def test_every_registered_code_has_canonical_precision(code, decimal_places):
    currency = Currency.from_code(code)

    assert currency.decimal_places == decimal_places
    assert CURRENCY_PRECISIONS[code] == decimal_places
    assert DEFAULT_REGISTRY.precision_of(code) == decimal_places
    currency.validate()


def test_supported_codes_keep_table_order():
    codes = DEFAULT_REGISTRY.supported_codes()

    assert codes == list(EXPECTED_PRECISIONS)
    assert len(DEFAULT_REGISTRY) == 34


def test_is_supported():
    assert DEFAULT_REGISTRY.is_supported("USD")
    assert DEFAULT_REGISTRY.is_supported("usd")
    assert "BTC" in DEFAULT_REGISTRY
    assert not DEFAULT_REGISTRY.is_supported("XXX")
    assert not DEFAULT_REGISTRY.is_supported(None)


def test_mappings_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_REGISTRY.currencies["XXX"] = USD
    with pytest.raises(TypeError):
        CURRENCY_PRECISIONS["USD"] = 3


def test_with_currency_returns_new_registry():
    doge = Currency("XDG", "Ð", "Dogecoin", 8)

    extended = DEFAULT_REGISTRY.with_currency(doge)

    assert extended.get("XDG") is doge
    assert Currency.from_code("XDG", registry=extended) is doge
    assert not DEFAULT_REGISTRY.is_supported("XDG")
    with pytest.raises(UnknownCurrencyError):
        Currency.from_code("XDG")


def test_with_currency_replaces_same_code():
    custom_usd = Currency("USD", "US$", "United States Dollar", 2)

    extended = DEFAULT_REGISTRY.with_currency(custom_usd)

    assert extended.get("USD").symbol == "US$"
    assert len(extended) == len(DEFAULT_REGISTRY)
    assert DEFAULT_REGISTRY.get("USD").symbol == "$"


def test_duplicate_codes_rejected():
    with pytest.raises(ValueError, match="listed twice"):
        CurrencyRegistry([USD, Currency("USD", "$", "Dollar", 2)])


def test_non_currency_rejected():
    with pytest.raises(TypeError):
        CurrencyRegistry(["USD"])


def test_get_rejects_non_string():
    with pytest.raises(TypeError):
        DEFAULT_REGISTRY.get(840)


def test_empty_registry_does_not_fall_back_to_default():
    with pytest.raises(UnknownCurrencyError):
        Currency.from_code("USD", registry=CurrencyRegistry([]))
