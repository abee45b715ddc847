from decimal import Decimal

import pytest

from suite_values.domain.errors import DecodeError, UnknownCurrencyError, ValidationError
from suite_values.domain.monetary.currency import Currency
from suite_values.domain.monetary.currency_registry import BTC, JPY, USD


@pytest.mark.parametrize(
    "code, symbol, name, decimal_places, message",
    [
        ("US", "$", "US Dollar", 2, "currency code must be exactly 3 characters"),
        ("USDD", "$", "US Dollar", 2, "currency code must be exactly 3 characters"),
        ("U1D", "$", "US Dollar", 2, "currency code must contain only letters"),
        ("USD", "$", "US Dollar", -1, "decimal places must be between 0 and 18"),
        ("USD", "$", "US Dollar", 19, "decimal places must be between 0 and 18"),
        ("USD", "", "US Dollar", 2, "currency symbol cannot be empty"),
        ("USD", "$", "", 2, "currency name cannot be empty"),
    ],
    ids=["code-too-short", "code-too-long", "code-not-letters", "negative-places", "too-many-places", "empty-symbol", "empty-name"],
)
def test_construct_rejects_invalid_fields(code, symbol, name, decimal_places, message):
    with pytest.raises(ValidationError, match=message):
        Currency(code, symbol, name, decimal_places)


def test_construct_checks_code_before_decimal_places_before_symbol_before_name():
    # Every field is invalid; the code-length check must win
    with pytest.raises(ValidationError, match="exactly 3 characters"):
        Currency("", "", "", 99)

    # Code fine; decimal places must win over empty symbol and name
    with pytest.raises(ValidationError, match="decimal places"):
        Currency("USD", "", "", 99)

    with pytest.raises(ValidationError, match="symbol"):
        Currency("USD", "", "", 2)


def test_construct_valid_and_uppercases_code():
    currency = Currency("usd", "$", "US Dollar", 2)

    assert currency.code == "USD"
    assert currency.symbol == "$"
    assert currency.name == "US Dollar"
    assert currency.decimal_places == 2
    assert currency.get_decimal_places() == 2
    currency.validate()


def test_construct_rejects_non_integer_decimal_places():
    with pytest.raises(ValidationError, match="decimal places"):
        Currency("USD", "$", "US Dollar", 2.0)
    with pytest.raises(ValidationError, match="decimal places"):
        Currency("USD", "$", "US Dollar", True)


def test_validation_error_is_a_value_error():
    # Callers written against plain ValueError keep working
    with pytest.raises(ValueError):
        Currency("XX", "$", "Bad", 2)


def test_from_code_uses_canonical_precision():
    assert Currency.from_code("USD").decimal_places == 2
    assert Currency.from_code("JPY").decimal_places == 0
    assert Currency.from_code("BTC").decimal_places == 8
    assert Currency.from_code("ETH").decimal_places == 18
    assert Currency.from_code("eur").code == "EUR"


def test_from_code_unknown_raises_lookup_error():
    with pytest.raises(UnknownCurrencyError, match="unsupported currency code: XXX"):
        Currency.from_code("XXX")
    with pytest.raises(LookupError):
        Currency.from_code("")


def test_primitive_is_bare_code():
    assert USD.to_primitive() == "USD"
    assert Currency.from_primitive("USD") == USD
    assert Currency.from_primitive(JPY.to_primitive()) is JPY


@pytest.mark.parametrize(
    "currency, amount, expected",
    [
        (USD, 10050, "$100.50"),
        (USD, -10050, "$-100.50"),
        (USD, 5, "$0.05"),
        (USD, -5, "$-0.05"),
        (USD, 0, "$0.00"),
        (JPY, 1000, "¥1000"),
        (JPY, -1000, "¥-1000"),
        (BTC, 100000000, "₿1.00000000"),
        (BTC, 1, "₿0.00000001"),
    ],
)
def test_format_minor_units(currency, amount, expected):
    assert currency.format(amount) == expected


def test_format_eighteen_places_is_exact():
    eth = Currency.from_code("ETH")
    assert eth.format(1) == "Ξ0.000000000000000001"
    assert eth.format(1234567890123456789) == "Ξ1.234567890123456789"


def test_format_with_code_and_name():
    assert USD.format_with_code(10050) == "100.50 USD"
    assert USD.format_with_name(10050) == "100.50 US Dollar"
    assert JPY.format_with_code(1000) == "1000 JPY"


def test_format_rejects_non_integer_amount():
    with pytest.raises(TypeError):
        USD.format(100.5)


def test_format_decimal():
    assert USD.format_decimal(100.5) == "$100.50"
    assert USD.format_decimal(Decimal("100.505")) == "$100.51"
    assert USD.format_decimal("-100.5") == "$-100.50"
    assert JPY.format_decimal(1000) == "¥1000"
    assert BTC.format_decimal("1") == "₿1.00000000"

    with pytest.raises(ValueError, match="format_decimal"):
        USD.format_decimal("abc")


def test_equality_and_hash_use_code():
    custom_usd = Currency("USD", "US$", "Dollar", 2)

    assert custom_usd == USD
    assert hash(custom_usd) == hash(USD)
    assert USD != JPY
    assert USD != "USD"
    assert str(USD) == "USD"
    assert repr(USD) == "Currency('USD', '$', 'US Dollar', 2)"


def test_dict_round_trip():
    data = USD.to_dict()

    assert data == {"code": "USD", "symbol": "$", "name": "US Dollar", "decimal_places": 2}
    assert Currency.from_dict(data) == USD


@pytest.mark.parametrize(
    "data, field",
    [
        ({"symbol": "$", "name": "US Dollar", "decimal_places": 2}, "currency.code"),
        ({"code": "USD", "symbol": "$", "name": "US Dollar", "decimal_places": "2"}, "currency.decimal_places"),
        ({"code": "USD", "symbol": "$", "name": "US Dollar", "decimal_places": True}, "currency.decimal_places"),
        ({"code": 840, "symbol": "$", "name": "US Dollar", "decimal_places": 2}, "currency.code"),
    ],
)
def test_from_dict_rejects_malformed_objects(data, field):
    with pytest.raises(DecodeError) as exc_info:
        Currency.from_dict(data)
    assert exc_info.value.field == field


def test_from_dict_rejects_non_object():
    with pytest.raises(DecodeError):
        Currency.from_dict(["USD"])


def test_from_dict_validates_fields():
    with pytest.raises(ValidationError, match="currency symbol cannot be empty"):
        Currency.from_dict({"code": "USD", "symbol": "", "name": "US Dollar", "decimal_places": 2})
