from __future__ import annotations

import json
import math
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from suite_values.domain.errors import CurrencyMismatchError, DecodeError, ValidationError
from suite_values.domain.monetary.currency import Currency
from suite_values.utils.numeric_tools import (
    INT64_MAX,
    INT64_MIN,
    DecimalLike,
    as_decimal,
    fits_int64,
    is_strict_int,
    minor_units_to_decimal,
    scale_to_minor_units,
)


class Money:
    """Represents a monetary amount as an integer count of minor units plus a `Currency`.

    The amount is never stored as a float: 10050 with USD means $100.50. Decimal input is
    accepted only through `from_decimal`, which scales by 10^decimal_places and rounds half
    away from zero. Arithmetic between two Money values requires the same currency code.

    Amounts are limited to the signed 64-bit range so that the wire payload stays readable
    by int64 consumers.

    JSON format:
        {"amount": 10050, "decimal": 100.5, "currency": {"code": "USD", "symbol": "$", "name": "US Dollar", "decimal_places": 2}}
    """

    def __init__(self, amount: int, currency: Currency | str):
        """Initialize Money from an integer amount in minor units.

        Args:
            amount (int): Amount in the currency's smallest unit (e.g., cents).
            currency (Currency | str): Currency object, or a code looked up via `Currency.from_code`.

        Raises:
            TypeError: If $amount is not an int, or $currency is neither Currency nor str.
            ValidationError: If $currency is invalid or $amount is outside the int64 range.
            UnknownCurrencyError: If $currency is a code that is not registered.
        """
        # Raise: amount must be an integer count of minor units
        if not is_strict_int(amount):
            raise TypeError(f"$amount must be an int in minor units, but provided value is: {amount!r}. Use `Money.from_decimal` for decimal quantities.")

        currency = _resolve_currency(currency)

        # Raise: amount must fit the wire representation
        if not fits_int64(amount):
            raise ValidationError(f"amount {amount} is outside the 64-bit range [{INT64_MIN}, {INT64_MAX}]")

        self._amount = amount
        self._currency = currency

    # region Construction

    @classmethod
    def from_integer(cls, amount: int, currency: Currency | str) -> Money:
        """Create Money directly from an integer amount in minor units."""
        return cls(amount, currency)

    @classmethod
    def from_decimal(cls, value: DecimalLike, currency: Currency | str) -> Money:
        """Create Money from a decimal quantity.

        The quantity is scaled by 10^decimal_places and rounded half away from zero:
        `from_decimal("0.005", USD)` is 1 cent and `from_decimal("-0.005", USD)` is -1 cent.
        Floats go through `str` first, so `from_decimal(100.50, USD)` is exactly 10050 cents.

        Args:
            value: Decimal quantity (e.g. 100.50 for $100.50).
            currency (Currency | str): Currency object or registered code.

        Returns:
            Money: New instance holding the rounded minor-unit amount.

        Raises:
            ValidationError: If $currency is invalid or $value is not a finite number.
        """
        currency = _resolve_currency(currency)

        try:
            amount = scale_to_minor_units(value, currency.decimal_places)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValidationError(f"Cannot call `from_decimal` because $value ({value!r}) cannot be converted to a minor-unit amount") from e

        return cls(amount, currency)

    @classmethod
    def from_primitive(cls, amount: int, currency_code: str) -> Money:
        """Create Money from its storage primitives: (amount in minor units, currency code)."""
        return cls(amount, Currency.from_code(currency_code))

    # endregion

    # region Properties and conversion

    @property
    def amount(self) -> int:
        """Get the amount in minor units."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def decimal_value(self) -> Decimal:
        """Get the exact decimal value (e.g., Decimal('100.50') for 10050 USD cents)."""
        return minor_units_to_decimal(self._amount, self._currency.decimal_places)

    def to_decimal(self) -> float:
        """Return the amount as a float, for display only.

        Never feed this back into arithmetic or storage; use $amount or $decimal_value instead.
        """
        return float(self.decimal_value)

    def to_integer(self) -> int:
        return self._amount

    def to_primitive(self) -> tuple[int, str]:
        """Return the storage primitives: (amount in minor units, currency code)."""
        return self._amount, self._currency.to_primitive()

    def validate(self) -> None:
        """Check the currency invariants.

        Raises:
            ValidationError: If the currency is invalid.
        """
        self._currency.validate()

    # endregion

    # region Predicates

    def is_zero(self) -> bool:
        return self._amount == 0

    def is_positive(self) -> bool:
        return self._amount > 0

    def is_negative(self) -> bool:
        return self._amount < 0

    def equal(self, other: Money | None) -> bool:
        """Return True if $other has the same amount and currency code; None never equals a value."""
        if other is None:
            return False
        return self == other

    # endregion

    # region Arithmetic

    def _check_same_currency(self, other: Money, operation: str) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            CurrencyMismatchError: If the currency codes differ.
        """
        if self._currency.code != other.currency.code:
            raise CurrencyMismatchError(f"cannot {operation} money with different currencies: {self._currency.code} and {other.currency.code}")

    def add(self, other: Money) -> Money:
        """Return the exact sum of two amounts in the same currency.

        Raises:
            CurrencyMismatchError: If currencies differ.
            ValidationError: If the sum overflows the int64 range.
        """
        self._check_same_currency(other, "add")
        result = self._amount + other.amount
        if not fits_int64(result):
            raise ValidationError("integer overflow in money addition")
        return Money(result, self._currency)

    def subtract(self, other: Money) -> Money:
        """Return the exact difference of two amounts in the same currency.

        Raises:
            CurrencyMismatchError: If currencies differ.
            ValidationError: If the difference overflows the int64 range.
        """
        self._check_same_currency(other, "subtract")
        result = self._amount - other.amount
        if not fits_int64(result):
            raise ValidationError("integer overflow in money subtraction")
        return Money(result, self._currency)

    def multiply(self, factor: int) -> Money:
        """Multiply the amount by an integer $factor; the currency is unchanged.

        Raises:
            TypeError: If $factor is not an int.
            ValidationError: If the product overflows the int64 range.
        """
        if not is_strict_int(factor):
            raise TypeError(f"$factor must be an int, but provided value is: {factor!r}. Use `multiply_decimal` for fractional factors.")
        result = self._amount * factor
        if not fits_int64(result):
            raise ValidationError("integer overflow in money multiplication")
        return Money(result, self._currency)

    def multiply_decimal(self, factor: DecimalLike) -> Money:
        """Multiply the amount by a decimal $factor and round the result half away from zero.

        The product is computed on exact Decimals, e.g. 10050 cents * 0.15 = 1507.5 -> 1508 cents.

        Raises:
            ValidationError: If $factor is not a finite number or the product overflows the int64 range.
        """
        try:
            product = scale_to_minor_units(Decimal(self._amount) * as_decimal(factor), 0)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValidationError(f"Cannot call `multiply_decimal` because $factor ({factor!r}) cannot be converted to Decimal") from e
        if not fits_int64(product):
            raise ValidationError("integer overflow in money multiplication")
        return Money(product, self._currency)

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        # Lets `sum()` start from its default integer 0
        if is_strict_int(other) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, Money) or isinstance(other, bool):
            return NotImplemented  # Money * Money doesn't make sense
        if is_strict_int(other):
            return self.multiply(other)
        if isinstance(other, (Decimal, float)):
            return self.multiply_decimal(other)
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self):
        return Money(-self._amount, self._currency)

    def __abs__(self):
        return Money(abs(self._amount), self._currency)

    # endregion

    # region Comparison (same currency required for ordering)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Money):
            return False
        return self._amount == other.amount and self._currency.code == other.currency.code

    def __hash__(self) -> int:
        return hash((self._amount, self._currency.code))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self._amount < other.amount

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self._amount <= other.amount

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self._amount > other.amount

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self._amount >= other.amount

    # endregion

    # region Formatting

    def format(self) -> str:
        """Return e.g. `$100.50`; see `Currency.format`."""
        return self._currency.format(self._amount)

    def format_decimal(self) -> str:
        return self._currency.format_decimal(self.decimal_value)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"

    # endregion

    # region Wire format

    def to_dict(self) -> dict[str, Any]:
        """Return the wire object carrying both the integer amount and its decimal display value."""
        return {
            "amount": self._amount,
            "decimal": self.to_decimal(),
            "currency": self._currency.to_dict(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Money:
        """Decode a Money wire object, accepting the current and the legacy shapes.

        Accepted shapes:
        - `{"amount": <int>, "currency": ...}`: amount in minor units (current format).
        - `{"amount": <decimal>, "currency": ...}`: legacy decimal amount, scaled and rounded
          like `from_decimal`.
        - `{"amount": <int>, "decimal": <number>, "currency": ...}`: the integer amount wins and
          $decimal is only checked to be a number.

        `currency` may be the embedded object or a bare registered code.

        Raises:
            DecodeError: If the payload is structurally malformed, or a legacy decimal amount
                disagrees with an accompanying $decimal field.
            ValidationError: If the decoded currency or amount violates an invariant.
            UnknownCurrencyError: If a bare currency code is not registered.
        """
        if not isinstance(data, Mapping):
            raise DecodeError(f"money must be an object, got {type(data).__name__}")

        if "amount" not in data:
            raise DecodeError("field is missing", field="amount")
        if "currency" not in data:
            raise DecodeError("field is missing", field="currency")

        currency_data = data["currency"]
        currency = Currency.from_code(currency_data) if isinstance(currency_data, str) else Currency.from_dict(currency_data)

        amount = data["amount"]
        decimal_field = data.get("decimal")
        if decimal_field is not None and not _is_number(decimal_field):
            raise DecodeError(f"expected a number, got {type(decimal_field).__name__}", field="decimal")

        # Tagged decode: integer minor units first, then the legacy decimal amount
        if is_strict_int(amount):
            return cls(amount, currency)

        if _is_number(amount):
            result = cls.from_decimal(amount, currency)
            if decimal_field is not None and scale_to_minor_units(decimal_field, currency.decimal_places) != result.amount:
                raise DecodeError(f"decimal amount {amount} disagrees with decimal field {decimal_field}", field="decimal")
            return result

        raise DecodeError(f"expected an integer or decimal number, got {type(amount).__name__}", field="amount")

    @classmethod
    def from_json(cls, data: str | bytes) -> Money:
        """Decode a Money JSON document; see `from_dict` for the accepted shapes.

        Floats are parsed as `Decimal`, so a legacy `"amount": 100.10` is not distorted by binary floats.

        Raises:
            DecodeError: If $data is not valid JSON or not a valid Money payload.
        """
        try:
            payload = json.loads(data, parse_float=Decimal)
        except (ValueError, TypeError) as e:
            raise DecodeError(f"payload is not valid JSON: {e}") from e
        return cls.from_dict(payload)

    # endregion


def _resolve_currency(currency: Currency | str) -> Currency:
    if isinstance(currency, str):
        return Currency.from_code(currency)
    if not isinstance(currency, Currency):
        raise TypeError(f"$currency must be a Currency instance or code, but provided value is: {currency!r}")
    currency.validate()
    return currency


def _is_number(value: object) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return is_strict_int(value)
