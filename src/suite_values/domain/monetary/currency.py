from __future__ import annotations

from collections.abc import Mapping
from decimal import InvalidOperation
from typing import Any, TYPE_CHECKING

from suite_values.domain.errors import DecodeError, ValidationError
from suite_values.utils.numeric_tools import DecimalLike, is_strict_int, minor_units_to_decimal, quantize_to_places

if TYPE_CHECKING:
    from suite_values.domain.monetary.currency_registry import CurrencyRegistry

MIN_DECIMAL_PLACES = 0
MAX_DECIMAL_PLACES = 18


class Currency:
    """Represents an ISO 4217 currency with symbol, name and decimal precision.

    Amounts in this currency are stored as integers in the smallest unit (minor units), and
    $decimal_places says how many of those digits sit after the decimal point (2 for USD cents,
    0 for JPY, 8 for BTC satoshis).

    Attributes:
        code (str): Upper-case 3-letter code (e.g., "USD", "BTC").
        symbol (str): Display glyph (e.g., "$").
        name (str): Full currency name.
        decimal_places (int): Number of minor-unit digits (0-18).
    """

    def __init__(self, code: str, symbol: str, name: str, decimal_places: int):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code; it is upper-cased.
            symbol (str): Display symbol.
            name (str): Full currency name.
            decimal_places (int): Number of decimal places (0-18).

        Raises:
            ValidationError: If any field is invalid.
            TypeError: If $code, $symbol or $name is not a string.
        """
        for param, value in (("code", code), ("symbol", symbol), ("name", name)):
            if not isinstance(value, str):
                raise TypeError(f"${param} must be a string, but provided value is: {value!r}")

        self._code = code.upper()
        self._symbol = symbol
        self._name = name
        self._decimal_places = decimal_places

        self.validate()

    # region Properties

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def symbol(self) -> str:
        """Get the currency symbol."""
        return self._symbol

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def decimal_places(self) -> int:
        """Get the number of decimal places."""
        return self._decimal_places

    def get_decimal_places(self) -> int:
        return self._decimal_places

    # endregion

    # region Validation

    def validate(self) -> None:
        """Check all currency invariants.

        Checks run in a fixed order and the first failure wins: code length, code letters,
        decimal places, symbol, name.

        Raises:
            ValidationError: If any invariant is violated.
        """
        if len(self._code) != 3:
            raise ValidationError(f"currency code must be exactly 3 characters, got {len(self._code)}")

        for char in self._code:
            if not ("A" <= char <= "Z"):
                raise ValidationError(f"currency code must contain only letters A-Z, got '{char}'")

        if not is_strict_int(self._decimal_places) or not (MIN_DECIMAL_PLACES <= self._decimal_places <= MAX_DECIMAL_PLACES):
            raise ValidationError(f"decimal places must be between {MIN_DECIMAL_PLACES} and {MAX_DECIMAL_PLACES}, got {self._decimal_places}")

        if not self._symbol:
            raise ValidationError("currency symbol cannot be empty")

        if not self._name:
            raise ValidationError("currency name cannot be empty")

    # endregion

    # region Lookup and wire format

    @classmethod
    def from_code(cls, code: str, registry: CurrencyRegistry | None = None) -> Currency:
        """Get the canonical currency for $code.

        Args:
            code (str): Currency code to look up (case-insensitive).
            registry (CurrencyRegistry | None): Registry to search; defaults to `DEFAULT_REGISTRY`.

        Returns:
            Currency: The registered currency with its canonical precision.

        Raises:
            UnknownCurrencyError: If $code is not registered.
        """
        # Imported here: the registry module builds Currency instances at import time
        from suite_values.domain.monetary.currency_registry import DEFAULT_REGISTRY

        return (DEFAULT_REGISTRY if registry is None else registry).get(code)

    def to_primitive(self) -> str:
        """Return the wire value: the bare 3-letter code."""
        return self._code

    @classmethod
    def from_primitive(cls, code: str) -> Currency:
        return cls.from_code(code)

    def to_dict(self) -> dict[str, Any]:
        """Return the embedded-object form used inside the Money wire payload."""
        return {
            "code": self._code,
            "symbol": self._symbol,
            "name": self._name,
            "decimal_places": self._decimal_places,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Currency:
        """Build a Currency from its embedded-object form.

        Raises:
            DecodeError: If a field is missing or has the wrong type.
            ValidationError: If the fields are well-typed but violate an invariant.
        """
        if not isinstance(data, Mapping):
            raise DecodeError(f"currency must be an object, got {type(data).__name__}", field="currency")

        for key, expected_type in (("code", str), ("symbol", str), ("name", str), ("decimal_places", int)):
            if key not in data:
                raise DecodeError("field is missing", field=f"currency.{key}")
            value = data[key]
            if not isinstance(value, expected_type) or isinstance(value, bool):
                raise DecodeError(f"expected {expected_type.__name__}, got {type(value).__name__}", field=f"currency.{key}")

        return cls(data["code"], data["symbol"], data["name"], data["decimal_places"])

    # endregion

    # region Formatting

    def format(self, amount: int) -> str:
        """Format an integer minor-unit $amount with the currency symbol.

        The sign goes after the symbol: `$-100.50`.

        Args:
            amount (int): Amount in minor units (e.g., 10050 cents).

        Returns:
            str: Formatted value, e.g. `$100.50`, `¥1000`, `₿1.00000000`.
        """
        return f"{self._symbol}{self._fixed_point(amount)}"

    def format_with_code(self, amount: int) -> str:
        """Format an integer minor-unit $amount followed by the code, e.g. `100.50 USD`."""
        return f"{self._fixed_point(amount)} {self._code}"

    def format_with_name(self, amount: int) -> str:
        """Format an integer minor-unit $amount followed by the name, e.g. `100.50 US Dollar`."""
        return f"{self._fixed_point(amount)} {self._name}"

    def format_decimal(self, amount: DecimalLike) -> str:
        """Format an already-decimal $amount with the currency symbol.

        The value is rounded to $decimal_places digits (half away from zero).

        Raises:
            ValueError: If $amount cannot be converted to Decimal.
        """
        try:
            value = quantize_to_places(amount, self._decimal_places)
        except (ValueError, InvalidOperation) as e:
            raise ValueError(f"Cannot call `format_decimal` because $amount ({amount}) cannot be converted to Decimal") from e
        return f"{self._symbol}{value:.{self._decimal_places}f}"

    def _fixed_point(self, amount: int) -> str:
        if not is_strict_int(amount):
            raise TypeError(f"$amount must be an int in minor units, but provided value is: {amount!r}")
        value = minor_units_to_decimal(amount, self._decimal_places)
        return f"{value:.{self._decimal_places}f}"

    # endregion

    # region Magic methods

    def __eq__(self, other) -> bool:
        """Check equality with another Currency (by code)."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.code}', '{self.symbol}', '{self.name}', {self.decimal_places})"

    # endregion
