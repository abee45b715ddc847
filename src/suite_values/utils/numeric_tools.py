from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Signed 64-bit range; amounts outside it cannot travel over the JSON wire to int64 consumers
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Rounding rule for every decimal -> minor-unit conversion (half away from zero)
ROUNDING = ROUND_HALF_UP

# Enough digits for 18 decimal places on top of any int64 amount
_PRECISION = 60


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise, so `100.50` becomes
    `Decimal("100.5")` and not `Decimal("100.4999999999999857891452847979962825775146484375")`.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is a bool (a silent True -> 1 conversion hides bugs).
    """
    if isinstance(value, bool):
        raise TypeError(f"$value must be a number, but provided value is a bool: {value}")

    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def is_strict_int(value: object) -> bool:
    """Return True if $value is an `int` and not a `bool`."""
    return isinstance(value, int) and not isinstance(value, bool)


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def scale_to_minor_units(value: DecimalLike, decimal_places: int) -> int:
    """Scale a decimal quantity by 10^$decimal_places and round it to an integer.

    Rounding follows `ROUNDING` (half away from zero): 0.005 USD -> 1 cent, -0.005 USD -> -1 cent.

    Args:
        value: Decimal quantity (e.g. 100.50 for $100.50).
        decimal_places: Number of minor-unit digits of the currency.

    Returns:
        int: Amount in minor units.

    Raises:
        ValueError: If $value is not a finite number.
    """
    decimal_value = as_decimal(value)

    # Raise: NaN and infinities have no minor-unit representation
    if not decimal_value.is_finite():
        raise ValueError(f"$value must be a finite number, but provided value is: {value}")

    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            scaled = decimal_value.scaleb(decimal_places).quantize(Decimal(1), rounding=ROUNDING)
        except InvalidOperation as e:
            raise ValueError(f"$value ({value}) is too large to be scaled by {decimal_places} decimal places") from e
        return int(scaled)


def minor_units_to_decimal(amount: int, decimal_places: int) -> Decimal:
    """Convert an integer minor-unit $amount into an exact `Decimal` with $decimal_places digits."""
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return Decimal(amount).scaleb(-decimal_places)


def quantize_to_places(value: DecimalLike, decimal_places: int) -> Decimal:
    """Round $value to exactly $decimal_places fractional digits using `ROUNDING`."""
    decimal_value = as_decimal(value)
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return decimal_value.quantize(Decimal(1).scaleb(-decimal_places), rounding=ROUNDING)
