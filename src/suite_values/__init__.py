__version__ = "0.1.0"

from suite_values.domain.chrono.epoch_time import Time
from suite_values.domain.chrono.timezone import Timezone
from suite_values.domain.errors import (
    CurrencyMismatchError,
    DecodeError,
    UnknownCurrencyError,
    UnknownTimezoneError,
    UnsupportedCodeError,
    ValidationError,
    ValueObjectError,
)
from suite_values.domain.monetary.currency import Currency
from suite_values.domain.monetary.currency_registry import CurrencyRegistry, DEFAULT_REGISTRY
from suite_values.domain.monetary.money import Money
from suite_values.utils.datetime_tools import RFC3339

__all__ = [
    "Currency",
    "CurrencyMismatchError",
    "CurrencyRegistry",
    "DEFAULT_REGISTRY",
    "DecodeError",
    "Money",
    "RFC3339",
    "Time",
    "Timezone",
    "UnknownCurrencyError",
    "UnknownTimezoneError",
    "UnsupportedCodeError",
    "ValidationError",
    "ValueObjectError",
]
