from __future__ import annotations


class ValueObjectError(Exception):
    """Base class for every error raised by the value objects in this package."""


class ValidationError(ValueObjectError, ValueError):
    """A value violates its invariants (bad currency fields, epoch out of window, int64 overflow)."""


class UnsupportedCodeError(ValueObjectError, LookupError):
    """An identifier does not resolve to anything known."""


class UnknownCurrencyError(UnsupportedCodeError):
    """Currency code is not present in the registry."""


class UnknownTimezoneError(UnsupportedCodeError):
    """Timezone identifier is not present in the IANA database."""


class CurrencyMismatchError(ValueObjectError, ValueError):
    """Arithmetic or comparison attempted between different currencies."""


class DecodeError(ValueObjectError, ValueError):
    """A wire payload cannot be decoded.

    Attributes:
        field: Name of the offending field, or None when the payload as a whole is malformed.
        reason: Short human-friendly explanation.
    """

    def __init__(self, reason: str, field: str | None = None):
        self.reason = reason
        self.field = field
        message = f"Cannot decode payload because {reason}" if field is None else f"Cannot decode field '{field}' because {reason}"
        super().__init__(message)
