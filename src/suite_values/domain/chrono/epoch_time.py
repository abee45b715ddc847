from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from suite_values.config import get_settings
from suite_values.domain.chrono.timezone import Timezone
from suite_values.domain.errors import DecodeError, ValidationError
from suite_values.utils.datetime_tools import RFC3339, epoch_seconds, format_layout, make_utc, utc_from_timestamp, utc_now
from suite_values.utils.numeric_tools import is_strict_int

# Supported window: [1970-01-01T00:00:00Z, 2100-01-01T00:00:00Z)
MIN_EPOCH = 0
MAX_EPOCH_EXCLUSIVE = epoch_seconds(make_utc(2100, 1, 1))

_EPOCH_LITERAL = re.compile(r"-?[0-9]+")


class Time:
    """A point in time stored as whole seconds since 1970-01-01T00:00:00Z.

    The stored state is the epoch only; a timezone is applied when rendering and never kept.
    Instances are immutable, and arithmetic returns new instances that are validated against
    the supported window.

    JSON format: the bare epoch number, e.g. `1640995200`.
    """

    def __init__(self, epoch: int):
        """Initialize Time from an epoch.

        Args:
            epoch (int): Seconds since 1970-01-01T00:00:00Z.

        Raises:
            TypeError: If $epoch is not an int.
            ValidationError: If $epoch is outside [1970-01-01, 2100-01-01).
        """
        if not is_strict_int(epoch):
            raise TypeError(f"$epoch must be an int, but provided value is: {epoch!r}")

        self._epoch = epoch
        self.validate()

    # region Construction

    @classmethod
    def from_native(cls, dt: datetime) -> Time:
        """Create Time from a timezone-aware datetime; sub-second parts are floored.

        Raises:
            ValidationError: If $dt is naive or outside the supported window.
        """
        try:
            epoch = epoch_seconds(dt)
        except ValueError as e:
            raise ValidationError(f"Cannot call `from_native` because $dt ('{dt}') is naive; attach a timezone first") from e
        return cls(epoch)

    @classmethod
    def now(cls) -> Time:
        return cls.from_native(utc_now())

    @classmethod
    def from_primitive(cls, epoch: int) -> Time:
        return cls(epoch)

    # endregion

    # region Properties and conversion

    @property
    def epoch(self) -> int:
        """Get seconds since the UNIX epoch."""
        return self._epoch

    def to_native(self) -> datetime:
        """Return an aware UTC datetime for this instant."""
        return utc_from_timestamp(self._epoch)

    def to_primitive(self) -> int:
        return self._epoch

    def validate(self) -> None:
        """Check that the epoch is inside the supported window.

        Raises:
            ValidationError: If the epoch is before 1970-01-01 or at/after 2100-01-01.
        """
        if self._epoch < MIN_EPOCH:
            raise ValidationError(f"epoch time too early: {self._epoch} (minimum: {MIN_EPOCH})")
        if self._epoch >= MAX_EPOCH_EXCLUSIVE:
            raise ValidationError(f"epoch time too late: {self._epoch} (must be before {MAX_EPOCH_EXCLUSIVE})")

    # endregion

    # region Formatting

    def format(self, layout: str, tz: Timezone | str | None = None) -> str:
        """Render the instant with a strftime $layout in $tz.

        Without $tz the instant is rendered in UTC. With $tz the offset in effect at this
        instant comes from the zone rules, so DST is handled by the zone database.
        `%:z` in $layout renders the RFC 3339 offset ('Z' for UTC).

        Args:
            layout (str): strftime pattern, e.g. `RFC3339`.
            tz (Timezone | str | None): Timezone, IANA identifier, or None for UTC.

        Returns:
            str: The formatted timestamp.

        Raises:
            UnknownTimezoneError: If $tz is an unknown identifier.
        """
        if isinstance(tz, str):
            tz = Timezone.from_id(tz)
        zone = timezone.utc if tz is None else tz.zone
        return format_layout(self.to_native().astimezone(zone), layout)

    def format_utc(self, layout: str) -> str:
        return self.format(layout, None)

    def format_local(self, layout: str) -> str:
        """Render the instant in the local zone.

        The local zone is `SUITE_VALUES_LOCAL_TIMEZONE` when configured, otherwise the zone
        of the running process.
        """
        local_timezone = get_settings().local_timezone
        if local_timezone is not None:
            return self.format(layout, local_timezone)
        return format_layout(self.to_native().astimezone(), layout)

    def __str__(self) -> str:
        return self.format(RFC3339, None)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._epoch})"

    # endregion

    # region Comparison

    def is_zero(self) -> bool:
        return self._epoch == 0

    def equal(self, other: Time | None) -> bool:
        """Return True if $other is the same instant; None never equals a present value."""
        if other is None:
            return False
        return self._epoch == other.epoch

    def before(self, other: Time) -> bool:
        return self._epoch < _require_time(other, "before").epoch

    def after(self, other: Time) -> bool:
        return self._epoch > _require_time(other, "after").epoch

    def __eq__(self, other) -> bool:
        if not isinstance(other, Time):
            return False
        return self._epoch == other.epoch

    def __hash__(self) -> int:
        return hash(self._epoch)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._epoch < other.epoch

    def __le__(self, other) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._epoch <= other.epoch

    def __gt__(self, other) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._epoch > other.epoch

    def __ge__(self, other) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._epoch >= other.epoch

    # endregion

    # region Arithmetic

    def add(self, duration: timedelta) -> Time:
        """Return a new Time shifted by $duration, floored to whole seconds.

        Raises:
            TypeError: If $duration is not a timedelta.
            ValidationError: If the result leaves the supported window.
        """
        if not isinstance(duration, timedelta):
            raise TypeError(f"$duration must be a timedelta, but provided value is: {duration!r}")
        return Time(self._epoch + duration // timedelta(seconds=1))

    def sub(self, other: Time) -> timedelta:
        """Return the signed duration `self - other`."""
        return timedelta(seconds=self._epoch - _require_time(other, "sub").epoch)

    def __add__(self, other):
        if not isinstance(other, timedelta):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, Time):
            return self.sub(other)
        if isinstance(other, timedelta):
            return self.add(-other)
        return NotImplemented

    # endregion

    # region Wire format

    def to_json(self) -> str:
        """Return the bare epoch digits, e.g. `1640995200`."""
        return str(self._epoch)

    @classmethod
    def from_json(cls, data: str | bytes) -> Time:
        """Decode a bare (`1640995200`) or quoted (`"1640995200"`) epoch.

        Raises:
            DecodeError: If $data is not an integer literal.
            ValidationError: If the epoch is outside the supported window.
        """
        if isinstance(data, (bytes, bytearray)):
            try:
                data = data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodeError("payload is not valid UTF-8", field="epoch") from e
        if not isinstance(data, str):
            raise DecodeError(f"expected str or bytes, got {type(data).__name__}", field="epoch")

        text = data.strip()
        if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
            text = text[1:-1]

        if not _EPOCH_LITERAL.fullmatch(text):
            raise DecodeError(f"invalid epoch time: {data}", field="epoch")

        sign, digits = ("-", text[1:]) if text.startswith("-") else ("", text)
        digits = digits.lstrip("0") or "0"
        try:
            epoch = int(sign + digits)
        except ValueError as e:
            # Too many digits for int conversion, so far outside the window
            bound = "early" if sign else "late"
            raise ValidationError(f"epoch time too {bound}: {len(digits)}-digit literal") from e

        return cls(epoch)

    # endregion


def _require_time(other: object, operation: str) -> Time:
    if not isinstance(other, Time):
        raise TypeError(f"Cannot call `{operation}` because $other must be a Time, but provided value is: {other!r}")
    return other
