from __future__ import annotations

import logging
from datetime import datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from suite_values.domain.errors import UnknownTimezoneError, ValidationError
from suite_values.utils.datetime_tools import format_offset, is_aware, utc_now

logger = logging.getLogger(__name__)

# Human-readable names for the most common zones; others are derived from the identifier
_DISPLAY_NAMES: dict[str, str] = {
    "UTC": "Coordinated Universal Time",
    "America/New_York": "Eastern Time",
    "America/Chicago": "Central Time",
    "America/Denver": "Mountain Time",
    "America/Los_Angeles": "Pacific Time",
    "Europe/London": "Greenwich Mean Time",
    "Europe/Paris": "Central European Time",
    "Asia/Tokyo": "Japan Standard Time",
    "Asia/Shanghai": "China Standard Time",
    "Australia/Sydney": "Australian Eastern Time",
}


class Timezone:
    """IANA timezone resolved to its zone rules.

    The offset is never stored: it is computed for a concrete instant, so DST transitions
    come from the zone database instead of a fixed offset.

    Attributes:
        id (str): IANA identifier (e.g., "America/New_York").
        name (str): Display name (e.g., "Eastern Time").
        zone (tzinfo): Resolved zone rules.
    """

    def __init__(self, id: str, zone: tzinfo, name: str | None = None):
        self._id = id
        self._zone = zone
        self._name = name or display_name_for(id)

    @classmethod
    def from_id(cls, id: str) -> Timezone:
        """Resolve an IANA identifier.

        Args:
            id (str): Zone identifier, e.g. "Europe/Paris" or "UTC".

        Returns:
            Timezone: The resolved timezone.

        Raises:
            ValidationError: If $id is empty.
            UnknownTimezoneError: If $id is not in the zone database.
            TypeError: If $id is not a string.
        """
        if not isinstance(id, str):
            raise TypeError(f"$id must be a string, but provided value is: {id!r}")
        if not id:
            raise ValidationError("timezone ID cannot be empty")

        try:
            zone = ZoneInfo(id)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise UnknownTimezoneError(f"unsupported timezone ID: {id}") from e

        logger.debug(f"Resolved timezone $id '{id}'")
        return cls(id, zone)

    @classmethod
    def from_primitive(cls, id: str) -> Timezone:
        return cls.from_id(id)

    def to_primitive(self) -> str:
        return self._id

    # region Properties

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def zone(self) -> tzinfo:
        return self._zone

    # endregion

    # region Offsets

    def offset_at(self, instant: datetime | None = None) -> timedelta:
        """Return the UTC offset in effect at $instant (defaults to now).

        Args:
            instant (datetime | None): Timezone-aware datetime; None means the current time.

        Raises:
            ValidationError: If $instant is naive.
        """
        if instant is None:
            instant = utc_now()
        elif not is_aware(instant):
            raise ValidationError(f"Cannot call `offset_at` because $instant ('{instant}') is naive; attach a timezone first")
        return instant.astimezone(self._zone).utcoffset()

    def format_offset(self, instant: datetime | None = None) -> str:
        """Return the offset at $instant as '+HH:MM' / '-HH:MM'."""
        return format_offset(self.offset_at(instant))

    # endregion

    def __eq__(self, other) -> bool:
        if not isinstance(other, Timezone):
            return False
        return self._id == other.id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return f"{self._id} ({self._name}) {self.format_offset()}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self._id}')"


def display_name_for(id: str) -> str:
    """Return a human-readable name for a zone identifier.

    Known zones use a fixed table; others take the last path segment with underscores
    replaced, e.g. "America/Sao_Paulo" -> "Sao Paulo".
    """
    if id in _DISPLAY_NAMES:
        return _DISPLAY_NAMES[id]

    parts = id.split("/")
    if len(parts) > 1:
        return parts[-1].replace("_", " ")
    return id
