from __future__ import annotations

from datetime import datetime, timezone, timedelta, tzinfo

# Layout directive rendered as an RFC 3339 offset ("Z" at zero offset, otherwise "+HH:MM")
RFC3339_OFFSET_DIRECTIVE = "%:z"

# One place to change the visible UTC indicator
_UTC_SUFFIX = "Z"  # Z = ISO-8601 Zulu

RFC3339 = f"%Y-%m-%dT%H:%M:%S{RFC3339_OFFSET_DIRECTIVE}"
DATE_ONLY = "%Y-%m-%d"


def is_aware(dt: datetime) -> bool:
    return dt.tzinfo is not None and dt.utcoffset() is not None


# region UTC creation and conversion


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime.

    Returns:
        datetime: A datetime with tzinfo == UTC.
    """
    return datetime.now(timezone.utc)


def utc_from_timestamp(ts: float | int) -> datetime:
    """Create an aware UTC datetime from a UNIX timestamp.

    Integer timestamps are added to the epoch as a timedelta, so the result is exact for
    any second count.

    Args:
        ts (float | int): Seconds since epoch.

    Returns:
        datetime: A datetime with tzinfo == UTC.
    """
    if isinstance(ts, int):
        return EPOCH + timedelta(seconds=ts)
    return datetime.fromtimestamp(float(ts), tz=timezone.utc)


def make_utc(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Construct a timezone-aware UTC datetime from components.

    Returns:
        datetime: A datetime with tzinfo == UTC.
    """
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


def to_utc(dt: datetime, *, naive_tz: tzinfo | None = None) -> datetime:
    """Convert $dt to timezone-aware UTC.

    Behavior:
    - If $dt is aware: converted via `astimezone(UTC)`.
    - If $dt is naive and $naive_tz is None: raises ValueError (fail fast).
    - If $dt is naive and $naive_tz is provided: attaches $naive_tz, then converts to UTC.

    Args:
        dt (datetime): The datetime to convert.
        naive_tz (tzinfo | None, optional): Timezone to assume for naive $dt.

    Returns:
        datetime: A datetime with tzinfo == UTC.

    Raises:
        ValueError: If $dt is naive and $naive_tz is None.
    """
    if not is_aware(dt):
        if naive_tz is None:
            raise ValueError(f"Cannot call `to_utc` because $dt ('{dt}') is naive and $naive_tz is None. Pass a timezone via $naive_tz or provide an aware datetime.")
        dt = dt.replace(tzinfo=naive_tz)
    return dt.astimezone(timezone.utc)


def epoch_seconds(dt: datetime) -> int:
    """Return whole seconds since the UNIX epoch for an aware $dt, flooring sub-second parts.

    Raises:
        ValueError: If $dt is naive.
    """
    return (to_utc(dt) - EPOCH) // timedelta(seconds=1)


EPOCH = make_utc(1970, 1, 1)

# endregion

# region Formatting


def format_offset(offset: timedelta, *, zulu: bool = False) -> str:
    """Format a UTC offset as '+HH:MM' / '-HH:MM'.

    Seconds in historical offsets (e.g. LMT +00:53:28) are truncated toward zero.

    Args:
        offset (timedelta): Offset east of UTC.
        zulu (bool): Render a zero offset as 'Z' instead of '+00:00'.
    """
    if zulu and offset == timedelta(0):
        return _UTC_SUFFIX

    sign = "-" if offset < timedelta(0) else "+"
    total_minutes = abs(int(offset.total_seconds())) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def format_layout(dt: datetime, layout: str) -> str:
    """Render an aware $dt with a strftime $layout.

    On top of the standard strftime directives, `%:z` renders the RFC 3339 offset:
    'Z' for UTC and '+HH:MM' otherwise. `%%` keeps its literal meaning.

    Args:
        dt (datetime): Timezone-aware datetime, already converted into the target zone.
        layout (str): strftime pattern, e.g. `RFC3339`.

    Returns:
        str: The formatted timestamp.

    Raises:
        ValueError: If $dt is naive.
    """
    if not is_aware(dt):
        raise ValueError(f"Cannot call `format_layout` because $dt ('{dt}') is naive")

    # Split on escaped percent signs first so '%%:z' stays a literal '%:z'
    offset = format_offset(dt.utcoffset(), zulu=True)
    pieces = [piece.replace(RFC3339_OFFSET_DIRECTIVE, offset.replace("%", "%%")) for piece in layout.split("%%")]
    return dt.strftime("%%".join(pieces))


# endregion
