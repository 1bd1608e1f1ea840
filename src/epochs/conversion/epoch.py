"""Converters between epoch timestamps and naive datetimes.

Every supported epoch kind has a pair of plain functions:

    kind(raw) -> datetime | None     raw epoch value to datetime
    to_kind(dt) -> raw               datetime back to the raw epoch value

Converters return None when the result is outside datetime.min ..
datetime.max. They never raise for out of range values.

Direct-offset kinds are defined by an EpochSpec (ticks per second and a shift
from the Unix epoch). Packed kinds (Chrome, Google Calendar) and the fractional
ICQ kind spell out their own arithmetic.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from .common import (
    MICROS_PER_DAY,
    MICROS_PER_SECOND,
    SECONDS_PER_DAY,
    EpochSpec,
    TickUnit,
    check_naive,
    check_raw,
    checked_add,
    datetime_to_ticks,
    month_start,
    offset_datetime,
    ticks_to_datetime,
)

# =============================================================================
# Epoch Definitions
# =============================================================================

# Shift of each reference instant from 1970-01-01, in seconds
WINDOWS_FILE_SHIFT = -11_644_473_600  # 1601-01-01
WINDOWS_DATE_SHIFT = -62_135_596_800  # 0001-01-01
SYMBIAN_SHIFT = -62_167_219_200  # 0000-01-01
UUID_V1_SHIFT = -12_219_292_800  # 1582-10-15 (Gregorian reform)
COCOA_SHIFT = 978_307_200  # 2001-01-01

APFS_SPEC = EpochSpec(TickUnit.NANOSECOND, 0)
CHROME_SPEC = EpochSpec(TickUnit.MICROSECOND, WINDOWS_FILE_SHIFT)
COCOA_SPEC = EpochSpec(TickUnit.SECOND, COCOA_SHIFT)
JAVA_SPEC = EpochSpec(TickUnit.MILLISECOND, 0)
MOZILLA_SPEC = EpochSpec(TickUnit.MICROSECOND, 0)
SYMBIAN_SPEC = EpochSpec(TickUnit.MICROSECOND, SYMBIAN_SHIFT)
UNIX_SPEC = EpochSpec(TickUnit.SECOND, 0)
UUID_V1_SPEC = EpochSpec(TickUnit.HECTONANOSECOND, UUID_V1_SHIFT)
WINDOWS_DATE_SPEC = EpochSpec(TickUnit.HECTONANOSECOND, WINDOWS_DATE_SHIFT)
WINDOWS_FILE_SPEC = EpochSpec(TickUnit.HECTONANOSECOND, WINDOWS_FILE_SHIFT)

CHROME_EPOCH = datetime(1601, 1, 1)
GOOGLE_CALENDAR_EPOCH = datetime(1969, 12, 31)  # One day before the Unix epoch
ICQ_EPOCH = datetime(1899, 12, 30)

# Google Calendar counts every month as 32 days
GOOGLE_DAYS_PER_MONTH = 32


# =============================================================================
# Direct-Offset Epochs
# =============================================================================


def apfs(raw: int) -> datetime | None:
    """APFS time: nanoseconds since the Unix epoch.

    Nanoseconds below one microsecond are truncated.

    Example:
        >>> apfs(1_234_567_890_000_000_000)
        datetime.datetime(2009, 2, 13, 23, 31, 30)
    """
    return ticks_to_datetime(raw, APFS_SPEC)


def to_apfs(dt: datetime) -> int:
    """Nanoseconds since the Unix epoch for a naive datetime."""
    return datetime_to_ticks(dt, APFS_SPEC)


def cocoa(raw: int | float) -> datetime | None:
    """Cocoa (Core Data / NSDate) time: seconds since 2001-01-01.

    Cocoa stores a double, so fractional seconds are accepted and rounded half
    away from zero to the microsecond.

    Example:
        >>> cocoa(256260690)
        datetime.datetime(2009, 2, 13, 23, 31, 30)
    """
    return ticks_to_datetime(raw, COCOA_SPEC)


def to_cocoa(dt: datetime) -> int:
    """Inverse of cocoa(): whole seconds since 2001-01-01, sub-second part floored."""
    return datetime_to_ticks(dt, COCOA_SPEC)


def java(raw: int) -> datetime | None:
    """Java time: milliseconds since the Unix epoch."""
    return ticks_to_datetime(raw, JAVA_SPEC)


def to_java(dt: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return datetime_to_ticks(dt, JAVA_SPEC)


def mozilla(raw: int) -> datetime | None:
    """Mozilla (Firefox PRTime) time: microseconds since the Unix epoch."""
    return ticks_to_datetime(raw, MOZILLA_SPEC)


def to_mozilla(dt: datetime) -> int:
    """Microseconds since the Unix epoch."""
    return datetime_to_ticks(dt, MOZILLA_SPEC)


def symbian(raw: int) -> datetime | None:
    """Symbian time: microseconds since 0000-01-01.

    The reference instant itself precedes datetime.min, so small values
    (anything before 0001-01-01) convert to None.
    """
    return ticks_to_datetime(raw, SYMBIAN_SPEC)


def to_symbian(dt: datetime) -> int:
    """Microseconds since 0000-01-01."""
    return datetime_to_ticks(dt, SYMBIAN_SPEC)


def unix(raw: int | float) -> datetime | None:
    """Unix time: seconds since 1970-01-01.

    Float values keep their fractional part, rounded half away from zero to
    the microsecond.

    Example:
        >>> unix(1234567890)
        datetime.datetime(2009, 2, 13, 23, 31, 30)
        >>> unix(-1)
        datetime.datetime(1969, 12, 31, 23, 59, 59)
    """
    return ticks_to_datetime(raw, UNIX_SPEC)


def to_unix(dt: datetime) -> int:
    """Inverse of unix(): whole seconds since 1970-01-01, sub-second part floored."""
    return datetime_to_ticks(dt, UNIX_SPEC)


def uuid_v1(raw: int) -> datetime | None:
    """UUID version 1 time: 100 ns intervals since 1582-10-15 (RFC 4122).

    The 60-bit timestamp of a version 1 UUID is available as uuid.UUID.time:

        >>> import uuid
        >>> uuid_v1(uuid.UUID("ca4892ce-4f7d-11ea-b77f-2e728ce88125").time)
        datetime.datetime(2020, 2, 14, 23, 0, 27, 148155)

    Intervals below one microsecond are truncated.
    """
    return ticks_to_datetime(raw, UUID_V1_SPEC)


def to_uuid_v1(dt: datetime) -> int:
    """100 ns intervals since 1582-10-15, as stored in a version 1 UUID."""
    return datetime_to_ticks(dt, UUID_V1_SPEC)


def windows_date(raw: int) -> datetime | None:
    """Windows date time (.NET DateTime.Ticks): 100 ns intervals since 0001-01-01."""
    return ticks_to_datetime(raw, WINDOWS_DATE_SPEC)


def to_windows_date(dt: datetime) -> int:
    """100 ns intervals since 0001-01-01 (DateTime.Ticks)."""
    return datetime_to_ticks(dt, WINDOWS_DATE_SPEC)


def windows_file(raw: int) -> datetime | None:
    """Windows file time (NTFS FILETIME): 100 ns intervals since 1601-01-01."""
    return ticks_to_datetime(raw, WINDOWS_FILE_SPEC)


def to_windows_file(dt: datetime) -> int:
    """100 ns intervals since 1601-01-01 (FILETIME)."""
    return datetime_to_ticks(dt, WINDOWS_FILE_SPEC)


# =============================================================================
# Packed Epochs
# =============================================================================


def chrome(raw: int) -> datetime | None:
    """Chrome / WebKit time: microseconds since 1601-01-01.

    The value packs whole seconds since 1601-01-01 and the microseconds within
    that second. Both parts are separated with divmod and added to the
    reference instant.

    Example:
        >>> chrome(12_879_041_490_654_321)
        datetime.datetime(2009, 2, 13, 23, 31, 30, 654321)
    """
    seconds, micros = divmod(check_raw(raw, integral=True), MICROS_PER_SECOND)
    return checked_add(CHROME_EPOCH, seconds=seconds, microseconds=micros)


def to_chrome(dt: datetime) -> int:
    """Microseconds since 1601-01-01."""
    return datetime_to_ticks(dt, CHROME_SPEC)


def google_calendar(raw: int) -> datetime | None:
    """Google Calendar time: packed 32-day months, days and seconds.

    The value is split into seconds within the day and a day count. The day
    count is split again into months of 32 days since January 1970 and a day
    within the month. The fields are decoded directly, so day 0 of a month is
    the last day of the previous one and negative values land before 1970.

    Example:
        >>> google_calendar(1297899090)
        datetime.datetime(2009, 2, 13, 23, 31, 30)
    """
    total_days, seconds = divmod(check_raw(raw, integral=True), SECONDS_PER_DAY)
    months, days = divmod(total_days, GOOGLE_DAYS_PER_MONTH)

    start = month_start(months)
    if start is None:
        return None

    return checked_add(start, days=days - 1, seconds=seconds)


def to_google_calendar(dt: datetime) -> int:
    """Pack a datetime into Google Calendar time (sub-second part is dropped)."""
    dt = check_naive(dt)
    months = (dt.year - 1970) * 12 + (dt.month - 1)
    days = months * GOOGLE_DAYS_PER_MONTH + dt.day
    return ((days * 24 + dt.hour) * 60 + dt.minute) * 60 + dt.second


# =============================================================================
# Fractional Epochs
# =============================================================================


def icq(days: int | float) -> datetime | None:
    """ICQ (OLE Automation) time: days since 1899-12-30, with a fractional part.

    The fraction of a day is rounded half away from zero to the microsecond.

    Example:
        >>> icq(39857.980209)
        datetime.datetime(2009, 2, 13, 23, 31, 30, 57600)
    """
    return offset_datetime(ICQ_EPOCH, check_raw(days), MICROS_PER_DAY)


def to_icq(dt: datetime) -> float:
    """Inverse of icq(): fractional days since 1899-12-30."""
    return (check_naive(dt) - ICQ_EPOCH) / timedelta(days=1)
