"""Common types and arithmetic shared across the epoch converters.

This module contains the calendar arithmetic every converter is built on:

Classes:
    - TickUnit: Enum of the tick resolutions used by supported epochs
    - EpochSpec: Constant definition of a direct-offset epoch

Functions:
    - checked_add: Add an offset to a datetime, None when out of range
    - offset_datetime: Add a raw count of units to a reference instant
    - ticks_to_datetime / datetime_to_ticks: Direct-offset conversion pair
    - month_start: Calendar month lookup used by packed formats

All results are naive datetimes with microsecond precision. Any result outside
datetime.min .. datetime.max is reported as None, never raised.
"""

from __future__ import annotations

import logging
import math
import numbers
from datetime import datetime, timedelta
from enum import IntEnum
from fractions import Fraction
from typing import NamedTuple

_LOGGER = logging.getLogger(__name__)

UNIX_EPOCH = datetime(1970, 1, 1)

MICROS_PER_SECOND = 1_000_000
SECONDS_PER_DAY = 86_400
MICROS_PER_DAY = SECONDS_PER_DAY * MICROS_PER_SECOND


class TickUnit(IntEnum):
    """Tick resolutions, expressed as ticks per second."""

    SECOND = 1
    MILLISECOND = 1_000
    MICROSECOND = 1_000_000
    HECTONANOSECOND = 10_000_000  # 100 ns
    NANOSECOND = 1_000_000_000


class EpochSpec(NamedTuple):
    """Definition of a direct-offset epoch.

    A raw value of such an epoch is a signed count of ticks since a reference
    instant. The reference is stored as a shift from the Unix epoch rather than
    as a datetime, so that epochs whose reference instant is itself outside the
    datetime range (e.g. year 0) can still be defined.

    Example:
        >>> spec = EpochSpec(TickUnit.MICROSECOND, -11_644_473_600)
        >>> spec.reference
        datetime.datetime(1601, 1, 1, 0, 0)
    """

    ticks_per_second: int  # Resolution of the raw value
    shift_seconds: int  # Reference instant in seconds relative to 1970-01-01

    @property
    def micros_per_tick(self) -> Fraction:
        """Length of one tick in microseconds (exact)."""
        return Fraction(MICROS_PER_SECOND, self.ticks_per_second)

    @property
    def reference(self) -> datetime | None:
        """Reference instant (raw value 0), or None if not representable."""
        return checked_add(UNIX_EPOCH, seconds=self.shift_seconds)


def check_raw(raw: object, *, integral: bool = False) -> int | float:
    """Validate a raw epoch value and normalize it to int or float.

    Args:
        raw: Value passed by the caller
        integral: Only accept integers (packed formats)

    Returns:
        The value as a plain int, or as a float for non-integral reals

    Raises:
        TypeError: If raw is not a real number, or is a bool
    """
    if isinstance(raw, bool):
        raise TypeError("Epoch value must be a number, not bool")

    if isinstance(raw, numbers.Integral):
        return int(raw)

    if not integral and isinstance(raw, numbers.Real):
        return float(raw)

    expected = "an integer" if integral else "an integer or float"
    raise TypeError(f"Epoch value must be {expected}, got {type(raw).__name__}")


def check_naive(dt: object) -> datetime:
    """Validate that dt is a naive datetime.

    Raises:
        TypeError: If dt is not a datetime
        ValueError: If dt carries tzinfo
    """
    if not isinstance(dt, datetime):
        raise TypeError(f"Expected datetime, got {type(dt).__name__}")

    if dt.tzinfo is not None:
        raise ValueError("Epoch conversion requires a naive datetime (tzinfo must be None)")

    return dt


def round_half_away(value: Fraction) -> int:
    """Round to the nearest integer, ties away from zero."""
    whole = math.floor(abs(value) + Fraction(1, 2))
    return whole if value >= 0 else -whole


def to_microseconds(raw: int | float, micros_per_unit: Fraction | int) -> int:
    """Scale a raw count of units to whole microseconds.

    Integer inputs are exact, and sub-microsecond remainders are truncated
    toward negative infinity so that ordering is preserved. Float inputs are
    taken at their exact binary value and rounded half away from zero.

    Args:
        raw: Count of units (finite)
        micros_per_unit: Length of one unit in microseconds

    Returns:
        Offset in microseconds
    """
    if isinstance(raw, int):
        return math.floor(raw * Fraction(micros_per_unit))

    return round_half_away(Fraction(raw) * micros_per_unit)


def checked_add(
    base: datetime,
    *,
    days: int = 0,
    seconds: int = 0,
    microseconds: int = 0,
) -> datetime | None:
    """Add an offset to base.

    Args:
        base: Starting instant
        days: Days to add (may be negative)
        seconds: Seconds to add (may be negative)
        microseconds: Microseconds to add (may be negative)

    Returns:
        The shifted datetime, or None if the offset or the result cannot be
        represented
    """
    try:
        return base + timedelta(days=days, seconds=seconds, microseconds=microseconds)
    except OverflowError:
        _LOGGER.debug(
            "Offset of %d days, %d s, %d us from %s is out of range",
            days,
            seconds,
            microseconds,
            base.isoformat(),
        )
        return None


def offset_datetime(
    base: datetime,
    raw: int | float,
    micros_per_unit: Fraction | int,
    *,
    shift_seconds: int = 0,
) -> datetime | None:
    """Compute base + shift_seconds + raw units.

    Args:
        base: Instant the shift is measured from
        raw: Count of units
        micros_per_unit: Length of one unit in microseconds
        shift_seconds: Fixed shift applied together with raw

    Returns:
        Resulting datetime, or None if out of range (including nan and inf)
    """
    if isinstance(raw, float) and not math.isfinite(raw):
        _LOGGER.debug("Non-finite epoch value %r has no datetime", raw)
        return None

    return checked_add(base, seconds=shift_seconds, microseconds=to_microseconds(raw, micros_per_unit))


def ticks_to_datetime(raw: int | float, spec: EpochSpec) -> datetime | None:
    """Convert a direct-offset epoch value to a naive datetime.

    Args:
        raw: Ticks since the reference instant of spec
        spec: Epoch definition

    Returns:
        Naive datetime, or None if out of range
    """
    return offset_datetime(UNIX_EPOCH, check_raw(raw), spec.micros_per_tick, shift_seconds=spec.shift_seconds)


def datetime_to_ticks(dt: datetime, spec: EpochSpec) -> int:
    """Convert a naive datetime to a direct-offset epoch value.

    Sub-tick remainders are truncated toward negative infinity, so
    datetime_to_ticks(ticks_to_datetime(raw)) == raw whenever the tick fits in
    microsecond precision.

    Raises:
        TypeError: If dt is not a datetime
        ValueError: If dt is timezone-aware
    """
    micros = (check_naive(dt) - UNIX_EPOCH) // timedelta(microseconds=1)
    micros -= spec.shift_seconds * MICROS_PER_SECOND
    return (micros * spec.ticks_per_second) // MICROS_PER_SECOND


def month_start(months: int, *, base_year: int = 1970) -> datetime | None:
    """First instant of the month that is the given number of months after January of base_year.

    Args:
        months: Months since January of base_year (may be negative)
        base_year: Year the month count starts from

    Returns:
        Midnight on the first day of that month, or None if out of range
    """
    years, month_index = divmod(months, 12)

    try:
        return datetime(base_year + years, month_index + 1, 1)
    except (ValueError, OverflowError):
        _LOGGER.debug("Month %d after January %d is out of range", months, base_year)
        return None
