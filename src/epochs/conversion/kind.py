"""Registry of supported epoch kinds.

EpochKind maps each kind name to its converter, its inverse and its reference
instant, so a timestamp can be converted when its kind is only known by name:

    >>> convert("chrome", 12_879_041_490_654_321)
    datetime.datetime(2009, 2, 13, 23, 31, 30, 654321)
    >>> EpochKind.UNIX(0)
    datetime.datetime(1970, 1, 1, 0, 0)

Additional direct-offset kinds do not need to be registered: build an
EpochSpec and use epoch_converter / epoch_inverter.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from enum import Enum
from typing import Any, Self

from ..exceptions import UnknownEpochError
from .common import EpochSpec, datetime_to_ticks, ticks_to_datetime
from .epoch import (
    APFS_SPEC,
    CHROME_SPEC,
    COCOA_SPEC,
    GOOGLE_CALENDAR_EPOCH,
    ICQ_EPOCH,
    JAVA_SPEC,
    MOZILLA_SPEC,
    SYMBIAN_SPEC,
    UNIX_SPEC,
    UUID_V1_SPEC,
    WINDOWS_DATE_SPEC,
    WINDOWS_FILE_SPEC,
    apfs,
    chrome,
    cocoa,
    google_calendar,
    icq,
    java,
    mozilla,
    symbian,
    to_apfs,
    to_chrome,
    to_cocoa,
    to_google_calendar,
    to_icq,
    to_java,
    to_mozilla,
    to_symbian,
    to_unix,
    to_uuid_v1,
    to_windows_date,
    to_windows_file,
    unix,
    uuid_v1,
    windows_date,
    windows_file,
)

Converter = Callable[[Any], datetime | None]
Inverter = Callable[[datetime], Any]

# Other names the same timestamps are commonly known by
_ALIASES = {
    "webkit": "chrome",
    "prtime": "mozilla",
    "filetime": "windows_file",
}


class EpochKind(Enum):
    """Supported epoch kinds.

    Each member carries:
        - converter: raw value -> naive datetime (None when out of range)
        - inverter: naive datetime -> raw value
        - spec: EpochSpec for direct-offset kinds, None for packed/fractional kinds
        - reference: datetime of raw value 0 (None when not representable)

    Members are callable and convert a raw value:
        >>> EpochKind.JAVA(1_234_567_890_000)
        datetime.datetime(2009, 2, 13, 23, 31, 30)
    """

    def __new__(cls, value: str, *args: Any) -> Self:
        """Create EpochKind member keyed by its name string.

        Args:
            value: Kind name
        """
        obj = object.__new__(cls)
        obj._value_ = value
        return obj

    def __init__(
        self,
        value: str,
        converter: Converter,
        inverter: Inverter,
        spec: EpochSpec | None = None,
        reference: datetime | None = None,
    ) -> None:
        """Initialize EpochKind member with its conversion metadata.

        Args:
            value: Kind name (only used in __new__)
            converter: Raw value to datetime function
            inverter: Datetime to raw value function
            spec: Direct-offset definition, if the kind has one
            reference: Reference instant for kinds without a spec
        """
        self._converter = converter
        self._inverter = inverter
        self._spec = spec
        self._reference = reference

    @property
    def converter(self) -> Converter:
        """Function converting a raw value of this kind to a datetime."""
        return self._converter

    @property
    def inverter(self) -> Inverter:
        """Function converting a datetime to a raw value of this kind."""
        return self._inverter

    @property
    def spec(self) -> EpochSpec | None:
        """Direct-offset definition (None for packed and fractional kinds)."""
        return self._spec

    @property
    def reference(self) -> datetime | None:
        """Datetime of raw value 0, or None if it is not representable."""
        if self._spec is not None:
            return self._spec.reference
        return self._reference

    def to_datetime(self, raw: Any) -> datetime | None:
        return self._converter(raw)

    def from_datetime(self, dt: datetime) -> Any:
        return self._inverter(dt)

    def __call__(self, raw: Any) -> datetime | None:
        return self._converter(raw)

    @classmethod
    def from_name(cls, name: str) -> EpochKind:
        """Look up a kind by name.

        Matching is case-insensitive, dashes are treated as underscores and a
        few common aliases are accepted (e.g. "webkit" for chrome).

        Raises:
            TypeError: If name is not a string
            UnknownEpochError: If no kind has this name
        """
        if not isinstance(name, str):
            raise TypeError(f"Epoch kind name must be str, got {type(name).__name__}")

        key = name.strip().lower().replace("-", "_")
        key = _ALIASES.get(key, key)

        try:
            return cls(key)
        except ValueError:
            raise UnknownEpochError(name) from None

    # ==========================================================================
    # Direct-offset kinds
    # ==========================================================================
    APFS = "apfs", apfs, to_apfs, APFS_SPEC
    COCOA = "cocoa", cocoa, to_cocoa, COCOA_SPEC
    JAVA = "java", java, to_java, JAVA_SPEC
    MOZILLA = "mozilla", mozilla, to_mozilla, MOZILLA_SPEC
    SYMBIAN = "symbian", symbian, to_symbian, SYMBIAN_SPEC
    UNIX = "unix", unix, to_unix, UNIX_SPEC
    UUID_V1 = "uuid_v1", uuid_v1, to_uuid_v1, UUID_V1_SPEC
    WINDOWS_DATE = "windows_date", windows_date, to_windows_date, WINDOWS_DATE_SPEC
    WINDOWS_FILE = "windows_file", windows_file, to_windows_file, WINDOWS_FILE_SPEC

    # ==========================================================================
    # Packed kinds
    # ==========================================================================
    CHROME = "chrome", chrome, to_chrome, CHROME_SPEC
    GOOGLE_CALENDAR = "google_calendar", google_calendar, to_google_calendar, None, GOOGLE_CALENDAR_EPOCH

    # ==========================================================================
    # Fractional kinds
    # ==========================================================================
    ICQ = "icq", icq, to_icq, None, ICQ_EPOCH


def _resolve(kind: EpochKind | str) -> EpochKind:
    if isinstance(kind, EpochKind):
        return kind
    return EpochKind.from_name(kind)


def convert(kind: EpochKind | str, raw: Any) -> datetime | None:
    """Convert a raw epoch value of the given kind to a naive datetime.

    Args:
        kind: EpochKind member or kind name
        raw: Raw epoch value

    Returns:
        Naive datetime, or None if the result is out of range

    Raises:
        UnknownEpochError: If kind is an unknown name
        TypeError: If raw is not a number accepted by the kind
    """
    return _resolve(kind).to_datetime(raw)


def convert_back(kind: EpochKind | str, dt: datetime) -> Any:
    """Convert a naive datetime to a raw epoch value of the given kind.

    Raises:
        UnknownEpochError: If kind is an unknown name
        ValueError: If dt is timezone-aware
    """
    return _resolve(kind).from_datetime(dt)


def epoch_converter(spec: EpochSpec) -> Callable[[int | float], datetime | None]:
    """Build a converter for a custom direct-offset epoch.

    Example:
        >>> gps = epoch_converter(EpochSpec(TickUnit.SECOND, 315_964_800))
        >>> gps(0)
        datetime.datetime(1980, 1, 6, 0, 0)
    """

    def converter(raw: int | float) -> datetime | None:
        return ticks_to_datetime(raw, spec)

    return converter


def epoch_inverter(spec: EpochSpec) -> Callable[[datetime], int]:
    """Build the inverse of epoch_converter(spec)."""

    def inverter(dt: datetime) -> int:
        return datetime_to_ticks(dt, spec)

    return inverter
