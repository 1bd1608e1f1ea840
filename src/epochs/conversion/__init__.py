"""Conversion layer: epoch timestamps to and from naive datetimes.

This package contains the shared calendar arithmetic, one converter pair per
supported epoch kind and the EpochKind registry.
"""

from .common import EpochSpec, TickUnit
from .epoch import (
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
from .kind import EpochKind, convert, convert_back, epoch_converter, epoch_inverter

__all__ = [
    # Common types
    "EpochSpec",
    "TickUnit",
    # Registry
    "EpochKind",
    "convert",
    "convert_back",
    "epoch_converter",
    "epoch_inverter",
    # Converters
    "apfs",
    "chrome",
    "cocoa",
    "google_calendar",
    "icq",
    "java",
    "mozilla",
    "symbian",
    "unix",
    "uuid_v1",
    "windows_date",
    "windows_file",
    # Inverses
    "to_apfs",
    "to_chrome",
    "to_cocoa",
    "to_google_calendar",
    "to_icq",
    "to_java",
    "to_mozilla",
    "to_symbian",
    "to_unix",
    "to_uuid_v1",
    "to_windows_date",
    "to_windows_file",
]
