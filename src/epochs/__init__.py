"""
pyEpochs: Convert epoch timestamps from many sources to naive datetimes.

Browsers, file systems, runtimes and UUIDs all count time from their own
reference instant in their own unit. This library turns such raw values into
plain datetime objects (and back) without per-source epoch arithmetic.
"""

from __future__ import annotations

from .conversion import (
    EpochKind,
    EpochSpec,
    TickUnit,
    apfs,
    chrome,
    cocoa,
    convert,
    convert_back,
    epoch_converter,
    epoch_inverter,
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
from .exceptions import EpochError, UnknownEpochError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Errors
    "EpochError",
    "UnknownEpochError",
    # Registry
    "EpochKind",
    "EpochSpec",
    "TickUnit",
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
