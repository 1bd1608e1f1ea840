"""Shared test fixtures for pyEpochs tests."""

from __future__ import annotations

from datetime import datetime

import pytest

# 2009-02-13 23:31:30, i.e. Unix time 1234567890, in every supported epoch
CANONICAL_VALUES: dict[str, int] = {
    "apfs": 1_234_567_890_000_000_000,
    "chrome": 12_879_041_490_000_000,
    "cocoa": 256_260_690,
    "google_calendar": 1_297_899_090,
    "java": 1_234_567_890_000,
    "mozilla": 1_234_567_890_000_000,
    "symbian": 63_401_787_090_000_000,
    "unix": 1_234_567_890,
    "uuid_v1": 134_538_606_900_000_000,
    "windows_date": 633_701_646_900_000_000,
    "windows_file": 128_790_414_900_000_000,
}


@pytest.fixture
def canonical_datetime() -> datetime:
    """The instant every canonical value represents."""
    return datetime(2009, 2, 13, 23, 31, 30)


@pytest.fixture
def canonical_values() -> dict[str, int]:
    """Raw value of the canonical instant, keyed by epoch kind name."""
    return dict(CANONICAL_VALUES)
