"""Epoch conversion exception classes."""

from __future__ import annotations


class EpochError(Exception):
    """Base exception for all epoch conversion errors."""


class UnknownEpochError(EpochError, KeyError):
    """No epoch kind is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown epoch kind: {self.name!r}"
