"""Enumerations for localekit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LocaleRole(StrEnum):
    """Which locale setting a value was supplied for.

    StrEnum provides automatic string conversion: str(LocaleRole.PRIMARY) == "primary"
    """

    PRIMARY = "primary"
    """The current (preferred) locale."""

    FALLBACK = "fallback"
    """The locale consulted when the preferred locale lacks a message."""


__all__ = [
    "LocaleRole",
]
