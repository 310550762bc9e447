"""Hypothesis strategies for localekit property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- locales: raw locale spellings, message keys, message values and tables

Usage:
    from tests.strategies import raw_locales, message_tables
    from tests.strategies.locales import message_keys, message_values

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - raw_locales, message_tables
"""

from .locales import (
    LANGUAGES,
    REGIONS,
    message_keys,
    message_tables,
    message_values,
    raw_locales,
)

__all__ = [
    "LANGUAGES",
    "REGIONS",
    "message_keys",
    "message_tables",
    "message_values",
    "raw_locales",
]
