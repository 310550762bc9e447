"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating Translator call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from typing import TypeAlias

__all__ = [
    "LocaleTag",
    "MESSAGE_VALUE_TYPES",
    "MessageKey",
    "MessageTable",
    "MessageValue",
]

LocaleTag: TypeAlias = str
"""Canonical locale tag (e.g., 'en', 'zh-CN')."""

MessageKey: TypeAlias = str
"""Symbolic message key (e.g., 'greet', 'error.not_found')."""

MessageValue: TypeAlias = str | int | float | bool
"""Raw message value as stored in a message table."""

MessageTable: TypeAlias = Mapping[LocaleTag, Mapping[MessageKey, MessageValue]]
"""Per-locale message definitions, keyed by locale tag then message key."""

# Runtime counterpart of MessageValue for isinstance() checks.
# bool is a subclass of int and is covered by it.
MESSAGE_VALUE_TYPES: tuple[type, ...] = (str, int, float)
