"""Message lookup package.

Provides the lookup half of the engine: type aliases, raw definition
normalization, fallback candidate construction and message resolution.

Submodules:
    types       - PEP 695 type aliases (LocaleTag, MessageKey, MessageValue, MessageTable)
    definitions - normalize_definitions for raw imported data
    candidates  - build_candidates (the fallback policy)
    resolver    - resolve_message, ResolvedMessage, FallbackInfo

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localekit.localization.candidates import build_candidates
from localekit.localization.definitions import normalize_definitions
from localekit.localization.resolver import (
    FallbackInfo,
    ResolvedMessage,
    find_message,
    resolve_message,
)
from localekit.localization.types import LocaleTag, MessageKey, MessageTable, MessageValue

__all__ = [
    # Lookup pipeline
    "build_candidates",
    "find_message",
    "resolve_message",
    "ResolvedMessage",
    # Fallback observability
    "FallbackInfo",
    # Table preparation
    "normalize_definitions",
    # Type aliases for user code type annotations
    "LocaleTag",
    "MessageKey",
    "MessageTable",
    "MessageValue",
]
