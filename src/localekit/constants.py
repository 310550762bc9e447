"""Shared constants for localekit.

This module provides centralized configuration constants used across
the localization and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Initial primary and fallback locale values
- Environment: Variable names read by LocaleConfig.from_env()
- Fallback strings: Visible markers returned in permissive mode

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "FALLBACK_LOCALE",
    "AUTO_LOCALE",
    # Environment
    "ENV_DEFAULT_LOCALE",
    "ENV_FALLBACK_LOCALE",
    # Fallback strings
    "FALLBACK_MISSING_MESSAGE",
    "BOOLEAN_STRINGS",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Primary locale used when nothing else is configured.
DEFAULT_LOCALE: str = "zh"

# Fallback locale consulted when the primary locale lacks a message.
FALLBACK_LOCALE: str = "zh"

# Sentinel value meaning "detect from the running environment".
# Resolved by LocaleState.from_config() via get_system_locale().
AUTO_LOCALE: str = "auto"

# ============================================================================
# ENVIRONMENT
# ============================================================================

ENV_DEFAULT_LOCALE: str = "LOCALEKIT_DEFAULT_LOCALE"
ENV_FALLBACK_LOCALE: str = "LOCALEKIT_FALLBACK_LOCALE"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Template for an unresolved key in permissive mode - use .format(key=...)
FALLBACK_MISSING_MESSAGE: str = "{{???{key}}}"  # e.g., {???greet}

# Rendering of boolean message values and plugin outputs.
BOOLEAN_STRINGS: dict[bool, str] = {True: "true", False: "false"}
