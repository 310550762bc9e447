"""Locale configuration for the process-wide locale state.

Provides a single frozen dataclass holding the initial primary and fallback
locales, with an environment-variable constructor for deployments that set
their defaults outside the code.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from localekit.constants import (
    DEFAULT_LOCALE,
    ENV_DEFAULT_LOCALE,
    ENV_FALLBACK_LOCALE,
    FALLBACK_LOCALE,
)

__all__ = ["LocaleConfig"]


@dataclass(frozen=True, slots=True)
class LocaleConfig:
    """Immutable configuration for a LocaleState.

    Constructing ``LocaleConfig()`` with no arguments produces the library
    defaults. Either field may be ``"auto"`` to request detection of the
    running environment's locale when the state is built.

    Attributes:
        default_locale: Initial primary locale (default: "zh").
        fallback_locale: Initial fallback locale (default: "zh").

    Example:
        >>> from localekit.runtime.state import LocaleState
        >>> config = LocaleConfig(default_locale="en-us", fallback_locale="en")
        >>> LocaleState.from_config(config).get_locale()
        'en-US'
    """

    default_locale: str = DEFAULT_LOCALE
    fallback_locale: str = FALLBACK_LOCALE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If either locale is not a non-empty string.
        """
        if not isinstance(self.default_locale, str) or not self.default_locale.strip():
            msg = "default_locale must be a non-empty string"
            raise ValueError(msg)
        if not isinstance(self.fallback_locale, str) or not self.fallback_locale.strip():
            msg = "fallback_locale must be a non-empty string"
            raise ValueError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LocaleConfig:
        """Build a configuration from environment variables.

        Reads LOCALEKIT_DEFAULT_LOCALE and LOCALEKIT_FALLBACK_LOCALE. Unset or
        blank variables keep the library defaults.

        Args:
            environ: Mapping to read instead of ``os.environ`` (for tests)

        Returns:
            LocaleConfig populated from the environment
        """
        env = os.environ if environ is None else environ
        default_locale = env.get(ENV_DEFAULT_LOCALE, "").strip() or DEFAULT_LOCALE
        fallback_locale = env.get(ENV_FALLBACK_LOCALE, "").strip() or FALLBACK_LOCALE
        return cls(default_locale=default_locale, fallback_locale=fallback_locale)
