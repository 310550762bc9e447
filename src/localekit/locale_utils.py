"""Locale utilities for locale tag normalization and detection.

Centralizes locale format normalization used throughout the codebase.
Every locale value crossing the public API is normalized here, so message
tables, candidate chains and the locale state all agree on one canonical
``lang`` / ``lang-REGION`` form.

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Callable
from typing import TYPE_CHECKING, NamedTuple, TypeAlias

from localekit.diagnostics import ValidationError
from localekit.enums import LocaleRole

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LocaleParts",
    "LocaleSource",
    "clear_locale_cache",
    "determine_locale",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "validate_locale",
]

_SUBTAG_SEPARATOR = re.compile(r"[-_]")

LocaleSource: TypeAlias = str | Callable[[], object] | None
"""A raw locale candidate, or a zero-argument callable producing one."""


class LocaleParts(NamedTuple):
    """Canonical locale tag with its isolated subtags.

    Attributes:
        tag: ``language`` or ``language-REGION``
        language: Lowercase language subtag
        region: Uppercase region subtag (empty if absent)
    """

    tag: str
    language: str
    region: str


_EMPTY = LocaleParts("", "", "")


def normalize_locale(locale_code: object) -> LocaleParts:
    """Parse a raw locale string into its canonical tag and subtags.

    Anything after the first ``.`` (an encoding or variant suffix) is dropped.
    The remainder is split on ``-`` or ``_``: the first subtag is the
    language, the second the region. Never raises; validation of whether the
    result is usable belongs to the caller.

    Args:
        locale_code: Raw locale value (e.g., "en_us.UTF-8", "zh-cn", "EN")

    Returns:
        LocaleParts; all fields empty for non-string or empty input

    Example:
        >>> normalize_locale("en_us.UTF-8")
        LocaleParts(tag='en-US', language='en', region='US')
        >>> normalize_locale("FR")
        LocaleParts(tag='fr', language='fr', region='')
        >>> normalize_locale(42)
        LocaleParts(tag='', language='', region='')
    """
    if not locale_code or not isinstance(locale_code, str):
        return _EMPTY

    lang_area = locale_code.split(".", 1)[0]
    subtags = _SUBTAG_SEPARATOR.split(lang_area)
    language = subtags[0].lower()
    region = subtags[1].upper() if len(subtags) > 1 else ""
    tag = f"{language}-{region}" if region else language
    return LocaleParts(tag, language, region)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result, so plugins that read
    CLDR data (display names, territory names) avoid repeated parsing.

    Args:
        locale_code: Locale code in any form accepted by normalize_locale()

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("zh-CN")
        >>> locale.language
        'zh'
        >>> locale.territory
        'CN'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code).tag, sep="-")


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def get_system_locale() -> str:
    """Detect the locale of the running environment.

    Delegates to ``babel.default_locale()``, which consults LC_MESSAGES,
    LANGUAGE, LC_ALL, LC_CTYPE and LANG in that order. The "C" and "POSIX"
    pseudo-locales map to en_US_POSIX, which normalizes to "en-US".

    Returns:
        Normalized locale tag, or "" if no locale could be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de-DE'
    """
    from babel import default_locale  # noqa: PLC0415

    return normalize_locale(default_locale("LC_MESSAGES")).tag


def determine_locale(*sources: LocaleSource, fallback: str | None = None) -> str:
    """Pick the first usable locale from an ordered chain of sources.

    Each source is either a raw locale string or a zero-argument callable
    returning one (evaluated lazily, in order). The first source whose
    normalized tag has a non-empty language wins. If none does, ``fallback``
    is normalized and used.

    Args:
        *sources: Candidates in precedence order (e.g., query parameter,
            cookie, stored preference, ``get_system_locale``)
        fallback: Locale used when no source produces a usable tag

    Returns:
        Normalized locale tag, or "" if nothing usable was found.

    Example:
        >>> determine_locale(None, "", lambda: "pt_br")
        'pt-BR'
        >>> determine_locale("", fallback="en")
        'en'
    """
    for source in sources:
        raw = source() if callable(source) else source
        parts = normalize_locale(raw)
        if parts.language:
            return parts.tag

    if fallback:
        parts = normalize_locale(fallback)
        if parts.language:
            return parts.tag

    return ""


def validate_locale(locale: object, role: LocaleRole = LocaleRole.PRIMARY) -> str:
    """Normalize a locale value, rejecting empty or non-string input.

    Args:
        locale: Raw locale value
        role: Which setting the value is for (selects the error code)

    Returns:
        Normalized locale tag

    Raises:
        ValidationError: If locale is not a string or has no language subtag

    Example:
        >>> validate_locale("en-us")
        'en-US'
    """
    parts = normalize_locale(locale)
    if not isinstance(locale, str) or not parts.language:
        raise ValidationError(locale, role)
    return parts.tag
