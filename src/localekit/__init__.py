"""localekit - Locale resolution and message translation engine.

Resolves a message key plus a language/region preference into a formatted
display string. Lookups walk a fallback candidate chain built from the
preferred and fallback locales, and the resolved value runs through an
ordered plugin pipeline ending in built-in placeholder substitution.

Public API:
    Translator - Message translation bound to a table and plugin list
    LocaleState - Current/fallback locale with change notification
    get_locale / set_locale - Shared current locale
    get_fallback_locale / set_fallback_locale - Shared fallback locale
    subscribe - Listen for shared locale changes
    normalize_locale - Canonical locale tag parsing
    normalize_definitions - Clean raw imported message data
    placeholder - Built-in { name } substitution plugin

Exceptions:
    LocaleError - Base exception class
    ValidationError - Empty or non-string locale value
    MissingMessageError - No candidate locale defines the key

Submodules:
    localekit.localization - Candidate chain, resolution, table types
    localekit.runtime - Locale state, plugin pipeline, Translator
    localekit.diagnostics - Error types and structured diagnostics
    localekit.locale_utils - Normalization, detection, Babel access
"""

from .config import LocaleConfig
from .diagnostics import LocaleError, MissingMessageError, ValidationError
from .locale_utils import determine_locale, get_system_locale, normalize_locale
from .localization import FallbackInfo, build_candidates, normalize_definitions
from .runtime import (
    LocaleState,
    ScopedTranslate,
    Translator,
    get_fallback_locale,
    get_locale,
    placeholder,
    set_fallback_locale,
    set_locale,
    subscribe,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localekit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FallbackInfo",
    "LocaleConfig",
    "LocaleError",
    "LocaleState",
    "MissingMessageError",
    "ScopedTranslate",
    "Translator",
    "ValidationError",
    "__version__",
    "build_candidates",
    "determine_locale",
    "get_fallback_locale",
    "get_locale",
    "get_system_locale",
    "normalize_definitions",
    "normalize_locale",
    "placeholder",
    "set_fallback_locale",
    "set_locale",
    "subscribe",
]
