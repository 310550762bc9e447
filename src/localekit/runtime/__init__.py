"""Runtime: locale state, plugin pipeline and translation façade.

Python 3.13+.
"""

from .plugins import Plugin, apply_plugins, coerce_args, coerce_plugins, placeholder
from .state import (
    LocaleState,
    get_fallback_locale,
    get_locale,
    get_shared_state,
    reset_shared_state,
    set_fallback_locale,
    set_locale,
    subscribe,
)
from .translator import ScopedTranslate, Translator, get_locale_message

__all__ = [
    "LocaleState",
    "Plugin",
    "ScopedTranslate",
    "Translator",
    "apply_plugins",
    "coerce_args",
    "coerce_plugins",
    "get_fallback_locale",
    "get_locale",
    "get_locale_message",
    "get_shared_state",
    "placeholder",
    "reset_shared_state",
    "set_fallback_locale",
    "set_locale",
    "subscribe",
]
