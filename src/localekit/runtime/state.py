"""Process-wide locale state with change notification.

LocaleState holds the current and fallback locale tags plus an ordered
registry of change listeners. It is an ordinary object so tests and
embedders can build isolated instances; the module-level helpers operate on
one lazily created shared instance that every Translator uses by default.

Reentrancy:
    Listeners run synchronously inside set_locale(). A listener that calls
    set_locale() again (for example to clamp the value to a supported set)
    would recurse without bound, so writes made while a notification is in
    progress are dropped. The guard is a plain boolean; the model is a single
    logical thread of control, not concurrent threads.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeAlias

from localekit.config import LocaleConfig
from localekit.constants import AUTO_LOCALE, DEFAULT_LOCALE, FALLBACK_LOCALE
from localekit.enums import LocaleRole
from localekit.locale_utils import get_system_locale, normalize_locale, validate_locale
from localekit.localization.types import LocaleTag

__all__ = [
    "LocaleListener",
    "LocaleState",
    "Unsubscribe",
    "get_fallback_locale",
    "get_locale",
    "get_shared_state",
    "reset_shared_state",
    "set_fallback_locale",
    "set_locale",
    "subscribe",
]

logger = logging.getLogger(__name__)

LocaleListener: TypeAlias = Callable[[LocaleTag], object]
"""Callback receiving the new locale tag after each change."""

Unsubscribe: TypeAlias = Callable[[], None]
"""Idempotent handle removing a listener registration."""


class LocaleState:
    """Current/fallback locale values with ordered change listeners.

    Example:
        >>> state = LocaleState("zh", "en")
        >>> seen = []
        >>> unsubscribe = state.subscribe(seen.append)
        >>> state.set_locale("en_us")
        >>> seen
        ['en-US']
        >>> unsubscribe()
    """

    __slots__ = ("_fallback_locale", "_is_updating", "_listeners", "_locale")

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        fallback_locale: str = FALLBACK_LOCALE,
    ) -> None:
        """Initialize locale state.

        Args:
            locale: Initial current locale (normalized)
            fallback_locale: Initial fallback locale (normalized)

        Raises:
            ValidationError: If either locale is empty or not a string
        """
        self._locale: LocaleTag = validate_locale(locale, LocaleRole.PRIMARY)
        self._fallback_locale: LocaleTag = validate_locale(
            fallback_locale, LocaleRole.FALLBACK
        )
        # Keyed by id(): listeners need not be hashable, and equal but
        # distinct callables are separate registrations
        self._listeners: dict[int, tuple[LocaleListener, Unsubscribe]] = {}
        self._is_updating = False

        logger.info(
            "LocaleState initialized (locale=%s, fallback=%s)",
            self._locale,
            self._fallback_locale,
        )

    @classmethod
    def from_config(cls, config: LocaleConfig | None = None) -> LocaleState:
        """Build a state from a LocaleConfig.

        A configured value of "auto" is replaced by the detected system
        locale, or by FALLBACK_LOCALE when detection finds nothing.

        Args:
            config: Configuration to apply (default: LocaleConfig())

        Returns:
            New LocaleState
        """
        config = config if config is not None else LocaleConfig()
        return cls(
            _resolve_auto(config.default_locale),
            _resolve_auto(config.fallback_locale),
        )

    @property
    def locale(self) -> LocaleTag:
        """Current locale tag (read-only; use set_locale to change)."""
        return self._locale

    @property
    def fallback_locale(self) -> LocaleTag:
        """Fallback locale tag (read-only; use set_fallback_locale to change)."""
        return self._fallback_locale

    @property
    def is_updating(self) -> bool:
        """True while listeners are being notified of a change."""
        return self._is_updating

    @property
    def listener_count(self) -> int:
        """Number of registered listeners."""
        return len(self._listeners)

    def get_locale(self) -> LocaleTag:
        """Return the current locale tag."""
        return self._locale

    def get_fallback_locale(self) -> LocaleTag:
        """Return the fallback locale tag."""
        return self._fallback_locale

    def set_fallback_locale(self, locale: object) -> None:
        """Replace the fallback locale.

        Listeners are not notified; the fallback only affects lookups made
        after the call.

        Args:
            locale: New fallback locale (normalized, e.g. "en-us" -> "en-US")

        Raises:
            ValidationError: If locale is empty or not a string
        """
        tag = validate_locale(locale, LocaleRole.FALLBACK)
        if tag == self._fallback_locale:
            return
        self._fallback_locale = tag
        logger.debug("Fallback locale changed to %s", tag)

    def set_locale(self, locale: object) -> None:
        """Change the current locale and notify listeners.

        No-op while a notification is already running, or when the
        normalized value equals the current locale. Otherwise listeners are
        called synchronously in subscription order with the new tag. The
        reentrancy flag is reset even if a listener raises; the listener's
        exception then propagates to the caller.

        Args:
            locale: New current locale

        Raises:
            ValidationError: If locale is empty or not a string
        """
        if self._is_updating:
            logger.debug("Dropped nested set_locale(%r) during notification", locale)
            return
        if normalize_locale(locale).tag == self._locale:
            return

        tag = validate_locale(locale, LocaleRole.PRIMARY)
        self._is_updating = True
        try:
            self._locale = tag
            logger.info("Locale changed to %s", tag)
            # Snapshot: listeners may unsubscribe while being notified
            for listener, _ in tuple(self._listeners.values()):
                listener(tag)
        finally:
            self._is_updating = False

    def subscribe(self, listener: LocaleListener) -> Unsubscribe:
        """Register a listener for locale changes.

        Registration is by object identity: subscribing the same object
        again returns the handle from its first registration, while equal
        but distinct objects are registered separately. Bound methods are
        new objects on every attribute access, so keep a reference to one
        if it must be subscribed idempotently.

        Args:
            listener: Callable receiving the new locale tag

        Returns:
            Idempotent unsubscribe handle

        Raises:
            TypeError: If listener is not callable
        """
        if not callable(listener):
            msg = f"Locale listener must be callable, got {type(listener).__name__}"
            raise TypeError(msg)

        key = id(listener)
        existing = self._listeners.get(key)
        if existing is not None:
            return existing[1]

        def unsubscribe() -> None:
            # Only remove the registration this handle created
            entry = self._listeners.get(key)
            if entry is not None and entry[0] is listener and entry[1] is unsubscribe:
                del self._listeners[key]

        self._listeners[key] = (listener, unsubscribe)
        logger.debug("Registered locale listener: %r", listener)
        return unsubscribe

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LocaleState(locale={self._locale!r}, "
            f"fallback_locale={self._fallback_locale!r}, "
            f"listeners={len(self._listeners)})"
        )


def _resolve_auto(locale: str) -> str:
    if locale.strip().lower() != AUTO_LOCALE:
        return locale
    return get_system_locale() or FALLBACK_LOCALE


# ============================================================================
# SHARED STATE
# ============================================================================

_SHARED_STATE: LocaleState | None = None


def get_shared_state() -> LocaleState:
    """Get the process-wide LocaleState.

    Created on first use from ``LocaleConfig.from_env()``, so the
    LOCALEKIT_DEFAULT_LOCALE and LOCALEKIT_FALLBACK_LOCALE environment
    variables apply. Never torn down during the process lifetime.

    Returns:
        The shared LocaleState instance
    """
    # pylint: disable=global-statement
    # Lazy initialization of module-level singleton.
    global _SHARED_STATE  # noqa: PLW0603
    if _SHARED_STATE is None:
        _SHARED_STATE = LocaleState.from_config(LocaleConfig.from_env())
    return _SHARED_STATE


def reset_shared_state(state: LocaleState | None = None) -> None:
    """Replace the process-wide LocaleState.

    Args:
        state: New shared instance, or None to rebuild lazily on next use
    """
    global _SHARED_STATE  # noqa: PLW0603
    _SHARED_STATE = state


def get_locale() -> LocaleTag:
    """Return the shared current locale."""
    return get_shared_state().get_locale()


def set_locale(locale: object) -> None:
    """Change the shared current locale (see LocaleState.set_locale)."""
    get_shared_state().set_locale(locale)


def get_fallback_locale() -> LocaleTag:
    """Return the shared fallback locale."""
    return get_shared_state().get_fallback_locale()


def set_fallback_locale(locale: object) -> None:
    """Change the shared fallback locale (see LocaleState.set_fallback_locale)."""
    get_shared_state().set_fallback_locale(locale)


def subscribe(listener: LocaleListener) -> Unsubscribe:
    """Subscribe to shared locale changes (see LocaleState.subscribe)."""
    return get_shared_state().subscribe(listener)
