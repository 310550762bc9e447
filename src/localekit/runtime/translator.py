"""Translation façade.

Composes the engine into one call: effective locale and fallback ->
candidate chain -> message resolution -> plugin pipeline -> string.

Architecture:
    - get_locale_message(): pure function of (key, args, locale, fallback,
      plugins, definitions). No shared state.
    - Translator: binds definitions and plugins, and reads the current and
      fallback locales from a LocaleState (the shared one by default) unless
      explicit overrides were given.
    - ScopedTranslate: helper handed to plugins, bound to the locale that
      resolved the message being transformed.

Errors propagate unchanged: MissingMessageError when no candidate defines
the key (unless strict=False) and ValidationError for unusable locale
overrides.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from localekit.constants import FALLBACK_MISSING_MESSAGE
from localekit.diagnostics import MissingMessageError
from localekit.enums import LocaleRole
from localekit.locale_utils import get_babel_locale, normalize_locale, validate_locale
from localekit.localization.candidates import build_candidates
from localekit.localization.definitions import normalize_definitions
from localekit.localization.resolver import FallbackInfo, find_message, resolve_message
from localekit.localization.types import LocaleTag, MessageKey, MessageTable
from localekit.runtime.plugins import Plugin, apply_plugins, coerce_plugins
from localekit.runtime.state import LocaleState, get_shared_state

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "ScopedTranslate",
    "Translator",
    "get_locale_message",
]

logger = logging.getLogger(__name__)


def get_locale_message(
    key: MessageKey,
    args: Sequence[object] = (),
    *,
    locale: str,
    fallback: str,
    definitions: MessageTable,
    plugins: object = None,
    strict: bool = True,
    on_fallback: Callable[[FallbackInfo], None] | None = None,
) -> str:
    """Resolve and format one message.

    Args:
        key: Message key
        args: Call-time arguments passed to every plugin
        locale: Preferred locale (raw; normalized here)
        fallback: Fallback locale (raw; normalized here)
        definitions: Message table; read only
        plugins: None, a plugin, or an iterable of plugins
        strict: Raise MissingMessageError for unknown keys (default: True).
            When False, log the error and return the key wrapped as
            ``{???key}`` instead.
        on_fallback: Optional callback for fallback resolution events

    Returns:
        Final display string

    Raises:
        MissingMessageError: If strict and no candidate defines the key

    Example:
        >>> table = {"en": {"greet": "Hi {name}"}, "zh-CN": {"greet": "你好{name}"}}
        >>> get_locale_message("greet", [{"name": "李"}], locale="fr",
        ...                    fallback="en", definitions=table)
        'Hi 李'
    """
    candidates = build_candidates(locale, fallback)
    try:
        resolved = resolve_message(key, candidates, definitions, on_fallback=on_fallback)
    except MissingMessageError as e:
        if strict:
            raise
        logger.warning("%s", e)
        return FALLBACK_MISSING_MESSAGE.format(key=key)

    helper = ScopedTranslate(
        locale=resolved.locale,
        fallback=normalize_locale(fallback).tag,
        definitions=definitions,
        strict=strict,
    )
    return apply_plugins(resolved.value, args, coerce_plugins(plugins), helper)


@dataclass(frozen=True, slots=True)
class ScopedTranslate:
    """Translate helper bound to a resolving locale.

    Passed to every plugin as its third argument. Nested lookups use the
    same candidate policy with ``locale`` as the preference, and apply only
    the built-in placeholder plugin, so a plugin calling back into the
    helper cannot re-enter itself.

    Attributes:
        locale: Tag of the locale that resolved the current message
        fallback: Effective fallback tag of the outer call
        definitions: Message table of the outer call
        strict: Missing-key policy of the outer call

    Example:
        >>> def with_unit(value, args, translate):
        ...     return f"{value} {translate('unit.' + args[1])}"
    """

    locale: LocaleTag
    fallback: LocaleTag
    definitions: MessageTable
    strict: bool = True

    @property
    def language(self) -> str:
        """Language subtag of the resolving locale."""
        return normalize_locale(self.locale).language

    @property
    def region(self) -> str:
        """Region subtag of the resolving locale (may be empty)."""
        return normalize_locale(self.locale).region

    @property
    def babel_locale(self) -> Locale:
        """Cached Babel Locale for the resolving locale (CLDR data access)."""
        return get_babel_locale(self.locale)

    def __call__(
        self,
        key: MessageKey,
        *args: object,
        definitions: MessageTable | None = None,
    ) -> str:
        """Look up a nested message.

        Args:
            key: Message key
            *args: Call-time arguments (first mapping feeds placeholders)
            definitions: Alternate message table (default: the outer one)

        Returns:
            Formatted nested message
        """
        return get_locale_message(
            key,
            args,
            locale=self.locale,
            fallback=self.fallback,
            definitions=self.definitions if definitions is None else definitions,
            strict=self.strict,
        )


class Translator:
    """Message translation bound to a message table and plugin list.

    The effective locale is the explicit ``locale`` override when given,
    otherwise the state's current locale at call time; the same applies to
    the fallback. A Translator without overrides therefore follows every
    set_locale() on its state with no re-binding.

    Example:
        >>> table = {"en": {"greet": "Hi {name}"}, "zh-CN": {"greet": "你好{name}"}}
        >>> state = LocaleState("zh-CN", "en")
        >>> t = Translator(table, state=state)
        >>> t("greet", {"name": "李"})
        '你好李'
        >>> state.set_locale("fr")
        >>> t("greet", {"name": "李"})
        'Hi 李'
    """

    __slots__ = (
        "_definitions",
        "_fallback",
        "_locale",
        "_on_fallback",
        "_plugins",
        "_state",
        "_strict",
    )

    def __init__(
        self,
        definitions: MessageTable,
        plugins: object = None,
        *,
        locale: str | None = None,
        fallback: str | None = None,
        state: LocaleState | None = None,
        strict: bool = True,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize translator.

        Args:
            definitions: Message table keyed by canonical locale tag. Held by
                reference, so locale data merged in later is visible.
            plugins: None, a plugin, or an iterable of plugins
            locale: Explicit preferred locale (overrides the state)
            fallback: Explicit fallback locale (overrides the state)
            state: LocaleState to follow (default: the shared state)
            strict: Raise MissingMessageError for unknown keys (default: True)
            on_fallback: Optional callback for fallback resolution events

        Raises:
            ValidationError: If an explicit locale or fallback is unusable
        """
        self._definitions = definitions
        self._plugins = coerce_plugins(plugins)
        self._locale = None if locale is None else validate_locale(locale, LocaleRole.PRIMARY)
        self._fallback = (
            None if fallback is None else validate_locale(fallback, LocaleRole.FALLBACK)
        )
        self._state = state
        self._strict = strict
        self._on_fallback = on_fallback

    @classmethod
    def from_definitions(cls, raw: object, plugins: object = None, **kwargs: object) -> Translator:
        """Build a translator from raw imported data.

        Runs normalize_definitions() over ``raw`` first; see Translator for
        the remaining arguments.
        """
        return cls(normalize_definitions(raw), plugins, **kwargs)  # type: ignore[arg-type]

    @property
    def state(self) -> LocaleState:
        """LocaleState this translator follows."""
        return self._state if self._state is not None else get_shared_state()

    @property
    def definitions(self) -> MessageTable:
        """Message table (read-only view of the caller's mapping)."""
        return self._definitions

    @property
    def plugins(self) -> tuple[Plugin, ...]:
        """Caller plugins in execution order (placeholder runs after these)."""
        return tuple(self._plugins)

    @property
    def strict(self) -> bool:
        """Whether unknown keys raise MissingMessageError."""
        return self._strict

    @property
    def locale(self) -> LocaleTag:
        """Effective preferred locale."""
        return self._locale if self._locale is not None else self.state.get_locale()

    @property
    def fallback(self) -> LocaleTag:
        """Effective fallback locale."""
        return self._fallback if self._fallback is not None else self.state.get_fallback_locale()

    @property
    def candidates(self) -> tuple[LocaleTag, ...]:
        """Candidate chain probed by the next translate() call."""
        return build_candidates(self.locale, self.fallback)

    def translate(self, key: MessageKey, *args: object) -> str:
        """Translate a message key.

        Args:
            key: Message key
            *args: Call-time arguments; the first mapping feeds placeholders

        Returns:
            Final display string

        Raises:
            MissingMessageError: If strict and no candidate defines the key
        """
        return get_locale_message(
            key,
            args,
            locale=self.locale,
            fallback=self.fallback,
            definitions=self._definitions,
            plugins=self._plugins,
            strict=self._strict,
            on_fallback=self._on_fallback,
        )

    __call__ = translate

    def has_message(self, key: MessageKey) -> bool:
        """Check whether any current candidate defines the key."""
        return find_message(key, self.candidates, self._definitions) is not None

    def bind(self, *, locale: str | None = None, fallback: str | None = None) -> Translator:
        """Derive a translator pinned to explicit locale values.

        Unspecified values keep this translator's overrides (or keep
        following the state).

        Args:
            locale: Preferred locale override
            fallback: Fallback locale override

        Returns:
            New Translator sharing definitions, plugins and state
        """
        return Translator(
            self._definitions,
            self._plugins,
            locale=locale if locale is not None else self._locale,
            fallback=fallback if fallback is not None else self._fallback,
            state=self._state,
            strict=self._strict,
            on_fallback=self._on_fallback,
        )

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"Translator(locale={self.locale!r}, fallback={self.fallback!r}, "
            f"locales={len(self._definitions)}, plugins={len(self._plugins)}, "
            f"strict={self._strict})"
        )
