"""Message resolution against a candidate chain.

Probes a message table one candidate locale at a time and returns the first
usable value together with the locale that supplied it. Resolution from any
candidate other than the first is reported as a fallback event: logged at
warning level and passed to an optional callback. A key found under no
candidate raises MissingMessageError.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from localekit.diagnostics import ErrorTemplate, MissingMessageError
from localekit.localization.types import (
    MESSAGE_VALUE_TYPES,
    LocaleTag,
    MessageKey,
    MessageTable,
    MessageValue,
)

__all__ = [
    "FallbackInfo",
    "ResolvedMessage",
    "find_message",
    "resolve_message",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedMessage:
    """A raw message value and the locale that supplied it.

    Attributes:
        locale: Candidate tag whose table contained the key
        value: Raw value from the table, before any plugin runs
    """

    locale: LocaleTag
    value: MessageValue


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when a message is resolved from a
    candidate other than the most preferred one.

    Attributes:
        requested_locale: The first (most specific) candidate
        resolved_locale: The candidate that actually contained the message
        key: The message key that was resolved

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"Fallback: {info.key} resolved from "
        ...           f"{info.resolved_locale} (requested {info.requested_locale})")
        >>> table = {"en": {"greet": "Hi"}}
        >>> _ = resolve_message("greet", ("fr", "en"), table, on_fallback=log_fallback)
        Fallback: greet resolved from en (requested fr)
    """

    requested_locale: LocaleTag
    resolved_locale: LocaleTag
    key: MessageKey


def find_message(
    key: MessageKey,
    candidates: Iterable[LocaleTag],
    table: MessageTable,
) -> ResolvedMessage | None:
    """Return the first candidate's value for key, or None.

    A candidate counts as a hit only if its entry in the table is a mapping
    that contains the key with a str, int, float or bool value. Nested
    mappings, sequences and None are skipped.
    """
    for locale in candidates:
        messages = table.get(locale)
        if not isinstance(messages, Mapping) or key not in messages:
            continue
        value = messages[key]
        if isinstance(value, MESSAGE_VALUE_TYPES):
            return ResolvedMessage(locale=locale, value=value)
    return None


def resolve_message(
    key: MessageKey,
    candidates: tuple[LocaleTag, ...],
    table: MessageTable,
    *,
    on_fallback: Callable[[FallbackInfo], None] | None = None,
) -> ResolvedMessage:
    """Resolve a message key against an ordered candidate chain.

    Args:
        key: Message key to look up
        candidates: Locale tags in priority order (see build_candidates)
        table: Message table to read; never mutated
        on_fallback: Optional callback invoked when a candidate other than
            the first supplied the value

    Returns:
        ResolvedMessage with the resolving locale and raw value

    Raises:
        MissingMessageError: If no candidate defines the key

    Example:
        >>> table = {"en": {"greet": "Hi"}}
        >>> resolve_message("greet", ("fr", "en"), table)
        ResolvedMessage(locale='en', value='Hi')
    """
    requested = candidates[0] if candidates else ""
    resolved = find_message(key, candidates, table)

    if resolved is None:
        raise MissingMessageError(key, requested, candidates)

    if resolved.locale != requested:
        logger.warning(
            "%s", ErrorTemplate.message_fallback_used(key, requested, resolved.locale)
        )
        if on_fallback is not None:
            on_fallback(
                FallbackInfo(
                    requested_locale=requested,
                    resolved_locale=resolved.locale,
                    key=key,
                )
            )

    return resolved
