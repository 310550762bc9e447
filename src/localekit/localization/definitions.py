"""Normalization of raw imported message definitions.

Message tables usually come from parsed YAML or JSON, where locale keys are
written however the translator typed them ("zh_CN", "en-us") and leaves may
hold anything. normalize_definitions() turns such data into a MessageTable
keyed by canonical locale tags and holding only MessageValue leaves.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from localekit.locale_utils import normalize_locale
from localekit.localization.types import (
    MESSAGE_VALUE_TYPES,
    LocaleTag,
    MessageKey,
    MessageValue,
)

__all__ = ["normalize_definitions"]

logger = logging.getLogger(__name__)


def normalize_definitions(raw: object) -> dict[LocaleTag, dict[MessageKey, MessageValue]]:
    """Build a clean message table from raw imported data.

    Rules:
        - Locale keys are normalized; keys without a language subtag are dropped.
        - Locale keys that normalize to the same tag are merged; later
          entries override earlier ones key by key.
        - Locale entries that are not mappings are dropped.
        - Only str message keys with str, int, float or bool values survive.

    The input is never mutated.

    Args:
        raw: Parsed resource data (typically a dict from a YAML/JSON parser)

    Returns:
        New dict keyed by canonical locale tag. Empty for non-mapping input.

    Example:
        >>> normalize_definitions({"zh_cn": {"greet": "你好", "meta": {"x": 1}}})
        {'zh-CN': {'greet': '你好'}}
    """
    if not isinstance(raw, Mapping):
        logger.debug("Ignoring message definitions of type %s", type(raw).__name__)
        return {}

    table: dict[LocaleTag, dict[MessageKey, MessageValue]] = {}

    for raw_locale, raw_messages in raw.items():
        parts = normalize_locale(raw_locale)
        if not parts.language:
            logger.debug("Dropped definitions for unusable locale key %r", raw_locale)
            continue
        if not isinstance(raw_messages, Mapping):
            logger.debug("Dropped non-mapping definitions for locale %s", parts.tag)
            continue

        messages = table.setdefault(parts.tag, {})
        for key, value in raw_messages.items():
            if isinstance(key, str) and isinstance(value, MESSAGE_VALUE_TYPES):
                messages[key] = value
            else:
                logger.debug("Dropped message %r for locale %s", key, parts.tag)

    return table
