"""Fallback candidate construction.

The candidate chain IS the fallback policy: an exact region match of the
preferred locale beats its language-only form, which beats an exact region
match of the fallback locale, which beats the fallback's language-only form.

Python 3.13+. Zero external dependencies.
"""

from localekit.locale_utils import normalize_locale
from localekit.localization.types import LocaleTag

__all__ = ["build_candidates"]


def build_candidates(preferred: object, fallback: object) -> tuple[LocaleTag, ...]:
    """Build the ordered, de-duplicated list of locale tags to probe.

    Args:
        preferred: Raw preferred locale
        fallback: Raw fallback locale

    Returns:
        Up to four tags: preferred full tag, preferred language, fallback full
        tag, fallback language. Duplicates keep their first position; empty
        tags (from unusable input) are dropped.

    Example:
        >>> build_candidates("zh_cn", "en-US")
        ('zh-CN', 'zh', 'en-US', 'en')
        >>> build_candidates("fr", "en")
        ('fr', 'en')
    """
    pref = normalize_locale(preferred)
    back = normalize_locale(fallback)
    ordered = (pref.tag, pref.language, back.tag, back.language)
    # dict.fromkeys() removes duplicates while maintaining insertion order
    return tuple(tag for tag in dict.fromkeys(ordered) if tag)
