"""localekit exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information, so
callers can branch on the error class or diagnostic code instead of
inspecting message text.

Python 3.13+. Zero external dependencies.
"""

from localekit.enums import LocaleRole

from .codes import Diagnostic
from .templates import ErrorTemplate

__all__ = [
    "LocaleError",
    "MissingMessageError",
    "ValidationError",
]


class LocaleError(Exception):
    """Base exception for all localekit errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ValidationError(LocaleError, ValueError):
    """An empty or non-string value was supplied where a locale tag was required.

    Raised synchronously by the setter that received the value. Never
    recovered internally.

    Attributes:
        value: The rejected value
        role: Whether the value targeted the primary or fallback locale
    """

    def __init__(self, value: object, role: LocaleRole = LocaleRole.PRIMARY) -> None:
        """Initialize ValidationError.

        Args:
            value: The rejected value
            role: Whether the value targeted the primary or fallback locale
        """
        super().__init__(ErrorTemplate.locale_invalid(value, role))
        self.value = value
        self.role = role

    @property
    def is_fallback(self) -> bool:
        """True if the rejected value was meant for the fallback locale."""
        return self.role is LocaleRole.FALLBACK


class MissingMessageError(LocaleError, LookupError):
    """No candidate locale contained the requested key.

    Represents a content gap for developers to fix, not a runtime condition
    to recover from automatically.

    Attributes:
        key: The message key that was requested
        locale: The most specific (preferred) locale tag
        candidates: Every locale tag that was probed, in order
    """

    def __init__(self, key: str, locale: str, candidates: tuple[str, ...] = ()) -> None:
        """Initialize MissingMessageError.

        Args:
            key: The message key that was requested
            locale: The most specific (preferred) locale tag
            candidates: Every locale tag that was probed, in order
        """
        super().__init__(ErrorTemplate.message_not_found(key, locale, candidates))
        self.key = key
        self.locale = locale
        self.candidates = candidates
