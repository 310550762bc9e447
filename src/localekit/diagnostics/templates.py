"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from localekit.enums import LocaleRole

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def message_not_found(key: str, locale: str, candidates: Sequence[str]) -> Diagnostic:
        """No candidate locale defines the message key.

        Args:
            key: The message key that was not found
            locale: The most specific (preferred) locale tag
            candidates: Every locale tag that was probed

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        msg = f'Unknown localized message with key of "{key}" for [{locale}]'
        probed = ", ".join(candidates) if candidates else "(none)"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=msg,
            hint=f'Add "{key}" to the message table of one of: {probed}',
            locale=locale,
            key=key,
        )

    @staticmethod
    def message_fallback_used(key: str, requested: str, resolved: str) -> Diagnostic:
        """Message resolved from a less preferred candidate.

        Args:
            key: The message key
            requested: The most specific (preferred) locale tag
            resolved: The locale tag that actually supplied the value

        Returns:
            Warning diagnostic for MESSAGE_FALLBACK_USED
        """
        msg = (
            f'Missing message with key of "{key}" for locale [{requested}], '
            f"using default message of locale [{resolved}] as fallback."
        )
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_FALLBACK_USED,
            message=msg,
            locale=requested,
            key=key,
            severity="warning",
        )

    @staticmethod
    def locale_invalid(value: object, role: LocaleRole) -> Diagnostic:
        """Locale value is empty or not a string.

        Args:
            value: The rejected value
            role: Whether the value was meant for the primary or fallback locale

        Returns:
            Diagnostic for LOCALE_INVALID or FALLBACK_LOCALE_INVALID
        """
        if role is LocaleRole.FALLBACK:
            code = DiagnosticCode.FALLBACK_LOCALE_INVALID
            subject = "Fallback locale code"
        else:
            code = DiagnosticCode.LOCALE_INVALID
            subject = "Locale code"
        msg = (
            f"{subject} must be a valid string value. "
            f"(currType: {type(value).__name__}, currValue: {value!r})"
        )
        return Diagnostic(
            code=code,
            message=msg,
            hint="Pass a language tag such as 'en' or 'zh-CN'",
        )

    @staticmethod
    def plugin_result_coerced(plugin: str, value: object) -> Diagnostic:
        """Plugin returned a value outside the message value types.

        Args:
            plugin: Name of the plugin that produced the value
            value: The offending value

        Returns:
            Warning diagnostic for PLUGIN_RESULT_COERCED
        """
        msg = (
            f"Plugin '{plugin}' returned {type(value).__name__}; "
            "coercing to string"
        )
        return Diagnostic(
            code=DiagnosticCode.PLUGIN_RESULT_COERCED,
            message=msg,
            hint="Plugins should return str, int, float or bool",
            severity="warning",
        )
