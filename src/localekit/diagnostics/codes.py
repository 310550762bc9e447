"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Reference errors (missing messages)
        2000-2999: Validation errors (unusable locale values)
        3000-3999: Pipeline warnings (plugin output coercion)
    """

    # Reference errors (1000-1999)
    MESSAGE_NOT_FOUND = 1001
    MESSAGE_FALLBACK_USED = 1002

    # Validation errors (2000-2999)
    LOCALE_INVALID = 2001
    FALLBACK_LOCALE_INVALID = 2002

    # Pipeline warnings (3000-3999)
    PLUGIN_RESULT_COERCED = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context for both
    humans and tools to act on a failure without parsing the message text.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale: Locale tag involved in the error (empty if not applicable)
        key: Message key involved in the error (empty if not applicable)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale: str = ""
    key: str = ""
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[MESSAGE_NOT_FOUND]: Unknown localized message with key of "greet" for [fr]
              = locale: fr
              = help: Add "greet" to the message table of one of: fr, en

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
