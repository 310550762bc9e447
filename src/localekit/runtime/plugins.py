"""Plugin pipeline and the built-in placeholder plugin.

A plugin is any callable ``plugin(value, args, translate) -> value``:

    value      The current message value: the raw resolved value for the
               first plugin, then each plugin's output in turn.
    args       A fresh list copy of the call-time arguments. Plugins may
               mutate it without affecting later plugins.
    translate  A ScopedTranslate bound to the resolving locale and its
               fallback, for plugins that look up nested messages.

The built-in ``placeholder`` plugin always runs last, exactly once, so it
sees the output of every other plugin.

Output policy:
    Plugins should return str, int, float or bool. Any other result
    (None, lists, mappings, objects) is coerced to a string at the plugin
    boundary and a warning is logged; it is never an error. Booleans render
    as "true"/"false" and None as "".

Python 3.13+.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Protocol

from localekit.constants import BOOLEAN_STRINGS
from localekit.diagnostics import ErrorTemplate
from localekit.localization.types import MESSAGE_VALUE_TYPES, MessageValue

if TYPE_CHECKING:
    from localekit.runtime.translator import ScopedTranslate

__all__ = [
    "Plugin",
    "apply_plugins",
    "coerce_args",
    "coerce_plugins",
    "placeholder",
    "stringify",
]

logger = logging.getLogger(__name__)

# (.?) captures one preceding character to detect a leading backslash.
# (\\?) captures a backslash placed immediately before the closing brace.
_PLACEHOLDER_PATTERN = re.compile(r"(.?)\{\s*(.*?)\s*(\\?)\}")


class Plugin(Protocol):
    """Protocol for message transformation plugins."""

    def __call__(
        self,
        value: MessageValue,
        args: list[object],
        translate: ScopedTranslate,
        /,
    ) -> object:
        """Transform a message value.

        Args:
            value: Current message value
            args: Copy of the call-time arguments
            translate: Helper bound to the resolving locale

        Returns:
            Transformed value (str, int, float or bool)
        """


def stringify(value: object) -> str:
    """Convert a message or substitution value to display text.

    Example:
        >>> stringify(True), stringify(3.0), stringify(None), stringify(2.5)
        ('true', '3', '', '2.5')
    """
    match value:
        case str():
            return value
        case None:
            return ""
        case bool():
            return BOOLEAN_STRINGS[value]
        case float() if math.isfinite(value) and value.is_integer():
            return str(int(value))
        case _:
            return str(value)


def placeholder(
    value: MessageValue,
    args: Sequence[object],
    translate: ScopedTranslate | None = None,
    /,
) -> MessageValue:
    """Replace ``{ name }`` templates with values from the first argument.

    Only string values are transformed, and only when the first argument is
    a mapping; anything else is returned unchanged.

    Substitution rules:
        - ``{ name }`` (any inner whitespace) becomes ``stringify(data[name])``;
          a None value substitutes "".
        - A name missing from the mapping leaves the matched text untouched.
        - ``\\{ name }`` or ``{ name \\}`` is an escape: no substitution, and the
          escaping backslash is removed from the output.

    Example:
        >>> placeholder("Hello, { name }!", [{"name": "Ana"}])
        'Hello, Ana!'
        >>> placeholder("\\\\{ name }", [{"name": "Ana"}])
        '{ name }'
        >>> placeholder("{ missing }", [{}])
        '{ missing }'
    """
    if not isinstance(value, str) or not args or not isinstance(args[0], Mapping):
        return value

    data = args[0]

    def substitute(match: re.Match[str]) -> str:
        text = match.group(0)
        prefix, name, closing_escape = match.groups()

        if prefix == "\\" or closing_escape:
            if prefix == "\\":
                text = text[1:]
            if closing_escape:
                text = text[:-2] + "}"
            return text

        if not name or name not in data:
            return text

        return f"{prefix}{stringify(data[name])}"

    return _PLACEHOLDER_PATTERN.sub(substitute, value)


def coerce_plugins(plugins: object) -> list[Plugin]:
    """Normalize a plugin argument into a list of callables.

    Accepts None (no plugins), a single callable, or an iterable of plugins;
    non-callable entries are discarded.

    Example:
        >>> coerce_plugins(None)
        []
        >>> coerce_plugins(placeholder) == [placeholder]
        True
    """
    if plugins is None:
        return []
    if callable(plugins):
        return [plugins]
    if isinstance(plugins, Iterable) and not isinstance(plugins, (str, bytes)):
        return [plugin for plugin in plugins if callable(plugin)]
    logger.debug("Ignoring plugins argument of type %s", type(plugins).__name__)
    return []


def coerce_args(data: object) -> list[object]:
    """Normalize a data argument into a call-argument list.

    A list or tuple is spread into positional arguments, None means no
    arguments, and any other value becomes the single argument. Pass
    ``[[...]]`` to supply a list as the first argument.

    Example:
        >>> coerce_args({"name": "Ana"})
        [{'name': 'Ana'}]
        >>> coerce_args(None)
        []
    """
    if data is None:
        return []
    if isinstance(data, (list, tuple)):
        return list(data)
    return [data]


def _plugin_name(plugin: Plugin) -> str:
    return getattr(plugin, "__qualname__", None) or type(plugin).__name__


def _check_output(plugin: Plugin, value: object) -> MessageValue:
    if isinstance(value, MESSAGE_VALUE_TYPES):
        return value
    logger.warning("%s", ErrorTemplate.plugin_result_coerced(_plugin_name(plugin), value))
    return stringify(value)


def apply_plugins(
    value: MessageValue,
    args: Sequence[object],
    plugins: Iterable[Plugin],
    translate: ScopedTranslate | None,
) -> str:
    """Run the plugin pipeline over a resolved message value.

    Caller plugins run in the given order; every occurrence of the built-in
    ``placeholder`` is removed from that list and it is appended once at the
    end. Each plugin receives a fresh list copy of ``args``.

    Args:
        value: Raw resolved message value
        args: Call-time arguments
        plugins: Caller plugins, in order
        translate: Helper passed to every plugin

    Returns:
        Final display string
    """
    pipeline = [plugin for plugin in plugins if plugin is not placeholder]
    pipeline.append(placeholder)

    for plugin in pipeline:
        value = _check_output(plugin, plugin(value, list(args), translate))

    return stringify(value)
