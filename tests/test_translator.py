"""Tests for get_locale_message, Translator and ScopedTranslate.

Python 3.13+.
"""

import logging

import pytest
from babel import Locale

from localekit.diagnostics import MissingMessageError, ValidationError
from localekit.localization import FallbackInfo
from localekit.runtime.plugins import placeholder
from localekit.runtime.state import LocaleState
from localekit.runtime.translator import ScopedTranslate, Translator, get_locale_message

TABLE = {
    "en": {"greet": "Hi {name}", "unit.kg": "kg", "count": 3, "flag": True},
    "zh-CN": {"greet": "你好{name}", "unit.kg": "公斤"},
    "fr": {"bye": "Au revoir"},
}


def upper(value: object, args: list[object], translate: object) -> object:
    """Plugin uppercasing string values."""
    return value.upper() if isinstance(value, str) else value


class TestGetLocaleMessage:
    """The stateless composition function."""

    def test_preferred_locale(self) -> None:
        """Preferred locale supplies the message."""
        result = get_locale_message(
            "greet", [{"name": "李"}], locale="zh_cn", fallback="en", definitions=TABLE
        )
        assert result == "你好李"

    def test_fallback_locale(self) -> None:
        """Missing preferred locale falls back."""
        result = get_locale_message(
            "greet", [{"name": "Ana"}], locale="de", fallback="en", definitions=TABLE
        )
        assert result == "Hi Ana"

    def test_numeric_and_bool_values(self) -> None:
        """Non-string values are rendered as text."""
        assert get_locale_message("count", locale="en", fallback="en", definitions=TABLE) == "3"
        assert get_locale_message("flag", locale="en", fallback="en", definitions=TABLE) == "true"

    def test_missing_raises(self) -> None:
        """Unknown keys raise in strict mode."""
        with pytest.raises(MissingMessageError) as exc_info:
            get_locale_message("nope", locale="fr-CA", fallback="en", definitions=TABLE)
        assert exc_info.value.locale == "fr-CA"
        assert exc_info.value.candidates == ("fr-CA", "fr", "en")

    def test_missing_permissive(self, caplog: pytest.LogCaptureFixture) -> None:
        """Non-strict mode returns the key marker and logs a warning."""
        with caplog.at_level(logging.WARNING, logger="localekit.runtime.translator"):
            result = get_locale_message(
                "nope", locale="fr", fallback="en", definitions=TABLE, strict=False
            )
        assert result == "{???nope}"
        assert any('"nope"' in r.getMessage() for r in caplog.records)

    def test_plugins_applied(self) -> None:
        """Caller plugins run before placeholder."""
        result = get_locale_message(
            "greet", [{"name": "ana"}], locale="en", fallback="en", definitions=TABLE,
            plugins=upper,
        )
        assert result == "HI ana"

    def test_on_fallback_forwarded(self) -> None:
        """Fallback events reach the callback."""
        events: list[FallbackInfo] = []
        get_locale_message(
            "bye", locale="fr-CA", fallback="en", definitions=TABLE, on_fallback=events.append
        )
        assert events == [FallbackInfo("fr-CA", "fr", "bye")]

    def test_helper_bound_to_resolving_locale(self) -> None:
        """Plugins receive a helper bound to the locale that resolved the message."""
        seen: list[ScopedTranslate] = []

        def capture(value: object, args: list[object], translate: ScopedTranslate) -> object:
            seen.append(translate)
            return value

        get_locale_message(
            "greet", locale="zh-TW", fallback="en_us", definitions=TABLE, plugins=[capture]
        )
        assert seen[0].locale == "en"
        assert seen[0].fallback == "en-US"
        assert seen[0].definitions is TABLE


class TestScopedTranslate:
    """The helper handed to plugins."""

    def test_nested_lookup(self) -> None:
        """Nested lookups follow the same candidate policy."""
        helper = ScopedTranslate(locale="zh-CN", fallback="en", definitions=TABLE)
        assert helper("unit.kg") == "公斤"
        assert helper("greet", {"name": "李"}) == "你好李"

    def test_nested_lookup_falls_back(self) -> None:
        """A nested key missing in the resolving locale falls back."""
        helper = ScopedTranslate(locale="fr", fallback="en", definitions=TABLE)
        assert helper("unit.kg") == "kg"

    def test_alternate_definitions(self) -> None:
        """An alternate table may be supplied per call."""
        helper = ScopedTranslate(locale="en", fallback="en", definitions=TABLE)
        assert helper("x", definitions={"en": {"x": "other"}}) == "other"

    def test_strict_policy_inherited(self) -> None:
        """Missing nested keys follow the outer strict setting."""
        strict = ScopedTranslate(locale="en", fallback="en", definitions=TABLE)
        with pytest.raises(MissingMessageError):
            strict("nope")
        lenient = ScopedTranslate(locale="en", fallback="en", definitions=TABLE, strict=False)
        assert lenient("nope") == "{???nope}"

    def test_locale_properties(self) -> None:
        """Language, region and Babel locale derive from the resolving locale."""
        helper = ScopedTranslate(locale="zh-CN", fallback="en", definitions=TABLE)
        assert helper.language == "zh"
        assert helper.region == "CN"
        assert isinstance(helper.babel_locale, Locale)
        assert helper.babel_locale.territory == "CN"

    def test_plugin_using_helper(self) -> None:
        """A plugin can compose a nested message."""

        def with_unit(value: object, args: list[object], translate: ScopedTranslate) -> str:
            return f"{value} {translate('unit.kg')}"

        result = get_locale_message(
            "count", locale="zh-CN", fallback="en", definitions=TABLE, plugins=with_unit
        )
        # "count" resolves from en, so the nested lookup is bound to en
        assert result == "3 kg"


class TestTranslatorState:
    """Translators follow their LocaleState unless overridden."""

    def test_follows_shared_state(self, shared_state: LocaleState) -> None:
        """Default translator reads the shared state at call time."""
        shared_state.set_fallback_locale("en")
        translator = Translator(TABLE)
        shared_state.set_locale("zh-CN")
        assert translator("greet", {"name": "李"}) == "你好李"
        shared_state.set_locale("fr")
        assert translator("greet", {"name": "李"}) == "Hi 李"

    def test_explicit_state(self) -> None:
        """A private state isolates the translator from the shared one."""
        state = LocaleState("en", "en")
        translator = Translator(TABLE, state=state)
        assert translator.state is state
        assert translator.translate("greet", {"name": "Ana"}) == "Hi Ana"

    def test_overrides_take_precedence(self, shared_state: LocaleState) -> None:
        """Explicit locale and fallback ignore the state."""
        translator = Translator(TABLE, locale="zh_cn", fallback="en")
        shared_state.set_locale("fr")
        assert translator.locale == "zh-CN"
        assert translator.fallback == "en"
        assert translator("greet", {"name": "李"}) == "你好李"

    def test_invalid_overrides(self) -> None:
        """Unusable overrides raise at construction."""
        with pytest.raises(ValidationError):
            Translator(TABLE, locale="")
        with pytest.raises(ValidationError) as exc_info:
            Translator(TABLE, fallback=42)  # type: ignore[arg-type]
        assert exc_info.value.is_fallback

    def test_candidates(self) -> None:
        """candidates reflects the effective locales."""
        translator = Translator(TABLE, locale="zh-CN", fallback="en-US")
        assert translator.candidates == ("zh-CN", "zh", "en-US", "en")

    def test_definitions_held_by_reference(self) -> None:
        """Messages added to the table after construction are visible."""
        table: dict[str, dict[str, str]] = {"en": {}}
        translator = Translator(table, locale="en", fallback="en")
        table["en"]["late"] = "added"
        assert translator("late") == "added"
        assert translator.definitions is table


class TestTranslatorFeatures:
    """Plugins, strictness, lookups and derivation."""

    def test_plugins_normalized(self) -> None:
        """Plugins argument is coerced to a tuple of callables."""
        translator = Translator(TABLE, [upper, None, placeholder])
        assert translator.plugins == (upper, placeholder)

    def test_plugins_applied(self) -> None:
        """Translator applies its plugins."""
        translator = Translator(TABLE, upper, locale="en", fallback="en")
        assert translator("greet", {"name": "ana"}) == "HI ana"

    def test_strict_false(self) -> None:
        """Permissive translators return the key marker."""
        translator = Translator(TABLE, locale="en", fallback="en", strict=False)
        assert not translator.strict
        assert translator("missing") == "{???missing}"

    def test_has_message(self) -> None:
        """has_message probes the current candidates without raising."""
        translator = Translator(TABLE, locale="fr", fallback="en")
        assert translator.has_message("bye")
        assert translator.has_message("greet")
        assert not translator.has_message("missing")

    def test_on_fallback(self) -> None:
        """Translator forwards fallback events."""
        events: list[FallbackInfo] = []
        translator = Translator(TABLE, locale="de", fallback="en", on_fallback=events.append)
        translator("unit.kg")
        assert events == [FallbackInfo("de", "en", "unit.kg")]

    def test_bind_pins_locale(self, shared_state: LocaleState) -> None:
        """bind derives a translator with explicit locale values."""
        shared_state.set_fallback_locale("en")
        translator = Translator(TABLE, upper)
        pinned = translator.bind(locale="zh-CN")

        shared_state.set_locale("fr")
        assert pinned.locale == "zh-CN"
        assert pinned.fallback == "en"
        assert pinned("greet", {"name": "李"}) == "你好李"
        assert pinned.plugins == translator.plugins
        assert pinned.definitions is translator.definitions
        # Unspecified fallback keeps following the state
        shared_state.set_fallback_locale("zh-CN")
        assert pinned.fallback == "zh-CN"

    def test_bind_keeps_existing_overrides(self) -> None:
        """Overrides not passed to bind are carried over."""
        translator = Translator(TABLE, locale="en", fallback="fr")
        rebound = translator.bind(locale="zh-CN")
        assert (rebound.locale, rebound.fallback) == ("zh-CN", "fr")

    def test_from_definitions_normalizes(self) -> None:
        """from_definitions cleans raw imported data."""
        raw = {"zh_cn": {"greet": "你好{name}", "meta": {"nested": 1}}, "EN": {"greet": "Hi"}}
        translator = Translator.from_definitions(raw, locale="zh-CN", fallback="en")
        assert translator.definitions == {"zh-CN": {"greet": "你好{name}"}, "en": {"greet": "Hi"}}
        assert translator("greet", {"name": "李"}) == "你好李"

    def test_repr(self) -> None:
        """repr summarizes the translator."""
        translator = Translator(TABLE, upper, locale="en", fallback="zh")
        assert repr(translator) == (
            "Translator(locale='en', fallback='zh', locales=3, plugins=1, strict=True)"
        )
