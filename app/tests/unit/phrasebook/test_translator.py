"""Tests for phrasebook.translator module."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from phrasebook import LangError, Translator, translate, translate_error
from phrasebook.translator import data_items
from tests.factories.phrasebook import CodeOnlyError, FakeError, make_error

DEFAULT_LANG = "en"


@pytest.fixture
def warn():
    """Mock warning sink."""
    return MagicMock()


class TestTranslate:
    """Tests for the translate() function."""

    def test_simple_string(self, phrases, warn):
        """translate() returns the stored phrase."""
        assert translate(phrases, DEFAULT_LANG, warn, "en", "app.simple") == "Simple text"
        warn.assert_not_called()

    def test_specified_language(self, phrases, warn):
        """translate() uses the requested language."""
        assert translate(phrases, DEFAULT_LANG, warn, "fr", "app.simple") == "Texte simple"

    def test_missing_key_returns_key(self, phrases, warn):
        """A missing key falls back to the key itself."""
        assert translate(phrases, DEFAULT_LANG, warn, "en", "app.missing") == "app.missing"

    def test_missing_key_warns_once(self, phrases, warn):
        """A missing key is reported exactly once with lang and key."""
        translate(phrases, DEFAULT_LANG, warn, "en", "app.missing")
        warn.assert_called_once()
        assert "en.app.missing" in warn.call_args.args[0]

    def test_missing_language_returns_key(self, phrases, warn):
        """An unknown language degenerates to a missing key."""
        assert translate(phrases, DEFAULT_LANG, warn, "de", "app.simple") == "app.simple"
        warn.assert_called_once()
        assert "de.app.simple" in warn.call_args.args[0]

    def test_no_fallback_to_default_for_missing_key(self, phrases, warn):
        """A key present only in the default language is still missing."""
        assert translate(phrases, DEFAULT_LANG, warn, "fr", "app.multiple") == "app.multiple"

    @pytest.mark.parametrize("lang", [None, 42, 1.5, ["en"]])
    def test_non_string_lang_uses_default(self, phrases, warn, lang):
        """A non-string language behaves exactly like the default language."""
        assert translate(phrases, DEFAULT_LANG, warn, lang, "app.simple") == translate(
            phrases, DEFAULT_LANG, warn, "en", "app.simple"
        )

    def test_no_data_leaves_placeholders(self, phrases, warn):
        """Without data the raw template is returned."""
        assert translate(phrases, DEFAULT_LANG, warn, "en", "app.withdata") == "Hello ${name}"

    def test_empty_data_leaves_placeholders(self, phrases, warn):
        """Empty data leaves the template untouched."""
        assert (
            translate(phrases, DEFAULT_LANG, warn, "en", "app.withdata", {})
            == "Hello ${name}"
        )

    def test_single_placeholder(self, phrases, warn):
        """${name} is replaced with data."""
        assert (
            translate(phrases, DEFAULT_LANG, warn, "en", "app.withdata", {"name": "John"})
            == "Hello John"
        )

    def test_multiple_placeholders(self, phrases, warn):
        """Several placeholders are replaced."""
        result = translate(
            phrases, DEFAULT_LANG, warn, "en", "app.multiple", {"user": "Alice", "count": 5}
        )
        assert result == "User Alice has 5 items"

    def test_partial_data(self, phrases, warn):
        """Placeholders absent from data are left verbatim."""
        result = translate(phrases, DEFAULT_LANG, warn, "en", "app.multiple", {"user": "A"})
        assert result == "User A has ${count} items"
        warn.assert_not_called()

    def test_array_placeholder(self, phrases, warn):
        """Arrays substitute as a comma-joined list."""
        result = translate(
            phrases, DEFAULT_LANG, warn, "en", "app.array", {"items": ["a", "b", "c"]}
        )
        assert result == "Items: a,b,c"

    def test_map_syntax(self, phrases, warn):
        """$map projects attributes of array elements."""
        users = [{"name": "Alice", "age": 30}, {"name": "Bob", "age": 25}]
        result = translate(phrases, DEFAULT_LANG, warn, "en", "app.arraymap", {"users": users})
        assert result == "Names: Alice, Bob"

    def test_map_missing_attribute(self, phrases, warn):
        """Missing attributes render their own name."""
        phrases["en"]["app.missingattr"] = "$map{users:missing:, }"
        users = [{"name": "Alice"}, {"name": "Bob"}]
        result = translate(
            phrases, DEFAULT_LANG, warn, "en", "app.missingattr", {"users": users}
        )
        assert result == "missing, missing"

    def test_map_multiple_attributes(self, phrases, warn):
        """Several attributes per element are concatenated."""
        phrases["en"]["app.people"] = "People: $map{people:name,age:, }"
        people = [{"name": "Alice", "age": 30}, {"name": "Bob", "age": 25}]
        result = translate(
            phrases, DEFAULT_LANG, warn, "en", "app.people", {"people": people}
        )
        assert result == "People: Alice30, Bob25"

    def test_non_string_data_keys(self, phrases, warn):
        """Data keys that are not strings match their text form."""
        phrases["en"]["app.item"] = "Item ${1}: $map{2:name:, }"
        result = translate(
            phrases, DEFAULT_LANG, warn, "en", "app.item", {1: "one", 2: [{"name": "a"}]}
        )
        assert result == "Item one: a"

    def test_translates_error_key(self, phrases, warn):
        """An error passed as key is translated through error.<code>."""
        assert (
            translate(phrases, DEFAULT_LANG, warn, "en", make_error("TEST_ERROR"))
            == "Test error message"
        )

    def test_error_key_uses_default_lang(self, phrases, warn):
        """The default language applies to errors passed as key too."""
        assert (
            translate(phrases, DEFAULT_LANG, warn, None, make_error("TEST_ERROR"))
            == "Test error message"
        )

    def test_translates_error_in_data(self, phrases, warn):
        """An error value in data is translated before substitution."""
        phrases["en"]["app.status"] = "Status: ${err}"
        phrases["en"]["error.INNER"] = "inner error"
        result = translate(
            phrases, DEFAULT_LANG, warn, "en", "app.status", {"err": make_error("INNER")}
        )
        assert result == "Status: inner error"

    def test_translates_errors_in_array_data(self, phrases, warn):
        """Error elements of array values are translated."""
        phrases["en"]["app.errors"] = "Errors: ${errs}"
        phrases["en"]["error.E1"] = "err one"
        phrases["en"]["error.E2"] = "err two"
        errs = [make_error("E1"), make_error("E2")]
        result = translate(phrases, DEFAULT_LANG, warn, "en", "app.errors", {"errs": errs})
        assert result == "Errors: err one,err two"

    def test_mixed_array_only_errors_translated(self, phrases, warn):
        """Non-error array elements pass through unchanged."""
        phrases["en"]["app.errors"] = "Errors: ${errs}"
        phrases["en"]["error.E1"] = "err one"
        result = translate(
            phrases,
            DEFAULT_LANG,
            warn,
            "en",
            "app.errors",
            {"errs": [make_error("E1"), "plain", 3]},
        )
        assert result == "Errors: err one,plain,3"

    def test_nested_error_data_translated_in_same_language(self, phrases, warn):
        """Errors nested in error data are translated recursively."""
        phrases["fr"]["error.OUTER"] = "Externe: ${cause}"
        phrases["fr"]["error.INNER"] = "interne"
        error = make_error("OUTER", cause=make_error("INNER"))
        assert translate(phrases, DEFAULT_LANG, warn, "fr", error) == "Externe: interne"

    def test_error_in_data_missing_phrase(self, phrases, warn):
        """A nested error without phrase renders its key and warns."""
        phrases["en"]["app.status"] = "Status: ${err}"
        result = translate(
            phrases, DEFAULT_LANG, warn, "en", "app.status", {"err": make_error("NOPE")}
        )
        assert result == "Status: error.NOPE"
        warn.assert_called_once()

    def test_accepts_phrase_store(self, phrase_store, warn):
        """translate() works on a PhraseStore as well as a dict."""
        assert (
            translate(phrase_store, DEFAULT_LANG, warn, "fr", "app.withdata", {"name": "Marie"})
            == "Bonjour Marie"
        )


class TestTranslateError:
    """Tests for the translate_error() function."""

    @pytest.fixture
    def error_phrases(self):
        """Phrases with error messages."""
        return {
            "en": {
                "error.TEST_CODE": "Error: ${message}",
                "error.SIMPLE": "Simple error",
                "error.NO_DATA": "Code: ${code}",
            }
        }

    def test_translates_error_with_code(self, error_phrases, warn):
        """The error code selects the phrase."""
        assert (
            translate_error(error_phrases, DEFAULT_LANG, warn, "en", make_error("SIMPLE"))
            == "Simple error"
        )

    def test_translates_error_with_data(self, error_phrases, warn):
        """Error data fills the template."""
        error = make_error("TEST_CODE", message="Something went wrong")
        assert (
            translate_error(error_phrases, DEFAULT_LANG, warn, "en", error)
            == "Error: Something went wrong"
        )

    def test_error_without_data_uses_itself(self, error_phrases, warn):
        """An error without data offers its own attributes."""
        assert (
            translate_error(error_phrases, DEFAULT_LANG, warn, "en", make_error("NO_DATA"))
            == "Code: NO_DATA"
        )

    def test_error_without_data_attribute(self, error_phrases, warn):
        """An error exposing only a code is translated with itself as data."""
        assert (
            translate_error(error_phrases, DEFAULT_LANG, warn, "en", CodeOnlyError("NO_DATA"))
            == "Code: NO_DATA"
        )
        assert (
            translate(error_phrases, DEFAULT_LANG, warn, "en", SimpleNamespace(code="NO_DATA"))
            == "Code: NO_DATA"
        )

    def test_non_exception_error_shape(self, error_phrases, warn):
        """Any value with the code/data capability is translated."""
        assert (
            translate_error(error_phrases, DEFAULT_LANG, warn, "en", FakeError("NO_DATA"))
            == "Code: NO_DATA"
        )

    @pytest.mark.parametrize(
        "value",
        ["plain string", None, 42, 3.14, {"code": "SIMPLE"}, {"message": "x"}, ["a"]],
    )
    def test_non_errors_pass_through(self, error_phrases, warn, value):
        """Values without the error capability are returned unchanged."""
        assert translate_error(error_phrases, DEFAULT_LANG, warn, "en", value) is value
        warn.assert_not_called()

    def test_missing_error_phrase(self, error_phrases, warn):
        """An unknown error code returns the error key."""
        assert (
            translate_error(error_phrases, DEFAULT_LANG, warn, "en", make_error("UNKNOWN"))
            == "error.UNKNOWN"
        )
        warn.assert_called_once()


class TestDataItems:
    """Tests for data_items()."""

    def test_mapping_order_preserved(self):
        """Mapping entries keep their own order."""
        assert data_items({"b": 1, "a": 2}) == [("b", 1), ("a", 2)]

    def test_error_attributes(self):
        """A LangError offers its public attributes."""
        items = dict(data_items(LangError("CODE", status_code=400)))
        assert items["code"] == "CODE"
        assert items["status_code"] == 400

    def test_dataclass_fields(self):
        """Dataclasses offer their fields."""
        assert data_items(FakeError("X")) == [("code", "X"), ("data", None)]

    def test_unsupported_values(self):
        """Values without attributes offer nothing."""
        assert data_items(None) == []
        assert data_items(5) == []


class TestTranslator:
    """Tests for the Translator service."""

    def test_translate(self, phrase_store, warn):
        """Translator.translate() binds store, default and sink."""
        translator = Translator(phrase_store, "en", warn)
        assert translator.translate(None, "app.withdata", {"name": "Jo"}) == "Hello Jo"

    def test_default_lang_callable_read_per_call(self, phrase_store, warn):
        """A callable default language is evaluated on every call."""
        current = {"lang": "en"}
        translator = Translator(phrase_store, lambda: current["lang"], warn)
        assert translator.translate(None, "app.simple") == "Simple text"
        current["lang"] = "fr"
        assert translator.translate(None, "app.simple") == "Texte simple"

    def test_translate_error(self, phrase_store, warn):
        """Translator.translate_error() translates or passes through."""
        translator = Translator(phrase_store, "en", warn)
        assert translator.translate_error("en", make_error("TEST_ERROR")) == "Test error message"
        assert translator.translate_error("en", "value") == "value"

    def test_missing_key_reported_to_sink(self, phrase_store, warn):
        """Missing keys go to the configured sink."""
        translator = Translator(phrase_store, "en", warn)
        assert translator.translate("en", "app.nope") == "app.nope"
        warn.assert_called_once()

    def test_default_sink_logs_warning(self, phrase_store, monkeypatch):
        """Without a sink, missing keys are logged as warnings."""
        mock_logger = MagicMock()
        monkeypatch.setattr("phrasebook.translator.logger", mock_logger)
        translator = Translator(phrase_store, "en")
        translator.translate("en", "app.nope")
        mock_logger.warning.assert_called_once_with(
            "missing_translation_key", message="missing key 'en.app.nope'"
        )

    def test_has_phrase(self, phrase_store):
        """has_phrase() checks presence per language."""
        translator = Translator(phrase_store, "en")
        assert translator.has_phrase("en", "app.simple")
        assert not translator.has_phrase("fr", "app.multiple")
        assert not translator.has_phrase("de", "app.simple")

    def test_has_phrase_empty_template(self, phrase_store, warn):
        """An empty template is reported missing, as translate() treats it."""
        phrase_store.store_strings("en.app.blank", "")
        translator = Translator(phrase_store, "en", warn)
        assert not translator.has_phrase("en", "app.blank")
        assert translator.translate("en", "app.blank") == "app.blank"
