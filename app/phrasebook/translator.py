"""Translation of phrase keys and translatable errors.

``translate`` and ``translate_error`` are pure functions over a phrases
mapping; ``Translator`` binds them to a store, a default language and a
warning sink for use by services.
"""

import dataclasses
from typing import Any, Callable, List, Mapping, Optional, Tuple

from core.logging import get_module_logger
from phrasebook.errors import is_translatable_error
from phrasebook.template import render

logger = get_module_logger()

WarnFn = Callable[[str], Any]


def data_items(data: Any) -> List[Tuple[str, Any]]:
    """Return substitution entries for a data value, in its own order.

    Mappings yield their items; dataclasses and plain objects (such as an
    error offered as its own data) yield their public attributes.
    """
    if data is None:
        return []
    if isinstance(data, Mapping):
        return list(data.items())
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return [(f.name, getattr(data, f.name)) for f in dataclasses.fields(data)]
    if hasattr(data, "__dict__"):
        return [(k, v) for k, v in vars(data).items() if not k.startswith("_")]
    return []


def lookup_phrase(phrases: Mapping[str, Any], lang: str, key: str) -> Optional[str]:
    """Return the template for ``lang``/``key`` or None when absent."""
    messages = phrases.get(lang)
    if not isinstance(messages, Mapping):
        return None
    return messages.get(key)


def translate(
    phrases: Mapping[str, Any],
    default_lang: str,
    warn: WarnFn,
    lang: Any,
    key: Any,
    data: Any = None,
) -> Any:
    """Return a translated phrase.

    Args:
        phrases: Phrases mapping of language to {qualified key: template}.
        default_lang: Language used when ``lang`` is not a string.
        warn: Sink receiving a message for every missing key.
        lang: Target language.
        key: Qualified key, or a translatable error.
        data: Optional values substituted into the template. Error values
            (also inside sequences) are translated before substitution.

    Returns:
        The rendered phrase, or the key itself when no phrase exists.
    """
    if not isinstance(lang, str):
        lang = default_lang
    if is_translatable_error(key):
        return translate_error(phrases, default_lang, warn, lang, key)
    if not isinstance(key, str):
        key = str(key)

    template = lookup_phrase(phrases, lang, key)
    if not template:
        warn(f"missing key '{lang}.{key}'")
        return key
    if not data:
        return template

    return render(
        template,
        data_items(data),
        lambda value: translate_error(phrases, default_lang, warn, lang, value),
    )


def translate_error(
    phrases: Mapping[str, Any],
    default_lang: str,
    warn: WarnFn,
    lang: Any,
    error: Any,
) -> Any:
    """Translate a translatable error.

    Args:
        phrases: Phrases mapping of language to {qualified key: template}.
        default_lang: Language used when ``lang`` is not a string.
        warn: Sink receiving a message for every missing key.
        lang: Target language.
        error: Value to translate.

    Returns:
        The translated ``error.<code>`` phrase, or ``error`` unchanged if it
        is not a translatable error.
    """
    if not is_translatable_error(error):
        return error
    data = getattr(error, "data", None)
    if data is None:
        data = error
    return translate(phrases, default_lang, warn, lang, f"error.{error.code}", data)


class Translator:
    """Service translating phrase keys against a phrase store.

    Attributes:
        phrases: Phrases mapping (usually a PhraseStore).
        default_lang: Fallback language; may be a callable returning it, so
            configuration changes are picked up on every call.
        warn: Sink for missing-key messages.
    """

    def __init__(
        self,
        phrases: Mapping[str, Any],
        default_lang: "str | Callable[[], str]" = "en",
        warn: Optional[WarnFn] = None,
    ):
        """Initialize Translator.

        Args:
            phrases: Phrases mapping of language to {qualified key: template}.
            default_lang: Default language, or a callable returning it.
            warn: Optional sink for missing-key messages. Defaults to logging
                a ``missing_translation_key`` warning.
        """
        self.phrases = phrases
        self._default_lang = default_lang
        self.warn = warn or self._log_missing_key

    @property
    def default_lang(self) -> str:
        """Current default language."""
        if callable(self._default_lang):
            return self._default_lang()
        return self._default_lang

    def translate(self, lang: Any, key: Any, data: Any = None) -> Any:
        """Translate a key (or translatable error) into ``lang``."""
        return translate(self.phrases, self.default_lang, self.warn, lang, key, data)

    def translate_error(self, lang: Any, error: Any) -> Any:
        """Translate an error, returning non-errors unchanged."""
        return translate_error(self.phrases, self.default_lang, self.warn, lang, error)

    def has_phrase(self, lang: str, key: str) -> bool:
        """Check if a phrase exists for key in lang."""
        return bool(lookup_phrase(self.phrases, lang, key))

    @staticmethod
    def _log_missing_key(message: str) -> None:
        logger.warning("missing_translation_key", message=message)
