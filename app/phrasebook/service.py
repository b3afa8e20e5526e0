"""Localisation service for dependency injection.

Provides a class-based interface to the phrasebook system for the API layer.
"""

from typing import Any, Callable, Dict, List, Optional

from core.logging import get_module_logger
from phrasebook.errors import UNKNOWN_LANG
from phrasebook.resolvers import LanguageNegotiator
from phrasebook.store import PhraseStore
from phrasebook.translator import Translator

logger = get_module_logger()


class LangService:
    """Class-based localisation service.

    Owns the phrase store and a Translator bound to it. The default language
    is read through ``default_lang`` on every call so configuration changes
    are honoured.

    Usage:
        service = LangService(store, default_lang=lambda: settings.lang.DEFAULT_LANG)
        service.translate("fr", "app.hello", {"name": "Marie"})

        translate = service.request_translator(request.headers.get("accept-language"))
        translate("app.hello", {"name": "Marie"})
    """

    def __init__(
        self,
        store: Optional[PhraseStore] = None,
        default_lang: "str | Callable[[], str]" = "en",
        translator: Optional[Translator] = None,
    ):
        """Initialize localisation service.

        Args:
            store: Optional phrase store. A new empty store is created if omitted.
            default_lang: Default language, or a callable returning it.
            translator: Optional pre-configured Translator. Must be bound to
                ``store`` when both are given.
        """
        self.store = store if store is not None else PhraseStore()
        self._translator = translator or Translator(self.store, default_lang)

    @property
    def default_lang(self) -> str:
        """Current default language."""
        return self._translator.default_lang

    @property
    def supported_languages(self) -> List[str]:
        """Languages present in the phrase store."""
        return self.store.supported_languages

    @property
    def translator(self) -> Translator:
        """Underlying Translator instance."""
        return self._translator

    def store_strings(self, dotted_key: str, value: str) -> None:
        """Store a phrase from a 'lang.namespace.key' dotted key."""
        self.store.store_strings(dotted_key, value)

    def translate(self, lang: Any, key: Any, data: Any = None) -> Any:
        """Translate a key (or translatable error) into ``lang``."""
        return self._translator.translate(lang, key, data)

    def translate_error(self, lang: Any, error: Any) -> Any:
        """Translate an error, returning non-errors unchanged."""
        return self._translator.translate_error(lang, error)

    def phrases_for(self, lang: str) -> Optional[Dict[str, str]]:
        """Return every phrase of a language, or None if it is unknown."""
        return self.store.phrases_for(lang)

    def negotiate(self, accept_language: Optional[str]) -> Optional[str]:
        """Resolve an Accept-Language header to a supported language."""
        return LanguageNegotiator.negotiate(accept_language, self.supported_languages)

    def request_translator(
        self, accept_language: Optional[str]
    ) -> Callable[..., Any]:
        """Build a translate function bound to a request's language.

        Args:
            accept_language: Accept-Language header of the request.

        Returns:
            Callable ``translate(key, data=None)``. When no supported language
            matches, the default language is used.
        """
        lang = self.negotiate(accept_language)

        def _translate(key: Any, data: Any = None) -> Any:
            return self.translate(lang, key, data)

        return _translate

    def phrases_response(
        self,
        lang: Optional[str] = None,
        accept_language: Optional[str] = None,
    ) -> Dict[str, str]:
        """Return the phrases of the requested or negotiated language.

        Args:
            lang: Explicitly requested language.
            accept_language: Accept-Language header, used when lang is omitted.

        Returns:
            Dict of qualified key to template.

        Raises:
            LangError: UNKNOWN_LANG if no phrases exist for the language.
        """
        lang = lang or self.negotiate(accept_language)
        phrases = self.phrases_for(lang) if lang else None
        if phrases is None:
            logger.info("unknown_language_requested", language=lang)
            raise UNKNOWN_LANG.with_data(lang=lang)
        return phrases
