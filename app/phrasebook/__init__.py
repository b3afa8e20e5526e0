"""Phrasebook - localisation of phrase tables for the application.

Merges per-language phrase tables contributed by several packages and
resolves keys, data and translatable errors into display strings.

Main components:
- store: PhraseStore and store_strings for phrase ingestion
- template: ${name} and $map{name:attrs:delimiter} placeholder rendering
- translator: translate, translate_error and the Translator service
- errors: TranslatableError capability and LangError
- resolvers: LanguageNegotiator for Accept-Language matching
- loader: PhraseFileLoader for JSON/YAML phrase files
- service: LangService facade used by the API layer
"""

from phrasebook.errors import (
    RATE_LIMIT_EXCEEDED,
    UNKNOWN_LANG,
    LangError,
    MalformedPhraseKeyError,
    TranslatableError,
    is_translatable_error,
)
from phrasebook.loader import PhraseFileLoader, PhraseLoader
from phrasebook.resolvers import LanguageNegotiator
from phrasebook.service import LangService
from phrasebook.store import PhraseStore, store_strings
from phrasebook.translator import Translator, translate, translate_error

__all__ = [
    "PhraseStore",
    "store_strings",
    "Translator",
    "translate",
    "translate_error",
    "TranslatableError",
    "is_translatable_error",
    "LangError",
    "MalformedPhraseKeyError",
    "UNKNOWN_LANG",
    "RATE_LIMIT_EXCEEDED",
    "LanguageNegotiator",
    "PhraseLoader",
    "PhraseFileLoader",
    "LangService",
]
