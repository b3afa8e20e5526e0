"""Phrase store for the phrasebook system.

Holds the merged phrases of every contributing package, organised as
``language -> {namespace.key: template}``.
"""

from typing import Any, Dict, Iterator, List, Mapping, MutableMapping, Optional

from phrasebook.errors import MalformedPhraseKeyError


def split_phrase_key(dotted_key: str) -> tuple[str, str]:
    """Split a dotted phrase key into its language and qualified key.

    Args:
        dotted_key: Key in the format 'lang.namespace.key'.

    Returns:
        Tuple of (language, qualified key).

    Raises:
        MalformedPhraseKeyError: If the key has no separator or an empty part.
    """
    lang, sep, key = dotted_key.partition(".")
    if not sep or not lang or not key:
        raise MalformedPhraseKeyError(
            f"Phrase key must be in format 'lang.namespace.key': {dotted_key}"
        )
    return lang, key


def store_strings(
    phrases: MutableMapping[str, Any], dotted_key: str, value: str
) -> None:
    """Parse a dotted phrase key and store the value in a phrases mapping.

    Args:
        phrases: Phrases mapping (``dict`` or PhraseStore) to store into.
        dotted_key: Key in the format 'lang.namespace.key'.
        value: The template string to store.

    Raises:
        MalformedPhraseKeyError: If the key has no separator or an empty part.
    """
    lang, key = split_phrase_key(dotted_key)
    if lang not in phrases:
        phrases[lang] = {}
    phrases[lang][key] = value


def flatten_phrases(
    mapping: Mapping[str, Any], prefix: str = ""
) -> Iterator[tuple[str, Any]]:
    """Yield ``(dotted_key, value)`` pairs for a possibly nested mapping.

    Args:
        mapping: Phrase mapping, either flat ('app.hello': ...) or nested.
        prefix: Key prefix for the current nesting level.

    Yields:
        Tuples of dotted key and leaf value.
    """
    for key, value in mapping.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            yield from flatten_phrases(value, full_key)
        else:
            yield full_key, value


class PhraseStore(MutableMapping[str, Dict[str, str]]):
    """Merged per-language phrase dictionary.

    Populated once at startup through ``store_strings``/``ingest`` and read
    for the lifetime of the process. Writes are last-writer-wins; nothing is
    ever deleted by the phrasebook itself.

    Attributes:
        phrases: Mapping of language to {qualified key: template}.
    """

    def __init__(self, phrases: Optional[Mapping[str, Mapping[str, str]]] = None):
        self.phrases: Dict[str, Dict[str, str]] = {}
        for lang, messages in (phrases or {}).items():
            self.phrases[lang] = dict(messages)

    def __getitem__(self, lang: str) -> Dict[str, str]:
        return self.phrases[lang]

    def __setitem__(self, lang: str, messages: Dict[str, str]) -> None:
        self.phrases[lang] = messages

    def __delitem__(self, lang: str) -> None:
        del self.phrases[lang]

    def __iter__(self) -> Iterator[str]:
        return iter(self.phrases)

    def __len__(self) -> int:
        return len(self.phrases)

    def __repr__(self) -> str:
        return f"PhraseStore(languages={self.supported_languages!r})"

    @property
    def supported_languages(self) -> List[str]:
        """Languages with at least one stored phrase, in load order."""
        return list(self.phrases.keys())

    def store_strings(self, dotted_key: str, value: str) -> None:
        """Store a phrase from a 'lang.namespace.key' dotted key.

        Args:
            dotted_key: Key in the format 'lang.namespace.key'.
            value: The template string to store.
        """
        store_strings(self.phrases, dotted_key, value)

    def ingest(self, lang: str, mapping: Mapping[str, Any]) -> int:
        """Store every phrase of a mapping under a language.

        Args:
            lang: Target language.
            mapping: Flat or nested mapping of qualified keys to templates.

        Returns:
            Number of phrases stored. Null values are skipped and other
            non-string values are stored as text.

        Raises:
            MalformedPhraseKeyError: If any key is malformed. Nothing from the
                mapping is stored in that case.
        """
        entries = []
        for key, value in flatten_phrases(mapping):
            if value is None:
                continue
            entries.append(
                (
                    split_phrase_key(f"{lang}.{key}"),
                    value if isinstance(value, str) else str(value),
                )
            )
        for (phrase_lang, phrase_key), value in entries:
            self.phrases.setdefault(phrase_lang, {})[phrase_key] = value
        return len(entries)

    def lookup(self, lang: str, key: str) -> Optional[str]:
        """Return the template for a language and key, or None if absent."""
        return self.phrases.get(lang, {}).get(key)

    def phrases_for(self, lang: str) -> Optional[Dict[str, str]]:
        """Return a copy of every phrase of a language.

        Args:
            lang: Language to retrieve.

        Returns:
            Dict of qualified key to template, or None if language is unknown.
        """
        messages = self.phrases.get(lang)
        return dict(messages) if messages is not None else None
