"""Language negotiation for determining a request's preferred language.

Matches Accept-Language preferences against the languages present in the
phrase store. Language tags are compared case-insensitively and are not
otherwise validated.
"""

from typing import List, Optional, Sequence, Tuple

import structlog

logger = structlog.get_logger().bind(component="phrasebook.resolver")


class LanguageNegotiator:
    """Performs language negotiation for multilingual content.

    Implements RFC 4647 style language range matching (e.g., when a client
    requests "fr-CA" but only "fr" is available).
    """

    @staticmethod
    def parse_language_ranges(accept_language: Optional[str]) -> List[Tuple[str, float]]:
        """Parse an Accept-Language header into ``(range, quality)`` pairs.

        Ranges keep their header order. An invalid quality is treated as 1.0
        and ranges with a quality of zero or less are dropped.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            List of (language range, quality) tuples.
        """
        if not accept_language:
            return []

        preferences = []
        for part in accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            if not lang_range:
                continue
            quality = 1.0

            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0

            if quality <= 0:
                continue
            preferences.append((lang_range, quality))
        return preferences

    @classmethod
    def parse_accept_language(cls, accept_language: Optional[str]) -> List[str]:
        """Parse an Accept-Language header into ranges by preference.

        Parses "fr-CA,fr;q=0.9,en;q=0.8" into ["fr-CA", "fr", "en"]. Ranges
        with equal quality keep their header order; the wildcard range is
        left out.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            Language ranges, most preferred first.
        """
        preferences = [
            (lang_range, quality)
            for lang_range, quality in cls.parse_language_ranges(accept_language)
            if lang_range != "*"
        ]
        # sorted() is stable, so equal qualities keep header order
        return [
            lang_range
            for lang_range, _ in sorted(preferences, key=lambda x: x[1], reverse=True)
        ]

    @classmethod
    def accepts_any(cls, accept_language: Optional[str]) -> bool:
        """True when the header is absent or carries an acceptable ``*`` range."""
        if not accept_language or not accept_language.strip():
            return True
        return any(
            lang_range == "*"
            for lang_range, _ in cls.parse_language_ranges(accept_language)
        )

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if available language matches requested language.

        Args:
            requested: Requested language tag (e.g., "en-US").
            available: Available language tag (e.g., "en").
            strict: If True, requires exact match. If False, allows language-only match.

        Returns:
            True if languages match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        # Language-only match (e.g., "en-US" matches "en")
        requested_lang = requested.split("-")[0].lower()
        available_lang = available.split("-")[0].lower()
        return requested_lang == available_lang

    @staticmethod
    def find_best_match(
        requested: Sequence[str],
        available: Sequence[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find best matching language from available options.

        Args:
            requested: List of requested language tags in preference order.
            available: List of available language tags.
            default: Default if no match found.

        Returns:
            Best matching language from available, or default if no match.
        """
        for req_lang in requested:
            # Try exact match first
            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=True
                ):
                    return avail_lang

            # Try language-only match
            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=False
                ):
                    return avail_lang

        return default

    @classmethod
    def negotiate(
        cls,
        accept_language: Optional[str],
        available: Sequence[str],
    ) -> Optional[str]:
        """Resolve an Accept-Language header to an available language.

        An absent header or a ``*`` range accepts any language, so the first
        available one is chosen when no explicit range matches.

        Args:
            accept_language: Accept-Language header value.
            available: Languages present in the phrase store.

        Returns:
            Best matching available language, or None if nothing matches.
        """
        requested = cls.parse_accept_language(accept_language)
        match = cls.find_best_match(requested, available)
        if match is None and available and cls.accepts_any(accept_language):
            match = available[0]
        log = logger.bind(accept_language=accept_language, language=match)
        if match is None:
            log.debug("no_matching_language_in_header")
        else:
            log.debug("resolved_from_header")
        return match
