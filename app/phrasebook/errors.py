"""Translatable errors for the phrasebook system.

Any value exposing a string ``code`` (and an optional ``data`` mapping) can be
rendered through the ``error.<code>`` phrase. ``LangError`` is the concrete
exception raised by the service and API layers.
"""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class TranslatableError(Protocol):
    """Capability shared by every value that can be translated as an error.

    Only ``code`` is required. An optional ``data`` mapping supplies the
    substitution values; when it is absent or None the error itself is
    offered as the substitution source.

    Attributes:
        code: Error code, used to build the phrase key ``error.<code>``.
    """

    code: str


def is_translatable_error(value: Any) -> bool:
    """Check whether a value exposes the TranslatableError capability.

    Args:
        value: Any value.

    Returns:
        True if value has a non-empty string ``code``.
    """
    if isinstance(value, (str, bytes, Mapping)) or value is None:
        return False
    if not isinstance(value, TranslatableError):
        return False
    return isinstance(value.code, str) and bool(value.code)


class MalformedPhraseKeyError(ValueError):
    """Raised when a phrase key cannot be split into language and key.

    Example:
        >>> store.store_strings("en", "Hello")
        Traceback (most recent call last):
        ...
        MalformedPhraseKeyError: Phrase key must be in format 'lang.namespace.key': en
    """

    pass


class LangError(Exception):
    """Exception carrying a translatable error code.

    Attributes:
        code: Error code (e.g., "UNKNOWN_LANG").
        data: Optional substitution data for the ``error.<code>`` phrase.
        status_code: HTTP status used when the error reaches the API layer.
    """

    def __init__(
        self,
        code: str,
        data: Optional[Mapping[str, Any]] = None,
        status_code: int = 500,
    ):
        super().__init__(code)
        self.code = code
        self.data = dict(data) if data is not None else None
        self.status_code = status_code

    def with_data(self, **data: Any) -> "LangError":
        """Return a copy of this error carrying additional data.

        Args:
            **data: Values merged over any existing data.

        Returns:
            New LangError with the same code and status.
        """
        merged = dict(self.data or {})
        merged.update(data)
        return LangError(self.code, data=merged, status_code=self.status_code)

    def __repr__(self) -> str:
        return f"LangError(code={self.code!r}, data={self.data!r})"


UNKNOWN_LANG = LangError("UNKNOWN_LANG", status_code=404)
RATE_LIMIT_EXCEEDED = LangError("RATE_LIMIT_EXCEEDED", status_code=429)
