"""Placeholder rendering for phrase templates.

Two placeholder forms are supported:

- ``${name}`` is replaced by the stringified value of ``name``.
- ``$map{name:attr1,attr2:delimiter}`` projects a sequence value: for every
  element the listed attributes are looked up and concatenated, and the
  elements are joined with ``delimiter``.

Templates are scanned with plain string operations rather than regular
expressions built from user data, so attribute names and delimiters may
contain any character except ``}``.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Tuple

MAP_OPEN = "$map{"
MAP_CLOSE = "}"


@dataclass(frozen=True)
class MapPlaceholder:
    """A parsed ``$map{...}`` span.

    Attributes:
        start: Index of the leading ``$`` in the template.
        end: Index just past the closing ``}``.
        name: Name of the data entry being projected.
        attrs: Attribute names to read from each element.
        delimiter: String placed between elements.
    """

    start: int
    end: int
    name: str
    attrs: Tuple[str, ...]
    delimiter: str

    @classmethod
    def parse(cls, start: int, end: int, body: str) -> "MapPlaceholder":
        """Build a MapPlaceholder from the text between the braces.

        The body is ``name:attrs[:delimiter]``; everything after the second
        colon belongs to the delimiter.
        """
        name, _, rest = body.partition(":")
        attr_list, _, delimiter = rest.partition(":")
        attrs = tuple(attr_list.split(","))
        return cls(start=start, end=end, name=name, attrs=attrs, delimiter=delimiter)


def placeholder(name: Any) -> str:
    """Return the ``${name}`` token for a data key."""
    return "${" + str(name) + "}"


def find_map_placeholders(template: str, name: str) -> List[MapPlaceholder]:
    """Find every ``$map{name:...}`` span, left to right.

    Args:
        template: Template text to scan.
        name: Only spans projecting this data entry are returned.

    Returns:
        List of MapPlaceholder in order of appearance.
    """
    found = []
    pos = 0
    while True:
        start = template.find(MAP_OPEN, pos)
        if start == -1:
            break
        body_start = start + len(MAP_OPEN)
        close = template.find(MAP_CLOSE, body_start)
        if close == -1:
            break
        body = template[body_start:close]
        if body.startswith(f"{name}:"):
            found.append(MapPlaceholder.parse(start, close + 1, body))
            pos = close + 1
        else:
            pos = body_start
    return found


def is_sequence(value: Any) -> bool:
    """True for list-like values (strings and bytes excluded)."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def stringify(value: Any) -> str:
    """Render a substitution value as text.

    Sequences join their elements with ``,``, ``None`` renders as an empty
    string and booleans as ``true``/``false``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if is_sequence(value):
        return ",".join(stringify(v) for v in value)
    return str(value)


def get_attribute(element: Any, attr: str) -> Any:
    """Read an own attribute of a mapping or object, falling back to its name.

    Only instance attributes count; methods and class attributes are not
    looked up.
    """
    if isinstance(element, Mapping):
        own = element
    else:
        own = getattr(element, "__dict__", None)
        if not isinstance(own, dict):
            return attr
    return own[attr] if attr in own else attr


def project(items: Sequence[Any], span: MapPlaceholder) -> str:
    """Render a sequence for a ``$map`` placeholder.

    Attributes of one element are concatenated without a separator, then
    elements are joined with the placeholder's delimiter.
    """
    rendered = []
    for element in items:
        rendered.append(
            "".join(stringify(get_attribute(element, attr)) for attr in span.attrs)
        )
    return span.delimiter.join(rendered)


def replace_maps(template: str, name: str, items: Sequence[Any]) -> str:
    """Replace every ``$map{name:...}`` span with its projection."""
    spans = find_map_placeholders(template, name)
    if not spans:
        return template
    parts = []
    pos = 0
    for span in spans:
        parts.append(template[pos : span.start])
        parts.append(project(items, span))
        pos = span.end
    parts.append(template[pos:])
    return "".join(parts)


def render(
    template: str,
    items: Iterable[Tuple[Any, Any]],
    transform: Optional[Callable[[Any], Any]] = None,
) -> str:
    """Substitute data into a template.

    Entries are applied in the order given. Each value is first passed
    through ``transform`` (element-wise for sequences), then every
    ``${name}`` occurrence is replaced; sequence values additionally
    resolve their ``$map{name:...}`` spans. Placeholders without a matching
    entry are left untouched.

    Args:
        template: Template text.
        items: ``(name, value)`` pairs in substitution order. Names are used as
            text, so non-string keys match their ``str()`` form.
        transform: Optional per-value hook (used to translate errors).

    Returns:
        The rendered text.
    """
    result = template
    for name, value in items:
        name = str(name)
        if transform is not None:
            if is_sequence(value):
                value = [transform(v) for v in value]
            else:
                value = transform(value)
        result = result.replace(placeholder(name), stringify(value))
        if is_sequence(value):
            result = replace_maps(result, name, value)
    return result
